"""Payment history parsing.

Bureau payment history arrives as a list of year blocks:

    {"year": 2024, "january": {"monthType": "POSITIVE", "value": "PAYS_AS_AGREED"}, ...}

Each reported month becomes one PaymentRecord.
"""

from typing import Any, List, Sequence

from schemas.credit_account import PaymentRecord, PaymentStatus
from utils.payload import round_half_up, safe_float

MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

# Values that mean the payment was never made, not merely late
_MISSED_MARKERS = ("CHARGE_OFF", "CHARGEOFF", "COLLECTION", "REPOSSESSION", "FORECLOSURE", "MISSED")


def classify_payment(month_type: str, value: str) -> PaymentStatus:
    """Map a bureau {monthType, value} pair to a PaymentStatus."""
    month_type = (month_type or "").upper()
    value = (value or "").upper()

    if month_type == "POSITIVE" and value == "PAYS_AS_AGREED":
        return PaymentStatus.CURRENT
    if any(marker in value for marker in _MISSED_MARKERS):
        return PaymentStatus.MISSED
    if month_type == "NEGATIVE" or "LATE" in value:
        return PaymentStatus.LATE
    return PaymentStatus.UNKNOWN


def parse_payment_history(raw_history: Any) -> List[PaymentRecord]:
    """Parse raw year blocks into month-ordered PaymentRecords.

    Malformed blocks and months are skipped; a non-list input yields [].
    """
    if not isinstance(raw_history, list):
        return []

    records: List[PaymentRecord] = []
    for block in raw_history:
        if not isinstance(block, dict):
            continue
        year = safe_float(block.get("year"))
        if year is None:
            continue

        for index, month_name in enumerate(MONTH_NAMES):
            month = block.get(month_name)
            if not isinstance(month, dict) or "monthType" not in month or "value" not in month:
                continue
            records.append(
                PaymentRecord(
                    year=int(year),
                    month=index + 1,
                    status=classify_payment(str(month["monthType"]), str(month["value"])),
                )
            )
    return records


def on_time_percentage_from_entries(records: Sequence[PaymentRecord]) -> int:
    """Percent of reported (non-unknown) months paid as agreed. 0 if none reported."""
    countable = [r for r in records if r.status != PaymentStatus.UNKNOWN]
    if not countable:
        return 0
    on_time = sum(1 for r in countable if r.status == PaymentStatus.CURRENT)
    return round_half_up(on_time / len(countable) * 100)
