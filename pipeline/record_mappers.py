"""Mappers for inquiries, public records and collections.

Each takes one raw item from a flattener and returns its schema object.
"""

from typing import Any

from schemas.credit_records import (
    CollectionItem,
    CollectionStatus,
    CreditInquiry,
    InquiryType,
    PublicRecord,
    PublicRecordStatus,
    PublicRecordType,
)
from utils.payload import extract_amount, first_present, get_path, get_str, parse_date


def map_inquiry(raw: Any) -> CreditInquiry:
    if not isinstance(raw, dict):
        return CreditInquiry()

    raw_type = (get_str(raw, "type") or "").lower()
    return CreditInquiry(
        inquiry_date=parse_date(raw.get("reportedDate")) or parse_date(raw.get("date")),
        creditor_name=(
            get_str(raw, "contactInformation", "contactName")
            or get_str(raw, "creditorName")
            or get_str(raw, "name")
            or "Unknown Creditor"
        ),
        inquiry_type=InquiryType(raw_type) if raw_type in ("hard", "soft") else InquiryType.HARD,
    )


def classify_public_record(raw: dict) -> PublicRecordType:
    raw_type = (get_str(raw, "type") or "").lower()
    if raw.get("bankruptcyType") or "bankruptcy" in raw_type or raw.get("dispositionStatus"):
        return PublicRecordType.BANKRUPTCY
    if "lien" in raw_type:
        return PublicRecordType.TAX_LIEN
    if "judgment" in raw_type:
        return PublicRecordType.CIVIL_JUDGMENT
    if "foreclosure" in raw_type:
        return PublicRecordType.FORECLOSURE
    return PublicRecordType.OTHER


def _status_text(raw: dict) -> str:
    status = raw.get("dispositionStatus") or raw.get("status")
    if isinstance(status, dict):
        status = status.get("code") or status.get("description")
    return status.lower() if isinstance(status, str) else ""


def classify_public_record_status(raw: dict) -> PublicRecordStatus:
    text = _status_text(raw)
    if "satisfied" in text or "paid" in text:
        return PublicRecordStatus.SATISFIED
    if "dismissed" in text or "discharged" in text:
        return PublicRecordStatus.DISMISSED
    if "filed" in text:
        return PublicRecordStatus.FILED
    return PublicRecordStatus.ACTIVE


def map_public_record(raw: Any) -> PublicRecord:
    if not isinstance(raw, dict):
        return PublicRecord()

    record_type = classify_public_record(raw)
    status = classify_public_record_status(raw)
    amount = first_present([
        lambda: extract_amount(raw.get("amount")),
        lambda: extract_amount(raw.get("balance")),
        lambda: extract_amount(raw.get("originalAmount")),
    ])
    description = (
        get_str(raw, "description")
        or get_str(raw, "remarks")
        or get_str(raw, "dispositionStatus", "description")
        or get_str(raw, "status", "description")
        or f"{record_type.value.replace('_', ' ')} - {status.value}"
    )

    return PublicRecord(
        id=get_str(raw, "id"),
        record_type=record_type,
        status=status,
        filing_date=(
            parse_date(raw.get("filedDate"))
            or parse_date(raw.get("dateFiled"))
            or parse_date(raw.get("reportedDate"))
        ),
        amount=amount if amount is not None and amount > 0 else None,
        court=get_str(raw, "court") or get_str(raw, "courtName"),
        case_number=get_str(raw, "caseNumber") or get_str(raw, "referenceNumber"),
        description=description,
    )


def classify_collection_status(raw_status: Any) -> CollectionStatus:
    if isinstance(raw_status, dict):
        raw_status = raw_status.get("code") or raw_status.get("description")
    text = raw_status.upper() if isinstance(raw_status, str) else ""
    if "UNPAID" in text:
        return CollectionStatus.OPEN
    if "PAID" in text or "SATISFIED" in text:
        return CollectionStatus.PAID
    if "SETTLED" in text:
        return CollectionStatus.SETTLED
    if "DISPUTED" in text:
        return CollectionStatus.DISPUTED
    if "CLOSED" in text:
        return CollectionStatus.CLOSED
    return CollectionStatus.OPEN


def map_collection(raw: Any) -> CollectionItem:
    if not isinstance(raw, dict):
        return CollectionItem()

    return CollectionItem(
        id=get_str(raw, "id"),
        creditor_name=get_str(raw, "agencyClient") or get_str(raw, "creditorName") or "Unknown Creditor",
        account_number=get_str(raw, "accountNumber") or "N/A",
        amount=extract_amount(raw.get("amount")) or 0.0,
        currency=get_str(raw, "amount", "currency") or "USD",
        status=classify_collection_status(raw.get("status")),
        reported_date=parse_date(raw.get("reportedDate")),
        provider=get_str(raw, "provider"),
    )
