"""Typed accessors for loosely-typed bureau payloads.

Bureau responses are nested dicts whose fields may be missing, null, or of
the wrong type. Every read of a raw payload goes through these helpers so
that a malformed field degrades to None / [] instead of raising.
"""

import math
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Iterable, List, Optional, TypeVar

T = TypeVar("T")

_MISSING = object()
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def get_path(obj: Any, *keys: str, default: Any = None) -> Any:
    """Walk nested dicts by key, returning default on any missing step."""
    current = obj
    for key in keys:
        if not isinstance(current, dict):
            return default
        current = current.get(key, _MISSING)
        if current is _MISSING:
            return default
    return current


def get_dict(obj: Any, *keys: str) -> Optional[dict]:
    """Nested dict at the given path, or None if absent or not a dict."""
    value = get_path(obj, *keys)
    return value if isinstance(value, dict) else None


def get_list(obj: Any, *keys: str) -> List[Any]:
    """Nested list at the given path, or [] if absent or not a list."""
    value = get_path(obj, *keys)
    return value if isinstance(value, list) else []


def get_str(obj: Any, *keys: str) -> Optional[str]:
    """Nested non-empty string at the given path, or None."""
    value = get_path(obj, *keys)
    if isinstance(value, str) and value.strip():
        return value
    return None


def safe_float(value: Any) -> Optional[float]:
    """Parse a number or numeric string to a finite float, else None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (ValueError, TypeError):
        return None
    return result if math.isfinite(result) else None


def extract_amount(value: Any) -> Optional[float]:
    """Read an amount that is either a bare number, a numeric string, or {"amount": n}."""
    if isinstance(value, dict):
        return safe_float(value.get("amount"))
    return safe_float(value)


def get_number(obj: Any, *keys: str) -> Optional[float]:
    """Nested numeric field (bare or amount-wrapped), or None."""
    return extract_amount(get_path(obj, *keys))


def parse_date(value: Any) -> Optional[date]:
    """Parse a bureau date.

    Accepts epoch milliseconds (negative for dates before 1970), ISO-8601
    timestamps, and plain YYYY-MM-DD / MM/DD/YYYY strings.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)):
        try:
            return (_EPOCH + timedelta(milliseconds=value)).date()
        except (ValueError, OverflowError):
            return None
    if not isinstance(value, str) or not value.strip():
        return None

    cleaned = value.strip()
    if cleaned.endswith("Z"):
        cleaned = cleaned[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(cleaned).date()
    except ValueError:
        pass
    for fmt in ("%Y-%m-%d", "%m/%d/%Y", "%d-%m-%Y"):
        try:
            return datetime.strptime(cleaned.split(" ")[0], fmt).date()
        except ValueError:
            continue
    return None


def first_present(candidates: Iterable[Callable[[], Optional[T]]]) -> Optional[T]:
    """Evaluate candidates in order and return the first non-None result."""
    for candidate in candidates:
        value = candidate()
        if value is not None:
            return value
    return None


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded up."""
    return int(math.floor(value + 0.5))


def finite_or_zero(value: float) -> float:
    """Replace NaN / infinity with 0."""
    return value if math.isfinite(value) else 0.0
