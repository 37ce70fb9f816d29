from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP


def utcnow() -> datetime:
    # Stored timestamps are naive UTC, matching func.now() on SQLite.
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value) -> int:
    """Round to the nearest integer with halves going up (50.5 -> 51)."""
    return int(to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
