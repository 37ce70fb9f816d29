"""Shared field types for request/response contracts."""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, PlainSerializer


def to_naive_utc(value: datetime) -> datetime:
    # Offsets are folded into UTC; naive input is taken as UTC already.
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def to_utc_iso(value: datetime) -> str:
    return to_naive_utc(value).isoformat() + "Z"


UtcDatetime = Annotated[
    datetime,
    AfterValidator(to_naive_utc),
    PlainSerializer(to_utc_iso, return_type=str, when_used="json"),
]

DECIMAL_WIRE_NOTE = "Exact decimal, serialized as a JSON string (e.g. \"100000.00\")"
