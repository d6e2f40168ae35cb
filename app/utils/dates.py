"""
Date helpers shared by the store, the query engine and the wire layer
"""

import re
from datetime import datetime, timezone
from typing import Union

FRACTION_PATTERN = re.compile(r"(T\d{2}:\d{2}:\d{2})[.,](\d+)")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_iso_datetime(value: Union[str, datetime]) -> datetime:
    """Parse an ISO-8601 string into an aware UTC datetime.

    Accepts a trailing ``Z``, explicit offsets and plain dates
    (``2025-11-15`` is midnight UTC). Raises ValueError when the value
    is not a valid instant.
    """
    if isinstance(value, datetime):
        return to_utc(value)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid date: {value!r}")

    text = value.strip()
    if text[-1] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    # fromisoformat before 3.11 only takes 3 or 6 fraction digits
    text = FRACTION_PATTERN.sub(
        lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}", text, count=1
    )
    return to_utc(datetime.fromisoformat(text))


def to_iso_utc(value: datetime) -> str:
    """Serialize as ``2025-11-15T18:00:00Z``, or ``...:00.123Z`` when
    the value has a sub-second part
    """
    value = to_utc(value)
    timespec = "milliseconds" if value.microsecond else "seconds"
    return value.isoformat(timespec=timespec).replace("+00:00", "Z")
