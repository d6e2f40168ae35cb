"""
Display helpers for the event pages
"""

from datetime import datetime
from typing import Optional, Tuple

from app.utils.dates import to_utc, utc_now

FEW_SPOTS_THRESHOLD = 5

def format_date(value: datetime) -> str:
    """Format as e.g. "Sat, Nov 15, 2025, 06:00 PM" (UTC)"""
    value = to_utc(value)
    return f"{value:%a, %b} {value.day}, {value:%Y, %I:%M %p}"

def format_distance(distance: Optional[float]) -> str:
    if distance is None:
        return ""
    if distance < 1:
        return f"{int(distance * 1000 + 0.5)}m away"
    return f"{distance:.1f}km away"

def is_past_event(date: datetime, now: Optional[datetime] = None) -> bool:
    return to_utc(date) < (now or utc_now())

def is_event_full(current_participants: int, max_participants: int) -> bool:
    return current_participants >= max_participants

def event_status(
    date: datetime,
    current_participants: int,
    max_participants: int,
    now: Optional[datetime] = None
) -> Tuple[str, str]:
    """Return the (label, css class) badge for an event"""
    if is_past_event(date, now):
        return "Past", "past"
    if is_event_full(current_participants, max_participants):
        return "Full", "full"
    spots_left = max_participants - current_participants
    if spots_left <= FEW_SPOTS_THRESHOLD:
        return f"{spots_left} spots left", "few"
    return "Available", "available"

def fill_percentage(current_participants: int, max_participants: int) -> float:
    """Registration progress in percent, capped at 100"""
    if max_participants <= 0:
        return 100.0
    return min(current_participants / max_participants * 100, 100.0)
