"""
Event model
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from app.utils.dates import utc_now


@dataclass
class Event:
    id: str
    title: str
    description: str
    location: str
    date: datetime
    max_participants: int
    current_participants: int = 0
    created_at: datetime = field(default_factory=utc_now)
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def has_position(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def is_full(self) -> bool:
        return self.current_participants >= self.max_participants

    @property
    def spots_left(self) -> int:
        return max(self.max_participants - self.current_participants, 0)


@dataclass(frozen=True)
class EventDraft:
    """Validated client fields needed to create an event"""
    title: str
    description: str
    location: str
    date: datetime
    max_participants: int
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass(frozen=True)
class Position:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class RankedEvent:
    """Query result entry; distance is in kilometers"""
    event: Event
    distance: Optional[float] = None
