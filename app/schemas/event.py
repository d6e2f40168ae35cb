"""
Event-related Pydantic schemas
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

from app.models import Event
from app.utils.dates import to_iso_utc

class EventCreate(BaseModel):
    """Schema for creating an event.

    Every field is optional at the schema level so that missing values
    are reported by the draft validator with the API's own messages.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    date: Optional[str] = None
    max_participants: Optional[int] = Field(None, alias="maxParticipants")
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    class Config:
        populate_by_name = True

class EventUpdate(EventCreate):
    """Schema for updating an event; only the fields sent are applied"""

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)

class EventFilters(BaseModel):
    """Query filters for listing events"""
    location: Optional[str] = None
    date: Optional[str] = None
    search: Optional[str] = None

class EventResponse(BaseModel):
    """Event wire shape"""
    id: str
    title: str
    description: str
    location: str
    date: str
    max_participants: int = Field(alias="maxParticipants")
    current_participants: int = Field(alias="currentParticipants")
    created_at: str = Field(alias="createdAt")
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    distance: Optional[float] = None

    class Config:
        populate_by_name = True

    @classmethod
    def from_event(cls, event: Event, distance: Optional[float] = None) -> "EventResponse":
        return cls(
            id=event.id,
            title=event.title,
            description=event.description,
            location=event.location,
            date=to_iso_utc(event.date),
            max_participants=event.max_participants,
            current_participants=event.current_participants,
            created_at=to_iso_utc(event.created_at),
            latitude=event.latitude,
            longitude=event.longitude,
            distance=distance,
        )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
