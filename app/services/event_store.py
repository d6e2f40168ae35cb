"""
In-memory event store owning the event collection
"""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional

from app.core.errors import EventCapacityError, EventNotFoundError, EventValidationError
from app.models import Event, EventDraft, Position, RankedEvent
from app.schemas.event import EventFilters
from app.services.event_query import query_events
from app.utils.dates import parse_iso_datetime, utc_now

logger = logging.getLogger(__name__)

SAMPLE_EVENTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "title": "Tech Meetup 2025",
        "description": "Join us for an evening of networking and learning about the latest in tech",
        "location": "San Francisco, CA",
        "date": "2025-11-15T18:00:00Z",
        "max_participants": 50,
        "current_participants": 23,
        "latitude": 37.7749,
        "longitude": -122.4194,
    },
    {
        "id": "2",
        "title": "Startup Weekend",
        "description": "54 hours to build a startup from scratch with a team of developers, designers, and entrepreneurs",
        "location": "New York, NY",
        "date": "2025-11-20T09:00:00Z",
        "max_participants": 100,
        "current_participants": 67,
        "latitude": 40.7128,
        "longitude": -74.0060,
    },
    {
        "id": "3",
        "title": "AI Workshop",
        "description": "Hands-on workshop covering machine learning fundamentals and practical applications",
        "location": "Austin, TX",
        "date": "2025-11-25T14:00:00Z",
        "max_participants": 30,
        "current_participants": 15,
        "latitude": 30.2672,
        "longitude": -97.7431,
    },
]


class EventStore:
    """Owns the event collection; every operation runs under one lock.

    Returned events are copies, so callers never observe a record while
    another request is changing it.
    """

    def __init__(self, events: Optional[Iterable[Event]] = None):
        self._events: List[Event] = list(events or [])
        self._lock = threading.Lock()

    @classmethod
    def with_sample_events(cls) -> "EventStore":
        events = [
            Event(**{**data, "date": parse_iso_datetime(data["date"])})
            for data in SAMPLE_EVENTS
        ]
        return cls(events)

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def _find(self, event_id: str) -> Event:
        for event in self._events:
            if event.id == event_id:
                return event
        raise EventNotFoundError(event_id)

    def list_events(self) -> List[Event]:
        with self._lock:
            return [replace(event) for event in self._events]

    def query(
        self,
        filters: Optional[EventFilters] = None,
        observer: Optional[Position] = None,
    ) -> List[RankedEvent]:
        with self._lock:
            snapshot = [replace(event) for event in self._events]
        return query_events(snapshot, filters, observer)

    def get(self, event_id: str) -> Event:
        with self._lock:
            return replace(self._find(event_id))

    def create(self, draft: EventDraft) -> Event:
        event = Event(
            id=str(uuid.uuid4()),
            title=draft.title,
            description=draft.description,
            location=draft.location,
            date=draft.date,
            max_participants=draft.max_participants,
            current_participants=0,
            created_at=utc_now(),
            latitude=draft.latitude,
            longitude=draft.longitude,
        )
        with self._lock:
            self._events.append(event)
            created = replace(event)
        logger.info(f"Created event {event.id} ({event.title!r})")
        return created

    def update(self, event_id: str, changes: Dict[str, Any]) -> Event:
        """Shallow-merge already validated fields over an event"""
        with self._lock:
            event = self._find(event_id)
            new_capacity = changes.get("max_participants", event.max_participants)
            if new_capacity < event.current_participants:
                raise EventValidationError(
                    "maxParticipants cannot be lower than currentParticipants"
                )
            for name, value in changes.items():
                setattr(event, name, value)
            updated = replace(event)
        logger.info(f"Updated event {event_id}: {sorted(changes)}")
        return updated

    def delete(self, event_id: str) -> bool:
        with self._lock:
            for index, event in enumerate(self._events):
                if event.id == event_id:
                    del self._events[index]
                    logger.info(f"Deleted event {event_id}")
                    return True
        return False

    def register(self, event_id: str) -> Event:
        """Take one participant slot, failing when the event is full"""
        with self._lock:
            event = self._find(event_id)
            if event.is_full:
                logger.warning(f"Registration rejected for full event {event_id}")
                raise EventCapacityError(event_id, event=replace(event))
            event.current_participants += 1
            registered = replace(event)
        logger.info(
            f"Registered participant for event {event_id} "
            f"({registered.current_participants}/{registered.max_participants})"
        )
        return registered
