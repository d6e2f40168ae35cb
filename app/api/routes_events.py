"""
Event API routes
"""

import math
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.core.errors import EventNotFoundError
from app.core.store import get_event_store
from app.models import Position
from app.schemas.event import EventCreate, EventFilters, EventResponse, EventUpdate
from app.services.event_store import EventStore
from app.services.event_validation import EventValidator
from app.utils.responses import success_response

router = APIRouter()

def parse_coordinate(value: Optional[str]) -> Optional[float]:
    """Parse a query-string coordinate; anything non-numeric counts as absent"""
    if value is None or not value.strip():
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None

def parse_observer(lat: Optional[str], lon: Optional[str]) -> Optional[Position]:
    latitude = parse_coordinate(lat)
    longitude = parse_coordinate(lon)
    if latitude is None or longitude is None:
        return None
    return Position(latitude=latitude, longitude=longitude)

@router.get("")
async def list_events(
    location: Optional[str] = Query(None),
    date: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    lat: Optional[str] = Query(None),
    lon: Optional[str] = Query(None),
    store: EventStore = Depends(get_event_store)
):
    """List events, filtered and ordered by date"""
    filters = EventFilters(location=location, date=date, search=search)
    results = store.query(filters, parse_observer(lat, lon))

    data = [EventResponse.from_event(r.event, r.distance).to_wire() for r in results]
    return success_response(data=data, count=len(data))

@router.get("/{event_id}")
async def get_event(
    event_id: str,
    store: EventStore = Depends(get_event_store)
):
    """Get a single event"""
    event = store.get(event_id)
    return success_response(data=EventResponse.from_event(event).to_wire())

@router.post("")
async def create_event(
    event_data: EventCreate,
    store: EventStore = Depends(get_event_store)
):
    """Create a new event"""
    draft = EventValidator.validate_draft(event_data)
    event = store.create(draft)
    return success_response(
        data=EventResponse.from_event(event).to_wire(),
        status_code=status.HTTP_201_CREATED
    )

@router.patch("/{event_id}")
async def update_event(
    event_id: str,
    event_update: EventUpdate,
    store: EventStore = Depends(get_event_store)
):
    """Update some fields of an event"""
    changes = EventValidator.validate_changes(event_update.changes())
    event = store.update(event_id, changes)
    return success_response(data=EventResponse.from_event(event).to_wire())

@router.delete("/{event_id}")
async def delete_event(
    event_id: str,
    store: EventStore = Depends(get_event_store)
):
    """Delete an event"""
    if not store.delete(event_id):
        raise EventNotFoundError(event_id)
    return success_response(message="Event deleted successfully")

@router.post("/{event_id}/register")
async def register_for_event(
    event_id: str,
    store: EventStore = Depends(get_event_store)
):
    """Register one participant for an event"""
    event = store.register(event_id)
    return success_response(
        data=EventResponse.from_event(event).to_wire(),
        message="Successfully registered for event"
    )
