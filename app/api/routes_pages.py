"""
Server-rendered event pages
"""

import os
from typing import Optional

from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.api.routes_events import parse_observer
from app.core.errors import EventCapacityError, EventNotFoundError, EventValidationError
from app.core.store import get_event_store
from app.schemas.event import EventCreate, EventFilters
from app.services.event_store import EventStore
from app.services.event_validation import (
    CAPACITY_MESSAGE,
    COORDINATES_MESSAGE,
    EventValidator,
)
from app.utils.formatting import (
    event_status,
    fill_percentage,
    format_date,
    format_distance,
)

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "..", "..", "templates")

templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.filters["format_date"] = format_date
templates.env.filters["format_distance"] = format_distance
templates.env.globals["event_status"] = event_status
templates.env.globals["fill_percentage"] = fill_percentage

router = APIRouter()

def form_number(value: str, cast, error_message: str):
    """Convert an optional numeric form field; blank means absent"""
    if not value.strip():
        return None
    try:
        return cast(value)
    except ValueError:
        raise EventValidationError(error_message)

def not_found_page(request: Request, exc: EventNotFoundError):
    return templates.TemplateResponse(
        request,
        "event_detail.html",
        {"title": "Event not found", "event": None, "error": exc.message},
        status_code=status.HTTP_404_NOT_FOUND,
    )

@router.get("/", response_class=HTMLResponse)
async def event_list_page(
    request: Request,
    location: Optional[str] = Query(None),
    date: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    lat: Optional[str] = Query(None),
    lon: Optional[str] = Query(None),
    store: EventStore = Depends(get_event_store)
):
    """Event list with search and location filters"""
    filters = EventFilters(location=location, date=date, search=search)
    observer = parse_observer(lat, lon)
    results = store.query(filters, observer)
    return templates.TemplateResponse(request, "event_list.html", {
        "title": "Event Finder",
        "results": results,
        "filters": filters,
        "lat": lat or "",
        "lon": lon or "",
        "using_location": observer is not None,
    })

# Registered before /events/{event_id} so "new" is not read as an id
@router.get("/events/new", response_class=HTMLResponse)
async def create_event_page(request: Request):
    """Form for creating an event"""
    return templates.TemplateResponse(request, "event_form.html", {
        "title": "Create Event",
        "form": {},
    })

@router.post("/events/new", response_class=HTMLResponse)
async def create_event_from_page(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
    location: str = Form(""),
    date: str = Form(""),
    max_participants: str = Form(""),
    latitude: str = Form(""),
    longitude: str = Form(""),
    store: EventStore = Depends(get_event_store)
):
    """Create an event from the form, then show it"""
    form = {
        "title": title,
        "description": description,
        "location": location,
        "date": date,
        "max_participants": max_participants,
        "latitude": latitude,
        "longitude": longitude,
    }
    try:
        payload = EventCreate(
            title=title or None,
            description=description or None,
            location=location or None,
            date=date or None,
            max_participants=form_number(max_participants, int, CAPACITY_MESSAGE),
            latitude=form_number(latitude, float, COORDINATES_MESSAGE),
            longitude=form_number(longitude, float, COORDINATES_MESSAGE),
        )
        event = store.create(EventValidator.validate_draft(payload))
    except EventValidationError as exc:
        return templates.TemplateResponse(
            request,
            "event_form.html",
            {"title": "Create Event", "form": form, "error": exc.message},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    return RedirectResponse(
        url=f"/events/{event.id}",
        status_code=status.HTTP_303_SEE_OTHER
    )

@router.get("/events/{event_id}", response_class=HTMLResponse)
async def event_detail_page(
    request: Request,
    event_id: str,
    registered: bool = False,
    store: EventStore = Depends(get_event_store)
):
    """Event detail with a registration button"""
    try:
        event = store.get(event_id)
    except EventNotFoundError as exc:
        return not_found_page(request, exc)

    message = "Successfully registered for event" if registered else None
    return templates.TemplateResponse(request, "event_detail.html", {
        "title": event.title,
        "event": event,
        "message": message,
    })

@router.post("/events/{event_id}/register", response_class=HTMLResponse)
async def register_from_page(
    request: Request,
    event_id: str,
    store: EventStore = Depends(get_event_store)
):
    """Register from the detail page, then redirect back to it"""
    try:
        store.register(event_id)
    except EventNotFoundError as exc:
        return not_found_page(request, exc)
    except EventCapacityError as exc:
        # exc.event is the snapshot taken when the registration was refused
        return templates.TemplateResponse(
            request,
            "event_detail.html",
            {"title": exc.event.title, "event": exc.event, "error": exc.message},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    return RedirectResponse(
        url=f"/events/{event_id}?registered=true",
        status_code=status.HTTP_303_SEE_OTHER
    )
