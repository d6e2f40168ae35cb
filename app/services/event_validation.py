"""
Boundary validation for event drafts and partial updates
"""

import math
from typing import Any, Dict, Optional

from app.core.errors import EventValidationError
from app.models import EventDraft
from app.schemas.event import EventCreate
from app.utils.dates import parse_iso_datetime

REQUIRED_FIELDS_MESSAGE = "Missing required fields: title, description, location, date"
CAPACITY_MESSAGE = "maxParticipants must be at least 1"
DATE_MESSAGE = "Invalid date format"
COORDINATES_MESSAGE = "Invalid coordinates"

TEXT_FIELDS = ("title", "description", "location")

class EventValidator:
    """Validation rules shared by create and update"""

    @staticmethod
    def validate_capacity(value: Optional[int]) -> int:
        if value is None or value < 1:
            raise EventValidationError(CAPACITY_MESSAGE)
        return value

    @staticmethod
    def validate_date(value: str):
        try:
            return parse_iso_datetime(value)
        except (TypeError, ValueError):
            raise EventValidationError(DATE_MESSAGE)

    @staticmethod
    def validate_coordinate(value: Optional[float], limit: float) -> Optional[float]:
        """Range-check a latitude (limit 90) or longitude (limit 180)"""
        if value is None:
            return None
        if not math.isfinite(value) or value < -limit or value > limit:
            raise EventValidationError(COORDINATES_MESSAGE)
        return value

    @classmethod
    def validate_draft(cls, payload: EventCreate) -> EventDraft:
        """Check a create request and convert it into a draft.

        A lone latitude or longitude is accepted; the event simply never
        gets a distance in queries.
        """
        if not all((payload.title, payload.description, payload.location, payload.date)):
            raise EventValidationError(REQUIRED_FIELDS_MESSAGE)

        max_participants = cls.validate_capacity(payload.max_participants)
        date = cls.validate_date(payload.date)
        latitude = cls.validate_coordinate(payload.latitude, 90)
        longitude = cls.validate_coordinate(payload.longitude, 180)

        return EventDraft(
            title=payload.title,
            description=payload.description,
            location=payload.location,
            date=date,
            max_participants=max_participants,
            latitude=latitude,
            longitude=longitude,
        )

    @classmethod
    def validate_changes(cls, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Check the fields of a partial update, returning converted values.

        Text fields, date and capacity cannot be cleared; latitude and
        longitude can be set to None to remove them.
        """
        cleaned: Dict[str, Any] = {}

        for name in TEXT_FIELDS:
            if name in changes:
                if not changes[name]:
                    raise EventValidationError(f"{name} cannot be empty")
                cleaned[name] = changes[name]

        if "date" in changes:
            if not changes["date"]:
                raise EventValidationError("date cannot be empty")
            cleaned["date"] = cls.validate_date(changes["date"])

        if "max_participants" in changes:
            cleaned["max_participants"] = cls.validate_capacity(changes["max_participants"])

        if "latitude" in changes:
            cleaned["latitude"] = cls.validate_coordinate(changes["latitude"], 90)
        if "longitude" in changes:
            cleaned["longitude"] = cls.validate_coordinate(changes["longitude"], 180)

        return cleaned
