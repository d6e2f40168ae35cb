"""
Typed service errors, translated to HTTP responses by the handlers in main.py
"""

from fastapi import status


class EventServiceError(Exception):
    """Base class for recoverable event errors"""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Event request failed"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EventNotFoundError(EventServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Event not found"

    def __init__(self, event_id: str = None):
        self.event_id = event_id
        super().__init__()


class EventValidationError(EventServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid event data"


class EventCapacityError(EventServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Event is full"

    def __init__(self, event_id: str = None, event=None):
        self.event_id = event_id
        self.event = event
        super().__init__()
