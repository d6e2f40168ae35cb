"""
Pydantic schemas package
"""

from .common import *
from .event import *

__all__ = [
    "StandardResponse",
    "ErrorResponse",
    "EventCreate",
    "EventUpdate",
    "EventFilters",
    "EventResponse",
]
