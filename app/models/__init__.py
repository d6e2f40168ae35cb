"""
Domain models package
"""

from .event import Event, EventDraft, Position, RankedEvent

__all__ = ["Event", "EventDraft", "Position", "RankedEvent"]
