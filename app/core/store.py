"""
Event store lifecycle and request dependency
"""

import logging

from fastapi import FastAPI, Request

from app.core.config import settings
from app.services.event_store import EventStore

logger = logging.getLogger(__name__)

def init_event_store(app: FastAPI) -> EventStore:
    """Create the process-wide store and attach it to the application"""
    if settings.SEED_SAMPLE_EVENTS:
        store = EventStore.with_sample_events()
    else:
        store = EventStore()
    app.state.event_store = store
    logger.info(f"Event store initialised with {len(store)} events")
    return store

def get_event_store(request: Request) -> EventStore:
    """FastAPI dependency returning the application's event store"""
    return request.app.state.event_store
