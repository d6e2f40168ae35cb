"""
Event query engine: filtering, distance annotation and ordering
"""

import math
from typing import Iterable, List, Optional

from app.models import Event, Position, RankedEvent
from app.schemas.event import EventFilters
from app.utils.dates import to_iso_utc

EARTH_RADIUS_KM = 6371.0


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometers between two points given in degrees"""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def filter_events(events: Iterable[Event], filters: Optional[EventFilters] = None) -> List[Event]:
    """Apply the location, date and search filters in that order"""
    matches = list(events)
    if filters is None:
        return matches

    if filters.location:
        location_query = filters.location.lower()
        matches = [e for e in matches if location_query in e.location.lower()]

    # Prefix match on the UTC wire string, so "2025-11-15" selects the whole day
    if filters.date:
        matches = [e for e in matches if to_iso_utc(e.date).startswith(filters.date)]

    if filters.search:
        search_query = filters.search.lower()
        matches = [
            e for e in matches
            if search_query in e.title.lower() or search_query in e.description.lower()
        ]

    return matches


def rank_by_distance(events: Iterable[Event], observer: Position) -> List[RankedEvent]:
    """Annotate events with their distance from observer, nearest first.

    Events without a position carry no distance and sort last.
    """
    ranked = []
    for event in events:
        if event.has_position:
            distance = haversine_distance(
                observer.latitude, observer.longitude, event.latitude, event.longitude
            )
            ranked.append(RankedEvent(event, distance))
        else:
            ranked.append(RankedEvent(event))

    ranked.sort(key=lambda r: (r.distance is None, r.distance or 0.0))
    return ranked


def query_events(
    events: Iterable[Event],
    filters: Optional[EventFilters] = None,
    observer: Optional[Position] = None,
) -> List[RankedEvent]:
    """Filter, optionally distance-rank, then order events by date.

    The date sort always runs last, so the final order is chronological
    even when an observer is given; distances stay on the results and
    only decide the order of events sharing the same date.
    """
    matches = filter_events(events, filters)

    if observer is not None:
        ranked = rank_by_distance(matches, observer)
    else:
        ranked = [RankedEvent(event) for event in matches]

    ranked.sort(key=lambda r: r.event.date)
    return ranked
