"""
Tests for the event query engine
"""

import pytest
from datetime import datetime, timezone

from app.models import Event, Position
from app.schemas.event import EventFilters
from app.services.event_query import (
    filter_events,
    haversine_distance,
    query_events,
    rank_by_distance,
)
from app.utils.dates import parse_iso_datetime

SAN_FRANCISCO = (37.7749, -122.4194)
NEW_YORK = (40.7128, -74.0060)
AUSTIN = (30.2672, -97.7431)

def make_event(event_id, date, title="Event", description="", location="Somewhere", position=None):
    latitude, longitude = position if position else (None, None)
    return Event(
        id=event_id,
        title=title,
        description=description,
        location=location,
        date=parse_iso_datetime(date),
        max_participants=10,
        latitude=latitude,
        longitude=longitude
    )

@pytest.fixture
def events():
    """Events in non-chronological insertion order"""
    return [
        make_event("ny", "2025-11-20T09:00:00Z", title="Startup Weekend",
                   description="Build a startup with developers", location="New York, NY",
                   position=NEW_YORK),
        make_event("sf", "2025-11-15T18:00:00Z", title="Tech Meetup 2025",
                   description="Networking and learning about tech", location="San Francisco, CA",
                   position=SAN_FRANCISCO),
        make_event("online", "2025-11-18T12:00:00Z", title="Remote Python Clinic",
                   description="Bring your questions", location="Online"),
        make_event("atx", "2025-11-25T14:00:00Z", title="AI Workshop",
                   description="Hands-on machine learning", location="Austin, TX",
                   position=AUSTIN),
    ]

def ids(results):
    return [r.event.id for r in results]

def test_no_filters_returns_all_in_date_order(events):
    """Without filters every event comes back, soonest first"""
    results = query_events(events)

    assert ids(results) == ["sf", "online", "ny", "atx"]
    assert all(r.distance is None for r in results)

def test_location_filter_is_case_insensitive_substring(events):
    """Location filter matches any part of the label regardless of case"""
    results = query_events(events, EventFilters(location="san"))

    assert ids(results) == ["sf"]

def test_search_matches_title_or_description(events):
    """Search looks at both title and description"""
    assert ids(query_events(events, EventFilters(search="STARTUP"))) == ["ny"]
    assert ids(query_events(events, EventFilters(search="machine learning"))) == ["atx"]

def test_search_without_match_returns_empty(events):
    """No match yields an empty result"""
    assert query_events(events, EventFilters(search="knitting")) == []

def test_date_filter_matches_whole_day(events):
    """A YYYY-MM-DD filter selects any time on that UTC day"""
    assert ids(query_events(events, EventFilters(date="2025-11-15"))) == ["sf"]

def test_date_filter_is_plain_string_prefix(events):
    """Partial prefixes work because the comparison is on the ISO string"""
    assert ids(query_events(events, EventFilters(date="2025-11-2"))) == ["ny", "atx"]
    assert ids(query_events(events, EventFilters(date="2025-11-15T18"))) == ["sf"]
    assert query_events(events, EventFilters(date="15/11/2025")) == []

def test_date_filter_uses_utc_date():
    """Offsets are normalized to UTC before the prefix comparison"""
    late_evening = make_event("late", "2025-11-15T23:30:00-01:00")

    assert ids(query_events([late_evening], EventFilters(date="2025-11-16"))) == ["late"]
    assert query_events([late_evening], EventFilters(date="2025-11-15")) == []

def test_early_morning_offset_stays_on_same_utc_day():
    """00:30 at -01:00 is 01:30Z on the same day"""
    event = make_event("early", "2025-11-15T00:30:00-01:00")

    assert ids(query_events([event], EventFilters(date="2025-11-15"))) == ["early"]

def test_filters_combine(events):
    """Filters narrow the set one after another"""
    filters = EventFilters(location="new york", date="2025-11-20", search="developers")
    assert ids(query_events(events, filters)) == ["ny"]

    filters = EventFilters(location="new york", search="machine")
    assert query_events(events, filters) == []

def test_empty_filter_values_are_ignored(events):
    """Empty strings behave like absent filters"""
    results = query_events(events, EventFilters(location="", date="", search=""))
    assert len(results) == len(events)

def test_filtering_never_adds_events(events):
    """Every result comes from the input collection"""
    for filters in (
        EventFilters(),
        EventFilters(location="a"),
        EventFilters(search="e"),
        EventFilters(date="2025"),
    ):
        results = filter_events(events, filters)
        assert len(results) <= len(events)
        assert all(event in events for event in results)

def test_haversine_san_francisco_to_new_york():
    """SF to NY is about 4129 km"""
    distance = haversine_distance(*SAN_FRANCISCO, *NEW_YORK)
    assert distance == pytest.approx(4129, abs=5)

def test_haversine_is_symmetric_and_zero_on_same_point():
    """Distance is symmetric and vanishes for identical points"""
    assert haversine_distance(*SAN_FRANCISCO, *AUSTIN) == pytest.approx(
        haversine_distance(*AUSTIN, *SAN_FRANCISCO)
    )
    assert haversine_distance(*NEW_YORK, *NEW_YORK) == 0

def test_rank_by_distance_puts_unpositioned_events_last(events):
    """Nearest first; events without coordinates come after"""
    ranked = rank_by_distance(events, Position(*NEW_YORK))

    assert ids(ranked) == ["ny", "atx", "sf", "online"]
    assert ranked[0].distance == pytest.approx(0)
    assert ranked[-1].distance is None

def test_observer_annotates_distance_but_date_order_wins(events):
    """Distances are attached, yet the final order stays chronological"""
    results = query_events(events, observer=Position(*NEW_YORK))

    assert ids(results) == ["sf", "online", "ny", "atx"]
    by_id = {r.event.id: r for r in results}
    assert by_id["ny"].distance == pytest.approx(0)
    assert by_id["sf"].distance == pytest.approx(4129, abs=5)
    assert by_id["online"].distance is None

def test_distance_orders_events_sharing_a_date():
    """Same date: the distance pass decides the relative order"""
    same_time = "2025-12-01T10:00:00Z"
    far = make_event("far", same_time, position=SAN_FRANCISCO)
    none = make_event("none", same_time)
    near = make_event("near", same_time, position=AUSTIN)

    results = query_events([none, far, near], observer=Position(*AUSTIN))

    assert ids(results) == ["near", "far", "none"]

def test_result_order_is_non_decreasing_by_date(events):
    """With or without an observer the dates never go backwards"""
    for observer in (None, Position(*SAN_FRANCISCO), Position(0, 0)):
        dates = [r.event.date for r in query_events(events, observer=observer)]
        assert dates == sorted(dates)

def test_query_does_not_mutate_input(events):
    """The engine leaves the collection order and records untouched"""
    before = [(e.id, e.current_participants) for e in events]

    query_events(events, EventFilters(search="e"), Position(*NEW_YORK))

    assert [(e.id, e.current_participants) for e in events] == before
    assert events[0].date == datetime(2025, 11, 20, 9, tzinfo=timezone.utc)
