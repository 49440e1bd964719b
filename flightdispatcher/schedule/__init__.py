"""Mini README: Departure schedule aggregation.

Exports the feed models, the aggregator that produces international board
rows, and the grouping helper that feeds the route map.
"""

from .aggregator import (
    UNKNOWN_DESTINATION,
    FlightAggregator,
    aggregate_departures,
    estimate_minutes,
    extract_entries,
    is_international,
    normalize_utc,
    sample_local_time,
)
from .grouping import RouteGrouper, group_routes
from .models import RawFlightEntry, RouteDestination, Row, estimated_arrival

__all__ = [
    "FlightAggregator",
    "RawFlightEntry",
    "RouteDestination",
    "RouteGrouper",
    "Row",
    "UNKNOWN_DESTINATION",
    "aggregate_departures",
    "estimate_minutes",
    "estimated_arrival",
    "extract_entries",
    "group_routes",
    "is_international",
    "normalize_utc",
    "sample_local_time",
]
