"""Mini README: Departure board assembly.

Structure:
    * BoardLine - one display-ready table line (times, countdown, link).
    * BoardSnapshot - everything a client needs for one airport query.
    * DepartureBoard - runs the aggregator, grouper, formatters and link
      builder for a feed, and solves route polylines for the map.

The board is rebuilt from scratch for every query. Preferences arrive as an
explicit value; the board never reads or writes the preference store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from .airports import AirportRecord, clean_icao
from .display import (
    PLACEHOLDER,
    DueTime,
    DueTimeClassifier,
    TimeMode,
    day_night_icon,
    format_time,
    minutes_to_hmm,
    zone_from_local_time,
)
from .geodesy import GeoPoint, GreatCircleSolver
from .logging_utils import get_logger
from .preferences import UserPreferences
from .schedule import FlightAggregator, RouteDestination, RouteGrouper, Row, sample_local_time
from .schedule.aggregator import AirportLookup
from .simbrief import SimBriefLinkBuilder

LOGGER = get_logger(__name__)

ESTIMATE_MARK = "~"


@dataclass(frozen=True, slots=True)
class BoardLine:
    """A row rendered for the departures table."""

    index: int
    row: Row
    departure_text: str
    departure_icon: str
    due: Optional[DueTime]
    arrival_text: str
    arrival_icon: str
    duration_text: str
    simbrief_url: str
    can_map: bool
    atc_positions: Sequence[str] = ()

    def as_dict(self) -> Dict[str, Any]:
        row = self.row
        return {
            "index": self.index,
            "flight_number": row.flight_number,
            "airline_name": row.airline_name,
            "airline_code": row.airline_code,
            "destination": row.destination,
            "destination_city": row.destination_city,
            "destination_country": row.destination_country,
            "departure": row.departure.isoformat() if row.departure else None,
            "arrival": row.arrival.isoformat() if row.arrival else None,
            "arrival_is_estimate": row.arrival_is_estimate,
            "duration_minutes": row.duration_minutes,
            "departure_text": self.departure_text,
            "departure_icon": self.departure_icon,
            "due": self.due.as_dict() if self.due else None,
            "arrival_text": self.arrival_text,
            "arrival_icon": self.arrival_icon,
            "duration_text": self.duration_text,
            "simbrief_url": self.simbrief_url,
            "can_map": self.can_map,
            "atc_positions": list(self.atc_positions),
        }


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Result of one departures query."""

    origin_code: str
    origin: Optional[AirportRecord]
    origin_zone: Optional[str]
    rows: List[Row] = field(default_factory=list)
    lines: List[BoardLine] = field(default_factory=list)
    destinations: List[RouteDestination] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "origin": {"icao": self.origin_code, **self.origin.as_dict()} if self.origin else None,
            "origin_zone": self.origin_zone,
            "count": len(self.lines),
            "lines": [line.as_dict() for line in self.lines],
            "destinations": [destination.as_dict() for destination in self.destinations],
        }


class DepartureBoard:
    """Build departure boards against one airport table."""

    def __init__(
        self,
        airports: AirportLookup,
        preferences: Optional[UserPreferences] = None,
        *,
        segments: int = 80,
    ) -> None:
        self.airports = airports
        self.preferences = preferences or UserPreferences()
        self.aggregator = FlightAggregator(airports)
        self.grouper = RouteGrouper(airports)
        self.solver = GreatCircleSolver(segments=segments)

    def origin_zone(self, origin: Optional[AirportRecord], feed: Any) -> Optional[str]:
        """Airport clock for departures: the table's zone, else the feed's offset."""

        if origin is not None and origin.timezone:
            return origin.timezone
        return zone_from_local_time(sample_local_time(feed))

    def build(
        self,
        origin_code: str,
        feed: Any,
        *,
        mode: TimeMode = TimeMode.LOCAL,
        hour12: bool = True,
        now: Optional[datetime] = None,
        atc: Optional[Dict[str, List[str]]] = None,
    ) -> BoardSnapshot:
        """Aggregate ``feed`` for ``origin_code`` and render every line."""

        code = clean_icao(origin_code)
        if not code:
            raise ValueError("Invalid ICAO. Please enter 4 letters, e.g. LLBG.")
        origin = self.airports.get(code)
        if origin is None:
            LOGGER.info("Origin %s not in airport table; estimates and map disabled", code)

        rows = self.aggregator.aggregate(feed, origin)
        destinations = self.grouper.group(rows) if origin is not None else []
        zone = self.origin_zone(origin, feed)
        classifier = DueTimeClassifier(now or datetime.now(timezone.utc))
        links = SimBriefLinkBuilder(self.preferences.active_aircraft)
        atc = atc or {}

        lines: List[BoardLine] = []
        for index, row in enumerate(rows):
            arrival_zone = row.destination_timezone
            if arrival_zone is None:
                info = self.airports.get(row.destination)
                arrival_zone = info.timezone if info else None
            mark = ESTIMATE_MARK if row.arrival_is_estimate else ""
            duration = row.duration_minutes
            lines.append(
                BoardLine(
                    index=index,
                    row=row,
                    departure_text=format_time(row.departure, mode, zone, hour12),
                    departure_icon=day_night_icon(row.departure, zone),
                    due=classifier.classify(row.departure),
                    arrival_text=(
                        mark + format_time(row.arrival, mode, arrival_zone, hour12)
                        if row.arrival
                        else PLACEHOLDER
                    ),
                    arrival_icon=day_night_icon(row.arrival, arrival_zone),
                    duration_text=mark + minutes_to_hmm(duration) if duration else PLACEHOLDER,
                    simbrief_url=links.for_row(code, row),
                    can_map=origin is not None and self.airports.get(row.destination) is not None,
                    atc_positions=tuple(atc.get(row.destination, ())),
                )
            )
        return BoardSnapshot(
            origin_code=code,
            origin=origin,
            origin_zone=zone,
            rows=rows,
            lines=lines,
            destinations=destinations,
        )

    def route_path(self, origin_code: str, destination_code: str) -> Optional[List[List[GeoPoint]]]:
        """Renderable great-circle segments, ``None`` when an airport is unknown."""

        origin = self.airports.get(origin_code)
        destination = self.airports.get(destination_code)
        if origin is None or destination is None:
            return None
        return self.solver.renderable_path(origin.point, destination.point)
