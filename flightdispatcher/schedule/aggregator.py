"""Mini README: Turn a raw departures feed into international board rows.

Structure:
    * normalize_utc - parse feed timestamps ("2026-02-23 21:10", "...Z").
    * extract_entries - pull the departure list out of a FIDS response.
    * estimate_minutes - distance based block time.
    * FlightAggregator - per-entry normalisation and the international filter.
    * aggregate_departures - functional entry point.

Every entry is processed on its own. An entry that fails validation is
logged and skipped so the rest of the feed still reaches the board.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, List, Optional, Protocol

from ..airports import AirportRecord
from ..geodesy import haversine_km
from ..logging_utils import get_logger
from ..utils import round_half_up
from .models import RawFlightEntry, Row

LOGGER = get_logger(__name__)

UNKNOWN_DESTINATION = "UNKNOWN"
CRUISE_SPEED_KMH = 889.0  # ~480 kt
CLIMB_DESCENT_OVERHEAD_MINUTES = 30

_ZONE_SUFFIX = re.compile(r"(Z|[+-]\d{2}:?\d{2})$", re.IGNORECASE)


class AirportLookup(Protocol):
    def get(self, code: Optional[str]) -> Optional[AirportRecord]: ...


def normalize_utc(value: Any) -> Optional[datetime]:
    """Parse a feed UTC timestamp into an aware datetime, ``None`` when invalid."""

    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip().replace(" ", "T", 1)
    if not _ZONE_SUFFIX.search(text):
        text += "Z"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        LOGGER.debug("Unparseable timestamp %r", value)
        return None
    return parsed.astimezone(timezone.utc)


def extract_entries(payload: Any) -> List[Any]:
    """Return the departure entries from a FIDS response or a bare list."""

    if isinstance(payload, list):
        return payload
    if not isinstance(payload, dict):
        return []
    departures = payload.get("departures")
    if isinstance(departures, list):
        return departures
    if isinstance(departures, dict) and isinstance(departures.get("items"), list):
        return departures["items"]
    departing = payload.get("departing")
    return departing if isinstance(departing, list) else []


def estimate_minutes(distance_km: float) -> int:
    """Estimated block time for a great-circle distance."""

    return round_half_up(distance_km / CRUISE_SPEED_KMH * 60) + CLIMB_DESCENT_OVERHEAD_MINUTES


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def is_international(origin_country: Optional[str], destination_country: Optional[str]) -> bool:
    """False only when both countries are known and equal; unknown data is kept."""

    origin_country = _clean(origin_country)
    destination_country = _clean(destination_country)
    if origin_country is None or destination_country is None:
        return True
    return origin_country.upper() != destination_country.upper()


class FlightAggregator:
    """Normalise feed entries against the airport table."""

    def __init__(self, airports: AirportLookup) -> None:
        self.airports = airports

    def build_row(self, entry: Any, origin: Optional[AirportRecord]) -> Row:
        """Normalise one feed entry; raises ``ValueError`` when it is malformed."""

        flight = RawFlightEntry.model_validate(entry)
        airport = flight.arrival_airport

        destination = (
            _clean(airport.icao) or _clean(airport.iata) or UNKNOWN_DESTINATION
        ).upper()
        destination_info = self.airports.get(destination)

        country = _clean(airport.country_code)
        if country is not None:
            country = country.upper()
        elif destination_info is not None:
            country = destination_info.country or None

        estimate: Optional[int] = None
        if origin is not None and destination_info is not None:
            estimate = estimate_minutes(haversine_km(origin.point, destination_info.point))

        airline = flight.airline
        return Row(
            destination=destination,
            destination_city=destination_info.city if destination_info else None,
            destination_country=country,
            destination_timezone=_clean(airport.time_zone),
            flight_number=_clean(flight.number),
            airline_name=_clean(airline.name) if airline else None,
            airline_code=_clean(airline.icao) if airline else None,
            departure=normalize_utc(flight.departure_utc),
            real_arrival=normalize_utc(flight.arrival_utc),
            estimated_minutes=estimate,
        )

    def aggregate(self, feed: Any, origin: Optional[AirportRecord]) -> List[Row]:
        """Return international departures in feed order."""

        entries = extract_entries(feed)
        origin_country = origin.country if origin is not None else None
        rows: List[Row] = []
        skipped = 0
        for index, entry in enumerate(entries):
            try:
                row = self.build_row(entry, origin)
            except (TypeError, ValueError) as error:
                LOGGER.warning("Skipping malformed feed entry #%s: %s", index, error)
                skipped += 1
                continue
            if is_international(origin_country, row.destination_country):
                rows.append(row)
        LOGGER.info(
            "Aggregated %s international rows from %s entries (%s skipped)",
            len(rows),
            len(entries),
            skipped,
        )
        return rows


def aggregate_departures(
    feed: Any, origin: Optional[AirportRecord], airports: AirportLookup
) -> List[Row]:
    """Functional wrapper around :class:`FlightAggregator`."""

    return FlightAggregator(airports).aggregate(feed, origin)


def sample_local_time(feed: Any) -> Optional[str]:
    """Local departure time of the first entry, used to infer the origin zone."""

    for entry in extract_entries(feed):
        try:
            return RawFlightEntry.model_validate(entry).departure_local
        except (TypeError, ValueError):
            return None
    return None
