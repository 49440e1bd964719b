"""Mini README: SimBrief dispatch deep links.

Structure:
    * flight_digits - "UA 91" -> "91".
    * simbrief_date - "23 Feb 2026 - 21:10" (UTC).
    * simbrief_link - assemble the custom dispatch URL.
    * SimBriefLinkBuilder - binds the active aircraft and builds links per row.

Each optional argument controls only its own query parameter.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from urllib.parse import urlencode

from ..logging_utils import get_logger
from ..preferences import AircraftProfile
from ..schedule import Row

LOGGER = get_logger(__name__)

SIMBRIEF_DISPATCH_URL = "https://dispatch.simbrief.com/options/custom"
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# ICAO airline designators are three letters, IATA ones two alphanumerics.
_CARRIER_PREFIX = re.compile(r"^(?:[A-Z]{3}|[A-Z0-9]{2})\s*", re.IGNORECASE)


def flight_digits(flight_number: Optional[str]) -> Optional[str]:
    """Strip the carrier prefix from a flight number; ``None`` if nothing is left."""

    text = (flight_number or "").strip()
    if not text:
        return None
    if text.isdigit():
        return text
    digits = _CARRIER_PREFIX.sub("", text, count=1)
    return digits or None


def simbrief_date(departure: datetime) -> str:
    moment = departure.astimezone(timezone.utc) if departure.tzinfo else departure
    return (
        f"{moment.day:02d} {MONTHS[moment.month - 1]} {moment.year}"
        f" - {moment.hour:02d}:{moment.minute:02d}"
    )


def simbrief_link(
    origin: str,
    destination: str,
    departure: Optional[datetime] = None,
    minutes: Optional[int] = None,
    airline: Optional[str] = None,
    flight_number: Optional[str] = None,
    base_type: Optional[str] = None,
    airframe_id: Optional[str] = None,
) -> str:
    """Return the SimBrief custom dispatch URL for a flight."""

    params: List[Tuple[str, str]] = [("orig", origin), ("dest", destination)]
    if airline:
        params.append(("airline", airline))
    digits = flight_digits(flight_number)
    if digits:
        params.append(("fltnum", digits))
    if base_type:
        params.append(("basetype", base_type))
    if airframe_id:
        params.append(("type", airframe_id))
    if departure is not None:
        params.append(("date", simbrief_date(departure)))
    if minutes and minutes > 0:
        hours, rest = divmod(int(minutes), 60)
        params.append(("stehour", str(hours * 3600)))
        params.append(("stemin", str(rest * 60)))
    return f"{SIMBRIEF_DISPATCH_URL}?{urlencode(params)}"


class SimBriefLinkBuilder:
    """Build links for board rows using one aircraft profile."""

    def __init__(self, aircraft: Optional[AircraftProfile] = None) -> None:
        self.aircraft = aircraft
        LOGGER.debug("SimBriefLinkBuilder using aircraft %s", aircraft.name if aircraft else None)

    def for_row(self, origin: str, row: Row) -> str:
        return simbrief_link(
            origin,
            row.destination,
            departure=row.departure,
            minutes=row.duration_minutes,
            airline=row.airline_code,
            flight_number=row.flight_number,
            base_type=self.aircraft.base_type if self.aircraft else None,
            airframe_id=self.aircraft.airframe_id if self.aircraft else None,
        )
