"""Mini README: Data models for the departures feed and the board rows.

Structure:
    * ScheduledTime / FeedAirport / FeedDeparture / FeedArrival / FeedAirline
      / RawFlightEntry - pydantic models mirroring the FIDS payload. Every
      field is optional and unknown keys are ignored. A text field holding
      the wrong type (a numeric timestamp, say) reads as absent; numeric
      flight numbers are kept as text.
    * Row - one normalised international departure.
    * RouteDestination - flights grouped per destination for the route map.
    * estimated_arrival - departure plus a block time estimate.

Absent values are ``None``. Display placeholders are applied later by
:mod:`flightdispatcher.display`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Annotated, Any, Optional, Tuple

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from ..geodesy import GeoPoint
from ..utils import round_half_up


def estimated_arrival(departure: datetime, minutes: int) -> datetime:
    return departure + timedelta(minutes=minutes)


def _text_or_none(value: Any) -> Optional[str]:
    """Keep strings; anything else in a text slot is treated as absent."""

    return value if isinstance(value, str) else None


def _label_text(value: Any) -> Optional[str]:
    """Like :func:`_text_or_none`, but numeric labels (flight 91) become text."""

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return _text_or_none(value)


FeedText = Annotated[Optional[str], BeforeValidator(_text_or_none)]
FeedLabel = Annotated[Optional[str], BeforeValidator(_label_text)]


class _FeedModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class ScheduledTime(_FeedModel):
    utc: FeedText = None
    local: FeedText = None


class FeedAirport(_FeedModel):
    icao: FeedText = None
    iata: FeedText = None
    country_code: FeedText = Field(None, alias="countryCode")
    time_zone: FeedText = Field(None, alias="timeZone")


class FeedDeparture(_FeedModel):
    scheduled_time: Optional[ScheduledTime] = Field(None, alias="scheduledTime")


class FeedArrival(_FeedModel):
    airport: Optional[FeedAirport] = None
    scheduled_time: Optional[ScheduledTime] = Field(None, alias="scheduledTime")


class FeedAirline(_FeedModel):
    name: FeedLabel = None
    iata: FeedLabel = None
    icao: FeedLabel = None


class RawFlightEntry(_FeedModel):
    """A single departure as delivered by the schedule feed."""

    departure: Optional[FeedDeparture] = None
    arrival: Optional[FeedArrival] = None
    number: FeedLabel = None
    airline: Optional[FeedAirline] = None

    @property
    def departure_utc(self) -> Optional[str]:
        scheduled = self.departure.scheduled_time if self.departure else None
        return scheduled.utc if scheduled else None

    @property
    def departure_local(self) -> Optional[str]:
        scheduled = self.departure.scheduled_time if self.departure else None
        return scheduled.local if scheduled else None

    @property
    def arrival_utc(self) -> Optional[str]:
        scheduled = self.arrival.scheduled_time if self.arrival else None
        return scheduled.utc if scheduled else None

    @property
    def arrival_airport(self) -> FeedAirport:
        if self.arrival and self.arrival.airport:
            return self.arrival.airport
        return FeedAirport()


@dataclass(frozen=True, slots=True)
class Row:
    """Normalised departure shown as one line of the board."""

    destination: str
    destination_city: Optional[str] = None
    destination_country: Optional[str] = None
    destination_timezone: Optional[str] = None
    flight_number: Optional[str] = None
    airline_name: Optional[str] = None
    airline_code: Optional[str] = None
    departure: Optional[datetime] = None
    real_arrival: Optional[datetime] = None
    estimated_minutes: Optional[int] = None

    @property
    def arrival_is_estimate(self) -> bool:
        return self.real_arrival is None

    @property
    def arrival(self) -> Optional[datetime]:
        """Scheduled arrival, or departure plus the estimate when none was published."""

        if self.real_arrival is not None:
            return self.real_arrival
        if self.departure is not None and self.estimated_minutes is not None:
            return estimated_arrival(self.departure, self.estimated_minutes)
        return None

    @property
    def duration_minutes(self) -> Optional[int]:
        """Block time from the published schedule, else the distance estimate."""

        if self.real_arrival is not None and self.departure is not None:
            return round_half_up((self.real_arrival - self.departure).total_seconds() / 60)
        if self.real_arrival is not None:
            return None
        return self.estimated_minutes


@dataclass(frozen=True, slots=True)
class RouteDestination:
    """Destination marker for the route map."""

    destination: str
    latitude: float
    longitude: float
    city: Optional[str] = None
    flights: Tuple[str, ...] = field(default_factory=tuple)
    first_row_index: int = 0

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)

    def as_dict(self) -> dict:
        return {
            "icao": self.destination,
            "lat": self.latitude,
            "lon": self.longitude,
            "city": self.city,
            "flights": list(self.flights),
            "first_row_index": self.first_row_index,
        }
