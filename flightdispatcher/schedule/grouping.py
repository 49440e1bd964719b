"""Mini README: Group board rows by destination for the route map."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..airports import AirportRecord
from ..logging_utils import get_logger
from .aggregator import AirportLookup
from .models import RouteDestination, Row

LOGGER = get_logger(__name__)


def group_routes(rows: Sequence[Row], airports: AirportLookup) -> List[RouteDestination]:
    """Return one destination per resolvable airport, in first-seen order.

    Flight numbers keep encounter order and duplicates. Rows whose
    destination has no coordinates are left out of the map but stay on the
    board.
    """

    order: List[str] = []
    first_index: Dict[str, int] = {}
    flights: Dict[str, List[str]] = {}
    records: Dict[str, AirportRecord] = {}
    cities: Dict[str, Optional[str]] = {}

    for index, row in enumerate(rows):
        info = airports.get(row.destination)
        if info is None:
            continue
        if row.destination not in first_index:
            order.append(row.destination)
            first_index[row.destination] = index
            flights[row.destination] = []
            records[row.destination] = info
            cities[row.destination] = row.destination_city
        if row.flight_number:
            flights[row.destination].append(row.flight_number)

    destinations = []
    for code in order:
        info = records[code]
        destinations.append(
            RouteDestination(
                destination=code,
                latitude=info.latitude,
                longitude=info.longitude,
                city=cities[code] or info.city or None,
                flights=tuple(flights[code]),
                first_row_index=first_index[code],
            )
        )
    LOGGER.debug("Grouped %s rows into %s route destinations", len(rows), len(destinations))
    return destinations


class RouteGrouper:
    """Bind an airport table to :func:`group_routes`."""

    def __init__(self, airports: AirportLookup) -> None:
        self.airports = airports

    def group(self, rows: Sequence[Row]) -> List[RouteDestination]:
        return group_routes(rows, self.airports)
