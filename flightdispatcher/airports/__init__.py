"""Mini README: Airport reference data package.

The ``directory`` module loads the ICAO keyed airport table once per
process and answers the lookup and search queries used by the departure
board, the route map and the HTTP interface.
"""

from .directory import (
    AirportDirectory,
    AirportRecord,
    SearchResult,
    clean_icao,
    get_airport_directory,
)

__all__ = [
    "AirportDirectory",
    "AirportRecord",
    "SearchResult",
    "clean_icao",
    "get_airport_directory",
]
