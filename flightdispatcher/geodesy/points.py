"""Mini README: Coordinate primitive shared by the geodesy helpers."""

from __future__ import annotations

from typing import NamedTuple


class GeoPoint(NamedTuple):
    """Latitude/longitude pair in degrees."""

    latitude: float
    longitude: float
