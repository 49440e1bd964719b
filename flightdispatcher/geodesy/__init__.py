"""Mini README: Spherical geometry used to draw flight routes.

Exports the great-circle solver and the antimeridian splitter. Both are
pure functions over plain ``GeoPoint`` tuples so map layers can call them
for any origin/destination pair without sharing state.
"""

from .antimeridian import split_at_antimeridian
from .points import GeoPoint
from .great_circle import (
    EARTH_RADIUS_KM,
    GreatCircleSolver,
    great_circle_points,
    haversine_km,
)

__all__ = [
    "EARTH_RADIUS_KM",
    "GeoPoint",
    "GreatCircleSolver",
    "great_circle_points",
    "haversine_km",
    "split_at_antimeridian",
]
