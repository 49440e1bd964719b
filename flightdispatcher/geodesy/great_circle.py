"""Mini README: Great-circle interpolation and distance helpers.

Structure:
    * haversine_km - great-circle distance on a spherical Earth.
    * great_circle_points - slerp polyline between two points.
    * GreatCircleSolver - holds the segment count and produces map-ready paths.

Points are converted to unit vectors with numpy, interpolated with
spherical linear interpolation and converted back with ``atan2``. Exact
antipodes have no unique shortest path; the solver then follows the
meridian plane through the origin and the north pole so the output is
always finite and deterministic.
"""

from __future__ import annotations

import math
from typing import List

import numpy as np

from ..logging_utils import get_logger
from .antimeridian import split_at_antimeridian
from .points import GeoPoint

LOGGER = get_logger(__name__)

EARTH_RADIUS_KM = 6371.0
COINCIDENT_EPSILON_RAD = 1e-6
ANTIPODAL_EPSILON_RAD = 1e-6
DEFAULT_SEGMENTS = 80


def _to_unit_vector(point: GeoPoint) -> np.ndarray:
    phi = math.radians(point.latitude)
    lam = math.radians(point.longitude)
    return np.array(
        [math.cos(phi) * math.cos(lam), math.cos(phi) * math.sin(lam), math.sin(phi)]
    )


def _to_geo_point(vector: np.ndarray) -> GeoPoint:
    x, y, z = (float(component) for component in vector)
    return GeoPoint(
        math.degrees(math.atan2(z, math.sqrt(x * x + y * y))),
        math.degrees(math.atan2(y, x)),
    )


def _antipodal_axis(start: np.ndarray) -> np.ndarray:
    """Unit vector orthogonal to ``start`` lying in its meridian plane."""

    north = np.array([0.0, 0.0, 1.0])
    axis = north - float(np.dot(north, start)) * start
    norm = float(np.linalg.norm(axis))
    if norm < 1e-12:
        # Origin sits on a pole: use the prime meridian plane instead.
        greenwich = np.array([1.0, 0.0, 0.0])
        axis = greenwich - float(np.dot(greenwich, start)) * start
        norm = float(np.linalg.norm(axis))
    return axis / norm


def haversine_km(origin: GeoPoint, destination: GeoPoint) -> float:
    """Return the great-circle distance between two points in kilometres."""

    phi1 = math.radians(origin.latitude)
    phi2 = math.radians(destination.latitude)
    d_phi = math.radians(destination.latitude - origin.latitude)
    d_lam = math.radians(destination.longitude - origin.longitude)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lam / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def great_circle_points(
    origin: GeoPoint, destination: GeoPoint, n: int = DEFAULT_SEGMENTS
) -> List[GeoPoint]:
    """Return ``n + 1`` points tracing the great circle from origin to destination.

    Coincident points (closer than ~6 m) collapse to ``[origin]``.
    """

    if n < 1:
        raise ValueError("At least one segment is required")
    origin = GeoPoint(*origin)
    destination = GeoPoint(*destination)

    start = _to_unit_vector(origin)
    end = _to_unit_vector(destination)
    angle = math.acos(float(np.clip(np.dot(start, end), -1.0, 1.0)))
    if angle < COINCIDENT_EPSILON_RAD:
        return [origin]

    fractions = np.arange(n + 1) / n
    if math.pi - angle < ANTIPODAL_EPSILON_RAD:
        LOGGER.debug("Antipodal pair %s -> %s; following meridian plane", origin, destination)
        axis = _antipodal_axis(start)
        theta = fractions * math.pi
        vectors = np.outer(np.cos(theta), start) + np.outer(np.sin(theta), axis)
    else:
        sin_angle = math.sin(angle)
        weights_start = np.sin((1.0 - fractions) * angle) / sin_angle
        weights_end = np.sin(fractions * angle) / sin_angle
        vectors = np.outer(weights_start, start) + np.outer(weights_end, end)

    return [_to_geo_point(vector) for vector in vectors]


class GreatCircleSolver:
    """Produce great-circle polylines ready for a map layer."""

    def __init__(self, *, segments: int = DEFAULT_SEGMENTS) -> None:
        if segments < 1:
            raise ValueError("At least one segment is required")
        self.segments = segments
        LOGGER.debug("Initialised GreatCircleSolver with segments=%s", segments)

    def solve(self, origin: GeoPoint, destination: GeoPoint) -> List[GeoPoint]:
        """Return the raw interpolated arc."""

        return great_circle_points(origin, destination, self.segments)

    def renderable_path(self, origin: GeoPoint, destination: GeoPoint) -> List[List[GeoPoint]]:
        """Return the arc cut into segments that never wrap across ±180°."""

        return split_at_antimeridian(self.solve(origin, destination))
