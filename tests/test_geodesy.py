"""Mini README: Tests for the great-circle solver and antimeridian splitter.

Covers point counts, endpoints, even spacing, coincident and antipodal
inputs, and segment continuity on a trans-Pacific route.
"""

from __future__ import annotations

import math

import pytest

from flightdispatcher.geodesy import (
    EARTH_RADIUS_KM,
    GeoPoint,
    GreatCircleSolver,
    great_circle_points,
    haversine_km,
    split_at_antimeridian,
)

TEL_AVIV = GeoPoint(32.0114, 34.8867)
NEW_YORK = GeoPoint(40.6398, -73.7789)
TOKYO = GeoPoint(35.5523, 139.7798)
LOS_ANGELES = GeoPoint(33.9425, -118.4081)


def test_great_circle_returns_n_plus_one_points_between_endpoints() -> None:
    points = great_circle_points(TEL_AVIV, NEW_YORK, 40)

    assert len(points) == 41
    assert points[0].latitude == pytest.approx(TEL_AVIV.latitude, abs=1e-9)
    assert points[0].longitude == pytest.approx(TEL_AVIV.longitude, abs=1e-9)
    assert points[-1].latitude == pytest.approx(NEW_YORK.latitude, abs=1e-9)
    assert points[-1].longitude == pytest.approx(NEW_YORK.longitude, abs=1e-9)


def test_great_circle_steps_are_evenly_spaced() -> None:
    points = great_circle_points(TEL_AVIV, NEW_YORK)
    total = haversine_km(TEL_AVIV, NEW_YORK)

    steps = [haversine_km(a, b) for a, b in zip(points, points[1:])]
    assert len(steps) == 80
    for step in steps:
        assert step == pytest.approx(total / 80, rel=1e-6)


def test_identical_points_collapse_to_single_point() -> None:
    assert great_circle_points(TEL_AVIV, TEL_AVIV) == [TEL_AVIV]


def test_antipodal_points_follow_meridian_without_nan() -> None:
    """Exact antipodes fall back to the meridian plane through the origin."""

    origin = GeoPoint(10.0, 20.0)
    antipode = GeoPoint(-10.0, -160.0)

    points = great_circle_points(origin, antipode, 80)

    assert len(points) == 81
    assert all(math.isfinite(lat) and math.isfinite(lon) for lat, lon in points)
    assert points[0].latitude == pytest.approx(10.0, abs=1e-6)
    assert points[-1].latitude == pytest.approx(-10.0, abs=1e-6)
    assert points[-1].longitude == pytest.approx(-160.0, abs=1e-6)
    # Halfway round the meridian plane lies 80N on the far meridian.
    assert points[40].latitude == pytest.approx(80.0, abs=1e-6)
    assert points[40].longitude == pytest.approx(-160.0, abs=1e-6)


def test_antipodal_poles_use_prime_meridian() -> None:
    points = great_circle_points(GeoPoint(90.0, 0.0), GeoPoint(-90.0, 0.0), 4)

    assert len(points) == 5
    assert points[2].latitude == pytest.approx(0.0, abs=1e-6)
    assert points[2].longitude == pytest.approx(0.0, abs=1e-6)


def test_great_circle_rejects_zero_segments() -> None:
    with pytest.raises(ValueError):
        great_circle_points(TEL_AVIV, NEW_YORK, 0)


def test_haversine_half_circumference() -> None:
    assert haversine_km(GeoPoint(0.0, 0.0), GeoPoint(0.0, 180.0)) == pytest.approx(
        math.pi * EARTH_RADIUS_KM
    )


def test_split_eastbound_crossing() -> None:
    segments = split_at_antimeridian(
        [GeoPoint(0, 170), GeoPoint(0, 179), GeoPoint(0, -179), GeoPoint(0, -170)]
    )

    assert segments == [
        [GeoPoint(0, 170), GeoPoint(0, 179), GeoPoint(0, 180)],
        [GeoPoint(0, -180), GeoPoint(0, -179), GeoPoint(0, -170)],
    ]


def test_split_interpolates_crossing_latitude() -> None:
    segments = split_at_antimeridian([GeoPoint(10, 178), GeoPoint(20, -178)])

    assert len(segments) == 2
    exit_point = segments[0][-1]
    entry_point = segments[1][0]
    assert exit_point == (pytest.approx(15.0), 180.0)
    assert entry_point == (pytest.approx(15.0), -180.0)


def test_split_westbound_crossing_exits_at_minus_180() -> None:
    segments = split_at_antimeridian([GeoPoint(0, -179), GeoPoint(0, 179)])

    assert segments[0][-1].longitude == -180.0
    assert segments[1][0].longitude == 180.0
    assert segments[1][-1] == GeoPoint(0, 179)


def test_split_opposite_edges_of_the_same_meridian() -> None:
    segments = split_at_antimeridian(
        [GeoPoint(0.0, 179.0), GeoPoint(0.0, 180.0), GeoPoint(10.0, -180.0), GeoPoint(12.0, -179.0)]
    )

    assert segments == [
        [GeoPoint(0.0, 179.0), GeoPoint(0.0, 180.0)],
        [GeoPoint(10.0, -180.0), GeoPoint(12.0, -179.0)],
    ]


def test_split_passes_through_short_inputs() -> None:
    assert split_at_antimeridian([]) == [[]]
    assert split_at_antimeridian([(1.0, 2.0)]) == [[GeoPoint(1.0, 2.0)]]


def test_split_trans_pacific_route_reconstructs_input() -> None:
    path = great_circle_points(TOKYO, LOS_ANGELES)
    segments = split_at_antimeridian(path)

    assert len(segments) == 2
    for segment in segments:
        for a, b in zip(segment, segment[1:]):
            assert abs(b.longitude - a.longitude) <= 180

    rebuilt = []
    for index, segment in enumerate(segments):
        start = 1 if index > 0 else 0
        stop = len(segment) - 1 if index < len(segments) - 1 else len(segment)
        rebuilt.extend(segment[start:stop])
    assert rebuilt == path


def test_solver_renderable_path_matches_split() -> None:
    solver = GreatCircleSolver(segments=20)

    assert solver.solve(TOKYO, LOS_ANGELES) == great_circle_points(TOKYO, LOS_ANGELES, 20)
    assert solver.renderable_path(TOKYO, LOS_ANGELES) == split_at_antimeridian(
        great_circle_points(TOKYO, LOS_ANGELES, 20)
    )
