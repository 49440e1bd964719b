"""Mini README: Cut polylines where they wrap across the antimeridian.

Map layers join consecutive points with straight lines, so a path that
steps from 179° to -179° is drawn as a stroke across the whole world.
``split_at_antimeridian`` closes the current segment on the ±180° line and
opens a new one on the opposite edge, interpolating latitude at the cut.
"""

from __future__ import annotations

from typing import List, Sequence

from .points import GeoPoint


def split_at_antimeridian(points: Sequence[GeoPoint]) -> List[List[GeoPoint]]:
    """Return renderable segments with no consecutive longitude jump above 180°."""

    points = [GeoPoint(*point) for point in points]
    if len(points) < 2:
        return [points]

    segments: List[List[GeoPoint]] = []
    segment: List[GeoPoint] = [points[0]]

    for point in points[1:]:
        last = segment[-1]
        delta = point.longitude - last.longitude

        if abs(delta) > 180:
            short_delta = delta - 360 if delta > 180 else delta + 360
            if short_delta == 0:
                # 180 and -180 are the same meridian: restart on the other edge.
                segments.append(segment)
                segment = [point]
                continue
            exit_lon = -180.0 if short_delta < 0 else 180.0
            entry_lon = -exit_lon
            fraction = abs(exit_lon - last.longitude) / abs(short_delta)
            crossing_lat = last.latitude + fraction * (point.latitude - last.latitude)

            segment.append(GeoPoint(crossing_lat, exit_lon))
            segments.append(segment)
            segment = [GeoPoint(crossing_lat, entry_lon), point]
        else:
            segment.append(point)

    segments.append(segment)
    return segments
