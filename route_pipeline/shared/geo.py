"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for geographic calculations.
DO NOT duplicate these functions elsewhere.

Point arguments are anything with `lat` and `lng` attributes (GeoPoint).
"""
import math
from typing import Sequence, Tuple

# Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in kilometers
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def calculate_total_distance(points: Sequence) -> float:
    """
    Calculate total distance for a route.

    Elevation is ignored, only lat/lng contribute.

    Args:
        points: Ordered points with lat/lng

    Returns:
        Total distance in kilometers (unrounded)
    """
    total = 0.0

    for i in range(1, len(points)):
        prev, curr = points[i - 1], points[i]
        total += haversine(prev.lat, prev.lng, curr.lat, curr.lng)

    return total


def calculate_bounds(points: Sequence) -> Tuple[float, float, float, float]:
    """
    Axis-aligned bounding box of a non-empty point sequence.

    Returns:
        (min_lat, max_lat, min_lng, max_lng)
    """
    if not points:
        raise ValueError("Cannot compute bounds of an empty route")

    lats = [p.lat for p in points]
    lngs = [p.lng for p in points]
    return min(lats), max(lats), min(lngs), max(lngs)


def segment_distance(point, start, end) -> float:
    """
    Planar distance from a point to the segment start-end.

    Works directly in degree space (lat as x, lng as y), not on the sphere.
    The projection is clamped to the segment, so points beyond either end
    measure to that endpoint.
    """
    a = point.lat - start.lat
    b = point.lng - start.lng
    c = end.lat - start.lat
    d = end.lng - start.lng

    len_sq = c * c + d * d
    if len_sq == 0:
        return math.sqrt(a * a + b * b)

    param = (a * c + b * d) / len_sq

    if param < 0:
        xx, yy = start.lat, start.lng
    elif param > 1:
        xx, yy = end.lat, end.lng
    else:
        xx = start.lat + param * c
        yy = start.lng + param * d

    dx = point.lat - xx
    dy = point.lng - yy
    return math.sqrt(dx * dx + dy * dy)
