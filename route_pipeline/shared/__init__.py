"""
Shared utilities (NOT business logic).

Usage:
    from route_pipeline.shared import haversine, calculate_elevation_gain
"""
from .geo import (
    haversine,
    calculate_total_distance,
    calculate_bounds,
    segment_distance,
    EARTH_RADIUS_KM,
)
from .elevation import (
    calculate_elevation_gain,
    elevation_range,
)

__all__ = [
    # geo
    "haversine",
    "calculate_total_distance",
    "calculate_bounds",
    "segment_distance",
    "EARTH_RADIUS_KM",
    # elevation
    "calculate_elevation_gain",
    "elevation_range",
]
