"""
Route Pipeline

GPX route ingestion: parse track points, extract route metadata and
simplify the track into display and thumbnail resolutions.

Usage:
    from route_pipeline import process_gpx_upload

    result = process_gpx_upload(gpx_text, filename="morning_run.gpx")
    result.metadata.total_distance_km
    result.thumbnail_points
"""

from route_pipeline.features.gpx import (
    GeoPoint,
    RouteBounds,
    RouteMetadata,
    SimplifiedRouteSet,
    RouteProcessor,
    process_gpx_upload,
    GPXError,
    NoTrackPointsError,
    GPXValidationError,
)

__all__ = [
    "GeoPoint",
    "RouteBounds",
    "RouteMetadata",
    "SimplifiedRouteSet",
    "RouteProcessor",
    "process_gpx_upload",
    "GPXError",
    "NoTrackPointsError",
    "GPXValidationError",
]
