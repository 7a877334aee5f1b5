"""
GPX route processing module.

Usage:
    from route_pipeline.features.gpx import process_gpx_upload, RouteProcessor
    from route_pipeline.features.gpx import RouteSimplifier  # Standalone simplification

Components:
- GPXParser: Extract track points and name candidates from GPX text
- RouteMetadataExtractor: Distance, elevation, bounds and route name
- RouteSimplifier: Douglas-Peucker with adaptive tolerance and point ceiling
- RouteProcessor: Parse -> metadata -> display/thumbnail simplification
- RouteCache: Caller-owned cache keyed by content hash
- validate_upload / validate_gpx_content: Pre-processing checks
"""

from .exceptions import GPXError, NoTrackPointsError, GPXValidationError
from .schemas import GeoPoint, RouteBounds, RouteMetadata, SimplifiedRouteSet
from .parser import GPXParser, ParsedGPX
from .metadata import RouteMetadataExtractor, resolve_route_name, clean_filename
from .simplifier import RouteSimplifier
from .cache import RouteCache, compute_content_hash
from .validation import validate_upload, validate_gpx_content, is_valid_gpx_content
from .pipeline import RouteProcessor, process_gpx_upload

__all__ = [
    # Errors
    "GPXError",
    "NoTrackPointsError",
    "GPXValidationError",
    # Schemas
    "GeoPoint",
    "RouteBounds",
    "RouteMetadata",
    "SimplifiedRouteSet",
    # Services
    "GPXParser",
    "ParsedGPX",
    "RouteMetadataExtractor",
    "resolve_route_name",
    "clean_filename",
    "RouteSimplifier",
    "RouteProcessor",
    "process_gpx_upload",
    # Cache
    "RouteCache",
    "compute_content_hash",
    # Validation
    "validate_upload",
    "validate_gpx_content",
    "is_valid_gpx_content",
]
