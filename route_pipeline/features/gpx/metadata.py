"""
Route Metadata Extractor

Computes route statistics (distance, elevation, bounds) and resolves a
display name for a parsed GPX track.
"""

import logging
import math
import re
from typing import Optional, Sequence

from route_pipeline.config import settings
from route_pipeline.shared.geo import calculate_total_distance, calculate_bounds
from route_pipeline.shared.elevation import calculate_elevation_gain, elevation_range

from .exceptions import NoTrackPointsError
from .schemas import GeoPoint, RouteBounds, RouteMetadata

logger = logging.getLogger(__name__)

_EXTENSION_RE = re.compile(r"\.[^/.]+\Z")
_SEPARATOR_RE = re.compile(r"[_-]")


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with .5 going up, unlike the built-in banker's rounding."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def clean_filename(filename: str) -> str:
    """
    Turn an upload filename into a readable route name.

    Example:
        >>> clean_filename("berlin_marathon-2024.gpx")
        'berlin marathon 2024'
    """
    stem = _EXTENSION_RE.sub("", filename)
    return _SEPARATOR_RE.sub(" ", stem)


def resolve_route_name(
    track_name: Optional[str] = None,
    metadata_name: Optional[str] = None,
    filename: Optional[str] = None,
    default_name: Optional[str] = None,
) -> str:
    """
    Pick the route name: track name, metadata name, filename, default.

    The first candidate that is non-empty after trimming wins.
    """
    candidates = [
        track_name,
        metadata_name,
        clean_filename(filename) if filename else None,
    ]
    for candidate in candidates:
        if candidate and candidate.strip():
            return candidate.strip()

    return default_name if default_name is not None else settings.default_route_name


class RouteMetadataExtractor:
    """Builds RouteMetadata from an ordered point sequence."""

    @classmethod
    def extract(
        cls,
        points: Sequence[GeoPoint],
        *,
        track_name: Optional[str] = None,
        metadata_name: Optional[str] = None,
        filename: Optional[str] = None,
        default_name: Optional[str] = None,
    ) -> RouteMetadata:
        """
        Compute route statistics.

        Args:
            points: Parsed track points in route order
            track_name: Text of <trk><name>, if any
            metadata_name: Text of <metadata><name>, if any
            filename: Upload filename used as a naming fallback
            default_name: Overrides settings.default_route_name

        Returns:
            RouteMetadata

        Raises:
            NoTrackPointsError: If points is empty
        """
        if not points:
            raise NoTrackPointsError()

        elevations = [p.elevation for p in points]
        min_ele, max_ele = elevation_range(elevations)
        gain = calculate_elevation_gain(elevations)
        min_lat, max_lat, min_lng, max_lng = calculate_bounds(points)

        return RouteMetadata(
            route_name=resolve_route_name(
                track_name, metadata_name, filename, default_name
            ),
            total_distance_km=round_half_up(calculate_total_distance(points), 1),
            elevation_gain_m=int(round_half_up(gain)),
            max_elevation_m=int(round_half_up(max_ele)) if max_ele is not None else None,
            min_elevation_m=int(round_half_up(min_ele)) if min_ele is not None else None,
            point_count=len(points),
            bounds=RouteBounds(
                min_lat=min_lat,
                max_lat=max_lat,
                min_lng=min_lng,
                max_lng=max_lng,
            ),
            has_elevation_data=max_ele is not None,
        )
