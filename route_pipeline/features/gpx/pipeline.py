"""
GPX Upload Pipeline

Orchestrates parse -> metadata -> simplification for an uploaded GPX file.
"""

import logging
from typing import Optional

from route_pipeline.config import settings

from .cache import RouteCache
from .metadata import RouteMetadataExtractor
from .parser import GPXParser
from .schemas import SimplifiedRouteSet
from .simplifier import RouteSimplifier

logger = logging.getLogger(__name__)


class RouteProcessor:
    """
    Turns raw GPX text into display/thumbnail point sets plus metadata.

    Both simplified sets are computed from the full-resolution track,
    never from each other.
    """

    def __init__(
        self,
        display_max_points: Optional[int] = None,
        thumbnail_max_points: Optional[int] = None,
        default_route_name: Optional[str] = None,
        cache: Optional[RouteCache] = None,
    ):
        self.display_max_points = (
            display_max_points if display_max_points is not None else settings.display_max_points
        )
        self.thumbnail_max_points = (
            thumbnail_max_points if thumbnail_max_points is not None else settings.thumbnail_max_points
        )
        self.default_route_name = (
            default_route_name if default_route_name is not None else settings.default_route_name
        )
        if self.display_max_points <= 0 or self.thumbnail_max_points <= 0:
            raise ValueError("Point targets must be positive")
        self.cache = cache

    def process(self, gpx_text: str, filename: Optional[str] = None) -> SimplifiedRouteSet:
        """
        Process a GPX upload.

        Args:
            gpx_text: Raw GPX document
            filename: Original filename, used for the route name fallback

        Returns:
            SimplifiedRouteSet

        Raises:
            NoTrackPointsError: If the document has no track points
        """
        cache_key = None
        if self.cache is not None:
            cache_key = RouteCache.make_key(
                gpx_text,
                filename,
                options=(
                    self.display_max_points,
                    self.thumbnail_max_points,
                    self.default_route_name,
                ),
            )
            cached = self.cache.get(cache_key)
            if cached is not None:
                logger.debug(f"Route cache hit for {filename or 'upload'}")
                return cached

        parsed = GPXParser.parse(gpx_text)

        metadata = RouteMetadataExtractor.extract(
            parsed.points,
            track_name=parsed.track_name,
            metadata_name=parsed.metadata_name,
            filename=filename,
            default_name=self.default_route_name,
        )

        result = SimplifiedRouteSet(
            original=gpx_text,
            display_points=RouteSimplifier.simplify(parsed.points, self.display_max_points),
            thumbnail_points=RouteSimplifier.simplify(parsed.points, self.thumbnail_max_points),
            metadata=metadata,
        )

        logger.info(
            f"Processed route '{metadata.route_name}': {metadata.point_count} points, "
            f"{metadata.total_distance_km} km, +{metadata.elevation_gain_m} m, "
            f"display={len(result.display_points)}, thumbnail={len(result.thumbnail_points)}"
        )

        if cache_key is not None:
            self.cache.put(cache_key, result)

        return result


def process_gpx_upload(
    gpx_text: str,
    filename: Optional[str] = None,
    *,
    cache: Optional[RouteCache] = None,
) -> SimplifiedRouteSet:
    """Process a GPX upload with the configured point targets."""
    return RouteProcessor(cache=cache).process(gpx_text, filename)
