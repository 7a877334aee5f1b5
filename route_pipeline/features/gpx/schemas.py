"""
GPX-related schemas.

Pydantic models for the route processing pipeline. Fields are snake_case
in Python and serialise to camelCase with model_dump(by_alias=True).
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GeoPoint(_CamelModel):
    """Single point in a GPX track."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    lat: float
    lng: float
    elevation: Optional[float] = None


class RouteBounds(_CamelModel):
    """Axis-aligned bounding box of a route."""

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float


class RouteMetadata(_CamelModel):
    """Route statistics extracted from a GPX upload."""

    route_name: str

    # Metrics
    total_distance_km: float
    elevation_gain_m: int
    max_elevation_m: Optional[int] = None
    min_elevation_m: Optional[int] = None

    point_count: int
    bounds: RouteBounds
    has_elevation_data: bool = False


class SimplifiedRouteSet(_CamelModel):
    """Pipeline output: raw text, two simplified resolutions, metadata."""

    original: str
    display_points: List[GeoPoint]
    thumbnail_points: List[GeoPoint]
    metadata: RouteMetadata
