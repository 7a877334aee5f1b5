"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from typing import Annotated, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Pipeline settings with validation."""

    # === Core ===
    log_level: str = Field(default="INFO", description="Logging level")

    # === Simplification targets ===
    display_max_points: int = Field(
        default=300,
        description="Point ceiling for the interactive map variant"
    )
    thumbnail_max_points: int = Field(
        default=50,
        description="Point ceiling for the preview thumbnail variant"
    )

    # === Route naming ===
    default_route_name: str = Field(
        default="Unnamed Route",
        description="Used when neither the GPX nor the filename yields a name"
    )

    # === Upload validation ===
    max_file_size_mb: float = Field(default=10, description="Maximum upload size")
    allowed_file_types: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: [".gpx"],
        description="Allowed upload extensions"
    )

    # === Cache ===
    cache_max_entries: int = Field(default=128)

    @field_validator('display_max_points', 'thumbnail_max_points', 'cache_max_entries')
    @classmethod
    def check_positive(cls, v: int) -> int:
        """Point targets and cache size must be positive."""
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v

    @field_validator('allowed_file_types', mode='before')
    @classmethod
    def parse_file_types(cls, v):
        """Parse extensions from comma-separated string, normalise to '.ext'."""
        if isinstance(v, str):
            v = v.split(',')
        result = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                continue
            result.append(ext if ext.startswith('.') else f".{ext}")
        return result

    model_config = SettingsConfigDict(
        env_prefix="ROUTE_PIPELINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
