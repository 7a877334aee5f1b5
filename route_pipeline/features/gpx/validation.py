"""
Upload validation.

Checks run before an upload is handed to the pipeline: file type, size and
basic GPX structure.
"""

import logging
from typing import Optional, Sequence

from route_pipeline.config import settings

from .exceptions import GPXValidationError
from .parser import local_name, parse_xml

logger = logging.getLogger(__name__)

_BYTES_PER_MB = 1024 * 1024


def validate_upload(
    filename: str,
    size_bytes: int,
    *,
    allowed_extensions: Optional[Sequence[str]] = None,
    max_file_size_mb: Optional[float] = None,
) -> None:
    """
    Validate upload filename and size.

    Args:
        filename: Original filename
        size_bytes: File size in bytes
        allowed_extensions: Defaults to settings.allowed_file_types
        max_file_size_mb: Defaults to settings.max_file_size_mb

    Raises:
        GPXValidationError: With a user-facing message
    """
    if allowed_extensions is None:
        allowed_extensions = settings.allowed_file_types
    if max_file_size_mb is None:
        max_file_size_mb = settings.max_file_size_mb

    extension = "." + filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if extension not in allowed_extensions:
        raise GPXValidationError(
            f"Invalid file type. Allowed types: {', '.join(allowed_extensions)}"
        )

    if size_bytes <= 0:
        raise GPXValidationError("File is empty")

    if size_bytes / _BYTES_PER_MB > max_file_size_mb:
        raise GPXValidationError(f"File too large. Maximum size: {max_file_size_mb:g}MB")


def is_valid_gpx_content(content: str) -> bool:
    """
    Check that text is a GPX document with a track, route or waypoint.
    """
    root = parse_xml(content)
    if root is None or local_name(root) != "gpx":
        return False

    return any(
        local_name(element) in ("trk", "rte", "wpt")
        for element in root.iter()
    )


def validate_gpx_content(content: str) -> None:
    """
    Raises:
        GPXValidationError: If the content is not a usable GPX document
    """
    if not is_valid_gpx_content(content):
        logger.info("Rejected upload: not a GPX document")
        raise GPXValidationError("Invalid GPX file format")
