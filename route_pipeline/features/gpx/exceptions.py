"""
GPX processing errors.

All subclass ValueError so callers may keep a plain `except ValueError`.
"""


class GPXError(ValueError):
    """Base GPX processing error."""
    pass


class NoTrackPointsError(GPXError):
    """The document contains no <trkpt> elements."""

    def __init__(self, message: str = "No track points found"):
        super().__init__(message)


class GPXValidationError(GPXError):
    """Upload rejected before processing (type, size or structure)."""
    pass
