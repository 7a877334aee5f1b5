"""
Elevation processing utilities.

This is the SINGLE SOURCE OF TRUTH for elevation calculations.
"""
from typing import Optional, Sequence, Tuple


def calculate_elevation_gain(elevations: Sequence[Optional[float]]) -> float:
    """
    Calculate total elevation gain.

    Missing samples (None) are skipped: the next available sample is
    compared against the last one seen, never against zero.

    Args:
        elevations: Elevation per point in route order, None where absent

    Returns:
        Gain in meters (unrounded)
    """
    gain = 0.0
    last: Optional[float] = None

    for ele in elevations:
        if ele is None:
            continue
        if last is not None and ele > last:
            gain += ele - last
        last = ele

    return gain


def elevation_range(
    elevations: Sequence[Optional[float]]
) -> Tuple[Optional[float], Optional[float]]:
    """
    Min and max elevation, ignoring missing samples.

    Returns:
        (min, max), both None when no sample carries elevation
    """
    present = [e for e in elevations if e is not None]
    if not present:
        return None, None
    return min(present), max(present)
