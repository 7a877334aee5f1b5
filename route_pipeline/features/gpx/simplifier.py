"""
Route Simplifier

Reduces a dense track to at most N points for map display, using
Douglas-Peucker with an adaptive tolerance and a uniform-stride fallback
that always honours the point ceiling.
"""

import logging
from typing import List, Sequence

from route_pipeline.shared.geo import segment_distance

from .schemas import GeoPoint

logger = logging.getLogger(__name__)


class RouteSimplifier:
    """
    Simplifies a route to a maximum number of points.

    Tolerances are in degrees (distances are measured in lat/lng space).
    First and last points always survive for max_points >= 2.
    """

    # Douglas-Peucker tolerance search, in degrees
    INITIAL_TOLERANCE = 0.0001
    MAX_TOLERANCE = 0.01
    TOLERANCE_GROWTH = 1.5

    @classmethod
    def simplify(
        cls,
        points: Sequence[GeoPoint],
        max_points: int
    ) -> List[GeoPoint]:
        """
        Simplify a route to at most max_points points.

        Args:
            points: Route points in order
            max_points: Point ceiling, must be positive

        Returns:
            Ordered subsequence of points; a copy of the input if it is
            already within the ceiling

        Raises:
            ValueError: If max_points is not positive
        """
        if max_points <= 0:
            raise ValueError(f"max_points must be positive, got {max_points}")

        if len(points) <= max_points:
            return list(points)

        tolerance = cls.INITIAL_TOLERANCE
        simplified = cls.douglas_peucker(points, tolerance)

        while len(simplified) > max_points and tolerance < cls.MAX_TOLERANCE:
            tolerance *= cls.TOLERANCE_GROWTH
            simplified = cls.douglas_peucker(points, tolerance)

        if len(simplified) <= max_points:
            logger.debug(
                f"Simplified {len(points)} -> {len(simplified)} points "
                f"(tolerance {tolerance:.6f})"
            )
            return simplified

        logger.debug(
            f"Tolerance search exhausted at {tolerance:.6f} with "
            f"{len(simplified)} points, sampling every Nth of {len(points)}"
        )
        return cls._uniform_sample(points, max_points)

    @classmethod
    def douglas_peucker(
        cls,
        points: Sequence[GeoPoint],
        tolerance: float
    ) -> List[GeoPoint]:
        """
        Douglas-Peucker simplification at a fixed tolerance.

        Walks index ranges with an explicit stack, so long tracks do not hit
        the interpreter recursion limit. The result equals the classic
        recursive split-and-concatenate formulation.
        """
        if len(points) <= 2:
            return list(points)

        keep = [False] * len(points)
        keep[0] = keep[-1] = True
        ranges = [(0, len(points) - 1)]

        while ranges:
            start, end = ranges.pop()
            if end - start < 2:
                continue

            max_distance = 0.0
            max_index = start
            for i in range(start + 1, end):
                distance = segment_distance(points[i], points[start], points[end])
                if distance > max_distance:
                    max_distance = distance
                    max_index = i

            if max_distance > tolerance:
                keep[max_index] = True
                ranges.append((start, max_index))
                ranges.append((max_index, end))

        return [p for p, kept in zip(points, keep) if kept]

    @staticmethod
    def _uniform_sample(
        points: Sequence[GeoPoint],
        max_points: int
    ) -> List[GeoPoint]:
        """Every Nth point, N = len // max_points, endpoints forced in."""
        last = len(points) - 1
        step = len(points) // max_points

        indices = list(range(0, len(points), step))
        if indices[-1] != last:
            indices.append(last)

        if len(indices) > max_points:
            # Trim from the interior tail so the final point survives
            if max_points == 1:
                indices = indices[:1]
            else:
                indices = indices[:max_points - 1] + [last]

        return [points[i] for i in indices]
