"""
Shared fixtures.

GPX documents are generated with gpxpy so tests exercise real GPX 1.1
output (default namespace, <metadata><name>, optional <ele>).
"""

import math

import gpxpy.gpx
import pytest


def build_gpx(points, track_name=None, metadata_name=None) -> str:
    """
    Build a GPX 1.1 document with one track and one segment.

    Args:
        points: Iterable of (lat, lon, elevation or None)
        track_name: <trk><name>
        metadata_name: <metadata><name>
    """
    gpx = gpxpy.gpx.GPX()
    if metadata_name is not None:
        gpx.name = metadata_name

    track = gpxpy.gpx.GPXTrack(name=track_name)
    gpx.tracks.append(track)
    segment = gpxpy.gpx.GPXTrackSegment()
    track.segments.append(segment)

    for lat, lon, ele in points:
        segment.points.append(gpxpy.gpx.GPXTrackPoint(lat, lon, elevation=ele))

    return gpx.to_xml()


@pytest.fixture(scope="session")
def gpx_builder():
    return build_gpx


@pytest.fixture(scope="session")
def zigzag_points():
    """1000 points zig-zagging along a gentle arc, rolling elevation."""
    points = []
    for i in range(1000):
        lat = 46.0 + i * 0.0004
        lon = 7.0 + 0.05 * math.sin(math.pi * i / 999) + (0.0015 if i % 2 else 0.0)
        ele = 500.0 + 40.0 * math.sin(i / 25.0) + i * 0.1
        points.append((round(lat, 6), round(lon, 6), round(ele, 1)))
    return points


@pytest.fixture(scope="session")
def zigzag_gpx(zigzag_points, gpx_builder):
    return gpx_builder(zigzag_points, track_name="Zig Zag Loop")
