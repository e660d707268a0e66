"""
Shared fixtures for split detection tests.
"""

import math
import pytest

from core.constants import EARTH_RADIUS_METERS
from core.models.trackpoint import RawPoint


def meters_to_latitude_degrees(meters: float) -> float:
    """Latitude offset that spans the given distance along a meridian."""
    return math.degrees(meters / EARTH_RADIUS_METERS)


def build_track(steps, start_elevation=100.0, start_latitude=45.0, longitude=6.0):
    """
    Build raw points walking north along a meridian.

    Each step is (distance_m, elevation_change_m); an elevation change of
    None produces a point without elevation.
    """
    latitude = start_latitude
    elevation = start_elevation
    points = [RawPoint(latitude, longitude, elevation)]

    for distance, change in steps:
        latitude += meters_to_latitude_degrees(distance)
        if change is None:
            points.append(RawPoint(latitude, longitude, None))
            continue
        elevation += change
        points.append(RawPoint(latitude, longitude, elevation))

    return points


def gpx_document(points) -> str:
    """Render (lat, lon, ele_or_None) tuples as a single-track GPX 1.1 document."""
    trkpts = []
    for lat, lon, ele in points:
        if ele is None:
            trkpts.append(f'<trkpt lat="{lat}" lon="{lon}"></trkpt>')
        else:
            trkpts.append(f'<trkpt lat="{lat}" lon="{lon}"><ele>{ele}</ele></trkpt>')

    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">\n'
        '<trk><name>Test climb</name><trkseg>\n'
        + "\n".join(trkpts) +
        '\n</trkseg></trk>\n</gpx>\n'
    )


@pytest.fixture
def track_builder():
    return build_track


@pytest.fixture
def climb_and_descent_points():
    """500 m climb of 50 m followed by 500 m descent of 50 m."""
    return build_track([(500, 50), (500, -50)])


@pytest.fixture
def climb_and_descent_gpx():
    """GPX text for a 500 m climb and descent sampled every 100 m."""
    step = meters_to_latitude_degrees(100)
    points = []
    for i in range(11):
        elevation = 100 + 10 * i if i <= 5 else 150 - 10 * (i - 5)
        points.append((45.0 + step * i, 6.0, elevation))
    return gpx_document(points)


@pytest.fixture
def gpx_builder():
    return gpx_document
