"""
Shared calculations module.

This module contains the geometric and grade calculations used by the
trackpoint enricher and the split detector. It is the single source of truth
for distance and grade math.
"""

import math

from core.constants import (
    EARTH_RADIUS_METERS, METERS_PER_KILOMETER, PERCENT, GRADE_DECIMALS
)


# =============================================================================
# BASIC GEOMETRIC CALCULATIONS
# =============================================================================

def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great-circle distance between two points in meters.

    Uses the haversine formula on a sphere of radius EARTH_RADIUS_METERS.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in meters (0 for identical points)
    """
    lat1 = math.radians(lat1)
    lon1 = math.radians(lon1)
    lat2 = math.radians(lat2)
    lon2 = math.radians(lon2)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = (
        math.sin(dlat / 2) ** 2 +
        math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_METERS * c


# =============================================================================
# GRADE CALCULATIONS
# =============================================================================

def calculate_grade(elevation_change: float, distance: float) -> float:
    """
    Calculate grade in percent, rounded to two decimals.

    A zero (or negative) distance yields a grade of 0 rather than raising.
    """
    if distance <= 0:
        return 0.0
    return round(elevation_change / distance * PERCENT, GRADE_DECIMALS)


def average_grade(total_elevation_change: float, total_distance: float) -> float:
    """Average grade of a split in percent."""
    return calculate_grade(total_elevation_change, total_distance)


# =============================================================================
# UNIT CONVERSIONS
# =============================================================================

def meters_to_kilometers(distance_m: float) -> float:
    """Convert meters to kilometers."""
    return distance_m / METERS_PER_KILOMETER
