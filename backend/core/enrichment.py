"""
Trackpoint enrichment.

Adds cumulative distance and instantaneous grade to each recorded point.
The per-step values computed here are shared with the split detector so
the whole track is measured once.
"""

from typing import NamedTuple, Optional

from core.calculations import calculate_distance, calculate_grade
from core.constants import DISTANCE_DECIMALS
from core.models.trackpoint import RawPoint, EnrichedPoint


class TrackStep(NamedTuple):
    """Distance and elevation change between two consecutive points."""
    distance: float
    elevation_change: Optional[float]  # None when either elevation is absent


def measure_step(previous: RawPoint, current: RawPoint) -> TrackStep:
    """
    Measure the step from one point to the next.

    Args:
        previous: The preceding point
        current: The point being enriched

    Returns:
        TrackStep with distance in meters and elevation change in meters
    """
    distance = calculate_distance(
        previous.latitude, previous.longitude,
        current.latitude, current.longitude
    )

    if previous.has_elevation and current.has_elevation:
        elevation_change = current.elevation - previous.elevation
    else:
        elevation_change = None

    return TrackStep(distance=distance, elevation_change=elevation_change)


def enrich_point(point: RawPoint, cumulative_distance: float,
                 step: Optional[TrackStep]) -> EnrichedPoint:
    """
    Build the enriched point for a raw point.

    Args:
        point: Raw point
        cumulative_distance: Distance from the start up to and including this point
        step: Step from the previous point, or None for the first point

    Returns:
        EnrichedPoint with rounded distance and grade
    """
    grade = 0.0
    if step is not None and step.elevation_change is not None:
        grade = calculate_grade(step.elevation_change, step.distance)

    return EnrichedPoint(
        latitude=point.latitude,
        longitude=point.longitude,
        elevation=point.elevation,
        distance_from_start=round(cumulative_distance, DISTANCE_DECIMALS),
        grade=grade,
    )

