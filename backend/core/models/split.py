"""
Split data models.

This module defines the data structures for ascent and descent splits
detected in GPS tracks.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Dict, Any
import pandas as pd

from core.calculations import average_grade
from core.constants import DISTANCE_DECIMALS, ELEVATION_DECIMALS


class SplitType(str, Enum):
    """Direction of a split."""
    ASCENT = "ascent"
    DESCENT = "descent"

    @classmethod
    def from_elevation_change(cls, elevation_change: float) -> "SplitType":
        """Ascent for a positive change, descent otherwise (including 0)."""
        return cls.ASCENT if elevation_change > 0 else cls.DESCENT


@dataclass(frozen=True)
class Split:
    """
    Represents a closed ascent or descent split.

    A split is a contiguous stretch of the track with one directional
    elevation trend. Distances and elevations are in meters, the average
    grade in percent.
    """
    type: SplitType
    start_distance: float
    end_distance: float
    start_elevation: float
    end_elevation: float
    total_elevation_change: float
    total_distance: float
    average_grade: float

    def extend(self, end_distance: float, end_elevation: float,
               distance: float, elevation_change: float) -> "Split":
        """
        Return a copy extended to a new end point.

        The added distance and elevation change are summed into the totals
        and the average grade is recomputed.
        """
        total_distance = self.total_distance + distance
        total_elevation_change = self.total_elevation_change + elevation_change
        return Split(
            type=self.type,
            start_distance=self.start_distance,
            end_distance=end_distance,
            start_elevation=self.start_elevation,
            end_elevation=end_elevation,
            total_elevation_change=total_elevation_change,
            total_distance=total_distance,
            average_grade=average_grade(total_elevation_change, total_distance),
        )

    def merge(self, other: "Split") -> "Split":
        """Absorb a following split into this one, keeping this split's type."""
        return self.extend(
            end_distance=other.end_distance,
            end_elevation=other.end_elevation,
            distance=other.total_distance,
            elevation_change=other.total_elevation_change,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert split to dictionary with every numeric field rounded."""
        return {
            'type': self.type.value,
            'start_distance': round(self.start_distance, DISTANCE_DECIMALS),
            'end_distance': round(self.end_distance, DISTANCE_DECIMALS),
            'start_elevation': round(self.start_elevation, ELEVATION_DECIMALS),
            'end_elevation': round(self.end_elevation, ELEVATION_DECIMALS),
            'total_elevation_change': round(self.total_elevation_change, ELEVATION_DECIMALS),
            'total_distance': round(self.total_distance, DISTANCE_DECIMALS),
            'average_grade': self.average_grade,
        }


def splits_to_dataframe(splits: List[Split]) -> pd.DataFrame:
    """
    Convert a list of splits to a pandas DataFrame.

    Args:
        splits: List of Split objects

    Returns:
        pandas DataFrame with split data
    """
    if not splits:
        return pd.DataFrame()

    return pd.DataFrame([split.to_dict() for split in splits])
