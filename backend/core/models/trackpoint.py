"""
Trackpoint data models.

This module defines the raw points read from a GPS track and the enriched
points produced by the pipeline.
"""

from dataclasses import dataclass
from typing import Optional, List, Dict, Any
import pandas as pd


@dataclass(frozen=True)
class RawPoint:
    """
    A recorded track point as read from the track file.

    Elevation is None when the file carries no elevation for the point.
    It is never replaced by 0, which would read as sea level.
    """
    latitude: float
    longitude: float
    elevation: Optional[float] = None

    @property
    def has_elevation(self) -> bool:
        return self.elevation is not None


@dataclass(frozen=True)
class EnrichedPoint:
    """A track point with its cumulative distance and grade."""
    latitude: float
    longitude: float
    elevation: Optional[float]
    distance_from_start: float  # Meters, rounded to 2 decimals
    grade: float  # Percent, rounded to 2 decimals; 0 when not computable

    def to_dict(self) -> Dict[str, Any]:
        """Convert trackpoint to dictionary for serialization."""
        return {
            'latitude': self.latitude,
            'longitude': self.longitude,
            'elevation': self.elevation,
            'distance_from_start': self.distance_from_start,
            'grade': self.grade,
        }


def dataframe_to_points(df: pd.DataFrame) -> List[RawPoint]:
    """
    Convert a track DataFrame to a list of RawPoint objects.

    Missing elevations (NaN or absent column) become None.

    Args:
        df: DataFrame with 'latitude', 'longitude' and optional 'elevation' columns

    Returns:
        List of RawPoint objects in row order
    """
    if df is None or df.empty:
        return []

    has_elevation_column = 'elevation' in df.columns
    points = []

    for row in df.itertuples(index=False):
        elevation = getattr(row, 'elevation') if has_elevation_column else None
        if elevation is not None and pd.isna(elevation):
            elevation = None

        points.append(RawPoint(
            latitude=float(row.latitude),
            longitude=float(row.longitude),
            elevation=float(elevation) if elevation is not None else None,
        ))

    return points


def trackpoints_to_dataframe(trackpoints: List[EnrichedPoint]) -> pd.DataFrame:
    """
    Convert enriched trackpoints to a pandas DataFrame.

    Absent elevations become NaN in the float 'elevation' column.
    """
    columns = ['latitude', 'longitude', 'elevation', 'distance_from_start', 'grade']
    if not trackpoints:
        return pd.DataFrame({col: pd.Series(dtype=float) for col in columns})

    df = pd.DataFrame([point.to_dict() for point in trackpoints], columns=columns)
    df['elevation'] = pd.to_numeric(df['elevation'], errors='coerce')
    return df
