"""
Shared track analysis service.

This module provides a unified analysis pipeline so the API and the command
line scripts produce the same splits and trackpoints for a GPX track.
"""

import pandas as pd
import numpy as np
import logging
from typing import Dict, Any, Optional, List

from core.calculations import meters_to_kilometers
from core.gpx import load_gpx_file
from core.models.split import Split, SplitType, splits_to_dataframe
from core.models.trackpoint import EnrichedPoint, dataframe_to_points, trackpoints_to_dataframe
from core.pipeline import process_track

logger = logging.getLogger(__name__)

STATUS_SUCCESS = 'success'


class TrackAnalysisResult:
    """Container for track analysis results."""

    def __init__(self,
                 trackpoints: List[EnrichedPoint],
                 splits: List[Split],
                 metadata: Dict[str, Any],
                 filename: str):
        self.trackpoints = trackpoints
        self.splits = splits
        self.metadata = metadata
        self.filename = filename

        # Calculate derived metrics
        self._calculate_summary_metrics()

    def _calculate_summary_metrics(self) -> None:
        """Calculate summary metrics from trackpoints and splits."""
        points = trackpoints_to_dataframe(self.trackpoints)
        split_frame = splits_to_dataframe(self.splits)

        self.point_count = len(points)
        self.total_distance = float(points['distance_from_start'].iloc[-1]) if not points.empty else 0.0

        elevations = points['elevation']
        # Only steps with elevation on both ends count towards gain/loss
        elevation_steps = elevations.diff().dropna()
        self.elevation_gain = float(elevation_steps[elevation_steps > 0].sum())
        self.elevation_loss = float(-elevation_steps[elevation_steps < 0].sum())

        if elevations.notna().any():
            self.min_elevation = float(elevations.min())
            self.max_elevation = float(elevations.max())
        else:
            self.min_elevation = None
            self.max_elevation = None

        self.max_grade = float(points['grade'].max()) if not points.empty else 0.0
        self.min_grade = float(points['grade'].min()) if not points.empty else 0.0

        if split_frame.empty:
            self.ascent_count = 0
            self.descent_count = 0
            self.ascent_distance = 0.0
            self.descent_distance = 0.0
            return

        ascents = split_frame[split_frame['type'] == SplitType.ASCENT.value]
        descents = split_frame[split_frame['type'] == SplitType.DESCENT.value]
        self.ascent_count = len(ascents)
        self.descent_count = len(descents)
        self.ascent_distance = float(ascents['total_distance'].sum())
        self.descent_distance = float(descents['total_distance'].sum())

    @property
    def summary(self) -> Dict[str, Any]:
        """Track summary for display alongside the splits."""
        return {
            'filename': self.filename,
            'name': self.metadata.get('name'),
            'point_count': self.point_count,
            'total_distance': round(self.total_distance, 2),
            'total_distance_km': round(meters_to_kilometers(self.total_distance), 3),
            'elevation_gain': round(self.elevation_gain, 2),
            'elevation_loss': round(self.elevation_loss, 2),
            'min_elevation': self.min_elevation,
            'max_elevation': self.max_elevation,
            'max_grade': self.max_grade,
            'min_grade': self.min_grade,
            'ascent_splits': self.ascent_count,
            'descent_splits': self.descent_count,
            'ascent_distance': round(self.ascent_distance, 2),
            'descent_distance': round(self.descent_distance, 2),
        }

    def to_response(self, include_summary: bool = False) -> Dict[str, Any]:
        """Build the result envelope returned to callers."""
        response = {
            'status': STATUS_SUCCESS,
            'splits': [split.to_dict() for split in self.splits],
            'trackpoints': [point.to_dict() for point in self.trackpoints],
        }
        if include_summary:
            response['track_summary'] = self.summary
        return response


def analyze_track_data(track_data: pd.DataFrame,
                       filename: str = "current_track.gpx",
                       metadata: Optional[Dict[str, Any]] = None) -> TrackAnalysisResult:
    """
    Analyze track data that's already loaded into a DataFrame.

    Args:
        track_data: DataFrame with latitude, longitude and elevation columns
        filename: Name for the track (for display purposes)
        metadata: Optional metadata dict

    Returns:
        TrackAnalysisResult: Complete analysis results
    """
    if metadata is None:
        metadata = {}

    logger.info(f"Analyzing track data for {filename} with {len(track_data)} points")

    points = dataframe_to_points(track_data)
    result = process_track(points)

    logger.info(f"Successfully analyzed {filename}: {len(result.splits)} splits")

    return TrackAnalysisResult(
        trackpoints=result.trackpoints,
        splits=result.splits,
        metadata=metadata,
        filename=filename,
    )


def analyze_track_file(file) -> TrackAnalysisResult:
    """
    Analyze a single track file using the standard pipeline.

    This function loads a GPX file and delegates to analyze_track_data
    for consistent analysis across all parts of the application.

    Args:
        file: File object to analyze

    Returns:
        TrackAnalysisResult: Complete analysis results

    Raises:
        ValidationError: If the file cannot be loaded
    """
    filename = getattr(file, 'name', None) or "uploaded.gpx"

    track_data, metadata = load_gpx_file(file)
    logger.info(f"Loaded {filename} with {len(track_data)} points")

    return analyze_track_data(
        track_data=track_data,
        filename=filename,
        metadata=metadata,
    )


def analyze_split_distribution(splits: List[Split]) -> Dict[str, Any]:
    """
    Analyze the distribution of detected splits.

    Args:
        splits: List of final splits

    Returns:
        Dictionary with distribution statistics (empty for no splits)
    """
    if not splits:
        return {}

    distances = [s.total_distance for s in splits]
    grades = [s.average_grade for s in splits]

    return {
        'count': len(splits),
        'total_distance_km': meters_to_kilometers(sum(distances)),
        'avg_split_distance_m': float(np.mean(distances)),
        'avg_abs_grade': float(np.mean(np.abs(grades))),
        'steepest_grade': float(max(grades, key=abs)),
        'distance_range': (min(distances), max(distances)),
        'grade_range': (min(grades), max(grades)),
    }
