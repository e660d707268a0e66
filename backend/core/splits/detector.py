"""
Split detection state machine.

This module detects raw ascent/descent split boundaries while the track is
walked point by point. Each function takes the segmentation state explicitly
so the transitions can be tested independently of the pipeline.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from core.calculations import average_grade
from core.constants import ELEVATION_CHANGE_THRESHOLD_METERS, SPLIT_MIN_DISTANCE_METERS
from core.enrichment import TrackStep
from core.models.split import Split, SplitType
from core.models.trackpoint import RawPoint

logger = logging.getLogger(__name__)


@dataclass
class OpenSplit:
    """A split that is still accumulating distance and elevation change."""
    type: SplitType
    start_distance: float
    start_elevation: float
    total_elevation_change: float = 0.0
    total_distance: float = 0.0

    def accumulate(self, distance: float, elevation_change: float) -> None:
        self.total_distance += distance
        self.total_elevation_change += elevation_change

    def close(self, end_distance: float, end_elevation: float) -> Split:
        """Freeze the open split at the given end point."""
        return Split(
            type=self.type,
            start_distance=self.start_distance,
            end_distance=end_distance,
            start_elevation=self.start_elevation,
            end_elevation=end_elevation,
            total_elevation_change=self.total_elevation_change,
            total_distance=self.total_distance,
            average_grade=average_grade(self.total_elevation_change, self.total_distance),
        )


@dataclass
class SegmentationState:
    """
    Accumulator threaded through the single pass over the track.

    cumulative_distance is the distance at prev_point, i.e. the boundary
    where a split opened or closed on the current step begins.
    last_elevation is the most recent elevation seen, used to end a split
    when the final points carry no elevation.
    """
    cumulative_distance: float = 0.0
    prev_point: Optional[RawPoint] = None
    last_elevation: Optional[float] = None
    open_split: Optional[OpenSplit] = None
    closed_splits: List[Split] = field(default_factory=list)


def start_split(split_type: SplitType, state: SegmentationState) -> OpenSplit:
    """Start a split of the given type at the previous point."""
    return OpenSplit(
        type=split_type,
        start_distance=state.cumulative_distance,
        start_elevation=state.prev_point.elevation,
    )


def update_split_state(state: SegmentationState, step: TrackStep,
                       distance_threshold: float = SPLIT_MIN_DISTANCE_METERS,
                       elevation_threshold: float = ELEVATION_CHANGE_THRESHOLD_METERS) -> None:
    """
    Apply one step of the split state machine.

    Must be called before state.cumulative_distance and state.prev_point are
    advanced to the current point. Steps without elevation on both ends are
    ignored.

    Args:
        state: Segmentation state positioned at the previous point
        step: Step from the previous point to the current one
        distance_threshold: Minimum distance for a split to be closed on its own
        elevation_threshold: Minimum elevation change that can start or turn a split
    """
    elevation_change = step.elevation_change
    if elevation_change is None:
        return

    significant = abs(elevation_change) >= elevation_threshold
    current = state.open_split

    if current is None:
        if significant:
            state.open_split = start_split(
                SplitType.from_elevation_change(elevation_change), state
            )
            logger.debug(f"Opened {state.open_split.type.value} split at "
                         f"{state.cumulative_distance:.1f}m")
    else:
        new_type = SplitType.from_elevation_change(elevation_change)

        if new_type != current.type and significant:
            if current.total_distance >= distance_threshold:
                closed = current.close(state.cumulative_distance, state.prev_point.elevation)
                state.closed_splits.append(closed)
                state.open_split = start_split(new_type, state)
                logger.debug(f"Closed {closed.type.value} split "
                             f"{closed.start_distance:.1f}-{closed.end_distance:.1f}m")
            else:
                # Too short to stand alone: the run continues in the new direction
                current.type = new_type
                current.total_elevation_change = 0.0

    if state.open_split is not None:
        state.open_split.accumulate(step.distance, elevation_change)


def advance_state(state: SegmentationState, point: RawPoint,
                  step: Optional[TrackStep]) -> None:
    """Move the state forward to the current point."""
    if step is not None:
        state.cumulative_distance += step.distance
    if point.has_elevation:
        state.last_elevation = point.elevation
    state.prev_point = point


def finish_splits(state: SegmentationState,
                  distance_threshold: float = SPLIT_MIN_DISTANCE_METERS) -> List[Split]:
    """
    Close the split still open at the end of the track.

    A trailing split that reaches the threshold is appended. A shorter one is
    folded into the last closed split, or dropped when there is none.

    Args:
        state: Segmentation state positioned at the last point
        distance_threshold: Minimum distance for a split to be closed on its own

    Returns:
        The raw split list, in track order
    """
    splits = list(state.closed_splits)
    current = state.open_split

    if current is None or current.total_distance <= 0:
        return splits

    end_distance = state.cumulative_distance
    end_elevation = state.last_elevation

    if current.total_distance >= distance_threshold:
        splits.append(current.close(end_distance, end_elevation))
    elif splits:
        last = splits.pop()
        splits.append(last.extend(
            end_distance=end_distance,
            end_elevation=end_elevation,
            distance=current.total_distance,
            elevation_change=current.total_elevation_change,
        ))
        logger.debug(f"Merged trailing {current.total_distance:.1f}m fragment "
                     f"into preceding {last.type.value} split")
    else:
        logger.debug(f"Discarded trailing {current.total_distance:.1f}m fragment "
                     f"below {distance_threshold}m threshold")

    return splits
