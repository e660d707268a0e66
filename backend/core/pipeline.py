"""
Track processing pipeline.

Runs the trackpoint enricher and the split detector in lockstep over a
single pass of the track, then finalizes and merges the raw splits.
"""

import logging
from dataclasses import dataclass
from typing import List

from core.enrichment import measure_step, enrich_point
from core.models.split import Split
from core.models.trackpoint import RawPoint, EnrichedPoint
from core.splits.detector import (
    SegmentationState, update_split_state, advance_state, finish_splits
)
from core.splits.merger import merge_adjacent_splits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackProcessingResult:
    """Enriched trackpoints and final splits of one track."""
    trackpoints: List[EnrichedPoint]
    splits: List[Split]


def process_track(points: List[RawPoint]) -> TrackProcessingResult:
    """
    Enrich a track and segment it into ascent/descent splits.

    Args:
        points: Raw points in recording order (may be empty)

    Returns:
        TrackProcessingResult with one enriched point per input point and
        the final, type-alternating split list
    """
    state = SegmentationState()
    trackpoints = []

    for point in points:
        step = None
        if state.prev_point is not None:
            step = measure_step(state.prev_point, point)
            update_split_state(state, step)

        advance_state(state, point, step)
        trackpoints.append(enrich_point(point, state.cumulative_distance, step))

    raw_splits = finish_splits(state)
    splits = merge_adjacent_splits(raw_splits)

    logger.info(f"Processed {len(trackpoints)} trackpoints over "
                f"{state.cumulative_distance:.1f}m: {len(raw_splits)} raw splits, "
                f"{len(splits)} final splits")

    return TrackProcessingResult(trackpoints=trackpoints, splits=splits)
