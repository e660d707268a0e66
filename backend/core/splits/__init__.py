"""
Splits package.

This package contains the ascent/descent split detection and merging.
Clean, focused interface with no circular dependencies.
"""

# Split detection state machine
from .detector import (
    OpenSplit,
    SegmentationState,
    update_split_state,
    advance_state,
    finish_splits,
)

# Post-processing
from .merger import merge_adjacent_splits

# Split models
from core.models.split import Split, SplitType, splits_to_dataframe

__all__ = [
    # Detection
    'OpenSplit',
    'SegmentationState',
    'update_split_state',
    'advance_state',
    'finish_splits',

    # Merging
    'merge_adjacent_splits',

    # Models
    'Split',
    'SplitType',
    'splits_to_dataframe',
]
