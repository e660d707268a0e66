"""
Split merging.

Post-processing pass over the raw split list. The detector can emit two
consecutive splits of the same type when a short run was turned in place;
this pass coalesces them so the final list strictly alternates.
"""

import logging
from typing import List

from core.models.split import Split

logger = logging.getLogger(__name__)


def merge_adjacent_splits(splits: List[Split]) -> List[Split]:
    """
    Merge each split into the previous one when both have the same type.

    Args:
        splits: Raw splits in track order

    Returns:
        Splits with no two neighbours of the same type
    """
    if len(splits) <= 1:
        return list(splits)

    merged = []
    current = splits[0]

    for split in splits[1:]:
        if split.type == current.type:
            current = current.merge(split)
        else:
            merged.append(current)
            current = split

    merged.append(current)

    if len(merged) != len(splits):
        logger.debug(f"Merged {len(splits)} raw splits into {len(merged)}")
    return merged

