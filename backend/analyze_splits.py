#!/usr/bin/env python3
"""
Print the ascent/descent splits of one or more GPX files.

Usage:
    python analyze_splits.py track.gpx [other.gpx ...]

For each file this prints the split table, the track summary and the split
distribution statistics.
"""

import sys
import logging
from pathlib import Path

# Add backend to path
backend_dir = Path(__file__).parent
sys.path.insert(0, str(backend_dir))

from config.settings import LOGGING_CONFIG
from core.gpx import load_gpx_from_path
from core.models.split import splits_to_dataframe
from core.validation import ValidationError
from services.track_analysis_service import analyze_track_data, analyze_split_distribution

# Set up logging
logging.basicConfig(
    level=LOGGING_CONFIG["level"],
    format='%(levelname)s: %(message)s'
)
logger = logging.getLogger(__name__)


def print_section_header(title: str, char: str = "-"):
    """Print a formatted section header."""
    print("\n" + char * 80)
    print(title)
    print(char * 80)


def analyze_file(path: str) -> bool:
    """Analyze one GPX file and print its splits. Returns False on failure."""
    print_section_header(f"TRACK: {path}", "=")

    try:
        track_data, metadata = load_gpx_from_path(path)
    except (FileNotFoundError, ValidationError) as e:
        logger.error(f"Failed to load {path}: {e}")
        return False

    result = analyze_track_data(track_data, filename=Path(path).name, metadata=metadata)

    print_section_header("SPLITS")
    splits = splits_to_dataframe(result.splits)
    if splits.empty:
        print("No splits detected")
    else:
        print(splits.to_string(index=False))

    print_section_header("SUMMARY")
    for key, value in result.summary.items():
        print(f"  {key}: {value}")

    distribution = analyze_split_distribution(result.splits)
    if distribution:
        print_section_header("DISTRIBUTION")
        for key, value in distribution.items():
            print(f"  {key}: {value}")

    return True


def main():
    """Analyze every GPX path given on the command line."""
    paths = sys.argv[1:]
    if not paths:
        print(__doc__)
        sys.exit(2)

    results = [analyze_file(path) for path in paths]
    sys.exit(0 if all(results) else 1)


if __name__ == "__main__":
    main()
