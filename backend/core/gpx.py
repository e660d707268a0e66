"""
GPX file parsing and handling.

This module contains functions for loading, parsing, and processing GPX files
into the point table consumed by the split pipeline.
"""

import os
import gpxpy
import gpxpy.gpx
import pandas as pd
import logging
from typing import Tuple, Dict, Any

from core.validation import validate_file_upload, validate_gpx_dataframe, ValidationError

logger = logging.getLogger(__name__)

TRACK_COLUMNS = ['latitude', 'longitude', 'elevation']


def load_gpx_file(gpx_file) -> Tuple[pd.DataFrame, Dict[str, Any]]:
    """
    Load and parse a GPX file into a pandas DataFrame with validation.

    Every track point of every track and segment is collected in document
    order. Points without an <ele> element get NaN elevation.

    Args:
        gpx_file: A file-like object containing GPX data

    Returns:
        tuple: (DataFrame with latitude/longitude/elevation, dict with metadata)

    Raises:
        ValidationError: If file validation or parsing fails
    """
    validate_file_upload(gpx_file)

    try:
        gpx = gpxpy.parse(gpx_file)
    except gpxpy.gpx.GPXException as e:
        raise ValidationError(f"Invalid GPX file: {str(e)}") from e
    except (ValueError, UnicodeDecodeError) as e:
        raise ValidationError(f"Invalid GPX file: {str(e)}") from e

    metadata = {
        'name': None,
        'description': None,
        'time': None,
        'author': None
    }

    # Try to get the track name from GPX data
    if gpx.tracks and gpx.tracks[0].name:
        metadata['name'] = gpx.tracks[0].name
    elif gpx.name:
        metadata['name'] = gpx.name
    elif isinstance(getattr(gpx_file, 'name', None), str):
        filename = os.path.basename(gpx_file.name)
        metadata['name'] = os.path.splitext(filename)[0]

    if gpx.description:
        metadata['description'] = gpx.description
    if gpx.time:
        metadata['time'] = gpx.time
    if gpx.author_name:
        metadata['author'] = gpx.author_name

    data = []
    for track in gpx.tracks:
        for segment in track.segments:
            for point in segment.points:
                data.append({
                    'latitude': point.latitude,
                    'longitude': point.longitude,
                    'elevation': point.elevation,
                })

    df = pd.DataFrame(data, columns=TRACK_COLUMNS)
    df['elevation'] = pd.to_numeric(df['elevation'], errors='coerce')

    validated_df = validate_gpx_dataframe(df, f"GPX file {metadata.get('name') or 'unknown'}")

    logger.info(f"Successfully loaded GPX file with {len(validated_df)} track points")
    return validated_df, metadata


def load_gpx_from_path(file_path: str) -> Tuple[pd.DataFrame, Dict[str, Any]]:
    """
    Load a GPX file from disk path.

    Args:
        file_path: Path to the GPX file

    Returns:
        tuple: (DataFrame with track data, dict with metadata)

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"GPX file not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        data, metadata = load_gpx_file(f)

        if not metadata['name']:
            metadata['name'] = os.path.splitext(os.path.basename(file_path))[0]

        return data, metadata
