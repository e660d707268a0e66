"""
Application settings and configuration.

This module contains application-specific configuration and defaults.
For algorithmic constants, see core.constants module.
"""

import os
import logging
from typing import Dict, Any

# Import algorithmic constants from core module
from core.constants import (
    EARTH_RADIUS_METERS,
    ELEVATION_CHANGE_THRESHOLD_METERS,
    SPLIT_MIN_DISTANCE_METERS,
    GRADE_DECIMALS,
)

# App information
APP_NAME = "Elevation Splits"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Split GPS tracks into sustained ascents and descents"
SERVICE_ID = "elevation-splits-api"

# Server
API_HOST = os.environ.get("SPLITS_API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("SPLITS_API_PORT", "8000"))

# Frontends allowed to call the API
CORS_ORIGINS = [
    "http://localhost:3000",  # Frontend dev server
    "http://localhost:5173",  # Vite dev server
]

# Upload limits
MAX_UPLOAD_SIZE_BYTES = 10 * 1024 * 1024  # 10MB
MIN_UPLOAD_SIZE_BYTES = 30  # Smallest plausible <gpx/> document

# URL retrieval
DOWNLOAD_TIMEOUT_SECONDS = 15.0

# Logging configuration
LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    "handlers": [
        logging.StreamHandler(),
    ]
}


# =============== Configuration Classes ===============
# These classes provide typed access to configuration sections

class SplitConfig:
    """Fixed parameters of split detection (not user-configurable)."""
    ELEVATION_CHANGE_THRESHOLD = ELEVATION_CHANGE_THRESHOLD_METERS
    MIN_SPLIT_DISTANCE = SPLIT_MIN_DISTANCE_METERS
    EARTH_RADIUS = EARTH_RADIUS_METERS
    GRADE_DECIMALS = GRADE_DECIMALS

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Get split configuration as a dictionary."""
        return {
            'elevation_change_threshold_m': cls.ELEVATION_CHANGE_THRESHOLD,
            'min_split_distance_m': cls.MIN_SPLIT_DISTANCE,
            'earth_radius_m': cls.EARTH_RADIUS,
            'grade_decimals': cls.GRADE_DECIMALS,
        }


class UploadConfig:
    """Configuration parameters for file ingestion."""
    MAX_SIZE = MAX_UPLOAD_SIZE_BYTES
    MIN_SIZE = MIN_UPLOAD_SIZE_BYTES
    DOWNLOAD_TIMEOUT = DOWNLOAD_TIMEOUT_SECONDS
    ALLOWED_EXTENSIONS = ['.gpx']

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Get upload configuration as a dictionary."""
        return {
            'max_size_bytes': cls.MAX_SIZE,
            'min_size_bytes': cls.MIN_SIZE,
            'download_timeout_seconds': cls.DOWNLOAD_TIMEOUT,
            'allowed_extensions': cls.ALLOWED_EXTENSIONS,
        }
