"""
Input validation utilities for the ingestion boundary.

This module provides validation functions that run before the split pipeline
is invoked, so malformed input is reported as an error instead of reaching
the core algorithms.
"""

import numpy as np
import pandas as pd
import logging
from typing import Any, Optional
from pathlib import Path
from urllib.parse import urlparse

from config.settings import UploadConfig
from core.constants import MIN_LATITUDE, MAX_LATITUDE, MIN_LONGITUDE, MAX_LONGITUDE

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Custom exception for validation errors."""
    pass


class FileTooLargeError(ValidationError):
    """Raised when an uploaded or downloaded file exceeds the size limit."""
    pass


def validate_gpx_dataframe(df: pd.DataFrame, context: str = "GPX data") -> pd.DataFrame:
    """
    Validate a GPX DataFrame has required columns and valid coordinates.

    An empty DataFrame is valid: a track without points yields empty results.

    Args:
        df: DataFrame to validate
        context: Context description for error messages

    Returns:
        Validated DataFrame

    Raises:
        ValidationError: If validation fails
    """
    if df is None:
        raise ValidationError(f"{context}: DataFrame is None")

    if df.empty:
        logger.warning(f"{context}: no track points")
        return df

    required_columns = ['latitude', 'longitude']
    missing_columns = [col for col in required_columns if col not in df.columns]

    if missing_columns:
        raise ValidationError(f"{context}: Missing required columns: {missing_columns}")

    for col in required_columns:
        if df[col].isna().any():
            nan_count = df[col].isna().sum()
            raise ValidationError(f"{context}: {nan_count} missing values in {col} column")

    if not df['latitude'].between(MIN_LATITUDE, MAX_LATITUDE).all():
        invalid_count = (~df['latitude'].between(MIN_LATITUDE, MAX_LATITUDE)).sum()
        raise ValidationError(f"{context}: {invalid_count} invalid latitude values (must be -90 to 90)")

    if not df['longitude'].between(MIN_LONGITUDE, MAX_LONGITUDE).all():
        invalid_count = (~df['longitude'].between(MIN_LONGITUDE, MAX_LONGITUDE)).sum()
        raise ValidationError(f"{context}: {invalid_count} invalid longitude values (must be -180 to 180)")

    if 'elevation' in df.columns:
        elevation = pd.to_numeric(df['elevation'], errors='coerce')
        non_finite = np.isinf(elevation).sum()
        if non_finite:
            raise ValidationError(f"{context}: {non_finite} non-finite elevation values")

        missing_elevation = elevation.isna().sum()
        if missing_elevation:
            logger.info(f"{context}: {missing_elevation} of {len(df)} points have no elevation")

    logger.debug(f"{context}: Validation passed for {len(df)} data points")
    return df


def has_gpx_extension(name: Optional[str]) -> bool:
    """Check whether a file name or URL path has an allowed extension (any case)."""
    if not name:
        return False
    return Path(name).suffix.lower() in UploadConfig.ALLOWED_EXTENSIONS


def validate_file_upload(uploaded_file: Any) -> None:
    """
    Validate an uploaded file before processing.

    Args:
        uploaded_file: File-like object, optionally with a 'name'

    Raises:
        ValidationError: If file validation fails
    """
    if uploaded_file is None:
        raise ValidationError("No file uploaded")

    name = getattr(uploaded_file, 'name', None)
    if isinstance(name, str) and not has_gpx_extension(name):
        raise ValidationError("Invalid file type. Please upload a GPX file")

    logger.debug(f"File validation passed: {name or 'unknown'}")


def validate_upload_content(content: bytes, min_size: int, max_size: int) -> None:
    """
    Validate the raw bytes of an uploaded or downloaded track.

    Raises:
        FileTooLargeError: If content exceeds max_size
        ValidationError: If content is empty or smaller than min_size
    """
    if len(content) > max_size:
        raise FileTooLargeError(
            f"File too large. Maximum size is {max_size / 1024 / 1024:.0f}MB, "
            f"received {len(content) / 1024 / 1024:.1f}MB"
        )

    if len(content) < min_size:
        raise ValidationError("File appears to be empty or corrupted")


def validate_gpx_url(url: Optional[str]) -> str:
    """
    Validate a URL pointing to a GPX file.

    Args:
        url: URL string supplied by the caller

    Returns:
        The stripped URL

    Raises:
        ValidationError: If the URL is malformed or not a .gpx resource
    """
    if url is None or not url.strip():
        raise ValidationError("Invalid URL provided")

    url = url.strip()
    parsed = urlparse(url)

    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        raise ValidationError("Invalid URL provided")

    if not has_gpx_extension(parsed.path):
        raise ValidationError("URL must point to a GPX file")

    return url
