"""
GPX download service.

Retrieves a GPX file from a remote URL so it can be analyzed exactly like an
uploaded file.
"""

import io
import logging
import posixpath
from urllib.parse import urlparse

import requests

from config.settings import DOWNLOAD_TIMEOUT_SECONDS, MAX_UPLOAD_SIZE_BYTES, MIN_UPLOAD_SIZE_BYTES
from core.validation import ValidationError, validate_gpx_url, validate_upload_content

logger = logging.getLogger(__name__)


class TrackDownloadError(ValidationError):
    """Raised when a GPX file cannot be retrieved from its URL."""
    pass


def download_gpx(url: str,
                 timeout: float = DOWNLOAD_TIMEOUT_SECONDS,
                 max_size: int = MAX_UPLOAD_SIZE_BYTES) -> io.BytesIO:
    """
    Download a GPX file and return it as an in-memory file.

    Args:
        url: URL of the .gpx resource
        timeout: Request timeout in seconds
        max_size: Maximum accepted size in bytes

    Returns:
        BytesIO with the file content; its 'name' is the URL's file name

    Raises:
        ValidationError: If the URL is invalid or the content is unusable
        TrackDownloadError: If the request fails
    """
    url = validate_gpx_url(url)

    logger.info(f"Downloading GPX file from {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"Download failed for {url}: {e}")
        raise TrackDownloadError("Failed to download GPX file from URL") from e

    content = response.content
    validate_upload_content(content, MIN_UPLOAD_SIZE_BYTES, max_size)

    file_obj = io.BytesIO(content)
    file_obj.name = posixpath.basename(urlparse(url).path)

    logger.info(f"Downloaded {len(content)} bytes from {url}")
    return file_obj
