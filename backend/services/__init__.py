"""
Services package.

Provides business logic layer between API and core algorithms.

Modules:
    track_analysis_service: Main analysis pipeline for GPX tracks
    download_service: Retrieval of GPX files from remote URLs
"""

from services.track_analysis_service import (
    analyze_track_data,
    analyze_track_file,
    analyze_split_distribution,
    TrackAnalysisResult,
)
from services.download_service import download_gpx, TrackDownloadError

__all__ = [
    'analyze_track_data',
    'analyze_track_file',
    'analyze_split_distribution',
    'TrackAnalysisResult',
    'download_gpx',
    'TrackDownloadError',
]
