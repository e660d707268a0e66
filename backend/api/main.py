"""
FastAPI backend for Elevation Splits.

This provides REST API endpoints for splitting GPX tracks into sustained
ascents and descents, enabling framework-agnostic frontend development.
"""

from fastapi import FastAPI, UploadFile, File, Form
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from pydantic import BaseModel
from typing import Dict, List, Optional, Any
import logging
import io
import sys
import os

# Add parent directory to path to import our modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.settings import (
    APP_NAME, APP_VERSION, APP_DESCRIPTION, SERVICE_ID, CORS_ORIGINS,
    LOGGING_CONFIG, MAX_UPLOAD_SIZE_BYTES, MIN_UPLOAD_SIZE_BYTES,
    SplitConfig, UploadConfig
)

# Initialize logging
logging.basicConfig(**LOGGING_CONFIG)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=f"{APP_NAME} API",
    description=APP_DESCRIPTION,
    version=APP_VERSION
)

# Add CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Import our services
from services.track_analysis_service import analyze_track_file
from services.download_service import download_gpx, TrackDownloadError
from core.models.split import SplitType
from core.validation import (
    ValidationError, FileTooLargeError, has_gpx_extension, validate_upload_content
)


# Pydantic models for API responses
class SplitResponse(BaseModel):
    type: SplitType
    start_distance: float
    end_distance: float
    start_elevation: float
    end_elevation: float
    total_elevation_change: float
    total_distance: float
    average_grade: float


class TrackpointResponse(BaseModel):
    latitude: float
    longitude: float
    elevation: Optional[float]
    distance_from_start: float
    grade: float


class TrackAnalysisResponse(BaseModel):
    status: str
    splits: List[SplitResponse]
    trackpoints: List[TrackpointResponse]
    track_summary: Optional[Dict[str, Any]] = None


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    """Error envelope returned instead of an analysis result."""
    return JSONResponse(status_code=status_code, content={"error": message})


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": f"{APP_NAME} API",
        "version": APP_VERSION,
        "endpoints": {
            "POST /api/analyze-track": "Split a GPX track (upload or URL) into ascents and descents",
            "GET /api/config": "Split detection thresholds and upload limits",
            "GET /api/health": "Health check endpoint"
        }
    }


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": SERVICE_ID}


@app.get("/api/config")
async def get_config():
    """Get the fixed split thresholds and upload limits."""
    return {
        "splits": SplitConfig.as_dict(),
        "upload": UploadConfig.as_dict(),
    }


@app.post(
    "/api/analyze-track",
    response_model=TrackAnalysisResponse,
    response_model_exclude_unset=True
)
async def analyze_track(
    file: Optional[UploadFile] = File(None),
    gpx_url: Optional[str] = Form(None),
    include_summary: bool = False
):
    """
    Split a GPX track into ascents and descents.

    A URL takes precedence over an uploaded file when both are given.

    Args:
        file: GPX file to analyze
        gpx_url: URL of a GPX file to download and analyze
        include_summary: Add a track summary to the response

    Returns:
        Splits and enriched trackpoints, or {"error": message}
    """
    try:
        if gpx_url and gpx_url.strip():
            file_obj = await run_in_threadpool(download_gpx, gpx_url)
        elif file is not None and file.filename:
            if not has_gpx_extension(file.filename):
                return error_response("Invalid file type. Please upload a GPX file")

            content = await file.read()
            validate_upload_content(content, MIN_UPLOAD_SIZE_BYTES, MAX_UPLOAD_SIZE_BYTES)

            file_obj = io.BytesIO(content)
            file_obj.name = file.filename
        else:
            return error_response("No file uploaded or URL provided")

        logger.info(f"Processing file: {file_obj.name}")
        result = analyze_track_file(file_obj)

        return TrackAnalysisResponse(**result.to_response(include_summary=include_summary))

    except FileTooLargeError as e:
        logger.warning(f"Rejected oversized track: {e}")
        return error_response(str(e), status_code=413)
    except TrackDownloadError as e:
        return error_response(str(e), status_code=502)
    except ValidationError as e:
        logger.warning(f"Invalid track input: {e}")
        return error_response(str(e))
    except Exception as e:
        logger.error(f"Error analyzing track: {str(e)}")
        return error_response(f"Error analyzing track: {str(e)}", status_code=500)


if __name__ == "__main__":
    import uvicorn
    from config.settings import API_HOST, API_PORT
    uvicorn.run(app, host=API_HOST, port=API_PORT)
