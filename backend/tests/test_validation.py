"""
Tests for ingestion-boundary validation.
"""

import io
import pytest
import pandas as pd

from config.settings import UploadConfig
from core.validation import (
    ValidationError,
    FileTooLargeError,
    validate_gpx_dataframe,
    validate_file_upload,
    validate_upload_content,
    validate_gpx_url,
    has_gpx_extension,
)


class TestValidateGpxDataframe:

    def test_empty_dataframe_is_valid(self):
        df = pd.DataFrame(columns=['latitude', 'longitude', 'elevation'])
        assert validate_gpx_dataframe(df).empty

    def test_none_raises(self):
        with pytest.raises(ValidationError):
            validate_gpx_dataframe(None)

    def test_missing_columns(self):
        with pytest.raises(ValidationError, match="Missing required columns"):
            validate_gpx_dataframe(pd.DataFrame({'latitude': [45.0]}))

    def test_invalid_latitude(self):
        df = pd.DataFrame({'latitude': [45.0, 91.0], 'longitude': [6.0, 6.0]})
        with pytest.raises(ValidationError, match="invalid latitude"):
            validate_gpx_dataframe(df)

    def test_invalid_longitude(self):
        df = pd.DataFrame({'latitude': [45.0], 'longitude': [-181.0]})
        with pytest.raises(ValidationError, match="invalid longitude"):
            validate_gpx_dataframe(df)

    @pytest.mark.parametrize("bad_elevation", [float('inf'), float('-inf')])
    def test_infinite_elevation_rejected(self, bad_elevation):
        df = pd.DataFrame({'latitude': [45.0, 45.01], 'longitude': [6.0, 6.0],
                           'elevation': [bad_elevation, 5.0]})
        with pytest.raises(ValidationError, match="1 non-finite elevation values"):
            validate_gpx_dataframe(df)

    def test_missing_elevation_is_not_non_finite(self):
        df = pd.DataFrame({'latitude': [45.0, 45.01], 'longitude': [6.0, 6.0],
                           'elevation': [float('nan'), 5.0]})
        assert len(validate_gpx_dataframe(df)) == 2

    def test_single_point_is_valid(self):
        df = pd.DataFrame({'latitude': [45.0], 'longitude': [6.0], 'elevation': [float('nan')]})
        assert len(validate_gpx_dataframe(df)) == 1


class TestFileChecks:

    @pytest.mark.parametrize("name,expected", [
        ("track.gpx", True),
        ("TRACK.GPX", True),
        ("/data/ride.Gpx", True),
        ("track.kml", False),
        ("gpx", False),
        ("", False),
        (None, False),
    ])
    def test_has_gpx_extension(self, name, expected):
        assert has_gpx_extension(name) is expected

    def test_no_file(self):
        with pytest.raises(ValidationError, match="No file uploaded"):
            validate_file_upload(None)

    def test_wrong_extension_rejected(self):
        file_obj = io.BytesIO(b"<kml/>")
        file_obj.name = "track.kml"
        with pytest.raises(ValidationError, match="Invalid file type"):
            validate_file_upload(file_obj)

    def test_extensions_come_from_upload_config(self, monkeypatch):
        monkeypatch.setattr(UploadConfig, "ALLOWED_EXTENSIONS", ['.gpx', '.xml'])
        assert has_gpx_extension("track.xml") is True
        assert has_gpx_extension("track.kml") is False

    def test_nameless_file_passes(self):
        validate_file_upload(io.BytesIO(b"<gpx/>"))

    def test_content_too_small(self):
        with pytest.raises(ValidationError, match="empty or corrupted"):
            validate_upload_content(b"", min_size=10, max_size=100)

    def test_content_too_large(self):
        with pytest.raises(FileTooLargeError, match="File too large"):
            validate_upload_content(b"x" * 101, min_size=10, max_size=100)


class TestValidateGpxUrl:

    def test_valid_url(self):
        assert validate_gpx_url(" https://example.com/tracks/ride.gpx ") == \
            "https://example.com/tracks/ride.gpx"

    def test_query_string_is_ignored_for_extension(self):
        assert validate_gpx_url("http://example.com/ride.GPX?download=1")

    @pytest.mark.parametrize("url", ["", "   ", None, "not a url", "ftp://example.com/a.gpx", "https:///a.gpx"])
    def test_invalid_url(self, url):
        with pytest.raises(ValidationError, match="Invalid URL provided"):
            validate_gpx_url(url)

    def test_url_must_point_to_gpx(self):
        with pytest.raises(ValidationError, match="URL must point to a GPX file"):
            validate_gpx_url("https://example.com/ride.fit")
