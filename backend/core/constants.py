"""
Constants for the elevation splits application.

This module contains all the mathematical, algorithmic, and domain-specific
constants used throughout the codebase. Constants are grouped by their purpose
and documented with their units where applicable.

The split thresholds are fixed properties of the algorithm and are not
user-configurable.
"""

# =============================================================================
# GEODESY
# =============================================================================

EARTH_RADIUS_METERS = 6371000  # Mean Earth radius used by the haversine formula

# =============================================================================
# CONVERSION FACTORS
# =============================================================================

METERS_PER_KILOMETER = 1000
PERCENT = 100  # Grade is expressed as rise / run * 100

# =============================================================================
# SPLIT DETECTION THRESHOLDS
# =============================================================================

ELEVATION_CHANGE_THRESHOLD_METERS = 1  # Minimum step elevation change that counts as a direction
SPLIT_MIN_DISTANCE_METERS = 400  # Minimum distance for a split to stand on its own

# =============================================================================
# OUTPUT PRECISION
# =============================================================================

GRADE_DECIMALS = 2
DISTANCE_DECIMALS = 2
ELEVATION_DECIMALS = 2

# =============================================================================
# COORDINATE BOUNDS (degrees)
# =============================================================================

MIN_LATITUDE = -90
MAX_LATITUDE = 90
MIN_LONGITUDE = -180
MAX_LONGITUDE = 180

# =============================================================================
# VALIDATION
# =============================================================================

assert ELEVATION_CHANGE_THRESHOLD_METERS > 0, \
    "Elevation change threshold must be positive"
assert SPLIT_MIN_DISTANCE_METERS > 0, \
    "Split minimum distance must be positive"
