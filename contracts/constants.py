"""
Shared constants for the mock flight services.

This module provides a single source of truth for:
- HTTP API paths
- Flight status values
- Synthetic telemetry values

All services should import from this module to ensure consistency.
"""

# API Version
API_VERSION = "v1"

# HTTP API Paths
API_PATH_FLIGHT_INFO = f"/api/{API_VERSION}/flight/info"
API_PATH_HEALTH = "/health"
API_PATH_METRICS = "/metrics"

# Flight Status
FLIGHT_STATUS_EN_ROUTE = "EN_ROUTE"
FLIGHT_STATUS_LANDED = "LANDED"

# Synthetic telemetry (feet / knots)
CRUISE_ALTITUDE_FT = 35000
CRUISE_GROUND_SPEED_KT = 520
VERTICAL_SPEED_FPM = 0

# Default flight definition
DEFAULT_FLIGHT_ID = "AA123"
DEFAULT_TAIL_NUMBER = "N12345"
DEFAULT_ORIGIN = "JFK"
DEFAULT_DESTINATION = "LAX"
DEFAULT_START_COORDS = (40.6413, -73.7781)
DEFAULT_END_COORDS = (33.9416, -118.4085)
DEFAULT_DURATION_MS = 6 * 60 * 60 * 1000  # 6 hours

# Response formatting
COORDINATE_DECIMALS = 4
PROGRESS_DECIMALS = 2
