"""
Mock Flight API Contracts Package

Provides shared constants and validation for the HTTP response contract.
"""

from contracts.constants import *
from contracts.validation import (
    FlightInfoResponse,
    is_cruise_telemetry,
    validate_flight_info_response,
)

__all__ = [
    # Constants
    "API_VERSION",
    "API_PATH_FLIGHT_INFO",
    "API_PATH_HEALTH",
    "API_PATH_METRICS",
    "FLIGHT_STATUS_EN_ROUTE",
    "FLIGHT_STATUS_LANDED",
    "CRUISE_ALTITUDE_FT",
    "CRUISE_GROUND_SPEED_KT",
    "VERTICAL_SPEED_FPM",
    "DEFAULT_FLIGHT_ID",
    "DEFAULT_TAIL_NUMBER",
    "DEFAULT_DURATION_MS",
    # Models
    "FlightInfoResponse",
    # Validators
    "is_cruise_telemetry",
    "validate_flight_info_response",
]
