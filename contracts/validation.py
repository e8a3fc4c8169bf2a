"""
Validation library for the mock flight API contract.

Provides Pydantic models matching the JSON responses for runtime validation.
Clients and tests should use these models to validate responses before use.
"""

from typing import Optional, Literal
from pydantic import BaseModel, ConfigDict, Field, model_validator
from contracts.constants import (
    CRUISE_ALTITUDE_FT,
    CRUISE_GROUND_SPEED_KT,
    FLIGHT_STATUS_EN_ROUTE,
    FLIGHT_STATUS_LANDED,
)


# ============================================================================
# Flight Info Response
# ============================================================================

class FlightInfoResponse(BaseModel):
    """Response body of GET /api/v1/flight/info."""
    model_config = ConfigDict(extra="forbid")

    flightId: str = Field(min_length=1)
    tailNumber: str = Field(min_length=1)
    altitude: float = Field(ge=0, description="Altitude in feet")
    groundSpeed: float = Field(ge=0, description="Ground speed in knots")
    latitude: str = Field(pattern=r"^-?\d{1,2}\.\d{4}$", description="Latitude, 4 decimals")
    longitude: str = Field(pattern=r"^-?\d{1,3}\.\d{4}$", description="Longitude, 4 decimals")
    verticalSpeed: Literal[0] = 0
    departureTime: int = Field(ge=0, description="Epoch milliseconds")
    progress: str = Field(pattern=r"^-?\d+\.\d{2}%$")

    @model_validator(mode="after")
    def check_landed_telemetry(self):
        """Altitude and ground speed drop to zero together."""
        if (self.altitude == 0) != (self.groundSpeed == 0):
            raise ValueError(
                f"Inconsistent telemetry: altitude={self.altitude}, groundSpeed={self.groundSpeed}"
            )
        return self

    @model_validator(mode="after")
    def check_coordinate_range(self):
        """Formatted coordinates must still be valid WGS84 degrees."""
        if not -90 <= float(self.latitude) <= 90:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not -180 <= float(self.longitude) <= 180:
            raise ValueError(f"Longitude out of range: {self.longitude}")
        return self

    @property
    def status(self) -> str:
        """EN_ROUTE while cruising, LANDED once telemetry is zeroed."""
        if self.altitude == 0 and self.groundSpeed == 0:
            return FLIGHT_STATUS_LANDED
        return FLIGHT_STATUS_EN_ROUTE

    @property
    def progress_ratio(self) -> float:
        """Progress as a fraction in [0, 1]."""
        return float(self.progress.rstrip("%")) / 100


def is_cruise_telemetry(response: FlightInfoResponse) -> bool:
    """True when the response reports the fixed cruise altitude and speed."""
    return (
        response.altitude == CRUISE_ALTITUDE_FT
        and response.groundSpeed == CRUISE_GROUND_SPEED_KT
    )


# ============================================================================
# Validation Functions
# ============================================================================

def validate_flight_info_response(data: dict) -> tuple[bool, Optional[FlightInfoResponse], Optional[str]]:
    """
    Validate FlightInfoResponse.
    
    Returns:
        (is_valid, response_or_none, error_message_or_none)
    """
    try:
        response = FlightInfoResponse(**data)
        return True, response, None
    except Exception as e:
        return False, None, str(e)
