"""
Data models for the flight definition and the flight info response.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Coordinates(BaseModel):
    """Geographic position."""
    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)


class Flight(BaseModel):
    """Static flight definition, immutable for the life of the process."""
    model_config = ConfigDict(frozen=True)

    id: str
    origin: str
    destination: str
    start_coords: Coordinates
    end_coords: Coordinates
    duration_ms: int = Field(gt=0)
    tail_number: str


class FlightInfo(BaseModel):
    """Current simulated flight state, serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    flight_id: str
    tail_number: str
    altitude: int
    ground_speed: int
    latitude: str
    longitude: str
    vertical_speed: int = 0
    departure_time: int
    progress: str
