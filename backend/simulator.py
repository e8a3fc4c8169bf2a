"""
Flight position simulator with linear interpolation between origin and destination.
"""

import os
import sys
import time
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Optional
from pathlib import Path

# Add parent directory to path for contracts import
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import Coordinates, Flight, FlightInfo
from metrics import FLIGHT_INFO_REQUESTS, FLIGHT_PROGRESS
from contracts.constants import (
    CRUISE_ALTITUDE_FT,
    CRUISE_GROUND_SPEED_KT,
    VERTICAL_SPEED_FPM,
    DEFAULT_FLIGHT_ID,
    DEFAULT_TAIL_NUMBER,
    DEFAULT_ORIGIN,
    DEFAULT_DESTINATION,
    DEFAULT_START_COORDS,
    DEFAULT_END_COORDS,
    DEFAULT_DURATION_MS,
    FLIGHT_STATUS_EN_ROUTE,
    FLIGHT_STATUS_LANDED,
    COORDINATE_DECIMALS,
    PROGRESS_DECIMALS,
)

logger = logging.getLogger(__name__)

FLIGHT_ID = os.getenv("FLIGHT_ID", DEFAULT_FLIGHT_ID)
FLIGHT_TAIL_NUMBER = os.getenv("FLIGHT_TAIL_NUMBER", DEFAULT_TAIL_NUMBER)
FLIGHT_DURATION_MS = int(os.getenv("FLIGHT_DURATION_MS", str(DEFAULT_DURATION_MS)))

Clock = Callable[[], int]


def to_fixed(value: float, decimals: int) -> str:
    """Format with exact ties rounded away from zero, like JavaScript toFixed."""
    if value == 0:
        value = 0.0  # no "-0.0000"
    quantum = Decimal(1).scaleb(-decimals)
    return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP), "f")


def system_clock() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def load_flight_from_env() -> Flight:
    """Build the simulated flight, applying environment overrides."""
    return Flight(
        id=FLIGHT_ID,
        origin=DEFAULT_ORIGIN,
        destination=DEFAULT_DESTINATION,
        start_coords=Coordinates(lat=DEFAULT_START_COORDS[0], lon=DEFAULT_START_COORDS[1]),
        end_coords=Coordinates(lat=DEFAULT_END_COORDS[0], lon=DEFAULT_END_COORDS[1]),
        duration_ms=FLIGHT_DURATION_MS,
        tail_number=FLIGHT_TAIL_NUMBER,
    )


class FlightSimulator:
    """
    Simulates a single flight flying a straight line from origin to destination.

    The reference (departure) time is captured once at construction and never
    changes. Progress is clamped at 1.0, so LANDED is terminal.
    """

    def __init__(
        self,
        flight: Flight,
        clock: Clock = system_clock,
        reference_time_ms: Optional[int] = None
    ):
        self.flight = flight
        self._clock = clock
        self.reference_time_ms = clock() if reference_time_ms is None else reference_time_ms
        self._landed_logged = False

    def get_progress(self) -> float:
        """Fraction of the flight duration elapsed, capped at 1.0."""
        elapsed = self._clock() - self.reference_time_ms
        return min(elapsed / self.flight.duration_ms, 1.0)

    def status(self) -> str:
        """EN_ROUTE or LANDED."""
        if self.get_progress() < 1:
            return FLIGHT_STATUS_EN_ROUTE
        return FLIGHT_STATUS_LANDED

    def get_flight_info(self) -> FlightInfo:
        """
        Compute the current interpolated position and synthetic telemetry.

        Returns:
            FlightInfo snapshot for the current clock reading
        """
        progress = self.get_progress()
        start = self.flight.start_coords
        end = self.flight.end_coords

        current_lat = start.lat + (end.lat - start.lat) * progress
        current_lon = start.lon + (end.lon - start.lon) * progress

        en_route = progress < 1
        status = FLIGHT_STATUS_EN_ROUTE if en_route else FLIGHT_STATUS_LANDED
        if not en_route and not self._landed_logged:
            self._landed_logged = True
            logger.info(f"Flight {self.flight.id} landed at {self.flight.destination}")

        FLIGHT_INFO_REQUESTS.labels(status=status).inc()
        FLIGHT_PROGRESS.set(progress)

        return FlightInfo(
            flight_id=self.flight.id,
            tail_number=self.flight.tail_number,
            altitude=CRUISE_ALTITUDE_FT if en_route else 0,
            ground_speed=CRUISE_GROUND_SPEED_KT if en_route else 0,
            latitude=to_fixed(current_lat, COORDINATE_DECIMALS),
            longitude=to_fixed(current_lon, COORDINATE_DECIMALS),
            vertical_speed=VERTICAL_SPEED_FPM,
            departure_time=self.reference_time_ms,
            progress=f"{to_fixed(progress * 100, PROGRESS_DECIMALS)}%",
        )
