"""
Unit tests for the flight position simulator.
"""

import logging
import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))

from models import Coordinates, Flight
from simulator import FlightSimulator, load_flight_from_env, system_clock, to_fixed


REFERENCE_MS = 1_000_000


@pytest.fixture
def flight():
    """Short equator-to-north flight, easy to reason about."""
    return Flight(
        id="TS001",
        origin="AAA",
        destination="BBB",
        start_coords=Coordinates(lat=0.0, lon=0.0),
        end_coords=Coordinates(lat=10.0, lon=-20.0),
        duration_ms=1000,
        tail_number="N00001",
    )


def make_simulator(flight, now_ms):
    return FlightSimulator(flight, clock=lambda: now_ms, reference_time_ms=REFERENCE_MS)


def test_reference_time_captured_from_clock(flight):
    simulator = FlightSimulator(flight, clock=lambda: 42)
    assert simulator.reference_time_ms == 42
    assert simulator.get_flight_info().departure_time == 42


def test_departure(flight):
    info = make_simulator(flight, REFERENCE_MS).get_flight_info()
    
    assert info.flight_id == "TS001"
    assert info.tail_number == "N00001"
    assert info.latitude == "0.0000"
    assert info.longitude == "0.0000"
    assert info.altitude == 35000
    assert info.ground_speed == 520
    assert info.vertical_speed == 0
    assert info.progress == "0.00%"


def test_midpoint_is_mean_of_endpoints(flight):
    info = make_simulator(flight, REFERENCE_MS + 500).get_flight_info()
    
    assert info.latitude == "5.0000"
    assert info.longitude == "-10.0000"
    assert info.progress == "50.00%"
    assert info.altitude == 35000


def test_midpoint_default_flight():
    flight = load_flight_from_env()
    info = make_simulator(flight, REFERENCE_MS + flight.duration_ms // 2).get_flight_info()
    
    assert float(info.latitude) == pytest.approx((40.6413 + 33.9416) / 2, abs=1e-4)
    assert float(info.longitude) == pytest.approx((-73.7781 + -118.4085) / 2, abs=1e-4)


def test_progress_rounding(flight):
    info = make_simulator(flight, REFERENCE_MS + 123).get_flight_info()
    assert info.progress == "12.30%"
    assert info.latitude == "1.2300"
    assert info.longitude == "-2.4600"


@pytest.mark.parametrize("elapsed_ms", [1000, 1001, 5000, 10**9])
def test_landed_after_duration(flight, elapsed_ms):
    simulator = make_simulator(flight, REFERENCE_MS + elapsed_ms)
    info = simulator.get_flight_info()
    
    assert simulator.get_progress() == 1.0
    assert simulator.status() == "LANDED"
    assert info.progress == "100.00%"
    assert info.altitude == 0
    assert info.ground_speed == 0
    assert info.latitude == "10.0000"
    assert info.longitude == "-20.0000"


def test_just_before_landing_is_en_route(flight):
    simulator = make_simulator(flight, REFERENCE_MS + 999)
    info = simulator.get_flight_info()
    
    assert simulator.status() == "EN_ROUTE"
    assert info.altitude == 35000
    assert info.progress == "99.90%"


def test_negative_elapsed_is_not_clamped(flight):
    simulator = make_simulator(flight, REFERENCE_MS - 100)
    info = simulator.get_flight_info()
    
    assert simulator.get_progress() == pytest.approx(-0.1)
    assert info.progress == "-10.00%"
    assert info.latitude == "-1.0000"
    assert info.altitude == 35000


def test_landed_is_terminal(flight):
    now = {"ms": REFERENCE_MS}
    simulator = FlightSimulator(flight, clock=lambda: now["ms"], reference_time_ms=REFERENCE_MS)
    
    statuses = []
    for step in range(0, 3000, 250):
        now["ms"] = REFERENCE_MS + step
        statuses.append(simulator.status())
    
    first_landed = statuses.index("LANDED")
    assert all(s == "LANDED" for s in statuses[first_landed:])
    assert all(s == "EN_ROUTE" for s in statuses[:first_landed])


def test_landing_logged_once(flight, caplog):
    simulator = make_simulator(flight, REFERENCE_MS + 2000)
    
    with caplog.at_level(logging.INFO, logger="simulator"):
        simulator.get_flight_info()
        simulator.get_flight_info()
    
    landed = [r for r in caplog.records if "landed" in r.getMessage()]
    assert len(landed) == 1
    assert "TS001" in landed[0].getMessage()


def test_serializes_with_camel_case(flight):
    payload = make_simulator(flight, REFERENCE_MS).get_flight_info().model_dump(by_alias=True)
    
    assert payload["flightId"] == "TS001"
    assert payload["tailNumber"] == "N00001"
    assert payload["groundSpeed"] == 520
    assert payload["verticalSpeed"] == 0
    assert payload["departureTime"] == REFERENCE_MS


def test_default_flight():
    flight = load_flight_from_env()
    
    assert flight.id == "AA123"
    assert flight.tail_number == "N12345"
    assert (flight.origin, flight.destination) == ("JFK", "LAX")
    assert flight.start_coords == Coordinates(lat=40.6413, lon=-73.7781)
    assert flight.end_coords == Coordinates(lat=33.9416, lon=-118.4085)
    assert flight.duration_ms == 6 * 60 * 60 * 1000


def test_flight_is_immutable(flight):
    with pytest.raises(Exception):
        flight.duration_ms = 1


def test_flight_rejects_zero_duration():
    with pytest.raises(ValueError):
        Flight(
            id="X", origin="A", destination="B",
            start_coords=Coordinates(lat=0, lon=0),
            end_coords=Coordinates(lat=1, lon=1),
            duration_ms=0, tail_number="N1",
        )


def test_system_clock_is_epoch_millis():
    assert system_clock() > 1_600_000_000_000


def test_progress_tie_rounds_half_up():
    # 2619000 / 21600000 * 100 is exactly 12.125
    flight = load_flight_from_env()
    simulator = FlightSimulator(flight, clock=lambda: 2_619_000, reference_time_ms=0)
    assert simulator.get_flight_info().progress == "12.13%"


@pytest.mark.parametrize("value,decimals,expected", [
    (0.125, 2, "0.13"),
    (-0.125, 2, "-0.13"),
    (0.03125, 4, "0.0313"),
    (-0.03125, 4, "-0.0313"),
    (1.005, 2, "1.00"),  # binary value is below the tie
    (2.5, 0, "3"),
    (-0.0, 4, "0.0000"),
    (37.2914, 4, "37.2914"),
    (-118.4085, 4, "-118.4085"),
])
def test_to_fixed_matches_javascript(value, decimals, expected):
    assert to_fixed(value, decimals) == expected


def test_coordinate_tie_rounds_half_up():
    flight = Flight(
        id="TS002", origin="AAA", destination="BBB",
        start_coords=Coordinates(lat=0.0, lon=0.0),
        end_coords=Coordinates(lat=0.0625, lon=-0.0625),
        duration_ms=1000, tail_number="N00002",
    )
    info = make_simulator(flight, REFERENCE_MS + 500).get_flight_info()
    
    assert info.latitude == "0.0313"
    assert info.longitude == "-0.0313"
