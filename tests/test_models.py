from datetime import datetime

import pytest
from pydantic import ValidationError

from parking_allocator.errors import SpotStateError
from parking_allocator.models import (
    Fee,
    ParkingSpot,
    SpotType,
    Ticket,
    TicketNotFound,
    Vehicle,
    VehicleType,
)


def test_vehicle_is_immutable():
    car = Vehicle(license_plate="ABC123", type=VehicleType.CAR)
    with pytest.raises(ValidationError):
        car.license_plate = "XYZ"


def test_spot_occupied_follows_occupant():
    spot = ParkingSpot(id="1B", spot_type=SpotType.COMPACT, floor_number=1)
    assert spot.occupied is False

    car = Vehicle(license_plate="ABC123", type=VehicleType.CAR)
    spot.assign(car)
    assert spot.occupied is True
    assert spot.occupant == car

    assert spot.release() == car
    assert spot.occupied is False
    assert spot.occupant is None


def test_spot_rejects_double_assign():
    spot = ParkingSpot(id="1B", spot_type=SpotType.COMPACT, floor_number=1)
    spot.assign(Vehicle(license_plate="A", type=VehicleType.CAR))
    with pytest.raises(SpotStateError):
        spot.assign(Vehicle(license_plate="B", type=VehicleType.CAR))


def test_spot_rejects_double_release():
    spot = ParkingSpot(id="1B", spot_type=SpotType.COMPACT, floor_number=1)
    with pytest.raises(SpotStateError):
        spot.release()


def test_spot_dump_includes_occupied():
    spot = ParkingSpot(id="1A", spot_type=SpotType.LARGE, floor_number=1)
    assert spot.model_dump()["occupied"] is False


def test_ticket_is_immutable():
    ticket = Ticket(
        id="T1",
        vehicle=Vehicle(license_plate="A", type=VehicleType.CAR),
        spot_id="1B",
        spot_type=SpotType.COMPACT,
        floor_number=1,
        entry_time=datetime(2024, 1, 1),
    )
    with pytest.raises(ValidationError):
        ticket.spot_id = "1D"


def test_zero_fee_is_distinct_from_not_found():
    fee = Fee(ticket_id="T1", spot_id="1B", hours=0, amount=0.0)
    assert not isinstance(fee, TicketNotFound)
    assert fee.amount == 0
