from datetime import datetime

from parking_allocator.models import ParkingSpot, SpotType, Vehicle, VehicleType
from parking_allocator.tickets import TicketCounter, issue_ticket, ticket_counter


def test_counter_starts_at_one_and_increments():
    counter = TicketCounter()
    assert [counter.next_id() for _ in range(3)] == ["T1", "T2", "T3"]


def test_issue_ticket_binds_vehicle_and_spot():
    counter = TicketCounter()
    car = Vehicle(license_plate="ABC123", type=VehicleType.CAR)
    spot = ParkingSpot(id="2D", spot_type=SpotType.COMPACT, floor_number=2)
    entry = datetime(2024, 5, 1, 9, 30)

    ticket = issue_ticket(car, spot, entry, counter)

    assert ticket.id == "T1"
    assert ticket.vehicle == car
    assert ticket.spot_id == "2D"
    assert ticket.spot_type == SpotType.COMPACT
    assert ticket.floor_number == 2
    assert ticket.entry_time == entry


def test_shared_counter_is_used_by_default():
    car = Vehicle(license_plate="ABC123", type=VehicleType.CAR)
    spot = ParkingSpot(id="1B", spot_type=SpotType.COMPACT, floor_number=1)
    first = issue_ticket(car, spot, datetime(2024, 1, 1))
    upcoming = ticket_counter.next_id()
    assert int(upcoming[1:]) == int(first.id[1:]) + 1
