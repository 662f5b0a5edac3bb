from datetime import datetime, timedelta

import pytest

from parking_allocator.lot import ParkingLot
from parking_allocator.tickets import TicketCounter


class FakeClock:
    def __init__(self, start: datetime = datetime(2024, 1, 1, 8, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_lot(clock):
    def _make(floor_count: int = 1) -> ParkingLot:
        lot = ParkingLot(clock=clock, counter=TicketCounter())
        lot.initialize_floors(floor_count)
        return lot

    return _make


@pytest.fixture
def lot(make_lot):
    return make_lot(1)
