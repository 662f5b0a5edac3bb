from __future__ import annotations

import threading
from datetime import datetime

from parking_allocator.models import ParkingSpot, Ticket, Vehicle


class TicketCounter:
    """Monotonic ticket id source. Ids are never reused, even after unpark."""

    def __init__(self, start: int = 1):
        self._lock = threading.Lock()
        self._next = start

    def next_id(self) -> str:
        with self._lock:
            value = self._next
            self._next += 1
        return f"T{value}"


# Shared by every lot that is not given its own counter.
ticket_counter = TicketCounter()


def issue_ticket(
    vehicle: Vehicle,
    spot: ParkingSpot,
    entry_time: datetime,
    counter: TicketCounter = ticket_counter,
) -> Ticket:
    return Ticket(
        id=counter.next_id(),
        vehicle=vehicle,
        spot_id=spot.id,
        spot_type=spot.spot_type,
        floor_number=spot.floor_number,
        entry_time=entry_time,
    )
