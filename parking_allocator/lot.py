"""
ParkingLot - the allocator that owns every floor, spot and live ticket.

A single reentrant lock guards the floor/spot table and the ticket registry,
so concurrent callers never observe a spot without its ticket (or the
reverse) and two parks never pick the same spot.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Callable

from parking_allocator.errors import FloorsAlreadyInitializedError, LotNotInitializedError
from parking_allocator.floor import Floor
from parking_allocator.models import (
    Fee,
    NoSpotAvailable,
    ParkingSpot,
    SpotType,
    Ticket,
    TicketNotFound,
    Vehicle,
)
from parking_allocator.services import available_by_floor, compute_fee
from parking_allocator.tickets import TicketCounter, issue_ticket, ticket_counter

log = logging.getLogger(__name__)

DEFAULT_HOURLY_RATE = 10.0


def utc_now() -> datetime:
    # Aware UTC, so elapsed time does not jump at daylight-saving changes.
    return datetime.now(timezone.utc)


class ParkingLot:
    def __init__(
        self,
        hourly_rate: float = DEFAULT_HOURLY_RATE,
        clock: Callable[[], datetime] = utc_now,
        counter: TicketCounter | None = None,
    ):
        if hourly_rate < 0:
            raise ValueError(f"hourly_rate must be >= 0, got {hourly_rate}")
        self._lock = threading.RLock()
        self._hourly_rate = hourly_rate
        self._clock = clock
        self._counter = counter or ticket_counter
        self._floors: list[Floor] = []
        # spot_id -> spot, across all floors
        self._spots: dict[str, ParkingSpot] = {}
        # ticket_id -> live ticket
        self._tickets: dict[str, Ticket] = {}

    @property
    def floor_numbers(self) -> list[int]:
        with self._lock:
            return [f.number for f in self._floors]

    @property
    def hourly_rate(self) -> float:
        return self._hourly_rate

    def initialize_floors(self, floor_count: int) -> None:
        if floor_count < 1:
            raise ValueError(f"floor_count must be >= 1, got {floor_count}")
        with self._lock:
            if self._floors:
                raise FloorsAlreadyInitializedError(
                    f"Lot already has {len(self._floors)} floors"
                )
            self._floors = [Floor(n) for n in range(1, floor_count + 1)]
            self._spots = {s.id: s for floor in self._floors for s in floor.spots}
        log.info("Initialized %d floors with %d spots", floor_count, len(self._spots))

    def _require_floors(self) -> None:
        if not self._floors:
            raise LotNotInitializedError("initialize_floors() must be called first")

    def park_vehicle(self, vehicle: Vehicle) -> Ticket | NoSpotAvailable:
        with self._lock:
            self._require_floors()
            for floor in self._floors:
                spot = floor.find_available_spot(vehicle.type)
                if spot is None:
                    continue
                spot.assign(vehicle)
                ticket = issue_ticket(vehicle, spot, self._clock(), self._counter)
                self._tickets[ticket.id] = ticket
                log.info(
                    "Parked %s (%s) at %s, ticket %s",
                    vehicle.license_plate, vehicle.type.value, spot.id, ticket.id,
                )
                return ticket

        log.info("No spot available for %s (%s)", vehicle.license_plate, vehicle.type.value)
        return NoSpotAvailable(vehicle_type=vehicle.type)

    def unpark_vehicle(self, ticket_id: str) -> Fee | TicketNotFound:
        with self._lock:
            self._require_floors()
            ticket = self._tickets.get(ticket_id)
            if ticket is None:
                log.warning("Unpark with unknown ticket %s", ticket_id)
                return TicketNotFound(ticket_id=ticket_id)

            self._spots[ticket.spot_id].release()
            hours, amount = compute_fee(ticket.entry_time, self._clock(), self._hourly_rate)
            del self._tickets[ticket_id]

        log.info(
            "Unparked %s from %s, ticket %s, %d h, fee %.2f",
            ticket.vehicle.license_plate, ticket.spot_id, ticket_id, hours, amount,
        )
        return Fee(ticket_id=ticket_id, spot_id=ticket.spot_id, hours=hours, amount=amount)

    def get_ticket(self, ticket_id: str) -> Ticket | TicketNotFound:
        with self._lock:
            ticket = self._tickets.get(ticket_id)
        if ticket is None:
            return TicketNotFound(ticket_id=ticket_id)
        return ticket

    def get_spot(self, spot_id: str) -> ParkingSpot | None:
        """Snapshot of one spot; changing it does not touch the lot."""
        with self._lock:
            spot = self._spots.get(spot_id)
            return spot.model_copy() if spot is not None else None

    def spots(self) -> list[ParkingSpot]:
        """Snapshots of every spot in floor-major order."""
        with self._lock:
            return [s.model_copy() for floor in self._floors for s in floor.spots]

    def list_available_spots(self) -> list[tuple[int, list[tuple[str, SpotType]]]]:
        """Free spots per floor, as (floor_number, [(spot_id, spot_type), ...])."""
        with self._lock:
            return available_by_floor(self._floors)

    def active_tickets(self) -> list[Ticket]:
        with self._lock:
            return list(self._tickets.values())

    def occupancy(self) -> dict[str, int]:
        with self._lock:
            total = len(self._spots)
            occupied = sum(1 for s in self._spots.values() if s.occupied)
            return {
                "total": total,
                "occupied": occupied,
                "available": total - occupied,
                "active_tickets": len(self._tickets),
            }
