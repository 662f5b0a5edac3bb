from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, computed_field

from parking_allocator.errors import SpotStateError


class VehicleType(str, Enum):
    CAR = "CAR"
    BIKE = "BIKE"
    TRUCK = "TRUCK"


class SpotType(str, Enum):
    COMPACT = "COMPACT"
    LARGE = "LARGE"
    # Representable, but floors never build them and no vehicle matches them.
    HANDICAPPED = "HANDICAPPED"
    ELECTRIC = "ELECTRIC"


class Vehicle(BaseModel):
    model_config = ConfigDict(frozen=True)

    license_plate: str
    type: VehicleType


class ParkingSpot(BaseModel):
    id: str
    spot_type: SpotType
    floor_number: int
    occupant: Vehicle | None = None

    @computed_field
    @property
    def occupied(self) -> bool:
        return self.occupant is not None

    def assign(self, vehicle: Vehicle) -> None:
        if self.occupant is not None:
            raise SpotStateError(f"Spot {self.id} is already occupied")
        self.occupant = vehicle

    def release(self) -> Vehicle:
        if self.occupant is None:
            raise SpotStateError(f"Spot {self.id} is already free")
        vehicle, self.occupant = self.occupant, None
        return vehicle


class Ticket(BaseModel):
    """Proof that `vehicle` occupies the spot named by `spot_id` since `entry_time`.

    The spot is referenced by id only; the owning lot resolves it.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    vehicle: Vehicle
    spot_id: str
    spot_type: SpotType
    floor_number: int
    entry_time: datetime


class Fee(BaseModel):
    model_config = ConfigDict(frozen=True)

    ticket_id: str
    spot_id: str
    hours: int
    amount: float


class NoSpotAvailable(BaseModel):
    model_config = ConfigDict(frozen=True)

    vehicle_type: VehicleType


class TicketNotFound(BaseModel):
    model_config = ConfigDict(frozen=True)

    ticket_id: str


class ParkRequest(BaseModel):
    license_plate: str
    vehicle_type: VehicleType


class AvailableSpot(BaseModel):
    id: str
    spot_type: SpotType


class FloorAvailability(BaseModel):
    floor_number: int
    spots: list[AvailableSpot]
