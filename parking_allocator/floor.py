from __future__ import annotations

import string

from parking_allocator.models import ParkingSpot, SpotType, VehicleType


def spot_type_for_letter(letter: str) -> SpotType:
    # Even character codes (B, D, F, ...) are compact, odd ones (A, C, E, ...) large.
    return SpotType.COMPACT if ord(letter) % 2 == 0 else SpotType.LARGE


def spot_fits(vehicle_type: VehicleType, spot_type: SpotType) -> bool:
    if vehicle_type == VehicleType.CAR:
        return spot_type == SpotType.COMPACT
    if vehicle_type == VehicleType.TRUCK:
        return spot_type == SpotType.LARGE
    # Bikes go anywhere.
    return vehicle_type == VehicleType.BIKE


class Floor:
    """One level of the lot: 26 spots labelled "{number}A".."{number}Z"."""

    def __init__(self, number: int):
        self.number = number
        self.spots: list[ParkingSpot] = [
            ParkingSpot(
                id=f"{number}{letter}",
                spot_type=spot_type_for_letter(letter),
                floor_number=number,
            )
            for letter in string.ascii_uppercase
        ]

    def find_available_spot(self, vehicle_type: VehicleType) -> ParkingSpot | None:
        """First-fit: the lowest-lettered free spot that accepts `vehicle_type`."""
        for spot in self.spots:
            if not spot.occupied and spot_fits(vehicle_type, spot.spot_type):
                return spot
        return None

    def available_spots(self) -> list[ParkingSpot]:
        return [s for s in self.spots if not s.occupied]

    def __repr__(self) -> str:
        return f"Floor({self.number}, {len(self.available_spots())}/{len(self.spots)} free)"
