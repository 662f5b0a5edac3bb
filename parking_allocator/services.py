from __future__ import annotations

from datetime import datetime
from typing import Any

from parking_allocator.floor import Floor
from parking_allocator.models import AvailableSpot, FloorAvailability, SpotType


def elapsed_whole_hours(entry_time: datetime, exit_time: datetime) -> int:
    """Whole hours between entry and exit, truncated (59 min -> 0, 61 min -> 1).

    A clock that went backwards counts as zero elapsed time.
    """
    seconds = (exit_time - entry_time).total_seconds()
    return max(0, int(seconds // 3600))


def compute_fee(
    entry_time: datetime,
    exit_time: datetime,
    hourly_rate: float,
) -> tuple[int, float]:
    hours = elapsed_whole_hours(entry_time, exit_time)
    return hours, float(hours * hourly_rate)


def available_by_floor(floors: list[Floor]) -> list[tuple[int, list[tuple[str, SpotType]]]]:
    return [
        (floor.number, [(s.id, s.spot_type) for s in floor.available_spots()])
        for floor in floors
    ]


def availability_rows(
    available: list[tuple[int, list[tuple[str, SpotType]]]],
) -> list[dict[str, Any]]:
    return [
        FloorAvailability(
            floor_number=number,
            spots=[AvailableSpot(id=spot_id, spot_type=spot_type) for spot_id, spot_type in spots],
        ).model_dump()
        for number, spots in available
    ]
