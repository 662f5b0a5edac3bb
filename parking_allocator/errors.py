class ParkingError(RuntimeError):
    """Base class for misuse of the allocator (not for expected outcomes)."""


class FloorsAlreadyInitializedError(ParkingError):
    pass


class LotNotInitializedError(ParkingError):
    pass


class SpotStateError(ParkingError):
    """Raised on an occupied->occupied or free->free spot transition."""
