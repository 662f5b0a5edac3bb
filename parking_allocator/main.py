import logging

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware

from parking_allocator.config import settings
from parking_allocator.lot import ParkingLot
from parking_allocator.models import (
    Fee,
    NoSpotAvailable,
    ParkRequest,
    Ticket,
    TicketNotFound,
    Vehicle,
)
from parking_allocator.services import availability_rows

log = logging.getLogger(__name__)

app = FastAPI(title="Parking Allocator API", version="0.1.0")

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Build the lot on startup
@app.on_event("startup")
def create_lot():
    lot = ParkingLot(hourly_rate=settings.hourly_rate)
    lot.initialize_floors(settings.floor_count)
    app.state.lot = lot
    log.info("Parking lot ready: %d floors, rate %.2f/h", settings.floor_count, settings.hourly_rate)


def get_lot(request: Request) -> ParkingLot:
    lot = getattr(request.app.state, "lot", None)
    if lot is None:
        raise HTTPException(status_code=503, detail="Parking lot not initialized")
    return lot


@app.get("/health")
def health(lot: ParkingLot = Depends(get_lot)):
    return {"status": "ok", **lot.occupancy()}


@app.get("/spots/available", response_model=list[dict])
def get_available_spots(lot: ParkingLot = Depends(get_lot)) -> list[dict]:
    """
    Free spots grouped by floor, in scan order.
    """
    return availability_rows(lot.list_available_spots())


@app.post("/tickets", response_model=Ticket, status_code=status.HTTP_201_CREATED)
def park(body: ParkRequest, lot: ParkingLot = Depends(get_lot)) -> Ticket:
    """
    Park a vehicle in the first compatible free spot.

    - **license_plate**: plate of the arriving vehicle
    - **vehicle_type**: CAR, BIKE or TRUCK
    """
    result = lot.park_vehicle(Vehicle(license_plate=body.license_plate, type=body.vehicle_type))
    if isinstance(result, NoSpotAvailable):
        raise HTTPException(
            status_code=409,
            detail=f"No spot available for {result.vehicle_type.value}",
        )
    return result


@app.get("/tickets/{ticket_id}", response_model=Ticket)
def get_ticket(ticket_id: str, lot: ParkingLot = Depends(get_lot)) -> Ticket:
    result = lot.get_ticket(ticket_id)
    if isinstance(result, TicketNotFound):
        raise HTTPException(status_code=404, detail=f"Ticket {ticket_id} not found")
    return result


@app.delete("/tickets/{ticket_id}", response_model=Fee)
def unpark(ticket_id: str, lot: ParkingLot = Depends(get_lot)) -> Fee:
    """
    Release the spot held by a ticket and return the fee owed.
    """
    result = lot.unpark_vehicle(ticket_id)
    if isinstance(result, TicketNotFound):
        raise HTTPException(status_code=404, detail=f"Ticket {ticket_id} not found")
    return result
