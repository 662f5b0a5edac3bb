import os

from pydantic import BaseModel, Field


class Settings(BaseModel):
    # Number of floors built when the service starts; each floor holds 1A..1Z style spots.
    floor_count: int = Field(
        default=int(os.getenv("PARKING_FLOOR_COUNT", "3")),
        ge=1,
        validate_default=True,
    )

    # Flat rate per whole elapsed hour.
    hourly_rate: float = Field(
        default=float(os.getenv("PARKING_HOURLY_RATE", "10")),
        ge=0,
        validate_default=True,
    )


settings = Settings()
