# models/emissions.py
from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

from models.vehicles import VehicleType


class EmissionFactor(BaseModel):
    """kg CO2 per consumed unit, and km travelled per unit (litre, kg or kWh)."""

    factor: float
    efficiency: float


class Footprint(BaseModel):
    emissions: float  # kg CO2
    fuel_consumed: float
    cost: float  # INR
    eco_score: float


# Longer than any single road trip
MAX_TRIP_DISTANCE_KM = 20000


class TrackCarbonRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    distance: float = Field(..., gt=0, le=MAX_TRIP_DISTANCE_KM)  # km
    vehicle_type: VehicleType
    route: str | None = None
