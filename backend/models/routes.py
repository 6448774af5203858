from __future__ import annotations
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from models.vehicles import VehicleType

TrafficLevel = Literal["light", "moderate", "heavy"]


class RouteResult(BaseModel):
    # Metres and seconds, as the mapping APIs return them
    distance_m: float
    duration_s: float
    polyline: str
    provider: str
    # Per-section encoded polylines when the backend splits a route (HERE)
    section_polylines: List[str] = Field(default_factory=list)

    @property
    def distance_km(self) -> float:
        return self.distance_m / 1000.0


class TrafficIncident(BaseModel):
    location: str
    type: str
    severity: str


class AlternativeRoute(BaseModel):
    name: str
    added_time: int  # minutes
    fuel_saving: int  # percent
    co2_reduction: int  # percent


class TrafficStatus(BaseModel):
    level: TrafficLevel
    incidents: List[TrafficIncident]
    alternatives: List[AlternativeRoute]
    last_updated: datetime


class RouteRequest(BaseModel):
    origin: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    mode: Literal["driving", "walking", "cycling"] = "driving"
    vehicle_type: VehicleType = VehicleType.PETROL
    provider: Optional[str] = None  # defaults to settings.ROUTE_PROVIDER
