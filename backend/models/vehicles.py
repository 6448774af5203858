from __future__ import annotations
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from core.exceptions import ValidationError


class VehicleType(str, Enum):
    PETROL = "petrol"
    DIESEL = "diesel"
    CNG = "cng"
    ELECTRIC = "electric"
    HYBRID = "hybrid"


class Priority(str, Enum):
    FUEL = "fuel"
    PERFORMANCE = "performance"
    SAFETY = "safety"
    FEATURES = "features"


class Usage(str, Enum):
    CITY = "city"
    HIGHWAY = "highway"
    FAMILY = "family"
    MIXED = "mixed"


def coerce_choice(enum_cls, value, label: str):
    """Map a raw string onto a closed enum, failing loudly on unknown values."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown {label} '{value}'") from None


class Vehicle(BaseModel):
    """Combustion car. Prices in lakh INR, maintenance in INR/year."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str
    make: Optional[str] = None
    model: Optional[str] = None
    price: float = Field(..., ge=0)
    mileage: float = Field(..., ge=0)  # km per litre
    safety: float = Field(..., ge=0, le=5)
    emissions: float = Field(..., ge=0)  # g CO2 / km
    maintenance: float = Field(..., ge=0)

    @model_validator(mode="before")
    @classmethod
    def _fill_name(cls, v):
        # Catalog rows carry make/model; ad-hoc comparison cars carry a name
        if isinstance(v, dict) and not v.get("name") and v.get("model"):
            make = str(v.get("make") or "").capitalize()
            v = {**v, "name": f"{make} {v['model']}".strip()}
        return v


class ElectricVehicle(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str
    price: float = Field(..., ge=0)
    range_km: float = Field(..., ge=0)
    charging_hours: float = Field(..., ge=0)
    efficiency: float = Field(..., gt=0)  # km per kWh


class ScoreResult(BaseModel):
    vehicle: Vehicle
    total_score: float
    recommendation: str

    def flat(self) -> dict:
        return {
            **self.vehicle.model_dump(),
            "total_score": self.total_score,
            "recommendation": self.recommendation,
        }


class ProfileRecommendation(BaseModel):
    vehicle: Vehicle
    ai_score: float
    confidence: float
    reason: str

    def flat(self) -> dict:
        return {
            **self.vehicle.model_dump(),
            "ai_score": self.ai_score,
            "confidence": self.confidence,
            "reason": self.reason,
        }


class EVRecommendation(BaseModel):
    vehicle: ElectricVehicle
    final_price: float
    total_subsidy: float
    suitability_score: float

    def flat(self) -> dict:
        return {
            **self.vehicle.model_dump(),
            "final_price": self.final_price,
            "total_subsidy": self.total_subsidy,
            "suitability_score": self.suitability_score,
        }


# ───────────────────────── request bodies ─────────────────────────

# 100 crore INR, in lakh
MAX_BUDGET_LAKH = 10000


class CompareCarsRequest(BaseModel):
    cars: List[Vehicle] = Field(..., min_length=1)


class AIRecommendationRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    budget: float = Field(..., gt=0, le=MAX_BUDGET_LAKH)  # lakh INR
    usage: Usage
    priority: Priority
    family_size: int = Field(4, ge=1)


class EVRecommendationRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    state: str = Field(..., min_length=1)
    budget: float = Field(..., gt=0, le=MAX_BUDGET_LAKH)
    usage: Usage = Usage.MIXED
