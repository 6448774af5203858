from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from models.emissions import Footprint
from models.vehicles import VehicleType

DEFAULT_ECO_SCORE = 850
STARTER_BADGES = ("Eco Champion", "Green Driver")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class TripRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: datetime = Field(default_factory=_now)
    distance: float
    vehicle_type: VehicleType
    carbon_emitted: float
    route: Optional[str] = None


class UserProfile(BaseModel):
    trips: List[TripRecord] = Field(default_factory=list)
    carbon_footprint: float = 0.0
    eco_score: float = DEFAULT_ECO_SCORE
    # Insertion-ordered; uniqueness is enforced by ProgressTracker
    badges: List[str] = Field(default_factory=lambda: list(STARTER_BADGES))
    preferences: Dict[str, Any] = Field(default_factory=dict)


class TripOutcome(BaseModel):
    footprint: Footprint
    new_badges: List[str]
    total_footprint: float
    eco_score: float

    def flat(self) -> dict:
        return {
            **self.footprint.model_dump(),
            "new_badges": self.new_badges,
            "total_footprint": self.total_footprint,
            "eco_score": self.eco_score,
        }
