# services/progress.py
"""
Carbon tracking and achievements.

ProfileStore owns the single in-memory UserProfile for the process. FastAPI
runs sync endpoints in a thread pool, so every mutation goes through the
store's lock: one writer at a time keeps the footprint monotonic and badge
unlocks idempotent.

Badge thresholds are evaluated against the profile *after* the current trip
has been applied (footprint incremented, trip appended).
"""
from __future__ import annotations
import copy
import logging
import threading
from typing import Callable, List, Optional, Tuple

from models.emissions import Footprint
from models.profile import TripOutcome, TripRecord, UserProfile
from models.vehicles import VehicleType
from services.emissions.calculator import compute_footprint
from services.emissions.factors import EmissionFactorTable

logger = logging.getLogger(__name__)

BadgeRule = Tuple[str, Callable[[UserProfile], bool]]

# Evaluated in this order; several may unlock in one call
BADGE_RULES: Tuple[BadgeRule, ...] = (
    ("Carbon Warrior", lambda p: p.carbon_footprint < 500),
    ("Road Master", lambda p: len(p.trips) >= 50),
    ("Eco Legend", lambda p: p.eco_score > 1000),
)

CARBON_BUDGET_KG = 2000
RECENT_TRIPS = 10

# INR saved per km relative to petrol
FUEL_SAVINGS_PER_KM = {
    VehicleType.ELECTRIC: 3.0,
    VehicleType.CNG: 1.5,
}

BASE_TIPS = (
    "Plan your routes during off-peak hours to save 20% on fuel",
    "Regular maintenance can improve efficiency by 10%",
    "Consider carpooling for trips over 20km",
    "Check tire pressure monthly for optimal fuel economy",
)

MONTHLY_TRENDS = {
    "months": ["Jan", "Feb", "Mar", "Apr", "May", "Jun"],
    "fuel_costs": [3200, 2950, 3100, 2800, 2650, 2400],
    "emissions": [145, 135, 140, 128, 120, 115],
    "trend": "improving",
}


class ProfileStore:
    """Holds the process-lifetime profile. Construct once at startup."""

    def __init__(self, factory: Callable[[], UserProfile] = UserProfile) -> None:
        self._factory = factory
        self._profile = factory()
        self.lock = threading.Lock()

    @property
    def profile(self) -> UserProfile:
        return self._profile

    def reset(self) -> None:
        """Test hook: discard all trips and badges."""
        with self.lock:
            self._profile = self._factory()


def unlock_badges(profile: UserProfile) -> List[str]:
    new_badges: List[str] = []
    for badge, rule in BADGE_RULES:
        if badge not in profile.badges and rule(profile):
            profile.badges.append(badge)
            new_badges.append(badge)
    return new_badges


class ProgressTracker:
    def __init__(
        self, store: ProfileStore, factors: Optional[EmissionFactorTable] = None
    ) -> None:
        self.store = store
        self.factors = factors

    def record_trip(
        self,
        distance_km: float,
        vehicle_type: str | VehicleType,
        route: Optional[str] = None,
    ) -> TripOutcome:
        # Validation happens before any state is touched
        footprint: Footprint = compute_footprint(distance_km, vehicle_type, self.factors)
        vt = EmissionFactorTable.resolve_type(vehicle_type)

        with self.store.lock:
            profile = self.store.profile
            profile.trips.append(
                TripRecord(
                    distance=distance_km,
                    vehicle_type=vt,
                    carbon_emitted=footprint.emissions,
                    route=route,
                )
            )
            profile.carbon_footprint += footprint.emissions
            new_badges = unlock_badges(profile)
            total = profile.carbon_footprint
            eco_score = profile.eco_score

        if new_badges:
            logger.info("badges unlocked: %s", ", ".join(new_badges))
        return TripOutcome(
            footprint=footprint,
            new_badges=new_badges,
            total_footprint=total,
            eco_score=eco_score,
        )

    def dashboard(self) -> dict:
        with self.store.lock:
            profile = self.store.profile
            trips = list(profile.trips)
            badges = list(profile.badges)
            footprint = profile.carbon_footprint
            eco_score = profile.eco_score

        return {
            "stats": {
                "total_trips": len(trips),
                "carbon_saved": max(0.0, CARBON_BUDGET_KG - footprint),
                "fuel_saved": fuel_savings(trips),
                "eco_score": eco_score,
            },
            "recent_trips": [t.model_dump(mode="json") for t in trips[-RECENT_TRIPS:]],
            "badges": badges,
            "monthly_trends": copy.deepcopy(MONTHLY_TRENDS),
            "recommendations": personalized_tips(eco_score, len(trips)),
        }


def fuel_savings(trips: List[TripRecord]) -> float:
    return sum(t.distance * FUEL_SAVINGS_PER_KM.get(t.vehicle_type, 0.0) for t in trips)


def personalized_tips(eco_score: float, trip_count: int, limit: int = 3) -> List[str]:
    tips: List[str] = []
    if eco_score > 800:
        tips.append("You're an eco-champion! Share your tips with the community")
    if trip_count > 30:
        tips.append("Frequent traveler detected - consider hybrid or EV options")
    tips.extend(BASE_TIPS)
    return tips[:limit]
