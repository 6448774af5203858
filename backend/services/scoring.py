# services/scoring.py
"""
Vehicle scoring.

Two separate models live here:
- ``score_vehicle`` answers "which of these cars is objectively best": five
  attributes normalized to 0-100 against fixed caps and combined with fixed
  weights.
- ``score_for_profile`` answers "which catalog car fits this buyer": a base
  from the stated priority plus usage and family-size bonuses. Its output is
  unbounded and only meaningful for ranking within one request.
"""
from __future__ import annotations
import logging
import math
import random
from typing import Dict, Iterable, List, Optional

from core.exceptions import ValidationError
from models.vehicles import (
    Priority,
    ProfileRecommendation,
    ScoreResult,
    Usage,
    Vehicle,
    coerce_choice,
)
from services.catalog import VehicleCatalog, get_catalog

logger = logging.getLogger(__name__)

WEIGHTS: Dict[str, float] = {
    "price": 0.25,
    "mileage": 0.30,
    "safety": 0.25,
    "emissions": 0.15,
    "maintenance": 0.05,
}

# Reference caps used for normalization
PRICE_CAP = 50.0  # lakh INR
MILEAGE_CAP = 30.0  # km/l
SAFETY_MAX = 5.0
EMISSIONS_CAP = 200.0  # g/km
MAINTENANCE_CAP = 60000.0  # INR/year

# (threshold, label), checked top-down
TIERS = (
    (80.0, "Highly Recommended"),
    (65.0, "Recommended"),
    (50.0, "Consider"),
)
BOTTOM_TIER = "Not Recommended"

TOP_N = 5
MAX_CONFIDENCE = 95
CONFIDENCE_JITTER = 20  # jitter drawn from [0, 20)
DEFAULT_REASON = "good overall value"

if not math.isclose(math.fsum(WEIGHTS.values()), 1.0):
    raise RuntimeError("composite weights must sum to 1.0")


def _clamp(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    return max(lo, min(hi, value))


def normalized_scores(v: Vehicle) -> Dict[str, float]:
    return {
        "price": _clamp(100 - (v.price / PRICE_CAP) * 100),
        "mileage": _clamp((v.mileage / MILEAGE_CAP) * 100),
        "safety": _clamp((v.safety / SAFETY_MAX) * 100),
        "emissions": _clamp(100 - (v.emissions / EMISSIONS_CAP) * 100),
        "maintenance": _clamp(100 - (v.maintenance / MAINTENANCE_CAP) * 100),
    }


def score_vehicle(v: Vehicle) -> float:
    norm = normalized_scores(v)
    return sum(norm[k] * w for k, w in WEIGHTS.items())


def recommendation_tier(score: float) -> str:
    for threshold, label in TIERS:
        if score >= threshold:
            return label
    return BOTTOM_TIER


def compare_vehicles(vehicles: Iterable[Vehicle]) -> List[ScoreResult]:
    """Score and rank by descending composite score; ties keep input order."""
    results = []
    for v in vehicles:
        score = score_vehicle(v)
        results.append(
            ScoreResult(vehicle=v, total_score=score, recommendation=recommendation_tier(score))
        )
    return sorted(results, key=lambda r: -r.total_score)


# ───────────────────────── profile-weighted scoring ─────────────────────────


def _priority_base(v: Vehicle, priority: Priority, budget: float) -> float:
    price_ratio = v.price / budget
    if priority is Priority.FUEL:
        return v.mileage * 4
    if priority is Priority.PERFORMANCE:
        return price_ratio * 50
    if priority is Priority.SAFETY:
        return v.safety * 18
    if priority is Priority.FEATURES:
        return v.safety * 10 + price_ratio * 30
    raise ValidationError(f"Unknown priority '{priority}'")


def _usage_bonus(v: Vehicle, usage: Usage) -> float:
    # Independent checks; any combination may apply
    bonus = 0.0
    if usage is Usage.CITY and v.mileage > 20:
        bonus += 15
    if usage is Usage.HIGHWAY and v.mileage > 15:
        bonus += 10
    if usage is Usage.FAMILY and v.safety >= 4:
        bonus += 20
    if usage is Usage.MIXED:
        bonus += v.mileage * 2
    return bonus


def _family_bonus(v: Vehicle, family_size: int) -> float:
    bonus = 0.0
    if family_size > 4 and v.price > 10:
        bonus += 10
    if family_size <= 2 and v.price < 10:
        bonus += 5
    return bonus


def score_for_profile(
    v: Vehicle,
    priority: Priority | str,
    usage: Usage | str,
    budget: float,
    family_size: int = 4,
) -> float:
    if budget is None or not math.isfinite(budget) or budget <= 0:
        raise ValidationError(f"Budget must be a finite positive number, got {budget}")
    priority = coerce_choice(Priority, priority, "priority")
    usage = coerce_choice(Usage, usage, "usage")
    return (
        _priority_base(v, priority, budget)
        + _usage_bonus(v, usage)
        + _family_bonus(v, family_size)
    )


def recommendation_reason(v: Vehicle, priority: Priority, usage: Usage) -> str:
    reasons = []
    if v.mileage > 20:
        reasons.append("excellent fuel efficiency")
    if v.safety >= 5:
        reasons.append("top safety rating")
    if v.emissions < 130:
        reasons.append("low emissions")
    if priority is Priority.FUEL and v.mileage > 22:
        reasons.append("matches fuel priority")
    if usage is Usage.FAMILY and v.safety >= 4:
        reasons.append("family-safe")
    return " and ".join(reasons[:2]) or DEFAULT_REASON


class ScoringEngine:
    """
    Profile recommendations over a catalog. The random source only feeds the
    confidence jitter; pass a seeded ``random.Random`` for reproducible output.
    """

    def __init__(
        self,
        catalog: Optional[VehicleCatalog] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.catalog = catalog or get_catalog()
        self.rng = rng or random.Random()

    def recommend_for_profile(
        self,
        budget: float,
        usage: Usage | str,
        priority: Priority | str,
        family_size: int = 4,
    ) -> List[ProfileRecommendation]:
        priority = coerce_choice(Priority, priority, "priority")
        usage = coerce_choice(Usage, usage, "usage")
        if budget is None or not math.isfinite(budget) or budget <= 0:
            raise ValidationError(f"Budget must be a finite positive number, got {budget}")

        # Budget filter precedes scoring
        eligible = self.catalog.cars_within(budget)
        scored = [
            (car, score_for_profile(car, priority, usage, budget, family_size))
            for car in eligible
        ]
        scored.sort(key=lambda pair: -pair[1])
        logger.debug(
            "profile scoring: %d of %d cars within budget %.2f",
            len(eligible),
            len(self.catalog.cars()),
            budget,
        )

        return [
            ProfileRecommendation(
                vehicle=car,
                ai_score=score,
                confidence=min(MAX_CONFIDENCE, score + self.rng.randrange(CONFIDENCE_JITTER)),
                reason=recommendation_reason(car, priority, usage),
            )
            for car, score in scored[:TOP_N]
        ]

    def overall_confidence(self, budget: float, usage, priority) -> int:
        confidence = 75
        if budget > 5:
            confidence += 10
        if usage and priority:
            confidence += 15
        return min(MAX_CONFIDENCE, confidence + self.rng.randrange(10))


ALTERNATIVE_OPTIONS = (
    {"type": "Used Cars", "description": "Consider certified pre-owned vehicles for better value"},
    {"type": "Leasing", "description": "Monthly leasing options available starting ₹15,000/month"},
    {"type": "EV Options", "description": "Electric vehicles with government subsidies"},
)


def alternative_options() -> List[dict]:
    return [dict(o) for o in ALTERNATIVE_OPTIONS]
