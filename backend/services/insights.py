from __future__ import annotations
from typing import List, Sequence

from models.vehicles import ScoreResult


def comparison_insights(results: Sequence[ScoreResult]) -> List[str]:
    """Best-mileage, cheapest and safest call-outs; nothing for fewer than two cars."""
    if len(results) < 2:
        return []

    vehicles = [r.vehicle for r in results]
    best_mileage = most_affordable = safest = vehicles[0]
    for v in vehicles[1:]:
        # Strict comparisons: the earlier (higher-ranked) car wins ties
        if v.mileage > best_mileage.mileage:
            best_mileage = v
        if v.price < most_affordable.price:
            most_affordable = v
        if v.safety > safest.safety:
            safest = v

    return [
        f"{best_mileage.name} offers the best fuel efficiency at {best_mileage.mileage:g} km/l",
        f"{most_affordable.name} is the most budget-friendly option at ₹{most_affordable.price:g} lakhs",
        f"{safest.name} provides the highest safety rating of {safest.safety:g}/5",
    ]
