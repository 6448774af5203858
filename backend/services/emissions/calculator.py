from __future__ import annotations
import math
from typing import Optional

from core.exceptions import InvalidDistance
from models.emissions import Footprint
from models.vehicles import VehicleType

from .emissions_factory import get_factors
from .factors import EmissionFactorTable


def compute_footprint(
    distance_km: float,
    vehicle_type: str | VehicleType,
    factors: Optional[EmissionFactorTable] = None,
) -> Footprint:
    """
    Fuel (or energy) used, kg CO2, running cost and a 0-100 eco score for a trip.
    Raises InvalidDistance for distances that are not finite and positive, or
    so large that the footprint overflows, and UnknownVehicleType for types
    outside the factor table.
    """
    table = factors or get_factors()
    ef = table.factor_for(vehicle_type)
    if distance_km is None or not math.isfinite(distance_km) or distance_km <= 0:
        raise InvalidDistance(distance_km)

    consumed = distance_km / ef.efficiency
    emissions = consumed * ef.factor
    cost = consumed * table.unit_price(vehicle_type)
    if not all(math.isfinite(x) for x in (consumed, emissions, cost)):
        raise InvalidDistance(distance_km)
    return Footprint(
        emissions=emissions,
        fuel_consumed=consumed,
        cost=cost,
        eco_score=max(0.0, 100.0 - (emissions / distance_km) * 100.0),
    )
