# services/subsidy.py
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

from core.exceptions import NonPositiveSavings, ValidationError
from models.subsidy import ChargingStation, SavingsProjection, SubsidyInfo, SubsidyProfile
from models.vehicles import ElectricVehicle, EVRecommendation, Usage, coerce_choice
from services.catalog import VehicleCatalog, get_catalog

logger = logging.getLogger(__name__)

CENTRAL_SUBSIDY = 1.5  # lakh INR
DEFAULT_REGIONAL_SUBSIDY = 0.5

REGIONAL_SUBSIDIES: Dict[str, float] = {
    "maharashtra": 2.5,
    "delhi": 1.5,
    "karnataka": 2.0,
    "gujarat": 1.5,
    "rajasthan": 1.0,
    "telangana": 1.2,
    "kerala": 1.0,
}

ADDITIONAL_BENEFITS = ("FAME II benefits", "Registration fee waiver", "Road tax exemption")
SUBSIDY_VALIDITY = "2025-2027"

# Minimum range (km) that earns the usage bonus, and the bonus itself
RANGE_BONUS: Dict[Usage, tuple] = {
    Usage.CITY: (300, 30),
    Usage.HIGHWAY: (400, 35),
    Usage.MIXED: (350, 25),
}
FAST_CHARGE_HOURS = 8
FAST_CHARGE_BONUS = 15
EFFICIENT_KM_PER_KWH = 4
EFFICIENCY_BONUS = 10

_CHARGING_STATIONS: Dict[str, List[ChargingStation]] = {
    "maharashtra": [
        ChargingStation(name="Tata Power Station - Bandra", type="Fast Charging", distance=2.5),
        ChargingStation(name="Fortum Station - Andheri", type="Standard", distance=4.2),
        ChargingStation(name="Ather Grid - Powai", type="Fast Charging", distance=6.1),
    ],
    "delhi": [
        ChargingStation(name="Delhi Metro Station - CP", type="Fast Charging", distance=1.8),
        ChargingStation(name="NDMC Station - Khan Market", type="Standard", distance=3.5),
        ChargingStation(name="Tata Power - Gurgaon", type="Fast Charging", distance=15.2),
    ],
}
_GENERIC_STATIONS = [
    ChargingStation(name="Public Charging Hub", type="Standard", distance=5.0),
    ChargingStation(name="Fast Charge Station", type="Fast Charging", distance=8.5),
]


def _region_key(region: str) -> str:
    if region is None:
        raise ValidationError("Region is required")
    return region.strip().lower()


def resolve_subsidy(region: str) -> SubsidyProfile:
    """Unrecognized regions get DEFAULT_REGIONAL_SUBSIDY rather than an error."""
    regional = REGIONAL_SUBSIDIES.get(_region_key(region), DEFAULT_REGIONAL_SUBSIDY)
    return SubsidyProfile(
        region=region,
        central=CENTRAL_SUBSIDY,
        regional=regional,
        total=CENTRAL_SUBSIDY + regional,
    )


def subsidy_info(region: str) -> SubsidyInfo:
    profile = resolve_subsidy(region)
    return SubsidyInfo(
        central=profile.central,
        state=profile.regional,
        additional=list(ADDITIONAL_BENEFITS),
        validity=SUBSIDY_VALIDITY,
    )


def net_price(ev: ElectricVehicle, subsidy: SubsidyProfile) -> float:
    return ev.price - subsidy.central - subsidy.regional


def suitability(ev: ElectricVehicle, usage: Usage) -> float:
    usage = coerce_choice(Usage, usage, "usage")
    score = 50.0
    threshold = RANGE_BONUS.get(usage)
    if threshold is not None and ev.range_km > threshold[0]:
        score += threshold[1]
    if ev.charging_hours < FAST_CHARGE_HOURS:
        score += FAST_CHARGE_BONUS
    if ev.efficiency > EFFICIENT_KM_PER_KWH:
        score += EFFICIENCY_BONUS
    return min(100.0, score)


def charging_stations(region: str) -> List[ChargingStation]:
    return list(_CHARGING_STATIONS.get(_region_key(region), _GENERIC_STATIONS))


@dataclass(frozen=True)
class SavingsAssumptions:
    city_km: float = 12000
    highway_km: float = 18000
    default_km: float = 15000
    petrol_km_per_litre: float = 15
    petrol_price: float = 105  # INR/l
    petrol_kg_co2_per_litre: float = 2.31
    ev_km_per_kwh: float = 4
    electricity_price: float = 8  # INR/kWh

    def annual_km(self, usage: Usage) -> float:
        if usage is Usage.CITY:
            return self.city_km
        if usage is Usage.HIGHWAY:
            return self.highway_km
        return self.default_km


class SubsidyCalculator:
    def __init__(
        self,
        catalog: Optional[VehicleCatalog] = None,
        assumptions: Optional[SavingsAssumptions] = None,
    ) -> None:
        self.catalog = catalog or get_catalog()
        self.assumptions = assumptions or SavingsAssumptions()

    def ev_recommendations(
        self, region: str, budget: float, usage: Usage
    ) -> List[EVRecommendation]:
        """EVs whose subsidy-adjusted price fits the budget, most suitable first."""
        usage = coerce_choice(Usage, usage, "usage")
        subsidy = resolve_subsidy(region)
        options = [
            EVRecommendation(
                vehicle=ev,
                final_price=net_price(ev, subsidy),
                total_subsidy=subsidy.total,
                suitability_score=suitability(ev, usage),
            )
            for ev in self.catalog.electric_vehicles()
        ]
        affordable = [o for o in options if o.final_price <= budget]
        logger.debug(
            "ev options for %s: %d of %d within %.2f",
            region,
            len(affordable),
            len(options),
            budget,
        )
        return sorted(affordable, key=lambda o: -o.suitability_score)

    def savings_projection(self, budget: float, usage: Usage) -> SavingsProjection:
        if budget is None or not math.isfinite(budget):
            raise ValidationError(f"Budget must be a finite number, got {budget}")
        usage = coerce_choice(Usage, usage, "usage")
        a = self.assumptions
        annual_km = a.annual_km(usage)
        petrol_cost = (annual_km / a.petrol_km_per_litre) * a.petrol_price
        ev_cost = (annual_km / a.ev_km_per_kwh) * a.electricity_price
        annual_savings = petrol_cost - ev_cost
        if annual_savings <= 0:
            raise NonPositiveSavings(annual_savings)
        return SavingsProjection(
            annual_savings=annual_savings,
            five_year_savings=annual_savings * 5,
            annual_co2_saved_kg=(annual_km / a.petrol_km_per_litre) * a.petrol_kg_co2_per_litre,
            payback_years=math.ceil((budget * 100000) / annual_savings),
        )
