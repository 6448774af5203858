# services/catalog.py
"""
Static vehicle reference data.

Combustion cars are keyed by make then model; prices are lakh INR, mileage is
km/l, emissions g/km and maintenance INR/year. EVs carry range (km), charging
time (h) and efficiency (km/kWh).
"""
from __future__ import annotations
from functools import lru_cache
from typing import Dict, List, Tuple

from models.vehicles import ElectricVehicle, Vehicle

_CAR_ROWS: Dict[str, Dict[str, Tuple[float, float, float, float, float]]] = {
    # model: (price, mileage, safety, emissions, maintenance)
    "maruti": {
        "Swift": (6.5, 23.2, 4, 120, 35000),
        "Baleno": (7.5, 22.8, 4, 115, 38000),
        "Dzire": (7.0, 24.1, 4, 118, 36000),
        "Vitara Brezza": (9.5, 17.2, 4, 145, 42000),
    },
    "hyundai": {
        "i20": (8.5, 20.5, 5, 125, 40000),
        "Creta": (12.5, 16.8, 5, 155, 45000),
        "Venue": (9.0, 18.2, 4, 140, 41000),
        "Verna": (11.5, 19.1, 5, 135, 43000),
    },
    "tata": {
        "Nexon": (8.5, 17.5, 5, 142, 39000),
        "Harrier": (16.0, 14.2, 5, 170, 48000),
        "Altroz": (7.5, 22.1, 5, 115, 37000),
        "Safari": (18.0, 13.8, 5, 180, 52000),
    },
}

_EV_ROWS: Dict[str, Tuple[float, float, float, float]] = {
    # name: (price, range_km, charging_hours, efficiency)
    "Tata Nexon EV": (16.5, 312, 8.5, 4.0),
    "MG ZS EV": (22.5, 419, 7.0, 3.8),
    "Hyundai Kona Electric": (24.0, 452, 9.0, 3.5),
    "Mahindra eXUV300": (18.0, 375, 8.0, 4.2),
    "BYD Atto 3": (35.0, 521, 7.5, 3.2),
    "Tata Tigor EV": (13.5, 306, 8.0, 4.5),
}


class VehicleCatalog:
    """Read-only view over the reference data. Entries are frozen models."""

    def __init__(
        self,
        cars: List[Vehicle] | None = None,
        evs: List[ElectricVehicle] | None = None,
    ) -> None:
        self._cars: Tuple[Vehicle, ...] = tuple(cars if cars is not None else _load_cars())
        self._evs: Tuple[ElectricVehicle, ...] = tuple(
            evs if evs is not None else _load_evs()
        )

    def cars(self) -> Tuple[Vehicle, ...]:
        return self._cars

    def electric_vehicles(self) -> Tuple[ElectricVehicle, ...]:
        return self._evs

    def cars_within(self, budget: float) -> List[Vehicle]:
        return [c for c in self._cars if c.price <= budget]


def _load_cars() -> List[Vehicle]:
    out: List[Vehicle] = []
    for make, models in _CAR_ROWS.items():
        for model, (price, mileage, safety, emissions, maintenance) in models.items():
            out.append(
                Vehicle(
                    make=make,
                    model=model,
                    name="",
                    price=price,
                    mileage=mileage,
                    safety=safety,
                    emissions=emissions,
                    maintenance=maintenance,
                )
            )
    return out


def _load_evs() -> List[ElectricVehicle]:
    return [
        ElectricVehicle(
            name=name, price=price, range_km=rng, charging_hours=hours, efficiency=eff
        )
        for name, (price, rng, hours, eff) in _EV_ROWS.items()
    ]


@lru_cache(maxsize=1)
def get_catalog() -> VehicleCatalog:
    """Cached default catalog built from the bundled reference rows."""
    return VehicleCatalog()
