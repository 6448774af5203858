# services/emissions/factors.py
from __future__ import annotations
from typing import Dict, Mapping

from core.exceptions import UnknownVehicleType
from models.emissions import EmissionFactor
from models.vehicles import VehicleType

FUEL_PRICE_PER_LITRE = 105.0  # INR
ENERGY_TARIFF_PER_KWH = 8.0  # INR


class EmissionFactorTable:
    """
    Closed lookup from vehicle type to (kg CO2 per unit, km per unit).
    Every VehicleType member must be present; a missing one fails at construction.
    """

    def __init__(
        self,
        factors: Mapping[VehicleType, EmissionFactor],
        *,
        name: str = "custom",
        fuel_price: float = FUEL_PRICE_PER_LITRE,
        energy_tariff: float = ENERGY_TARIFF_PER_KWH,
    ) -> None:
        missing = [vt.value for vt in VehicleType if vt not in factors]
        if missing:
            raise ValueError(f"Emission table '{name}' is missing {missing}")
        self.name = name
        self.fuel_price = fuel_price
        self.energy_tariff = energy_tariff
        self._factors: Dict[VehicleType, EmissionFactor] = dict(factors)

    @staticmethod
    def resolve_type(vehicle_type: str | VehicleType) -> VehicleType:
        if isinstance(vehicle_type, VehicleType):
            return vehicle_type
        try:
            return VehicleType(str(vehicle_type).strip().lower())
        except ValueError:
            raise UnknownVehicleType(str(vehicle_type)) from None

    def factor_for(self, vehicle_type: str | VehicleType) -> EmissionFactor:
        return self._factors[self.resolve_type(vehicle_type)]

    def unit_price(self, vehicle_type: str | VehicleType) -> float:
        vt = self.resolve_type(vehicle_type)
        return self.energy_tariff if vt is VehicleType.ELECTRIC else self.fuel_price

    @classmethod
    def india_defaults(cls, name: str = "india_default") -> "EmissionFactorTable":
        # Electric efficiency is km per kWh; the rest are km per litre (kg for CNG)
        return cls(
            {
                VehicleType.PETROL: EmissionFactor(factor=2.31, efficiency=15),
                VehicleType.DIESEL: EmissionFactor(factor=2.68, efficiency=18),
                VehicleType.CNG: EmissionFactor(factor=1.85, efficiency=20),
                VehicleType.ELECTRIC: EmissionFactor(factor=0.5, efficiency=4),
                VehicleType.HYBRID: EmissionFactor(factor=1.5, efficiency=25),
            },
            name=name,
        )
