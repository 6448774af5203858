from __future__ import annotations
from typing import List
from pydantic import BaseModel


class SubsidyProfile(BaseModel):
    """Subsidy amounts in lakh INR."""

    region: str
    central: float
    regional: float
    total: float


class SubsidyInfo(BaseModel):
    central: float
    state: float
    additional: List[str]
    validity: str


class ChargingStation(BaseModel):
    name: str
    type: str
    distance: float  # km


class SavingsProjection(BaseModel):
    annual_savings: float  # INR
    five_year_savings: float
    annual_co2_saved_kg: float
    payback_years: int
