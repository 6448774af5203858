# services/emissions/emissions_factory.py
from __future__ import annotations
from functools import lru_cache
from typing import Literal

from .factors import EmissionFactorTable

PresetName = Literal["india_default"]


@lru_cache(maxsize=4)
def get_factors(preset: PresetName = "india_default") -> EmissionFactorTable:
    """Return a cached factor table for the named preset."""
    if preset == "india_default":
        return EmissionFactorTable.india_defaults(preset)
    raise ValueError(f"Unknown emission preset '{preset}'")
