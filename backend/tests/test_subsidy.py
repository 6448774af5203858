# backend/tests/test_subsidy.py
import math

import pytest

from core.exceptions import ComputationError, NonPositiveSavings, ValidationError
from models.vehicles import Usage
from services.subsidy import (
    SavingsAssumptions,
    SubsidyCalculator,
    charging_stations,
    net_price,
    resolve_subsidy,
    subsidy_info,
    suitability,
)
from data_toy import ev


@pytest.mark.parametrize(
    "region,regional",
    [
        ("Delhi", 1.5),
        ("delhi", 1.5),
        (" MAHARASHTRA ", 2.5),
        ("Karnataka", 2.0),
        ("Telangana", 1.2),
        ("Unknown", 0.5),
        ("", 0.5),
    ],
)
def test_resolve_subsidy(region, regional):
    s = resolve_subsidy(region)
    assert s.central == 1.5
    assert s.regional == regional
    assert s.total == pytest.approx(1.5 + regional)


def test_net_price():
    assert net_price(ev(price=16.5), resolve_subsidy("Delhi")) == pytest.approx(13.5)


def test_subsidy_info_shape():
    info = subsidy_info("Gujarat")
    assert info.central == 1.5 and info.state == 1.5
    assert "Road tax exemption" in info.additional
    assert info.validity == "2025-2027"


@pytest.mark.parametrize(
    "vehicle,usage,expected",
    [
        (ev(range_km=312, charging_hours=8.5, efficiency=4.0), Usage.CITY, 80),
        (ev(range_km=306, charging_hours=8.0, efficiency=4.5), Usage.CITY, 90),
        (ev(range_km=419, charging_hours=7.0, efficiency=3.8), Usage.HIGHWAY, 100),
        (ev(range_km=375, charging_hours=8.0, efficiency=4.2), Usage.MIXED, 85),
        (ev(range_km=375, charging_hours=8.0, efficiency=4.2), Usage.FAMILY, 60),
        (ev(range_km=300, charging_hours=9.0, efficiency=3.0), Usage.CITY, 50),
    ],
)
def test_suitability(vehicle, usage, expected):
    assert suitability(vehicle, usage) == expected


def test_suitability_is_capped():
    assert suitability(ev(range_km=500, charging_hours=5, efficiency=5), "highway") == 100


def test_ev_recommendations_respect_budget_and_rank():
    calc = SubsidyCalculator()
    recs = calc.ev_recommendations("Delhi", 15, "city")
    assert [r.vehicle.name for r in recs] == ["Mahindra eXUV300", "Tata Tigor EV", "Tata Nexon EV"]
    assert all(r.final_price <= 15 for r in recs)
    assert recs[0].total_subsidy == pytest.approx(3.0)


@pytest.mark.parametrize("budget", [0, 5, 12, 20, 40])
@pytest.mark.parametrize("region", ["Maharashtra", "Kerala", "Nowhere"])
def test_ev_recommendations_never_over_budget(budget, region):
    for usage in Usage:
        for r in SubsidyCalculator().ev_recommendations(region, budget, usage):
            assert r.final_price <= budget


def test_savings_projection_city():
    proj = SubsidyCalculator().savings_projection(15, "city")
    assert proj.annual_savings == pytest.approx(60000)
    assert proj.five_year_savings == pytest.approx(300000)
    assert proj.annual_co2_saved_kg == pytest.approx(1848)
    assert proj.payback_years == 25


def test_savings_payback_rounds_up():
    assert SubsidyCalculator().savings_projection(10, "city").payback_years == 17


def test_savings_distance_per_usage():
    calc = SubsidyCalculator()
    hwy = calc.savings_projection(10, "highway")
    mixed = calc.savings_projection(10, "mixed")
    assert hwy.annual_co2_saved_kg == pytest.approx(18000 / 15 * 2.31)
    assert mixed.annual_co2_saved_kg == pytest.approx(15000 / 15 * 2.31)


def test_non_positive_savings_reported():
    calc = SubsidyCalculator(assumptions=SavingsAssumptions(electricity_price=50))
    with pytest.raises(NonPositiveSavings) as exc:
        calc.savings_projection(10, "city")
    assert isinstance(exc.value, ComputationError)
    assert exc.value.annual_savings < 0


@pytest.mark.parametrize("budget", [math.inf, math.nan])
def test_savings_projection_rejects_non_finite_budget(budget):
    with pytest.raises(ValidationError):
        SubsidyCalculator().savings_projection(budget, "city")


def test_charging_stations_fallback():
    assert charging_stations("Delhi")[0].name == "Delhi Metro Station - CP"
    assert [s.name for s in charging_stations("Goa")] == ["Public Charging Hub", "Fast Charge Station"]
