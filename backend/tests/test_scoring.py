# backend/tests/test_scoring.py
import math
import random

import pytest

from core.exceptions import ValidationError
from models.vehicles import Priority, Usage
from services.catalog import VehicleCatalog
from services.scoring import (
    WEIGHTS,
    ScoringEngine,
    compare_vehicles,
    normalized_scores,
    recommendation_reason,
    recommendation_tier,
    score_for_profile,
    score_vehicle,
)
from data_toy import car


class FixedRandom(random.Random):
    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def randrange(self, *args, **kwargs):
        return self.value


# ───────────────────────── composite scoring ─────────────────────────


def test_weights_sum_to_one():
    assert math.isclose(math.fsum(WEIGHTS.values()), 1.0)
    assert set(WEIGHTS) == {"price", "mileage", "safety", "emissions", "maintenance"}


def test_swift_is_recommended():
    score = score_vehicle(car())
    assert score == pytest.approx(73.0333, abs=1e-3)
    assert recommendation_tier(score) == "Recommended"


def test_attributes_at_caps_score_only_saturated_weights():
    # mileage and safety saturate at 100; price/emissions/maintenance hit 0
    at_caps = car(price=50, mileage=30, safety=5, emissions=200, maintenance=60000)
    expected = 100 * (WEIGHTS["mileage"] + WEIGHTS["safety"])
    assert score_vehicle(at_caps) == pytest.approx(expected)

    beyond_caps = car(price=80, mileage=45, safety=5, emissions=300, maintenance=90000)
    assert score_vehicle(beyond_caps) == pytest.approx(expected)


def test_sub_scores_are_clamped():
    norm = normalized_scores(car(price=120, mileage=60, safety=0, emissions=500, maintenance=10**6))
    assert all(0 <= v <= 100 for v in norm.values())
    assert norm["price"] == 0
    assert norm["mileage"] == 100
    assert norm["emissions"] == 0


def test_floor_attributes_never_negative():
    zero = car(price=0, mileage=0, safety=0, emissions=0, maintenance=0)
    expected = 100 * (WEIGHTS["price"] + WEIGHTS["emissions"] + WEIGHTS["maintenance"])
    assert score_vehicle(zero) == pytest.approx(expected)


def test_score_is_pure():
    a = car(name="A")
    b = car(name="B")
    assert score_vehicle(a) == score_vehicle(b) == score_vehicle(a)


@pytest.mark.parametrize(
    "score,tier",
    [
        (100, "Highly Recommended"),
        (80, "Highly Recommended"),
        (79.99, "Recommended"),
        (65, "Recommended"),
        (64.99, "Consider"),
        (50, "Consider"),
        (49.99, "Not Recommended"),
        (0, "Not Recommended"),
    ],
)
def test_tier_thresholds(score, tier):
    assert recommendation_tier(score) == tier


def test_compare_ranks_descending():
    results = compare_vehicles(
        [
            car(name="Safari", price=18.0, mileage=13.8, safety=5, emissions=180, maintenance=52000),
            car(name="Swift"),
            car(name="i20", price=8.5, mileage=20.5, safety=5, emissions=125, maintenance=40000),
        ]
    )
    assert [r.vehicle.name for r in results] == ["i20", "Swift", "Safari"]
    assert results[-1].recommendation == "Consider"


def test_compare_ties_keep_input_order():
    first = compare_vehicles([car(name="A"), car(name="B")])
    second = compare_vehicles([car(name="B"), car(name="A")])
    assert [r.vehicle.name for r in first] == ["A", "B"]
    assert [r.vehicle.name for r in second] == ["B", "A"]


# ───────────────────────── profile scoring ─────────────────────────


def test_priority_branches():
    v = car(price=5, mileage=10, safety=4)
    assert score_for_profile(v, Priority.FUEL, Usage.HIGHWAY, 10) == pytest.approx(40 + 0)
    assert score_for_profile(v, Priority.PERFORMANCE, Usage.CITY, 10) == pytest.approx(25)
    assert score_for_profile(v, Priority.SAFETY, Usage.CITY, 10) == pytest.approx(72)
    assert score_for_profile(v, Priority.FEATURES, Usage.CITY, 10) == pytest.approx(40 + 15)


def test_usage_and_family_bonuses():
    v = car(price=12, mileage=21, safety=4)
    base = 21 * 4
    assert score_for_profile(v, "fuel", "city", 20) == pytest.approx(base + 15)
    assert score_for_profile(v, "fuel", "highway", 20) == pytest.approx(base + 10)
    assert score_for_profile(v, "fuel", "family", 20) == pytest.approx(base + 20)
    assert score_for_profile(v, "fuel", "mixed", 20) == pytest.approx(base + 42)
    assert score_for_profile(v, "fuel", "city", 20, family_size=6) == pytest.approx(base + 15 + 10)

    small = car(price=6, mileage=10, safety=3)
    assert score_for_profile(small, "safety", "highway", 20, family_size=2) == pytest.approx(54 + 5)


def test_unknown_priority_or_usage_fails():
    with pytest.raises(ValidationError):
        score_for_profile(car(), "speed", "city", 10)
    with pytest.raises(ValidationError):
        score_for_profile(car(), "fuel", "offroad", 10)
    with pytest.raises(ValidationError):
        score_for_profile(car(), "fuel", "city", 0)
    with pytest.raises(ValidationError):
        score_for_profile(car(), "fuel", "city", math.inf)


def test_recommend_rejects_non_finite_budget(rng):
    with pytest.raises(ValidationError):
        ScoringEngine(VehicleCatalog(), rng).recommend_for_profile(math.nan, "city", "fuel", 4)


def test_recommend_filters_budget_and_takes_top_five(rng):
    engine = ScoringEngine(rng=rng)
    recs = engine.recommend_for_profile(10, "city", "fuel")
    names = [r.vehicle.name for r in recs]
    assert names == ["Maruti Dzire", "Maruti Swift", "Maruti Baleno", "Tata Altroz", "Hyundai i20"]
    assert all(r.vehicle.price <= 10 for r in recs)
    assert recs[0].reason == "excellent fuel efficiency and low emissions"
    assert all(r.confidence == 95 for r in recs)


def test_recommend_ties_follow_catalog_order(rng):
    engine = ScoringEngine(rng=rng)
    recs = engine.recommend_for_profile(9, Usage.FAMILY, Priority.SAFETY, family_size=5)
    assert [r.vehicle.name for r in recs] == [
        "Hyundai i20",
        "Tata Nexon",
        "Tata Altroz",
        "Maruti Swift",
        "Maruti Baleno",
    ]


def test_recommend_with_nothing_affordable(rng):
    assert ScoringEngine(rng=rng).recommend_for_profile(1, "city", "fuel") == []


def test_confidence_jitter_bounds():
    catalog = VehicleCatalog(cars=[car(name="Cheap", price=5, mileage=10, safety=3)], evs=[])

    low = ScoringEngine(catalog, rng=FixedRandom(0)).recommend_for_profile(10, "highway", "performance")
    high = ScoringEngine(catalog, rng=FixedRandom(19)).recommend_for_profile(10, "highway", "performance")
    assert low[0].ai_score == pytest.approx(25)
    assert low[0].confidence == pytest.approx(25)
    assert high[0].confidence == pytest.approx(44)

    seeded = ScoringEngine(catalog, rng=random.Random(3))
    for _ in range(50):
        c = seeded.recommend_for_profile(10, "highway", "performance")[0].confidence
        assert 25 <= c < 45


def test_reason_defaults_and_caps_at_two():
    plain = car(price=20, mileage=12, safety=3, emissions=170)
    assert recommendation_reason(plain, Priority.SAFETY, Usage.CITY) == "good overall value"

    loaded = car(mileage=25, safety=5, emissions=100)
    reason = recommendation_reason(loaded, Priority.FUEL, Usage.FAMILY)
    assert reason == "excellent fuel efficiency and top safety rating"


def test_overall_confidence_bounds():
    engine = ScoringEngine(rng=FixedRandom(9))
    assert engine.overall_confidence(10, "city", "fuel") == 95
    assert engine.overall_confidence(3, None, None) == 84
