# backend/tests/test_insights.py
from services.insights import comparison_insights
from services.scoring import compare_vehicles
from data_toy import car


def test_fewer_than_two_vehicles_yield_no_insights():
    assert comparison_insights([]) == []
    assert comparison_insights(compare_vehicles([car()])) == []


def test_three_insights_for_a_comparison():
    results = compare_vehicles(
        [
            car(name="Tata Safari", price=18.0, mileage=13.8, safety=5, emissions=180, maintenance=52000),
            car(name="Maruti Swift"),
            car(name="Hyundai i20", price=8.5, mileage=20.5, safety=5, emissions=125, maintenance=40000),
        ]
    )
    assert comparison_insights(results) == [
        "Maruti Swift offers the best fuel efficiency at 23.2 km/l",
        "Maruti Swift is the most budget-friendly option at ₹6.5 lakhs",
        # i20 outranks Safari, so it wins the safety tie
        "Hyundai i20 provides the highest safety rating of 5/5",
    ]
