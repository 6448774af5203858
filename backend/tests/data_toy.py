# backend/tests/data_toy.py
from models.vehicles import ElectricVehicle, Vehicle


def car(name="Toy", price=6.5, mileage=23.2, safety=4, emissions=120, maintenance=35000):
    return Vehicle(
        name=name,
        price=price,
        mileage=mileage,
        safety=safety,
        emissions=emissions,
        maintenance=maintenance,
    )


def ev(name="Toy EV", price=16.5, range_km=312, charging_hours=8.5, efficiency=4.0):
    return ElectricVehicle(
        name=name,
        price=price,
        range_km=range_km,
        charging_hours=charging_hours,
        efficiency=efficiency,
    )


COMPARE_PAYLOAD = {
    "cars": [
        {"name": "Tata Safari", "price": 18.0, "mileage": 13.8, "safety": 5, "emissions": 180, "maintenance": 52000},
        {"name": "Maruti Swift", "price": 6.5, "mileage": 23.2, "safety": 4, "emissions": 120, "maintenance": 35000},
        {"name": "Hyundai i20", "price": 8.5, "mileage": 20.5, "safety": 5, "emissions": 125, "maintenance": 40000},
    ]
}
