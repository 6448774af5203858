from __future__ import annotations


class AppError(Exception):
    """Base app error."""


class ValidationError(AppError):
    """Raised when an input is malformed or outside the accepted domain."""


class UnknownVehicleType(ValidationError):
    """Raised when a vehicle/fuel type has no emission factor."""

    def __init__(self, vehicle_type: str):
        super().__init__(f"Unknown vehicle type '{vehicle_type}'")
        self.vehicle_type = vehicle_type


class InvalidDistance(ValidationError):
    """Raised when a trip distance is not a finite positive number."""

    def __init__(self, distance_km: float):
        super().__init__(f"Distance must be a finite positive number, got {distance_km}")
        self.distance_km = distance_km


class ComputationError(AppError):
    """Raised when a calculation has no meaningful result."""


class NonPositiveSavings(ComputationError):
    """Raised when an EV does not save money against the reference car."""

    def __init__(self, annual_savings: float):
        super().__init__(
            f"Annual savings must be positive to compute payback, got {annual_savings:.2f}"
        )
        self.annual_savings = annual_savings


class UpstreamUnavailable(AppError):
    """Raised when a route or traffic provider fails."""


class ProviderNotRegistered(ValidationError):
    """Raised when a route provider name is not in the registry."""
