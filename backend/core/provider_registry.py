# core/provider_registry.py
from typing import Callable, Dict
from core.exceptions import ProviderNotRegistered
from core.interfaces import RouteProvider


class ProviderRegistry:
    _factories: Dict[str, Callable[[], RouteProvider]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[[], RouteProvider]) -> None:
        key = name.lower().strip()
        if key in cls._factories:
            raise ValueError(f"Route provider '{name}' is already registered.")
        cls._factories[key] = factory

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name.lower().strip() in cls._factories

    @classmethod
    def get(cls, name: str) -> RouteProvider:
        key = name.lower().strip()
        if key not in cls._factories:
            raise ProviderNotRegistered(f"Route provider '{name}' is not registered.")
        return cls._factories[key]()  # create instance

    @classmethod
    def list_providers(cls) -> list[str]:
        return sorted(cls._factories.keys())