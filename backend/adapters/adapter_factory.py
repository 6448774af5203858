from core.provider_registry import ProviderRegistry
from core.interfaces import RouteProvider


def create_route_provider(name: str) -> RouteProvider:
    return ProviderRegistry.get(name)
