# core/register_providers.py
from __future__ import annotations
import logging
import os
import random
from typing import Any, Callable, Optional

from core.provider_registry import ProviderRegistry
from core.interfaces import RouteProvider

# Offline providers
from adapters.offline.synthetic_provider import SyntheticRouteProvider

# Online providers
from adapters.online.google_directions_provider import GoogleDirectionsProvider
from adapters.online.here_routing_provider import HereRoutingProvider

logger = logging.getLogger(__name__)


def _get_key(settings_obj: Any, attr_name: str, *env_fallbacks: str) -> str | None:
    """Pull API key from settings object if present; otherwise from env."""
    if settings_obj is not None and getattr(settings_obj, attr_name, None):
        return str(getattr(settings_obj, attr_name))
    for env in env_fallbacks:
        val = os.getenv(env)
        if val:
            return val
    return None


def _register_once(name: str, factory: Callable[[], RouteProvider]) -> None:
    if ProviderRegistry.is_registered(name):
        return
    ProviderRegistry.register(name, factory)


def register_providers(settings_obj: Any, rng: Optional[random.Random] = None) -> None:
    """Idempotent; online providers only appear when their key is configured."""
    rng = rng or random.Random(getattr(settings_obj, "RANDOM_SEED", None))
    timeout_s = float(getattr(settings_obj, "HTTP_TIMEOUT_S", 15.0))

    # -----------------------------
    # Offline
    # -----------------------------
    _register_once("synthetic", lambda r=rng: SyntheticRouteProvider(rng=r))

    # -----------------------------
    # Online
    # -----------------------------
    google_key = _get_key(settings_obj, "GOOGLE_MAPS_API_KEY", "GOOGLE_MAPS_API_KEY")
    if google_key:
        _register_once(
            "google",
            lambda k=google_key: GoogleDirectionsProvider(api_key=k, timeout_s=timeout_s),
        )

    here_key = _get_key(settings_obj, "HERE_API_KEY", "HERE_API_KEY")
    if here_key:
        _register_once(
            "here", lambda k=here_key: HereRoutingProvider(api_key=k, timeout_s=timeout_s)
        )

    logger.info("route providers: %s", ", ".join(ProviderRegistry.list_providers()))
