import os
import httpx
from typing import Any, Dict

from core.interfaces import RouteProvider
from core.exceptions import UpstreamUnavailable
from models.routes import RouteResult

ROUTES_URL = "https://router.hereapi.com/v8/routes"


class HereRoutingProvider(RouteProvider):
    """
    HERE Routing v8. Origin/destination must be "lat,lng" strings.

    HERE encodes each section as its own flexible polyline, and encoded strings
    cannot be concatenated. `polyline` is the first section; every section
    is kept in order in `section_polylines`.
    """

    name = "here"

    def __init__(self, api_key: str = None, timeout_s: float = 15.0):
        self.api_key = api_key or os.getenv("HERE_API_KEY")
        if not self.api_key:
            raise UpstreamUnavailable("HERE API key not provided.")
        self.timeout_s = timeout_s

    @staticmethod
    def _parse(data: Dict[str, Any]) -> RouteResult:
        routes = data.get("routes") or []
        if not routes:
            raise UpstreamUnavailable("HERE returned no routes")
        sections = routes[0].get("sections") or []
        if not sections:
            raise UpstreamUnavailable("HERE route has no sections")

        # A route may be split into several sections; totals are their sum
        try:
            distance = sum(float(s["summary"]["length"]) for s in sections)
            duration = sum(float(s["summary"]["duration"]) for s in sections)
        except (KeyError, TypeError) as e:
            raise UpstreamUnavailable(f"Malformed HERE response: {e}") from e
        return RouteResult(
            distance_m=distance,
            duration_s=duration,
            polyline=sections[0].get("polyline", ""),
            provider="here",
            section_polylines=[s.get("polyline", "") for s in sections],
        )

    async def get_route(
        self, origin: str, destination: str, mode: str = "driving"
    ) -> RouteResult:
        mode_map = {"driving": "car", "walking": "pedestrian", "cycling": "bicycle"}
        params = {
            "transportMode": mode_map.get((mode or "driving").lower(), "car"),
            "origin": origin,
            "destination": destination,
            "return": "summary,polyline",
            "apikey": self.api_key,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                response = await client.get(ROUTES_URL, params=params)
        except httpx.HTTPError as e:
            raise UpstreamUnavailable(f"HERE request failed: {e}") from e

        if response.status_code != 200:
            raise UpstreamUnavailable(f"HERE API error {response.status_code}: {response.text}")
        return self._parse(response.json())
