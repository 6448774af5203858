import os
import httpx
from typing import Any, Dict

from core.interfaces import RouteProvider
from core.exceptions import UpstreamUnavailable
from models.routes import RouteResult

DIRECTIONS_URL = "https://maps.googleapis.com/maps/api/directions/json"


class GoogleDirectionsProvider(RouteProvider):
    name = "google"

    def __init__(self, api_key: str = None, timeout_s: float = 15.0):
        self.api_key = api_key or os.getenv("GOOGLE_MAPS_API_KEY")
        if not self.api_key:
            raise UpstreamUnavailable("Google Maps API key not provided.")
        self.timeout_s = timeout_s

    @staticmethod
    def _parse(data: Dict[str, Any]) -> RouteResult:
        status = data.get("status", "UNKNOWN")
        if status != "OK":
            raise UpstreamUnavailable(
                f"Google Directions returned {status}: {data.get('error_message', '')}".strip()
            )
        try:
            route = data["routes"][0]
            leg = route["legs"][0]
            return RouteResult(
                distance_m=float(leg["distance"]["value"]),
                duration_s=float(leg["duration"]["value"]),
                polyline=route.get("overview_polyline", {}).get("points", ""),
                provider="google",
            )
        except (KeyError, IndexError, TypeError) as e:
            raise UpstreamUnavailable(f"Malformed Google Directions response: {e}") from e

    async def get_route(
        self, origin: str, destination: str, mode: str = "driving"
    ) -> RouteResult:
        mode_map = {"driving": "driving", "walking": "walking", "cycling": "bicycling"}
        params = {
            "origin": origin,
            "destination": destination,
            "mode": mode_map.get((mode or "driving").lower(), "driving"),
            "key": self.api_key,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                response = await client.get(DIRECTIONS_URL, params=params)
        except httpx.HTTPError as e:
            raise UpstreamUnavailable(f"Google Directions request failed: {e}") from e

        if response.status_code != 200:
            raise UpstreamUnavailable(
                f"Google Directions API error {response.status_code}: {response.text}"
            )
        return self._parse(response.json())
