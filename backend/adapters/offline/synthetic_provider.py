import random
from datetime import datetime, timezone
from typing import Optional

from core.interfaces import RouteProvider, TrafficProvider
from models.routes import AlternativeRoute, RouteResult, TrafficIncident, TrafficStatus

TRAFFIC_LEVELS = ("light", "moderate", "heavy")

# Half-open ranges [lo, hi)
DISTANCE_RANGE_M = (10000, 60000)
DURATION_RANGE_S = (1200, 4800)

SAMPLE_POLYLINE = "sample_polyline_data"

_INCIDENTS = (
    TrafficIncident(location="Western Express Highway", type="Heavy Traffic", severity="moderate"),
    TrafficIncident(location="Mumbai-Pune Expressway", type="Construction Work", severity="low"),
    TrafficIncident(location="Bandra-Worli Sea Link", type="Accident Cleared", severity="low"),
)

_ALTERNATIVES = (
    AlternativeRoute(name="Scenic Route", added_time=15, fuel_saving=12, co2_reduction=8),
    AlternativeRoute(name="Highway Route", added_time=-5, fuel_saving=-5, co2_reduction=-2),
    AlternativeRoute(name="Local Roads", added_time=20, fuel_saving=18, co2_reduction=15),
)


class SyntheticRouteProvider(RouteProvider):
    """
    Offline provider for demos and tests. Ignores the actual endpoints and
    returns a bounded random distance/duration.
    """

    name = "synthetic"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    async def get_route(
        self, origin: str, destination: str, mode: str = "driving"
    ) -> RouteResult:
        return RouteResult(
            distance_m=self.rng.randrange(*DISTANCE_RANGE_M),
            duration_s=self.rng.randrange(*DURATION_RANGE_S),
            polyline=SAMPLE_POLYLINE,
            provider=self.name,
        )


class SyntheticTrafficProvider(TrafficProvider):
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    async def get_status(self) -> TrafficStatus:
        return TrafficStatus(
            level=self.rng.choice(TRAFFIC_LEVELS),
            incidents=list(_INCIDENTS),
            alternatives=list(_ALTERNATIVES),
            last_updated=datetime.now(timezone.utc),
        )
