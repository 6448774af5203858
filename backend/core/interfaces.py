from __future__ import annotations
from abc import ABC, abstractmethod
from models.routes import RouteResult, TrafficStatus


class RouteProvider(ABC):
    """All synthetic/online routing backends must implement this."""

    name: str = "route"

    @abstractmethod
    async def get_route(
        self, origin: str, destination: str, mode: str = "driving"
    ) -> RouteResult: ...


class TrafficProvider(ABC):
    """Current traffic level, incidents and suggested alternatives."""

    @abstractmethod
    async def get_status(self) -> TrafficStatus: ...
