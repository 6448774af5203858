# api/routing_routes.py
import logging

from fastapi import APIRouter, Depends

from adapters.adapter_factory import create_route_provider
from api._resp import fail_from, ok
from api.deps import get_traffic_provider
from config import get_settings
from core.exceptions import AppError
from core.interfaces import TrafficProvider
from models.emissions import Footprint
from models.routes import RouteRequest
from services.emissions.calculator import compute_footprint

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["routes"])


@router.post("/routes", summary="Route between two places with its carbon footprint")
async def plan_route(
    body: RouteRequest, traffic: TrafficProvider = Depends(get_traffic_provider)
):
    name = body.provider or get_settings().ROUTE_PROVIDER
    try:
        provider = create_route_provider(name)
        route = await provider.get_route(body.origin, body.destination, body.mode)
        if route.distance_m > 0:
            footprint = compute_footprint(route.distance_km, body.vehicle_type)
        else:
            # Origin and destination coincide
            footprint = Footprint(emissions=0.0, fuel_consumed=0.0, cost=0.0, eco_score=100.0)
        status = await traffic.get_status()
    except AppError as e:
        fail_from(e, "Failed to calculate route")

    logger.debug("route via %s: %.0f m", route.provider, route.distance_m)
    return ok(
        {
            "route": route.model_dump(),
            "footprint": footprint.model_dump(),
            "traffic_status": status.level,
        }
    )


@router.get("/traffic-updates")
async def traffic_updates(traffic: TrafficProvider = Depends(get_traffic_provider)):
    try:
        status = await traffic.get_status()
    except AppError as e:
        fail_from(e, "Failed to get traffic updates")
    return ok(status.model_dump(mode="json"))
