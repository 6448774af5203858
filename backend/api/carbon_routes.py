# api/carbon_routes.py
from fastapi import APIRouter, Depends

from api._resp import fail_from, ok
from api.deps import get_tracker
from core.exceptions import AppError
from models.emissions import TrackCarbonRequest
from services.progress import ProgressTracker

router = APIRouter(prefix="/api", tags=["carbon"])


@router.post("/track-carbon")
def track_carbon(body: TrackCarbonRequest, tracker: ProgressTracker = Depends(get_tracker)):
    try:
        outcome = tracker.record_trip(body.distance, body.vehicle_type, body.route)
        return ok(outcome.flat())
    except AppError as e:
        fail_from(e, "Failed to track carbon footprint")


@router.get("/dashboard")
def dashboard(tracker: ProgressTracker = Depends(get_tracker)):
    return ok(tracker.dashboard())
