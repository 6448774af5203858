# api/vehicle_routes.py
from fastapi import APIRouter, Depends

from api._resp import fail_from, ok
from api.deps import get_scoring_engine
from core.exceptions import AppError
from models.vehicles import AIRecommendationRequest, CompareCarsRequest
from services.insights import comparison_insights
from services.scoring import ScoringEngine, alternative_options, compare_vehicles

router = APIRouter(prefix="/api", tags=["vehicles"])


@router.post("/compare-cars")
def compare_cars(body: CompareCarsRequest):
    try:
        results = compare_vehicles(body.cars)
        comparison = [r.flat() for r in results]
        return ok(
            {
                "comparison": comparison,
                "best_match": comparison[0],
                "insights": comparison_insights(results),
            }
        )
    except AppError as e:
        fail_from(e, "Failed to compare cars")


@router.post("/ai-recommendations")
def ai_recommendations(
    body: AIRecommendationRequest, engine: ScoringEngine = Depends(get_scoring_engine)
):
    try:
        recs = engine.recommend_for_profile(
            body.budget, body.usage, body.priority, body.family_size
        )
        return ok(
            {
                "recommendations": [r.flat() for r in recs],
                "confidence": engine.overall_confidence(body.budget, body.usage, body.priority),
                "alternatives": alternative_options(),
            }
        )
    except AppError as e:
        fail_from(e, "Failed to generate recommendations")
