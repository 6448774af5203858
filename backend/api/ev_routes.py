# api/ev_routes.py
from fastapi import APIRouter, Depends

from api._resp import fail_from, ok
from api.deps import get_subsidy_calculator
from core.exceptions import AppError
from models.vehicles import EVRecommendationRequest
from services.subsidy import SubsidyCalculator, charging_stations, subsidy_info

router = APIRouter(prefix="/api", tags=["ev"])


@router.post("/ev-recommendations")
def ev_recommendations(
    body: EVRecommendationRequest,
    calculator: SubsidyCalculator = Depends(get_subsidy_calculator),
):
    try:
        options = calculator.ev_recommendations(body.state, body.budget, body.usage)
        # Computed before building the payload so a failure returns no partial data
        savings = calculator.savings_projection(body.budget, body.usage)
        return ok(
            {
                "recommendations": [o.flat() for o in options],
                "subsidies": subsidy_info(body.state).model_dump(),
                "charging_stations": [s.model_dump() for s in charging_stations(body.state)],
                "savings_calculation": savings.model_dump(),
            }
        )
    except AppError as e:
        fail_from(e, "Failed to get EV recommendations")
