# api/v1/body.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from core.body_composition import (
    body_fat_projection,
    calculate_fat_mass,
    calculate_lean_mass,
    get_body_fat_category,
    predict_weight,
    with_latest_measurement,
)
from core.daily import get_days_back
from core.history_stats import average_daily_intake
from api.v1.deps import rate_limited
from api.v1.schemas import (
    BodyFatProjectionOut,
    CompositionIn,
    CompositionOut,
    PredictionIn,
    PredictionOut,
    WeightPredictionOut,
)

router = APIRouter()


@router.post("/composition", response_model=CompositionOut)
async def composition(
    body: CompositionIn,
    _user: str = Depends(rate_limited("measurements")),
) -> CompositionOut:
    return CompositionOut(
        fat_mass_kg=calculate_fat_mass(body.weight_kg, body.body_fat_percent),
        lean_mass_kg=calculate_lean_mass(body.weight_kg, body.body_fat_percent),
        category=get_body_fat_category(body.body_fat_percent, body.gender),
    )


@router.post("/predictions", response_model=PredictionOut)
async def predictions(
    body: PredictionIn,
    _user: str = Depends(rate_limited("measurements")),
) -> PredictionOut:
    """
    Projections from the last 7 days of intake.  Both are null when
    nothing was logged in that week.
    """
    p = with_latest_measurement(body.profile, body.measurements)
    avg7 = average_daily_intake(body.meals, get_days_back(7, body.today))
    if avg7 == 0:
        return PredictionOut(avg_daily_intake=0, weight=None, body_fat=None)

    weight = predict_weight(p.weight_kg, p.daily_calorie_target, avg7, body.days)
    bf = body_fat_projection(p, avg7)
    return PredictionOut(
        avg_daily_intake=avg7,
        weight=WeightPredictionOut.model_validate(weight, from_attributes=True),
        body_fat=(
            BodyFatProjectionOut.model_validate(bf, from_attributes=True) if bf else None
        ),
    )
