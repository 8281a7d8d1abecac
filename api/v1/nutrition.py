# api/v1/nutrition.py
from __future__ import annotations

import datetime as dt

from fastapi import APIRouter, Depends, Query, status

from core.daily import get_daily_summary, get_week_dates
from core.diet import classify_diet, get_macro_percentages
from core.models import Profile
from core.nutrition_calc import NutritionalCalculator
from api.v1.deps import rate_limited
from api.v1.schemas import (
    DailySummaryIn,
    DailySummaryOut,
    DietOut,
    MacroPercentages,
    MacrosIn,
    TargetsOut,
)

router = APIRouter()
_calc = NutritionalCalculator()


@router.post(
    "/targets",
    response_model=TargetsOut,
    status_code=status.HTTP_200_OK,
    summary="BMR, TDEE, calorie target and macro targets for a profile",
)
async def targets(
    body: Profile,
    _user: str = Depends(rate_limited("profile_read")),
) -> TargetsOut:
    return TargetsOut(**_calc.targets(body))


@router.post("/daily-summary", response_model=DailySummaryOut)
async def daily_summary(
    body: DailySummaryIn,
    _user: str = Depends(rate_limited("meals_read")),
) -> DailySummaryOut:
    summary = get_daily_summary(body.meals, body.date)
    return DailySummaryOut.model_validate(summary, from_attributes=True)


@router.post("/diet", response_model=DietOut)
async def diet(
    body: MacrosIn,
    _user: str = Depends(rate_limited("meals_read")),
) -> DietOut:
    return DietOut(
        diet_type=classify_diet(body.protein_g, body.carbs_g, body.fat_g),
        percentages=MacroPercentages(
            **get_macro_percentages(body.protein_g, body.carbs_g, body.fat_g)
        ),
    )


@router.get("/week", response_model=list[str])
async def week(
    reference: dt.date | None = Query(None, description="any day of the week"),
    _user: str = Depends(rate_limited("meals_read")),
) -> list[str]:
    """Monday-first dates of the week containing `reference` (default today)."""
    return get_week_dates(reference)
