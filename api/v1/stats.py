# api/v1/stats.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from core.daily import get_days_back
from core.diet import classify_diet
from core.fasting import format_if_window, get_fasting_info, get_if_stats, is_in_if_window
from core import history_stats as hs
from api.v1.deps import rate_limited
from api.v1.schemas import (
    FastingIn,
    FastingOut,
    HistoryIn,
    HistoryOut,
    IFStatsOut,
    MacroGrams,
    WeekAverageOut,
)

router = APIRouter()


@router.post("/history", response_model=HistoryOut)
async def history(
    body: HistoryIn,
    _user: str = Depends(rate_limited("meals_read")),
) -> HistoryOut:
    days = get_days_back(body.period, body.today)
    macros = hs.average_macros(body.meals, days)

    if_stats = None
    if body.profile.if_enabled:
        stats = get_if_stats(body.meals, days, body.profile.if_window_hours)
        if_stats = IFStatsOut.model_validate(stats, from_attributes=True)

    return HistoryOut(
        avg_calories=hs.average_daily_intake(body.meals, days),
        avg_7=hs.average_daily_intake(body.meals, get_days_back(7, body.today)),
        avg_30=hs.average_daily_intake(body.meals, get_days_back(30, body.today)),
        avg_macros=MacroGrams(**macros),
        avg_diet_type=classify_diet(macros["protein"], macros["carbs"], macros["fat"]),
        trend=hs.calorie_trend(body.meals, body.today),
        avg_score=hs.average_score(body.meals),
        weeks=[
            WeekAverageOut.model_validate(w, from_attributes=True)
            for w in hs.weekly_comparison(body.meals, days)
        ],
        if_stats=if_stats,
    )


@router.post("/fasting", response_model=FastingOut)
async def fasting(
    body: FastingIn,
    _user: str = Depends(rate_limited("profile_read")),
) -> FastingOut:
    p = body.profile
    info = get_fasting_info(p, body.now)
    return FastingOut(
        enabled=p.if_enabled,
        window=format_if_window(p),
        in_window=is_in_if_window(p, body.now),
        is_fasting=info.is_fasting,
        hours=info.hours,
        minutes=info.minutes,
    )
