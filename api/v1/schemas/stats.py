from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from core.diet import DietType
from core.models import Meal, Profile


class HistoryIn(BaseModel):
    profile: Profile
    meals: list[Meal] = []
    period: int = Field(30, ge=1, le=365)
    today: dt.date | None = None


class WeekAverageOut(BaseModel):
    label: str
    avg_calories: int

    model_config = ConfigDict(from_attributes=True)


class IFStatsOut(BaseModel):
    compliance_percent: int
    compliant_days: int
    total_days_with_meals: int
    current_streak: int
    max_streak: int
    avg_fast_hours: int

    model_config = ConfigDict(from_attributes=True)


class MacroGrams(BaseModel):
    protein: int
    carbs: int
    fat: int


class HistoryOut(BaseModel):
    avg_calories: int
    avg_7: int
    avg_30: int
    avg_macros: MacroGrams
    avg_diet_type: DietType
    trend: Literal["up", "down", "stable"]
    avg_score: float
    weeks: list[WeekAverageOut]
    if_stats: IFStatsOut | None


class FastingIn(BaseModel):
    profile: Profile
    now: dt.datetime | None = None


class FastingOut(BaseModel):
    enabled: bool
    window: str
    in_window: bool
    is_fasting: bool
    hours: int
    minutes: int
