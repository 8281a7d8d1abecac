"""
core/daily.py
────────────────────────────────────────────────────────────────────────
Calendar helpers and the per-day meal summary.

A meal belongs to exactly one day: the date part of its own `eaten_at`
timestamp, in whatever offset the timestamp carries.  No conversion to
server-local time happens here.
"""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from core.models import Meal


def format_date(value: dt.date) -> str:
    """`YYYY-MM-DD` for a date or datetime."""
    return value.strftime("%Y-%m-%d")


def meal_date(meal: Meal) -> dt.date:
    return meal.eaten_at.date()


def get_week_dates(reference: dt.date | None = None) -> list[str]:
    """Seven dates, Monday first, for the ISO week containing `reference`."""
    ref = reference or dt.date.today()
    if isinstance(ref, dt.datetime):
        ref = ref.date()
    monday = ref - dt.timedelta(days=ref.weekday())
    return [format_date(monday + dt.timedelta(days=i)) for i in range(7)]


def get_days_back(period: int, today: dt.date | None = None) -> list[dt.date]:
    """`period` consecutive dates ending on `today`, oldest first."""
    end = today or dt.date.today()
    return [end - dt.timedelta(days=i) for i in range(period - 1, -1, -1)]


@dataclass(frozen=True)
class DailySummary:
    date: str
    meals: list[Meal] = field(default_factory=list)
    total_calories: float = 0
    total_protein: float = 0
    total_carbs: float = 0
    total_fat: float = 0
    total_fiber: float = 0


def _as_date(value: dt.date | str) -> dt.date:
    if isinstance(value, str):
        return dt.date.fromisoformat(value)
    if isinstance(value, dt.datetime):
        return value.date()
    return value


def get_daily_summary(meals: Iterable[Meal], day: dt.date | str) -> DailySummary:
    target = _as_date(day)
    day_meals: Sequence[Meal] = [m for m in meals if meal_date(m) == target]
    return DailySummary(
        date=format_date(target),
        meals=list(day_meals),
        total_calories=math.fsum(m.calories for m in day_meals),
        total_protein=math.fsum(m.protein_g for m in day_meals),
        total_carbs=math.fsum(m.carbs_g for m in day_meals),
        total_fat=math.fsum(m.fat_g for m in day_meals),
        total_fiber=math.fsum(m.fiber_g for m in day_meals),
    )
