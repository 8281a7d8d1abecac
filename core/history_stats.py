"""
core/history_stats.py
────────────────────────────────────────────────────────────────────────
Period statistics over a meal history:

  • per-day totals (one row per calendar date)
  • average intake / macros over the days that actually have data
  • short-term calorie trend (last 3 days vs the 4 before)
  • weekly average comparison
  • average meal score

Days with no logged food are skipped by the averages rather than
counted as zero-intake days.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Iterable, Literal, Sequence

import pandas as pd

from core.daily import get_days_back, meal_date
from core.models import Meal
from core.nutrition_calc import round_half_up

_LOG = logging.getLogger(__name__)

NUTRIENTS = ["calories", "protein_g", "carbs_g", "fat_g", "fiber_g"]
MACROS = ["protein_g", "carbs_g", "fat_g"]

# kcal difference between the two halves of the week that counts as a trend
TREND_THRESHOLD_KCAL = 100

Trend = Literal["up", "down", "stable"]


def _frame(meals: Iterable[Meal]) -> pd.DataFrame:
    rows = [
        {"date": meal_date(m), **{k: float(getattr(m, k)) for k in NUTRIENTS}}
        for m in meals
    ]
    if not rows:
        return pd.DataFrame(columns=["date", *NUTRIENTS])
    return pd.DataFrame(rows)


def daily_totals(meals: Iterable[Meal]) -> pd.DataFrame:
    """One row per date (index), summed nutrient columns."""
    df = _frame(meals)
    if df.empty:
        return pd.DataFrame(columns=NUTRIENTS, dtype=float)
    return df.groupby("date")[NUTRIENTS].sum()


def _over_days(meals: Iterable[Meal], days: Sequence[dt.date]) -> pd.DataFrame:
    return daily_totals(meals).reindex(list(days), fill_value=0.0).astype(float)


def average_daily_intake(meals: Iterable[Meal], days: Sequence[dt.date]) -> int:
    cals = _over_days(meals, days)["calories"]
    with_data = cals[cals > 0]
    if with_data.empty:
        return 0
    return int(round_half_up(float(with_data.mean())))


def average_macros(meals: Iterable[Meal], days: Sequence[dt.date]) -> dict[str, int]:
    frame = _over_days(meals, days)[MACROS]
    with_data = frame[frame.sum(axis=1) > 0]
    if with_data.empty:
        return {"protein": 0, "carbs": 0, "fat": 0}
    avg = with_data.mean()
    return {
        "protein": int(round_half_up(float(avg["protein_g"]))),
        "carbs": int(round_half_up(float(avg["carbs_g"]))),
        "fat": int(round_half_up(float(avg["fat_g"]))),
    }


def calorie_trend(meals: Iterable[Meal], today: dt.date | None = None) -> Trend:
    cals = _over_days(meals, get_days_back(7, today))["calories"]
    older = cals.iloc[:4]
    recent = cals.iloc[4:]
    older, recent = older[older > 0], recent[recent > 0]
    if older.empty or recent.empty:
        return "stable"

    diff = float(recent.mean()) - float(older.mean())
    _LOG.debug("calorie trend diff=%.1f kcal", diff)
    if diff > TREND_THRESHOLD_KCAL:
        return "up"
    if diff < -TREND_THRESHOLD_KCAL:
        return "down"
    return "stable"


def average_score(meals: Iterable[Meal]) -> float:
    scores = pd.Series([m.score for m in meals if m.score is not None], dtype=float)
    if scores.empty:
        return 0.0
    return round_half_up(float(scores.mean()), 1)


@dataclass(frozen=True)
class WeekAverage:
    label: str
    avg_calories: int


def weekly_comparison(meals: Iterable[Meal], days: Sequence[dt.date]) -> list[WeekAverage]:
    cals = _over_days(meals, days)["calories"]
    weeks: list[WeekAverage] = []
    for n, start in enumerate(range(0, len(cals), 7), start=1):
        chunk = cals.iloc[start:start + 7]
        chunk = chunk[chunk > 0]
        avg = int(round_half_up(float(chunk.mean()))) if not chunk.empty else 0
        weeks.append(WeekAverage(label=f"Week {n}", avg_calories=avg))
    return weeks
