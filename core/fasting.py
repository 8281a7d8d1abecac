"""
core/fasting.py
────────────────────────────────────────────────────────────────────────
Intermittent-fasting helpers: whether a moment falls inside the profile's
eating window, how long the current phase has lasted, and day-level
compliance statistics over a meal history.

The eating window is `[if_window_start, if_window_start + if_window_hours)`
in whole hours and may wrap past midnight.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Iterable, Sequence

import pandas as pd

from core.daily import meal_date
from core.models import Meal
from core.nutrition_calc import round_half_up

MINUTES_PER_DAY = 24 * 60


def _window_end(profile) -> int:
    return (profile.if_window_start + profile.if_window_hours) % 24


def is_in_if_window(profile, now: dt.datetime | None = None) -> bool:
    if not profile.if_enabled:
        return True
    now = now or dt.datetime.now()
    hour = now.hour + now.minute / 60
    start, end = profile.if_window_start, _window_end(profile)
    if end > start:
        return start <= hour < end
    # wraps midnight
    return hour >= start or hour < end


def format_if_window(profile) -> str:
    return f"{profile.if_window_start:02d}:00–{_window_end(profile):02d}:00"


@dataclass(frozen=True)
class FastingInfo:
    is_fasting: bool
    hours: int
    minutes: int


def get_fasting_info(profile, now: dt.datetime | None = None) -> FastingInfo:
    """Time since the eating window opened, or since it closed when fasting."""
    now = now or dt.datetime.now()
    current = now.hour * 60 + now.minute
    fasting = not is_in_if_window(profile, now)
    anchor = (_window_end(profile) if fasting else profile.if_window_start) * 60
    elapsed = (current - anchor) % MINUTES_PER_DAY
    return FastingInfo(is_fasting=fasting, hours=elapsed // 60, minutes=elapsed % 60)


@dataclass(frozen=True)
class IFStats:
    compliance_percent: int
    compliant_days: int
    total_days_with_meals: int
    current_streak: int
    max_streak: int
    avg_fast_hours: int


def get_if_stats(
    meals: Iterable[Meal],
    days: Sequence[dt.date],
    window_hours: int,
) -> IFStats:
    """
    A day is compliant when every meal logged that day was inside the
    eating window.  Days without meals neither count nor break a streak.
    """
    rows = [{"date": meal_date(m), "in_window": m.in_if_window} for m in meals]
    if rows:
        per_day = pd.DataFrame(rows).groupby("date")["in_window"].all()
    else:
        per_day = pd.Series(dtype=bool)

    wanted = set(days)
    logged = [bool(per_day[d]) for d in sorted(wanted) if d in per_day.index]

    compliant = sum(logged)
    max_streak = streak = 0
    for ok in logged:
        streak = streak + 1 if ok else 0
        max_streak = max(max_streak, streak)

    current = 0
    for ok in reversed(logged):
        if not ok:
            break
        current += 1

    pct = int(round_half_up(compliant / len(logged) * 100)) if logged else 0
    return IFStats(
        compliance_percent=pct,
        compliant_days=compliant,
        total_days_with_meals=len(logged),
        current_streak=current,
        max_streak=max_streak,
        avg_fast_hours=24 - window_hours,
    )
