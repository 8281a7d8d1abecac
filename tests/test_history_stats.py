"""
Period statistics over a small synthetic history (no DB).
"""
import datetime as dt

import pandas as pd

from core import history_stats as hs
from core.daily import get_days_back
from core.models import Meal

TODAY = dt.date(2026, 3, 14)


def _meal(day: dt.date, kcal, p=0, c=0, f=0, score=None, hour=12) -> Meal:
    return Meal(
        calories=kcal,
        protein_g=p,
        carbs_g=c,
        fat_g=f,
        eaten_at=dt.datetime.combine(day, dt.time(hour)),
        score=score,
    )


def _ago(n: int) -> dt.date:
    return TODAY - dt.timedelta(days=n)


HISTORY = [
    _meal(_ago(0), 1200, 60, 120, 40, score=8),
    _meal(_ago(0), 800, 40, 80, 30, score=6, hour=19),
    _meal(_ago(1), 1800, 90, 200, 60, score=7),
    _meal(_ago(3), 2200, 100, 250, 80),
    # nothing on _ago(2), _ago(4..6)
    _meal(_ago(10), 2600, 120, 300, 90, score=4),
]


def test_daily_totals_one_row_per_day():
    totals = hs.daily_totals(HISTORY)
    assert isinstance(totals, pd.DataFrame)
    assert len(totals) == 4
    assert totals.loc[TODAY, "calories"] == 2000
    assert totals.loc[TODAY, "fat_g"] == 70


def test_daily_totals_empty():
    assert hs.daily_totals([]).empty


def test_average_daily_intake_skips_empty_days():
    # last 7 days: 2000, 1800, 2200 -> 2000
    assert hs.average_daily_intake(HISTORY, get_days_back(7, TODAY)) == 2000


def test_average_daily_intake_no_data():
    assert hs.average_daily_intake([], get_days_back(7, TODAY)) == 0
    assert hs.average_daily_intake(HISTORY, get_days_back(7, _ago(20))) == 0


def test_average_macros():
    avg = hs.average_macros(HISTORY, get_days_back(7, TODAY))
    # protein: (100 + 90 + 100) / 3
    assert avg == {"protein": 97, "carbs": 217, "fat": 70}


def test_average_macros_no_data():
    assert hs.average_macros([], get_days_back(7, TODAY)) == {"protein": 0, "carbs": 0, "fat": 0}


def test_trend_down_and_single_half():
    # older half (days -6..-3) only has -3, recent half (-2..0) has -1 and 0
    # older 2200 vs recent 1900 -> down
    assert hs.calorie_trend(HISTORY, TODAY) == "down"
    assert hs.calorie_trend([_meal(TODAY, 2000)], TODAY) == "stable"


def test_trend_up():
    meals = [_meal(_ago(5), 1500), _meal(_ago(1), 1800)]
    assert hs.calorie_trend(meals, TODAY) == "up"


def test_trend_within_threshold_is_stable():
    meals = [_meal(_ago(5), 2000), _meal(_ago(1), 2100)]
    assert hs.calorie_trend(meals, TODAY) == "stable"


def test_average_score():
    # (8 + 6 + 7 + 4) / 4 = 6.25 -> 6.3
    assert hs.average_score(HISTORY) == 6.3
    assert hs.average_score([_meal(TODAY, 500)]) == 0.0


def test_weekly_comparison():
    weeks = hs.weekly_comparison(HISTORY, get_days_back(14, TODAY))
    assert [w.label for w in weeks] == ["Week 1", "Week 2"]
    # week 1 = days -13..-7 (only -10), week 2 = -6..0
    assert weeks[0].avg_calories == 2600
    assert weeks[1].avg_calories == 2000


def test_weekly_comparison_partial_week():
    weeks = hs.weekly_comparison([], get_days_back(10, TODAY))
    assert len(weeks) == 2
    assert all(w.avg_calories == 0 for w in weeks)
