# tests/test_nutrition_calc.py
from __future__ import annotations

import math
import pytest

from core.models import Profile
from core.nutrition_calc import (
    InvalidProfileError,
    NutritionalCalculator,
    calculate_bmr,
    calculate_calorie_target,
    calculate_tdee,
    get_macro_targets,
    round_half_up,
)

calc = NutritionalCalculator()

MALE = Profile(
    weight_kg=80,
    height_cm=180,
    age=30,
    gender="male",
    activity_level="moderate",
    goal="maintain",
    daily_calorie_target=2500,
    body_fat_percent=20,
)
FEMALE = MALE.model_copy(update={"gender": "female", "weight_kg": 65, "height_cm": 165, "age": 28})


# ── BMR / TDEE ───────────────────────────────────────────────────────
def test_bmr_mifflin_male():
    # 800 + 1125 - 150 + 5
    assert calculate_bmr(MALE) == 1780.0


def test_bmr_mifflin_female():
    # 650 + 1031.25 - 140 - 161
    assert math.isclose(calculate_bmr(FEMALE), 1380.25)


def test_bmr_is_affine_in_weight():
    heavier = MALE.model_copy(update={"weight_kg": 81})
    assert math.isclose(calculate_bmr(heavier) - calculate_bmr(MALE), 10)


@pytest.mark.parametrize(
    "level, multiplier",
    [
        ("sedentary", 1.2),
        ("light", 1.375),
        ("moderate", 1.55),
        ("active", 1.725),
        ("very_active", 1.9),
    ],
)
def test_tdee_activity_multiplier(level, multiplier):
    p = MALE.model_copy(update={"activity_level": level})
    assert calculate_tdee(p) == int(round_half_up(1780 * multiplier))


def test_tdee_is_integer():
    assert isinstance(calculate_tdee(FEMALE), int)
    # 1380.25 * 1.55 = 2139.3875
    assert calculate_tdee(FEMALE) == 2139


# ── calorie target ───────────────────────────────────────────────────
@pytest.mark.parametrize("goal, offset", [("maintain", 0), ("lose", -500), ("gain", 300)])
@pytest.mark.parametrize("base", [MALE, FEMALE])
def test_calorie_target_goal_offsets(base, goal, offset):
    p = base.model_copy(update={"goal": goal})
    assert calculate_calorie_target(p) == calculate_tdee(p) + offset


# ── invalid enums fail fast ──────────────────────────────────────────
def test_unknown_gender_rejected():
    p = MALE.model_construct(**{**MALE.model_dump(), "gender": "other"})
    with pytest.raises(InvalidProfileError, match="gender"):
        calculate_bmr(p)


def test_unknown_activity_rejected():
    p = MALE.model_construct(**{**MALE.model_dump(), "activity_level": "couch"})
    with pytest.raises(InvalidProfileError, match="activity level"):
        calculate_tdee(p)


def test_unknown_goal_rejected():
    p = MALE.model_construct(**{**MALE.model_dump(), "goal": "bulk"})
    with pytest.raises(InvalidProfileError):
        calculate_calorie_target(p)


def test_invalid_profile_error_is_value_error():
    assert issubclass(InvalidProfileError, ValueError)


# ── macros ───────────────────────────────────────────────────────────
def test_macro_targets_lose_split():
    m = get_macro_targets(2000, "lose")
    assert (m.protein_target_g, m.carbs_target_g, m.fat_target_g) == (150, 200, 67)


def test_macro_targets_maintain_split():
    m = get_macro_targets(2400, "maintain")
    # 600/4, 1080/4, 720/9
    assert (m.protein_target_g, m.carbs_target_g, m.fat_target_g) == (150, 270, 80)


def test_macro_targets_gain_split():
    m = get_macro_targets(3000, "gain")
    # 750/4 = 187.5 rounds up, 1500/4, 750/9 = 83.3
    assert (m.protein_target_g, m.carbs_target_g, m.fat_target_g) == (188, 375, 83)


# ── targets() bundle ─────────────────────────────────────────────────
def test_targets_contain_energy_and_macros():
    t = calc.targets(MALE)
    for k in ("bmr", "tdee", "calorie_target", "protein_target_g", "carbs_target_g", "fat_target_g"):
        assert k in t
    assert t["bmr"] == 1780.0
    assert t["calorie_target"] == t["tdee"] == 2759


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.05, 1) == 0.1
    assert round_half_up(79.35, 1) == 79.4


def test_rejection_is_logged(caplog):
    p = MALE.model_construct(**{**MALE.model_dump(), "goal": "bulk"})
    with caplog.at_level("WARNING", logger="core.nutrition_calc"):
        with pytest.raises(InvalidProfileError):
            calculate_calorie_target(p)
    assert "unknown goal 'bulk'" in caplog.text
