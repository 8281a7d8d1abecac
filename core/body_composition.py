"""
core/body_composition.py
────────────────────────────────────────────────────────────────────────
Weight and body-fat projections.

Both projections use the same energy density for body fat
(`KCAL_PER_KG_FAT`), so a caller combining them must feed them the same
notion of daily surplus / deficit.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from core.nutrition_calc import GOAL_OFFSETS, lookup, round_half_up

KCAL_PER_KG_FAT = 7700

# |change| at or below this is reported as "maintain"
WEIGHT_DEADBAND_KG = 0.5

Direction = Literal["lose", "gain", "maintain"]
BodyFatCategory = Literal["athletic", "fit", "average", "overweight"]

# inclusive upper bounds for athletic / fit / average
_BF_BANDS: dict[str, tuple[float, float, float]] = {
    "male": (13, 17, 24),
    "female": (20, 24, 31),
}

DEFAULT_TARGET_BF: dict[str, float] = {"male": 15, "female": 22}


# ──────────────────────────────────────────────────────────────────────
#  Weight
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class WeightPrediction:
    predicted_weight: float
    direction: Direction


def predict_weight(
    current_weight: float,
    daily_calorie_target: float,
    avg_daily_intake: float,
    days: int = 30,
) -> WeightPrediction:
    daily_diff = avg_daily_intake - daily_calorie_target
    change_kg = daily_diff * days / KCAL_PER_KG_FAT

    direction: Direction
    if change_kg < -WEIGHT_DEADBAND_KG:
        direction = "lose"
    elif change_kg > WEIGHT_DEADBAND_KG:
        direction = "gain"
    else:
        direction = "maintain"

    return WeightPrediction(
        predicted_weight=round_half_up(current_weight + change_kg, 1),
        direction=direction,
    )


# ──────────────────────────────────────────────────────────────────────
#  Fat / lean split
# ──────────────────────────────────────────────────────────────────────
def calculate_fat_mass(weight_kg: float, body_fat_percent: float) -> float:
    return round_half_up(weight_kg * body_fat_percent / 100, 1)


def calculate_lean_mass(weight_kg: float, body_fat_percent: float) -> float:
    return round_half_up(weight_kg * (1 - body_fat_percent / 100), 1)


def get_body_fat_category(body_fat_percent: float, gender: str) -> BodyFatCategory:
    athletic, fit, average = lookup(_BF_BANDS, gender, "gender")
    if body_fat_percent <= athletic:
        return "athletic"
    if body_fat_percent <= fit:
        return "fit"
    if body_fat_percent <= average:
        return "average"
    return "overweight"


# ──────────────────────────────────────────────────────────────────────
#  Body-fat goal
# ──────────────────────────────────────────────────────────────────────
def predict_body_fat_goal(
    current_weight: float,
    current_bf: float,
    target_bf: float,
    daily_deficit_kcal: float,
) -> int | None:
    """
    Days until `target_bf` at a constant daily deficit, or None when there
    is no deficit or the target is already met.  Lean mass is assumed
    constant, so the fat to lose is measured against today's weight.
    """
    if daily_deficit_kcal <= 0 or current_bf <= target_bf:
        return None
    fat_to_lose_kg = current_weight * (current_bf - target_bf) / 100
    return math.ceil(fat_to_lose_kg * KCAL_PER_KG_FAT / daily_deficit_kcal)


@dataclass(frozen=True)
class BodyFatProjection:
    days: int
    target_bf: float


def body_fat_projection(profile, avg_daily_intake: float) -> BodyFatProjection | None:
    """
    Project time to the default healthy body-fat level from recent intake.

    Maintenance is recovered from `daily_calorie_target` by undoing the goal
    offset; the deficit is maintenance minus average intake.
    """
    if not profile.body_fat_percent or avg_daily_intake <= 0:
        return None
    tdee = profile.daily_calorie_target - lookup(GOAL_OFFSETS, profile.goal, "goal")
    target_bf = lookup(DEFAULT_TARGET_BF, profile.gender, "gender")
    days = predict_body_fat_goal(
        profile.weight_kg,
        profile.body_fat_percent,
        target_bf,
        tdee - avg_daily_intake,
    )
    if days is None:
        return None
    return BodyFatProjection(days=days, target_bf=target_bf)


def with_latest_measurement(profile, measurements):
    """
    Profile updated with the newest measurement's weight, and its body-fat
    reading when one was taken.  Returns `profile` unchanged when there
    are no measurements.
    """
    if not measurements:
        return profile
    latest = max(measurements, key=lambda m: m.date)
    update = {"weight_kg": latest.weight_kg}
    if latest.body_fat_percent is not None:
        update["body_fat_percent"] = latest.body_fat_percent
    return profile.model_copy(update=update)
