"""
core/nutrition_calc.py
────────────────────────────────────────────────────────────────────────
Energy math for a single profile:

1. BMR  (Mifflin–St Jeor)
2. TDEE (fixed activity multiplier)
3. Calorie target for the three goal branches
4. Macro gram targets from a fixed kcal split per goal

Everything here is pure.  The functions trust their caller's boundary
validation for ranges, but an unknown enum value is rejected loudly
instead of being defaulted.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

_LOG = logging.getLogger(__name__)

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}

GOAL_OFFSETS: dict[str, int] = {
    "lose": -500,
    "maintain": 0,
    "gain": 300,
}

# goal -> (protein, carbs, fat) share of kcal
MACRO_SPLITS: dict[str, tuple[float, float, float]] = {
    "lose": (0.30, 0.40, 0.30),
    "maintain": (0.25, 0.45, 0.30),
    "gain": (0.25, 0.50, 0.25),
}


class InvalidProfileError(ValueError):
    """A profile carries a value the engine has no formula for."""


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round .5 away from zero (Python's round() is banker's rounding)."""
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def lookup(table: dict[str, Any], key: str, what: str) -> Any:
    """`table[key]`, raising `InvalidProfileError` for an unknown key."""
    try:
        return table[key]
    except KeyError:
        _LOG.warning("rejecting profile: unknown %s %r", what, key)
        raise InvalidProfileError(
            f"unknown {what} {key!r}; expected one of {sorted(table)}"
        ) from None


# ──────────────────────────────────────────────────────────────────────
#  BMR / TDEE / target
# ──────────────────────────────────────────────────────────────────────
def calculate_bmr(profile) -> float:
    """Mifflin–St Jeor, kcal/day. Not rounded."""
    base = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
    if profile.gender == "male":
        return base + 5
    if profile.gender == "female":
        return base - 161
    _LOG.warning("rejecting profile: unknown gender %r", profile.gender)
    raise InvalidProfileError(
        f"unknown gender {profile.gender!r}; expected 'male' or 'female'"
    )


def calculate_tdee(profile) -> int:
    multiplier = lookup(ACTIVITY_MULTIPLIERS, profile.activity_level, "activity level")
    return int(round_half_up(calculate_bmr(profile) * multiplier))


def calculate_calorie_target(profile) -> int:
    offset = lookup(GOAL_OFFSETS, profile.goal, "goal")
    return int(round_half_up(calculate_tdee(profile) + offset))


# ──────────────────────────────────────────────────────────────────────
#  Macros
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class MacroTargets:
    protein_target_g: int
    carbs_target_g: int
    fat_target_g: int


def get_macro_targets(calorie_target: float, goal: str) -> MacroTargets:
    p, c, f = lookup(MACRO_SPLITS, goal, "goal")
    return MacroTargets(
        protein_target_g=int(round_half_up(calorie_target * p / KCAL_PER_G_PROTEIN)),
        carbs_target_g=int(round_half_up(calorie_target * c / KCAL_PER_G_CARBS)),
        fat_target_g=int(round_half_up(calorie_target * f / KCAL_PER_G_FAT)),
    )


# ──────────────────────────────────────────────────────────────────────
#  Calculator
# ──────────────────────────────────────────────────────────────────────
class NutritionalCalculator:
    """Bundles the per-profile numbers the API hands back in one payload."""

    def targets(self, profile) -> dict[str, float]:
        bmr = calculate_bmr(profile)
        tdee = calculate_tdee(profile)
        kcal = calculate_calorie_target(profile)
        macros = get_macro_targets(kcal, profile.goal)
        return {
            "bmr": round_half_up(bmr, 1),
            "tdee": tdee,
            "calorie_target": kcal,
            **asdict(macros),
        }
