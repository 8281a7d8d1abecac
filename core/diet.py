"""
core/diet.py
────────────────────────────────────────────────────────────────────────
Diet classification from a macro split.

The rules live in `DIET_RULES`, an ordered table evaluated first-match
wins.  Order matters: a split that is both keto and low-carb is keto.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from core.nutrition_calc import (
    KCAL_PER_G_CARBS,
    KCAL_PER_G_FAT,
    KCAL_PER_G_PROTEIN,
    round_half_up,
)


class DietType(str, Enum):
    keto = "keto"
    low_carb = "low_carb"
    high_protein = "high_protein"
    low_fat = "low_fat"
    high_carb = "high_carb"
    balanced = "balanced"


@dataclass(frozen=True)
class MacroSplit:
    """Share of total kcal per macro, in percent (unrounded)."""
    protein: float
    carbs: float
    fat: float
    total_kcal: float


@dataclass(frozen=True)
class DietRule:
    diet_type: DietType
    matches: Callable[[MacroSplit], bool]


DIET_RULES: tuple[DietRule, ...] = (
    DietRule(DietType.keto, lambda s: s.fat > 65 and s.carbs < 10),
    DietRule(DietType.low_carb, lambda s: s.carbs < 25),
    DietRule(DietType.high_protein, lambda s: s.protein > 30),
    DietRule(DietType.low_fat, lambda s: s.fat < 20),
    DietRule(DietType.high_carb, lambda s: s.carbs > 60),
)


def macro_split(protein_g: float, carbs_g: float, fat_g: float) -> MacroSplit:
    protein_kcal = protein_g * KCAL_PER_G_PROTEIN
    carbs_kcal = carbs_g * KCAL_PER_G_CARBS
    fat_kcal = fat_g * KCAL_PER_G_FAT
    total = protein_kcal + carbs_kcal + fat_kcal
    if total == 0:
        return MacroSplit(0.0, 0.0, 0.0, 0.0)
    return MacroSplit(
        protein=protein_kcal / total * 100,
        carbs=carbs_kcal / total * 100,
        fat=fat_kcal / total * 100,
        total_kcal=total,
    )


def classify_diet(
    protein_g: float,
    carbs_g: float,
    fat_g: float,
    rules: tuple[DietRule, ...] = DIET_RULES,
) -> DietType:
    split = macro_split(protein_g, carbs_g, fat_g)
    if split.total_kcal == 0:
        return DietType.balanced
    for rule in rules:
        if rule.matches(split):
            return rule.diet_type
    return DietType.balanced


def get_macro_percentages(protein_g: float, carbs_g: float, fat_g: float) -> dict[str, int]:
    """Each share rounded on its own; the three need not add up to 100."""
    split = macro_split(protein_g, carbs_g, fat_g)
    return {
        "protein": int(round_half_up(split.protein)),
        "carbs": int(round_half_up(split.carbs)),
        "fat": int(round_half_up(split.fat)),
    }
