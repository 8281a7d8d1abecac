from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from core.diet import DietType
from core.models import Meal


class TargetsOut(BaseModel):
    bmr: float
    tdee: int
    calorie_target: int
    protein_target_g: int
    carbs_target_g: int
    fat_target_g: int


class DailySummaryIn(BaseModel):
    date: dt.date
    meals: list[Meal] = []


class DailySummaryOut(BaseModel):
    date: str
    meals: list[Meal]
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    total_fiber: float

    model_config = ConfigDict(from_attributes=True)


class MacrosIn(BaseModel):
    protein_g: float = Field(..., ge=0)
    carbs_g: float = Field(..., ge=0)
    fat_g: float = Field(..., ge=0)


class MacroPercentages(BaseModel):
    protein: int
    carbs: int
    fat: int


class DietOut(BaseModel):
    diet_type: DietType
    percentages: MacroPercentages
