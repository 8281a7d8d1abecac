from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from core.models import BodyMeasurement, Meal, Profile


class CompositionIn(BaseModel):
    weight_kg: float = Field(..., ge=20, le=500)
    body_fat_percent: float = Field(..., ge=2, le=60)
    gender: Literal["male", "female"]


class CompositionOut(BaseModel):
    fat_mass_kg: float
    lean_mass_kg: float
    category: Literal["athletic", "fit", "average", "overweight"]


class PredictionIn(BaseModel):
    profile: Profile
    meals: list[Meal] = []
    measurements: list[BodyMeasurement] = []
    days: int = Field(30, ge=1, le=365)
    today: dt.date | None = None


class WeightPredictionOut(BaseModel):
    predicted_weight: float
    direction: Literal["lose", "gain", "maintain"]

    model_config = ConfigDict(from_attributes=True)


class BodyFatProjectionOut(BaseModel):
    days: int
    target_bf: float

    model_config = ConfigDict(from_attributes=True)


class PredictionOut(BaseModel):
    avg_daily_intake: int
    weight: WeightPredictionOut | None
    body_fat: BodyFatProjectionOut | None
