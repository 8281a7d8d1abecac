from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Meal(BaseModel):
    id: str = ""
    name: str = ""
    meal_type: str | None = None   # breakfast / lunch / dinner / snack
    calories: float = Field(0, ge=0)
    protein_g: float = Field(0, ge=0)
    carbs_g: float = Field(0, ge=0)
    fat_g: float = Field(0, ge=0)
    fiber_g: float = Field(0, ge=0)
    eaten_at: datetime
    score: int | None = Field(None, ge=1, le=10)
    in_if_window: bool = True

    model_config = ConfigDict(frozen=True)
