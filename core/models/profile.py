from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Gender = Literal["male", "female"]
ActivityLevel = Literal["sedentary", "light", "moderate", "active", "very_active"]
Goal = Literal["lose", "maintain", "gain"]
IFProtocol = Literal["16:8", "18:6", "20:4", "custom"]


class Profile(BaseModel):
    id: str = ""
    name: str | None = None
    weight_kg: float = Field(..., gt=0)
    height_cm: float = Field(..., gt=0)
    age: int = Field(..., gt=0)
    gender: Gender
    activity_level: ActivityLevel
    goal: Goal = "maintain"
    daily_calorie_target: int = 2000
    body_fat_percent: float | None = Field(None, ge=0, le=100)

    # intermittent fasting
    if_enabled: bool = False
    if_protocol: IFProtocol = "16:8"
    if_window_start: int = Field(12, ge=0, le=23)   # hour of day
    if_window_hours: int = Field(8, ge=1, le=23)

    model_config = ConfigDict(frozen=True)
