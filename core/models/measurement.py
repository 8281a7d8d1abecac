from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class BodyMeasurement(BaseModel):
    date: dt.date
    weight_kg: float = Field(..., ge=20, le=500)
    body_fat_percent: float | None = Field(None, ge=2, le=60)
    notes: str | None = None

    model_config = ConfigDict(frozen=True)
