"""Re-export individual schema modules for easy imports."""

from .nutrition import (
    DailySummaryIn,
    DailySummaryOut,
    DietOut,
    MacroPercentages,
    MacrosIn,
    TargetsOut,
)
from .body import (
    BodyFatProjectionOut,
    CompositionIn,
    CompositionOut,
    PredictionIn,
    PredictionOut,
    WeightPredictionOut,
)
from .stats import (
    FastingIn,
    FastingOut,
    HistoryIn,
    HistoryOut,
    IFStatsOut,
    MacroGrams,
    WeekAverageOut,
)

__all__ = [
    "TargetsOut",
    "DailySummaryIn",
    "DailySummaryOut",
    "MacrosIn",
    "MacroPercentages",
    "DietOut",
    "CompositionIn",
    "CompositionOut",
    "PredictionIn",
    "PredictionOut",
    "WeightPredictionOut",
    "BodyFatProjectionOut",
    "HistoryIn",
    "HistoryOut",
    "WeekAverageOut",
    "IFStatsOut",
    "FastingIn",
    "FastingOut",
    "MacroGrams",
]
