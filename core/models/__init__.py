"""Plain records consumed by the engine."""

from .profile import Profile
from .meal import Meal
from .measurement import BodyMeasurement

__all__ = ["Profile", "Meal", "BodyMeasurement"]
