"""Calculation services for nutrition targets."""

from .bmr_service import BMRService
from .calorie_goal_service import CalorieGoalService
from .engine import (
    NutritionEngine,
    calculate,
    compute_bmr,
    compute_calorie_goal,
    compute_macro_grams,
    compute_tdee,
)
from .macro_service import MacroService
from .tdee_service import TDEEService

__all__ = [
    "BMRService",
    "TDEEService",
    "CalorieGoalService",
    "MacroService",
    "NutritionEngine",
    "compute_bmr",
    "compute_tdee",
    "compute_calorie_goal",
    "compute_macro_grams",
    "calculate",
]
