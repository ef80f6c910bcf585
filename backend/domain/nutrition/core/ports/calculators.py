"""Calculator ports - interfaces for the target calculation steps."""

from abc import ABC, abstractmethod
from typing import Union

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.goal_direction import GoalDirection
from ..value_objects.macro_grams import MacroGrams
from ..value_objects.macro_split import MacroSplit
from ..value_objects.sex import Sex


class IBMRCalculator(ABC):
    """Port for BMR calculation."""

    @abstractmethod
    def calculate(
        self,
        sex: Union[Sex, str],
        weight_kg: float,
        height_cm: float,
        age_years: float,
    ) -> float:
        """Calculate unrounded BMR in kcal/day."""
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation."""

    @abstractmethod
    def calculate(self, bmr: float, activity_level: Union[ActivityLevel, str]) -> float:
        """Calculate unrounded TDEE in kcal/day from BMR and activity."""
        pass


class ICalorieGoalCalculator(ABC):
    """Port for the daily calorie goal calculation."""

    @abstractmethod
    def calculate(
        self,
        tdee: float,
        goal_direction: Union[GoalDirection, str],
        weekly_rate_kcal_per_day: float,
    ) -> int:
        """Calculate the daily calorie goal (multiple of 10)."""
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient gram targets."""

    @abstractmethod
    def calculate(self, calorie_goal: float, macro_split: MacroSplit) -> MacroGrams:
        """Split the calorie goal into carbs/protein/fat grams."""
        pass
