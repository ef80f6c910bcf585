"""NutritionEngine - biometrics to daily nutrition targets.

Single entry point for every caller that needs BMR, TDEE, calorie goal
or macro grams (onboarding, profile editing, previews). Chains four pure
steps:

    1. BMR        Mifflin-St Jeor
    2. TDEE       BMR × activity factor
    3. Goal       TDEE ± weekly-pace delta, rounded to 10 kcal
    4. Macros     goal split by percentage, converted to grams

Stateless and deterministic: the same snapshot always yields an equal
``NutritionTargets``, and one instance can be shared across concurrent
callers. Inputs are assumed validated (see ``UserBiometrics.validate``).
"""

from typing import Optional, Union

import structlog

from ..core.ports.calculators import (
    IBMRCalculator,
    ICalorieGoalCalculator,
    IMacroCalculator,
    ITDEECalculator,
)
from ..core.rounding import round_half_up
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.goal_direction import GoalDirection
from ..core.value_objects.macro_grams import MacroGrams
from ..core.value_objects.macro_split import MacroSplit
from ..core.value_objects.nutrition_targets import NutritionTargets
from ..core.value_objects.sex import Sex
from ..core.value_objects.user_biometrics import UserBiometrics
from .bmr_service import BMRService
from .calorie_goal_service import CalorieGoalService
from .macro_service import MacroService
from .tdee_service import TDEEService

logger = structlog.get_logger(__name__)


class NutritionEngine:
    """Compose the four calculators into one biometrics -> targets call."""

    def __init__(
        self,
        bmr_service: Optional[IBMRCalculator] = None,
        tdee_service: Optional[ITDEECalculator] = None,
        calorie_goal_service: Optional[ICalorieGoalCalculator] = None,
        macro_service: Optional[IMacroCalculator] = None,
    ):
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._calorie_goal_service = calorie_goal_service or CalorieGoalService()
        self._macro_service = macro_service or MacroService()

    def compute_bmr(
        self,
        sex: Union[Sex, str],
        weight_kg: float,
        height_cm: float,
        age_years: float,
    ) -> float:
        return self._bmr_service.calculate(sex, weight_kg, height_cm, age_years)

    def compute_tdee(self, bmr: float, activity_level: Union[ActivityLevel, str]) -> float:
        return self._tdee_service.calculate(bmr, activity_level)

    def compute_calorie_goal(
        self,
        tdee: float,
        goal_direction: Union[GoalDirection, str],
        weekly_rate_kcal_per_day: float,
    ) -> int:
        return self._calorie_goal_service.calculate(tdee, goal_direction, weekly_rate_kcal_per_day)

    def compute_macro_grams(self, calorie_goal: float, macro_split: MacroSplit) -> MacroGrams:
        return self._macro_service.calculate(calorie_goal, macro_split)

    def calculate(self, biometrics: UserBiometrics) -> NutritionTargets:
        """Calculate all targets for a biometrics snapshot.

        The calorie goal is derived from the unrounded TDEE; BMR and TDEE
        are rounded only when packaged into the result.

        Args:
            biometrics: Validated biometrics snapshot

        Returns:
            NutritionTargets: Fresh targets snapshot

        Example:
            >>> engine = NutritionEngine()
            >>> targets = engine.calculate(UserBiometrics(
            ...     sex=Sex.MALE, age_years=30, height_cm=175, weight_kg=75,
            ...     activity_level=ActivityLevel.SEDENTARY,
            ... ))
            >>> targets.calorie_goal_kcal
            2380
        """
        bmr = self.compute_bmr(
            biometrics.sex,
            biometrics.weight_kg,
            biometrics.height_cm,
            biometrics.age_years,
        )
        tdee = self.compute_tdee(bmr, biometrics.activity_level)
        calorie_goal = self.compute_calorie_goal(
            tdee,
            biometrics.goal_direction,
            biometrics.weekly_rate_kcal_per_day,
        )
        macro_grams = self.compute_macro_grams(calorie_goal, biometrics.effective_macro_split())

        targets = NutritionTargets(
            bmr_kcal=round_half_up(bmr),
            tdee_kcal=round_half_up(tdee),
            calorie_goal_kcal=calorie_goal,
            macro_grams=macro_grams,
        )
        logger.debug(
            "nutrition_targets_calculated",
            bmr=targets.bmr_kcal,
            tdee=targets.tdee_kcal,
            calorie_goal=targets.calorie_goal_kcal,
        )
        return targets


_default_engine = NutritionEngine()


def compute_bmr(
    sex: Union[Sex, str],
    weight_kg: float,
    height_cm: float,
    age_years: float,
) -> float:
    """Mifflin-St Jeor BMR, unrounded."""
    return _default_engine.compute_bmr(sex, weight_kg, height_cm, age_years)


def compute_tdee(bmr: float, activity_level: Union[ActivityLevel, str]) -> float:
    """BMR scaled by the activity factor, unrounded."""
    return _default_engine.compute_tdee(bmr, activity_level)


def compute_calorie_goal(
    tdee: float,
    goal_direction: Union[GoalDirection, str],
    weekly_rate_kcal_per_day: float,
) -> int:
    """TDEE adjusted by the signed rate, rounded to the nearest 10 kcal."""
    return _default_engine.compute_calorie_goal(tdee, goal_direction, weekly_rate_kcal_per_day)


def compute_macro_grams(calorie_goal: float, macro_split: MacroSplit) -> MacroGrams:
    """Calorie goal apportioned by percentage and converted to grams."""
    return _default_engine.compute_macro_grams(calorie_goal, macro_split)


def calculate(biometrics: UserBiometrics) -> NutritionTargets:
    """Full pipeline with the default calculators."""
    return _default_engine.calculate(biometrics)
