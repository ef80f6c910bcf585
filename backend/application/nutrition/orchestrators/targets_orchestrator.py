"""TargetsOrchestrator - validate biometrics, then run the engine."""

from typing import Optional

import structlog

from domain.nutrition.calculation.engine import NutritionEngine
from domain.nutrition.core.exceptions.domain_errors import DomainValidationError
from domain.nutrition.core.value_objects.macro_split import MacroSplit
from domain.nutrition.core.value_objects.nutrition_targets import (
    CALORIE_GOAL_RANGE,
    NutritionTargets,
)
from domain.nutrition.core.value_objects.user_biometrics import UserBiometrics

logger = structlog.get_logger(__name__)


class TargetsOrchestrator:
    """
    Single gate between collaborators and the NutritionEngine.

    Flow:
    1. Validate biometrics ranges and macro split (raises before any math)
    2. Run the engine pipeline (BMR -> TDEE -> goal -> macros)
    """

    def __init__(self, engine: Optional[NutritionEngine] = None):
        self._engine = engine or NutritionEngine()

    def calculate_targets(self, biometrics: UserBiometrics) -> NutritionTargets:
        """
        Validate and calculate targets for a biometrics snapshot.

        Args:
            biometrics: Snapshot collected by onboarding or the profile editor

        Returns:
            NutritionTargets for the snapshot

        Raises:
            DomainValidationError: If biometrics are out of range
            InvalidMacroSplitError: If macro split doesn't total 100
        """
        try:
            biometrics.validate()
        except DomainValidationError as e:
            logger.info("biometrics_rejected", reason=str(e))
            raise

        return self._engine.calculate(biometrics)

    def override_calorie_goal(
        self,
        targets: NutritionTargets,
        calorie_goal: int,
        macro_split: MacroSplit,
    ) -> NutritionTargets:
        """
        Replace the calorie goal with a user-chosen value.

        BMR and TDEE are kept; macro grams are derived from the new goal.

        Raises:
            DomainValidationError: If calorie_goal is outside 800-5000
            InvalidMacroSplitError: If macro split doesn't total 100
        """
        min_goal, max_goal = CALORIE_GOAL_RANGE
        try:
            if not (min_goal <= calorie_goal <= max_goal):
                raise DomainValidationError(
                    f"Calorie goal must be {min_goal}-{max_goal} kcal, got {calorie_goal}"
                )
            macro_split.validate()
        except DomainValidationError as e:
            logger.info("calorie_goal_rejected", reason=str(e))
            raise

        return NutritionTargets(
            bmr_kcal=targets.bmr_kcal,
            tdee_kcal=targets.tdee_kcal,
            calorie_goal_kcal=calorie_goal,
            macro_grams=self._engine.compute_macro_grams(calorie_goal, macro_split),
        )
