"""SetCalorieGoalCommand - set the daily calorie goal and macro split directly."""

from dataclasses import dataclass
from typing import Optional

import structlog

from domain.nutrition.core.entities.user_profile import UserProfile
from domain.nutrition.core.events.targets_recalculated import TargetsRecalculated
from domain.nutrition.core.exceptions.domain_errors import ProfileNotFoundError
from domain.nutrition.core.ports.event_bus import IEventBus
from domain.nutrition.core.ports.repository import IProfileRepository
from domain.nutrition.core.value_objects.macro_split import MacroSplit

from ..orchestrators.targets_orchestrator import TargetsOrchestrator

logger = structlog.get_logger(__name__)

UPDATED_FIELDS = ["calorie_goal", "macro_split"]


@dataclass(frozen=True)
class SetCalorieGoalCommand:
    """Command to override the calculated calorie goal.

    The goal stays in place until the next biometrics edit, which
    recalculates it from the formula.

    Attributes:
        user_id: Owner of the profile
        calorie_goal: Daily goal in kcal (800-5000)
        macro_split: Macro percentages, must total 100
    """

    user_id: str
    calorie_goal: int
    macro_split: MacroSplit


@dataclass(frozen=True)
class SetCalorieGoalResult:
    """Result of a calorie goal override.

    Attributes:
        profile: Updated profile
        previous_calorie_goal: Calorie goal before the override
    """

    profile: UserProfile
    previous_calorie_goal: int


class SetCalorieGoalHandler:
    """Handler for SetCalorieGoalCommand."""

    def __init__(
        self,
        orchestrator: TargetsOrchestrator,
        repository: IProfileRepository,
        event_bus: Optional[IEventBus] = None,
    ):
        self._orchestrator = orchestrator
        self._repository = repository
        self._event_bus = event_bus

    async def handle(self, command: SetCalorieGoalCommand) -> SetCalorieGoalResult:
        """
        Handle calorie goal override.

        Raises:
            ProfileNotFoundError: If the user has no profile
            DomainValidationError: If the goal is outside 800-5000
            InvalidMacroSplitError: If the split doesn't total 100
        """
        profile = await self._repository.find_by_user_id(command.user_id)
        if profile is None:
            raise ProfileNotFoundError(command.user_id)

        targets = self._orchestrator.override_calorie_goal(
            profile.targets, command.calorie_goal, command.macro_split
        )

        previous_calorie_goal = profile.targets.calorie_goal_kcal
        profile.apply_biometrics(
            profile.biometrics.replace(macro_split=command.macro_split), targets
        )
        await self._repository.save(profile)

        logger.info(
            "calorie_goal_set",
            user_id=profile.user_id,
            previous_calorie_goal=previous_calorie_goal,
            calorie_goal=targets.calorie_goal_kcal,
        )

        if self._event_bus is not None:
            await self._event_bus.publish(
                TargetsRecalculated.create(
                    profile_id=profile.profile_id.value,
                    user_id=profile.user_id,
                    updated_fields=UPDATED_FIELDS,
                    previous_calorie_goal=previous_calorie_goal,
                    calorie_goal=targets.calorie_goal_kcal,
                )
            )

        return SetCalorieGoalResult(
            profile=profile,
            previous_calorie_goal=previous_calorie_goal,
        )
