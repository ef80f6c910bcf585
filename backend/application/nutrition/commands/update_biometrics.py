"""UpdateBiometricsCommand - edit profile biometrics and recalculate targets."""

from dataclasses import dataclass, fields
from datetime import date as DateType
from typing import Any, Dict, Optional

import structlog

from domain.nutrition.core.entities.user_profile import UserProfile
from domain.nutrition.core.events.targets_recalculated import TargetsRecalculated
from domain.nutrition.core.exceptions.domain_errors import ProfileNotFoundError
from domain.nutrition.core.ports.event_bus import IEventBus
from domain.nutrition.core.ports.repository import IProfileRepository
from domain.nutrition.core.units import age_from_date_of_birth
from domain.nutrition.core.value_objects.macro_split import MacroSplit
from domain.nutrition.core.value_objects.weekly_goal import WeeklyGoal

from ..orchestrators.targets_orchestrator import TargetsOrchestrator

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UpdateBiometricsCommand:
    """Command to change one or more biometrics of an existing profile.

    Attributes:
        user_id: Owner of the profile to update
        weight_kg: New body weight
        height_cm: New height
        age_years: New age
        date_of_birth: New birth date (used when age_years is not given)
        sex: New sex
        activity_level: New activity level id
        pounds_per_week: New weekly pace; sets both direction and rate
        macro_split: New macro percentages

    Note: At least one field besides user_id must be provided.
    """

    user_id: str
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None
    age_years: Optional[int] = None
    date_of_birth: Optional[DateType] = None
    sex: Optional[str] = None
    activity_level: Optional[str] = None
    pounds_per_week: Optional[float] = None
    macro_split: Optional[MacroSplit] = None

    def __post_init__(self) -> None:
        """Validate command has at least one update."""
        if all(
            getattr(self, f.name) is None for f in fields(self) if f.name != "user_id"
        ):
            raise ValueError("At least one field must be provided for update")

    def changes(self) -> Dict[str, Any]:
        """Biometrics field changes carried by this command."""
        changes: Dict[str, Any] = {}
        if self.weight_kg is not None:
            changes["weight_kg"] = self.weight_kg
        if self.height_cm is not None:
            changes["height_cm"] = self.height_cm
        if self.age_years is not None:
            changes["age_years"] = self.age_years
        elif self.date_of_birth is not None:
            changes["age_years"] = age_from_date_of_birth(self.date_of_birth)
        if self.sex is not None:
            changes["sex"] = self.sex
        if self.activity_level is not None:
            changes["activity_level"] = self.activity_level
        if self.pounds_per_week is not None:
            weekly_goal = WeeklyGoal.from_pounds_per_week(self.pounds_per_week)
            changes["goal_direction"] = weekly_goal.direction
            changes["weekly_rate_kcal_per_day"] = weekly_goal.rate_kcal_per_day
        if self.macro_split is not None:
            changes["macro_split"] = self.macro_split
        return changes


@dataclass(frozen=True)
class UpdateBiometricsResult:
    """Result of a biometrics update.

    Attributes:
        profile: Updated profile
        previous_calorie_goal: Calorie goal before the update
    """

    profile: UserProfile
    previous_calorie_goal: int


class UpdateBiometricsHandler:
    """Handler for UpdateBiometricsCommand.

    Every edit goes through the same path:
    1. Load profile by user
    2. Build a new biometrics snapshot
    3. Validate and recalculate (targets are replaced wholesale)
    4. Persist and publish TargetsRecalculated
    """

    def __init__(
        self,
        orchestrator: TargetsOrchestrator,
        repository: IProfileRepository,
        event_bus: Optional[IEventBus] = None,
    ):
        self._orchestrator = orchestrator
        self._repository = repository
        self._event_bus = event_bus

    async def handle(self, command: UpdateBiometricsCommand) -> UpdateBiometricsResult:
        """
        Handle biometrics update.

        Raises:
            ProfileNotFoundError: If the user has no profile
            DomainValidationError: If the new snapshot is out of range
        """
        profile = await self._repository.find_by_user_id(command.user_id)
        if profile is None:
            raise ProfileNotFoundError(command.user_id)

        changes = command.changes()
        biometrics = profile.biometrics.replace(**changes)
        targets = self._orchestrator.calculate_targets(biometrics)

        previous_calorie_goal = profile.targets.calorie_goal_kcal
        profile.apply_biometrics(biometrics, targets)
        await self._repository.save(profile)

        logger.info(
            "targets_recalculated",
            user_id=profile.user_id,
            updated_fields=sorted(changes),
            previous_calorie_goal=previous_calorie_goal,
            calorie_goal=targets.calorie_goal_kcal,
        )

        if self._event_bus is not None:
            await self._event_bus.publish(
                TargetsRecalculated.create(
                    profile_id=profile.profile_id.value,
                    user_id=profile.user_id,
                    updated_fields=sorted(changes),
                    previous_calorie_goal=previous_calorie_goal,
                    calorie_goal=targets.calorie_goal_kcal,
                )
            )

        return UpdateBiometricsResult(
            profile=profile,
            previous_calorie_goal=previous_calorie_goal,
        )
