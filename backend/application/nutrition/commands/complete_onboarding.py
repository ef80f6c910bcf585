"""CompleteOnboardingCommand - create a profile from questionnaire answers."""

from dataclasses import dataclass
from datetime import date as DateType
from typing import Optional

import structlog

from domain.nutrition.core.entities.user_profile import (
    OnboardingPreferences,
    UserProfile,
)
from domain.nutrition.core.events.profile_created import ProfileCreated
from domain.nutrition.core.exceptions.domain_errors import (
    DomainValidationError,
    ProfileAlreadyExistsError,
)
from domain.nutrition.core.factories.profile_factory import UserProfileFactory
from domain.nutrition.core.ports.event_bus import IEventBus
from domain.nutrition.core.ports.repository import IProfileRepository
from domain.nutrition.core.units import (
    age_from_date_of_birth,
    feet_inches_to_cm,
    pounds_to_kg,
    stones_to_kg,
)
from domain.nutrition.core.value_objects.goal_direction import GoalDirection
from domain.nutrition.core.value_objects.macro_split import MacroSplit
from domain.nutrition.core.value_objects.user_biometrics import UserBiometrics
from domain.nutrition.core.value_objects.weekly_goal import WeeklyGoal

from ..orchestrators.targets_orchestrator import TargetsOrchestrator

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CompleteOnboardingCommand:
    """Answers collected by the onboarding questionnaire.

    Height is given in ``cm`` or ``ft`` (plus ``height_inches``); weights
    in ``kg``, ``lb`` or ``st`` (stone, plus ``weight_extra_lb``). Either
    ``age`` or ``date_of_birth`` must be set.

    Attributes:
        user_id: User identifier (from authentication)
        sex: "male" or "female"
        activity_level: Activity level id as selected
        height: Height in ``height_unit``
        weight: Current weight in ``weight_unit``
        goal_weight: Goal weight in ``weight_unit``
        goal_tags: Selected goal ids (lose_weight, gain_muscle, ...)
        pounds_per_week: Selected weekly pace (default: lose 0.5 lb)
        age: Age in years
        date_of_birth: Birth date, used when age is not given
    """

    user_id: str
    sex: str
    activity_level: str
    height: float
    weight: float
    goal_weight: Optional[float] = None
    goal_tags: tuple[str, ...] = ()
    pounds_per_week: float = -0.5
    age: Optional[int] = None
    date_of_birth: Optional[DateType] = None
    height_unit: str = "cm"
    height_inches: float = 0
    weight_unit: str = "kg"
    weight_extra_lb: float = 0
    barriers: tuple[str, ...] = ()
    healthy_habits: tuple[str, ...] = ()
    meal_planning: Optional[str] = None
    meal_plan_opt_in: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate command carries an age source."""
        if self.age is None and self.date_of_birth is None:
            raise ValueError("Either age or date_of_birth must be provided")


@dataclass(frozen=True)
class CompleteOnboardingResult:
    """Result of onboarding.

    Attributes:
        profile: Created profile with its initial targets
    """

    profile: UserProfile


class CompleteOnboardingHandler:
    """Handler for CompleteOnboardingCommand.

    1. Normalize answers into metric UserBiometrics
    2. Validate and calculate targets via orchestrator
    3. Create profile entity via factory
    4. Persist and publish ProfileCreated
    """

    def __init__(
        self,
        orchestrator: TargetsOrchestrator,
        repository: IProfileRepository,
        factory: UserProfileFactory,
        event_bus: Optional[IEventBus] = None,
    ):
        self._orchestrator = orchestrator
        self._repository = repository
        self._factory = factory
        self._event_bus = event_bus

    async def handle(self, command: CompleteOnboardingCommand) -> CompleteOnboardingResult:
        """
        Handle onboarding completion.

        Raises:
            ProfileAlreadyExistsError: If the user already has a profile
            DomainValidationError: If answers are out of range
        """
        if await self._repository.exists(command.user_id):
            raise ProfileAlreadyExistsError(command.user_id)

        biometrics = build_biometrics(command)
        targets = self._orchestrator.calculate_targets(biometrics)

        profile = self._factory.create(
            user_id=command.user_id,
            biometrics=biometrics,
            targets=targets,
            preferences=OnboardingPreferences(
                goals=tuple(command.goal_tags),
                barriers=tuple(command.barriers),
                healthy_habits=tuple(command.healthy_habits),
                meal_planning=command.meal_planning,
                meal_plan_opt_in=command.meal_plan_opt_in,
                goal_weight_kg=_goal_weight_kg(command),
            ),
        )

        await self._repository.save(profile)

        logger.info(
            "onboarding_completed",
            user_id=command.user_id,
            profile_id=str(profile.profile_id),
            calorie_goal=targets.calorie_goal_kcal,
        )

        if self._event_bus is not None:
            await self._event_bus.publish(
                ProfileCreated.create(
                    profile_id=profile.profile_id.value,
                    user_id=profile.user_id,
                    bmr=targets.bmr_kcal,
                    tdee=targets.tdee_kcal,
                    calorie_goal=targets.calorie_goal_kcal,
                )
            )

        return CompleteOnboardingResult(profile=profile)


def build_biometrics(command: CompleteOnboardingCommand) -> UserBiometrics:
    """
    Normalize onboarding answers into a metric biometrics snapshot.

    Direction comes from the goal tags; the weekly pace only supplies the
    rate magnitude. The macro split starts at the 45/25/30 default.

    Raises:
        DomainValidationError: On unknown units, sex or weekly pace
    """
    weekly_goal = WeeklyGoal.from_pounds_per_week(command.pounds_per_week)
    age = (
        command.age
        if command.age is not None
        else age_from_date_of_birth(command.date_of_birth)  # type: ignore[arg-type]
    )

    return UserBiometrics(
        sex=command.sex,  # type: ignore[arg-type]
        age_years=age,
        height_cm=to_cm(command.height, command.height_unit, command.height_inches),
        weight_kg=to_kg(command.weight, command.weight_unit, command.weight_extra_lb),
        activity_level=command.activity_level,
        goal_direction=GoalDirection.from_goal_tags(command.goal_tags),
        weekly_rate_kcal_per_day=weekly_goal.rate_kcal_per_day,
        macro_split=MacroSplit.default(),
    )


def to_cm(value: float, unit: str, inches: float = 0) -> float:
    """Height in cm from a ``cm`` or ``ft`` (+inches) answer."""
    unit = unit.lower()
    if unit == "cm":
        return float(value)
    if unit == "ft":
        return float(feet_inches_to_cm(int(value), inches))
    raise DomainValidationError(f"Unsupported height unit: {unit!r}")


def to_kg(value: float, unit: str, extra_lb: float = 0) -> float:
    """Weight in kg from a ``kg``, ``lb`` or ``st`` (+lb) answer."""
    unit = unit.lower()
    if unit == "kg":
        return float(value)
    if unit == "lb":
        return pounds_to_kg(value)
    if unit == "st":
        return stones_to_kg(value, extra_lb)
    raise DomainValidationError(f"Unsupported weight unit: {unit!r}")


def _goal_weight_kg(command: CompleteOnboardingCommand) -> Optional[float]:
    if command.goal_weight is None:
        return None
    return to_kg(command.goal_weight, command.weight_unit)
