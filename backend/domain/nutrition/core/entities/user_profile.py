"""UserProfile entity - aggregate root owning biometrics and targets."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from ..exceptions.domain_errors import DomainValidationError
from ..value_objects.nutrition_targets import NutritionTargets
from ..value_objects.profile_id import ProfileId
from ..value_objects.user_biometrics import UserBiometrics


@dataclass(frozen=True)
class OnboardingPreferences:
    """Questionnaire answers stored alongside the profile.

    Opaque to the target calculation; kept so the profile record is
    complete.

    Attributes:
        goals: Selected goal tags (lose_weight, plan_meals, ...)
        barriers: Past barriers to success
        healthy_habits: Habits the user wants to build
        meal_planning: How often the user plans meals
        meal_plan_opt_in: Whether the user wants meal plans
        goal_weight_kg: Target body weight
        starting_weight_kg: Weight at onboarding
    """

    goals: tuple[str, ...] = ()
    barriers: tuple[str, ...] = ()
    healthy_habits: tuple[str, ...] = ()
    meal_planning: Optional[str] = None
    meal_plan_opt_in: Optional[str] = None
    goal_weight_kg: Optional[float] = None
    starting_weight_kg: Optional[float] = None


@dataclass
class UserProfile:
    """User profile aggregate root.

    ``biometrics`` is the source of truth; ``targets`` is the snapshot
    derived from it and is only ever replaced together with it.

    Attributes:
        profile_id: Unique profile identifier
        user_id: User this profile belongs to
        biometrics: Current biometrics snapshot
        targets: Targets calculated from ``biometrics``
        preferences: Onboarding answers
        created_at: Profile creation timestamp
        updated_at: Last update timestamp
    """

    profile_id: ProfileId
    user_id: str
    biometrics: UserBiometrics
    targets: NutritionTargets
    preferences: OnboardingPreferences = field(default_factory=OnboardingPreferences)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate profile invariants.

        Raises:
            DomainValidationError: If validation fails
        """
        if not self.user_id or not self.user_id.strip():
            raise DomainValidationError("User ID cannot be empty")

    def apply_biometrics(self, biometrics: UserBiometrics, targets: NutritionTargets) -> None:
        """Replace biometrics and their derived targets together.

        Args:
            biometrics: New biometrics snapshot
            targets: Targets calculated from ``biometrics``
        """
        self.biometrics = biometrics
        self.targets = targets
        self.updated_at = datetime.now(timezone.utc)

    def weight_change_estimate(self) -> Optional[tuple[float, str]]:
        """Distance to goal weight and its direction.

        Returns:
            Optional[tuple[float, str]]: (kg rounded to 0.1, "gain" or
            "lose"), None if no goal weight was set

        Example:
            >>> profile.weight_change_estimate()
            (10.0, 'lose')
        """
        goal_weight = self.preferences.goal_weight_kg
        if goal_weight is None:
            return None

        current = self.biometrics.weight_kg
        direction = "gain" if goal_weight > current else "lose"
        return round(abs(goal_weight - current), 1), direction

    def __str__(self) -> str:
        return (
            f"Profile {self.profile_id} - User {self.user_id} - "
            f"Goal: {self.targets.calorie_goal_kcal} kcal"
        )
