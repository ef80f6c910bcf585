"""UserBiometrics value object - input snapshot for target calculation."""

from dataclasses import dataclass, replace
from typing import Any, Optional, Union

from ..exceptions.domain_errors import DomainValidationError
from .activity_level import ActivityLevel
from .goal_direction import GoalDirection
from .macro_split import MacroSplit
from .sex import Sex

AGE_RANGE = (13, 120)
HEIGHT_CM_RANGE = (100.0, 250.0)
WEIGHT_KG_RANGE = (30.0, 300.0)
WEEKLY_RATE_RANGE = (0, 1000)


@dataclass(frozen=True)
class UserBiometrics:
    """Biometric and preference data the calculation pipeline consumes.

    Immutable: an edit produces a new snapshot via ``replace()``.
    Range checks live in ``validate()`` and are the caller's job; the
    calculators assume a validated snapshot.

    ``activity_level`` keeps whatever the profile record holds (enum or raw
    string) so that an unknown stored value still reaches the TDEE step,
    where it resolves to the sedentary factor.

    Attributes:
        sex: Biological sex
        age_years: Age in years (13-120)
        height_cm: Height in centimeters (100-250)
        weight_kg: Body weight in kilograms (30-300)
        activity_level: Physical activity level
        goal_direction: Lose, maintain or gain
        weekly_rate_kcal_per_day: Magnitude of the daily calorie delta (0-1000)
        macro_split: Optional macro percentages (defaults to 45/25/30)
    """

    sex: Sex
    age_years: int
    height_cm: float
    weight_kg: float
    activity_level: Union[ActivityLevel, str]
    goal_direction: GoalDirection = GoalDirection.MAINTAIN
    weekly_rate_kcal_per_day: int = 0
    macro_split: Optional[MacroSplit] = None

    def __post_init__(self) -> None:
        """Coerce enum-typed fields given as raw strings.

        Raises:
            DomainValidationError: If sex or goal direction is unrecognized
        """
        object.__setattr__(self, "sex", Sex.parse(self.sex))
        object.__setattr__(self, "goal_direction", GoalDirection.parse(self.goal_direction))
        # unknown values stay raw; the TDEE step resolves alias or fallback
        if not isinstance(self.activity_level, ActivityLevel) and self.activity_level in {
            level.value for level in ActivityLevel
        }:
            object.__setattr__(self, "activity_level", ActivityLevel(self.activity_level))

    def validate(self) -> None:
        """Check domain ranges before handing the snapshot to the engine.

        Raises:
            DomainValidationError: If age, height, weight or rate is out of range
            InvalidMacroSplitError: If macro split doesn't total 100
        """
        min_age, max_age = AGE_RANGE
        if not (min_age <= self.age_years <= max_age):
            raise DomainValidationError(
                f"Age must be {min_age}-{max_age} years, got {self.age_years}"
            )

        min_height, max_height = HEIGHT_CM_RANGE
        if not (min_height <= self.height_cm <= max_height):
            raise DomainValidationError(
                f"Height must be {min_height:.0f}-{max_height:.0f} cm, got {self.height_cm}"
            )

        min_weight, max_weight = WEIGHT_KG_RANGE
        if not (min_weight <= self.weight_kg <= max_weight):
            raise DomainValidationError(
                f"Weight must be {min_weight:.0f}-{max_weight:.0f} kg, got {self.weight_kg}"
            )

        min_rate, max_rate = WEEKLY_RATE_RANGE
        if not (min_rate <= self.weekly_rate_kcal_per_day <= max_rate):
            raise DomainValidationError(
                f"Weekly rate must be {min_rate}-{max_rate} kcal/day, "
                f"got {self.weekly_rate_kcal_per_day}"
            )

        if self.macro_split is not None:
            self.macro_split.validate()

    def effective_macro_split(self) -> MacroSplit:
        """Macro split to use, falling back to the onboarding default."""
        return self.macro_split if self.macro_split is not None else MacroSplit.default()

    def replace(self, **changes: Any) -> "UserBiometrics":
        """Return a new snapshot with the given fields changed."""
        return replace(self, **changes)

    def bmi(self) -> float:
        """Calculate Body Mass Index.

        Returns:
            float: BMI = weight (kg) / (height (m))^2
        """
        height_m = self.height_cm / 100.0
        return self.weight_kg / (height_m**2)
