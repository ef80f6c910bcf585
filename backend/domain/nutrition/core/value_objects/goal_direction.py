"""GoalDirection value object - sign of the daily calorie delta."""

from enum import Enum
from typing import Iterable, Union

from ..exceptions.domain_errors import DomainValidationError


class GoalDirection(str, Enum):
    """Direction of the user's weight goal.

    - LOSE: Calorie deficit below TDEE
    - MAINTAIN: Eat at TDEE
    - GAIN: Calorie surplus above TDEE
    """

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"

    def sign(self) -> int:
        """Get the sign applied to the weekly rate magnitude.

        Example:
            >>> GoalDirection.LOSE.sign()
            -1
        """
        signs = {
            GoalDirection.LOSE: -1,
            GoalDirection.MAINTAIN: 0,
            GoalDirection.GAIN: 1,
        }
        return signs[self]

    def signed_delta(self, rate_kcal_per_day: float) -> float:
        """Apply direction to a rate magnitude.

        Args:
            rate_kcal_per_day: Non-negative daily calorie delta

        Returns:
            float: Signed delta (0 for maintain regardless of rate)
        """
        return self.sign() * rate_kcal_per_day

    @classmethod
    def from_goal_tags(cls, tags: Iterable[str]) -> "GoalDirection":
        """Derive direction from onboarding goal tags.

        ``lose_weight`` wins over gain tags; ``gain_weight`` and
        ``gain_muscle`` mean gain; everything else (maintain_weight,
        plan_meals, ...) means maintain.

        Args:
            tags: Goal tag ids selected during onboarding

        Returns:
            GoalDirection: Derived direction
        """
        selected = set(tags)
        if "lose_weight" in selected:
            return cls.LOSE
        if "gain_weight" in selected or "gain_muscle" in selected:
            return cls.GAIN
        return cls.MAINTAIN

    @classmethod
    def from_signed_delta(cls, delta: float) -> "GoalDirection":
        """Derive direction from a signed daily calorie delta."""
        if delta < 0:
            return cls.LOSE
        if delta > 0:
            return cls.GAIN
        return cls.MAINTAIN

    @classmethod
    def parse(cls, value: Union["GoalDirection", str]) -> "GoalDirection":
        """Parse direction from enum or raw string.

        Raises:
            DomainValidationError: If value is not lose/maintain/gain
        """
        if isinstance(value, GoalDirection):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise DomainValidationError(
                f"Goal direction must be lose, maintain or gain, got {value!r}"
            ) from e
