"""WeeklyGoal value object - selectable weekly weight-change pace."""

from dataclasses import dataclass

from ..exceptions.domain_errors import DomainValidationError
from .goal_direction import GoalDirection

KG_PER_POUND = 0.453592


@dataclass(frozen=True)
class WeeklyGoal:
    """Weekly weight-change pace and the daily calorie delta it implies.

    Only the paces offered by the onboarding and profile screens exist;
    use ``from_pounds_per_week`` or ``from_delta`` to look one up.

    Attributes:
        pounds_per_week: Signed pace in lb/week (negative = lose)
        kcal_delta: Signed daily calorie delta
        recommended: Whether this is the default suggested pace
    """

    pounds_per_week: float
    kcal_delta: int
    recommended: bool = False

    @property
    def rate_kcal_per_day(self) -> int:
        """Magnitude of the daily delta (always >= 0)."""
        return abs(self.kcal_delta)

    @property
    def direction(self) -> GoalDirection:
        """Direction implied by the sign of the delta."""
        return GoalDirection.from_signed_delta(self.kcal_delta)

    @property
    def kg_per_week(self) -> float:
        """Signed pace in kg/week, rounded to 2 decimals."""
        return round(self.pounds_per_week * KG_PER_POUND, 2)

    def label(self) -> str:
        """Human-readable label.

        Example:
            >>> WeeklyGoal.from_pounds_per_week(-1.0).label()
            'Lose 1.0 lb per week'
        """
        if self.kcal_delta == 0:
            return "Maintain"
        verb = "Lose" if self.kcal_delta < 0 else "Gain"
        return f"{verb} {abs(self.pounds_per_week):.1f} lb per week"

    @staticmethod
    def options() -> tuple["WeeklyGoal", ...]:
        """All selectable paces, fastest loss first."""
        return WEEKLY_GOALS

    @staticmethod
    def default() -> "WeeklyGoal":
        """Recommended pace (lose 0.5 lb/week)."""
        return next(goal for goal in WEEKLY_GOALS if goal.recommended)

    @staticmethod
    def from_pounds_per_week(pounds_per_week: float) -> "WeeklyGoal":
        """Look up pace by lb/week value.

        Raises:
            DomainValidationError: If pace is not one of the offered options
        """
        for goal in WEEKLY_GOALS:
            if goal.pounds_per_week == pounds_per_week:
                return goal
        raise DomainValidationError(
            f"Unsupported weekly pace: {pounds_per_week} lb/week"
        )

    @staticmethod
    def from_delta(kcal_delta: int) -> "WeeklyGoal":
        """Look up pace by signed daily calorie delta.

        Raises:
            DomainValidationError: If delta is not one of the offered options
        """
        for goal in WEEKLY_GOALS:
            if goal.kcal_delta == kcal_delta:
                return goal
        raise DomainValidationError(f"Unsupported daily calorie delta: {kcal_delta}")


WEEKLY_GOALS: tuple[WeeklyGoal, ...] = (
    WeeklyGoal(pounds_per_week=-2.0, kcal_delta=-1000),
    WeeklyGoal(pounds_per_week=-1.5, kcal_delta=-750),
    WeeklyGoal(pounds_per_week=-1.0, kcal_delta=-500),
    WeeklyGoal(pounds_per_week=-0.5, kcal_delta=-250, recommended=True),
    WeeklyGoal(pounds_per_week=0.0, kcal_delta=0),
    WeeklyGoal(pounds_per_week=0.5, kcal_delta=250),
    WeeklyGoal(pounds_per_week=1.0, kcal_delta=500),
)
