"""CalorieGoalService - daily calorie goal from TDEE and weekly pace."""

from typing import Union

from ..core.ports.calculators import ICalorieGoalCalculator
from ..core.rounding import round_to_nearest
from ..core.value_objects.goal_direction import GoalDirection

CALORIE_GOAL_STEP = 10


class CalorieGoalService(ICalorieGoalCalculator):
    """Adjust TDEE by the signed weekly-pace delta.

    Formula:
        goal = round((TDEE + sign × rate) / 10) × 10
        sign = -1 (lose), 0 (maintain), +1 (gain)

    No floor or ceiling is applied; the rate is expected to have been
    picked from the offered weekly paces (250-1000 kcal/day).
    """

    def calculate(
        self,
        tdee: float,
        goal_direction: Union[GoalDirection, str],
        weekly_rate_kcal_per_day: float,
    ) -> int:
        """Calculate daily calorie goal.

        Example:
            >>> CalorieGoalService().calculate(2378.25, GoalDirection.LOSE, 500)
            1880
        """
        delta = GoalDirection.parse(goal_direction).signed_delta(weekly_rate_kcal_per_day)
        return round_to_nearest(tdee + delta, CALORIE_GOAL_STEP)
