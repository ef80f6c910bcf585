"""Value objects for the nutrition domain."""

from .activity_level import ActivityLevel
from .goal_direction import GoalDirection
from .macro_grams import MacroGrams
from .macro_split import MacroSplit
from .nutrition_targets import NutritionTargets
from .profile_id import ProfileId
from .sex import Sex
from .user_biometrics import UserBiometrics
from .weekly_goal import WeeklyGoal

__all__ = [
    "ProfileId",
    "Sex",
    "ActivityLevel",
    "GoalDirection",
    "WeeklyGoal",
    "MacroSplit",
    "MacroGrams",
    "UserBiometrics",
    "NutritionTargets",
]
