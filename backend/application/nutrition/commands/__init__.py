"""Commands for the nutrition application layer."""

from .complete_onboarding import (
    CompleteOnboardingCommand,
    CompleteOnboardingHandler,
    CompleteOnboardingResult,
)
from .set_calorie_goal import (
    SetCalorieGoalCommand,
    SetCalorieGoalHandler,
    SetCalorieGoalResult,
)
from .update_biometrics import (
    UpdateBiometricsCommand,
    UpdateBiometricsHandler,
    UpdateBiometricsResult,
)

__all__ = [
    "CompleteOnboardingCommand",
    "CompleteOnboardingHandler",
    "CompleteOnboardingResult",
    "SetCalorieGoalCommand",
    "SetCalorieGoalHandler",
    "SetCalorieGoalResult",
    "UpdateBiometricsCommand",
    "UpdateBiometricsHandler",
    "UpdateBiometricsResult",
]
