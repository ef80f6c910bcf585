"""UserProfileFactory - factory for creating profiles."""

from dataclasses import replace

from ..entities.user_profile import OnboardingPreferences, UserProfile
from ..value_objects.nutrition_targets import NutritionTargets
from ..value_objects.profile_id import ProfileId
from ..value_objects.user_biometrics import UserBiometrics


class UserProfileFactory:
    """Factory for creating UserProfile entities."""

    @staticmethod
    def create(
        user_id: str,
        biometrics: UserBiometrics,
        targets: NutritionTargets,
        preferences: OnboardingPreferences,
    ) -> UserProfile:
        """Create a new profile with a fresh identifier.

        The starting weight defaults to the onboarding weight when the
        preferences don't carry one.

        Args:
            user_id: User identifier
            biometrics: Validated biometrics snapshot
            targets: Targets calculated from ``biometrics``
            preferences: Onboarding answers

        Returns:
            UserProfile: New profile
        """
        if preferences.starting_weight_kg is None:
            preferences = replace(preferences, starting_weight_kg=biometrics.weight_kg)

        return UserProfile(
            profile_id=ProfileId.generate(),
            user_id=user_id,
            biometrics=biometrics,
            targets=targets,
            preferences=preferences,
        )
