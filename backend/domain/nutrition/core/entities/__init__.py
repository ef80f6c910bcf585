"""Entities for the nutrition domain."""

from .user_profile import OnboardingPreferences, UserProfile

__all__ = [
    "UserProfile",
    "OnboardingPreferences",
]
