"""Factories for the nutrition domain."""

from .profile_factory import UserProfileFactory

__all__ = ["UserProfileFactory"]
