"""In-memory implementation of IProfileRepository."""

from copy import deepcopy
from typing import Optional

from domain.nutrition.core.entities.user_profile import UserProfile
from domain.nutrition.core.ports.repository import IProfileRepository
from domain.nutrition.core.value_objects.profile_id import ProfileId


class InMemoryProfileRepository(IProfileRepository):
    """
    In-memory implementation of profile repository.

    Profiles are kept in a dict keyed by profile id and deep-copied on the
    way in and out, so callers never share state with the store. Data is
    lost when the process stops.
    """

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._profiles: dict[str, UserProfile] = {}

    async def save(self, profile: UserProfile) -> None:
        """Save or update profile in memory."""
        self._profiles[str(profile.profile_id)] = deepcopy(profile)

    async def find_by_id(self, profile_id: ProfileId) -> Optional[UserProfile]:
        """Find profile by ID; deep copy or None."""
        profile = self._profiles.get(str(profile_id))
        return deepcopy(profile) if profile else None

    async def find_by_user_id(self, user_id: str) -> Optional[UserProfile]:
        """Find profile by user ID; deep copy or None."""
        for profile in self._profiles.values():
            if profile.user_id == user_id:
                return deepcopy(profile)
        return None

    async def delete(self, profile_id: ProfileId) -> None:
        """Delete profile by ID (no-op if missing)."""
        self._profiles.pop(str(profile_id), None)

    async def exists(self, user_id: str) -> bool:
        """Check if profile exists for user."""
        return any(profile.user_id == user_id for profile in self._profiles.values())

    def clear(self) -> None:
        """Clear all profiles (test cleanup)."""
        self._profiles.clear()

    def count(self) -> int:
        """Total number of stored profiles."""
        return len(self._profiles)
