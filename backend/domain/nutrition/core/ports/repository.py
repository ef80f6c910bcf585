"""IProfileRepository port - repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.user_profile import UserProfile
from ..value_objects.profile_id import ProfileId


class IProfileRepository(ABC):
    """Port for user profile persistence.

    The domain depends on this abstraction; infrastructure adapters
    (in-memory, document store, ...) implement it.
    """

    @abstractmethod
    async def save(self, profile: UserProfile) -> None:
        """Save profile (create or update).

        Args:
            profile: Profile to save
        """
        pass

    @abstractmethod
    async def find_by_id(self, profile_id: ProfileId) -> Optional[UserProfile]:
        """Find profile by ID.

        Returns:
            Optional[UserProfile]: Profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> Optional[UserProfile]:
        """Find profile by user ID.

        Returns:
            Optional[UserProfile]: Profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete(self, profile_id: ProfileId) -> None:
        """Delete profile.

        Args:
            profile_id: Profile identifier
        """
        pass

    @abstractmethod
    async def exists(self, user_id: str) -> bool:
        """Check if profile exists for user."""
        pass
