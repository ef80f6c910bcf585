"""GetProfileQuery - retrieve a user's profile and targets."""

from dataclasses import dataclass

from domain.nutrition.core.entities.user_profile import UserProfile
from domain.nutrition.core.exceptions.domain_errors import ProfileNotFoundError
from domain.nutrition.core.ports.repository import IProfileRepository


@dataclass(frozen=True)
class GetProfileQuery:
    """Query to retrieve a profile.

    Attributes:
        user_id: Owner of the profile
    """

    user_id: str


class GetProfileQueryHandler:
    """Handler for GetProfileQuery."""

    def __init__(self, repository: IProfileRepository):
        self._repository = repository

    async def handle(self, query: GetProfileQuery) -> UserProfile:
        """
        Handle get profile query.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        profile = await self._repository.find_by_user_id(query.user_id)
        if profile is None:
            raise ProfileNotFoundError(query.user_id)
        return profile
