"""ProfileCreated domain event."""

from dataclasses import dataclass
from uuid import UUID

from .base import DomainEvent


@dataclass(frozen=True)
class ProfileCreated(DomainEvent):
    """Event emitted when onboarding creates a profile.

    Attributes:
        profile_id: ID of created profile
        user_id: User the profile belongs to
        bmr: Calculated BMR
        tdee: Calculated TDEE
        calorie_goal: Daily calorie goal
    """

    profile_id: UUID
    user_id: str
    bmr: int
    tdee: int
    calorie_goal: int

    @staticmethod
    def create(
        profile_id: UUID, user_id: str, bmr: int, tdee: int, calorie_goal: int
    ) -> "ProfileCreated":
        """Factory method to create event."""
        return ProfileCreated(
            event_id=DomainEvent._generate_event_id(),
            occurred_at=DomainEvent._now(),
            profile_id=profile_id,
            user_id=user_id,
            bmr=bmr,
            tdee=tdee,
            calorie_goal=calorie_goal,
        )
