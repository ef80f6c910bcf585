"""TargetsRecalculated domain event."""

from dataclasses import dataclass
from uuid import UUID

from .base import DomainEvent


@dataclass(frozen=True)
class TargetsRecalculated(DomainEvent):
    """Event emitted when a biometrics edit or a goal override replaces targets.

    Attributes:
        profile_id: ID of updated profile
        user_id: User the profile belongs to
        updated_fields: Fields that changed
        previous_calorie_goal: Goal before the edit
        calorie_goal: Goal after the edit
    """

    profile_id: UUID
    user_id: str
    updated_fields: tuple[str, ...]
    previous_calorie_goal: int
    calorie_goal: int

    @staticmethod
    def create(
        profile_id: UUID,
        user_id: str,
        updated_fields: list[str],
        previous_calorie_goal: int,
        calorie_goal: int,
    ) -> "TargetsRecalculated":
        """Factory method to create event."""
        return TargetsRecalculated(
            event_id=DomainEvent._generate_event_id(),
            occurred_at=DomainEvent._now(),
            profile_id=profile_id,
            user_id=user_id,
            updated_fields=tuple(updated_fields),
            previous_calorie_goal=previous_calorie_goal,
            calorie_goal=calorie_goal,
        )
