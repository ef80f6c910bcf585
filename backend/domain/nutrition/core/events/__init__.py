"""Domain events for the nutrition domain."""

from .base import DomainEvent
from .profile_created import ProfileCreated
from .targets_recalculated import TargetsRecalculated

__all__ = [
    "DomainEvent",
    "ProfileCreated",
    "TargetsRecalculated",
]
