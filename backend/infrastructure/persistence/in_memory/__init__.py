"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.profile_repository import (
    InMemoryProfileRepository,
)

__all__ = [
    "InMemoryProfileRepository",
]
