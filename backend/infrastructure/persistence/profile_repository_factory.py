"""Factory for creating profile repository instances."""

from typing import Optional

import structlog

from domain.nutrition.core.ports.repository import IProfileRepository
from infrastructure.config import load_settings
from infrastructure.persistence.in_memory.profile_repository import (
    InMemoryProfileRepository,
)

logger = structlog.get_logger(__name__)

# Singleton instance
_profile_repository: Optional[IProfileRepository] = None


def create_profile_repository(backend: Optional[str] = None) -> IProfileRepository:
    """
    Create profile repository for the configured backend.

    Args:
        backend: Backend name; defaults to REPOSITORY_BACKEND from settings

    Returns:
        IProfileRepository implementation

    Default:
        Unknown backends fall back to InMemoryProfileRepository (logged)
    """
    repo_type = (backend or load_settings().repository_backend).lower()

    if repo_type != "inmemory":
        logger.warning(
            "unsupported_repository_backend",
            requested=repo_type,
            fallback="inmemory",
        )

    return InMemoryProfileRepository()


def get_profile_repository() -> IProfileRepository:
    """
    Get singleton profile repository instance.

    Lazy initialization on first call.
    """
    global _profile_repository
    if _profile_repository is None:
        _profile_repository = create_profile_repository()
    return _profile_repository


def reset_profile_repository() -> None:
    """Reset singleton instance (test helper)."""
    global _profile_repository
    _profile_repository = None
