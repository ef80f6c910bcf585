"""Shared test fixtures.

Loads ``.env.test`` (if present) so tests never pick up developer
settings, and resets process-wide state between tests.
"""

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from dotenv import load_dotenv

from infrastructure.persistence.profile_repository_factory import reset_profile_repository

env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)


@pytest.fixture(autouse=True)
def _reset_profile_repository() -> Iterator[None]:
    """Drop the repository singleton after each test."""
    yield
    reset_profile_repository()


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Restore default structlog configuration after each test."""
    yield
    structlog.reset_defaults()
