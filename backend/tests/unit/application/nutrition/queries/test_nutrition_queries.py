"""Unit tests for nutrition queries."""

from unittest.mock import AsyncMock

import pytest

from application.nutrition.orchestrators.targets_orchestrator import TargetsOrchestrator
from application.nutrition.queries.get_profile import (
    GetProfileQuery,
    GetProfileQueryHandler,
)
from application.nutrition.queries.preview_targets import (
    PreviewTargetsQuery,
    PreviewTargetsQueryHandler,
)
from domain.nutrition.core.exceptions.domain_errors import (
    DomainValidationError,
    ProfileNotFoundError,
)
from domain.nutrition.core.value_objects import (
    ActivityLevel,
    GoalDirection,
    Sex,
    UserBiometrics,
)


@pytest.fixture
def biometrics() -> UserBiometrics:
    """Very active female gaining 0.5 lb/week."""
    return UserBiometrics(
        sex=Sex.FEMALE,
        age_years=25,
        height_cm=165.0,
        weight_kg=60.0,
        activity_level=ActivityLevel.VERY_ACTIVE,
        goal_direction=GoalDirection.GAIN,
        weekly_rate_kcal_per_day=250,
    )


class TestGetProfileQuery:
    """Test GetProfileQueryHandler."""

    @pytest.mark.asyncio
    async def test_found(self):
        """Test profile is returned."""
        repository = AsyncMock()
        profile = object()
        repository.find_by_user_id.return_value = profile

        result = await GetProfileQueryHandler(repository).handle(GetProfileQuery(user_id="u1"))

        assert result is profile
        repository.find_by_user_id.assert_awaited_once_with("u1")

    @pytest.mark.asyncio
    async def test_not_found(self):
        """Test missing profile raises."""
        repository = AsyncMock()
        repository.find_by_user_id.return_value = None

        with pytest.raises(ProfileNotFoundError, match="u1"):
            await GetProfileQueryHandler(repository).handle(GetProfileQuery(user_id="u1"))


class TestPreviewTargetsQuery:
    """Test PreviewTargetsQueryHandler."""

    @pytest.mark.asyncio
    async def test_preview(self, biometrics):
        """Test what-if targets."""
        handler = PreviewTargetsQueryHandler(TargetsOrchestrator())

        targets = await handler.handle(PreviewTargetsQuery(biometrics=biometrics))

        assert targets.bmr_kcal == 1345
        assert targets.tdee_kcal == 2691
        assert targets.calorie_goal_kcal == 2940

    @pytest.mark.asyncio
    async def test_preview_validates(self, biometrics):
        """Test invalid snapshot is rejected."""
        handler = PreviewTargetsQueryHandler(TargetsOrchestrator())

        with pytest.raises(DomainValidationError):
            await handler.handle(PreviewTargetsQuery(biometrics=biometrics.replace(age_years=10)))

    @pytest.mark.asyncio
    async def test_preview_rejects_rate_above_range(self, biometrics):
        """Test a direct caller cannot pass an unsafe weekly rate."""
        handler = PreviewTargetsQueryHandler(TargetsOrchestrator())

        with pytest.raises(DomainValidationError, match="Weekly rate"):
            await handler.handle(
                PreviewTargetsQuery(biometrics=biometrics.replace(weekly_rate_kcal_per_day=1500))
            )
