"""Unit tests for InMemoryProfileRepository.

Tests focus on:
- Save and retrieve operations
- Query methods (find_by_id, find_by_user_id)
- Delete operations and existence checks
- Isolation between stored and returned copies
"""

import pytest

from domain.nutrition.core.entities import OnboardingPreferences, UserProfile
from domain.nutrition.core.value_objects import (
    ActivityLevel,
    MacroGrams,
    NutritionTargets,
    ProfileId,
    Sex,
    UserBiometrics,
)
from infrastructure.persistence.in_memory.profile_repository import (
    InMemoryProfileRepository,
)


@pytest.fixture
def repository() -> InMemoryProfileRepository:
    """Fixture providing clean InMemoryProfileRepository."""
    return InMemoryProfileRepository()


@pytest.fixture
def sample_profile() -> UserProfile:
    """Fixture providing sample profile."""
    return UserProfile(
        profile_id=ProfileId.generate(),
        user_id="user123",
        biometrics=UserBiometrics(
            sex=Sex.MALE,
            age_years=30,
            height_cm=175.0,
            weight_kg=75.0,
            activity_level=ActivityLevel.SEDENTARY,
        ),
        targets=NutritionTargets(
            bmr_kcal=1699,
            tdee_kcal=2378,
            calorie_goal_kcal=2380,
            macro_grams=MacroGrams(carbs_g=268, protein_g=149, fat_g=79),
        ),
        preferences=OnboardingPreferences(goals=("maintain_weight",)),
    )


class TestSaveAndFind:
    """Test save and query methods."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_id(self, repository, sample_profile) -> None:
        """Test saved profile can be found by id."""
        await repository.save(sample_profile)

        found = await repository.find_by_id(sample_profile.profile_id)

        assert found is not None
        assert found.user_id == "user123"
        assert found.targets == sample_profile.targets

    @pytest.mark.asyncio
    async def test_find_by_user_id(self, repository, sample_profile) -> None:
        """Test lookup by user."""
        await repository.save(sample_profile)

        assert (await repository.find_by_user_id("user123")).profile_id == sample_profile.profile_id
        assert await repository.find_by_user_id("other") is None

    @pytest.mark.asyncio
    async def test_find_missing(self, repository) -> None:
        """Test unknown id returns None."""
        assert await repository.find_by_id(ProfileId.generate()) is None

    @pytest.mark.asyncio
    async def test_save_overwrites(self, repository, sample_profile) -> None:
        """Test saving again updates the stored profile."""
        await repository.save(sample_profile)
        sample_profile.apply_biometrics(
            sample_profile.biometrics.replace(weight_kg=80.0), sample_profile.targets
        )

        await repository.save(sample_profile)

        found = await repository.find_by_id(sample_profile.profile_id)
        assert found.biometrics.weight_kg == 80.0
        assert repository.count() == 1


class TestIsolation:
    """Test stored copies are isolated."""

    @pytest.mark.asyncio
    async def test_mutating_original_does_not_affect_store(
        self, repository, sample_profile
    ) -> None:
        """Test save stores a copy."""
        await repository.save(sample_profile)
        sample_profile.user_id = "changed"

        found = await repository.find_by_id(sample_profile.profile_id)
        assert found.user_id == "user123"

    @pytest.mark.asyncio
    async def test_mutating_result_does_not_affect_store(
        self, repository, sample_profile
    ) -> None:
        """Test find returns a copy."""
        await repository.save(sample_profile)
        found = await repository.find_by_id(sample_profile.profile_id)
        found.user_id = "changed"

        again = await repository.find_by_id(sample_profile.profile_id)
        assert again.user_id == "user123"


class TestDeleteAndExists:
    """Test delete and exists."""

    @pytest.mark.asyncio
    async def test_exists(self, repository, sample_profile) -> None:
        """Test existence by user."""
        assert await repository.exists("user123") is False

        await repository.save(sample_profile)

        assert await repository.exists("user123") is True

    @pytest.mark.asyncio
    async def test_delete(self, repository, sample_profile) -> None:
        """Test delete removes profile."""
        await repository.save(sample_profile)

        await repository.delete(sample_profile.profile_id)

        assert await repository.find_by_id(sample_profile.profile_id) is None
        assert await repository.exists("user123") is False

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self, repository) -> None:
        """Test deleting unknown id doesn't raise."""
        await repository.delete(ProfileId.generate())

        assert repository.count() == 0

    @pytest.mark.asyncio
    async def test_clear(self, repository, sample_profile) -> None:
        """Test clear empties the store."""
        await repository.save(sample_profile)

        repository.clear()

        assert repository.count() == 0
