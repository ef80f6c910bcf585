"""Unit tests for SetCalorieGoalCommand and handler."""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from structlog.testing import capture_logs

from application.nutrition.commands.complete_onboarding import (
    CompleteOnboardingCommand,
    CompleteOnboardingHandler,
)
from application.nutrition.commands.set_calorie_goal import (
    SetCalorieGoalCommand,
    SetCalorieGoalHandler,
)
from application.nutrition.commands.update_biometrics import (
    UpdateBiometricsCommand,
    UpdateBiometricsHandler,
)
from application.nutrition.orchestrators.targets_orchestrator import TargetsOrchestrator
from domain.nutrition.core.events import TargetsRecalculated
from domain.nutrition.core.exceptions.domain_errors import (
    DomainValidationError,
    InvalidMacroSplitError,
    ProfileNotFoundError,
)
from domain.nutrition.core.factories import UserProfileFactory
from domain.nutrition.core.value_objects import MacroGrams, MacroSplit
from infrastructure.persistence.in_memory.profile_repository import (
    InMemoryProfileRepository,
)


@pytest.fixture
def repository() -> InMemoryProfileRepository:
    """Fresh in-memory repository."""
    return InMemoryProfileRepository()


@pytest.fixture
def event_bus() -> AsyncMock:
    """Mock event bus."""
    return AsyncMock()


@pytest.fixture
def handler(repository, event_bus) -> SetCalorieGoalHandler:
    """Handler wired to real orchestrator and repository."""
    return SetCalorieGoalHandler(
        orchestrator=TargetsOrchestrator(),
        repository=repository,
        event_bus=event_bus,
    )


@pytest_asyncio.fixture
async def onboarded(repository):
    """User 'user123': male, 30y, 175cm, 75kg, sedentary, maintain (goal 2380)."""
    onboarding = CompleteOnboardingHandler(
        orchestrator=TargetsOrchestrator(),
        repository=repository,
        factory=UserProfileFactory(),
    )
    result = await onboarding.handle(
        CompleteOnboardingCommand(
            user_id="user123",
            sex="male",
            age=30,
            height=175,
            weight=75,
            activity_level="sedentary",
            goal_tags=("maintain_weight",),
            pounds_per_week=0.0,
        )
    )
    return result.profile


class TestSetCalorieGoalHandler:
    """Test handler with in-memory repository."""

    @pytest.mark.asyncio
    async def test_sets_goal_and_grams(self, handler, repository, event_bus, onboarded):
        """Test goal is stored as given and grams follow it."""
        result = await handler.handle(
            SetCalorieGoalCommand(
                user_id="user123", calorie_goal=2000, macro_split=MacroSplit(45, 25, 30)
            )
        )

        targets = result.profile.targets
        assert targets.calorie_goal_kcal == 2000
        # 2000 * 45% / 4 = 225; * 25% / 4 = 125; * 30% / 9 = 66.67
        assert targets.macro_grams == MacroGrams(carbs_g=225, protein_g=125, fat_g=67)
        assert targets.bmr_kcal == onboarded.targets.bmr_kcal
        assert targets.tdee_kcal == onboarded.targets.tdee_kcal
        assert result.previous_calorie_goal == 2380

        stored = await repository.find_by_user_id("user123")
        assert stored.targets == targets
        assert stored.biometrics.macro_split == MacroSplit(45, 25, 30)

        event = event_bus.publish.await_args.args[0]
        assert isinstance(event, TargetsRecalculated)
        assert event.updated_fields == ("calorie_goal", "macro_split")
        assert event.previous_calorie_goal == 2380
        assert event.calorie_goal == 2000

    @pytest.mark.asyncio
    async def test_goal_need_not_be_multiple_of_ten(self, handler, onboarded):
        """Test a hand-entered goal is kept exactly."""
        result = await handler.handle(
            SetCalorieGoalCommand(
                user_id="user123", calorie_goal=1850, macro_split=MacroSplit(50, 20, 30)
            )
        )

        # 1850 * 50% / 4 = 231.25; * 20% / 4 = 92.5; * 30% / 9 = 61.67
        assert result.profile.targets.calorie_goal_kcal == 1850
        assert result.profile.targets.macro_grams == MacroGrams(
            carbs_g=231, protein_g=93, fat_g=62
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "calorie_goal,expected",
        [
            (800, MacroGrams(carbs_g=100, protein_g=40, fat_g=27)),
            (5000, MacroGrams(carbs_g=625, protein_g=250, fat_g=167)),
        ],
    )
    async def test_range_limits_accepted(self, handler, onboarded, calorie_goal, expected):
        """Test 800 and 5000 are both allowed."""
        result = await handler.handle(
            SetCalorieGoalCommand(
                user_id="user123", calorie_goal=calorie_goal, macro_split=MacroSplit.BALANCED
            )
        )

        assert result.profile.targets.calorie_goal_kcal == calorie_goal
        assert result.profile.targets.macro_grams == expected

    @pytest.mark.asyncio
    @pytest.mark.parametrize("calorie_goal", [799, 5001, 0])
    async def test_out_of_range_rejected(
        self, handler, repository, event_bus, onboarded, calorie_goal
    ):
        """Test goal outside 800-5000 is not persisted."""
        with capture_logs() as logs:
            with pytest.raises(DomainValidationError, match="Calorie goal"):
                await handler.handle(
                    SetCalorieGoalCommand(
                        user_id="user123",
                        calorie_goal=calorie_goal,
                        macro_split=MacroSplit.BALANCED,
                    )
                )

        stored = await repository.find_by_user_id("user123")
        assert stored.targets == onboarded.targets
        event_bus.publish.assert_not_awaited()
        assert logs[0]["event"] == "calorie_goal_rejected"

    @pytest.mark.asyncio
    async def test_split_must_total_100(self, handler, repository, onboarded):
        """Test invalid split is rejected before saving."""
        with pytest.raises(InvalidMacroSplitError):
            await handler.handle(
                SetCalorieGoalCommand(
                    user_id="user123", calorie_goal=2000, macro_split=MacroSplit(50, 30, 30)
                )
            )

        stored = await repository.find_by_user_id("user123")
        assert stored.biometrics.macro_split == onboarded.biometrics.macro_split

    @pytest.mark.asyncio
    async def test_unknown_user(self, handler):
        """Test missing profile raises."""
        with pytest.raises(ProfileNotFoundError):
            await handler.handle(
                SetCalorieGoalCommand(
                    user_id="ghost", calorie_goal=2000, macro_split=MacroSplit.BALANCED
                )
            )

    @pytest.mark.asyncio
    async def test_biometrics_edit_recalculates_from_formula(self, handler, repository, onboarded):
        """Test a later biometrics edit replaces the chosen goal but keeps the split."""
        await handler.handle(
            SetCalorieGoalCommand(
                user_id="user123", calorie_goal=2000, macro_split=MacroSplit.HIGHER_PROTEIN
            )
        )
        update = UpdateBiometricsHandler(
            orchestrator=TargetsOrchestrator(), repository=repository
        )

        result = await update.handle(UpdateBiometricsCommand(user_id="user123", weight_kg=80.0))

        assert result.previous_calorie_goal == 2000
        assert result.profile.targets.calorie_goal_kcal == 2450
        assert result.profile.biometrics.macro_split == MacroSplit.HIGHER_PROTEIN
