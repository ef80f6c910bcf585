"""Unit tests for MacroService."""

import pytest

from domain.nutrition.calculation.macro_service import MacroService
from domain.nutrition.core.value_objects import MacroGrams, MacroSplit

# half a gram of each macro: 0.5*4 + 0.5*4 + 0.5*9
MAX_ROUNDING_DRIFT_KCAL = 8.5


class TestMacroService:
    """Test macro gram targets."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = MacroService()

    def test_default_split_2000(self):
        """Test 2000 kcal at 45/25/30."""
        grams = self.service.calculate(2000, MacroSplit(45, 25, 30))

        assert grams == MacroGrams(carbs_g=225, protein_g=125, fat_g=67)
        assert grams.total_calories() == 2003

    def test_zero_percentage_gives_zero_grams(self):
        """Test a 0% share yields 0 g."""
        grams = self.service.calculate(2000, MacroSplit(0, 50, 50))

        assert grams.carbs_g == 0

    def test_half_gram_rounds_up(self):
        """Test .5 g rounds up, not to even."""
        # 1004 * 50% / 4 = 125.5
        assert self.service.calculate(1004, MacroSplit(50, 20, 30)).carbs_g == 126
        # 1880 * 45% / 4 = 211.5
        assert self.service.calculate(1880, MacroSplit(45, 25, 30)).carbs_g == 212

    def test_each_macro_rounded_independently(self):
        """Test amounts are not re-normalized to the goal."""
        grams = self.service.calculate(1880, MacroSplit(45, 25, 30))

        assert grams == MacroGrams(carbs_g=212, protein_g=118, fat_g=63)
        assert grams.total_calories() == 1887

    @pytest.mark.parametrize(
        "split",
        [MacroSplit(45, 25, 30), MacroSplit(35, 30, 35), MacroSplit(40, 30, 30)],
    )
    @pytest.mark.parametrize("goal", [1200, 1500, 1880, 2000, 2380, 2940, 3500])
    def test_calorie_drift_bounded(self, split, goal):
        """Test gram calories stay within half a gram per macro of the goal."""
        grams = self.service.calculate(goal, split)

        assert abs(grams.total_calories() - goal) <= MAX_ROUNDING_DRIFT_KCAL

    def test_standard_splits_at_2000(self):
        """Test presets at 2000 kcal stay within 5 kcal."""
        for split in (MacroSplit(45, 25, 30), MacroSplit.LOWER_CARB, MacroSplit.HIGHER_PROTEIN):
            grams = self.service.calculate(2000, split)
            assert abs(grams.total_calories() - 2000) <= 5
