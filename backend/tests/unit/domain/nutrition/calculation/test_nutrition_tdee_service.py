"""Unit tests for TDEEService."""

import pytest
from structlog.testing import capture_logs

from domain.nutrition.calculation.tdee_service import TDEEService
from domain.nutrition.core.value_objects import ActivityLevel


class TestTDEEService:
    """Test TDEE = BMR × activity factor."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = TDEEService()

    @pytest.mark.parametrize(
        "level,factor",
        [
            (ActivityLevel.SEDENTARY, 1.40),
            (ActivityLevel.LIGHTLY_ACTIVE, 1.60),
            (ActivityLevel.MODERATELY_ACTIVE, 1.80),
            (ActivityLevel.VERY_ACTIVE, 2.00),
            (ActivityLevel.EXTRA_ACTIVE, 2.20),
        ],
    )
    def test_factor_table(self, level, factor):
        """Test each level applies its factor."""
        assert self.service.calculate(1000.0, level) == pytest.approx(1000.0 * factor)

    def test_sedentary_scenario(self):
        """Test 1698.75 × 1.40."""
        tdee = self.service.calculate(1698.75, ActivityLevel.SEDENTARY)

        assert tdee == pytest.approx(2378.25)

    def test_levels_strictly_increasing(self):
        """Test more activity always means higher TDEE."""
        values = [self.service.calculate(1500.0, level) for level in ActivityLevel]

        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_active_alias(self):
        """Test legacy 'active' maps to moderately active."""
        assert self.service.calculate(1000.0, "active") == pytest.approx(1800.0)

    def test_unknown_level_falls_back_to_sedentary(self):
        """Test unknown level uses 1.40 and logs the fallback."""
        with capture_logs() as logs:
            tdee = self.service.calculate(1000.0, "couch_potato")

        assert tdee == pytest.approx(1400.0)
        warnings = [log for log in logs if log["event"] == "unrecognized_activity_level"]
        assert len(warnings) == 1
        assert warnings[0]["log_level"] == "warning"
        assert warnings[0]["raw_value"] == "couch_potato"
        assert warnings[0]["fallback"] == "sedentary"

    def test_known_level_does_not_log(self):
        """Test no warning for a recognized level."""
        with capture_logs() as logs:
            self.service.calculate(1000.0, "very_active")

        assert logs == []
