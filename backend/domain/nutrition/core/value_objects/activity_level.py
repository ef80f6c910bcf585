"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum
from typing import Union

import structlog

logger = structlog.get_logger(__name__)


class ActivityLevel(str, Enum):
    """Physical activity level used to scale BMR into TDEE.

    - SEDENTARY: Desk job, little exercise
    - LIGHTLY_ACTIVE: Good part of the day on your feet
    - MODERATELY_ACTIVE: Good part of the day doing physical activity
    - VERY_ACTIVE: Most of the day doing heavy physical activity
    - EXTRA_ACTIVE: Heavy physical job plus hard training
    """

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"

    def factor(self) -> float:
        """Get the activity multiplier applied to BMR.

        Returns:
            float: Multiplier for BMR to calculate TDEE

        Example:
            >>> ActivityLevel.MODERATELY_ACTIVE.factor()
            1.8
        """
        factors = {
            ActivityLevel.SEDENTARY: 1.40,
            ActivityLevel.LIGHTLY_ACTIVE: 1.60,
            ActivityLevel.MODERATELY_ACTIVE: 1.80,
            ActivityLevel.VERY_ACTIVE: 2.00,
            ActivityLevel.EXTRA_ACTIVE: 2.20,
        }
        return factors[self]

    def description(self) -> str:
        """Get human-readable description.

        Returns:
            str: Activity level description
        """
        descriptions = {
            ActivityLevel.SEDENTARY: "Spend most of day sitting (e.g., desk job)",
            ActivityLevel.LIGHTLY_ACTIVE: "Spend a good part of day on your feet",
            ActivityLevel.MODERATELY_ACTIVE: "Spend a good part of day doing physical activity",
            ActivityLevel.VERY_ACTIVE: "Spend most of day doing heavy physical activity",
            ActivityLevel.EXTRA_ACTIVE: "Heavy physical job plus daily hard training",
        }
        return descriptions[self]

    @classmethod
    def parse(cls, value: Union["ActivityLevel", str, None]) -> "ActivityLevel":
        """Resolve an activity level from enum or raw string.

        Accepts the canonical values plus the legacy alias ``active``
        (stored by older onboarding versions for moderately active).
        Anything else resolves to SEDENTARY and is logged.

        Args:
            value: Activity level as stored in the profile record

        Returns:
            ActivityLevel: Resolved level, never raises

        Example:
            >>> ActivityLevel.parse("active")
            <ActivityLevel.MODERATELY_ACTIVE: 'moderately_active'>
        """
        if isinstance(value, ActivityLevel):
            return value

        normalized = str(value).strip().lower() if value is not None else ""
        if normalized == "active":
            return cls.MODERATELY_ACTIVE

        try:
            return cls(normalized)
        except ValueError:
            logger.warning(
                "unrecognized_activity_level",
                raw_value=value,
                fallback=cls.SEDENTARY.value,
                factor=cls.SEDENTARY.factor(),
            )
            return cls.SEDENTARY
