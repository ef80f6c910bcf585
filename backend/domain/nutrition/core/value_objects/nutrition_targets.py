"""NutritionTargets value object - derived daily targets."""

from dataclasses import dataclass

from .macro_grams import MacroGrams

# Inclusive bounds for a calorie goal set directly by the user
CALORIE_GOAL_RANGE = (800, 5000)


@dataclass(frozen=True)
class NutritionTargets:
    """Daily energy and macro targets derived from a biometrics snapshot.

    A disposable result: recomputed whenever biometrics change and
    replaced wholesale on the profile, never edited field by field.

    Attributes:
        bmr_kcal: Basal metabolic rate, rounded
        tdee_kcal: Total daily energy expenditure, rounded
        calorie_goal_kcal: Daily calorie goal, multiple of 10
        macro_grams: Carbs/protein/fat gram targets
    """

    bmr_kcal: int
    tdee_kcal: int
    calorie_goal_kcal: int
    macro_grams: MacroGrams

    @property
    def delta_kcal(self) -> int:
        """Calorie goal minus TDEE (negative = deficit)."""
        return self.calorie_goal_kcal - self.tdee_kcal

    def to_dict(self) -> dict[str, int]:
        """Flatten into the field names of the stored profile record.

        Example:
            >>> targets.to_dict()
            {'bmr': 1699, 'tdee': 2378, 'calorie_goal': 2380, ...}
        """
        return {
            "bmr": self.bmr_kcal,
            "tdee": self.tdee_kcal,
            "calorie_goal": self.calorie_goal_kcal,
            "carbs_g": self.macro_grams.carbs_g,
            "protein_g": self.macro_grams.protein_g,
            "fat_g": self.macro_grams.fat_g,
        }

    def __str__(self) -> str:
        return (
            f"BMR {self.bmr_kcal} / TDEE {self.tdee_kcal} / "
            f"Goal {self.calorie_goal_kcal} kcal ({self.macro_grams})"
        )
