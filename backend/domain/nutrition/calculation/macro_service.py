"""MacroService - Macronutrient gram targets."""

from ..core.ports.calculators import IMacroCalculator
from ..core.rounding import round_half_up
from ..core.value_objects.macro_grams import (
    KCAL_PER_GRAM_CARBS,
    KCAL_PER_GRAM_FAT,
    KCAL_PER_GRAM_PROTEIN,
    MacroGrams,
)
from ..core.value_objects.macro_split import MacroSplit


class MacroService(IMacroCalculator):
    """Apportion the calorie goal by macro split and convert to grams.

    Formula:
        carbs_g   = round(goal × carbs% / 4)
        protein_g = round(goal × protein% / 4)
        fat_g     = round(goal × fat% / 9)

    Each amount is rounded independently and not re-normalized, so the
    calorie equivalent may differ from the goal by a few kcal.
    """

    def calculate(self, calorie_goal: float, macro_split: MacroSplit) -> MacroGrams:
        """Calculate gram targets.

        Example:
            >>> MacroService().calculate(2000, MacroSplit(45, 25, 30))
            MacroGrams(carbs_g=225, protein_g=125, fat_g=67)
        """
        return MacroGrams(
            carbs_g=self._grams(calorie_goal, macro_split.carbs_pct, KCAL_PER_GRAM_CARBS),
            protein_g=self._grams(calorie_goal, macro_split.protein_pct, KCAL_PER_GRAM_PROTEIN),
            fat_g=self._grams(calorie_goal, macro_split.fat_pct, KCAL_PER_GRAM_FAT),
        )

    @staticmethod
    def _grams(calorie_goal: float, percentage: float, kcal_per_gram: int) -> int:
        return round_half_up(calorie_goal * percentage / 100 / kcal_per_gram)
