"""MacroGrams value object - daily macronutrient targets in grams."""

from dataclasses import dataclass

KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_FAT = 9


@dataclass(frozen=True)
class MacroGrams:
    """Macronutrient gram targets derived from the calorie goal.

    Uses standard calorie conversion: carbs 4 kcal/g, protein 4 kcal/g,
    fat 9 kcal/g. Each amount is rounded on its own, so the calorie
    equivalent can drift a few kcal from the goal. Amounts follow the sign
    of the calorie goal, which is not clamped: a deficit larger than TDEE
    yields negative grams.

    Attributes:
        carbs_g: Carbohydrates in grams
        protein_g: Protein in grams
        fat_g: Fat in grams
    """

    carbs_g: int
    protein_g: int
    fat_g: int

    def total_calories(self) -> int:
        """Calorie equivalent of the three amounts.

        Example:
            >>> MacroGrams(carbs_g=225, protein_g=125, fat_g=67).total_calories()
            2003
        """
        return (
            self.carbs_g * KCAL_PER_GRAM_CARBS
            + self.protein_g * KCAL_PER_GRAM_PROTEIN
            + self.fat_g * KCAL_PER_GRAM_FAT
        )

    def __str__(self) -> str:
        return f"{self.carbs_g}C / {self.protein_g}P / {self.fat_g}F g"
