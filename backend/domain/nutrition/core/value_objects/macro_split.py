"""MacroSplit value object - percentage allocation of daily calories."""

from dataclasses import dataclass
from typing import ClassVar

from ..exceptions.domain_errors import InvalidMacroSplitError
from ..rounding import round_half_up


@dataclass(frozen=True)
class MacroSplit:
    """Percentage of daily calories assigned to each macronutrient.

    Percentages are whole numbers. A split handed to the calculation
    pipeline must total exactly 100; call ``validate()`` before use, or
    ``balanced()`` to normalize a split edited step by step in the UI.

    Attributes:
        carbs_pct: Carbohydrates share (0-100)
        protein_pct: Protein share (0-100)
        fat_pct: Fat share (0-100)
    """

    carbs_pct: int
    protein_pct: int
    fat_pct: int

    BALANCED: ClassVar["MacroSplit"]
    LOWER_CARB: ClassVar["MacroSplit"]
    HIGHER_PROTEIN: ClassVar["MacroSplit"]

    @staticmethod
    def default() -> "MacroSplit":
        """Split assigned at onboarding (45% carbs, 25% protein, 30% fat)."""
        return MacroSplit(carbs_pct=45, protein_pct=25, fat_pct=30)

    @staticmethod
    def presets() -> dict[str, "MacroSplit"]:
        """Named quick presets offered by the macro editor."""
        return {
            "Balanced": MacroSplit.BALANCED,
            "Lower Carb": MacroSplit.LOWER_CARB,
            "Higher Protein": MacroSplit.HIGHER_PROTEIN,
        }

    def total(self) -> int:
        """Sum of the three percentages."""
        return self.carbs_pct + self.protein_pct + self.fat_pct

    def is_valid(self) -> bool:
        """Check every share is within 0-100 and the total is 100."""
        shares = (self.carbs_pct, self.protein_pct, self.fat_pct)
        return all(0 <= pct <= 100 for pct in shares) and self.total() == 100

    def validate(self) -> None:
        """Ensure the split can be used for gram targets.

        Raises:
            InvalidMacroSplitError: If shares are out of range or total != 100
        """
        if not self.is_valid():
            raise InvalidMacroSplitError(self.carbs_pct, self.protein_pct, self.fat_pct)

    def balanced(self) -> "MacroSplit":
        """Return a split nudged back to a 100% total.

        The missing (or excess) percentage is spread as round(diff/3) on
        carbs and protein with the remainder on fat, flooring each at 0.

        Example:
            >>> MacroSplit(carbs_pct=50, protein_pct=25, fat_pct=30).balanced()
            MacroSplit(carbs_pct=48, protein_pct=23, fat_pct=29)
        """
        diff = 100 - self.total()
        if diff == 0:
            return self

        adjustment = round_half_up(diff / 3)
        return MacroSplit(
            carbs_pct=max(0, self.carbs_pct + adjustment),
            protein_pct=max(0, self.protein_pct + adjustment),
            fat_pct=max(0, self.fat_pct + (diff - adjustment * 2)),
        )

    def __str__(self) -> str:
        return f"{self.carbs_pct}C / {self.protein_pct}P / {self.fat_pct}F %"


MacroSplit.BALANCED = MacroSplit(carbs_pct=50, protein_pct=20, fat_pct=30)
MacroSplit.LOWER_CARB = MacroSplit(carbs_pct=35, protein_pct=30, fat_pct=35)
MacroSplit.HIGHER_PROTEIN = MacroSplit(carbs_pct=40, protein_pct=30, fat_pct=30)
