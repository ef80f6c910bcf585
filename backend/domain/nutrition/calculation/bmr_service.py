"""BMRService - Basal Metabolic Rate calculation."""

from typing import Union

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.sex import Sex


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using the Mifflin-St Jeor equation.

    Formula:
        BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + C
        C = +5 (male), -161 (female)

    The result is left unrounded; only the exposed targets are rounded.
    Input ranges are not checked here.

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(
        self,
        sex: Union[Sex, str],
        weight_kg: float,
        height_cm: float,
        age_years: float,
    ) -> float:
        """Calculate BMR from biometric data.

        Args:
            sex: Biological sex
            weight_kg: Body weight in kg
            height_cm: Height in cm
            age_years: Age in years

        Returns:
            float: BMR in kcal/day

        Example:
            >>> BMRService().calculate("male", 75.0, 175.0, 30)
            1698.75
        """
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age_years
        return base + Sex.parse(sex).bmr_constant()
