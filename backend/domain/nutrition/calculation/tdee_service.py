"""TDEEService - Total Daily Energy Expenditure calculation."""

from typing import Union

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    Formula:
        TDEE = BMR × activity factor

    Factors:
        - Sedentary: 1.40
        - Lightly active: 1.60
        - Moderately active ("active"): 1.80
        - Very active: 2.00
        - Extra active: 2.20

    An unrecognized level uses the sedentary factor (logged by
    ``ActivityLevel.parse``).
    """

    def calculate(self, bmr: float, activity_level: Union[ActivityLevel, str]) -> float:
        """Calculate TDEE from BMR and activity level.

        Example:
            >>> TDEEService().calculate(1698.75, ActivityLevel.SEDENTARY)
            2378.25
        """
        return bmr * ActivityLevel.parse(activity_level).factor()
