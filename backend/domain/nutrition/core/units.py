"""Unit conversions applied to user input before target calculation.

The calculators only work in metric (kg, cm, years). Screens that accept
imperial input or a date of birth convert through these helpers first.
"""

import math
from datetime import date
from typing import Optional

from .rounding import round_half_up

CM_PER_INCH = 2.54
KG_PER_POUND = 0.453592
POUNDS_PER_KG = 2.20462
POUNDS_PER_STONE = 14

MIN_AGE_FROM_BIRTH_DATE = 13
MAX_AGE_FROM_BIRTH_DATE = 100


def feet_inches_to_cm(feet: int, inches: float = 0) -> int:
    """Convert a feet/inches height to whole centimeters.

    Example:
        >>> feet_inches_to_cm(5, 9)
        175
    """
    return round_half_up((feet * 12 + inches) * CM_PER_INCH)


def cm_to_feet_inches(cm: float) -> tuple[int, int]:
    """Convert centimeters to (feet, inches) for display.

    Example:
        >>> cm_to_feet_inches(175)
        (5, 9)
    """
    total_inches = cm / CM_PER_INCH
    feet = math.floor(total_inches / 12)
    inches = round_half_up(total_inches % 12)
    if inches == 12:
        return feet + 1, 0
    return feet, inches


def pounds_to_kg(pounds: float) -> float:
    """Convert pounds to kilograms, one decimal.

    Example:
        >>> pounds_to_kg(165)
        74.8
    """
    return round_half_up(pounds * KG_PER_POUND * 10) / 10


def kg_to_pounds(kg: float) -> float:
    """Convert kilograms to pounds, one decimal.

    Example:
        >>> kg_to_pounds(75)
        165.3
    """
    return round_half_up(kg * POUNDS_PER_KG * 10) / 10


def stones_to_kg(stones: float, pounds: float = 0) -> float:
    """Convert a stones/pounds weight to kilograms, one decimal.

    Example:
        >>> stones_to_kg(11, 11)
        74.8
    """
    return pounds_to_kg(stones * POUNDS_PER_STONE + pounds)


def age_from_date_of_birth(date_of_birth: date, today: Optional[date] = None) -> int:
    """Completed years since birth, clamped to 13-100.

    Args:
        date_of_birth: Birth date
        today: Reference date (defaults to today)

    Returns:
        int: Age in whole years

    Example:
        >>> age_from_date_of_birth(date(1990, 6, 15), today=date(2024, 6, 14))
        33
    """
    today = today or date.today()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return max(MIN_AGE_FROM_BIRTH_DATE, min(MAX_AGE_FROM_BIRTH_DATE, age))
