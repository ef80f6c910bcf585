"""Sex value object - selects the Mifflin-St Jeor constant."""

from enum import Enum
from typing import Union

from ..exceptions.domain_errors import DomainValidationError


class Sex(str, Enum):
    """Biological sex used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"

    def bmr_constant(self) -> float:
        """Get the sex-specific constant term of the BMR formula.

        Returns:
            float: +5 for male, -161 for female

        Example:
            >>> Sex.FEMALE.bmr_constant()
            -161.0
        """
        constants = {
            Sex.MALE: 5.0,
            Sex.FEMALE: -161.0,
        }
        return constants[self]

    @classmethod
    def parse(cls, value: Union["Sex", str]) -> "Sex":
        """Parse sex from enum or raw string ('male', 'female', 'M', 'F').

        Raises:
            DomainValidationError: If value is not a recognized sex
        """
        if isinstance(value, Sex):
            return value

        normalized = str(value).strip().lower()
        aliases = {"m": cls.MALE, "f": cls.FEMALE}
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError as e:
            raise DomainValidationError(
                f"Sex must be 'male' or 'female', got {value!r}"
            ) from e
