"""Domain exceptions for nutrition targets."""

from .domain_errors import (
    DomainValidationError,
    InvalidMacroSplitError,
    NutritionDomainError,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
)

__all__ = [
    "NutritionDomainError",
    "DomainValidationError",
    "InvalidMacroSplitError",
    "ProfileNotFoundError",
    "ProfileAlreadyExistsError",
]
