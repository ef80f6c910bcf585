"""Domain exceptions for nutrition targets."""


class NutritionDomainError(Exception):
    """Base exception for nutrition domain errors."""

    pass


class DomainValidationError(NutritionDomainError):
    """Raised when biometric input is outside its allowed range."""

    pass


class InvalidMacroSplitError(DomainValidationError):
    """Raised when macro percentages are out of range or don't total 100."""

    def __init__(self, carbs_pct: int, protein_pct: int, fat_pct: int):
        total = carbs_pct + protein_pct + fat_pct
        super().__init__(
            f"Macro percentages must each be 0-100 and total 100, "
            f"got {carbs_pct}/{protein_pct}/{fat_pct} (total {total})"
        )
        self.total = total


class ProfileNotFoundError(NutritionDomainError):
    """Raised when profile cannot be found."""

    def __init__(self, lookup: str):
        super().__init__(f"Profile not found: {lookup}")
        self.lookup = lookup


class ProfileAlreadyExistsError(NutritionDomainError):
    """Raised when onboarding is completed twice for the same user."""

    def __init__(self, user_id: str):
        super().__init__(f"Profile already exists for user: {user_id}")
        self.user_id = user_id
