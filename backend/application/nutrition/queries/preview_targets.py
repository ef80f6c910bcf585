"""PreviewTargetsQuery - what-if targets for an unsaved biometrics snapshot."""

from dataclasses import dataclass

from domain.nutrition.core.value_objects.nutrition_targets import NutritionTargets
from domain.nutrition.core.value_objects.user_biometrics import UserBiometrics

from ..orchestrators.targets_orchestrator import TargetsOrchestrator


@dataclass(frozen=True)
class PreviewTargetsQuery:
    """Query to preview targets without touching any profile.

    Attributes:
        biometrics: Snapshot to calculate for
    """

    biometrics: UserBiometrics


class PreviewTargetsQueryHandler:
    """Handler for PreviewTargetsQuery.

    Stateless: nothing is read from or written to the repository.
    """

    def __init__(self, orchestrator: TargetsOrchestrator):
        self._orchestrator = orchestrator

    async def handle(self, query: PreviewTargetsQuery) -> NutritionTargets:
        """
        Handle preview query.

        Raises:
            DomainValidationError: If the snapshot is out of range
        """
        return self._orchestrator.calculate_targets(query.biometrics)
