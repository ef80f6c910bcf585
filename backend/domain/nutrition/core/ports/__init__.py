"""Ports for the nutrition domain."""

from .calculators import (
    IBMRCalculator,
    ICalorieGoalCalculator,
    IMacroCalculator,
    ITDEECalculator,
)
from .event_bus import EventHandler, IEventBus
from .repository import IProfileRepository

__all__ = [
    "IProfileRepository",
    "IEventBus",
    "EventHandler",
    "IBMRCalculator",
    "ITDEECalculator",
    "ICalorieGoalCalculator",
    "IMacroCalculator",
]
