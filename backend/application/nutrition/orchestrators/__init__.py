"""Orchestrators for nutrition targets."""

from .targets_orchestrator import TargetsOrchestrator

__all__ = ["TargetsOrchestrator"]
