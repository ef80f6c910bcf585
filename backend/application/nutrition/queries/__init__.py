"""Queries for the nutrition application layer."""

from .get_profile import GetProfileQuery, GetProfileQueryHandler
from .preview_targets import PreviewTargetsQuery, PreviewTargetsQueryHandler

__all__ = [
    "GetProfileQuery",
    "GetProfileQueryHandler",
    "PreviewTargetsQuery",
    "PreviewTargetsQueryHandler",
]
