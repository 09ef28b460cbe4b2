"""Content API integration for govfront."""

from .client import ContentApiClient, DetailedGuidanceClient
from .repository import ContentRepository, DetailedGuidanceRepository, NullDetailedGuidance

__all__ = [
    "ContentApiClient",
    "ContentRepository",
    "DetailedGuidanceClient",
    "DetailedGuidanceRepository",
    "NullDetailedGuidance",
]
