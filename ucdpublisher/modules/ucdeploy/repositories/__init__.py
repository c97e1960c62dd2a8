"""Repository exports."""

from .base import GlobalEnvRepository
from .memory import InMemoryGlobalEnvRepository

__all__ = ["GlobalEnvRepository", "InMemoryGlobalEnvRepository"]
