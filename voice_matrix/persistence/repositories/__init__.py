"""Repository implementations."""

from voice_matrix.persistence.repositories.assistant_repository import AssistantRepository
from voice_matrix.persistence.repositories.base import BaseRepository

__all__ = ["AssistantRepository", "BaseRepository"]
