"""Database models."""

from voice_matrix.persistence.models.assistant import AssistantConfigurationRecord

__all__ = ["AssistantConfigurationRecord"]
