"""Pydantic schemas for assistant endpoints."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from voice_matrix.persistence.models.assistant import AssistantConfigurationRecord


class AssistantResponse(BaseModel):
    id: str
    name: str
    template_id: str
    template_version: str
    status: str
    dynamic_segments: dict[str, str] = {}
    voice_settings: dict[str, Any] = {}
    conversation_settings: dict[str, Any] = {}
    assembled_prompt: str
    remote_id: Optional[str] = None
    phone_number: Optional[str] = None
    last_error: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: AssistantConfigurationRecord) -> "AssistantResponse":
        """Convert a stored record to the API response."""
        return cls(
            id=record.id,
            name=record.name,
            template_id=record.template_id,
            template_version=record.template_version,
            status=record.status,
            dynamic_segments=record.dynamic_segments or {},
            voice_settings=record.voice_settings or {},
            conversation_settings=record.conversation_settings or {},
            assembled_prompt=record.assembled_prompt,
            remote_id=record.remote_id,
            phone_number=record.phone_number,
            last_error=record.last_error,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class AssistantDetailResponse(AssistantResponse):
    """Assistant including the full deployable configuration."""

    configuration: dict[str, Any] = {}

    @classmethod
    def from_record(cls, record: AssistantConfigurationRecord) -> "AssistantDetailResponse":
        base = AssistantResponse.from_record(record)
        return cls(**base.model_dump(), configuration=record.configuration or {})
