"""API request and response schemas."""

from voice_matrix.api.schemas.assistants import AssistantDetailResponse, AssistantResponse
from voice_matrix.api.schemas.templates import (
    PreviewResponse,
    SegmentValuesRequest,
    TemplateSummary,
    ValidationResponse,
)

__all__ = [
    "AssistantDetailResponse",
    "AssistantResponse",
    "PreviewResponse",
    "SegmentValuesRequest",
    "TemplateSummary",
    "ValidationResponse",
]
