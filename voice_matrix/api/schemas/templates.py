"""Pydantic schemas for template endpoints."""

from pydantic import BaseModel, Field

from voice_matrix.domain.prompts.validator import Violation
from voice_matrix.domain.templates.schemas import Template


class TemplateSummary(BaseModel):
    id: str
    name: str
    version: str
    status: str
    category: str
    industries: list[str] = []
    complexity: str
    description: str = ""
    tags: list[str] = []
    customizable_segments: int = 0

    @classmethod
    def from_template(cls, template: Template) -> "TemplateSummary":
        return cls(
            id=template.id,
            name=template.name,
            version=template.version,
            status=template.status.value,
            category=template.category.primary,
            industries=[industry.value for industry in template.industries],
            complexity=template.complexity.value,
            description=template.documentation.description,
            tags=list(template.metadata.tags),
            customizable_segments=len(template.dynamic_segments),
        )


class SegmentValuesRequest(BaseModel):
    """Dynamic segment values keyed by segment id."""

    values: dict[str, str] = Field(default_factory=dict)


class ValidationResponse(BaseModel):
    valid: bool
    violations: list[Violation] = []


class PreviewResponse(BaseModel):
    template_id: str
    prompt: str
