"""Template catalog routes."""

from typing import Optional

from fastapi import APIRouter, Query

from voice_matrix.api.deps import Catalog
from voice_matrix.api.schemas.templates import (
    PreviewResponse,
    SegmentValuesRequest,
    TemplateSummary,
    ValidationResponse,
)
from voice_matrix.domain.prompts.assembler import PromptAssembler
from voice_matrix.domain.prompts.validator import blocking, validate_values
from voice_matrix.domain.templates.catalog import TemplateFilters
from voice_matrix.domain.templates.quality import TemplateQualityChecker, TemplateQualityReport
from voice_matrix.domain.templates.schemas import (
    Industry,
    Template,
    TemplateComplexity,
    TemplateStatus,
)

router = APIRouter()


@router.get("", response_model=list[TemplateSummary])
async def list_templates(
    catalog: Catalog,
    industry: Optional[list[Industry]] = Query(default=None),
    category: Optional[str] = None,
    complexity: Optional[TemplateComplexity] = None,
    status: Optional[TemplateStatus] = TemplateStatus.ACTIVE,
    tag: Optional[list[str]] = Query(default=None),
) -> list[TemplateSummary]:
    """List templates, optionally filtered."""
    filters = TemplateFilters(
        industries=industry or [],
        category=category,
        complexity=complexity,
        status=status,
        tags=tag or [],
    )
    return [TemplateSummary.from_template(t) for t in catalog.list(filters)]


@router.get("/{template_id}", response_model=Template)
async def get_template(template_id: str, catalog: Catalog) -> Template:
    """Get a full template definition."""
    return catalog.get(template_id)


@router.get("/{template_id}/quality", response_model=TemplateQualityReport)
async def get_template_quality(template_id: str, catalog: Catalog) -> TemplateQualityReport:
    """Run the quality checks on a template."""
    return TemplateQualityChecker().check(catalog.get(template_id))


@router.post("/{template_id}/validate", response_model=ValidationResponse)
async def validate_template_values(
    template_id: str,
    request: SegmentValuesRequest,
    catalog: Catalog,
) -> ValidationResponse:
    """Validate dynamic segment values without storing anything."""
    violations = validate_values(catalog.get(template_id), request.values)
    return ValidationResponse(valid=not blocking(violations), violations=violations)


@router.post("/{template_id}/preview", response_model=PreviewResponse)
async def preview_template(
    template_id: str,
    request: SegmentValuesRequest,
    catalog: Catalog,
) -> PreviewResponse:
    """Render the prompt for a partially filled draft.

    Values are not validated; segments without a value show a placeholder.
    """
    template = catalog.get(template_id)
    prompt = PromptAssembler().render(template, request.values)
    return PreviewResponse(template_id=template.id, prompt=prompt)
