"""Template quality checks and scoring."""

from typing import Literal

from pydantic import BaseModel, Field

from voice_matrix.domain.templates.schemas import Template


class QualityError(BaseModel):
    field: str
    message: str
    severity: Literal["critical", "major", "minor"]
    suggested_fix: str = ""


class QualityWarning(BaseModel):
    field: str
    message: str
    recommendation: str = ""
    impact: Literal["performance", "user_experience", "business_outcome"] = "user_experience"


class OptimizationSuggestion(BaseModel):
    type: Literal["performance", "user_experience", "business_impact"]
    description: str
    expected_impact: Literal["low", "medium", "high"] = "medium"
    implementation_effort: Literal["low", "medium", "high"] = "medium"
    action: str = ""


class QualityScores(BaseModel):
    overall: float
    completeness: float
    clarity: float
    business_alignment: float
    technical_quality: float


class TemplateQualityReport(BaseModel):
    template_id: str
    is_valid: bool
    errors: list[QualityError] = Field(default_factory=list)
    warnings: list[QualityWarning] = Field(default_factory=list)
    suggestions: list[OptimizationSuggestion] = Field(default_factory=list)
    scores: QualityScores


MAX_RECOMMENDED_SEGMENTS = 10


class TemplateQualityChecker:
    """Reviews a template for authoring problems and scores its quality.

    Errors are graded critical, major or minor; only critical errors make a
    template invalid. Each score is the fraction of available points earned,
    rounded to two decimals.
    """

    def check(self, template: Template) -> TemplateQualityReport:
        errors: list[QualityError] = []
        warnings: list[QualityWarning] = []
        suggestions: list[OptimizationSuggestion] = []

        if not template.name.strip():
            errors.append(
                QualityError(
                    field="name",
                    message="Template name is required",
                    severity="critical",
                    suggested_fix="Provide a descriptive name for the template",
                )
            )
        if not template.segments:
            errors.append(
                QualityError(
                    field="segments",
                    message="Template must have at least one segment",
                    severity="critical",
                    suggested_fix="Add prompt segments to define the template structure",
                )
            )
        elif not template.dynamic_segments:
            warnings.append(
                QualityWarning(
                    field="segments",
                    message="Template has no dynamic segments",
                    recommendation="Consider adding dynamic segments for customization",
                )
            )

        if not template.platform.voice.voice_id.strip():
            errors.append(
                QualityError(
                    field="platform.voice.voice_id",
                    message="Voice ID is required",
                    severity="major",
                    suggested_fix="Select a voice for the assistant",
                )
            )

        if not template.business_objectives:
            warnings.append(
                QualityWarning(
                    field="business_objectives",
                    message="No business objectives defined",
                    recommendation="Define clear business objectives for better template effectiveness",
                    impact="business_outcome",
                )
            )
        if not template.documentation.description.strip():
            warnings.append(
                QualityWarning(
                    field="documentation.description",
                    message="Template has no description",
                    recommendation="Describe what the template is for so users can pick it",
                )
            )

        if len(template.segments) > MAX_RECOMMENDED_SEGMENTS:
            suggestions.append(
                OptimizationSuggestion(
                    type="user_experience",
                    description="Template has many segments which may overwhelm users",
                    action="Consider grouping related segments or simplifying the template",
                )
            )
        if not template.documentation.best_practices:
            suggestions.append(
                OptimizationSuggestion(
                    type="user_experience",
                    description="Add best practices documentation",
                    expected_impact="high",
                    implementation_effort="low",
                    action="Document best practices for using this template effectively",
                )
            )

        completeness = self._completeness(template)
        clarity = self._clarity(template)
        business_alignment = self._business_alignment(template)
        technical_quality = self._technical_quality(template)
        overall = (completeness + clarity + business_alignment + technical_quality) / 4

        return TemplateQualityReport(
            template_id=template.id,
            is_valid=not any(error.severity == "critical" for error in errors),
            errors=errors,
            warnings=warnings,
            suggestions=suggestions,
            scores=QualityScores(
                overall=round(overall, 2),
                completeness=round(completeness, 2),
                clarity=round(clarity, 2),
                business_alignment=round(business_alignment, 2),
                technical_quality=round(technical_quality, 2),
            ),
        )

    @staticmethod
    def _completeness(template: Template) -> float:
        docs = template.documentation
        points = 0
        points += 1 if template.name.strip() else 0
        points += 2 if template.segments else 0
        points += 2 if template.business_objectives else 0
        points += 2 if template.platform.voice.voice_id.strip() else 0
        points += 1 if docs.description.strip() else 0
        points += 1 if docs.best_practices else 0
        points += 1 if template.performance is not None else 0
        return points / 10

    @staticmethod
    def _clarity(template: Template) -> float:
        docs = template.documentation
        points = 0
        points += 2 if len(docs.description) > 50 else 0
        points += 2 if docs.detailed_instructions.strip() else 0
        if template.segments and all(s.label and s.business_purpose for s in template.segments):
            points += 2
        points += 1 if template.use_case and template.use_case.description else 0
        points += 1 if docs.best_practices else 0
        return points / 8

    @staticmethod
    def _business_alignment(template: Template) -> float:
        points = 0
        points += 2 if template.business_objectives else 0
        points += 2 if template.use_case and template.use_case.expected_outcomes else 0
        points += 1 if template.performance is not None else 0
        points += 1 if template.category.functional_area else 0
        return points / 6

    @staticmethod
    def _technical_quality(template: Template) -> float:
        platform = template.platform
        points = 0
        points += 2 if platform.model.model_name.strip() else 0
        points += 2 if platform.voice.voice_id.strip() else 0
        points += 2 if platform.conversation.first_message.strip() else 0
        if any(segment.validation is not None for segment in template.dynamic_segments):
            points += 1
        points += 1 if platform.business_rules.escalation_triggers else 0
        return points / 8
