"""Assembles the system prompt for an assistant from a template."""

import logging
from dataclasses import dataclass, field
from typing import Mapping

from voice_matrix.domain.errors import ValidationFailed
from voice_matrix.domain.prompts.validator import Violation, blocking, validate_values
from voice_matrix.domain.templates.schemas import Template

logger = logging.getLogger(__name__)

SEGMENT_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class AssemblyResult:
    """Assembled prompt plus advisory (non-blocking) violations."""

    prompt: str
    advisories: list[Violation] = field(default_factory=list)


class PromptAssembler:
    """Assembles system prompts from template segments and caller values.

    Segments are emitted in template order:
    1. Fixed segments (foundation, business rules, conversation flow) verbatim
    2. Dynamic segments with the caller's value, or ``[<label>]`` when absent

    Segments that resolve to blank text are dropped and the rest are joined
    with a blank line.
    """

    def assemble(self, template: Template, values: Mapping[str, str]) -> AssemblyResult:
        """Validate the values and assemble the prompt.

        Args:
            template: Template to assemble
            values: Dynamic segment values keyed by segment id

        Returns:
            AssemblyResult with the prompt and any advisory violations

        Raises:
            ValidationFailed: If any value violates an error-severity rule
        """
        violations = validate_values(template, values)
        errors = blocking(violations)
        if errors:
            logger.info(
                "Prompt assembly rejected",
                extra={"template_id": template.id, "violation_count": len(errors)},
            )
            raise ValidationFailed(errors)

        advisories = [v for v in violations if not v.is_blocking]
        return AssemblyResult(prompt=self.render(template, values), advisories=advisories)

    def render(self, template: Template, values: Mapping[str, str]) -> str:
        """Render the prompt without validating values.

        Used to preview partially filled drafts; missing dynamic values show
        as ``[<label>]`` placeholders.
        """
        parts = []
        for segment in template.segments:
            if segment.type == "dynamic":
                content = values.get(segment.id)
                if content is None:
                    content = f"[{segment.label}]"
            else:
                content = segment.content
            if content.strip():
                parts.append(content)
        return SEGMENT_SEPARATOR.join(parts)
