"""Validation of caller-supplied values for dynamic template segments."""

import re
from typing import Iterable, Mapping

from pydantic import BaseModel, ConfigDict

from voice_matrix.domain.templates.schemas import (
    EnumRule,
    LengthRule,
    PatternRule,
    Severity,
    Template,
    ValidationRule,
)


class Violation(BaseModel):
    """A single rule a segment value failed."""

    segment_id: str
    rule: str
    message: str
    severity: Severity

    model_config = ConfigDict(frozen=True)

    @property
    def is_blocking(self) -> bool:
        return self.severity == "error"


def _check_rule(rule: ValidationRule, value: str) -> bool:
    """Return True when the value satisfies the rule."""
    if isinstance(rule, LengthRule):
        return rule.min <= len(value) <= rule.max
    if isinstance(rule, PatternRule):
        return re.search(rule.pattern, value) is not None
    if isinstance(rule, EnumRule):
        return value in rule.choices
    raise TypeError(f"Unsupported validation rule: {type(rule).__name__}")


def validate_segment(segment, value: str | None) -> list[Violation]:
    """Validate one value against a segment's validation descriptor.

    Required segments with a blank value produce a single ``required`` error
    and no other rule is evaluated. Blank optional values are valid.

    Args:
        segment: Segment the value is for
        value: Candidate value, or None when not supplied

    Returns:
        Violations in rule order (empty when valid)
    """
    validation = getattr(segment, "validation", None)
    if validation is None:
        return []

    value = value or ""
    if not value.strip():
        if validation.required:
            return [
                Violation(
                    segment_id=segment.id,
                    rule="required",
                    message=f"{segment.label} is required",
                    severity="error",
                )
            ]
        return []

    return [
        Violation(
            segment_id=segment.id,
            rule=rule.type,
            message=rule.error_message,
            severity=rule.severity,
        )
        for rule in validation.rules
        if not _check_rule(rule, value)
    ]


def validate_values(template: Template, values: Mapping[str, str]) -> list[Violation]:
    """Validate caller values for every dynamic segment of a template.

    Values keyed to ids that are not dynamic segments of the template are
    reported as ``unknown_segment`` errors.
    """
    violations: list[Violation] = []
    dynamic_ids = set()
    for segment in template.dynamic_segments:
        dynamic_ids.add(segment.id)
        violations.extend(validate_segment(segment, values.get(segment.id)))

    for segment_id in values:
        if segment_id in dynamic_ids:
            continue
        if template.get_segment(segment_id) is None:
            message = f"Template {template.id} has no segment {segment_id}"
        else:
            message = f"Segment {segment_id} is not customizable"
        violations.append(
            Violation(
                segment_id=segment_id,
                rule="unknown_segment",
                message=message,
                severity="error",
            )
        )
    return violations


def blocking(violations: Iterable[Violation]) -> list[Violation]:
    """Return the error-severity subset."""
    return [v for v in violations if v.is_blocking]
