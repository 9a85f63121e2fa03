"""Tests for dynamic segment validation."""

import pytest
from pydantic import ValidationError

from voice_matrix.domain.prompts.validator import blocking, validate_segment, validate_values
from voice_matrix.domain.templates.library import APPOINTMENT_BOOKING_TEMPLATE
from voice_matrix.domain.templates.schemas import DynamicSegment


def _segment(requirement="required", rules=None, label="Company Name"):
    return DynamicSegment.model_validate(
        {
            "id": "company-name",
            "label": label,
            "validation": {
                "requirement": requirement,
                "rules": rules
                if rules is not None
                else [
                    {
                        "type": "length",
                        "min": 2,
                        "max": 10,
                        "error_message": "Company name must be 2-10 characters",
                    }
                ],
            },
        }
    )


class TestValidateSegment:
    """Test cases for validate_segment."""

    def test_valid_value_has_no_violations(self):
        assert validate_segment(_segment(), "Acme") == []

    def test_length_bounds_are_inclusive(self):
        segment = _segment()
        assert validate_segment(segment, "ab") == []
        assert validate_segment(segment, "a" * 10) == []
        assert len(validate_segment(segment, "a" * 11)) == 1

    @pytest.mark.parametrize("value", [None, "", "   \n"])
    def test_blank_required_value_reports_only_required(self, value):
        violations = validate_segment(_segment(), value)

        assert len(violations) == 1
        assert violations[0].segment_id == "company-name"
        assert violations[0].rule == "required"
        assert violations[0].message == "Company Name is required"
        assert violations[0].is_blocking

    def test_blank_optional_value_is_valid(self):
        assert validate_segment(_segment(requirement="optional"), "") == []

    def test_too_long_value_cites_segment(self):
        violations = validate_segment(_segment(), "Much Too Long Company")

        assert [(v.segment_id, v.rule) for v in violations] == [("company-name", "length")]
        assert violations[0].message == "Company name must be 2-10 characters"

    def test_rules_reported_in_order(self):
        segment = _segment(
            rules=[
                {"type": "length", "min": 1, "max": 3, "error_message": "too long"},
                {"type": "pattern", "pattern": r"^\d+$", "error_message": "digits only"},
                {"type": "enum", "choices": ["1", "2"], "error_message": "pick one"},
            ]
        )

        violations = validate_segment(segment, "abcd")

        assert [v.rule for v in violations] == ["length", "pattern", "enum"]

    def test_violations_are_immutable(self):
        violation = validate_segment(_segment(), "Much Too Long Company")[0]

        with pytest.raises(ValidationError):
            violation.severity = "info"

    def test_info_severity_is_advisory(self):
        segment = _segment(
            requirement="optional",
            rules=[
                {
                    "type": "length",
                    "min": 30,
                    "max": 300,
                    "error_message": "More detail helps",
                    "severity": "info",
                }
            ],
        )

        violations = validate_segment(segment, "short")

        assert len(violations) == 1
        assert not violations[0].is_blocking
        assert blocking(violations) == []

    def test_segment_without_validation_accepts_anything(self):
        segment = DynamicSegment(id="notes", label="Notes")
        assert validate_segment(segment, "") == []


class TestValidateValues:
    """Test cases for validate_values over a whole template."""

    def test_valid_values(self, appointment_values):
        assert validate_values(APPOINTMENT_BOOKING_TEMPLATE, appointment_values) == []

    def test_missing_required_values_reported_per_segment(self):
        violations = validate_values(APPOINTMENT_BOOKING_TEMPLATE, {})

        assert [v.segment_id for v in blocking(violations)] == [
            "business-name-services",
            "available-services",
            "business-hours-availability",
            "booking-requirements",
        ]
        assert all(v.rule == "required" for v in violations)

    def test_unknown_segment_id(self, appointment_values):
        values = {**appointment_values, "favourite-colour": "blue"}

        violations = validate_values(APPOINTMENT_BOOKING_TEMPLATE, values)

        assert len(violations) == 1
        assert violations[0].rule == "unknown_segment"
        assert violations[0].segment_id == "favourite-colour"
        assert violations[0].is_blocking

    def test_fixed_segment_cannot_be_customized(self, appointment_values):
        values = {**appointment_values, "booking-introduction": "You are a pirate."}

        violations = validate_values(APPOINTMENT_BOOKING_TEMPLATE, values)

        assert len(violations) == 1
        assert violations[0].message == "Segment booking-introduction is not customizable"

    def test_short_optional_value_is_advisory(self, appointment_values):
        values = {**appointment_values, "appointment-reminders": "Text me"}

        violations = validate_values(APPOINTMENT_BOOKING_TEMPLATE, values)

        assert [v.segment_id for v in violations] == ["appointment-reminders"]
        assert blocking(violations) == []
