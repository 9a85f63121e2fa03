"""Tests for prompt assembly."""

import pytest

from voice_matrix.domain.errors import ValidationFailed
from voice_matrix.domain.prompts.assembler import SEGMENT_SEPARATOR, PromptAssembler
from voice_matrix.domain.templates.library import (
    APPOINTMENT_BOOKING_TEMPLATE,
    BUILTIN_TEMPLATES,
)


@pytest.fixture
def assembler():
    return PromptAssembler()


class TestPromptAssembler:
    """Test cases for PromptAssembler."""

    def test_segments_emitted_in_template_order(self, assembler, appointment_values):
        result = assembler.assemble(APPOINTMENT_BOOKING_TEMPLATE, appointment_values)

        blocks = result.prompt.split(SEGMENT_SEPARATOR)
        positions = []
        for segment in APPOINTMENT_BOOKING_TEMPLATE.segments:
            text = segment.content if segment.type != "dynamic" else appointment_values[segment.id]
            positions.append(result.prompt.index(text))
        assert positions == sorted(positions)
        assert blocks[0].startswith("You are a professional appointment booking specialist")

    def test_assembly_is_deterministic(self, assembler, appointment_values):
        first = assembler.assemble(APPOINTMENT_BOOKING_TEMPLATE, appointment_values)
        second = assembler.assemble(APPOINTMENT_BOOKING_TEMPLATE, dict(appointment_values))

        assert first.prompt == second.prompt

    def test_blank_optional_values_leave_no_empty_block(self, assembler, appointment_values):
        values = {**appointment_values, "pricing-policies": "", "appointment-reminders": "  "}

        result = assembler.assemble(APPOINTMENT_BOOKING_TEMPLATE, values)

        assert SEGMENT_SEPARATOR * 2 not in result.prompt
        assert not any(not block.strip() for block in result.prompt.split(SEGMENT_SEPARATOR))
        assert "Cleanings are $120" not in result.prompt

    def test_blocking_violations_raise_with_every_segment(self, assembler, appointment_values):
        values = {
            **appointment_values,
            "business-name-services": "",
            "available-services": "Cleanings",
        }

        with pytest.raises(ValidationFailed) as exc_info:
            assembler.assemble(APPOINTMENT_BOOKING_TEMPLATE, values)

        cited = {(v.segment_id, v.rule) for v in exc_info.value.violations}
        assert cited == {
            ("business-name-services", "required"),
            ("available-services", "length"),
        }

    def test_advisories_returned_with_prompt(self, assembler, appointment_values):
        values = {**appointment_values, "pricing-policies": "Cash only"}

        result = assembler.assemble(APPOINTMENT_BOOKING_TEMPLATE, values)

        assert "Cash only" in result.prompt
        assert [v.segment_id for v in result.advisories] == ["pricing-policies"]

    def test_render_shows_placeholder_for_missing_values(self, assembler):
        prompt = assembler.render(
            APPOINTMENT_BOOKING_TEMPLATE,
            {"business-name-services": "Premier Dental Care"},
        )

        assert "Premier Dental Care" in prompt
        assert "[Available Services & Durations]" in prompt
        assert "[Business Name & Services]" not in prompt

    @pytest.mark.parametrize("template", BUILTIN_TEMPLATES, ids=lambda t: t.id)
    def test_builtin_templates_render_every_segment(self, assembler, template):
        prompt = assembler.render(template, {})

        assert len(prompt.split(SEGMENT_SEPARATOR)) >= len(template.segments)
        for segment in template.dynamic_segments:
            assert f"[{segment.label}]" in prompt
