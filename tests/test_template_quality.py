"""Tests for template quality checks."""

import pytest

from voice_matrix.domain.templates.library import APPOINTMENT_BOOKING_TEMPLATE, BUILTIN_TEMPLATES
from voice_matrix.domain.templates.quality import TemplateQualityChecker
from voice_matrix.domain.templates.schemas import Documentation


@pytest.fixture
def checker():
    return TemplateQualityChecker()


def _with_voice_id(template, voice_id):
    platform = template.platform
    voice = platform.voice.model_copy(update={"voice_id": voice_id})
    return template.model_copy(update={"platform": platform.model_copy(update={"voice": voice})})


class TestTemplateQualityChecker:
    """Test cases for TemplateQualityChecker."""

    @pytest.mark.parametrize("template", BUILTIN_TEMPLATES, ids=lambda t: t.id)
    def test_builtin_templates_are_valid(self, checker, template):
        report = checker.check(template)

        assert report.is_valid
        assert report.errors == []
        assert report.template_id == template.id
        assert 0 < report.scores.overall <= 1

    def test_blank_name_is_critical(self, checker):
        report = checker.check(APPOINTMENT_BOOKING_TEMPLATE.model_copy(update={"name": "  "}))

        assert not report.is_valid
        assert [(e.field, e.severity) for e in report.errors] == [("name", "critical")]

    def test_no_segments_is_critical(self, checker):
        report = checker.check(APPOINTMENT_BOOKING_TEMPLATE.model_copy(update={"segments": []}))

        assert not report.is_valid
        assert "segments" in {e.field for e in report.errors}

    def test_blank_voice_id_is_major_but_still_valid(self, checker):
        report = checker.check(_with_voice_id(APPOINTMENT_BOOKING_TEMPLATE, ""))

        assert report.is_valid
        assert [(e.field, e.severity) for e in report.errors] == [
            ("platform.voice.voice_id", "major")
        ]

    def test_fixed_only_template_warns(self, checker):
        fixed = [s for s in APPOINTMENT_BOOKING_TEMPLATE.segments if s.type != "dynamic"]

        report = checker.check(APPOINTMENT_BOOKING_TEMPLATE.model_copy(update={"segments": fixed}))

        assert "Template has no dynamic segments" in {w.message for w in report.warnings}

    def test_missing_documentation_lowers_scores(self, checker):
        baseline = checker.check(APPOINTMENT_BOOKING_TEMPLATE)
        bare = APPOINTMENT_BOOKING_TEMPLATE.model_copy(
            update={"documentation": Documentation(), "business_objectives": []}
        )

        report = checker.check(bare)

        assert report.scores.completeness < baseline.scores.completeness
        assert report.scores.clarity < baseline.scores.clarity
        assert {w.field for w in report.warnings} >= {
            "business_objectives",
            "documentation.description",
        }
        assert any(s.description == "Add best practices documentation" for s in report.suggestions)
