"""Tests for the template catalog."""

import pytest

from voice_matrix.domain.errors import TemplateNotFound
from voice_matrix.domain.templates.catalog import TemplateCatalog, TemplateFilters, get_catalog
from voice_matrix.domain.templates.library import APPOINTMENT_BOOKING_TEMPLATE, BUILTIN_TEMPLATES
from voice_matrix.domain.templates.schemas import Industry, TemplateComplexity, TemplateStatus


@pytest.fixture
def catalog():
    return get_catalog()


class TestTemplateCatalog:
    """Test cases for TemplateCatalog."""

    def test_ships_five_builtin_templates(self, catalog):
        assert len(catalog) == 5
        assert {t.id for t in catalog.list()} == {
            "appointment-booking-specialist-v1",
            "customer-feedback-collector-v1",
            "customer-support-triage-v1",
            "lead-qualification-specialist-v1",
            "sales-discovery-agent-v1",
        }

    def test_list_is_ordered_by_id(self, catalog):
        ids = [t.id for t in catalog.list()]
        assert ids == sorted(ids)

    def test_get_returns_template(self, catalog):
        assert catalog.get("appointment-booking-specialist-v1") is APPOINTMENT_BOOKING_TEMPLATE
        assert "appointment-booking-specialist-v1" in catalog

    def test_get_unknown_raises(self, catalog):
        with pytest.raises(TemplateNotFound, match="no-such-template"):
            catalog.get("no-such-template")

    def test_filter_by_industry(self, catalog):
        templates = catalog.list(TemplateFilters(industries=[Industry.HEALTHCARE]))

        assert [t.id for t in templates] == [
            "appointment-booking-specialist-v1",
            "customer-support-triage-v1",
            "sales-discovery-agent-v1",
        ]

    def test_filter_by_complexity_and_category(self, catalog):
        advanced = catalog.list(TemplateFilters(complexity=TemplateComplexity.ADVANCED))
        assert {t.id for t in advanced} == {
            "customer-support-triage-v1",
            "sales-discovery-agent-v1",
        }

        booking = catalog.list(TemplateFilters(category="booking"))
        assert [t.id for t in booking] == ["appointment-booking-specialist-v1"]

    def test_filter_by_tag_is_case_insensitive(self, catalog):
        templates = catalog.list(TemplateFilters(tags=["QUALIFICATION"]))

        assert [t.id for t in templates] == [
            "lead-qualification-specialist-v1",
            "sales-discovery-agent-v1",
        ]

    def test_draft_templates_hidden_by_default(self):
        draft = APPOINTMENT_BOOKING_TEMPLATE.model_copy(
            update={"id": "draft-template", "status": TemplateStatus.DRAFT}
        )
        catalog = TemplateCatalog([*BUILTIN_TEMPLATES, draft])

        assert "draft-template" not in {t.id for t in catalog.list()}
        assert "draft-template" in {t.id for t in catalog.list(TemplateFilters(status=None))}

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate template id"):
            TemplateCatalog([APPOINTMENT_BOOKING_TEMPLATE, APPOINTMENT_BOOKING_TEMPLATE])
