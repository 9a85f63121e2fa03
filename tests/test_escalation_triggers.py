"""Tests for escalation trigger evaluation."""

import pytest
from pydantic import ValidationError

from voice_matrix.domain.templates.library import (
    APPOINTMENT_BOOKING_TEMPLATE,
    CUSTOMER_SUPPORT_TRIAGE_TEMPLATE,
    LEAD_QUALIFICATION_TEMPLATE,
)
from voice_matrix.domain.templates.schemas import (
    BusinessRules,
    CallSignal,
    DurationTrigger,
    KeywordTrigger,
    SentimentTrigger,
    _TriggerBase,
)


class TestTriggers:
    """Test cases for individual trigger types."""

    def test_keyword_matches_whole_words_case_insensitive(self):
        trigger = KeywordTrigger(
            keywords=["pain"], action="transfer_to_human", message="Connecting you now"
        )

        assert trigger.evaluate(CallSignal(utterance="I'm in a lot of PAIN today"))
        assert not trigger.evaluate(CallSignal(utterance="I need to paint my fence"))

    def test_sentiment_threshold_inclusive(self):
        trigger = SentimentTrigger(threshold=-0.6, action="transfer_to_human", message="Sorry")

        assert trigger.evaluate(CallSignal(sentiment=-0.6))
        assert trigger.evaluate(CallSignal(sentiment=-0.9))
        assert not trigger.evaluate(CallSignal(sentiment=-0.2))
        assert not trigger.evaluate(CallSignal())

    def test_trigger_type_must_be_known(self):
        with pytest.raises(ValidationError):
            BusinessRules.model_validate(
                {"escalation_triggers": [{"type": "volume", "action": "end_call", "message": "Bye"}]}
            )

    def test_trigger_variant_must_implement_evaluate(self):
        class SilenceTrigger(_TriggerBase):
            pass

        with pytest.raises(TypeError):
            SilenceTrigger(action="end_call", message="Are you still there?")

    def test_duration_fires_at_limit(self):
        trigger = DurationTrigger(max_seconds=480, action="schedule_callback", message="Let's follow up")

        assert not trigger.evaluate(CallSignal(elapsed_seconds=479))
        assert trigger.evaluate(CallSignal(elapsed_seconds=480))


class TestTemplateEscalations:
    """Test cases for escalations carried by built-in templates."""

    def test_emergency_escalates_appointment_booking(self):
        rules = APPOINTMENT_BOOKING_TEMPLATE.platform.business_rules

        fired = rules.triggered_escalations(CallSignal(utterance="This is an emergency"))

        assert len(fired) == 1
        assert fired[0].action == "transfer_to_human"
        assert fired[0].priority == "immediate"

    def test_most_urgent_first(self):
        rules = APPOINTMENT_BOOKING_TEMPLATE.platform.business_rules

        fired = rules.triggered_escalations(
            CallSignal(utterance="My insurance claim is urgent")
        )

        assert [t.priority for t in fired] == ["immediate", "high"]

    def test_negative_sentiment_escalates_support(self):
        rules = CUSTOMER_SUPPORT_TRIAGE_TEMPLATE.platform.business_rules

        fired = rules.triggered_escalations(CallSignal(sentiment=-0.8))

        assert [t.type for t in fired] == ["sentiment"]

    def test_long_call_schedules_callback(self):
        rules = LEAD_QUALIFICATION_TEMPLATE.platform.business_rules

        fired = rules.triggered_escalations(CallSignal(elapsed_seconds=600))

        assert [t.action for t in fired] == ["schedule_callback"]

    def test_quiet_call_fires_nothing(self):
        rules = CUSTOMER_SUPPORT_TRIAGE_TEMPLATE.platform.business_rules

        assert rules.triggered_escalations(CallSignal(utterance="Thanks", sentiment=0.4)) == []
