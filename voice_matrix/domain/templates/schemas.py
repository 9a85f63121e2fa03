"""Pydantic schemas for assistant templates.

A template is authored once and referenced read-only afterwards, so every
model here is frozen. Segment types, validation rules and escalation triggers
are tagged unions keyed on ``type`` so callers can handle each variant
explicitly.
"""

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class FrozenModel(BaseModel):
    """Base for immutable template models."""

    model_config = ConfigDict(frozen=True, extra="forbid", protected_namespaces=())


class Industry(str, Enum):
    HEALTHCARE = "healthcare"
    REAL_ESTATE = "real_estate"
    SAAS = "saas"
    ECOMMERCE = "ecommerce"
    FINANCIAL_SERVICES = "financial_services"
    PROFESSIONAL_SERVICES = "professional_services"
    AUTOMOTIVE = "automotive"
    EDUCATION = "education"
    HOSPITALITY = "hospitality"
    FITNESS = "fitness"
    LEGAL = "legal"
    INSURANCE = "insurance"
    GENERAL = "general"


class TemplateComplexity(str, Enum):
    BASIC = "basic"  # 1-2 dynamic fields
    INTERMEDIATE = "intermediate"  # 3-5 dynamic fields
    ADVANCED = "advanced"  # 6+ dynamic fields


class TemplateStatus(str, Enum):
    DRAFT = "draft"
    BETA = "beta"
    ACTIVE = "active"
    DEPRECATED = "deprecated"


Severity = Literal["error", "warning", "info"]
ImpactLevel = Literal["critical", "important", "medium", "nice_to_have"]


# ---------------------------------------------------------------------------
# Business context
# ---------------------------------------------------------------------------


class TemplateCategory(FrozenModel):
    """Category taxonomy of a template."""

    primary: Literal[
        "sales", "support", "booking", "lead_qualification", "survey", "onboarding", "retention"
    ]
    secondary: Optional[str] = None
    functional_area: Literal["inbound", "outbound", "hybrid"]
    interaction_type: Literal["transactional", "consultative", "informational", "emergency"]


class BusinessObjective(FrozenModel):
    id: str
    name: str
    description: str
    success_criteria: list[str] = Field(default_factory=list)
    priority: Literal["high", "medium", "low"] = "medium"
    measurable: bool = True


class UseCase(FrozenModel):
    title: str
    description: str
    typical_scenarios: list[str] = Field(default_factory=list)
    expected_outcomes: list[str] = Field(default_factory=list)
    avg_call_duration: int = 0  # seconds
    success_rate: float = 0  # percent


# ---------------------------------------------------------------------------
# Validation rules
# ---------------------------------------------------------------------------


class LengthRule(FrozenModel):
    """Value length must fall within [min, max] inclusive."""

    type: Literal["length"] = "length"
    min: int = 0
    max: int
    error_message: str
    severity: Severity = "error"

    @model_validator(mode="after")
    def _check_bounds(self) -> "LengthRule":
        if self.min < 0 or self.max < self.min:
            raise ValueError(f"Invalid length bounds: min={self.min}, max={self.max}")
        return self


class PatternRule(FrozenModel):
    """Value must match a regular expression."""

    type: Literal["pattern"] = "pattern"
    pattern: str
    error_message: str
    severity: Severity = "error"

    @field_validator("pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        re.compile(value)
        return value


class EnumRule(FrozenModel):
    """Value must be one of a fixed set of choices."""

    type: Literal["enum"] = "enum"
    choices: list[str]
    error_message: str
    severity: Severity = "error"


ValidationRule = Annotated[Union[LengthRule, PatternRule, EnumRule], Field(discriminator="type")]


class ValidationDescriptor(FrozenModel):
    """Requiredness plus ordered rules for a dynamic segment."""

    requirement: Literal["required", "optional"] = "optional"
    rules: list[ValidationRule] = Field(default_factory=list)

    @property
    def required(self) -> bool:
        return self.requirement == "required"


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------


class _SegmentBase(FrozenModel):
    id: str
    label: str
    business_purpose: str = ""
    impact_level: ImpactLevel = "important"


class _FixedSegment(_SegmentBase):
    content: str
    editable: bool = False

    @field_validator("content")
    @classmethod
    def _content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Fixed segments must have content")
        return value


class FoundationSegment(_FixedSegment):
    type: Literal["foundation"] = "foundation"


class BusinessRuleSegment(_FixedSegment):
    type: Literal["business_rule"] = "business_rule"


class ConversationFlowSegment(_FixedSegment):
    type: Literal["conversation_flow"] = "conversation_flow"


class DynamicSegment(_SegmentBase):
    """Segment whose content is supplied by the customer at configuration time."""

    type: Literal["dynamic"] = "dynamic"
    content: Literal[""] = ""
    editable: bool = True
    validation: Optional[ValidationDescriptor] = None
    placeholder: Optional[str] = None
    help_text: Optional[str] = None
    examples: list[str] = Field(default_factory=list)


Segment = Annotated[
    Union[FoundationSegment, DynamicSegment, BusinessRuleSegment, ConversationFlowSegment],
    Field(discriminator="type"),
]

FIXED_SEGMENT_TYPES = ("foundation", "business_rule", "conversation_flow")


# ---------------------------------------------------------------------------
# Platform configuration
# ---------------------------------------------------------------------------


class ModelSettings(FrozenModel):
    provider: Literal["openai", "anthropic", "groq"] = "openai"
    model_name: str = "gpt-4-turbo-preview"
    temperature: float = Field(default=0.3, ge=0, le=2)
    max_tokens: int = Field(default=250, gt=0)
    system_prompt_optimization: Literal["clarity", "brevity", "empathy", "authority"] = "clarity"

    model_config = ConfigDict(frozen=True, extra="forbid", protected_namespaces=())


class VoiceSettings(FrozenModel):
    provider: Literal["elevenlabs", "openai", "azure"] = "elevenlabs"
    voice_id: str
    voice_name: str = ""
    gender: Literal["male", "female", "neutral"] = "neutral"
    age: Literal["young", "middle", "mature"] = "middle"
    accent: Literal["american", "british", "australian", "neutral"] = "american"
    personality: Literal["professional", "friendly", "energetic", "calm"] = "professional"
    speed: float = Field(default=1.0, gt=0)
    stability: float = Field(default=0.75, ge=0, le=1)
    clarity: float = Field(default=0.8, ge=0, le=1)
    style: float = Field(default=0.0, ge=0, le=1)
    use_speaker_boost: bool = True


class ConversationSettings(FrozenModel):
    first_message: str
    end_call_message: str
    transfer_message: Optional[str] = None
    hold_message: Optional[str] = None
    max_duration_seconds: int = Field(default=600, gt=0)
    silence_timeout_seconds: int = Field(default=30, gt=0)
    response_delay_seconds: float = Field(default=0.5, ge=0)
    num_words_to_interrupt_assistant: int = Field(default=3, ge=0)
    allow_interruptions: bool = True
    recording_enabled: bool = True
    transcription_enabled: bool = True


class CallSignal(BaseModel):
    """Observed state of a live call used to evaluate escalation triggers."""

    utterance: str = ""
    sentiment: Optional[float] = Field(default=None, ge=-1, le=1)
    elapsed_seconds: int = Field(default=0, ge=0)


EscalationAction = Literal["transfer_to_human", "schedule_callback", "collect_contact", "end_call"]
EscalationPriority = Literal["immediate", "high", "normal"]


class _TriggerBase(FrozenModel, ABC):
    action: EscalationAction
    message: str
    priority: EscalationPriority = "normal"

    @abstractmethod
    def evaluate(self, signal: CallSignal) -> bool:
        """Return True when the trigger fires for the signal."""


class KeywordTrigger(_TriggerBase):
    """Fires when the caller says any of the keywords."""

    type: Literal["keyword"] = "keyword"
    keywords: list[str] = Field(min_length=1)

    def evaluate(self, signal: CallSignal) -> bool:
        text = signal.utterance.lower()
        return any(
            re.search(rf"\b{re.escape(keyword.lower())}\b", text) for keyword in self.keywords
        )


class SentimentTrigger(_TriggerBase):
    """Fires when caller sentiment drops to or below the threshold."""

    type: Literal["sentiment"] = "sentiment"
    threshold: float = Field(ge=-1, le=1)

    def evaluate(self, signal: CallSignal) -> bool:
        return signal.sentiment is not None and signal.sentiment <= self.threshold


class DurationTrigger(_TriggerBase):
    """Fires once the call has lasted at least max_seconds."""

    type: Literal["duration"] = "duration"
    max_seconds: int = Field(gt=0)

    def evaluate(self, signal: CallSignal) -> bool:
        return signal.elapsed_seconds >= self.max_seconds


EscalationTrigger = Annotated[
    Union[KeywordTrigger, SentimentTrigger, DurationTrigger], Field(discriminator="type")
]


class DataCollectionRule(FrozenModel):
    field_name: str
    required: bool = True
    validation_pattern: Optional[str] = None
    collection_prompt: str
    confirmation_prompt: Optional[str] = None
    max_attempts: int = Field(default=2, gt=0)


class ComplianceRule(FrozenModel):
    type: Literal["gdpr", "hipaa", "tcpa", "custom"]
    requirement: str
    enforcement: Literal["strict", "flexible"] = "strict"
    disclaimer_text: Optional[str] = None


class BusinessRules(FrozenModel):
    escalation_triggers: list[EscalationTrigger] = Field(default_factory=list)
    data_collection: list[DataCollectionRule] = Field(default_factory=list)
    compliance: list[ComplianceRule] = Field(default_factory=list)

    def triggered_escalations(self, signal: CallSignal) -> list[EscalationTrigger]:
        """Return triggers that fire for the signal, most urgent first."""
        order = {"immediate": 0, "high": 1, "normal": 2}
        fired = [trigger for trigger in self.escalation_triggers if trigger.evaluate(signal)]
        return sorted(fired, key=lambda trigger: order[trigger.priority])


class WebhookEvent(str, Enum):
    CALL_START = "call_start"
    CALL_END = "call_end"
    TRANSFER_INITIATED = "transfer_initiated"
    DATA_COLLECTED = "data_collected"
    ESCALATION_TRIGGERED = "escalation_triggered"


class RetryPolicy(FrozenModel):
    max_retries: int = 3
    backoff_strategy: Literal["linear", "exponential"] = "exponential"


class WebhookSettings(FrozenModel):
    url: str
    events: list[WebhookEvent] = Field(default_factory=list)
    retry_policy: RetryPolicy = Field(default_factory=RetryPolicy)


class PlatformConfiguration(FrozenModel):
    """Default voice platform configuration carried by a template."""

    model: ModelSettings = Field(default_factory=ModelSettings)
    voice: VoiceSettings
    conversation: ConversationSettings
    business_rules: BusinessRules = Field(default_factory=BusinessRules)
    webhook: Optional[WebhookSettings] = None


# ---------------------------------------------------------------------------
# Performance, UX, metadata, documentation
# ---------------------------------------------------------------------------


class KPIConfiguration(FrozenModel):
    primary_metric: str
    secondary_metrics: list[str] = Field(default_factory=list)
    benchmark_targets: dict[str, float] = Field(default_factory=dict)


class AnalyticsSettings(FrozenModel):
    track_conversation_flow: bool = True
    track_sentiment_changes: bool = False
    track_objective_completion: bool = True
    generate_insights: bool = True


class PerformanceConfiguration(FrozenModel):
    kpis: KPIConfiguration
    analytics: AnalyticsSettings = Field(default_factory=AnalyticsSettings)


class UserExperience(FrozenModel):
    estimated_setup_time: int = 10  # minutes
    required_skills: list[str] = Field(default_factory=list)
    difficulty: Literal["beginner", "intermediate", "expert"] = "intermediate"
    prerequisites: list[str] = Field(default_factory=list)


class TemplateMetadata(FrozenModel):
    created_at: str
    updated_at: str
    created_by: str
    tags: list[str] = Field(default_factory=list)
    parent_template_id: Optional[str] = None


class SuccessStory(FrozenModel):
    company: str
    industry: str
    challenge: str
    solution: str
    results: str
    metrics: dict[str, float] = Field(default_factory=dict)


class Documentation(FrozenModel):
    description: str = ""
    detailed_instructions: str = ""
    best_practices: list[str] = Field(default_factory=list)
    common_pitfalls: list[str] = Field(default_factory=list)
    success_stories: list[SuccessStory] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Template
# ---------------------------------------------------------------------------


class Template(FrozenModel):
    """Reusable, versioned definition of a conversational agent."""

    id: str
    name: str
    version: str = Field(pattern=r"^\d+\.\d+\.\d+$")
    status: TemplateStatus = TemplateStatus.DRAFT
    category: TemplateCategory
    industries: list[Industry] = Field(default_factory=list)
    complexity: TemplateComplexity = TemplateComplexity.BASIC
    use_case: Optional[UseCase] = None
    business_objectives: list[BusinessObjective] = Field(default_factory=list)
    segments: list[Segment]
    platform: PlatformConfiguration
    performance: Optional[PerformanceConfiguration] = None
    user_experience: UserExperience = Field(default_factory=UserExperience)
    metadata: TemplateMetadata
    documentation: Documentation = Field(default_factory=Documentation)

    @field_validator("segments")
    @classmethod
    def _unique_segment_ids(cls, segments: list) -> list:
        seen: set[str] = set()
        for segment in segments:
            if segment.id in seen:
                raise ValueError(f"Duplicate segment id: {segment.id}")
            seen.add(segment.id)
        return segments

    @property
    def dynamic_segments(self) -> list[DynamicSegment]:
        return [segment for segment in self.segments if segment.type == "dynamic"]

    def get_segment(self, segment_id: str):
        """Return the segment with the given id, or None."""
        for segment in self.segments:
            if segment.id == segment_id:
                return segment
        return None
