"""Builds deployable assistant configurations from a template and a draft."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from voice_matrix.domain.prompts.assembler import PromptAssembler
from voice_matrix.domain.prompts.validator import Violation
from voice_matrix.domain.templates.schemas import (
    BusinessRules,
    ConversationSettings,
    ModelSettings,
    Template,
    VoiceSettings,
    WebhookSettings,
)


class VoiceSettingsOverride(BaseModel):
    """Caller overrides for the template voice. Unset fields keep the default."""

    provider: Optional[Literal["elevenlabs", "openai", "azure"]] = None
    voice_id: Optional[str] = None
    voice_name: Optional[str] = None
    gender: Optional[Literal["male", "female", "neutral"]] = None
    age: Optional[Literal["young", "middle", "mature"]] = None
    accent: Optional[Literal["american", "british", "australian", "neutral"]] = None
    personality: Optional[Literal["professional", "friendly", "energetic", "calm"]] = None
    speed: Optional[float] = Field(default=None, gt=0)
    stability: Optional[float] = Field(default=None, ge=0, le=1)
    clarity: Optional[float] = Field(default=None, ge=0, le=1)
    style: Optional[float] = Field(default=None, ge=0, le=1)
    use_speaker_boost: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")


class ConversationSettingsOverride(BaseModel):
    """Caller overrides for the template conversation settings."""

    first_message: Optional[str] = None
    end_call_message: Optional[str] = None
    transfer_message: Optional[str] = None
    hold_message: Optional[str] = None
    max_duration_seconds: Optional[int] = Field(default=None, gt=0)
    silence_timeout_seconds: Optional[int] = Field(default=None, gt=0)
    response_delay_seconds: Optional[float] = Field(default=None, ge=0)
    num_words_to_interrupt_assistant: Optional[int] = Field(default=None, ge=0)
    allow_interruptions: Optional[bool] = None
    recording_enabled: Optional[bool] = None
    transcription_enabled: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")


class AssistantDraft(BaseModel):
    """What a user supplies to configure an assistant from a template."""

    name: str = Field(min_length=1, max_length=200)
    template_id: str
    dynamic_segments: dict[str, str] = Field(default_factory=dict)
    voice_settings: VoiceSettingsOverride = Field(default_factory=VoiceSettingsOverride)
    conversation_settings: ConversationSettingsOverride = Field(
        default_factory=ConversationSettingsOverride
    )


class DeployableConfiguration(BaseModel):
    """Fully resolved assistant configuration ready to send to the platform."""

    name: str
    template_id: str
    template_version: str
    assembled_prompt: str
    model: ModelSettings
    voice_settings: VoiceSettings
    conversation_settings: ConversationSettings
    business_rules: BusinessRules
    webhook: Optional[WebhookSettings] = None
    advisories: list[Violation] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, protected_namespaces=())


def _merge(default: BaseModel, override: BaseModel) -> dict[str, Any]:
    """Overlay the fields explicitly set to a value in override onto default."""
    merged = default.model_dump()
    for key, value in override.model_dump(exclude_none=True).items():
        merged[key] = value
    return merged


class AssistantConfigurationBuilder:
    """Turns a draft plus its template into a DeployableConfiguration.

    Building is pure: the same draft and template always produce the same
    configuration. Placeholder tokens such as ``{business_name}`` in the
    conversation messages are runtime variables and are left untouched.
    """

    def __init__(self, assembler: PromptAssembler | None = None):
        self.assembler = assembler or PromptAssembler()

    def build(self, draft: AssistantDraft, template: Template) -> DeployableConfiguration:
        """Validate the draft values and build the configuration.

        Raises:
            ValidationFailed: If any dynamic segment value has a blocking violation
        """
        if draft.template_id != template.id:
            raise ValueError(
                f"Draft references template {draft.template_id}, got {template.id}"
            )

        result = self.assembler.assemble(template, draft.dynamic_segments)
        platform = template.platform

        return DeployableConfiguration(
            name=draft.name,
            template_id=template.id,
            template_version=template.version,
            assembled_prompt=result.prompt,
            model=platform.model,
            voice_settings=VoiceSettings.model_validate(
                _merge(platform.voice, draft.voice_settings)
            ),
            conversation_settings=ConversationSettings.model_validate(
                _merge(platform.conversation, draft.conversation_settings)
            ),
            business_rules=platform.business_rules,
            webhook=platform.webhook,
            advisories=result.advisories,
        )


def to_platform_payload(config: DeployableConfiguration) -> dict[str, Any]:
    """Map a configuration onto the Vapi assistant request body."""
    voice = config.voice_settings
    conversation = config.conversation_settings
    payload: dict[str, Any] = {
        "name": config.name,
        "model": {
            "provider": config.model.provider,
            "model": config.model.model_name,
            "temperature": config.model.temperature,
            "maxTokens": config.model.max_tokens,
            "messages": [{"role": "system", "content": config.assembled_prompt}],
        },
        "voice": {
            "provider": "11labs" if voice.provider == "elevenlabs" else voice.provider,
            "voiceId": voice.voice_id,
            "speed": voice.speed,
            "stability": voice.stability,
            "similarityBoost": voice.clarity,
            "style": voice.style,
            "useSpeakerBoost": voice.use_speaker_boost,
        },
        "firstMessage": conversation.first_message,
        "endCallMessage": conversation.end_call_message,
        "maxDurationSeconds": conversation.max_duration_seconds,
        "silenceTimeoutSeconds": conversation.silence_timeout_seconds,
        "responseDelaySeconds": conversation.response_delay_seconds,
        "numWordsToInterruptAssistant": conversation.num_words_to_interrupt_assistant,
        "recordingEnabled": conversation.recording_enabled,
        "metadata": {
            "templateId": config.template_id,
            "templateVersion": config.template_version,
        },
    }
    if config.webhook is not None:
        payload["serverUrl"] = config.webhook.url
    return payload
