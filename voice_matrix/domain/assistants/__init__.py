"""Assistant configuration building."""

from voice_matrix.domain.assistants.builder import (
    AssistantConfigurationBuilder,
    AssistantDraft,
    DeployableConfiguration,
    to_platform_payload,
)

__all__ = [
    "AssistantConfigurationBuilder",
    "AssistantDraft",
    "DeployableConfiguration",
    "to_platform_payload",
]
