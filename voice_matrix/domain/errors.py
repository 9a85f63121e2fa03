"""Domain exceptions for template assembly and assistant deployment."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from voice_matrix.domain.prompts.validator import Violation


class VoiceMatrixError(Exception):
    """Base class for domain errors."""


class ValidationFailed(VoiceMatrixError):
    """One or more blocking validation rules were violated.

    Carries every blocking violation across all segments so the caller can
    correct all values in one pass.
    """

    def __init__(self, violations: list["Violation"]) -> None:
        self.violations = list(violations)
        segment_ids = sorted({v.segment_id for v in self.violations})
        super().__init__(f"Validation failed for segments: {', '.join(segment_ids)}")


class TemplateNotFound(VoiceMatrixError):
    """Referenced template id does not exist in the catalog."""

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"Template {template_id} not found")


class AssistantNotFound(VoiceMatrixError):
    """Assistant configuration does not exist or belongs to another user."""

    def __init__(self, assistant_id: str) -> None:
        self.assistant_id = assistant_id
        super().__init__(f"Assistant {assistant_id} not found")


class DeploymentFailed(VoiceMatrixError):
    """The voice platform rejected or failed a deployment call."""

    def __init__(
        self,
        reason: str,
        status_code: int | None = None,
        remote_id: str | None = None,
    ) -> None:
        self.reason = reason
        self.status_code = status_code
        # Set when the remote assistant was created before the failure
        self.remote_id = remote_id
        super().__init__(reason)
