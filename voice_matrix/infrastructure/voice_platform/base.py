"""Base voice platform deployment interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from voice_matrix.domain.assistants.builder import DeployableConfiguration


@dataclass
class DeploymentResult:
    """Result of creating or updating a remote assistant."""

    remote_id: str
    provider: str
    assigned_phone_number: str | None = None
    raw_response: dict | None = None


class DeploymentClientProtocol(ABC):
    """Protocol for voice platform deployment clients."""

    @abstractmethod
    async def deploy(self, configuration: "DeployableConfiguration") -> DeploymentResult:
        """Create a remote assistant from a configuration.

        Args:
            configuration: Fully built assistant configuration

        Returns:
            DeploymentResult with the remote assistant id

        Raises:
            DeploymentFailed: If the platform rejects the request
        """
        pass

    @abstractmethod
    async def update(
        self,
        remote_id: str,
        configuration: "DeployableConfiguration",
    ) -> DeploymentResult:
        """Replace the configuration of an existing remote assistant.

        Args:
            remote_id: Platform assistant id returned by deploy
            configuration: Fully built assistant configuration

        Returns:
            DeploymentResult for the updated assistant
        """
        pass

    @abstractmethod
    async def delete(self, remote_id: str) -> None:
        """Delete a remote assistant.

        Args:
            remote_id: Platform assistant id
        """
        pass
