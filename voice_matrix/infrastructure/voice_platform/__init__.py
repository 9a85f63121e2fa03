"""Voice platform deployment clients."""

from voice_matrix.infrastructure.voice_platform.base import (
    DeploymentClientProtocol,
    DeploymentResult,
)
from voice_matrix.infrastructure.voice_platform.factory import get_deployment_client
from voice_matrix.infrastructure.voice_platform.vapi_provider import VapiDeploymentClient

__all__ = [
    "DeploymentClientProtocol",
    "DeploymentResult",
    "VapiDeploymentClient",
    "get_deployment_client",
]
