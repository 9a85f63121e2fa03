"""Voice platform client factory."""

import logging

from voice_matrix.domain.errors import DeploymentFailed
from voice_matrix.infrastructure.voice_platform.base import DeploymentClientProtocol
from voice_matrix.infrastructure.voice_platform.vapi_provider import VapiDeploymentClient
from voice_matrix.settings import Settings

logger = logging.getLogger(__name__)


def get_deployment_client(settings: Settings) -> DeploymentClientProtocol:
    """Build a deployment client from explicit settings.

    Args:
        settings: Settings carrying the Vapi credentials

    Returns:
        Configured deployment client

    Raises:
        DeploymentFailed: If no Vapi API key is configured
    """
    if not settings.vapi_api_key:
        logger.warning("Deployment requested but VAPI_API_KEY is not configured")
        raise DeploymentFailed("Voice platform API key is not configured")

    return VapiDeploymentClient(
        api_key=settings.vapi_api_key,
        base_url=settings.vapi_base_url,
        phone_number_id=settings.vapi_phone_number_id,
        timeout=settings.vapi_timeout_seconds,
    )
