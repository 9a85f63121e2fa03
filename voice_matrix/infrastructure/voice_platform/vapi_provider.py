"""Vapi voice platform deployment client."""

import logging
from typing import Any

import httpx

from voice_matrix.domain.assistants.builder import DeployableConfiguration, to_platform_payload
from voice_matrix.domain.errors import DeploymentFailed
from voice_matrix.infrastructure.voice_platform.base import (
    DeploymentClientProtocol,
    DeploymentResult,
)

logger = logging.getLogger(__name__)

VAPI_API_BASE = "https://api.vapi.ai"


def _error_reason(response: httpx.Response) -> str:
    """Extract the platform's error message from a failed response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    message: Any = None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
    if isinstance(message, list):
        message = "; ".join(str(m) for m in message)
    if not message:
        message = response.text or response.reason_phrase
    return f"Vapi API error {response.status_code}: {message}"


class VapiDeploymentClient(DeploymentClientProtocol):
    """Deploys assistant configurations to Vapi."""

    provider = "vapi"

    def __init__(
        self,
        api_key: str,
        base_url: str = VAPI_API_BASE,
        phone_number_id: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Vapi client.

        Args:
            api_key: Vapi private API key
            base_url: Vapi API base URL
            phone_number_id: Vapi phone number to attach deployed assistants to
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url
        self.phone_number_id = phone_number_id
        self.timeout = timeout

    def _get_client(self) -> httpx.AsyncClient:
        """Create HTTP client with auth headers."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            timeout=self.timeout,
        )

    async def _request(
        self,
        client: httpx.AsyncClient,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        try:
            response = await client.request(method, path, json=payload)
        except httpx.HTTPError as e:
            logger.warning(
                "Vapi request failed",
                extra={"method": method, "path": path, "error": str(e)},
            )
            raise DeploymentFailed(f"Vapi request failed: {e}") from e

        if response.is_error:
            reason = _error_reason(response)
            logger.warning(
                "Vapi rejected request",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            raise DeploymentFailed(reason, status_code=response.status_code)

        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as e:
            logger.warning(
                "Vapi returned a non-JSON response",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            raise DeploymentFailed(
                "Vapi returned a non-JSON response", status_code=response.status_code
            ) from e
        if not isinstance(data, dict):
            raise DeploymentFailed(
                "Vapi returned an unexpected response body", status_code=response.status_code
            )
        return data

    async def _attach_phone_number(
        self, client: httpx.AsyncClient, remote_id: str
    ) -> str | None:
        if not self.phone_number_id:
            return None
        data = await self._request(
            client,
            "PATCH",
            f"/phone-number/{self.phone_number_id}",
            {"assistantId": remote_id},
        )
        return data.get("number")

    async def deploy(self, configuration: DeployableConfiguration) -> DeploymentResult:
        """Create the assistant on Vapi and attach the configured phone number.

        Raises:
            DeploymentFailed: If any call fails. When the assistant was created
                but attaching the phone number failed, the error carries the new
                ``remote_id`` so a retry can update it instead of creating another.
        """
        async with self._get_client() as client:
            data = await self._request(
                client, "POST", "/assistant", to_platform_payload(configuration)
            )
            remote_id = data.get("id")
            if not remote_id:
                raise DeploymentFailed("Vapi response did not include an assistant id")
            try:
                phone_number = await self._attach_phone_number(client, remote_id)
            except DeploymentFailed as e:
                raise DeploymentFailed(
                    e.reason, status_code=e.status_code, remote_id=remote_id
                ) from e

        logger.info(
            "Deployed assistant to Vapi",
            extra={"remote_id": remote_id, "template_id": configuration.template_id},
        )
        return DeploymentResult(
            remote_id=remote_id,
            provider=self.provider,
            assigned_phone_number=phone_number,
            raw_response=data,
        )

    async def update(
        self,
        remote_id: str,
        configuration: DeployableConfiguration,
    ) -> DeploymentResult:
        """Patch an existing Vapi assistant with the new configuration."""
        async with self._get_client() as client:
            data = await self._request(
                client, "PATCH", f"/assistant/{remote_id}", to_platform_payload(configuration)
            )
            phone_number = await self._attach_phone_number(client, remote_id)

        logger.info("Updated Vapi assistant", extra={"remote_id": remote_id})
        return DeploymentResult(
            remote_id=data.get("id", remote_id),
            provider=self.provider,
            assigned_phone_number=phone_number,
            raw_response=data,
        )

    async def delete(self, remote_id: str) -> None:
        """Delete a Vapi assistant."""
        async with self._get_client() as client:
            await self._request(client, "DELETE", f"/assistant/{remote_id}")
        logger.info("Deleted Vapi assistant", extra={"remote_id": remote_id})
