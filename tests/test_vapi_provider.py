"""Tests for the Vapi deployment client."""

import json
from unittest.mock import patch

import httpx
import pytest

from voice_matrix.domain.assistants.builder import AssistantConfigurationBuilder, AssistantDraft
from voice_matrix.domain.errors import DeploymentFailed
from voice_matrix.domain.templates.library import APPOINTMENT_BOOKING_TEMPLATE
from voice_matrix.infrastructure.voice_platform.factory import get_deployment_client
from voice_matrix.infrastructure.voice_platform.vapi_provider import VapiDeploymentClient
from voice_matrix.settings import Settings


@pytest.fixture
def configuration(appointment_values):
    draft = AssistantDraft(
        name="Front Desk",
        template_id=APPOINTMENT_BOOKING_TEMPLATE.id,
        dynamic_segments=appointment_values,
    )
    return AssistantConfigurationBuilder().build(draft, APPOINTMENT_BOOKING_TEMPLATE)


def _client_with(handler, **kwargs):
    """Build a Vapi client whose HTTP calls go to handler."""
    client = VapiDeploymentClient(api_key="test-key", base_url="https://vapi.test", **kwargs)

    def mock_get_client():
        return httpx.AsyncClient(
            base_url=client.base_url,
            headers={"Authorization": f"Bearer {client.api_key}"},
            transport=httpx.MockTransport(handler),
        )

    return client, patch.object(client, "_get_client", side_effect=mock_get_client)


class TestVapiDeploymentClient:
    """Test cases for VapiDeploymentClient."""

    async def test_deploy_creates_assistant_and_attaches_number(self, configuration):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if request.url.path == "/assistant":
                return httpx.Response(201, json={"id": "asst_123"})
            return httpx.Response(200, json={"id": "pn_1", "number": "+15555550123"})

        client, patcher = _client_with(handler, phone_number_id="pn_1")
        with patcher:
            result = await client.deploy(configuration)

        assert result.remote_id == "asst_123"
        assert result.provider == "vapi"
        assert result.assigned_phone_number == "+15555550123"

        create, attach = requests
        assert create.method == "POST"
        assert create.headers["Authorization"] == "Bearer test-key"
        body = json.loads(create.content)
        assert body["model"]["messages"][0]["content"] == configuration.assembled_prompt
        assert attach.method == "PATCH"
        assert attach.url.path == "/phone-number/pn_1"
        assert json.loads(attach.content) == {"assistantId": "asst_123"}

    async def test_deploy_without_phone_number(self, configuration):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(201, json={"id": "asst_123"})

        client, patcher = _client_with(handler)
        with patcher:
            result = await client.deploy(configuration)

        assert result.assigned_phone_number is None

    async def test_platform_error_raises_deployment_failed(self, configuration):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"message": ["voice.voiceId must be a string"]})

        client, patcher = _client_with(handler)
        with patcher, pytest.raises(DeploymentFailed) as exc_info:
            await client.deploy(configuration)

        assert exc_info.value.status_code == 400
        assert exc_info.value.reason == "Vapi API error 400: voice.voiceId must be a string"

    async def test_transport_error_raises_deployment_failed(self, configuration):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client, patcher = _client_with(handler)
        with patcher, pytest.raises(DeploymentFailed, match="Vapi request failed"):
            await client.deploy(configuration)

    async def test_missing_id_in_response(self, configuration):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(201, json={})

        client, patcher = _client_with(handler)
        with patcher, pytest.raises(DeploymentFailed, match="did not include an assistant id"):
            await client.deploy(configuration)

    async def test_failed_number_attach_reports_created_assistant(self, configuration):
        created = []

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/assistant":
                created.append(f"asst-{len(created)}")
                return httpx.Response(201, json={"id": created[-1]})
            return httpx.Response(400, json={"message": "bad number"})

        client, patcher = _client_with(handler, phone_number_id="pn_1")
        with patcher, pytest.raises(DeploymentFailed) as exc_info:
            await client.deploy(configuration)

        assert created == ["asst-0"]
        assert exc_info.value.remote_id == "asst-0"
        assert exc_info.value.status_code == 400
        assert exc_info.value.reason == "Vapi API error 400: bad number"

    async def test_non_json_success_raises_deployment_failed(self, configuration):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>ok</html>")

        client, patcher = _client_with(handler)
        with patcher, pytest.raises(DeploymentFailed, match="non-JSON response") as exc_info:
            await client.deploy(configuration)

        assert exc_info.value.status_code == 200

    async def test_non_object_json_raises_deployment_failed(self, configuration):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=["asst_123"])

        client, patcher = _client_with(handler)
        with patcher, pytest.raises(DeploymentFailed, match="unexpected response body"):
            await client.deploy(configuration)

    async def test_update_patches_existing_assistant(self, configuration):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"id": "asst_123"})

        client, patcher = _client_with(handler)
        with patcher:
            result = await client.update("asst_123", configuration)

        assert result.remote_id == "asst_123"
        assert [(r.method, r.url.path) for r in requests] == [("PATCH", "/assistant/asst_123")]

    async def test_delete(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(204)

        client, patcher = _client_with(handler)
        with patcher:
            await client.delete("asst_123")

        assert [(r.method, r.url.path) for r in requests] == [("DELETE", "/assistant/asst_123")]


class TestDeploymentClientFactory:
    """Test cases for get_deployment_client."""

    def test_requires_api_key(self):
        with pytest.raises(DeploymentFailed, match="API key is not configured"):
            get_deployment_client(Settings(vapi_api_key=None))

    def test_builds_vapi_client_from_settings(self):
        client = get_deployment_client(
            Settings(
                vapi_api_key="key",
                vapi_base_url="https://vapi.test",
                vapi_phone_number_id="pn_1",
                vapi_timeout_seconds=5,
            )
        )

        assert isinstance(client, VapiDeploymentClient)
        assert client.base_url == "https://vapi.test"
        assert client.phone_number_id == "pn_1"
        assert client.timeout == 5
