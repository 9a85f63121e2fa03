"""Tests for the HTTP API."""

from voice_matrix.api.deps import get_client_factory, get_settings
from voice_matrix.domain.errors import DeploymentFailed
from voice_matrix.main import app
from voice_matrix.settings import Settings

TEMPLATE_ID = "appointment-booking-specialist-v1"


def _payload(values, **kwargs):
    return {"name": "Front Desk", "template_id": TEMPLATE_ID, "dynamic_segments": values, **kwargs}


class TestTemplateRoutes:
    """Test cases for the template routes."""

    async def test_list_templates(self, client):
        response = await client.get("/api/v1/templates")

        assert response.status_code == 200
        assert len(response.json()) == 5

    async def test_list_templates_filtered(self, client):
        response = await client.get(
            "/api/v1/templates", params={"industry": "healthcare", "complexity": "advanced"}
        )

        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == [
            "customer-support-triage-v1",
            "sales-discovery-agent-v1",
        ]

    async def test_get_template(self, client):
        response = await client.get(f"/api/v1/templates/{TEMPLATE_ID}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == TEMPLATE_ID
        assert [s["id"] for s in data["segments"]][0] == "booking-introduction"

    async def test_unknown_template_is_404(self, client):
        response = await client.get("/api/v1/templates/nope")

        assert response.status_code == 404
        assert response.json()["detail"] == "Template nope not found"

    async def test_quality_report(self, client):
        response = await client.get(f"/api/v1/templates/{TEMPLATE_ID}/quality")

        assert response.status_code == 200
        assert response.json()["is_valid"] is True

    async def test_validate_values(self, client):
        response = await client.post(
            f"/api/v1/templates/{TEMPLATE_ID}/validate",
            json={"values": {"business-name-services": "Acme"}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is False
        assert {v["segment_id"] for v in data["violations"]} == {
            "business-name-services",
            "available-services",
            "business-hours-availability",
            "booking-requirements",
        }

    async def test_preview_shows_placeholders(self, client):
        response = await client.post(f"/api/v1/templates/{TEMPLATE_ID}/preview", json={"values": {}})

        assert response.status_code == 200
        assert "[Business Name & Services]" in response.json()["prompt"]


class TestAssistantRoutes:
    """Test cases for the assistant routes."""

    async def test_requires_authentication(self, client, appointment_values):
        response = await client.post("/api/v1/assistants", json=_payload(appointment_values))

        assert response.status_code in (401, 403)

    async def test_invalid_token_rejected(self, client):
        response = await client.get(
            "/api/v1/assistants", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401

    async def test_blank_business_name_is_rejected(self, client, auth_headers, appointment_values):
        values = {**appointment_values, "business-name-services": ""}

        response = await client.post(
            "/api/v1/assistants", json=_payload(values), headers=auth_headers
        )

        assert response.status_code == 422
        violations = response.json()["violations"]
        assert [(v["segment_id"], v["rule"]) for v in violations] == [
            ("business-name-services", "required")
        ]

    async def test_create_assistant(self, client, auth_headers, appointment_values):
        response = await client.post(
            "/api/v1/assistants", json=_payload(appointment_values), headers=auth_headers
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "assembled"
        assert "Premier Dental Care - cleanings and exams" in data["assembled_prompt"]
        assert "[" not in data["assembled_prompt"]
        assert data["configuration"]["template_id"] == TEMPLATE_ID
        assert response.headers["X-Request-Id"]

    async def test_request_id_is_echoed(self, client):
        response = await client.get("/health", headers={"X-Request-Id": "req-42"})

        assert response.status_code == 200
        assert response.headers["X-Request-Id"] == "req-42"

    async def test_assistant_lifecycle(self, client, auth_headers, appointment_values, fake_client):
        created = await client.post(
            "/api/v1/assistants", json=_payload(appointment_values), headers=auth_headers
        )
        assistant_id = created.json()["id"]

        listed = await client.get("/api/v1/assistants", headers=auth_headers)
        assert [a["id"] for a in listed.json()] == [assistant_id]

        updated = await client.put(
            f"/api/v1/assistants/{assistant_id}",
            json=_payload(appointment_values, name="Front Desk v2"),
            headers=auth_headers,
        )
        assert updated.status_code == 200
        assert updated.json()["name"] == "Front Desk v2"

        deployed = await client.post(
            f"/api/v1/assistants/{assistant_id}/deploy", headers=auth_headers
        )
        assert deployed.status_code == 200
        assert deployed.json()["status"] == "deployed"
        assert deployed.json()["remote_id"] == "remote-1"

        only_deployed = await client.get(
            "/api/v1/assistants", params={"status": "deployed"}, headers=auth_headers
        )
        assert [a["id"] for a in only_deployed.json()] == [assistant_id]

        deleted = await client.delete(f"/api/v1/assistants/{assistant_id}", headers=auth_headers)
        assert deleted.status_code == 204
        assert fake_client.deleted == ["remote-1"]

        missing = await client.get(f"/api/v1/assistants/{assistant_id}", headers=auth_headers)
        assert missing.status_code == 404

    async def test_deploy_failure_is_502(self, client, auth_headers, appointment_values, fake_client):
        created = await client.post(
            "/api/v1/assistants", json=_payload(appointment_values), headers=auth_headers
        )
        fake_client.fail_with = DeploymentFailed("Vapi API error 401: invalid key", status_code=401)

        response = await client.post(
            f"/api/v1/assistants/{created.json()['id']}/deploy", headers=auth_headers
        )

        assert response.status_code == 502
        assert response.json() == {"detail": "Vapi API error 401: invalid key"}

    async def test_deploy_unknown_assistant_is_404_without_platform_key(self, client, auth_headers):
        app.dependency_overrides.pop(get_client_factory)
        app.dependency_overrides[get_settings] = lambda: Settings(vapi_api_key=None)

        response = await client.post("/api/v1/assistants/missing/deploy", headers=auth_headers)

        assert response.status_code == 404
