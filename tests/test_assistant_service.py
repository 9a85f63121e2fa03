"""Tests for the assistant service."""

import pytest

from voice_matrix.domain.assistants.builder import AssistantDraft
from voice_matrix.domain.errors import (
    AssistantNotFound,
    DeploymentFailed,
    TemplateNotFound,
    ValidationFailed,
)
from voice_matrix.domain.services.assistant_service import AssistantService
from voice_matrix.persistence.models.assistant import STATUS_ASSEMBLED, STATUS_DEPLOYED

TEMPLATE_ID = "appointment-booking-specialist-v1"


@pytest.fixture
def service(db_session):
    return AssistantService(db_session)


@pytest.fixture
def draft(appointment_values):
    return AssistantDraft(
        name="Front Desk",
        template_id=TEMPLATE_ID,
        dynamic_segments=appointment_values,
        voice_settings={"speed": 1.1},
    )


class TestAssistantService:
    """Test cases for AssistantService."""

    async def test_create_stores_assembled_record(self, service, draft):
        record = await service.create("user-1", draft)

        assert record.id
        assert record.user_id == "user-1"
        assert record.status == STATUS_ASSEMBLED
        assert record.template_version == "1.0.0"
        assert record.voice_settings == {"speed": 1.1}
        assert "Premier Dental Care" in record.assembled_prompt
        assert record.configuration["voice_settings"]["speed"] == 1.1

    async def test_create_rejects_invalid_values(self, service, draft):
        bad = draft.model_copy(
            update={"dynamic_segments": {**draft.dynamic_segments, "business-name-services": ""}}
        )

        with pytest.raises(ValidationFailed):
            await service.create("user-1", bad)

        assert await service.list("user-1") == []

    async def test_create_unknown_template(self, service, draft):
        with pytest.raises(TemplateNotFound):
            await service.create("user-1", draft.model_copy(update={"template_id": "missing"}))

    async def test_records_are_user_scoped(self, service, draft):
        record = await service.create("user-1", draft)

        with pytest.raises(AssistantNotFound):
            await service.get("user-2", record.id)
        assert await service.list("user-2") == []

    async def test_deploy_sets_remote_id_and_phone(self, service, draft, fake_client):
        record = await service.create("user-1", draft)

        deployed = await service.deploy("user-1", record.id, lambda: fake_client)

        assert deployed.status == STATUS_DEPLOYED
        assert deployed.remote_id == "remote-1"
        assert deployed.phone_number == "+15555550100"
        assert fake_client.deployed[0].assembled_prompt == record.assembled_prompt
        assert [r.id for r in await service.list("user-1", status=STATUS_DEPLOYED)] == [record.id]

    async def test_redeploy_updates_in_place(self, service, draft, fake_client):
        record = await service.create("user-1", draft)
        await service.deploy("user-1", record.id, lambda: fake_client)

        updated = draft.model_copy(update={"name": "Front Desk v2"})
        record = await service.update("user-1", record.id, updated)
        assert record.status == STATUS_ASSEMBLED
        assert record.remote_id == "remote-1"

        await service.deploy("user-1", record.id, lambda: fake_client)

        assert len(fake_client.deployed) == 1
        assert fake_client.updated[0][0] == "remote-1"
        assert fake_client.updated[0][1].name == "Front Desk v2"

    async def test_failed_deploy_records_error(self, service, draft, fake_client):
        record = await service.create("user-1", draft)
        fake_client.fail_with = DeploymentFailed("Vapi API error 500: boom", status_code=500)

        with pytest.raises(DeploymentFailed):
            await service.deploy("user-1", record.id, lambda: fake_client)

        record = await service.get("user-1", record.id)
        assert record.status == STATUS_ASSEMBLED
        assert record.last_error == "Vapi API error 500: boom"
        assert record.remote_id is None

    async def test_partial_deploy_keeps_remote_id_for_retry(self, service, draft, fake_client):
        record = await service.create("user-1", draft)
        fake_client.fail_with = DeploymentFailed(
            "Vapi API error 400: bad number", status_code=400, remote_id="asst-orphan"
        )

        with pytest.raises(DeploymentFailed):
            await service.deploy("user-1", record.id, lambda: fake_client)

        record = await service.get("user-1", record.id)
        assert record.remote_id == "asst-orphan"
        assert record.status == STATUS_ASSEMBLED
        assert record.last_error == "Vapi API error 400: bad number"

        fake_client.fail_with = None
        deployed = await service.deploy("user-1", record.id, lambda: fake_client)

        assert fake_client.deployed == []
        assert fake_client.updated[0][0] == "asst-orphan"
        assert deployed.status == STATUS_DEPLOYED
        assert deployed.last_error is None

    async def test_deploy_unknown_assistant_builds_no_client(self, service):
        def client_factory():
            raise DeploymentFailed("Voice platform API key is not configured")

        with pytest.raises(AssistantNotFound):
            await service.deploy("user-1", "missing", client_factory)

    async def test_delete_undeployed_needs_no_client(self, service, draft):
        record = await service.create("user-1", draft)

        await service.delete("user-1", record.id)

        with pytest.raises(AssistantNotFound):
            await service.get("user-1", record.id)

    async def test_delete_deployed_removes_remote(self, service, draft, fake_client):
        record = await service.create("user-1", draft)
        await service.deploy("user-1", record.id, lambda: fake_client)

        await service.delete("user-1", record.id, client_factory=lambda: fake_client)

        assert fake_client.deleted == ["remote-1"]
        assert await service.list("user-1") == []

    async def test_failed_remote_delete_keeps_record(self, service, draft, fake_client):
        record = await service.create("user-1", draft)
        await service.deploy("user-1", record.id, lambda: fake_client)
        fake_client.fail_with = DeploymentFailed("Vapi API error 404: not found", status_code=404)

        with pytest.raises(DeploymentFailed):
            await service.delete("user-1", record.id, client_factory=lambda: fake_client)

        assert (await service.get("user-1", record.id)).remote_id == "remote-1"
