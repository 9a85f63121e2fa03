"""Assistant service: build, store and deploy assistant configurations."""

import logging
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from voice_matrix.domain.assistants.builder import (
    AssistantConfigurationBuilder,
    AssistantDraft,
    ConversationSettingsOverride,
    DeployableConfiguration,
    VoiceSettingsOverride,
)
from voice_matrix.domain.errors import AssistantNotFound, DeploymentFailed
from voice_matrix.domain.templates.catalog import TemplateCatalog, get_catalog
from voice_matrix.infrastructure.voice_platform.base import DeploymentClientProtocol
from voice_matrix.persistence.models.assistant import (
    STATUS_ASSEMBLED,
    STATUS_DEPLOYED,
    AssistantConfigurationRecord,
)
from voice_matrix.persistence.repositories.assistant_repository import AssistantRepository

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], DeploymentClientProtocol]


def draft_from_record(record: AssistantConfigurationRecord) -> AssistantDraft:
    """Rebuild the user's draft from a stored record."""
    return AssistantDraft(
        name=record.name,
        template_id=record.template_id,
        dynamic_segments=dict(record.dynamic_segments or {}),
        voice_settings=VoiceSettingsOverride.model_validate(record.voice_settings or {}),
        conversation_settings=ConversationSettingsOverride.model_validate(
            record.conversation_settings or {}
        ),
    )


class AssistantService:
    """Service orchestrating catalog, builder, storage and deployment."""

    def __init__(
        self,
        session: AsyncSession,
        catalog: TemplateCatalog | None = None,
        builder: AssistantConfigurationBuilder | None = None,
    ) -> None:
        """Initialize assistant service."""
        self.session = session
        self.catalog = catalog or get_catalog()
        self.builder = builder or AssistantConfigurationBuilder()
        self.repo = AssistantRepository(session)

    def _build(self, draft: AssistantDraft) -> DeployableConfiguration:
        template = self.catalog.get(draft.template_id)
        return self.builder.build(draft, template)

    @staticmethod
    def _record_fields(draft: AssistantDraft, config: DeployableConfiguration) -> dict:
        return {
            "name": draft.name,
            "template_id": config.template_id,
            "template_version": config.template_version,
            "dynamic_segments": dict(draft.dynamic_segments),
            "voice_settings": draft.voice_settings.model_dump(exclude_none=True),
            "conversation_settings": draft.conversation_settings.model_dump(exclude_none=True),
            "assembled_prompt": config.assembled_prompt,
            "configuration": config.model_dump(mode="json"),
        }

    async def _get_owned(self, user_id: str, assistant_id: str) -> AssistantConfigurationRecord:
        record = await self.repo.get_by_id(user_id, assistant_id)
        if record is None:
            raise AssistantNotFound(assistant_id)
        return record

    async def create(self, user_id: str, draft: AssistantDraft) -> AssistantConfigurationRecord:
        """Build and store a new assistant configuration.

        Args:
            user_id: Owner of the assistant
            draft: Template reference and customizations

        Returns:
            Stored record with status ``assembled``

        Raises:
            TemplateNotFound: If the draft references an unknown template
            ValidationFailed: If the segment values fail validation
        """
        config = self._build(draft)
        record = await self.repo.create(
            user_id,
            status=STATUS_ASSEMBLED,
            **self._record_fields(draft, config),
        )
        logger.info(
            "Assistant created",
            extra={"assistant_id": record.id, "template_id": record.template_id},
        )
        return record

    async def update(
        self, user_id: str, assistant_id: str, draft: AssistantDraft
    ) -> AssistantConfigurationRecord:
        """Replace an assistant's draft and rebuild its configuration.

        The record returns to ``assembled``; a remote id is kept so the next
        deploy updates the remote assistant in place.
        """
        record = await self._get_owned(user_id, assistant_id)
        config = self._build(draft)
        for key, value in self._record_fields(draft, config).items():
            setattr(record, key, value)
        record.status = STATUS_ASSEMBLED
        record.last_error = None
        record = await self.repo.save(record)
        logger.info("Assistant updated", extra={"assistant_id": record.id})
        return record

    async def get(self, user_id: str, assistant_id: str) -> AssistantConfigurationRecord:
        """Get one of the user's assistants."""
        return await self._get_owned(user_id, assistant_id)

    async def list(
        self,
        user_id: str,
        skip: int = 0,
        limit: int = 100,
        status: str | None = None,
    ) -> list[AssistantConfigurationRecord]:
        """List the user's assistants, newest first, optionally by status."""
        if status is not None:
            return await self.repo.list_by_status(user_id, status, skip=skip, limit=limit)
        return await self.repo.list(user_id, skip=skip, limit=limit)

    async def deploy(
        self,
        user_id: str,
        assistant_id: str,
        client_factory: ClientFactory,
    ) -> AssistantConfigurationRecord:
        """Deploy an assistant to the voice platform.

        The configuration is rebuilt from the stored draft before any remote
        call. An assistant that already has a remote id is updated in place.

        Args:
            user_id: Owner of the assistant
            assistant_id: Assistant to deploy
            client_factory: Builds the deployment client once the assistant
                has been found and rebuilt

        Raises:
            AssistantNotFound: If the user has no such assistant
            ValidationFailed: If the stored draft no longer validates
            DeploymentFailed: If the platform call fails; the error is stored
                on the record as ``last_error``
        """
        record = await self._get_owned(user_id, assistant_id)
        config = self._build(draft_from_record(record))
        client = client_factory()

        try:
            if record.remote_id:
                result = await client.update(record.remote_id, config)
            else:
                result = await client.deploy(config)
        except DeploymentFailed as e:
            logger.warning(
                "Assistant deployment failed",
                extra={"assistant_id": record.id, "reason": e.reason, "remote_id": e.remote_id},
            )
            # Keep a remote assistant created before the failure so a retry updates it
            if e.remote_id and not record.remote_id:
                record.remote_id = e.remote_id
            record.status = STATUS_ASSEMBLED
            record.last_error = e.reason
            await self.repo.save(record)
            raise

        record.remote_id = result.remote_id
        if result.assigned_phone_number:
            record.phone_number = result.assigned_phone_number
        record.assembled_prompt = config.assembled_prompt
        record.configuration = config.model_dump(mode="json")
        record.status = STATUS_DEPLOYED
        record.last_error = None
        record = await self.repo.save(record)
        logger.info(
            "Assistant deployed",
            extra={"assistant_id": record.id, "remote_id": record.remote_id},
        )
        return record

    async def delete(
        self,
        user_id: str,
        assistant_id: str,
        client_factory: ClientFactory | None = None,
    ) -> None:
        """Delete an assistant, removing the remote assistant first if deployed.

        Args:
            user_id: Owner of the assistant
            assistant_id: Assistant to delete
            client_factory: Builds a deployment client; only called when the
                assistant has a remote id

        Raises:
            AssistantNotFound: If the user has no such assistant
            DeploymentFailed: If the remote assistant could not be deleted; the
                local record is kept
        """
        record = await self._get_owned(user_id, assistant_id)
        if record.remote_id:
            if client_factory is None:
                raise DeploymentFailed("No voice platform client available to delete remote assistant")
            try:
                await client_factory().delete(record.remote_id)
            except DeploymentFailed as e:
                logger.error(
                    "Failed to delete remote assistant",
                    extra={"assistant_id": record.id, "remote_id": record.remote_id, "reason": e.reason},
                )
                raise
        await self.repo.delete(user_id, assistant_id)
        logger.info("Assistant deleted", extra={"assistant_id": assistant_id})
