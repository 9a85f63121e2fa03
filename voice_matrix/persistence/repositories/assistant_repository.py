"""Repository for AssistantConfigurationRecord."""

from sqlalchemy.ext.asyncio import AsyncSession

from voice_matrix.persistence.models.assistant import AssistantConfigurationRecord
from voice_matrix.persistence.repositories.base import BaseRepository


class AssistantRepository(BaseRepository[AssistantConfigurationRecord]):
    """Repository for user-owned assistant configurations."""

    def __init__(self, session: AsyncSession):
        """Initialize assistant repository."""
        super().__init__(AssistantConfigurationRecord, session)

    async def list_by_status(
        self, user_id: str, status: str, skip: int = 0, limit: int = 100
    ) -> list[AssistantConfigurationRecord]:
        """List a user's assistants in the given status."""
        return await self.list(user_id, skip=skip, limit=limit, status=status)

    async def save(self, record: AssistantConfigurationRecord) -> AssistantConfigurationRecord:
        """Persist changes made directly on a loaded record."""
        await self.session.commit()
        await self.session.refresh(record)
        return record
