"""Base repository with user-scoped queries."""

from typing import Generic, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from voice_matrix.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with user-scoped query methods.

    Every query filters on the model's ``user_id`` column so records owned by
    one user are invisible to every other user.
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """Initialize repository with model and session."""
        self.model = model
        self.session = session

    async def get_by_id(self, user_id: str, id: str) -> ModelType | None:
        """Get entity by ID, scoped to user."""
        stmt = select(self.model).where(
            self.model.id == id,
            self.model.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(
        self,
        user_id: str,
        skip: int = 0,
        limit: int = 100,
        **filters,
    ) -> list[ModelType]:
        """List entities, scoped to user, newest first."""
        stmt = select(self.model).where(self.model.user_id == user_id)

        # Apply additional filters
        for key, value in filters.items():
            if hasattr(self.model, key):
                stmt = stmt.where(getattr(self.model, key) == value)

        if hasattr(self.model, "created_at"):
            stmt = stmt.order_by(self.model.created_at.desc())

        stmt = stmt.offset(skip).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, user_id: str, **data) -> ModelType:
        """Create new entity owned by user_id."""
        data["user_id"] = user_id
        instance = self.model(**data)
        self.session.add(instance)
        await self.session.commit()
        await self.session.refresh(instance)
        return instance

    async def delete(self, user_id: str, id: str) -> bool:
        """Delete entity, scoped to user."""
        instance = await self.get_by_id(user_id, id)
        if instance is None:
            return False

        await self.session.delete(instance)
        await self.session.commit()
        return True
