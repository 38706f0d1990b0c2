"""
Base Repository.

Base class for all repositories with common primary-key operations.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with primary-key lookups, create and delete.

    Keys are whatever the model's primary key is: a scalar for
    single-column keys, a tuple in column order for composite keys.
    Subclasses should set the model class:

        class SeatNoteRepository(BaseRepository[SeatNote]):
            model = SeatNote
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_key_or_none(self, key: Any) -> ModelType | None:
        """Get a single record by primary key, returning None if not found."""
        return await self.session.get(self.model, key)

    async def create(self, **kwargs: Any) -> ModelType:
        """Create a new record and flush it so generated keys are populated."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def save(self, instance: ModelType) -> ModelType:
        """Flush pending changes on an already-loaded record."""
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete_by_key(self, key: Any) -> bool:
        """
        Delete a record by primary key.

        Returns:
            True if a record existed and was deleted, False otherwise
        """
        instance = await self.get_by_key_or_none(key)
        if instance is None:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
