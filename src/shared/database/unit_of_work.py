from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.database.database import Database
from src.shared.database.entity_mapper import EntityMapper


class UnitOfWork:
    """
    Groups mutations into a single transaction.

    Everything registered inside ``async with uow:`` is committed on a clean exit
    and rolled back if the block raises. Models are translated to entities through
    the EntityMapper, so callers only deal with domain models.
    """

    def __init__(
        self,
        db: Database,
        entity_mapper: EntityMapper,
    ) -> None:
        self.db = db
        self.session: AsyncSession
        self.entity_mapper = entity_mapper

    async def __aenter__(self):
        self.session = self.db.session_maker()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                await self.commit()
            else:
                await self.rollback()
        finally:
            await self.session.close()

    def _map_to_entity(self, model_instance: Any):
        return self.entity_mapper.map_to_entity(model_instance)

    def add(self, model_instance: Any):
        """
        Stage a new model for insertion.

        Returns the pending entity; generated keys are available on it once the
        unit of work has been committed (or flushed).
        """
        entity = self._map_to_entity(model_instance)
        self.session.add(entity)
        return entity

    async def update(self, model_instance: Any):
        """Copy the model's state onto the persisted row with the same primary key."""
        entity = self._map_to_entity(model_instance)
        return await self.session.merge(entity)

    async def delete(self, model_instance: Any):
        entity = await self.session.merge(self._map_to_entity(model_instance))
        await self.session.delete(entity)

    async def flush(self):
        await self.session.flush()

    async def commit(self):
        try:
            await self.session.commit()
        except Exception:
            await self.rollback()
            raise

    async def rollback(self):
        await self.session.rollback()
