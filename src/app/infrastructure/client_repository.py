from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from src.app.core.domain.models import Client
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.mappers.client_mapper import ClientMapper


class ClientRepository(BaseRepository[ClientEntity, Client]):
    """Repository for Client operations. Services are always eager loaded."""

    def __init__(self, db: Database, mapper: ClientMapper):
        super().__init__(db, mapper)

    @staticmethod
    def _with_services():
        return select(ClientEntity).options(selectinload(ClientEntity.services))

    async def get_by_id(self, client_id: int) -> Optional[Client]:
        """Get a client, with its services, by ID."""
        return await self.find_one(
            self._with_services().where(ClientEntity.id == client_id)
        )

    async def get_all(self) -> list[Client]:
        """Get every client with its services, in insertion (ID) order."""
        return await self.find_all(
            self._with_services().order_by(ClientEntity.id)
        )
