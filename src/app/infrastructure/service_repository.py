from typing import Iterable, Optional
from sqlalchemy import select

from src.app.core.domain.models import Service
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.client_service_entity import ClientServiceEntity
from src.app.infrastructure.entities.service_entity import ServiceEntity
from src.app.infrastructure.mappers.service_mapper import ServiceMapper


class ServiceRepository(BaseRepository[ServiceEntity, Service]):
    """Repository for Service operations."""

    def __init__(self, db: Database, mapper: ServiceMapper):
        super().__init__(db, mapper)

    async def get_by_id(self, service_id: int) -> Optional[Service]:
        return await self.find_one(
            select(ServiceEntity).where(ServiceEntity.id == service_id)
        )

    async def get_all(self) -> list[Service]:
        return await self.find_all(
            select(ServiceEntity).order_by(ServiceEntity.id)
        )

    async def get_by_ids(self, service_ids: Iterable[int]) -> list[Service]:
        """Get the services whose IDs are in ``service_ids``; unknown IDs are simply absent."""
        ids = set(service_ids)
        if not ids:
            return []
        return await self.find_all(
            select(ServiceEntity).where(ServiceEntity.id.in_(ids)).order_by(ServiceEntity.id)
        )

    async def get_client_ids(self, service_id: int) -> list[int]:
        """IDs of the clients currently associated with a service."""
        return await self.find_scalars(
            select(ClientServiceEntity.client_id)
            .where(ClientServiceEntity.service_id == service_id)
            .order_by(ClientServiceEntity.client_id)
        )
