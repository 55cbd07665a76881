"""CRUD for the service catalog."""
import logging

from src.app.core.domain.models import Service
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.exceptions import EntityNotFound

from src.app.infrastructure.service_repository import ServiceRepository

logger = logging.getLogger(__name__)

NAME_REQUIRED_MESSAGE = "nombreServicio es obligatorio."


def _clean_name(name: str | None) -> str:
    if name is None or not name.strip():
        raise ValueError(NAME_REQUIRED_MESSAGE)
    return name.strip()


def _clean_description(description: str | None) -> str | None:
    if description is None:
        return None
    return description.strip() or None


class ServiceCatalogService:
    """Service for handling Service business logic."""

    def __init__(self, repository: ServiceRepository, unit_of_work: UnitOfWork):
        self.repository = repository
        self.unit_of_work = unit_of_work

    async def create_service(self, name: str | None, description: str | None = None) -> Service:
        """Create a service. Name is required; both fields are trimmed."""
        service = Service(name=_clean_name(name), description=_clean_description(description))

        async with self.unit_of_work:
            entity = self.unit_of_work.add(service)
            await self.unit_of_work.flush()
            service.id = entity.id

        return service

    async def get_service(self, service_id: int) -> Service:
        service = await self.repository.get_by_id(service_id)
        if not service:
            raise EntityNotFound("Service", service_id)
        return service

    async def list_services(self) -> list[Service]:
        return await self.repository.get_all()

    async def update_service(
        self,
        service_id: int,
        name: str | None,
        description: str | None,
    ) -> Service:
        """
        Overwrite both name and description.

        Unlike client updates this is not partial: an omitted description is
        stored as null.
        """
        await self.get_service(service_id)
        service = Service(
            id=service_id,
            name=_clean_name(name),
            description=_clean_description(description),
        )

        async with self.unit_of_work:
            await self.unit_of_work.update(service)

        return service

    async def delete_service(self, service_id: int) -> None:
        """Delete a service; its client associations are removed by the cascading foreign key."""
        service = await self.get_service(service_id)
        client_ids = await self.repository.get_client_ids(service_id)

        async with self.unit_of_work:
            await self.unit_of_work.delete(service)

        if client_ids:
            logger.info("Deleted service %s, detached from clients %s", service_id, client_ids)
        else:
            logger.info("Deleted service %s", service_id)
