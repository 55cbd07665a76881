"""Client service: creation with service resolution, partial updates, deletion."""
import logging
from typing import Iterable

from src.app.core.domain.models import Client
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.exceptions import EntityNotFound, MissingReferences

from src.app.infrastructure.client_repository import ClientRepository
from src.app.infrastructure.service_repository import ServiceRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "nombreCliente y correo son obligatorios."
NO_SERVICES_MESSAGE = "Debe seleccionar al menos un servicio."


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class ClientService:
    """Service for handling Client business logic."""

    def __init__(
        self,
        repository: ClientRepository,
        service_repository: ServiceRepository,
        unit_of_work: UnitOfWork,
    ):
        self.repository = repository
        self.service_repository = service_repository
        self.unit_of_work = unit_of_work

    async def create_client(
        self,
        name: str | None,
        email: str | None,
        service_ids: Iterable[int] | None,
    ) -> Client:
        """
        Create a client associated with one or more existing services.

        Args:
            name: Display name, trimmed before persistence
            email: Email, trimmed before persistence (free text, not unique)
            service_ids: IDs of the services to associate; duplicates are ignored

        Returns:
            The created Client with its generated ID and service summaries

        Raises:
            ValueError: If name/email is blank or no service ID is given
            MissingReferences: If any service ID does not exist; nothing is persisted
        """
        if _is_blank(name) or _is_blank(email):
            raise ValueError(REQUIRED_FIELDS_MESSAGE)

        requested_ids = list(dict.fromkeys(service_ids or []))
        if not requested_ids:
            raise ValueError(NO_SERVICES_MESSAGE)

        services = await self.service_repository.get_by_ids(requested_ids)
        found_ids = {service.id for service in services}
        missing_ids = [service_id for service_id in requested_ids if service_id not in found_ids]
        if missing_ids:
            raise MissingReferences("Service", missing_ids)

        client = Client(
            name=name.strip(),
            email=email.strip(),
            services=[service.summary() for service in services],
        )

        # Client row and join rows are committed together
        async with self.unit_of_work:
            entity = self.unit_of_work.add(client)
            await self.unit_of_work.flush()
            client.id = entity.id

        logger.info("Created client %s with services %s", client.id, sorted(found_ids))
        return client

    async def get_client(self, client_id: int) -> Client:
        """Get a client, with its service summaries, by ID."""
        client = await self.repository.get_by_id(client_id)
        if not client:
            raise EntityNotFound("Client", client_id)
        return client

    async def list_clients(self) -> list[Client]:
        return await self.repository.get_all()

    async def update_client_basic(
        self,
        client_id: int,
        name: str | None = None,
        email: str | None = None,
    ) -> Client:
        """
        Partially update a client's name and email.

        Blank or missing values leave the stored value untouched. The client's
        services are never modified here.
        """
        client = await self.get_client(client_id)
        client.rename(name)
        client.change_email(email)

        async with self.unit_of_work:
            await self.unit_of_work.update(client)

        return client

    async def delete_client(self, client_id: int) -> None:
        """Delete a client and its service associations (services themselves are kept)."""
        client = await self.get_client(client_id)
        async with self.unit_of_work:
            await self.unit_of_work.delete(client)
        logger.info("Deleted client %s", client_id)
