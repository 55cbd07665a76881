from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Client, ServiceSummary
from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.entities.client_service_entity import ClientServiceEntity


class ClientMapper(BaseEntityMapper[Client, ClientEntity]):
    """Mapper for converting between Client domain model and ClientEntity."""

    @staticmethod
    def to_entity(model_instance: Client) -> ClientEntity:
        """
        Convert a Client (domain model) to ClientEntity (database entity).

        Join rows are only built for a new client, where the foreign key is filled
        in by the relationship when the unit of work flushes. For a persisted client
        `service_links` is left unset, so merging it never rewrites the associations.
        """
        entity = ClientEntity(id=model_instance.id, name=model_instance.name, email=model_instance.email)
        if model_instance.id is None:
            entity.service_links = [
                ClientServiceEntity(service_id=service.id) for service in model_instance.services
            ]
        return entity

    @staticmethod
    def to_model(entity: ClientEntity) -> Client:
        """Convert a ClientEntity (database entity) to Client (domain model). Requires ``services`` loaded."""
        return Client(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            services=[ServiceSummary(id=service.id, name=service.name) for service in entity.services],
        )
