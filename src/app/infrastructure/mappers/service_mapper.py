from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Service
from src.app.infrastructure.entities.service_entity import ServiceEntity


class ServiceMapper(BaseEntityMapper[Service, ServiceEntity]):
    """Mapper for converting between Service domain model and ServiceEntity."""

    @staticmethod
    def to_entity(model_instance: Service) -> ServiceEntity:
        return ServiceEntity(
            id=model_instance.id,
            name=model_instance.name,
            description=model_instance.description,
        )

    @staticmethod
    def to_model(entity: ServiceEntity) -> Service:
        return Service(
            id=entity.id,
            name=entity.name,
            description=entity.description,
        )
