"""Database entities for the infrastructure layer."""
from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.entities.service_entity import ServiceEntity
from src.app.infrastructure.entities.client_service_entity import ClientServiceEntity

__all__ = [
    "ClientEntity",
    "ServiceEntity",
    "ClientServiceEntity",
]
