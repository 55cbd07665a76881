"""Infrastructure mappers for converting between domain models and database entities."""
from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.app.infrastructure.mappers.service_mapper import ServiceMapper

__all__ = [
    "ClientMapper",
    "ServiceMapper",
]
