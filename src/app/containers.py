"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.app.config import Settings
from src.shared.database.database import Database, DatabaseSettings
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.database.entity_mapper import EntityMapper

from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.app.infrastructure.mappers.service_mapper import ServiceMapper

from src.app.infrastructure.client_repository import ClientRepository
from src.app.infrastructure.service_repository import ServiceRepository

from src.app.core.services.client_service import ClientService
from src.app.core.services.service_catalog_service import ServiceCatalogService

from src.app.core.domain.models import Client, Service
from src.app.api.cors import CorsPolicy
from src.client.admin_client import AdminClient

WIRED_MODULES = [
    "src.app.api.routes.clients",
    "src.app.api.routes.services",
    "src.app.api.routes.system",
    "src.app.ui.routes",
]


def create_entity_mapper(
    client_mapper: ClientMapper,
    service_mapper: ServiceMapper,
) -> EntityMapper:
    """Factory function to create EntityMapper with proper mappings."""
    return EntityMapper(
        entity_mappings={
            Client: client_mapper.to_entity,
            Service: service_mapper.to_entity,
        }
    )


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    wiring_config = containers.WiringConfiguration(modules=WIRED_MODULES)

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # Parsed once at startup, immutable afterwards
    cors_policy = providers.Singleton(
        CorsPolicy.from_setting,
        config.provided.allowed_origins,
    )

    # =========================================================================
    # SINGLETONS - Stateless Mappers (reusable across all requests)
    # =========================================================================
    client_mapper = providers.Singleton(ClientMapper)
    service_mapper = providers.Singleton(ServiceMapper)

    entity_mapper = providers.Singleton(
        create_entity_mapper,
        client_mapper=client_mapper,
        service_mapper=service_mapper,
    )

    # =========================================================================
    # SINGLETON - Database (shared connection pool)
    # =========================================================================
    database_settings = providers.Singleton(
        DatabaseSettings,
        db_url=config.provided.database_url,
    )

    database = providers.Singleton(
        Database,
        db_settings=database_settings,
    )

    # =========================================================================
    # FACTORIES - Repositories (per-request, share database singleton)
    # =========================================================================
    client_repository = providers.Factory(
        ClientRepository,
        db=database,
        mapper=client_mapper,
    )

    service_repository = providers.Factory(
        ServiceRepository,
        db=database,
        mapper=service_mapper,
    )

    # =========================================================================
    # FACTORY - Unit of Work (per-request)
    # =========================================================================
    unit_of_work = providers.Factory(
        UnitOfWork,
        db=database,
        entity_mapper=entity_mapper,
    )

    # =========================================================================
    # FACTORIES - Services
    # =========================================================================
    client_service = providers.Factory(
        ClientService,
        repository=client_repository,
        service_repository=service_repository,
        unit_of_work=unit_of_work,
    )

    service_catalog_service = providers.Factory(
        ServiceCatalogService,
        repository=service_repository,
        unit_of_work=unit_of_work,
    )

    # =========================================================================
    # FACTORY - API client used by the admin UI (one per request)
    # =========================================================================
    admin_client = providers.Factory(
        AdminClient,
        base_url=config.provided.ui.api_base_url,
        timeout=config.provided.ui.request_timeout_seconds,
    )
