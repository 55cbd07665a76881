import pytest

from src.app.core.services.service_catalog_service import NAME_REQUIRED_MESSAGE
from src.shared.exceptions import EntityNotFound


@pytest.mark.asyncio
async def test_create_service_successfully(service_catalog_service, service_repository):
    # Act
    service = await service_catalog_service.create_service("  Hosting ", " Web ")

    # Assert
    assert service.id is not None
    assert service.name == "Hosting"
    assert service.description == "Web"
    assert await service_repository.get_by_id(service.id) == service


@pytest.mark.asyncio
async def test_create_service_without_description(service_catalog_service):
    service = await service_catalog_service.create_service("Hosting", "   ")

    assert service.description is None


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["", "   ", None])
async def test_create_service_requires_name(service_catalog_service, service_repository, name):
    with pytest.raises(ValueError, match=NAME_REQUIRED_MESSAGE):
        await service_catalog_service.create_service(name, "Web")

    assert await service_repository.get_all() == []


@pytest.mark.asyncio
async def test_get_service_not_found(service_catalog_service):
    with pytest.raises(EntityNotFound):
        await service_catalog_service.get_service(999)


@pytest.mark.asyncio
async def test_update_service_overwrites_all_fields(service_catalog_service, service_repository):
    """An omitted description is stored as null."""
    # Arrange
    service = await service_catalog_service.create_service("Hosting", "Web")

    # Act
    await service_catalog_service.update_service(service.id, "Hosting Pro", None)

    # Assert
    stored = await service_repository.get_by_id(service.id)
    assert stored.name == "Hosting Pro"
    assert stored.description is None


@pytest.mark.asyncio
async def test_update_service_requires_name(service_catalog_service, service_repository):
    service = await service_catalog_service.create_service("Hosting", "Web")

    with pytest.raises(ValueError, match=NAME_REQUIRED_MESSAGE):
        await service_catalog_service.update_service(service.id, " ", "Other")

    assert (await service_repository.get_by_id(service.id)).name == "Hosting"


@pytest.mark.asyncio
async def test_update_service_not_found(service_catalog_service):
    with pytest.raises(EntityNotFound):
        await service_catalog_service.update_service(999, "Hosting", None)


@pytest.mark.asyncio
async def test_delete_service_detaches_it_from_clients(
    service_catalog_service, client_service, client_repository, service_repository
):
    """Clients survive the deletion and keep their other services."""
    # Arrange
    hosting = await service_catalog_service.create_service("Hosting")
    backup = await service_catalog_service.create_service("Backup")
    client = await client_service.create_client("Acme", "a@acme.com", [hosting.id, backup.id])

    # Act
    await service_catalog_service.delete_service(hosting.id)

    # Assert
    assert await service_repository.get_by_id(hosting.id) is None
    db_client = await client_repository.get_by_id(client.id)
    assert db_client is not None
    assert [s.id for s in db_client.services] == [backup.id]


@pytest.mark.asyncio
async def test_delete_service_not_found(service_catalog_service):
    with pytest.raises(EntityNotFound):
        await service_catalog_service.delete_service(999)
