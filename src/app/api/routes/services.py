from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.service_catalog_service import ServiceCatalogService
from src.client.schemas import ID_MAX, ID_MIN, ServiceRequest, ServiceResponse
from src.app.api.mappers import to_service_response
from src.shared.exceptions import EntityNotFound
from src.app.logging import get_logger

router = APIRouter(prefix="/servicios", tags=["servicios"])
logger = get_logger(__name__)

ServiceIdPath = Annotated[int, Path(ge=ID_MIN, le=ID_MAX)]


@router.get("", response_model=list[ServiceResponse])
@inject
async def list_services(
    service: ServiceCatalogService = Depends(Provide[Container.service_catalog_service]),
) -> list[ServiceResponse]:
    services = await service.list_services()
    return [to_service_response(item) for item in services]


@router.get("/{service_id}", response_model=ServiceResponse)
@inject
async def get_service(
    service_id: ServiceIdPath,
    service: ServiceCatalogService = Depends(Provide[Container.service_catalog_service]),
):
    try:
        item = await service.get_service(service_id)
    except EntityNotFound as e:
        logger.info(f"Service not found: {e}")
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return to_service_response(item)


@router.post("", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
@inject
async def create_service(
    request: ServiceRequest,
    response: Response,
    service: ServiceCatalogService = Depends(Provide[Container.service_catalog_service]),
) -> ServiceResponse:
    """Create a service and return it with a Location header."""
    try:
        item = await service.create_service(request.name, request.description)
    except ValueError as e:
        logger.error(f"Failed to create service due to validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    response.headers["Location"] = f"/api/servicios/{item.id}"
    return to_service_response(item)


@router.put("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def update_service(
    service_id: ServiceIdPath,
    request: ServiceRequest,
    service: ServiceCatalogService = Depends(Provide[Container.service_catalog_service]),
) -> Response:
    """Overwrite both name and description (an omitted description is cleared)."""
    try:
        await service.update_service(service_id, request.name, request.description)
    except EntityNotFound as e:
        logger.info(f"Service not found: {e}")
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    except ValueError as e:
        logger.error(f"Failed to update service {service_id}: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_service(
    service_id: ServiceIdPath,
    service: ServiceCatalogService = Depends(Provide[Container.service_catalog_service]),
) -> Response:
    """Delete a service; clients lose the association but are kept."""
    try:
        await service.delete_service(service_id)
    except EntityNotFound as e:
        logger.info(f"Service not found: {e}")
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
