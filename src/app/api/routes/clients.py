from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from fastapi.responses import JSONResponse
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.client_service import ClientService
from src.client.schemas import (
    ClientResponse,
    CreateClientRequest,
    MissingServicesResponse,
    ID_MAX,
    ID_MIN,
    UpdateClientRequest,
)
from src.app.api.mappers import to_client_response
from src.shared.exceptions import EntityNotFound, MissingReferences
from src.app.logging import get_logger

router = APIRouter(prefix="/clientes", tags=["clientes"])
logger = get_logger(__name__)

BODY_REQUIRED_MESSAGE = "Body requerido."
MISSING_SERVICES_MESSAGE = "Algunos servicios no existen."

# Out-of-range IDs are rejected (400) before they reach the database
ClientIdPath = Annotated[int, Path(ge=ID_MIN, le=ID_MAX)]


@router.get("", response_model=list[ClientResponse])
@inject
async def list_clients(
    service: ClientService = Depends(Provide[Container.client_service]),
) -> list[ClientResponse]:
    """List all clients with their services."""
    clients = await service.list_clients()
    return [to_client_response(client) for client in clients]


@router.get("/{client_id}", response_model=ClientResponse)
@inject
async def get_client(
    client_id: ClientIdPath,
    service: ClientService = Depends(Provide[Container.client_service]),
):
    """Get a client by ID. Unknown IDs return an empty 404."""
    try:
        client = await service.get_client(client_id)
    except EntityNotFound as e:
        logger.info(f"Client not found: {e}")
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return to_client_response(client)


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
@inject
async def create_client(
    response: Response,
    request: CreateClientRequest | None = None,
    service: ClientService = Depends(Provide[Container.client_service]),
):
    """
    Create a client associated with at least one existing service.

    Returns:
        201 with the created client and a Location header

    Raises:
        HTTPException 400: Missing body, blank name/email or empty service list
        400 with ``faltantes``: Some service IDs do not exist
    """
    if request is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BODY_REQUIRED_MESSAGE)

    try:
        client = await service.create_client(
            name=request.name,
            email=request.email,
            service_ids=request.service_ids,
        )
    except MissingReferences as e:
        logger.error(f"Failed to create client, unknown services: {e.missing_ids}")
        body = MissingServicesResponse(message=MISSING_SERVICES_MESSAGE, missing=e.missing_ids)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.to_json())
    except ValueError as e:
        logger.error(f"Failed to create client due to validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    response.headers["Location"] = f"/api/clientes/{client.id}"
    return to_client_response(client)


@router.put("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def update_client(
    client_id: ClientIdPath,
    request: UpdateClientRequest,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> Response:
    """Partially update name and email; blank fields are ignored, services are untouched."""
    try:
        await service.update_client_basic(client_id, name=request.name, email=request.email)
    except EntityNotFound as e:
        logger.info(f"Client not found: {e}")
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    except ValueError as e:
        logger.error(f"Failed to update client {client_id}: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_client(
    client_id: ClientIdPath,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> Response:
    """Delete a client and its service associations."""
    try:
        await service.delete_client(client_id)
    except EntityNotFound as e:
        logger.info(f"Client not found: {e}")
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
