"""
Server-rendered admin UI.

The UI is a plain consumer of the REST API: every page load fetches fresh
lists through AdminClient, and every mutation is fire-then-redirect so the
next GET re-renders from the API (no local state survives between requests).
"""
from pathlib import Path
from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from dependency_injector.wiring import Provide, inject
from pydantic import ValidationError

from src.app.config import Settings
from src.app.containers import Container
from src.app.logging import get_logger
from src.client.admin_client import AdminClient
from src.client.schemas import CreateClientRequest, ServiceRequest

router = APIRouter(prefix="/ui", tags=["ui"], include_in_schema=False)
logger = get_logger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

INDEX_URL = "/ui/"

LOAD_ERROR = "Error al cargar los datos."
NO_SERVICES_ALERT = "Primero debes crear al menos 1 servicio antes de crear clientes."
NO_SELECTION_ALERT = "Selecciona al menos un servicio para el cliente."
CREATE_CLIENT_ERROR = "Error al crear cliente."
CREATE_ERROR = "Error al crear"
DELETE_ERROR = "Error al eliminar"


def _empty_client_form() -> dict:
    return {"nombreCliente": "", "correo": "", "servicioIds": []}


def _redirect_to_index() -> RedirectResponse:
    return RedirectResponse(url=INDEX_URL, status_code=status.HTTP_303_SEE_OTHER)


async def _render_index(
    request: Request,
    api: AdminClient,
    config: Settings,
    *,
    alert: str | None = None,
    client_form: dict | None = None,
    service_form: dict | None = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    clients, services = [], []
    try:
        clients = await api.list_clients()
        services = await api.list_services()
    except httpx.HTTPError as e:
        logger.error(f"Error loading lists from API: {e}")
        alert = alert or LOAD_ERROR

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": config.ui.title,
            "api_base_url": config.ui.api_base_url,
            "alert": alert,
            "clients": clients,
            "services": services,
            "client_form": client_form or _empty_client_form(),
            "service_form": service_form or {"nombreServicio": "", "descripcion": ""},
            "create_disabled": not services,
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
@inject
async def index(
    request: Request,
    api: AdminClient = Depends(Provide[Container.admin_client]),
    config: Settings = Depends(Provide[Container.config]),
) -> HTMLResponse:
    async with api:
        return await _render_index(request, api, config)


@router.post("/clientes", response_class=HTMLResponse)
@inject
async def create_client(
    request: Request,
    name: Annotated[str, Form(alias="nombreCliente")] = "",
    email: Annotated[str, Form(alias="correo")] = "",
    service_ids: Annotated[list[int], Form(alias="servicioIds")] = [],
    api: AdminClient = Depends(Provide[Container.admin_client]),
    config: Settings = Depends(Provide[Container.config]),
):
    """
    Create a client from the form.

    Submission is blocked before reaching the API when there are no services at
    all or none is selected; the form keeps its values in both cases.
    """
    form = {"nombreCliente": name, "correo": email, "servicioIds": list(service_ids)}

    async with api:
        try:
            services = await api.list_services()
        except httpx.HTTPError as e:
            logger.error(f"Error loading services: {e}")
            return await _render_index(
                request, api, config,
                alert=LOAD_ERROR, client_form=form, status_code=status.HTTP_502_BAD_GATEWAY,
            )

        if not services:
            return await _render_index(
                request, api, config,
                alert=NO_SERVICES_ALERT, client_form=form, status_code=status.HTTP_400_BAD_REQUEST,
            )
        if not service_ids:
            return await _render_index(
                request, api, config,
                alert=NO_SELECTION_ALERT, client_form=form, status_code=status.HTTP_400_BAD_REQUEST,
            )

        try:
            await api.create_client(
                CreateClientRequest(name=name.strip(), email=email.strip(), service_ids=service_ids)
            )
        except (httpx.HTTPStatusError, ValidationError) as e:
            logger.error(f"Error creating client: {e}")
            return await _render_index(
                request, api, config,
                alert=CREATE_CLIENT_ERROR, client_form=form, status_code=status.HTTP_400_BAD_REQUEST,
            )

    return _redirect_to_index()


@router.get("/clientes/{client_id}/eliminar", response_class=HTMLResponse)
@inject
async def confirm_delete_client(
    request: Request,
    client_id: int,
    api: AdminClient = Depends(Provide[Container.admin_client]),
    config: Settings = Depends(Provide[Container.config]),
):
    """Confirmation step required before a client is deleted."""
    async with api:
        try:
            client = await api.get_client(client_id)
        except httpx.HTTPStatusError as e:
            logger.error(f"Error loading client {client_id}: {e.response.status_code}")
            return await _render_index(
                request, api, config, alert=DELETE_ERROR, status_code=status.HTTP_404_NOT_FOUND,
            )

    return templates.TemplateResponse(
        request,
        "confirm_delete.html",
        {"title": config.ui.title, "client": client},
    )


@router.post("/clientes/{client_id}/eliminar", response_class=HTMLResponse)
@inject
async def delete_client(
    request: Request,
    client_id: int,
    api: AdminClient = Depends(Provide[Container.admin_client]),
    config: Settings = Depends(Provide[Container.config]),
):
    async with api:
        try:
            await api.delete_client(client_id)
        except httpx.HTTPStatusError as e:
            logger.error(f"Error deleting client {client_id}: {e.response.status_code}")
            return await _render_index(
                request, api, config, alert=DELETE_ERROR, status_code=status.HTTP_400_BAD_REQUEST,
            )
    return _redirect_to_index()


@router.post("/servicios", response_class=HTMLResponse)
@inject
async def create_service(
    request: Request,
    name: Annotated[str, Form(alias="nombreServicio")] = "",
    description: Annotated[str, Form(alias="descripcion")] = "",
    api: AdminClient = Depends(Provide[Container.admin_client]),
    config: Settings = Depends(Provide[Container.config]),
):
    form = {"nombreServicio": name, "descripcion": description}
    async with api:
        try:
            await api.create_service(ServiceRequest(name=name, description=description or None))
        except (httpx.HTTPStatusError, ValidationError) as e:
            logger.error(f"Error creating service: {e}")
            return await _render_index(
                request, api, config,
                alert=CREATE_ERROR, service_form=form, status_code=status.HTTP_400_BAD_REQUEST,
            )
    return _redirect_to_index()


@router.post("/servicios/{service_id}/eliminar", response_class=HTMLResponse)
@inject
async def delete_service(
    request: Request,
    service_id: int,
    api: AdminClient = Depends(Provide[Container.admin_client]),
    config: Settings = Depends(Provide[Container.config]),
):
    async with api:
        try:
            await api.delete_service(service_id)
        except httpx.HTTPStatusError as e:
            logger.error(f"Error deleting service {service_id}: {e.response.status_code}")
            return await _render_index(
                request, api, config, alert=DELETE_ERROR, status_code=status.HTTP_400_BAD_REQUEST,
            )
    return _redirect_to_index()
