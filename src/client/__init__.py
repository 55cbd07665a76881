"""Typed HTTP client for the Clientes & Servicios API."""
from src.client.admin_client import AdminClient
from src.client.schemas import (
    CreateClientRequest,
    UpdateClientRequest,
    ClientResponse,
    ServiceSummaryResponse,
    ServiceRequest,
    ServiceResponse,
    HealthResponse,
    DbCheckResponse,
    MissingServicesResponse,
)

__all__ = [
    "AdminClient",
    "CreateClientRequest",
    "UpdateClientRequest",
    "ClientResponse",
    "ServiceSummaryResponse",
    "ServiceRequest",
    "ServiceResponse",
    "HealthResponse",
    "DbCheckResponse",
    "MissingServicesResponse",
]
