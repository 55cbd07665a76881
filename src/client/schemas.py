"""API schemas for client and service requests and responses.

JSON payloads use the camelCase Spanish names of the public API
(``nombreCliente``, ``servicioIds`` ...); Python code uses the field names.
"""
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_TEXT_LENGTH = 255

# Identifiers are stored as 32-bit integers
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1

EntityId = Annotated[int, Field(ge=ID_MIN, le=ID_MAX)]


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class ApiSchema(BaseModel):
    """Base schema: accepts both aliases and field names, serializes by alias."""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


# =============================================================================
# Clientes
# =============================================================================


class CreateClientRequest(ApiSchema):
    """
    Request schema for creating a new client.

    Fields are optional at the schema level so that blank values and empty
    service lists are reported with the business-rule messages (400) rather
    than generic schema errors.
    """
    name: str | None = Field(default=None, max_length=MAX_TEXT_LENGTH, alias="nombreCliente")
    email: str | None = Field(default=None, max_length=MAX_TEXT_LENGTH, alias="correo")
    service_ids: list[EntityId] | None = Field(default=None, alias="servicioIds")

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_text(cls, value):
        """Length limits apply to the trimmed value."""
        return _strip(value)


class UpdateClientRequest(ApiSchema):
    """Partial update of a client; blank or missing fields are ignored."""
    name: str | None = Field(default=None, max_length=MAX_TEXT_LENGTH, alias="nombreCliente")
    email: str | None = Field(default=None, max_length=MAX_TEXT_LENGTH, alias="correo")

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_text(cls, value):
        return _strip(value)


class ServiceSummaryResponse(ApiSchema):
    """A client's service, reduced to identity and name."""
    id: int
    name: str = Field(..., alias="nombreServicio")


class ClientResponse(ApiSchema):
    """Response schema for client data returned by the API."""
    id: int
    name: str = Field(..., alias="nombreCliente")
    email: str = Field(..., alias="correo")
    services: list[ServiceSummaryResponse] = Field(default_factory=list, alias="servicios")


# =============================================================================
# Servicios
# =============================================================================


class ServiceRequest(ApiSchema):
    """Request schema for creating or (fully) updating a service."""
    name: str | None = Field(default=None, max_length=MAX_TEXT_LENGTH, alias="nombreServicio")
    description: str | None = Field(default=None, max_length=MAX_TEXT_LENGTH, alias="descripcion")

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_text(cls, value):
        return _strip(value)


class ServiceResponse(ApiSchema):
    """Response schema for service data; never includes the associated clients."""
    id: int
    name: str = Field(..., alias="nombreServicio")
    description: str | None = Field(default=None, alias="descripcion")


# =============================================================================
# System
# =============================================================================


class HealthResponse(ApiSchema):
    status: str
    utc: datetime


class DbCheckResponse(ApiSchema):
    db: str


class MissingServicesResponse(ApiSchema):
    """Body of the 400 returned when some requested service IDs do not exist."""
    message: str
    missing: list[int] = Field(..., alias="faltantes")
