"""Mappers for converting between domain models and API schemas."""
from src.app.core.domain.models import Client, Service, ServiceSummary
from src.client.schemas import ClientResponse, ServiceResponse, ServiceSummaryResponse


def to_service_summary_response(summary: ServiceSummary) -> ServiceSummaryResponse:
    return ServiceSummaryResponse(id=summary.id, name=summary.name)


def to_client_response(client: Client) -> ClientResponse:
    """
    Convert a Client domain model to ClientResponse API schema.

    Services are projected to {id, nombreServicio}; the reverse
    service -> clients navigation is never serialized.
    """
    return ClientResponse(
        id=client.id,
        name=client.name,
        email=client.email,
        services=[to_service_summary_response(service) for service in client.services],
    )


def to_service_response(service: Service) -> ServiceResponse:
    """Convert a Service domain model to ServiceResponse API schema."""
    return ServiceResponse(
        id=service.id,
        name=service.name,
        description=service.description,
    )
