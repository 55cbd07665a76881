"""HTTP client for consuming the Clientes & Servicios API."""
from typing import Optional
from httpx import AsyncClient, Response

from src.client.schemas import (
    CreateClientRequest,
    UpdateClientRequest,
    ClientResponse,
    ServiceRequest,
    ServiceResponse,
    HealthResponse,
    DbCheckResponse,
)


class AdminClient:
    """HTTP client for interacting with the Clientes & Servicios API."""

    def __init__(
        self,
        base_url: str,
        client: Optional[AsyncClient] = None,
        timeout: float = 10.0,
    ):
        """
        Initialize the admin client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:8000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
            timeout: Request timeout in seconds for a client created by this instance.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None
        self.timeout = timeout

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url, timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    # -------------------------------------------------------------------------
    # System
    # -------------------------------------------------------------------------

    async def health(self) -> HealthResponse:
        response: Response = await self.client.get("/health")
        response.raise_for_status()
        return HealthResponse(**response.json())

    async def dbcheck(self) -> DbCheckResponse:
        response: Response = await self.client.get("/dbcheck")
        response.raise_for_status()
        return DbCheckResponse(**response.json())

    # -------------------------------------------------------------------------
    # Clientes
    # -------------------------------------------------------------------------

    async def list_clients(self) -> list[ClientResponse]:
        """
        List all clients with their services.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.get("/api/clientes")
        response.raise_for_status()
        return [ClientResponse(**client) for client in response.json()]

    async def get_client(self, client_id: int) -> ClientResponse:
        """
        Get a client by ID.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.get(f"/api/clientes/{client_id}")
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def create_client(self, request: CreateClientRequest) -> ClientResponse:
        """
        Create a new client.

        Args:
            request: Client creation request (name, email and at least one service ID)

        Returns:
            Created client response

        Raises:
            httpx.HTTPStatusError: If the request fails (400 on validation or unknown services)
        """
        response: Response = await self.client.post("/api/clientes", json=request.to_json())
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def update_client(self, client_id: int, request: UpdateClientRequest) -> None:
        """
        Partially update a client's name and/or email.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.put(
            f"/api/clientes/{client_id}", json=request.to_json()
        )
        response.raise_for_status()

    async def delete_client(self, client_id: int) -> None:
        """
        Delete a client.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.delete(f"/api/clientes/{client_id}")
        response.raise_for_status()

    # -------------------------------------------------------------------------
    # Servicios
    # -------------------------------------------------------------------------

    async def list_services(self) -> list[ServiceResponse]:
        response: Response = await self.client.get("/api/servicios")
        response.raise_for_status()
        return [ServiceResponse(**service) for service in response.json()]

    async def get_service(self, service_id: int) -> ServiceResponse:
        response: Response = await self.client.get(f"/api/servicios/{service_id}")
        response.raise_for_status()
        return ServiceResponse(**response.json())

    async def create_service(self, request: ServiceRequest) -> ServiceResponse:
        response: Response = await self.client.post("/api/servicios", json=request.to_json())
        response.raise_for_status()
        return ServiceResponse(**response.json())

    async def update_service(self, service_id: int, request: ServiceRequest) -> None:
        """Overwrite both name and description of a service."""
        response: Response = await self.client.put(
            f"/api/servicios/{service_id}", json=request.to_json()
        )
        response.raise_for_status()

    async def delete_service(self, service_id: int) -> None:
        response: Response = await self.client.delete(f"/api/servicios/{service_id}")
        response.raise_for_status()
