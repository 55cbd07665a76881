"""
Admin UI tests.

The UI talks to the API through AdminClient, which the http_client fixture
points at the same in-process app.
"""
import httpx
import pytest
from dependency_injector import providers

from src.client import AdminClient
from src.app.ui.routes import (
    CREATE_ERROR,
    LOAD_ERROR,
    NO_SELECTION_ALERT,
    NO_SERVICES_ALERT,
)


async def _create_service(http_client, name: str) -> dict:
    return (await http_client.post("/api/servicios", json={"nombreServicio": name})).json()


@pytest.mark.asyncio
async def test_index_without_services_disables_client_form(http_client):
    response = await http_client.get("/ui/")

    assert response.status_code == 200
    assert "No hay servicios creados" in response.text
    assert "disabled" in response.text


@pytest.mark.asyncio
async def test_index_lists_clients_and_services(http_client):
    # Arrange
    hosting = await _create_service(http_client, "Hosting")
    await http_client.post(
        "/api/clientes",
        json={"nombreCliente": "Acme", "correo": "a@acme.com", "servicioIds": [hosting["id"]]},
    )

    # Act
    response = await http_client.get("/ui/")

    # Assert
    assert response.status_code == 200
    assert "No hay servicios creados" not in response.text
    assert "Acme" in response.text
    assert "a@acme.com" in response.text
    assert f'name="servicioIds" value="{hosting["id"]}"' in response.text
    assert 'href="/ui/clientes/' in response.text


@pytest.mark.asyncio
async def test_create_client_blocked_without_services(http_client):
    response = await http_client.post(
        "/ui/clientes", data={"nombreCliente": "Acme", "correo": "a@acme.com"}
    )

    assert response.status_code == 400
    assert NO_SERVICES_ALERT in response.text
    assert (await http_client.get("/api/clientes")).json() == []


@pytest.mark.asyncio
async def test_create_client_blocked_without_selection(http_client):
    """The form keeps the typed values when submission is blocked."""
    await _create_service(http_client, "Hosting")

    response = await http_client.post(
        "/ui/clientes", data={"nombreCliente": "Acme", "correo": "a@acme.com"}
    )

    assert response.status_code == 400
    assert NO_SELECTION_ALERT in response.text
    assert 'value="Acme"' in response.text
    assert (await http_client.get("/api/clientes")).json() == []


@pytest.mark.asyncio
async def test_create_client_redirects_to_index(http_client):
    # Arrange
    hosting = await _create_service(http_client, "Hosting")
    backup = await _create_service(http_client, "Backup")

    # Act
    response = await http_client.post(
        "/ui/clientes",
        data={
            "nombreCliente": " Acme ",
            "correo": "a@acme.com",
            "servicioIds": [str(hosting["id"]), str(backup["id"])],
        },
    )

    # Assert
    assert response.status_code == 303
    assert response.headers["location"] == "/ui/"
    clients = (await http_client.get("/api/clientes")).json()
    assert len(clients) == 1
    assert clients[0]["nombreCliente"] == "Acme"
    assert [s["nombreServicio"] for s in clients[0]["servicios"]] == ["Hosting", "Backup"]


@pytest.mark.asyncio
async def test_delete_client_requires_confirmation(http_client):
    # Arrange
    hosting = await _create_service(http_client, "Hosting")
    client = (await http_client.post(
        "/api/clientes",
        json={"nombreCliente": "Acme", "correo": "a@acme.com", "servicioIds": [hosting["id"]]},
    )).json()

    # Act - The GET only asks for confirmation
    confirm = await http_client.get(f"/ui/clientes/{client['id']}/eliminar")

    # Assert
    assert confirm.status_code == 200
    assert "¿Eliminar este cliente?" in confirm.text
    assert (await http_client.get(f"/api/clientes/{client['id']}")).status_code == 200

    # Act - Confirm
    response = await http_client.post(f"/ui/clientes/{client['id']}/eliminar")

    # Assert
    assert response.status_code == 303
    assert (await http_client.get(f"/api/clientes/{client['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_confirm_delete_unknown_client(http_client):
    response = await http_client.get("/ui/clientes/999/eliminar")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_service_from_form(http_client):
    response = await http_client.post(
        "/ui/servicios", data={"nombreServicio": "Hosting", "descripcion": ""}
    )

    assert response.status_code == 303
    services = (await http_client.get("/api/servicios")).json()
    assert services == [{"id": services[0]["id"], "nombreServicio": "Hosting", "descripcion": None}]


@pytest.mark.asyncio
async def test_create_service_without_name_shows_error(http_client):
    response = await http_client.post("/ui/servicios", data={"nombreServicio": " ", "descripcion": "Web"})

    assert response.status_code == 400
    assert CREATE_ERROR in response.text
    assert (await http_client.get("/api/servicios")).json() == []


@pytest.mark.asyncio
async def test_delete_service_from_form(http_client):
    hosting = await _create_service(http_client, "Hosting")

    response = await http_client.post(f"/ui/servicios/{hosting['id']}/eliminar")

    assert response.status_code == 303
    assert (await http_client.get("/api/servicios")).json() == []


@pytest.mark.asyncio
async def test_create_client_reports_load_error_when_api_is_down(http_client, test_container):
    """A failing service listing is a load error, not an empty catalog."""
    # Arrange
    unavailable = httpx.AsyncClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(503)),
        base_url="http://api.unavailable",
    )
    test_container.admin_client.override(
        providers.Factory(AdminClient, base_url="http://api.unavailable", client=unavailable)
    )

    # Act
    response = await http_client.post(
        "/ui/clientes", data={"nombreCliente": "Acme", "correo": "a@acme.com", "servicioIds": ["1"]}
    )
    await unavailable.aclose()

    # Assert
    assert response.status_code == 502
    assert LOAD_ERROR in response.text
    assert NO_SERVICES_ALERT not in response.text
    assert 'value="Acme"' in response.text
