import pytest
from fastapi.testclient import TestClient
from protean import current_domain

from storefront.api.application import create_app
from storefront.identity.registration import RegisterUser
from storefront.identity.user import UserRole


@pytest.fixture()
def client():
    return TestClient(create_app())


@pytest.fixture()
def register(client):
    """Register a customer over HTTP and return ``(user_id, auth headers)``."""

    def _register(email="jane@example.com", password="secret1", name="Jane Doe"):
        response = client.post("/auth/register", json={"name": name, "email": email, "password": password})
        assert response.status_code == 201, response.text
        data = response.json()["data"]
        return data["user"]["id"], {"Authorization": f"Bearer {data['token']}"}

    return _register


@pytest.fixture()
def customer(register):
    return register()


@pytest.fixture()
def admin_headers(client):
    current_domain.process(
        RegisterUser(name="Admin", email="admin@example.com", password="admin-secret", role=UserRole.ADMIN.value),
        asynchronous=False,
    )
    response = client.post("/auth/admin/login", json={"email": "admin@example.com", "password": "admin-secret"})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


@pytest.fixture()
def create_product(client, admin_headers):
    def _create(name="Espresso Cup", price=10.0, **fields):
        response = client.post("/admin/products", json={"name": name, "price": price, **fields}, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()["product"]["id"]

    return _create


@pytest.fixture()
def create_address(client):
    def _create(headers, is_default=False, street="1 Main St"):
        response = client.post(
            "/address",
            json={
                "street": street,
                "city": "Springfield",
                "zipCode": "62701",
                "country": "US",
                "isDefault": is_default,
            },
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _create
