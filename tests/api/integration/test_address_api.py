"""Integration tests for address book endpoints via TestClient."""


class TestAddressBook:
    def test_add_address(self, client, customer):
        response = client.post(
            "/address",
            json={"street": "1 Main St", "city": "Springfield", "zipCode": "62701", "country": "US"},
            headers=customer[1],
        )
        assert response.status_code == 201

        body = response.json()
        assert body["zipCode"] == "62701"
        assert body["isDefault"] is False
        assert body["userId"] == customer[0]

    def test_missing_fields(self, client, customer):
        response = client.post("/address", json={"street": "1 Main St"}, headers=customer[1])
        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"city", "zipCode", "country"}

    def test_default_swap(self, client, customer, create_address):
        first = create_address(customer[1], is_default=True)
        second = create_address(customer[1], is_default=True, street="2 Side St")

        addresses = client.get("/address", headers=customer[1]).json()
        defaults = [a["id"] for a in addresses if a["isDefault"]]
        assert defaults == [second]
        assert first in {a["id"] for a in addresses}

    def test_lists_only_own_addresses(self, client, register, create_address):
        _, jane = register()
        _, john = register(email="john@example.com", name="John Doe")
        create_address(jane)

        assert client.get("/address", headers=john).json() == []
        assert len(client.get("/address", headers=jane).json()) == 1
