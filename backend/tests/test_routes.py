"""
Beverage API: Greeting, Pet and Health Endpoint Tests
=====================================================

What we test:
    ✅ Greetings return fixed payloads with 200
    ✅ POST /api/pets is a no-op answering 204 with an empty body
    ✅ GET /health reports healthy with version and uptime
    ✅ OpenAPI document publishes the pet body shape
"""

import pytest

from beverage_api import __version__


class TestGreetings:

    @pytest.mark.asyncio
    async def test_hello(self, test_client):
        response = await test_client.get("/api/hello")

        assert response.status_code == 200
        assert response.json() == {"hello": "World!"}

    @pytest.mark.asyncio
    async def test_hello_ignores_query(self, test_client):
        response = await test_client.get("/api/hello", params={"name": "Ada"})

        assert response.status_code == 200
        assert response.json() == {"hello": "World!"}

    @pytest.mark.asyncio
    async def test_good_bye(self, test_client):
        response = await test_client.get("/api/good-bye")

        assert response.status_code == 200
        assert response.json() == {"message": "Good Bye Visitor!"}


class TestPets:
    """The pet endpoint accepts anything JSON and does nothing."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"name": "Tom", "kind": "cat"},
            {"name": "Rex", "kind": "dragon"},
            {"unexpected": True},
        ],
    )
    async def test_create_pet_is_noop(self, test_client, body):
        response = await test_client.post("/api/pets", json=body)

        assert response.status_code == 204
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_create_pet_without_body(self, test_client):
        response = await test_client.post("/api/pets")

        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_create_pet_rejects_malformed_json(self, test_client):
        response = await test_client.post(
            "/api/pets",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_pet_shape_is_documented(self, test_client):
        response = await test_client.get("/openapi.json")

        schema = response.json()["paths"]["/api/pets"]["post"]["requestBody"]["content"][
            "application/json"
        ]["schema"]
        assert schema["properties"]["kind"]["enum"] == ["cat", "dog"]
        assert set(schema["required"]) == {"name", "kind"}


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        payload = response.json()
        assert payload["status"] == "healthy"
        assert payload["version"] == __version__
        assert payload["uptime_seconds"] >= 0
