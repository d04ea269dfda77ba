"""
Beverage API: Application Wiring Tests
======================================

What:  Settings, middleware, exception handlers and the app factory.

What we test:
    ✅ Settings validate and normalize LOG_LEVEL, split CORS origins
    ✅ X-Request-ID is echoed or generated
    ✅ Access log level follows the status class
    ✅ ValidationError.from_pydantic_errors builds located problems
    ✅ Application and unexpected errors become generic 500 payloads
    ✅ docs_enabled toggles the OpenAPI endpoints
"""

import logging

import pytest
from httpx import AsyncClient, ASGITransport
from pydantic import ValidationError as PydanticValidationError

from beverage_api.config import Settings
from beverage_api.exceptions import BeverageAPIError, ValidationError
from beverage_api.main import create_app
from beverage_api.middleware.logging import access_level


class TestSettings:

    def test_log_level_is_upper_cased(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError, match="Invalid log_level"):
            Settings(_env_file=None, log_level="chatty")

    def test_port_range_enforced(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, backend_port=80)

    def test_cors_origins_list(self):
        s = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")
        assert s.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("BACKEND_PORT", "9001")
        assert Settings(_env_file=None).backend_port == 9001


class TestRequestID:

    @pytest.mark.asyncio
    async def test_client_id_is_echoed(self, test_client):
        response = await test_client.get("/api/hello", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_id_is_generated(self, test_client):
        response = await test_client.get("/api/hello")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_ids_differ_between_requests(self, test_client):
        first = await test_client.get("/api/hello")
        second = await test_client.get("/api/hello")
        assert first.headers["X-Request-ID"] != second.headers["X-Request-ID"]


class TestAccessLog:

    @pytest.mark.asyncio
    async def test_success_logged_at_info(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="beverage_api.access"):
            await test_client.post("/api/beverages/tea", json={"kind": "green"})

        records = [r for r in caplog.records if r.name == "beverage_api.access"]
        assert records
        assert records[-1].levelno == logging.INFO
        assert records[-1].status == 201
        assert records[-1].path == "/api/beverages/tea"

    @pytest.mark.asyncio
    async def test_validation_failure_logged_at_warning(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="beverage_api.access"):
            await test_client.post("/api/beverages/latte", json={"kind": "iced"})

        records = [r for r in caplog.records if r.name == "beverage_api.access"]
        assert records[-1].levelno == logging.WARNING
        assert records[-1].status == 400

    @pytest.mark.parametrize(
        "status, level",
        [(201, logging.INFO), (204, logging.INFO), (307, logging.INFO),
         (400, logging.WARNING), (405, logging.WARNING), (500, logging.ERROR)],
    )
    def test_access_level_by_status_class(self, status, level):
        assert access_level(status) == level

    @pytest.mark.asyncio
    async def test_health_not_logged(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="beverage_api.access"):
            await test_client.get("/health")

        assert not [r for r in caplog.records if r.name == "beverage_api.access"]


class TestValidationErrorConversion:

    def test_locations_are_dotted(self):
        error = ValidationError.from_pydantic_errors(
            [
                {"loc": ("path", "drink"), "msg": "Input should be 'tea', 'coffee' or 'chai'", "type": "literal_error"},
                {"loc": ("body", "kind"), "msg": "Field required", "type": "missing"},
            ]
        )

        assert error.field == "path.drink"
        assert error.message == (
            "Request validation failed: path.drink: Input should be 'tea', 'coffee' or 'chai'"
        )
        assert error.context["errors"][1] == {
            "location": "body.kind",
            "message": "Field required",
            "type": "missing",
        }

    def test_empty_error_list(self):
        error = ValidationError.from_pydantic_errors([])
        assert error.message == "Request validation failed"
        assert error.context == {"errors": []}
        assert error.field is None


class TestErrorHandlers:
    """Error handlers are exercised through throwaway routes on a fresh app."""

    @pytest.mark.asyncio
    async def test_application_error_is_500(self, app):
        @app.get("/boom/app")
        async def boom_app():
            raise BeverageAPIError("Kettle failed", context={"kettle": 3})

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/boom/app")

        assert response.status_code == 500
        payload = response.json()
        assert payload["error"] == "server_error"
        assert payload["message"] == "Kettle failed"
        assert "kettle" not in str(payload)

    @pytest.mark.asyncio
    async def test_raised_validation_error_is_400(self, app):
        @app.get("/boom/validation")
        async def boom_validation():
            raise ValidationError("Kind is empty", field="body.kind")

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/boom/validation")

        assert response.status_code == 400
        assert response.json()["details"] == {"field": "body.kind"}

    @pytest.mark.asyncio
    async def test_unexpected_error_is_generic_500(self, app, caplog):
        """
        A crashing route still gets the request ID in body and header, and
        exactly one ERROR access record. No exception escapes the app.
        """
        @app.get("/boom/unexpected")
        async def boom_unexpected():
            raise RuntimeError("secret internals")

        transport = ASGITransport(app=app)
        with caplog.at_level(logging.INFO, logger="beverage_api.access"):
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.get(
                    "/boom/unexpected", headers={"X-Request-ID": "rid-9"}
                )

        assert response.status_code == 500
        payload = response.json()
        assert payload["error"] == "internal_server_error"
        assert "secret" not in payload["message"]
        assert payload["request_id"] == "rid-9"
        assert response.headers["X-Request-ID"] == "rid-9"

        records = [r for r in caplog.records if r.name == "beverage_api.access"]
        assert len(records) == 1
        assert records[0].levelno == logging.ERROR
        assert records[0].status == 500
        assert records[0].request_id == "rid-9"
        assert records[0].unhandled is True

    @pytest.mark.asyncio
    async def test_unexpected_error_traceback_logged(self, app, caplog):
        @app.get("/boom/traceback")
        async def boom_traceback():
            raise RuntimeError("kettle melted")

        transport = ASGITransport(app=app)
        with caplog.at_level(logging.ERROR, logger="beverage_api.middleware.request_id"):
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                await client.get("/boom/traceback")

        errors = [r for r in caplog.records if r.name == "beverage_api.middleware.request_id"]
        assert errors
        assert errors[0].exc_info is not None
        assert "kettle melted" in errors[0].getMessage()


class TestAppFactory:

    @pytest.mark.asyncio
    async def test_docs_disabled(self):
        app = create_app(Settings(_env_file=None, docs_enabled=False))

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            assert (await client.get("/openapi.json")).status_code == 404
            assert (await client.get("/docs")).status_code == 404
            assert (await client.get("/api/hello")).status_code == 200

    def test_title_from_settings(self, app):
        assert app.title == "Beverage API (test)"

    @pytest.mark.asyncio
    async def test_cors_preflight(self, test_client):
        response = await test_client.options(
            "/api/beverages/tea",
            headers={
                "Origin": "http://test",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://test"
