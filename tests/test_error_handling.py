"""Global exception handling through a throwaway FastAPI app."""

from __future__ import annotations

from unittest.mock import patch

from fastapi import FastAPI, HTTPException, status
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from core.error_handler import (
    ExceptionNormalizationMiddleware,
    global_exception_handler,
)
from core.exceptions import CatalogUnavailableError, DomainError
from core.middleware import CorrelationIdMiddleware


class Trip(BaseModel):
    destination: str = Field(min_length=2)
    duration: int = Field(ge=1)


def build_test_app(env: str) -> TestClient:
    app = FastAPI()
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(ExceptionNormalizationMiddleware)
    app.add_exception_handler(Exception, global_exception_handler)
    app.add_exception_handler(HTTPException, global_exception_handler)
    app.add_exception_handler(RequestValidationError, global_exception_handler)

    @app.post("/trips")
    async def create_trip(trip: Trip):  # pragma: no cover - executed via client
        return {"ok": True, "trip": trip.model_dump()}

    @app.get("/catalog-down")
    async def catalog_down():
        raise CatalogUnavailableError("connection refused")

    @app.get("/domain")
    async def domain():
        raise DomainError("Unsupported destination")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("Exploded with secret=should_not_leak")

    @app.get("/missing")
    async def missing():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Nope")

    client = TestClient(app)

    patcher = patch("core.error_handler.get_settings")
    mocked = patcher.start()
    mocked.return_value.ENVIRONMENT = env
    client._finalizer = patcher.stop  # type: ignore[attr-defined]
    return client


def test_validation_error_production():
    client = build_test_app("production")
    resp = client.post("/trips", json={"destination": "X", "duration": 0})
    assert resp.status_code == 422
    data = resp.json()
    assert data["error"]["type"] == "validation_error"
    assert "validation_errors" not in data["error"]


def test_validation_error_development():
    client = build_test_app("development")
    resp = client.post("/trips", json={"destination": "X", "duration": 0})
    assert resp.status_code == 422
    locs = [e["loc"] for e in resp.json()["error"]["validation_errors"]]
    assert ["body", "destination"] in locs
    assert ["body", "duration"] in locs


def test_catalog_unavailable_is_503():
    client = build_test_app("production")
    resp = client.get("/catalog-down")
    assert resp.status_code == 503
    body = resp.json()
    assert body["error"]["type"] == "domain_error"
    assert body["message"] == "The destination catalog is temporarily unavailable"
    assert "connection refused" not in str(body)


def test_plain_domain_error_is_400():
    client = build_test_app("development")
    resp = client.get("/domain")
    assert resp.status_code == 400
    assert resp.json()["error"]["type"] == "domain_error"


def test_generic_exception_production():
    client = build_test_app("production")
    resp = client.get("/boom")
    assert resp.status_code == 500
    body = resp.json()
    assert body["error"]["type"] == "internal_server_error"
    assert "traceback" not in body["error"]
    assert "secret=should_not_leak" not in str(body)


def test_generic_exception_development():
    client = build_test_app("development")
    resp = client.get("/boom")
    assert resp.status_code == 500
    body = resp.json()
    assert "traceback" in body["error"]
    assert body["error"]["exception_type"] == "RuntimeError"


def test_http_error_keeps_status_and_correlation_id():
    client = build_test_app("production")
    resp = client.get("/missing", headers={"X-Correlation-ID": "trace-me"})
    assert resp.status_code == 404
    body = resp.json()
    assert body["error"] == {"correlation_id": "trace-me", "type": "http_error"}
    assert resp.headers["X-Correlation-ID"] == "trace-me"
