"""
Unit tests for FastAPI application setup and configuration.

This test suite verifies the application structure and wiring:
- build_app() creates properly configured FastAPI instance
- Application metadata (title, version, docs URLs)
- Router registration (health, banks and credit with correct prefixes)
- OpenAPI schema generation
- Shutdown releases the quote executor and the database engine
"""

from __future__ import annotations

from unittest.mock import patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

from cliquea_credit.entrypoints.http.app import build_app
from cliquea_credit.entrypoints.http.dependencies import get_quote_executor


# ==============================================================================
# Application Creation
# ==============================================================================


def test_build_app_returns_fastapi_instance() -> None:
    """build_app() returns a FastAPI application instance."""
    assert isinstance(build_app(), FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    """build_app() creates a new app instance for each call (not cached)."""
    assert build_app() is not build_app()


# ==============================================================================
# Application Metadata
# ==============================================================================


def test_app_metadata() -> None:
    """Application has title, version, contact and license."""
    app = build_app()

    assert app.title == "Cliquea Credit API"
    assert app.version == "0.1.0"
    assert "Vehicle credit comparison" in app.description
    assert app.contact == {"name": "Cliquea Team", "email": "dev@cliquea.mx"}
    assert app.license_info == {"name": "Proprietary"}


def test_app_documentation_urls() -> None:
    """Swagger UI, ReDoc and the OpenAPI schema are enabled."""
    app = build_app()

    assert app.docs_url == "/docs"
    assert app.redoc_url == "/redoc"
    assert app.openapi_url == "/openapi.json"


def test_app_documentation_endpoints_are_accessible() -> None:
    """Documentation endpoints respond."""
    client = TestClient(build_app())

    assert client.get("/docs").status_code == 200
    assert client.get("/redoc").status_code == 200

    response = client.get("/openapi.json")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"


# ==============================================================================
# Router Registration
# ==============================================================================


def test_app_registers_versioned_routes() -> None:
    """Business routes live under /v1; health does not."""
    schema = TestClient(build_app()).get("/openapi.json").json()
    paths = schema["paths"]

    assert "/health" in paths
    assert "/v1/banks" in paths
    assert "/v1/credit/comparison" in paths
    assert "/v1/credit/amortization" in paths
    assert "/banks" not in paths


def test_app_openapi_documents_credit_endpoints() -> None:
    """Credit endpoints are POST, tagged and summarized."""
    schema = TestClient(build_app()).get("/openapi.json").json()

    comparison = schema["paths"]["/v1/credit/comparison"]["post"]
    assert comparison["tags"] == ["Credit"]
    assert comparison["summary"] == "Compare bank financing offers"
    assert "404" in comparison["responses"]
    assert "422" in comparison["responses"]

    banks = schema["paths"]["/v1/banks"]["get"]
    assert banks["tags"] == ["Banks"]


def test_health_endpoint_responds() -> None:
    """Health check works without a database."""
    response = TestClient(build_app()).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


# ==============================================================================
# Lifespan
# ==============================================================================


def test_shutdown_disposes_engine() -> None:
    """Leaving the app context disposes the database engine."""
    with patch("cliquea_credit.entrypoints.http.app.dispose_engine") as mock_dispose:
        with TestClient(build_app()):
            mock_dispose.assert_not_called()

    mock_dispose.assert_called_once()


def test_shutdown_stops_quote_executor(monkeypatch) -> None:
    """A quote executor created during the app's life is shut down."""
    monkeypatch.setenv("COMPARISON_WORKERS", "2")
    get_quote_executor.cache_clear()

    with patch("cliquea_credit.entrypoints.http.app.dispose_engine"):
        with TestClient(build_app()):
            executor = get_quote_executor()
            assert executor is not None

    assert get_quote_executor.cache_info().currsize == 0
    assert executor._shutdown  # type: ignore[union-attr]
