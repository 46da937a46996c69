"""
Testes para o endpoint de healthcheck.
"""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient


@pytest.mark.anyio
async def test_health_check_returns_healthy_status(client: AsyncClient):
    """Verifica se o /health retorna 'healthy' com o banco disponível."""
    with patch("catalog.main.check_database_connection", AsyncMock(return_value=(True, None))):
        response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "ok"


@pytest.mark.anyio
async def test_health_check_degraded_without_database(client: AsyncClient):
    """Verifica se o /health retorna 'degraded' sem banco."""
    with patch(
        "catalog.main.check_database_connection",
        AsyncMock(return_value=(False, "connection refused")),
    ):
        response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "degraded"
    assert data["database"] == "unavailable"


@pytest.mark.anyio
async def test_health_check_returns_app_info(client: AsyncClient):
    """Verifica se o /health retorna informações da aplicação."""
    with patch("catalog.main.check_database_connection", AsyncMock(return_value=(True, None))):
        response = await client.get("/health")

    data = response.json()
    assert data["app_name"] == "Book Catalog API"
    assert "environment" in data
