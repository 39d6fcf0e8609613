from typing import Any

import pytest


@pytest.mark.asyncio
async def test_healthz(test_client: Any) -> None:
    """Verify that the health check endpoint responds with 200 OK."""
    response = await test_client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_openapi_lists_import_endpoint(test_client: Any) -> None:
    """The import endpoint is part of the published API schema."""
    response = await test_client.get("/openapi.json")
    assert response.status_code == 200
    assert "/api/import" in response.json()["paths"]
