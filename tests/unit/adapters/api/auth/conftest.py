import httpx
import pytest_asyncio

from authcore.main import app


@pytest_asyncio.fixture
async def async_client():
    """Provides an async test client; dependency overrides are reset afterwards."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
