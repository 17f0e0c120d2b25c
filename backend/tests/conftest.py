"""Test fixtures for the backend test suite."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from backend.api.config import Settings
from backend.api.dependencies import get_settings
from backend.api.main import app


@pytest.fixture
def small_batch_limit() -> Generator[Settings, None, None]:
    """Override settings so batch conversions are capped at 3 values."""
    settings = Settings(max_batch_size=3)
    app.dependency_overrides[get_settings] = lambda: settings
    yield settings
    app.dependency_overrides.pop(get_settings, None)


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Yield an async HTTP test client wired to the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
