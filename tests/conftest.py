from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from users_api.config import get_settings
from users_api.main import app
from users_api.observability.metrics import reset_metrics
from users_api.store.memory import reset_user_store


@pytest.fixture(autouse=True)
def test_environment() -> None:
    get_settings.cache_clear()
    reset_user_store()
    reset_metrics()

    yield

    reset_user_store()
    reset_metrics()
    get_settings.cache_clear()


@pytest.fixture
async def api_client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
