"""Pytest configuration and fixtures."""

import httpx
import pytest

from champion_api import ChampionAPI, Settings

BASE_URL = "http://localhost:3000/v1"


@pytest.fixture
def settings():
    """Settings that ignore the caller's environment and .env file."""
    return Settings(_env_file=None, base_url=BASE_URL)


@pytest.fixture
async def make_api(settings):
    """Build a ChampionAPI whose HTTP traffic goes to `handler`.

    The handler receives the `httpx.Request` and returns an `httpx.Response`
    (or raises an httpx exception to simulate transport failures).
    """
    clients = []

    def _make(handler):
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            base_url=BASE_URL,
        )
        clients.append(http_client)
        return ChampionAPI(base_url=BASE_URL, http_client=http_client, settings=settings)

    yield _make

    for client in clients:
        await client.aclose()
