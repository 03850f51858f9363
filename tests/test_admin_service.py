"""Tests for AdminService."""

import httpx
import pytest

from champion_api import ChampionAPIError


@pytest.mark.asyncio
async def test_reset_state(make_api):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"data": {"status": "reset"}})

    api = make_api(handler)
    result = await api.admin.reset_state()

    assert result == {"status": "reset"}
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/v1/admin/reset"


@pytest.mark.asyncio
async def test_reset_state_empty_body(make_api):
    api = make_api(lambda request: httpx.Response(204))
    assert await api.admin.reset_state() == {}


@pytest.mark.asyncio
async def test_reset_state_forbidden(make_api):
    body = {"errors": [{"code": "forbidden", "message": "Admin disabled"}]}
    api = make_api(lambda request: httpx.Response(403, json=body))

    with pytest.raises(ChampionAPIError) as exc_info:
        await api.admin.reset_state()

    assert exc_info.value.code == "forbidden"
    assert exc_info.value.endpoint == "/admin/reset"
