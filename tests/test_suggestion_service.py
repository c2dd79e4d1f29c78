"""SuggestionService: upstream proxying with escaped query and status mapping."""

import httpx
import pytest

from controller.controller_dependencies import get_suggestion_service
from main import app
from service.suggestion_service import SuggestionService
from util.errors import AppError

TEMPLATE = "https://suggest.example/complete?q=%s"


def _service(handler):
    return SuggestionService(TEMPLATE, transport=httpx.MockTransport(handler))


async def test_suggest_passes_upstream_body_through():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        return httpx.Response(200, content=b'["fast",["fastapi"]]')

    body = await _service(handler).suggest("fast api")

    assert body == b'["fast",["fastapi"]]'
    assert seen["url"] == "https://suggest.example/complete?q=fast+api"


async def test_upstream_error_status_is_propagated():
    svc = _service(lambda request: httpx.Response(503))
    with pytest.raises(AppError) as exc:
        await svc.suggest("x")
    assert exc.value.status_code == 503


async def test_transport_failure_is_bad_gateway():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(AppError) as exc:
        await _service(handler).suggest("x")
    assert exc.value.status_code == 502


async def test_suggest_route_uses_service(client):
    app.dependency_overrides[get_suggestion_service] = lambda: _service(
        lambda request: httpx.Response(200, content=b"[]")
    )

    res = await client.get("/suggest", params={"q": "x"})

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    assert res.content == b"[]"


async def test_upstream_redirect_is_followed():
    def handler(request):
        if request.url.host == "suggest.example":
            return httpx.Response(301, headers={"location": "https://moved.example/complete?q=x"})
        return httpx.Response(200, content=b'["x",[]]')

    assert await _service(handler).suggest("x") == b'["x",[]]'
