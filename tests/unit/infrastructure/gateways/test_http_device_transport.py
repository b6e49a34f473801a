from __future__ import annotations

from typing import Any, Dict, List

import httpx
import pytest

from valetudo.domain.entities.errors import DeviceTransportError
from valetudo.infrastructure.gateways.http_device_transport import HttpDeviceTransport


class _StubResponse:
    def __init__(self, status_code: int, json_data: Any):
        self.status_code = status_code
        self._json = json_data

    def json(self) -> Any:
        return self._json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            request = httpx.Request("POST", "http://bridge/rpc")
            response = httpx.Response(self.status_code, request=request, text="error")
            raise httpx.HTTPStatusError("error", request=request, response=response)


class _StubAsyncClient:
    def __init__(self, response: _StubResponse, calls: List[Dict[str, Any]]):
        self._response = response
        self._calls = calls

    async def __aenter__(self) -> "_StubAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def post(self, url: str, json: Dict[str, Any]):
        self._calls.append({"url": url, "json": json})
        return self._response


def _patch_client(monkeypatch, response: _StubResponse) -> List[Dict[str, Any]]:
    calls: List[Dict[str, Any]] = []
    monkeypatch.setattr(
        "httpx.AsyncClient",
        lambda timeout: _StubAsyncClient(response, calls),
    )
    return calls


@pytest.mark.asyncio
async def test_send_command_posts_rpc_and_returns_result(monkeypatch) -> None:
    calls = _patch_client(monkeypatch, _StubResponse(200, {"id": 1, "result": ["ok"]}))
    transport = HttpDeviceTransport("http://bridge/")

    result = await transport.send_command("find_me", [""])
    await transport.send_command("app_start")

    assert result == ["ok"]
    assert calls[0] == {
        "url": "http://bridge/rpc",
        "json": {"id": 1, "method": "find_me", "params": [""]},
    }
    assert calls[1]["json"] == {"id": 2, "method": "app_start", "params": []}


@pytest.mark.asyncio
async def test_send_command_raises_on_http_error(monkeypatch) -> None:
    _patch_client(monkeypatch, _StubResponse(502, {}))
    transport = HttpDeviceTransport("http://bridge")

    with pytest.raises(DeviceTransportError) as exc:
        await transport.send_command("app_start")

    assert "HTTP 502" in exc.value.message


@pytest.mark.asyncio
async def test_send_command_raises_on_device_error(monkeypatch) -> None:
    _patch_client(
        monkeypatch,
        _StubResponse(200, {"id": 1, "error": {"code": -1, "message": "busy"}}),
    )
    transport = HttpDeviceTransport("http://bridge")

    with pytest.raises(DeviceTransportError) as exc:
        await transport.send_command("app_start")

    assert exc.value.message == "Device rejected app_start: busy"


@pytest.mark.asyncio
async def test_send_command_raises_on_malformed_body(monkeypatch) -> None:
    _patch_client(monkeypatch, _StubResponse(200, ["not", "an", "object"]))
    transport = HttpDeviceTransport("http://bridge")

    with pytest.raises(DeviceTransportError):
        await transport.send_command("get_status")


@pytest.mark.asyncio
async def test_send_command_wraps_request_errors(monkeypatch) -> None:
    class _FailingClient(_StubAsyncClient):
        async def post(self, url: str, json: Dict[str, Any]):
            raise httpx.ConnectError("connection refused")

    monkeypatch.setattr(
        "httpx.AsyncClient",
        lambda timeout: _FailingClient(_StubResponse(200, {}), []),
    )
    transport = HttpDeviceTransport("http://bridge")

    with pytest.raises(DeviceTransportError) as exc:
        await transport.send_command("app_start")

    assert "connection refused" in exc.value.message


@pytest.mark.asyncio
async def test_send_command_raises_on_non_json_reply(monkeypatch) -> None:
    class _HtmlResponse(_StubResponse):
        def json(self) -> Any:
            return httpx.Response(200, text="<html>bridge</html>").json()

    _patch_client(monkeypatch, _HtmlResponse(200, None))
    transport = HttpDeviceTransport("http://bridge")

    with pytest.raises(DeviceTransportError) as exc:
        await transport.send_command("get_status")

    assert exc.value.message == "Malformed response from device bridge"
