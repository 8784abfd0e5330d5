import json

import httpx
import pytest

from ionrpc.rpc.client import IonRpcClient
from ionrpc.rpc.dispatcher import RpcDispatcher
from ionrpc.rpc.errors import (
    AuthenticationRejectedError,
    AuthorizationRejectedError,
    IonRpcError,
    RemoteCallError,
    RpcTransportError,
)


def _client(daemon, rpc_log, **kwargs) -> IonRpcClient:
    return IonRpcClient(transport=daemon.transport(), log=rpc_log.as_rpc_logger(), **kwargs)


@pytest.mark.asyncio
async def test_request_shape(daemon, rpc_log) -> None:
    client = _client(daemon, rpc_log, host="10.1.2.3", port=51473, protocol="http")

    await client.getBlockCount()

    request = daemon.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "http://10.1.2.3:51473/"
    assert request.headers["content-type"] == "application/json"
    assert request.headers["content-length"] == str(len(request.content))
    assert "jsonrpc" not in json.loads(request.content)


@pytest.mark.asyncio
async def test_default_base_url_is_https_loopback(daemon, rpc_log) -> None:
    client = _client(daemon, rpc_log)

    await client.ping()

    assert str(daemon.requests[0].url) == "https://127.0.0.1:55003/"


@pytest.mark.asyncio
async def test_non_ascii_params_use_byte_length(daemon, rpc_log) -> None:
    client = _client(daemon, rpc_log)

    await client.signMessageWithPrivKey("key", "héllo ✓")

    request = daemon.requests[0]
    assert request.headers["content-length"] == str(len(request.content))


@pytest.mark.asyncio
async def test_success_with_error_body_is_passed_through(daemon, rpc_log) -> None:
    daemon.handler = lambda request: httpx.Response(
        200, json={"result": None, "error": {"code": -5, "message": "Invalid address"}, "id": 1}
    )
    client = _client(daemon, rpc_log)

    reply = await client.validateAddress("bad")

    assert reply["error"]["code"] == -5
    assert rpc_log.lines["err"] == []


@pytest.mark.asyncio
async def test_401_is_authentication_rejected(daemon, rpc_log) -> None:
    daemon.handler = lambda request: httpx.Response(401, text="")
    client = _client(daemon, rpc_log)

    with pytest.raises(AuthenticationRejectedError) as exc_info:
        await client.getInfo()

    message = str(exc_info.value)
    assert "401" in message
    assert "Unauthorized" in message
    assert exc_info.value.status_code == 401
    assert rpc_log.lines["err"] == [message]


@pytest.mark.asyncio
async def test_403_is_authorization_rejected(daemon, rpc_log) -> None:
    daemon.handler = lambda request: httpx.Response(403, text="Forbidden")
    client = _client(daemon, rpc_log)

    with pytest.raises(AuthorizationRejectedError) as exc_info:
        await client.getInfo()

    assert "403" in str(exc_info.value)
    assert "Forbidden" in str(exc_info.value)
    assert rpc_log.lines["err"] == [str(exc_info.value)]


@pytest.mark.asyncio
async def test_remote_error_exposes_daemon_code(daemon, rpc_log) -> None:
    daemon.handler = lambda request: httpx.Response(
        500, json={"result": None, "error": {"code": -32601, "message": "Method not found"}, "id": 1}
    )
    client = _client(daemon, rpc_log)

    with pytest.raises(RemoteCallError) as exc_info:
        await client.call("doesNotExist")

    error = exc_info.value
    assert error.code == -32601
    assert error.rpc_message == "Method not found"
    assert error.status_code == 500
    assert "Method not found" in str(error)
    assert "-32601" in str(error)
    assert rpc_log.lines["err"] == [str(error)]


@pytest.mark.asyncio
async def test_remote_error_without_json_body(daemon, rpc_log) -> None:
    daemon.handler = lambda request: httpx.Response(502, text="upstream exploded")
    client = _client(daemon, rpc_log)

    with pytest.raises(RemoteCallError) as exc_info:
        await client.getInfo()

    assert exc_info.value.code is None
    assert "upstream exploded" in str(exc_info.value)


@pytest.mark.asyncio
async def test_remote_error_with_empty_body_uses_reason(daemon, rpc_log) -> None:
    daemon.handler = lambda request: httpx.Response(500)
    client = _client(daemon, rpc_log)

    with pytest.raises(RemoteCallError) as exc_info:
        await client.getInfo()

    assert "Internal Server Error" in str(exc_info.value)


@pytest.mark.asyncio
async def test_no_response_is_transport_error(daemon, rpc_log) -> None:
    def refuse(request):
        raise httpx.ConnectError("connection refused by peer", request=request)

    daemon.handler = refuse
    client = _client(daemon, rpc_log)

    with pytest.raises(RpcTransportError) as exc_info:
        await client.getInfo()

    error = exc_info.value
    assert "connection refused by peer" in str(error)
    assert not isinstance(error, (RemoteCallError, AuthenticationRejectedError, AuthorizationRejectedError))
    assert isinstance(error.__cause__, httpx.ConnectError)
    assert rpc_log.lines["err"] == [str(error)]


@pytest.mark.asyncio
async def test_setup_failure_is_logged_and_reraised_unchanged(daemon, rpc_log) -> None:
    dispatcher = RpcDispatcher(
        "http://127.0.0.1:55003",
        user="u",
        password="p",
        log=rpc_log.as_rpc_logger(),
        transport=daemon.transport(),
    )

    with pytest.raises(TypeError) as exc_info:
        await dispatcher.send({"method": "x", "params": [object()], "id": 1})

    assert not isinstance(exc_info.value, IonRpcError)
    assert daemon.requests == []
    assert rpc_log.lines["err"][0].startswith("Error ")


@pytest.mark.asyncio
async def test_request_build_failure_closes_http_client(daemon, rpc_log, monkeypatch) -> None:
    class ClosingTransport(httpx.MockTransport):
        closed = False

        async def aclose(self) -> None:
            self.closed = True

    def broken_build_request(self, *args, **kwargs):
        raise ValueError("bad header")

    monkeypatch.setattr(httpx.AsyncClient, "build_request", broken_build_request)
    transport = ClosingTransport(daemon)
    dispatcher = RpcDispatcher(
        "http://127.0.0.1:55003",
        user="u",
        password="p",
        log=rpc_log.as_rpc_logger(),
        transport=transport,
    )

    with pytest.raises(ValueError, match="bad header"):
        await dispatcher.send({"method": "ping", "params": [], "id": 1})

    assert transport.closed is True
    assert daemon.requests == []
    assert rpc_log.lines["err"] == ["Error bad header"]


@pytest.mark.asyncio
async def test_exactly_one_attempt_per_call(daemon, rpc_log) -> None:
    daemon.handler = lambda request: httpx.Response(500, json={"error": {"code": -1, "message": "busy"}})
    client = _client(daemon, rpc_log)

    with pytest.raises(RemoteCallError):
        await client.getInfo()

    assert len(daemon.requests) == 1


def test_timeout_setting_reaches_transport() -> None:
    client = IonRpcClient(timeout=2.5, logger="none")
    assert client._dispatcher._timeout == 2.5
    assert IonRpcClient(logger="none")._dispatcher._timeout is None
