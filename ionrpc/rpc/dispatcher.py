"""HTTP dispatch of JSON-RPC envelopes to the daemon.

One POST per call, no retries. Replies are classified as:

1. 401 -> AuthenticationRejectedError
2. 403 -> AuthorizationRejectedError
3. other non-2xx -> RemoteCallError (daemon ``error.code`` / ``error.message``)
4. no response -> RpcTransportError
5. failure building the request -> logged and re-raised as is

Classes 1-4 are written to the logger's ``err`` channel before raising.
"""

from __future__ import annotations

from typing import Any

import httpx

from ionrpc.rpc.envelope import encode_body
from ionrpc.rpc.errors import (
    AuthenticationRejectedError,
    AuthorizationRejectedError,
    IonRpcError,
    RemoteCallError,
    RpcTransportError,
)
from ionrpc.rpc.loggers import RpcLogger

Payload = dict[str, Any] | list[dict[str, Any]]


class RpcDispatcher:
    def __init__(
        self,
        base_url: str,
        *,
        user: str,
        password: str,
        log: RpcLogger,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._auth = httpx.BasicAuth(user, password)
        self._log = log
        self._transport = transport
        self._timeout = timeout

    async def send(self, payload: Payload) -> Any:
        """POST ``payload`` (one envelope or a batch list) and return the parsed body."""
        try:
            body = encode_body(payload)
        except Exception as exc:
            self._log.err("Error", str(exc))
            raise

        async with httpx.AsyncClient(
            base_url=self.base_url,
            auth=self._auth,
            transport=self._transport,
            timeout=self._timeout,
        ) as client:
            try:
                request = client.build_request(
                    "POST",
                    "/",
                    content=body,
                    headers={
                        "Content-Type": "application/json",
                        "Content-Length": str(len(body)),
                    },
                )
            except Exception as exc:
                self._log.err("Error", str(exc))
                raise
            self._log.debug(f"rpc -> {self.base_url}/ {body[:200]!r}")
            try:
                response = await client.send(request)
            except httpx.RequestError as exc:
                raise self._fail(RpcTransportError(str(exc))) from exc
            return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        status_code = response.status_code
        if response.is_success:
            try:
                return response.json()
            except ValueError:
                return response.text
        if status_code == 401:
            raise self._fail(AuthenticationRejectedError())
        if status_code == 403:
            raise self._fail(AuthorizationRejectedError())
        code, message = self._extract_error(response)
        raise self._fail(RemoteCallError(code, message, status_code=status_code))

    def _fail(self, error: IonRpcError) -> IonRpcError:
        self._log.err(str(error))
        return error

    @staticmethod
    def _extract_error(response: httpx.Response) -> tuple[Any, str]:
        body: Any = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            err = body.get("error")
            if isinstance(err, dict):
                return err.get("code"), str(err.get("message") or "")
            if isinstance(err, str) and err.strip():
                return None, err.strip()
        text = (response.text or "").strip()
        if text:
            return None, text[:200]
        return None, response.reason_phrase or f"HTTP {response.status_code}"
