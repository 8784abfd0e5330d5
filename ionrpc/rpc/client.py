"""ION daemon JSON-RPC client.

Every entry of :data:`ionrpc.rpc.callspec.CALLSPEC` becomes a method under its
declared name and its lowercase alias::

    client = IonRpcClient(host="127.0.0.1", port=51473, user="rpc", password="secret")
    height = await client.getBlockCount()
    block = await client.getblock(block_hash, 1)

Inside :meth:`IonRpcClient.batch` the same methods queue their call and
return ``None``; the queue is sent as one array request when the callback
finishes::

    replies = await client.batch(lambda rpc: [rpc.getBlockHash(h) for h in range(3)])
"""

from __future__ import annotations

import inspect
from pathlib import Path
from typing import Any, Awaitable, Callable

import httpx

from ionrpc.config.schema import ClientConfig
from ionrpc.rpc.batch import BatchAccumulator
from ionrpc.rpc.callspec import CALLSPEC, find_method, parse_signature
from ionrpc.rpc.dispatcher import RpcDispatcher
from ionrpc.rpc.envelope import RpcRequest
from ionrpc.rpc.errors import CoercionError
from ionrpc.rpc.loggers import RpcLogger, get_logger
from ionrpc.rpc.methods import coerce_params, generate_rpc_methods


def _override(config: ClientConfig, options: dict[str, Any]) -> ClientConfig:
    merged = config.model_dump(by_alias=True)
    for key, value in options.items():
        field = "pass" if key == "password" else key
        if field not in merged:
            raise TypeError(f"Unknown client option: {key!r}")
        merged[field] = value
    return ClientConfig.model_validate(merged)


class IonRpcClient:
    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        log: RpcLogger | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **options: Any,
    ) -> None:
        base = config or ClientConfig()
        if options:
            base = _override(base, options)
        self.config = base
        self.log = log or get_logger(base.logger)
        self._batch = BatchAccumulator()
        self._dispatcher = RpcDispatcher(
            base.base_url,
            user=base.user,
            password=base.password,
            log=self.log,
            transport=transport,
            timeout=base.timeout,
        )

    @classmethod
    def from_config(cls, config_path: Path | None = None, **kwargs: Any) -> IonRpcClient:
        """Build a client from ~/.ionrpc/config.json and IONRPC_* overrides."""
        from ionrpc.config.access import get_client_config

        return cls(get_client_config(config_path=config_path), **kwargs)

    @property
    def batching(self) -> bool:
        return self._batch.active

    def method_names(self) -> list[str]:
        return list(self.callspec)

    def call(self, method: str, *params: Any) -> Awaitable[Any] | None:
        """Generic entry point; known methods are coerced with their signature."""
        declared = find_method(method, self.callspec)
        if declared is None:
            return self._submit(RpcRequest(method.lower(), list(params)))
        try:
            coerced = coerce_params(parse_signature(self.callspec[declared]), params)
        except CoercionError as exc:
            self.log.err("Error", str(exc))
            raise
        return self._submit(RpcRequest(declared.lower(), coerced))

    async def batch(self, callback: Callable[[IonRpcClient], Any]) -> Any:
        """Run ``callback(self)`` in batch mode and send the queued calls as one request.

        Only one batch may run per client at a time; calls made from other
        tasks while the callback runs are queued into it as well. The client
        is idle again once the callback returns, so calls made while the
        batch request is in flight are sent on their own.
        """
        self._batch.start()
        try:
            outcome = callback(self)
            if inspect.isawaitable(outcome):
                await outcome
            payload = self._batch.payload()
        finally:
            self._batch.reset()
        self.log.debug(f"flushing batch of {len(payload)} calls")
        return await self._dispatcher.send(payload)

    def _submit(self, request: RpcRequest) -> Awaitable[Any] | None:
        if self._batch.active:
            self._batch.add(request)
            return None
        return self._dispatcher.send(request.to_payload())

    def __repr__(self) -> str:
        return f"<IonRpcClient {self.config.base_url} user={self.config.user!r}>"


generate_rpc_methods(IonRpcClient, CALLSPEC)
