"""Batch accumulator: queue of pending calls while a batch is running."""

from __future__ import annotations

from typing import Any

from ionrpc.rpc.envelope import RpcRequest
from ionrpc.rpc.errors import BatchInProgressError


class BatchAccumulator:
    """Idle while the queue is ``None``, batching while it is a list."""

    def __init__(self) -> None:
        self._queue: list[RpcRequest] | None = None

    @property
    def active(self) -> bool:
        return self._queue is not None

    def __len__(self) -> int:
        return len(self._queue or [])

    def start(self) -> None:
        if self._queue is not None:
            raise BatchInProgressError()
        self._queue = []

    def add(self, request: RpcRequest) -> None:
        if self._queue is None:
            raise RuntimeError("no batch in progress")
        request.batched = True
        self._queue.append(request)

    def payload(self) -> list[dict[str, Any]]:
        return [request.to_payload() for request in self._queue or []]

    def reset(self) -> None:
        self._queue = None
