"""JSON-RPC request envelopes and their wire encoding."""

from __future__ import annotations

import json
import math
import random
from dataclasses import dataclass, field
from typing import Any

JSONRPC_VERSION = "2.0"
MAX_REQUEST_ID = 100000


def new_request_id() -> int:
    """Pseudo-random correlation id; not unique over the life of a process."""
    return random.randrange(MAX_REQUEST_ID)


@dataclass
class RpcRequest:
    method: str
    params: list[Any] = field(default_factory=list)
    id: int = field(default_factory=new_request_id)
    batched: bool = False

    def to_payload(self) -> dict[str, Any]:
        # Single calls go out without "jsonrpc"; batch entries carry it.
        if self.batched:
            return {
                "jsonrpc": JSONRPC_VERSION,
                "method": self.method,
                "params": list(self.params),
                "id": self.id,
            }
        return {"method": self.method, "params": list(self.params), "id": self.id}


def _null_non_finite(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _null_non_finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_null_non_finite(v) for v in value]
    return value


def encode_body(payload: dict[str, Any] | list[dict[str, Any]]) -> bytes:
    """Compact UTF-8 JSON; NaN/Infinity are written as null."""
    text = json.dumps(_null_non_finite(payload), separators=(",", ":"), allow_nan=False)
    return text.encode("utf-8")
