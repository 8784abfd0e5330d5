"""Synthesis of client methods from the signature table."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from ionrpc.rpc.callspec import parse_signature
from ionrpc.rpc.coercers import ArgType, resolve
from ionrpc.rpc.envelope import RpcRequest
from ionrpc.rpc.errors import CoercionError


def coerce_params(signature: tuple[ArgType, ...], args: tuple[Any, ...]) -> list[Any]:
    """Coerce each declared position once; extra positions pass through."""
    params = list(args)
    for index, arg_type in enumerate(signature[: len(params)]):
        params[index] = resolve(arg_type)(params[index])
    return params


def create_rpc_method(remote_name: str, signature: tuple[ArgType, ...]) -> Callable[..., Any]:
    def rpc_method(self, *args: Any) -> Any:
        try:
            params = coerce_params(signature, args)
        except CoercionError as exc:
            self.log.err("Error", str(exc))
            raise
        return self._submit(RpcRequest(remote_name, params))

    rpc_method.__name__ = remote_name
    rpc_method.__qualname__ = remote_name
    rpc_method.__doc__ = f"Call ``{remote_name}`` ({' '.join(t.value for t in signature) or 'no typed args'})."
    rpc_method._rpc_method = True  # type: ignore[attr-defined]
    return rpc_method


def generate_rpc_methods(cls: type, callspec: Mapping[str, str]) -> type:
    """Attach one method per entry under its declared name and lowercase alias."""
    for name, signature in callspec.items():
        method = create_rpc_method(name.lower(), parse_signature(signature))
        for attr in {name, name.lower()}:
            existing = cls.__dict__.get(attr)
            if existing is not None and not getattr(existing, "_rpc_method", False):
                raise ValueError(f"RPC method {name!r} would shadow {cls.__name__}.{attr}")
            setattr(cls, attr, method)
    cls.callspec = callspec
    return cls
