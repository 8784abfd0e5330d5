"""Error types raised by the ION JSON-RPC client."""

from __future__ import annotations

from typing import Any

ERROR_PREFIX = "ION JSON-RPC:"


class IonRpcError(RuntimeError):
    """Base class for every error surfaced by the client."""

    def __init__(
        self,
        message: str,
        *,
        code: Any = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code


class AuthenticationRejectedError(IonRpcError):
    """Daemon answered 401: credentials were rejected."""

    def __init__(self) -> None:
        super().__init__(
            f"{ERROR_PREFIX} Connection Rejected: 401 Unauthorized",
            code="UNAUTHORIZED",
            status_code=401,
        )


class AuthorizationRejectedError(IonRpcError):
    """Daemon answered 403: the caller may not use the RPC interface."""

    def __init__(self) -> None:
        super().__init__(
            f"{ERROR_PREFIX} Connection Rejected: 403 Forbidden",
            code="FORBIDDEN",
            status_code=403,
        )


class RemoteCallError(IonRpcError):
    """Non-2xx reply carrying the daemon's structured JSON-RPC error."""

    def __init__(self, code: Any, rpc_message: str, *, status_code: int | None = None) -> None:
        super().__init__(
            f"{ERROR_PREFIX} Connection Rejected: {code} {rpc_message}",
            code=code,
            status_code=status_code,
        )
        self.rpc_message = rpc_message


class RpcTransportError(IonRpcError):
    """The request went out but no response came back."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"{ERROR_PREFIX} Request Error: {detail}", code="TRANSPORT_ERROR")
        self.detail = detail


class RpcSetupError(IonRpcError):
    """Failure before any request was sent."""

    def __init__(self, message: str, *, code: Any = "SETUP_ERROR") -> None:
        super().__init__(message, code=code)


class CoercionError(RpcSetupError):
    """An argument could not be converted to its declared type."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="COERCION_ERROR")


class BatchInProgressError(RpcSetupError):
    """A batch was started while another one on the same client is still running."""

    def __init__(self) -> None:
        super().__init__(
            f"{ERROR_PREFIX} a batch is already in progress on this client",
            code="BATCH_IN_PROGRESS",
        )
