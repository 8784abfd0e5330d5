"""JSON-RPC client for the ION daemon."""

from ionrpc.rpc.client import IonRpcClient
from ionrpc.rpc.errors import (
    AuthenticationRejectedError,
    AuthorizationRejectedError,
    BatchInProgressError,
    CoercionError,
    IonRpcError,
    RemoteCallError,
    RpcSetupError,
    RpcTransportError,
)
from ionrpc.rpc.loggers import LOGGERS, RpcLogger, get_logger

__all__ = [
    "IonRpcClient",
    "IonRpcError",
    "AuthenticationRejectedError",
    "AuthorizationRejectedError",
    "RemoteCallError",
    "RpcTransportError",
    "RpcSetupError",
    "CoercionError",
    "BatchInProgressError",
    "RpcLogger",
    "LOGGERS",
    "get_logger",
]
