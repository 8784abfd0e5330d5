"""
ionrpc - JSON-RPC client for the ION coin daemon
"""

__version__ = "0.1.0"
__logo__ = "⚡"

from ionrpc.rpc import IonRpcClient, IonRpcError

__all__ = ["IonRpcClient", "IonRpcError", "__version__"]
