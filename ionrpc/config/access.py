"""Process-wide cache of the loaded ionrpc config.

Entries are keyed by the resolved config file path and stamped with the
file's modification time and the current ``IONRPC_*`` environment. A read
whose stamp differs from the cached one reloads, so edits made by another
process and changed environment overrides are picked up without an
explicit cache clear.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path

from ionrpc.config.loader import get_config_path, load_config
from ionrpc.config.schema import ClientConfig, Config

ENV_PREFIX = "IONRPC_"

Stamp = tuple[int | None, tuple[tuple[str, str], ...]]

_lock = threading.RLock()
_entries: dict[Path, tuple[Stamp, Config]] = {}


def _resolve(config_path: Path | None) -> Path:
    return Path(config_path or get_config_path()).expanduser().resolve()


def _stamp(path: Path) -> Stamp:
    try:
        mtime: int | None = path.stat().st_mtime_ns
    except FileNotFoundError:
        mtime = None
    overrides = tuple(sorted((k, v) for k, v in os.environ.items() if k.startswith(ENV_PREFIX)))
    return mtime, overrides


def get_config(*, config_path: Path | None = None, force_reload: bool = False) -> Config:
    path = _resolve(config_path)
    stamp = _stamp(path)
    with _lock:
        entry = _entries.get(path)
        if force_reload or entry is None or entry[0] != stamp:
            entry = (stamp, load_config(path))
            _entries[path] = entry
        return entry[1]


def get_client_config(*, config_path: Path | None = None) -> ClientConfig:
    """Connection settings for :class:`ionrpc.rpc.client.IonRpcClient`."""
    return get_config(config_path=config_path).rpc


def clear_config_cache(*, config_path: Path | None = None) -> None:
    with _lock:
        if config_path is None:
            _entries.clear()
        else:
            _entries.pop(_resolve(config_path), None)
