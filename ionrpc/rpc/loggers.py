"""Pluggable four-channel logger used by the RPC client.

Presets:
    none    every channel is a no-op
    normal  info/warn/err go to loguru, debug is dropped
    debug   every channel goes to loguru

``silent`` and ``verbose`` are accepted as aliases of ``none`` and ``debug``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from loguru import logger

LogFn = Callable[..., None]


def _noop(*_args: Any) -> None:
    return None


def _sink(emit: Callable[[str], None]) -> LogFn:
    def log(*args: Any) -> None:
        emit(" ".join(str(a) for a in args))

    return log


@dataclass(frozen=True)
class RpcLogger:
    info: LogFn = _noop
    warn: LogFn = _noop
    err: LogFn = _noop
    debug: LogFn = _noop


def _loguru_logger(*, with_debug: bool) -> RpcLogger:
    return RpcLogger(
        info=_sink(lambda msg: logger.info(msg)),
        warn=_sink(lambda msg: logger.warning(msg)),
        err=_sink(lambda msg: logger.error(msg)),
        debug=_sink(lambda msg: logger.debug(msg)) if with_debug else _noop,
    )


LOGGERS: dict[str, RpcLogger] = {
    "none": RpcLogger(),
    "normal": _loguru_logger(with_debug=False),
    "debug": _loguru_logger(with_debug=True),
}

_ALIASES = {"silent": "none", "verbose": "debug"}

DEFAULT_LOGGER = "normal"


def get_logger(name: str | None = None) -> RpcLogger:
    key = (name or DEFAULT_LOGGER).strip().lower()
    key = _ALIASES.get(key, key)
    if key not in LOGGERS:
        raise ValueError(f"Unknown logger preset: {name!r} (expected one of {sorted(LOGGERS)})")
    return LOGGERS[key]
