"""Shared fixtures: fake daemon transport, recording logger, isolated home."""

import json
import os

import httpx
import pytest

from ionrpc.config import clear_config_cache
from ionrpc.rpc.loggers import RpcLogger


class FakeDaemon:
    """Records every request and answers through a swappable handler."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler = self.echo

    @staticmethod
    def echo(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        if isinstance(body, list):
            return httpx.Response(200, json=[{"result": i, "error": None, "id": c["id"]} for i, c in enumerate(body)])
        return httpx.Response(200, json={"result": body["params"], "error": None, "id": body["id"]})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def bodies(self) -> list:
        return [json.loads(r.content) for r in self.requests]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


class RecordingLogger:
    def __init__(self):
        self.lines: dict[str, list[str]] = {"info": [], "warn": [], "err": [], "debug": []}

    def as_rpc_logger(self) -> RpcLogger:
        def channel(name):
            return lambda *args: self.lines[name].append(" ".join(str(a) for a in args))

        return RpcLogger(
            info=channel("info"),
            warn=channel("warn"),
            err=channel("err"),
            debug=channel("debug"),
        )


@pytest.fixture
def daemon() -> FakeDaemon:
    return FakeDaemon()


@pytest.fixture
def rpc_log() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point ~ at a temp dir so config files never touch the real home."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path)
    for key in list(os.environ):
        if key.startswith("IONRPC_"):
            monkeypatch.delenv(key)
    clear_config_cache()
    yield tmp_path
    clear_config_cache()
