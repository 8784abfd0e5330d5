import pytest
from loguru import logger

from ionrpc.rpc.client import IonRpcClient
from ionrpc.rpc.loggers import LOGGERS, RpcLogger, get_logger


@pytest.fixture
def loguru_messages():
    messages: list[str] = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(sink_id)


def test_preset_aliases() -> None:
    assert get_logger("silent") is LOGGERS["none"]
    assert get_logger("verbose") is LOGGERS["debug"]
    assert get_logger("NORMAL") is LOGGERS["normal"]
    assert get_logger(None) is LOGGERS["normal"]


def test_unknown_preset_raises() -> None:
    with pytest.raises(ValueError, match="Unknown logger preset"):
        get_logger("chatty")


def test_none_preset_is_silent(loguru_messages) -> None:
    log = LOGGERS["none"]
    log.info("a")
    log.warn("b")
    log.err("c")
    log.debug("d")
    assert loguru_messages == []


def test_normal_preset_drops_debug(loguru_messages) -> None:
    log = LOGGERS["normal"]
    log.info("hello", 1)
    log.warn("careful")
    log.err("Error", "boom")
    log.debug("hidden")

    lines = [m.strip() for m in loguru_messages]
    assert lines == ["INFO|hello 1", "WARNING|careful", "ERROR|Error boom"]


def test_debug_preset_writes_everything(loguru_messages) -> None:
    LOGGERS["debug"].debug("trace {not a format field}")
    assert [m.strip() for m in loguru_messages] == ["DEBUG|trace {not a format field}"]


def test_client_picks_logger_from_config_or_explicit_object() -> None:
    assert IonRpcClient(logger="none").log is LOGGERS["none"]
    assert IonRpcClient(logger="verbose").log is LOGGERS["debug"]
    custom = RpcLogger()
    assert IonRpcClient(log=custom, logger="debug").log is custom
    assert IonRpcClient().log is LOGGERS["normal"]
