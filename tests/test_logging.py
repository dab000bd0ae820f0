import logging

import pytest

from ordstat import config as os_config
from ordstat.logging import get_logger


def test_logger_respects_runtime_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ORDSTAT_LOG_LEVEL", "DEBUG")
    os_config.reset_runtime_config_cache()

    logger = get_logger("tests.logging")

    assert logger.level == logging.DEBUG
    assert logger.name == "ordstat.tests.logging"

    os_config.reset_runtime_config_cache()


def test_root_logger_has_single_handler(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ORDSTAT_LOG_LEVEL", "WARNING")
    os_config.reset_runtime_config_cache()
    get_logger()
    os_config.reset_runtime_config_cache()
    root = get_logger()

    assert root.name == "ordstat"
    assert len(root.handlers) == 1


def test_clamped_unique_rank_is_logged(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture):
    from ordstat import partial_rank_unique

    monkeypatch.setenv("ORDSTAT_LOG_LEVEL", "DEBUG")
    os_config.reset_runtime_config_cache()
    get_logger("api")

    with caplog.at_level(logging.DEBUG, logger="ordstat.api"):
        result = partial_rank_unique([3, 3, 3], 2)

    assert result.k_actual == 1
    assert "2 distinct values requested, 1 available" in caplog.text


def test_area_loggers_share_the_package_handler(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ORDSTAT_LOG_LEVEL", "ERROR")
    os_config.reset_runtime_config_cache()

    logger = get_logger("shuffle")

    assert logger.name == "ordstat.shuffle"
    assert logger.level == logging.ERROR
    assert not logger.handlers
    assert logger.parent is get_logger()
