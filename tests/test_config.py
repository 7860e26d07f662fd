from __future__ import annotations

import logging
from collections.abc import Iterator
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from iprange import config
from iprange.config import Settings, get_settings, load_env_file, set_settings
from iprange.logging_config import setup_logging


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("IPRANGE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("IPRANGE_LOG_FILE", raising=False)
    settings = Settings.from_env()
    assert settings.log_level == "WARNING"
    assert settings.log_file is None


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IPRANGE_LOG_LEVEL", "info")
    monkeypatch.setenv("IPRANGE_LOG_FILE", "/tmp/iprange.log")
    settings = Settings.from_env()
    assert settings.log_level == "INFO"
    assert settings.log_file == "/tmp/iprange.log"


def test_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("IPRANGE_LOG_LEVEL", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("IPRANGE_LOG_LEVEL=error\n")
    monkeypatch.setattr(config, "ENV_LOCATIONS", [tmp_path / "missing" / ".env", env_file])
    set_settings(None)
    try:
        assert load_env_file() == env_file
        assert get_settings().log_level == "ERROR"
    finally:
        set_settings(None)
        monkeypatch.delenv("IPRANGE_LOG_LEVEL", raising=False)


def test_set_settings() -> None:
    custom = Settings(log_level="DEBUG")
    set_settings(custom)
    try:
        assert get_settings() is custom
    finally:
        set_settings(None)


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("iprange")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_setup_logging(package_logger: logging.Logger, tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "iprange.log"
    logger = setup_logging(level="debug", log_file=str(log_file), enable_console=False)
    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert not logger.propagate

    logging.getLogger("iprange.core").debug("hello from core")
    contents = log_file.read_text()
    assert "hello from core" in contents
    assert "| DEBUG    |" in contents
    assert "test_setup_logging" in contents


def test_setup_logging_closes_replaced_handlers(package_logger: logging.Logger, tmp_path: Path) -> None:
    setup_logging(log_file=str(tmp_path / "first.log"), enable_console=False)
    (first,) = package_logger.handlers
    assert isinstance(first, RotatingFileHandler)

    setup_logging(log_file=str(tmp_path / "second.log"), enable_console=False)
    assert first not in package_logger.handlers
    assert first.stream is None
    assert len(package_logger.handlers) == 1
