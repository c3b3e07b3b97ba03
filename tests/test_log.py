"""Tests for logging configuration"""

import logging

import pytest

from cattags.log import configure_logging


def test_invalid_level(monkeypatch):
    monkeypatch.delenv("LOG_CONFIG", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        configure_logging()


def test_yaml_config(monkeypatch, tmp_path):
    config_file = tmp_path / "logging.yaml"
    config_file.write_text(
        "version: 1\n"
        "disable_existing_loggers: false\n"
        "loggers:\n"
        "  cattags.test:\n"
        "    level: WARNING\n"
    )
    monkeypatch.setenv("LOG_CONFIG", str(config_file))
    configure_logging()
    assert logging.getLogger("cattags.test").level == logging.WARNING
