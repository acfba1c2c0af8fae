"""Tests for logging configuration and the command-line entry point."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from unsplash_connector import main as main_module
from unsplash_connector.config import get_settings
from unsplash_connector.logging import configure_logging, get_logger


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def fresh_settings(monkeypatch):
    get_settings.cache_clear()
    monkeypatch.setattr(main_module, "configure_logging", lambda: None)
    yield monkeypatch
    get_settings.cache_clear()


def test_configure_logging_outputs_json(capsys, restore_logging):
    configure_logging()
    logger = structlog.get_logger()
    logger.info("unit-test", foo="bar")
    err = capsys.readouterr().err
    payload = json.loads(err.strip().splitlines()[-1])
    assert payload["event"] == "unit-test"
    assert payload["foo"] == "bar"
    assert payload["level"] == "info"


def test_parser_accepts_search_filters():
    args = main_module.build_parser().parse_args(
        ["search", "mountains", "--orientation", "landscape", "--page", "2"]
    )
    assert args.command == "search"
    assert args.query == "mountains"
    assert args.orientation == "landscape"
    assert args.page == 2


def test_main_prints_filters(capsys, fresh_settings):
    fresh_settings.setenv("UNSPLASH_ACCESS_KEY", "key")

    exit_code = main_module.main(["--locale", "de", "filters"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["orientation"]["label"] == "Ausrichtung"


def test_main_empty_search_fails_without_network(capsys, fresh_settings):
    fresh_settings.setenv("UNSPLASH_ACCESS_KEY", "key")

    exit_code = main_module.main(["search", "  "])

    assert exit_code == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["success"] is False


def test_main_reports_missing_access_key(fresh_settings, tmp_path):
    fresh_settings.delenv("UNSPLASH_ACCESS_KEY", raising=False)
    fresh_settings.chdir(tmp_path)

    assert main_module.main(["filters"]) == 2


def test_main_rejects_unknown_locale(fresh_settings, capsys):
    fresh_settings.setenv("UNSPLASH_ACCESS_KEY", "key")

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["--locale", "xx", "filters"])

    assert excinfo.value.code == 2
    assert "unsupported locale" in capsys.readouterr().err


def test_connector_logger_carries_component(capsys, restore_logging):
    configure_logging()
    get_logger(asset_id="a1").warning("unit-test")

    payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert payload["component"] == "unsplash_connector"
    assert payload["asset_id"] == "a1"
