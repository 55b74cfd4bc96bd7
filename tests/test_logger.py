"""Tests for gh-releases logging helpers."""

import logging

import pytest

from gh_releases.logger import (
    LOG_COLORS,
    ROOT_LOGGER_NAME,
    ColoredConsoleFormatter,
    get_logger,
    setup_logging,
)


def test_package_logger_has_null_handler():
    root = logging.getLogger(ROOT_LOGGER_NAME)

    assert any(isinstance(h, logging.NullHandler) for h in root.handlers)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("gh_releases", "gh_releases"),
        ("gh_releases.client", "gh_releases.client"),
        ("scripts.fetch", "gh_releases.scripts.fetch"),
    ],
)
def test_get_logger_names(name, expected):
    assert get_logger(name).name == expected


def test_setup_logging_is_idempotent():
    root = setup_logging("INFO")
    setup_logging("DEBUG")

    console_handlers = [
        h
        for h in root.handlers
        if isinstance(h.formatter, ColoredConsoleFormatter)
    ]
    assert len(console_handlers) == 1
    assert console_handlers[0].level == logging.DEBUG
    assert root.level == logging.DEBUG


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Invalid log level"):
        setup_logging("LOUD")


def test_colored_formatter_restores_levelname():
    formatter = ColoredConsoleFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord(
        "gh_releases", logging.ERROR, __file__, 1, "failed %s", ("x",), None
    )

    output = formatter.format(record)

    assert output == f"{LOG_COLORS['ERROR']}ERROR{LOG_COLORS['RESET']} failed x"
    assert record.levelname == "ERROR"


def test_client_debug_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        get_logger("gh_releases.client").debug("GET %s", "https://x")

    assert "GET https://x" in caplog.text
