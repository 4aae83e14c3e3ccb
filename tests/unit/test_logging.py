"""Tests for the package logging setup."""

from __future__ import annotations

import io
import logging

import pytest

from invoice_actions.logging_config import HANDLER_NAME, get_logger, resolve_level, setup_logging


@pytest.fixture(autouse=True)
def _restore_package_logger():
    package_logger = logging.getLogger("invoice_actions")
    saved = (list(package_logger.handlers), package_logger.level, package_logger.propagate)
    yield
    package_logger.handlers[:] = saved[0]
    package_logger.setLevel(saved[1])
    package_logger.propagate = saved[2]


@pytest.mark.parametrize(
    ("level", "expected"),
    [("debug", logging.DEBUG), (" Warning ", logging.WARNING), (logging.ERROR, logging.ERROR), (None, logging.INFO), ("loud", logging.INFO)],
)
def test_resolve_level(level, expected: int) -> None:
    assert resolve_level(level) == expected


def test_repeated_setup_keeps_one_console_handler() -> None:
    setup_logging("INFO")
    package_logger = setup_logging("DEBUG")

    installed = [handler for handler in package_logger.handlers if handler.get_name() == HANDLER_NAME]
    assert len(installed) == 1
    assert package_logger.level == logging.DEBUG
    assert package_logger.propagate is False


def test_foreign_handlers_are_kept() -> None:
    package_logger = logging.getLogger("invoice_actions")
    foreign = logging.NullHandler()
    package_logger.addHandler(foreign)

    setup_logging("INFO")

    assert foreign in package_logger.handlers


def test_module_records_reach_the_stream() -> None:
    stream = io.StringIO()
    setup_logging("INFO", stream=stream)

    get_logger("invoice_actions.services.actions").info("Created invoice %s", "inv-1")

    line = stream.getvalue()
    assert "invoice_actions.services.actions - INFO - Created invoice inv-1" in line


def test_get_logger_prefixes_short_names() -> None:
    assert get_logger("store").name == "invoice_actions.store"
    assert get_logger("invoice_actions").name == "invoice_actions"
