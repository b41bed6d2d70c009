"""Tests for labutils logging setup."""

import logging

from labutils.core.logging import setup_logging
from labutils.spacing.sequences import logspace


def test_setup_logging_sets_level():
    setup_logging("DEBUG")
    assert logging.getLogger("labutils").level == logging.DEBUG
    setup_logging("warning")
    assert logging.getLogger("labutils").level == logging.WARNING


def test_setup_logging_does_not_stack_handlers():
    setup_logging()
    count = len(logging.getLogger("labutils").handlers)
    setup_logging()
    setup_logging("DEBUG")
    assert len(logging.getLogger("labutils").handlers) == count


def test_unknown_level_falls_back_to_info():
    setup_logging("chatty")
    assert logging.getLogger("labutils").level == logging.INFO


def test_generators_log_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="labutils"):
        logspace(0, 2, 3)
    assert any("logspace: 3 samples" in r.getMessage() for r in caplog.records)
