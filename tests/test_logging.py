"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from apsp.logging import (
    ROOT_LOGGER_NAME,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)
from apsp.solver import FloydWarshall


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("apsp.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()

    logger.removeHandler(handler)


def test_global_level_propagates_to_children():
    logger1 = get_logger("apsp.module1")
    logger2 = get_logger("apsp.module2")

    assert logger1.getEffectiveLevel() == logging.INFO
    assert logger2.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert get_logger("apsp.module3").getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers():
    capture = StringIO()
    setup_root_logger(level=logging.INFO, handler=logging.StreamHandler(capture))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert len(root_logger.handlers) == 1

    setup_root_logger(level=logging.DEBUG)
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO


def test_custom_format_string_applied():
    capture = StringIO()
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(
        level=logging.INFO, format_string=fmt, handler=logging.StreamHandler(capture)
    )

    get_logger("apsp.test.format").info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:apsp.test.format" in out
    assert "MSG:hello" in out


def test_solver_debug_messages(five_vertex_graph):
    """The solver reports construction and relaxation at DEBUG level."""
    capture = StringIO()
    setup_root_logger(
        level=logging.DEBUG,
        format_string="%(name)s:%(message)s",
        handler=logging.StreamHandler(capture),
    )

    FloydWarshall(five_vertex_graph, 5).calculate_distance()
    out = capture.getvalue()
    assert "apsp.solver:Created solver for 5 vertices (inf=9999)" in out
    assert "apsp.solver:Relaxation over 5 vertices made" in out


def test_default_level_keeps_warnings_and_hides_summaries():
    """At INFO the negative-weight warning is shown, relaxation summaries are not."""
    capture = StringIO()
    setup_root_logger(
        level=logging.INFO,
        format_string="%(levelname)s:%(message)s",
        handler=logging.StreamHandler(capture),
    )

    FloydWarshall([[0, -1], [9999, 0]], 2).calculate_distance()
    out = capture.getvalue()
    assert "WARNING:Distance matrix contains negative weights" in out
    assert "Relaxation over" not in out
