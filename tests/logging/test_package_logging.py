"""Tests for the package logger hierarchy and solver log output."""

import logging
from io import StringIO

import pytest

from eulergraph.algorithms.euler import eulerian_walk
from eulergraph.algorithms.floyd_warshall import floyd_warshall
from eulergraph.logging import (
    ROOT_LOGGER_NAME,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def capture():
    """Install a fresh root handler writing to a buffer."""
    buffer = StringIO()
    setup_root_logger(
        level=logging.INFO,
        format_string="%(levelname)s|%(name)s|%(message)s",
        handler=logging.StreamHandler(buffer),
    )
    return buffer


def test_module_loggers_inherit_root_level():
    logger = get_logger("eulergraph.algorithms.euler")
    assert logger.level == logging.NOTSET
    assert logger.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.ERROR)
    assert logger.getEffectiveLevel() == logging.ERROR


def test_setup_is_idempotent(capture):
    setup_root_logger(level=logging.DEBUG)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    assert len(root.handlers) == 1
    assert root.level == logging.INFO


def test_debug_toggle_controls_solver_output(capture, path3):
    eulerian_walk(path3)
    assert "Built walk" not in capture.getvalue()

    enable_debug_logging()
    eulerian_walk(path3)
    out = capture.getvalue()
    assert "DEBUG|eulergraph.algorithms.euler|Solving Eulerian path from vertex 0" in out
    assert "Built walk from 0: 2 arcs, 0 sub-walks spliced" in out

    disable_debug_logging()
    capture.seek(0)
    capture.truncate(0)
    floyd_warshall(path3)
    assert capture.getvalue() == ""


def test_splice_count_reported(capture, bowtie):
    enable_debug_logging()
    eulerian_walk(bowtie)
    assert "6 arcs, 1 sub-walks spliced" in capture.getvalue()


def test_infeasible_graph_warning_format(capture, star):
    eulerian_walk(star)
    assert (
        "WARNING|eulergraph.algorithms.euler|No Eulerian walk: Graph has 4 "
        "odd-degree vertices" in capture.getvalue()
    )


def test_reset_clears_handlers(capture):
    reset_logging()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    assert root.handlers == []
    assert root.level == logging.NOTSET
