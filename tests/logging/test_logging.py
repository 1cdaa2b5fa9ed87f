import logging
from io import StringIO
from pathlib import Path

import pytest

from postman_route import cli
from postman_route.graph.street_graph import StreetGraph
from postman_route.logging import (
    ROOT_LOGGER_NAME,
    configure_logging,
    get_logger,
    verbosity_level,
)
from postman_route.solver import solve


@pytest.mark.parametrize(
    "verbose,quiet,expected",
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_verbosity_level(verbose, quiet, expected):
    assert verbosity_level(verbose=verbose, quiet=quiet) == expected


def test_module_loggers_sit_under_package_logger():
    assert get_logger("postman_route.solver").name == "postman_route.solver"
    assert get_logger(ROOT_LOGGER_NAME) is logging.getLogger(ROOT_LOGGER_NAME)
    assert get_logger("__main__").name == "postman_route.__main__"


def test_configure_logging_replaces_previous_handler():
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    first = configure_logging(stream=StringIO())
    second = configure_logging(stream=StringIO())
    assert first not in package_logger.handlers
    assert package_logger.handlers.count(second) == 1


def test_configure_logging_keeps_foreign_handlers():
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    own = logging.NullHandler()
    package_logger.addHandler(own)
    try:
        configure_logging(stream=StringIO())
        assert own in package_logger.handlers
    finally:
        package_logger.removeHandler(own)


def test_level_filters_records():
    capture = StringIO()
    configure_logging(logging.INFO, stream=capture, format_string="%(message)s")
    log = get_logger("postman_route.algorithms.euler")

    log.debug("hidden")
    log.info("shown")
    assert capture.getvalue() == "shown\n"

    configure_logging(logging.DEBUG, stream=capture, format_string="%(message)s")
    log.debug("now shown")
    assert capture.getvalue().endswith("now shown\n")


def test_format_string_applied():
    capture = StringIO()
    configure_logging(
        stream=capture, format_string="%(levelname)s|%(name)s|%(message)s"
    )
    get_logger("postman_route.graph.io").warning("odd line")
    assert capture.getvalue() == "WARNING|postman_route.graph.io|odd line\n"


def test_pipeline_logs_progress(caplog):
    g = StreetGraph()
    g.add_street(1, 2, 1.0, "A")
    g.add_street(2, 3, 1.0, "B")

    with caplog.at_level(logging.INFO, logger=ROOT_LOGGER_NAME):
        solve(g, 1)
    messages = " ".join(r.getMessage() for r in caplog.records)
    assert "Found 2 odd-degree intersections" in messages
    assert "Eulerian circuit visits 5 intersections" in messages


def _cli_args(tmp_path: Path):
    src = tmp_path / "streets.txt"
    src.write_text("1 2 1.0 A\n2 3 1.0 B\n3 1 1.0 C\n")
    return ["-i", str(src), "-p", "1", "-o", str(tmp_path / "route.txt")]


def test_cli_verbose_shows_debug_records(tmp_path: Path, capsys):
    cli.main(_cli_args(tmp_path) + ["-v"])
    out = capsys.readouterr().out
    assert "DEBUG - Debug logging enabled" in out
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.DEBUG


def test_cli_quiet_hides_info_records(tmp_path: Path, capsys):
    cli.main(_cli_args(tmp_path) + ["--quiet"])
    out = capsys.readouterr().out
    assert "✅ Route written to" in out
    assert " - INFO - " not in out


def test_cli_default_shows_info_records(tmp_path: Path, capsys):
    cli.main(_cli_args(tmp_path))
    out = capsys.readouterr().out
    assert " - INFO - " in out
    assert " - DEBUG - " not in out
