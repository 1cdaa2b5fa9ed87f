"""Tests for running postman-route as a module (`python -m postman_route`)."""

from __future__ import annotations

import runpy
from pathlib import Path
from unittest.mock import patch

import pytest


def test_module_help_exits_zero() -> None:
    """Running with --help should exit cleanly with code 0."""
    with patch("sys.argv", ["postman-route", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("postman_route", run_name="__main__")
    assert exc_info.value.code == 0


def test_module_runs_route(tmp_path: Path) -> None:
    src = tmp_path / "streets.txt"
    src.write_text("1 2 1.0 A\n2 3 1.0 B\n3 1 1.0 C\n")
    out = tmp_path / "route.txt"
    with patch("sys.argv", ["postman-route", "-i", str(src), "-p", "2", "-o", str(out)]):
        runpy.run_module("postman_route", run_name="__main__")
    assert out.read_text().splitlines()[0].split()[0] == "2"
