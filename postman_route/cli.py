"""Command-line interface for postman-route."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from postman_route.config import SolverConfig
from postman_route.errors import ConfigError, PostmanError
from postman_route.logging import configure_logging, get_logger, verbosity_level
from postman_route.solver import solve_file
from postman_route.types import PairingStrategy

logger = get_logger(__name__)


def _format_distance(value: float) -> str:
    """Return a distance with up to three decimals and thousands separators.

    Examples:
        0.1 -> "0.1"; 10.0 -> "10"; 1234.567 -> "1,234.567".
    """
    s = f"{value:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _load_config(path: Optional[Path], pairing: Optional[str]) -> SolverConfig:
    """Build the solver config from an optional YAML file and CLI overrides.

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings.
    """
    if path is None:
        config = SolverConfig()
    else:
        try:
            yaml_text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc
        config = SolverConfig.from_yaml(yaml_text)
        logger.debug(f"Loaded config from {path}: {config.to_dict()}")

    if pairing is not None:
        config.pairing = PairingStrategy.from_string(pairing)
    return config


def _run(
    input_path: Path,
    start: int,
    output_path: Path,
    config_path: Optional[Path] = None,
    pairing: Optional[str] = None,
    summary_path: Optional[Path] = None,
) -> None:
    """Compute the route for ``input_path`` and write it to ``output_path``.

    Failures are reported on the console and end the process with status 1.
    """
    _start_time = perf_counter()

    try:
        config = _load_config(config_path, pairing)
        solution = solve_file(
            input_path, start, output_path, config, summary_path=summary_path
        )

        summary = solution.summary
        print(f"✅ Route written to: {output_path}")
        print(
            f"   {summary.legs} legs, total {_format_distance(summary.total_distance)}"
            f", deadhead {_format_distance(summary.deadhead_distance)}"
        )

        _elapsed = perf_counter() - _start_time
        logger.info(f"Route run completed successfully in {_format_duration(_elapsed)}")

    except PostmanError as e:
        logger.error(f"Failed to compute route: {type(e).__name__}: {e}")
        print(f"❌ ERROR: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``postman-route`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="postman-route",
        description=(
            "Compute a closed route that walks every street of a road network"
            " at least once."
        ),
    )
    parser.add_argument(
        "-i",
        "--input",
        type=Path,
        required=True,
        help="Street list: '<from> <to> <length> <street name>' per line",
    )
    parser.add_argument(
        "-p",
        "--start",
        type=int,
        required=True,
        help="Intersection the route starts and ends at",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        required=True,
        help="Route file to write: '<from> <to> <street name>' per line",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="YAML file with solver settings",
    )
    parser.add_argument(
        "--pairing",
        choices=[s.name.lower() for s in PairingStrategy],
        default=None,
        help="How odd-degree intersections are paired (overrides config)",
    )
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Also write route statistics as JSON to this file",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )

    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    configure_logging(verbosity_level(verbose=args.verbose, quiet=args.quiet))
    logger.debug("Debug logging enabled")

    _run(
        input_path=args.input,
        start=args.start,
        output_path=args.output,
        config_path=args.config,
        pairing=args.pairing,
        summary_path=args.summary,
    )


if __name__ == "__main__":
    main()
