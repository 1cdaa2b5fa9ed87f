"""Console logging for postman-route.

Every module logs through ``get_logger(__name__)``. Those loggers sit below
the ``postman_route`` package logger, which owns the one console handler and
the level. The CLI replaces that handler on each run so records go to the
``sys.stdout`` of the moment and follow its ``-v``/``--quiet`` flags.
"""

import logging
import sys
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "postman_route"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_console_handler: Optional[logging.Handler] = None


def configure_logging(
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
    format_string: Optional[str] = None,
) -> logging.Handler:
    """Install a new console handler on the package logger.

    The handler installed by a previous call is detached first. Handlers
    added by library users are left alone.

    Args:
        level: Level of the package logger.
        stream: Where records are written. Defaults to ``sys.stdout`` as it
            is at call time.
        format_string: ``logging.Formatter`` format. Defaults to
            ``DEFAULT_FORMAT``.

    Returns:
        The installed handler.
    """
    global _console_handler

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _console_handler is not None:
        package_logger.removeHandler(_console_handler)

    handler = logging.StreamHandler(sys.stdout if stream is None else stream)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    # caplog listens on the root logger
    package_logger.propagate = True

    _console_handler = handler
    return handler


def verbosity_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a level; ``verbose`` wins over ``quiet``."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def get_logger(name: str) -> logging.Logger:
    """Return a logger that reports through the package logger.

    Module names inside the package are used as is. Other names, such as
    ``"__main__"`` when a module is run as a script, are placed under
    ``postman_route`` so they share its handler and level.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


configure_logging()
