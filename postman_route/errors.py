"""Exception hierarchy for route computation failures.

The library raises these; the command-line interface turns them into console
messages. Malformed input lines are not errors and never reach this module.
"""

from __future__ import annotations


class PostmanError(RuntimeError):
    """Base class for all failures reported by postman-route."""


class InputUnavailableError(PostmanError):
    """The street list could not be opened or read."""


class OutputUnavailableError(PostmanError):
    """The route file could not be written."""


class DisconnectedGraphError(PostmanError):
    """Some streets cannot be reached from the others."""


class EmptyGraphError(PostmanError):
    """The input produced no streets at all."""


class UnknownVertexError(PostmanError):
    """The requested start intersection is not part of the street network."""


class ConfigError(PostmanError):
    """A configuration file or value is invalid."""
