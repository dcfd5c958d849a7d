"""
Exceptions raised by granola_notes.

Every error is terminal for the command that hit it; the CLI turns them into
a message on stderr and exit status 1.
"""

from __future__ import annotations


class GranolaError(Exception):
    """Base class for all granola_notes errors."""


class CacheUnavailable(GranolaError):
    """The cache file is missing or cannot be read."""


class CacheMalformed(GranolaError):
    """The cache file is not JSON or lacks the expected nested structure."""


class NoMatch(GranolaError):
    pass


class MissingArgument(GranolaError):
    pass


class UsageError(GranolaError):
    """Command-line options could not be parsed."""
