"""Custom exception hierarchy for pycycleway.

An unknown cycleway category reaching an encoder is a programming error and
is reported with :class:`AssertionError`, not with one of these classes.
"""

from __future__ import annotations


class CyclewayError(Exception):
    """Base exception for all pycycleway errors."""


class CyclewayConfigError(CyclewayError):
    """Invalid or missing configuration."""


class TagValueError(CyclewayError, ValueError):
    """A key or value that cannot be stored in a tag set.

    OSM tags are plain strings and a missing fact is expressed by the
    absence of the key, so empty values are rejected too.
    """

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class TagsInputError(CyclewayError):
    """Tag input (e.g. a JSON file) could not be read as a flat string map."""
