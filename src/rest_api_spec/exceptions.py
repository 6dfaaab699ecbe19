"""Exception hierarchy for rest-api-spec.

All exceptions inherit from :class:`RestSpecError`. Every message starts
with the ``[location]`` of the offending document so that failures can
be traced back to a file from logs alone.

Subclass hierarchy::

    RestSpecError
    +-- DuplicateValueError
    +-- ShapeMismatchError
    +-- TokenStreamError
    +-- ApiDirectoryError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rest_api_spec.parser.tokens import Token

# Singular nouns used in duplicate messages, keyed by section
_SECTION_NOUNS = {
    "methods": "method",
    "paths": "path",
    "parts": "part",
    "params": "param",
    "apis": "api",
}


class RestSpecError(Exception):
    """Base exception for all rest-api-spec errors."""


class DuplicateValueError(RestSpecError):
    """A value was recorded twice in the same section of an API.

    Args:
        location: Origin of the document being parsed.
        section: Section holding the duplicate (``methods``, ``paths``,
            ``parts``, ``params`` or ``apis``).
        value: The repeated value, verbatim.
    """

    def __init__(self, location: str, section: str, value: str):
        noun = _SECTION_NOUNS.get(section, section)
        super().__init__(f"[{location}] found duplicate {noun} [{value}]")
        self.location = location
        self.section = section
        self.value = value


class ShapeMismatchError(RestSpecError):
    """The token stream does not have the structure of an API document.

    Args:
        location: Origin of the document being parsed.
        where: Position in the document, e.g. ``parts/index``.
        expected: What the parser expected to find there.
        actual: The token found instead, ``None`` if the stream ended.
    """

    def __init__(self, location: str, where: str, expected: str, actual: Token | None):
        found = actual.name if actual is not None else "end of stream"
        super().__init__(f"[{location}] expected {expected} at [{where}] but found [{found}]")
        self.location = location
        self.where = where
        self.expected = expected
        self.actual = actual


class TokenStreamError(RestSpecError):
    """The token source failed to produce a token.

    Wraps YAML syntax errors, I/O errors and undecodable input raised
    while reading.
    """

    def __init__(self, source: str, cause: Exception | str):
        super().__init__(f"[{source}] {cause}")
        self.source = source
        self.cause = cause


class ApiDirectoryError(RestSpecError):
    """An API directory given to the loader does not exist."""

    def __init__(self, path: str):
        super().__init__(f"[{path}] is not a directory")
        self.path = path
