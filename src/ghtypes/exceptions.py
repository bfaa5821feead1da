"""Exception hierarchy for ghtypes.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from GhTypesError for easy catching of any ghtypes-specific error.
"""

from __future__ import annotations


class GhTypesError(Exception):
    """Base exception for all ghtypes errors."""

    pass


class MalformedInput(GhTypesError, ValueError):
    """Raised when a wire value cannot be decoded.

    This is the single decode error kind. It is also a ValueError so that
    pydantic reports it as a field validation error inside models.

    Examples:
        - Hex identifier with the wrong length or a non-hex character
        - Binary identifier that is not exactly 20 bytes
        - Unparseable date-time string
        - Epoch seconds outside the representable range
    """

    pass


class InvalidLength(MalformedInput):
    """Raised when an identifier has the wrong length.

    Attributes:
        length: Length of the offending input
        expected: Expected length, if a single length is valid
    """

    def __init__(self, message: str, length: int, expected: int | None = None) -> None:
        super().__init__(message)
        self.length = length
        self.expected = expected


class InvalidCharacter(MalformedInput):
    """Raised when a hex identifier contains a non-hex character.

    Attributes:
        char: The offending character
        index: Its position in the input string
    """

    def __init__(self, message: str, char: str, index: int) -> None:
        super().__init__(message)
        self.char = char
        self.index = index


class UnknownEvent(GhTypesError):
    """Raised when an event name has no payload model.

    Examples:
        - X-GitHub-Event header for an event that is not modeled
        - Misspelled event name passed to the CLI
    """

    pass
