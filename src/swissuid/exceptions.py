"""Exception hierarchy for swissuid.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from SwissUidError for easy catching of any swissuid-specific error.
"""

from __future__ import annotations


class SwissUidError(Exception):
    """Base exception for all swissuid errors."""

    pass


class ParseError(SwissUidError, ValueError):
    """Raised when text cannot be turned into a valid Swiss UID.

    Every parse failure is a terminal judgment about the input. The concrete
    subclass names which validation step rejected it.
    """

    pass


class InvalidPrefixError(ParseError):
    """Raised when the leading prefix token is missing or unknown.

    Examples:
        - "CH-109.322.551" (truncated prefix)
        - "ABC-109.322.551" (unknown prefix)
        - "109.322.551" (no prefix at all)
    """

    pass


class MalformedDigitsError(ParseError):
    """Raised when the digit block does not match the UID grammar.

    Examples:
        - Wrong number of digits
        - Non-digit characters
        - Grouping dots in the wrong place
        - Unknown trailing suffix
    """

    pass


class LeadingZeroError(ParseError):
    """Raised when the first payload digit is 0."""

    pass


class NoValidCheckDigitError(ParseError):
    """Raised when the payload maps to the forbidden checksum remainder.

    No check digit exists for such a payload, so no UID can ever carry it.
    """

    pass


class CheckDigitMismatchError(ParseError):
    """Raised when the supplied check digit disagrees with the computed one.

    Attributes:
        expected: Check digit computed from the payload
        actual: Check digit found in the input
    """

    def __init__(self, message: str, *, expected: int, actual: int) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class DecodeError(SwissUidError):
    """Raised when decoding a binary UID fails.

    Examples:
        - Buffer of the wrong length
        - Unknown prefix code
        - Nibble value above 9
        - Decoded digits that do not form a valid UID
    """

    pass
