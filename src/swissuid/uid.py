"""The Swiss UID value type.

A UID (Unternehmens-Identifikationsnummer) identifies an enterprise or an
administrative unit in Switzerland. It consists of a 3-letter prefix and
9 digits, the rightmost of which is a check digit over the other 8:

    CHE-109.322.551
    ^^^ ^^^^^^^^^^ ^
    |   payload    check digit
    prefix
"""

from __future__ import annotations

import enum
import random as _random
import re
from collections.abc import Sequence
from functools import total_ordering
from typing import Any, cast

from .checksum import PAYLOAD_LENGTH, compute_check_digit
from .exceptions import (
    CheckDigitMismatchError,
    InvalidPrefixError,
    LeadingZeroError,
    MalformedDigitsError,
    NoValidCheckDigitError,
)
from .nibble import NIBBLE_MASK, pack_digits, unpack_digits

NUM_DIGITS = PAYLOAD_LENGTH + 1

SUFFIX_HR = "HR"
SUFFIX_MWST = "MWST"

_PREFIX_RE = re.compile(r"[A-Za-z]+")
_BODY_RE = re.compile(
    r"""
    [-\ ]?
    (?:
        (?P<g1>\d{3})\.(?P<g2>\d{3})\.(?P<g3>\d{3})
      | (?P<flat>\d{9})
    )
    (?:\ +(?P<suffix>HR|MWST))?
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)


class UidPrefix(enum.Enum):
    """Prefixes defined by eCH-0097."""

    CHE = "CHE"  # enterprises
    ADM = "ADM"  # administrative units

    def __str__(self) -> str:
        return self.value


@total_ordering
class SwissUid:
    """A validated, immutable Swiss UID.

    The 9 digits are stored packed as nibbles in a single integer. Instances
    are only created through validating entry points, so every live instance
    carries a correct check digit.

    Example:
        >>> uid = SwissUid("CHE-109.322.551")
        >>> uid.checkdigit()
        1
        >>> str(uid)
        'CHE-109.322.551'
        >>> uid.to_string_mwst()
        'CHE-109.322.551 MWST'
        >>> repr(uid)
        'CHE-109.322.55[1]'
    """

    __slots__ = ("_prefix", "_packed")

    _prefix: UidPrefix
    _packed: int

    def __init__(self, uid: str) -> None:
        """Parse and validate a UID string.

        Args:
            uid: Text such as "CHE-109.322.551", "CHE109322551" or
                "CHE-109.322.551 MWST" (the suffix is accepted and ignored)

        Raises:
            TypeError: If uid is not a string
            ParseError: If uid is not a valid Swiss UID (see _parse_text)
        """
        prefix, digits = _parse_text(uid)
        _validate_digits(digits)
        object.__setattr__(self, "_prefix", prefix)
        object.__setattr__(self, "_packed", pack_digits(digits))

    @classmethod
    def _create(cls, prefix: UidPrefix, digits: Sequence[int]) -> SwissUid:
        _validate_digits(digits)
        inst = cls.__new__(cls)
        object.__setattr__(inst, "_prefix", prefix)
        object.__setattr__(inst, "_packed", pack_digits(digits))
        return inst

    @classmethod
    def parse(cls, text: str) -> SwissUid:
        """Parse and validate a UID string. Same as SwissUid(text)."""
        return cls(text)

    @classmethod
    def from_digits(
        cls, digits: Sequence[int], prefix: UidPrefix = UidPrefix.CHE
    ) -> SwissUid:
        """Create a UID from its 9 digits (payload followed by check digit).

        Raises:
            MalformedDigitsError: If there are not 9 decimal digits
            ParseError: If the digits fail the leading-zero or check digit rules
        """
        if len(digits) != NUM_DIGITS or not all(
            isinstance(d, int) and not isinstance(d, bool) and 0 <= d <= 9 for d in digits
        ):
            raise MalformedDigitsError(f"UID must have {NUM_DIGITS} decimal digits: {digits!r}")
        return cls._create(prefix, tuple(digits))

    @classmethod
    def random(
        cls, rng: _random.Random | None = None, prefix: UidPrefix = UidPrefix.CHE
    ) -> SwissUid:
        """Generate a random valid UID.

        Args:
            rng: Random number generator to draw from (default: a fresh, unseeded one)
            prefix: Prefix of the generated UID

        Example:
            >>> len(str(SwissUid.random()))
            15
        """
        rng = rng or _random.Random()
        payload = [rng.randint(1, 9)] + [rng.randint(0, 9) for _ in range(PAYLOAD_LENGTH - 1)]

        check = compute_check_digit(payload)
        if check is None:
            # Moving the first digit by one shifts the sum by 5 (mod 11), so the
            # remainder can no longer be the sentinel and a check digit exists.
            payload[0] = payload[0] + 1 if payload[0] <= 1 else payload[0] - 1
            check = cast(int, compute_check_digit(payload))

        return cls._create(prefix, (*payload, check))

    @property
    def prefix(self) -> UidPrefix:
        return self._prefix

    @property
    def digits(self) -> tuple[int, ...]:
        """All 9 digits, the check digit last."""
        return unpack_digits(self._packed, NUM_DIGITS)

    @property
    def payload(self) -> tuple[int, ...]:
        """The 8 payload digits without the check digit."""
        return self.digits[:PAYLOAD_LENGTH]

    def checkdigit(self) -> int:
        """Return the check digit stored in this UID."""
        return self._packed & NIBBLE_MASK

    def to_string_plain(self) -> str:
        """Return the canonical form, e.g. "CHE-109.322.551"."""
        d = "".join(str(n) for n in self.digits)
        return f"{self._prefix}-{d[0:3]}.{d[3:6]}.{d[6:9]}"

    def to_string_hr(self) -> str:
        """Return the UID with the " HR" (Handelsregister) suffix."""
        return f"{self.to_string_plain()} {SUFFIX_HR}"

    def to_string_mwst(self) -> str:
        """Return the UID with the " MWST" (Mehrwertsteuer) suffix."""
        return f"{self.to_string_plain()} {SUFFIX_MWST}"

    def to_string_debug(self) -> str:
        """Return the plain form with the check digit bracketed, e.g. "CHE-109.322.55[1]"."""
        plain = self.to_string_plain()
        return f"{plain[:-1]}[{plain[-1]}]"

    def __str__(self) -> str:
        return self.to_string_plain()

    def __repr__(self) -> str:
        return self.to_string_debug()

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "plain"):
            return self.to_string_plain()
        if format_spec == "hr":
            return self.to_string_hr()
        if format_spec == "mwst":
            return self.to_string_mwst()
        if format_spec == "debug":
            return self.to_string_debug()
        raise ValueError(f"Unknown format spec for SwissUid: {format_spec!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SwissUid):
            return NotImplemented
        return self._prefix is other._prefix and self._packed == other._packed

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SwissUid):
            return NotImplemented
        return (self._packed, self._prefix.value) < (other._packed, other._prefix.value)

    def __hash__(self) -> int:
        return hash((self._prefix, self._packed))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.to_string_plain(),))


def _parse_text(text: str) -> tuple[UidPrefix, tuple[int, ...]]:
    """Split UID text into its prefix and 9 digits.

    Only the structure is checked here; the digit rules are applied by
    _validate_digits().
    """
    if not isinstance(text, str):
        raise TypeError(f"UID must be a string, got {type(text).__name__}")

    text = text.strip()

    match = _PREFIX_RE.match(text)
    if match is None:
        raise InvalidPrefixError(f"UID must start with 'CHE' or 'ADM': {text!r}")
    try:
        prefix = UidPrefix(match.group().upper())
    except ValueError:
        raise InvalidPrefixError(
            f"Prefix must be 'CHE' or 'ADM', got {match.group()!r}"
        ) from None

    body = _BODY_RE.fullmatch(text, match.end())
    if body is None:
        raise MalformedDigitsError(
            f"Expected 'DDD.DDD.DDD' or 9 contiguous digits after the prefix: {text!r}"
        )

    raw = body.group("flat") or "".join(body.group("g1", "g2", "g3"))
    return prefix, tuple(int(c) for c in raw)


def _validate_digits(digits: Sequence[int]) -> None:
    """Apply the leading-zero and check digit rules to 9 digits."""
    if digits[0] == 0:
        raise LeadingZeroError("Leading zero is not allowed in a UID")

    payload = digits[:PAYLOAD_LENGTH]
    actual = digits[PAYLOAD_LENGTH]
    shown = "".join(str(d) for d in payload)

    expected = compute_check_digit(payload)
    if expected is None:
        raise NoValidCheckDigitError(f"Payload {shown} has no valid check digit")
    if expected != actual:
        raise CheckDigitMismatchError(
            f"Payload {shown} should have the check digit [{expected}], got [{actual}]",
            expected=expected,
            actual=actual,
        )


def parse(text: str) -> SwissUid:
    """Parse and validate a Swiss UID.

    Args:
        text: UID text, e.g. "CHE-109.322.551"

    Returns:
        The validated SwissUid

    Raises:
        InvalidPrefixError: Prefix missing or not 'CHE'/'ADM'
        MalformedDigitsError: Digit block does not match the grammar
        LeadingZeroError: First payload digit is 0
        NoValidCheckDigitError: Payload has no valid check digit
        CheckDigitMismatchError: Supplied check digit is wrong
    """
    return SwissUid(text)


def is_valid(text: str) -> bool:
    """Return True if text parses as a valid Swiss UID."""
    try:
        SwissUid(text)
    except (TypeError, ValueError):
        return False
    return True
