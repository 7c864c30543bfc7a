"""swissuid: Swiss Business Identifier (UID) Validation

A Python library for parsing, validating and formatting the Swiss enterprise
identification number (UID) as defined by the eCH-0097 data standard.

Key Features:
- Weighted modulo-11 check digit verification
- Plain, HR (Handelsregister) and MWST (VAT) output forms
- Immutable, nibble-packed value type
- 5-byte binary codec
- Pydantic field type for model validation

Quick Start:
    >>> from swissuid import SwissUid
    >>>
    >>> uid = SwissUid("CHE-109.322.551")
    >>> uid.checkdigit()
    1
    >>> uid.to_string_hr()
    'CHE-109.322.551 HR'
    >>> uid
    CHE-109.322.55[1]

Only syntax and checksum are verified; whether a UID is registered is not.
"""

from __future__ import annotations

from .checksum import compute_check_digit, verify_check_digit, weighted_sum
from .codec import decode, encode
from .exceptions import (
    CheckDigitMismatchError,
    DecodeError,
    InvalidPrefixError,
    LeadingZeroError,
    MalformedDigitsError,
    NoValidCheckDigitError,
    ParseError,
    SwissUidError,
)
from .models import SwissUidField, uid_field
from .uid import SwissUid, UidPrefix, is_valid, parse

__version__ = "0.3.0"

__all__ = [
    # Core API
    "SwissUid",
    "UidPrefix",
    "parse",
    "is_valid",
    # Checksum
    "weighted_sum",
    "compute_check_digit",
    "verify_check_digit",
    # Binary codec
    "encode",
    "decode",
    # Pydantic
    "SwissUidField",
    "uid_field",
    # Exceptions
    "SwissUidError",
    "ParseError",
    "InvalidPrefixError",
    "MalformedDigitsError",
    "LeadingZeroError",
    "NoValidCheckDigitError",
    "CheckDigitMismatchError",
    "DecodeError",
    # Version
    "__version__",
]
