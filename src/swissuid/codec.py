"""Compact binary codec for Swiss UIDs.

A UID is encoded as 10 nibbles (5 bytes), most significant first:

    +--------+----------------------------+-------------+
    | prefix | payload digits (8 nibbles) | check digit |
    +--------+----------------------------+-------------+

Prefix codes: CHE=0, ADM=1.
"""

from __future__ import annotations

from .exceptions import DecodeError, ParseError
from .nibble import NibblePacker, NibbleUnpacker
from .uid import NUM_DIGITS, SwissUid, UidPrefix

ENCODED_SIZE = 5

PREFIX_CODES: dict[UidPrefix, int] = {
    UidPrefix.CHE: 0,
    UidPrefix.ADM: 1,
}
_PREFIXES_BY_CODE = {code: prefix for prefix, code in PREFIX_CODES.items()}


def encode(uid: SwissUid) -> bytes:
    """Encode a UID to its 5-byte binary form.

    Args:
        uid: Validated UID to encode

    Returns:
        Encoded bytes

    Example:
        >>> encode(SwissUid("CHE-109.322.551")).hex()
        '0109322551'
    """
    packer = NibblePacker()
    packer.write_nibble(PREFIX_CODES[uid.prefix])
    for digit in uid.digits:
        packer.write_nibble(digit)
    return packer.to_bytes()


def decode(data: bytes) -> SwissUid:
    """Decode a UID from its 5-byte binary form.

    The decoded digits go through the same validation as parsed text.

    Args:
        data: Encoded bytes

    Returns:
        The validated SwissUid

    Raises:
        DecodeError: If data is truncated, corrupted or not a valid UID
    """
    if len(data) != ENCODED_SIZE:
        raise DecodeError(f"Encoded UID must be {ENCODED_SIZE} bytes, got {len(data)}")

    unpacker = NibbleUnpacker(data)

    code = unpacker.read_nibble()
    prefix = _PREFIXES_BY_CODE.get(code)
    if prefix is None:
        raise DecodeError(f"Unknown prefix code {code}")

    digits: list[int] = []
    for i in range(NUM_DIGITS):
        digit = unpacker.read_nibble()
        if digit > 9:
            raise DecodeError(f"Nibble {i} is not a decimal digit: {digit:#x}")
        digits.append(digit)

    try:
        return SwissUid.from_digits(digits, prefix)
    except ParseError as e:
        raise DecodeError(f"Decoded digits are not a valid UID: {e}") from e
