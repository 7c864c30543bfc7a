"""Nibble-level packing and unpacking utilities.

Decimal digits fit in 4 bits, so a UID is stored as a sequence of nibbles
inside a single integer instead of a text buffer. All operations are
deterministic and big-endian (first nibble is the most significant).
"""

from __future__ import annotations

from collections.abc import Iterable

NIBBLE_BITS = 4
NIBBLE_MASK = 0x0F


class NibblePacker:
    """Packs 4-bit values into an integer or a byte buffer.

    Example:
        >>> packer = NibblePacker()
        >>> packer.write_nibble(1)
        >>> packer.write_nibble(9)
        >>> hex(packer.to_int())
        '0x19'
    """

    def __init__(self) -> None:
        """Initialize an empty nibble packer."""
        self._value = 0
        self._length = 0

    def write_nibble(self, value: int) -> None:
        """Append a single nibble.

        Args:
            value: Integer in the range 0-15

        Raises:
            ValueError: If value does not fit in 4 bits
        """
        if not 0 <= value <= NIBBLE_MASK:
            raise ValueError(f"Nibble must be 0-15, got {value}")

        self._value = (self._value << NIBBLE_BITS) | value
        self._length += 1

    def nibble_length(self) -> int:
        """Return the number of nibbles written so far."""
        return self._length

    def to_int(self) -> int:
        """Return the packed nibbles as an integer."""
        return self._value

    def to_bytes(self) -> bytes:
        """Convert the packed nibbles to bytes.

        An odd number of nibbles is padded with a zero nibble on the right
        (LSB side) to reach a full byte.

        Returns:
            Packed bytes
        """
        if self._length == 0:
            return b""

        value = self._value
        length = self._length
        if length % 2:
            value <<= NIBBLE_BITS
            length += 1

        return value.to_bytes(length // 2, "big")


class NibbleUnpacker:
    """Reads 4-bit values back out of packed data.

    Example:
        >>> unpacker = NibbleUnpacker(b"\\x19")
        >>> unpacker.read_nibble()
        1
        >>> unpacker.read_nibble()
        9
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a nibble unpacker over a byte buffer.

        Args:
            data: Byte buffer to unpack, two nibbles per byte
        """
        self._nibbles: list[int] = []
        for byte in data:
            self._nibbles.append(byte >> NIBBLE_BITS)
            self._nibbles.append(byte & NIBBLE_MASK)
        self._position = 0

    @classmethod
    def from_int(cls, value: int, count: int) -> NibbleUnpacker:
        """Create an unpacker over the lowest ``count`` nibbles of an integer.

        Args:
            value: Packed integer (as produced by NibblePacker.to_int())
            count: Number of nibbles held in value

        Raises:
            ValueError: If value is negative or needs more than count nibbles
        """
        if value < 0:
            raise ValueError(f"Packed value must be non-negative, got {value}")
        if value >> (count * NIBBLE_BITS):
            raise ValueError(f"Value {value:#x} does not fit in {count} nibbles")

        unpacker = cls(b"")
        unpacker._nibbles = [
            (value >> (i * NIBBLE_BITS)) & NIBBLE_MASK for i in range(count - 1, -1, -1)
        ]
        return unpacker

    def read_nibble(self) -> int:
        """Read the next nibble.

        Raises:
            IndexError: If no more nibbles are available
        """
        if self._position >= len(self._nibbles):
            raise IndexError("Attempted to read past end of nibble buffer")

        value = self._nibbles[self._position]
        self._position += 1
        return value

    def nibbles_remaining(self) -> int:
        """Return the number of unread nibbles."""
        return len(self._nibbles) - self._position

    def position(self) -> int:
        """Return the current read position in nibbles."""
        return self._position


def pack_digits(digits: Iterable[int]) -> int:
    """Pack decimal digits into an integer, one nibble per digit.

    Raises:
        ValueError: If any digit is outside 0-9
    """
    packer = NibblePacker()
    for digit in digits:
        if not 0 <= digit <= 9:
            raise ValueError(f"Decimal digit must be 0-9, got {digit}")
        packer.write_nibble(digit)
    return packer.to_int()


def unpack_digits(value: int, count: int) -> tuple[int, ...]:
    """Unpack ``count`` decimal digits previously packed with pack_digits()."""
    unpacker = NibbleUnpacker.from_int(value, count)
    return tuple(unpacker.read_nibble() for _ in range(count))
