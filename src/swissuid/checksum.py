"""Check digit computation for Swiss UIDs.

eCH-0097 protects the 8 payload digits with a weighted modulo-11 check digit.
See: https://www.ech.ch/de/ech/ech-0097 (section 2.4.2)
"""

from __future__ import annotations

from collections.abc import Sequence

PAYLOAD_LENGTH = 8

# Positional weights, left to right
WEIGHTS: tuple[int, ...] = (5, 4, 3, 2, 7, 6, 5, 4)


def weighted_sum(digits: Sequence[int]) -> int:
    """Calculate the weighted digit sum of a UID payload.

    Args:
        digits: The 8 payload digits, most significant first

    Returns:
        Sum of each digit multiplied by its positional weight

    Raises:
        ValueError: If there are not exactly 8 digits or a digit is outside 0-9

    Example:
        >>> weighted_sum([1, 0, 9, 3, 2, 2, 5, 5])
        109
    """
    if len(digits) != PAYLOAD_LENGTH:
        raise ValueError(f"UID payload must have {PAYLOAD_LENGTH} digits, got {len(digits)}")

    total = 0
    for digit, weight in zip(digits, WEIGHTS):
        if not 0 <= digit <= 9:
            raise ValueError(f"Decimal digit must be 0-9, got {digit}")
        total += digit * weight

    return total


def compute_check_digit(digits: Sequence[int]) -> int | None:
    """Calculate the check digit for the given payload.

    Args:
        digits: The 8 payload digits, most significant first

    Returns:
        The check digit (0-9), or None if the payload has no valid check digit

    Example:
        >>> compute_check_digit([1, 0, 9, 3, 2, 2, 5, 5])
        1
        >>> compute_check_digit([1, 0, 0, 0, 0, 0, 8, 0]) is None
        True
    """
    result = 11 - weighted_sum(digits) % 11

    if result == 11:
        return 0
    if result == 10:
        return None
    return result


def verify_check_digit(digits: Sequence[int], check_digit: int) -> bool:
    """Verify a check digit against its payload.

    Args:
        digits: The 8 payload digits
        check_digit: Check digit to verify

    Returns:
        True if check_digit is the valid check digit of the payload, False otherwise
        (including payloads that have no valid check digit)
    """
    expected = compute_check_digit(digits)
    return expected is not None and expected == check_digit
