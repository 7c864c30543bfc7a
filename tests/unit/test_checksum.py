"""Unit tests for check digit computation."""

from __future__ import annotations

import pytest

from swissuid.checksum import WEIGHTS, compute_check_digit, verify_check_digit, weighted_sum


class TestWeightedSum:
    """Test the weighted digit sum."""

    def test_weights(self) -> None:
        """Test the positional weights."""
        assert WEIGHTS == (5, 4, 3, 2, 7, 6, 5, 4)

    def test_weighted_sum_basic(self) -> None:
        """Test a known weighted sum."""
        assert weighted_sum([1, 0, 9, 3, 2, 2, 5, 5]) == 109

    def test_weighted_sum_single_digits(self) -> None:
        """Test each position contributes its own weight."""
        for i, weight in enumerate(WEIGHTS):
            digits = [0] * 8
            digits[i] = 1
            assert weighted_sum(digits) == weight

    def test_weighted_sum_wrong_length(self) -> None:
        """Test payloads of the wrong length are rejected."""
        with pytest.raises(ValueError, match="8 digits"):
            weighted_sum([1, 0, 9, 3, 2, 2, 5])

        with pytest.raises(ValueError, match="8 digits"):
            weighted_sum([1, 0, 9, 3, 2, 2, 5, 5, 1])

    def test_weighted_sum_digit_out_of_range(self) -> None:
        """Test non-decimal digits are rejected."""
        with pytest.raises(ValueError, match="0-9"):
            weighted_sum([1, 0, 10, 3, 2, 2, 5, 5])

        with pytest.raises(ValueError, match="0-9"):
            weighted_sum([1, 0, -1, 3, 2, 2, 5, 5])


class TestComputeCheckDigit:
    """Test check digit computation."""

    def test_known_payload(self) -> None:
        """Test 109.322.55 has check digit 1."""
        assert compute_check_digit([1, 0, 9, 3, 2, 2, 5, 5]) == 1

    def test_payload_with_zeroes(self) -> None:
        """Test 100.002.00 has check digit 5."""
        assert compute_check_digit([1, 0, 0, 0, 0, 2, 0, 0]) == 5

    def test_remainder_zero_gives_zero(self) -> None:
        """Test a sum divisible by 11 maps to check digit 0."""
        digits = [1, 0, 0, 0, 0, 0, 0, 7]
        assert weighted_sum(digits) % 11 == 0
        assert compute_check_digit(digits) == 0

    def test_sentinel_payload(self, sentinel_payload: list[int]) -> None:
        """Test a payload with remainder 1 has no check digit."""
        assert weighted_sum(sentinel_payload) % 11 == 1
        assert compute_check_digit(sentinel_payload) is None

    def test_accepts_tuple(self) -> None:
        """Test any sequence of digits is accepted."""
        assert compute_check_digit((1, 0, 9, 3, 2, 2, 5, 5)) == 1


class TestVerifyCheckDigit:
    """Test check digit verification."""

    def test_verify_success(self) -> None:
        """Test successful verification."""
        assert verify_check_digit([1, 0, 9, 3, 2, 2, 5, 5], 1) is True

    def test_verify_failure(self) -> None:
        """Test failed verification."""
        assert verify_check_digit([1, 0, 9, 3, 2, 2, 5, 5], 2) is False

    def test_verify_sentinel_always_fails(self, sentinel_payload: list[int]) -> None:
        """Test no digit verifies against a sentinel payload."""
        for check in range(10):
            assert verify_check_digit(sentinel_payload, check) is False
