"""Checksum rule for the two TCKN check digits.

The first nine digits split into five odd-position digits (1, 3, 5, 7, 9)
and four even-position digits (2, 4, 6, 8), 1-indexed:

- 10th digit: ``(sum(odds) * 7 - sum(evens)) mod 10``
- 11th digit: ``(sum(odds) + sum(evens) + tenth) mod 10``
"""

from __future__ import annotations

from collections.abc import Sequence

ODD_COUNT = 5
EVEN_COUNT = 4
ODD_WEIGHT = 7


def _check_lengths(odds: Sequence[int], evens: Sequence[int]) -> None:
    if len(odds) != ODD_COUNT or len(evens) != EVEN_COUNT:
        msg = (
            f"Expected {ODD_COUNT} odd-position and {EVEN_COUNT} even-position digits, "
            f"got {len(odds)} and {len(evens)}"
        )
        raise ValueError(msg)


def split_positions(digits: Sequence[int]) -> tuple[list[int], list[int]]:
    """Partition the first nine digits into ``(odds, evens)``."""
    if len(digits) != ODD_COUNT + EVEN_COUNT:
        msg = f"Expected {ODD_COUNT + EVEN_COUNT} digits, got {len(digits)}"
        raise ValueError(msg)
    return list(digits[0::2]), list(digits[1::2])


def tenth_digit(odds: Sequence[int], evens: Sequence[int]) -> int:
    """Compute the 10th digit from the odd- and even-position digits.

    The intermediate difference may be negative for arbitrary inputs;
    Python's ``%`` keeps the result in ``0..9`` either way.
    """
    _check_lengths(odds, evens)
    return (sum(odds) * ODD_WEIGHT - sum(evens)) % 10


def eleventh_digit(odds: Sequence[int], evens: Sequence[int], tenth: int) -> int:
    """Compute the 11th digit: the sum of the first ten digits mod 10."""
    _check_lengths(odds, evens)
    return (sum(odds) + sum(evens) + tenth) % 10
