"""TCKN generation and validation.

An identifier is exactly 11 ASCII digits with a non-zero first digit whose
10th and 11th digits satisfy :mod:`tcknctl.domain.checksum`.

INVARIANT: every value returned by :func:`generate` passes :func:`validate`.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol

from tcknctl.domain.checksum import eleventh_digit, split_positions, tenth_digit

TCKN_LENGTH = 11
ALL_DIGITS = "0123456789"
NON_ZERO_DIGITS = "123456789"

_DIGIT_VALUES: dict[str, int] = {ch: value for value, ch in enumerate(ALL_DIGITS)}


class RandomSource(Protocol):
    """Anything with ``choice``, such as ``random.Random`` or ``SystemRandom``."""

    def choice(self, seq: Sequence[str]) -> str: ...


class RandomSourceError(RuntimeError):
    """The random source failed while drawing digits."""


def _draw(rng: RandomSource, population: str) -> int:
    try:
        return _DIGIT_VALUES[rng.choice(population)]
    except Exception as exc:
        raise RandomSourceError(f"Random source failed: {exc}") from exc


def generate(rng: RandomSource | None = None) -> str:
    """Generate a random, checksum-valid TCKN.

    Each filler digit is an independent uniform draw. Pass a seeded
    ``random.Random`` as *rng* for reproducible output; when omitted a
    fresh generator is used so calls share no state.

    Raises:
        RandomSourceError: If *rng* fails to produce a digit.
    """
    source: RandomSource = rng if rng is not None else random.Random()

    first = _draw(source, NON_ZERO_DIGITS)
    evens = [_draw(source, ALL_DIGITS) for _ in range(4)]
    odds = [first] + [_draw(source, ALL_DIGITS) for _ in range(4)]

    tenth = tenth_digit(odds, evens)
    eleventh = eleventh_digit(odds, evens, tenth)

    digits: list[int] = []
    for odd, even in zip(odds, [*evens, tenth]):
        digits.extend((odd, even))
    digits.append(eleventh)
    return "".join(ALL_DIGITS[d] for d in digits)


def validate(value: str) -> bool:
    """Check whether *value* is a well-formed, checksum-correct TCKN.

    Malformed input (wrong length, non-digits, leading zero, checksum
    mismatch) returns False; this function never raises.
    """
    if not isinstance(value, str) or len(value) != TCKN_LENGTH:
        return False
    if any(ch not in _DIGIT_VALUES for ch in value):
        return False
    if value[0] == "0":
        return False

    digits = [_DIGIT_VALUES[ch] for ch in value]
    odds, evens = split_positions(digits[:9])
    tenth = tenth_digit(odds, evens)
    if tenth != digits[9]:
        return False
    return eleventh_digit(odds, evens, tenth) == digits[10]
