"""
layout/rng.py - Seeded xorshift64* generator for layout perturbation.

Output must match the game's other layout implementations bit for bit for
the same seed, so the `random` module is not used here.
"""

from typing import Any
import logging

from .errors import InvalidRangeError, InvalidSeedError

logger = logging.getLogger(__name__)

MASK_64 = (1 << 64) - 1
SEED_OFFSET = 0x9E3779B97F4A7C15
OUTPUT_MULTIPLIER = 2685821657736338717

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


def check_seed(seed: Any) -> int:
    """Return seed unchanged if it is an unsigned 64-bit int, else raise."""
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidSeedError(seed)
    if not 0 <= seed <= MASK_64:
        raise InvalidSeedError(seed)
    return seed


class LayoutRng:
    """
    xorshift64* variant with a single 64-bit state register.

    The state carried between draws is the pre-multiplication value; the
    multiplied output is never fed back.
    """

    __slots__ = ("state",)

    def __init__(self, seed: int):
        self.state = (check_seed(seed) + SEED_OFFSET) & MASK_64

    def next_u64(self) -> int:
        x = self.state
        x ^= x >> 12
        x ^= (x << 25) & MASK_64
        x ^= x >> 27
        self.state = x
        return (x * OUTPUT_MULTIPLIER) & MASK_64

    def range_inclusive(self, low: int, high: int) -> int:
        """
        Draw an int from [low, high].

        Plain modulo reduction. The slight bias for spans that do not divide
        2**64 is part of the reproducible stream and must stay.
        """
        if high < low or low < INT32_MIN or high > INT32_MAX:
            raise InvalidRangeError(low, high)
        return low + self.next_u64() % (high - low + 1)
