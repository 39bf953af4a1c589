"""One-bit logical shifts across a double's (high, low) word pair.

The pair is treated as a single 64-bit field. Results are plain bit patterns;
they need not decode to a meaningful double.
"""

from __future__ import annotations

from .codec import check_word


def shift_double_right1(high: int, low: int) -> tuple[int, int]:
    """Shift right by 1, carrying high's bottom bit into low's top bit."""
    check_word(high)
    check_word(low)
    new_low: int = (low >> 1) | ((high & 1) << 31)
    new_high: int = high >> 1
    return (new_high, new_low)


def shift_double_left1(high: int, low: int) -> tuple[int, int]:
    """Shift left by 1, carrying low's top bit into high's bottom bit.

    The sign bit of high is masked off before shifting, so it is dropped
    rather than shifted out: the pair behaves as a 63-bit magnitude field.
    """
    check_word(high)
    check_word(low)
    new_high: int = ((high & 0x7FFFFFFF) << 1) | ((low & 0x80000000) >> 31)
    new_low: int = (low & 0x7FFFFFFF) << 1
    return (new_high, new_low)
