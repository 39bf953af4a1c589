"""Rounding and classification built on truncating int() conversion."""

from __future__ import annotations

from .codec import IeeeBitsError
from .floats import F64_HIGH_EXP_MASK, F64_HIGH_FRAC_MASK, double_words


class DomainError(IeeeBitsError, ValueError):
    """Input outside an operation's domain."""


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def is_nan(a: float) -> bool:
    high, low = double_words(a)
    if (high & F64_HIGH_EXP_MASK) != F64_HIGH_EXP_MASK:
        return False
    return (high & F64_HIGH_FRAC_MASK) != 0 or low != 0


def is_infinite(a: float) -> bool:
    high, low = double_words(a)
    return (high & 0x7FFFFFFF) == F64_HIGH_EXP_MASK and low == 0


def is_finite(a: float) -> bool:
    """True unless the exponent field is all ones (NaN or infinity)."""
    high = double_words(a)[0]
    return (high & F64_HIGH_EXP_MASK) != F64_HIGH_EXP_MASK


def _truncate(a: float) -> int:
    if not is_finite(a):
        raise DomainError("cannot truncate non-finite value " + repr(a))
    return int(a)


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------


def is_whole_number(a: float) -> bool:
    return _truncate(a) == a


def ceil(a: float) -> int:
    """Round positive fractions up; everything else truncates toward zero.

    ceil(-2.3) is -2, which matches mathematical ceiling only because
    truncation already moves negative values up.
    """
    if a > 0 and not is_whole_number(a):
        return _truncate(a + 1.0)
    return _truncate(a)


def floor(a: float) -> int:
    if a < 0 and not is_whole_number(a):
        return _truncate(a - 1.0)
    return _truncate(a)


def round(a: float) -> int:
    """Round half up: round(2.5) is 3, round(-2.5) is -2."""
    return floor(a + 0.5)
