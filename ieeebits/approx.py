"""Approximation algorithms for square roots, logarithms and integer powers.

Everything here is built from host arithmetic plus the bit codec; none of it
calls the math module. Values are host floats (float64). Only the inverse
square root narrows to float32, because its initial guess is read off the
float32 bit pattern.
"""

from __future__ import annotations

from .constants import E
from .floats import F32_EXP_MASK, build_float, float_bits
from .rounding import DomainError, is_finite

DEFAULT_EPSILON: float = 1.0e-13
INV_SQRT_MAGIC: int = 0x5F3759DF
LOG_DOMAIN_SENTINEL: float = -1.0


# ---------------------------------------------------------------------------
# Square roots
# ---------------------------------------------------------------------------


def inv_sqrt(x: float) -> float:
    """Fast 1/sqrt(x): magic-constant guess plus one Newton-Raphson step.

    Relative error stays below 0.2% for normal positive float32 inputs.
    """
    if not is_finite(x) or x <= 0:
        raise DomainError("inv_sqrt requires a positive finite value, got " + repr(x))
    xbits: int = float_bits(x)
    if (xbits & F32_EXP_MASK) == 0:
        # zero or subnormal once narrowed; the magic guess needs a biased exponent
        raise DomainError("inv_sqrt requires a normal float32 value, got " + repr(x))
    bits: int = INV_SQRT_MAGIC - (xbits >> 1)
    temp: float = build_float(bits)
    return temp * (1.5 - 0.5 * x * temp * temp)


def fast_sqrt(x: float) -> float:
    return x * inv_sqrt(x)


# ---------------------------------------------------------------------------
# Logarithms
# ---------------------------------------------------------------------------


def log(x: float, base: float, epsilon: float) -> float:
    """Logarithm of x in the given base by binary digit extraction.

    Returns -1.0 when both x and base are below 1. Otherwise x is scaled
    into [1, base) to get the integer part, then each fractional bit is read
    by squaring: a square that reaches base contributes the current bit
    weight, starting at 0.5 and halving until it drops to epsilon.
    """
    if x < 1 and base < 1:
        return LOG_DOMAIN_SENTINEL
    if not epsilon > 0:
        raise DomainError("log epsilon must be positive, got " + repr(epsilon))
    if not is_finite(x) or not is_finite(base):
        raise DomainError("log requires finite operands")
    if x <= 0:
        raise DomainError("log of non-positive value " + repr(x))
    if base <= 0 or base == 1:
        raise DomainError("invalid log base " + repr(base))
    if base < 1:
        # x >= 1 here; dividing by base < 1 would never bring it below base
        raise DomainError("log base below 1 requires x below 1")
    integer_part: int = 0
    while x < 1:
        integer_part -= 1
        x = x * base
    while x >= base:
        integer_part += 1
        x = x / base
    fractional_part: float = 0.0
    partial: float = 0.5
    x = x * x
    while partial > epsilon:
        if x >= base:
            fractional_part += partial
            x = x / base
        partial = partial * 0.5
        x = x * x
    return integer_part + fractional_part


def ln(x: float) -> float:
    return log(x, E, DEFAULT_EPSILON)


def log2(x: float) -> float:
    return log(x, 2.0, DEFAULT_EPSILON)


def log10(x: float) -> float:
    return log(x, 10.0, DEFAULT_EPSILON)


# ---------------------------------------------------------------------------
# Powers
# ---------------------------------------------------------------------------


def power(x: float, n: int) -> float:
    """x**n for a non-negative integer n, by exponentiation by squaring."""
    if not isinstance(n, int):
        raise DomainError("power requires an integer exponent, got " + repr(n))
    if n < 0:
        raise DomainError("power requires a non-negative exponent, got " + str(n))
    result: float = 1.0
    base: float = x
    exp: int = n
    while exp > 0:
        if exp % 2 == 1:
            result = result * base
            exp -= 1
        base = base * base
        exp = exp // 2
    return result
