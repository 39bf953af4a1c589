"""Float/double marshalling tests.

Bit patterns are drawn with weighted random generation, as in the softfloat
TestFloat-style suites, so boundary exponents and significands come up often.
"""

import math
import random
import struct

import pytest

from ieeebits.codec import CodecError
from ieeebits.floats import (
    build_double,
    build_float,
    double_high_bits,
    double_low_bits,
    double_words,
    float_bits,
    long_bits_from_signed,
)

ROUNDS = 50_000
SEED = 0xF32


def f2i(f: float) -> int:
    return struct.unpack(">Q", struct.pack(">d", f))[0]


def i2f(i: int) -> float:
    return struct.unpack(">d", struct.pack(">Q", i))[0]


SPECIAL_EXPS_F32 = [0x00, 0x01, 0x7E, 0x7F, 0x80, 0xFE, 0xFF]
SPECIAL_SIGS_F32 = [0x000000, 0x000001, 0x400000, 0x7FFFFE, 0x7FFFFF]

SPECIAL_EXPS_F64 = [0x000, 0x001, 0x3FE, 0x3FF, 0x400, 0x433, 0x7FE, 0x7FF]
SPECIAL_SIGS_F64 = [
    0x0000000000000,
    0x0000000000001,
    0x00000FFFFFFFF,  # low word all ones
    0x0000100000000,  # lowest high-word mantissa bit
    0x8000000000000,
    0xFFFFFFFFFFFFF,
]


def weighted_f32(rng: random.Random) -> int:
    """Generate a float32 bit pattern weighted toward boundary cases."""
    r: int = rng.randint(0, 99)
    if r < 30:
        exp = rng.choice(SPECIAL_EXPS_F32)
        sig = rng.randint(0, 0x7FFFFF)
    elif r < 60:
        exp = rng.randint(0, 0xFF)
        sig = rng.choice(SPECIAL_SIGS_F32)
    else:
        exp = rng.randint(0, 0xFF)
        sig = rng.randint(0, 0x7FFFFF)
    return (rng.randint(0, 1) << 31) | (exp << 23) | sig


def weighted_f64(rng: random.Random) -> int:
    """Generate a float64 bit pattern weighted toward boundary cases."""
    r: int = rng.randint(0, 99)
    if r < 30:
        exp = rng.choice(SPECIAL_EXPS_F64)
        sig = rng.randint(0, 0xFFFFFFFFFFFFF)
    elif r < 60:
        exp = rng.randint(0, 0x7FF)
        sig = rng.choice(SPECIAL_SIGS_F64)
    else:
        exp = rng.randint(0, 0x7FF)
        sig = rng.randint(0, 0xFFFFFFFFFFFFF)
    return (rng.randint(0, 1) << 63) | (exp << 52) | sig


def is_nan_f32(bits: int) -> bool:
    return (bits & 0x7FFFFFFF) > 0x7F800000


# ---------------------------------------------------------------------------
# Known patterns
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "value,bits",
    [
        (1.0, 0x3F800000),
        (3.5, 0x40600000),
        (-2.0, 0xC0000000),
        (0.0, 0x00000000),
        (-0.0, 0x80000000),
        (math.inf, 0x7F800000),
        (-math.inf, 0xFF800000),
    ],
)
def test_float_bits_known(value: float, bits: int):
    assert float_bits(value) == bits
    assert build_float(bits) == value


@pytest.mark.parametrize(
    "value,high,low",
    [
        (1.0, 0x3FF00000, 0x00000000),
        (-2.5, 0xC0040000, 0x00000000),
        (2.0**-1074, 0x00000000, 0x00000001),
        (math.inf, 0x7FF00000, 0x00000000),
    ],
)
def test_double_words_known(value: float, high: int, low: int):
    assert double_high_bits(value) == high
    assert double_low_bits(value) == low
    assert double_words(value) == (high, low)
    assert build_double(high, low) == value


def test_float_bits_rounds_to_float32():
    # 0.1 is not representable; the packer rounds to nearest float32
    assert float_bits(0.1) == 0x3DCCCCCD
    assert build_float(float_bits(0.1)) != 0.1


def test_float_bits_too_large():
    with pytest.raises(CodecError, match="cannot encode"):
        float_bits(1e39)


@pytest.mark.parametrize(
    "value,bits",
    [(0, 0), (1, 1), (-1, 0xFFFFFFFF), (-(2**31), 0x80000000), (2**31 - 1, 0x7FFFFFFF)],
)
def test_long_bits_from_signed(value: int, bits: int):
    assert long_bits_from_signed(value) == bits


@pytest.mark.parametrize("value", [2**31, -(2**31) - 1])
def test_long_bits_from_signed_out_of_range(value: int):
    with pytest.raises(CodecError):
        long_bits_from_signed(value)


# ---------------------------------------------------------------------------
# Round trips
# ---------------------------------------------------------------------------


def test_float_round_trip():
    rng = random.Random(SEED)
    fails = 0
    first_failure = ""
    for _ in range(ROUNDS):
        bits = weighted_f32(rng)
        value = build_float(bits)
        expected = struct.unpack(">f", struct.pack(">I", bits))[0]
        if is_nan_f32(bits):
            ok = math.isnan(value)
        else:
            ok = value == expected and float_bits(value) == bits
        if not ok:
            fails += 1
            if fails == 1:
                first_failure = f"{bits:#010x}: got {value!r}, expected {expected!r}"
    assert fails == 0, f"{fails}/{ROUNDS} failures. First: {first_failure}"


def test_double_round_trip():
    rng = random.Random(SEED)
    fails = 0
    first_failure = ""
    for _ in range(ROUNDS):
        bits = weighted_f64(rng)
        value = i2f(bits)
        high = double_high_bits(value)
        low = double_low_bits(value)
        rebuilt = build_double(high, low)
        if math.isnan(value):
            ok = (high & 0x7FF00000) == 0x7FF00000 and math.isnan(rebuilt)
        else:
            ok = (high << 32) | low == bits and f2i(rebuilt) == bits
        if not ok:
            fails += 1
            if fails == 1:
                first_failure = (
                    f"{bits:#018x}: words ({high:#010x}, {low:#010x}), "
                    f"rebuilt {f2i(rebuilt):#018x}"
                )
    assert fails == 0, f"{fails}/{ROUNDS} failures. First: {first_failure}"
