"""Byte/bit codec: big-endian 4-byte sequences to and from unsigned 32-bit words."""

from __future__ import annotations

import struct
from typing import Sequence

WORD_BYTES: int = 4
MASK32: int = 0xFFFFFFFF


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


class IeeeBitsError(Exception):
    """Base error for ieeebits."""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg


class CodecError(IeeeBitsError, ValueError):
    """Malformed byte sequence, or a value the target format cannot hold."""


# ---------------------------------------------------------------------------
# Words
# ---------------------------------------------------------------------------


def check_word(bits: int) -> int:
    if bits < 0 or bits > MASK32:
        raise CodecError("bit pattern out of 32-bit range: " + hex(bits))
    return bits


def bytes_to_bits(raw: Sequence[int]) -> int:
    """Decode 4 big-endian bytes; raw[0] is the most significant."""
    if len(raw) != WORD_BYTES:
        raise CodecError("expected 4 bytes, got " + str(len(raw)))
    bits: int = 0
    i = 0
    while i < WORD_BYTES:
        b: int = raw[i]
        if b < 0 or b > 0xFF:
            raise CodecError("byte out of range at index " + str(i) + ": " + str(b))
        bits = bits | (b << (8 * (3 - i)))
        i += 1
    return bits


def bits_to_bytes(bits: int) -> bytes:
    """Encode an unsigned 32-bit word as 4 big-endian bytes."""
    return struct.pack(">I", check_word(bits))
