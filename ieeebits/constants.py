"""Process-wide numeric constants.

The non-normal values are materialized from fixed bit patterns once, when the
module is first imported.
"""

from __future__ import annotations

from typing import Final

from .floats import build_double

E: Final[float] = 2.718281828459045
PI: Final[float] = 3.141592653589793

NAN_WORDS: Final[tuple[int, int]] = (0xFFFFFFFF, 0xFFFFFFFF)
POSITIVE_INFINITY_WORDS: Final[tuple[int, int]] = (0x7FF00000, 0x00000000)
NEGATIVE_INFINITY_WORDS: Final[tuple[int, int]] = (0xFFF00000, 0x00000000)

NAN: Final[float] = build_double(NAN_WORDS[0], NAN_WORDS[1])
POSITIVE_INFINITY: Final[float] = build_double(
    POSITIVE_INFINITY_WORDS[0], POSITIVE_INFINITY_WORDS[1]
)
NEGATIVE_INFINITY: Final[float] = build_double(
    NEGATIVE_INFINITY_WORDS[0], NEGATIVE_INFINITY_WORDS[1]
)
