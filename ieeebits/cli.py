"""ieeebits CLI — inspect bit patterns and run the approximations."""

from __future__ import annotations

import sys
from typing import Callable

from .approx import DEFAULT_EPSILON, fast_sqrt, inv_sqrt, ln, log, log2, log10, power
from .codec import IeeeBitsError
from .floats import (
    build_double,
    build_float,
    double_words,
    float_bits,
    long_bits_from_signed,
)
from .rounding import ceil, floor, is_whole_number, round
from .shift import shift_double_left1, shift_double_right1


USAGE: str = """\
ieeebits [OPTIONS] COMMAND ARGS...

Commands:
  bits X             float32 bit pattern of X
  dbits X            float64 high and low words of X
  ibits N            two's-complement bits of a signed 32-bit N
  float BITS         float32 value of a bit pattern
  double HIGH LOW    float64 value of a word pair
  shl HIGH LOW       shift a word pair left by one bit
  shr HIGH LOW       shift a word pair right by one bit
  floor X | ceil X | round X | whole X
  isqrt X | sqrt X   fast inverse square root / fast square root
  log X BASE         logarithm by digit extraction
  ln X | log2 X | log10 X
  pow X N            X to a non-negative integer power N

Options:
  --epsilon E        Precision for log (default 1e-13)
  --help             Show this help message
"""


def _word(w: int) -> str:
    return "0x%08X" % w


def _pair(p: tuple[int, int]) -> str:
    return _word(p[0]) + " " + _word(p[1])


def _is_flag(arg: str) -> bool:
    if not arg.startswith("-") or arg == "-":
        return False
    try:
        float(arg)
        return False
    except ValueError:
        pass
    try:
        int(arg, 0)
    except ValueError:
        return True
    return False


def _run(command: str, operands: list[str], epsilon: float) -> str:
    """Evaluate one command. Raises ValueError on unparseable operands."""
    if command == "bits":
        return _word(float_bits(float(operands[0])))
    if command == "dbits":
        return _pair(double_words(float(operands[0])))
    if command == "ibits":
        return _word(long_bits_from_signed(int(operands[0], 0)))
    if command == "float":
        return repr(build_float(int(operands[0], 0)))
    if command == "double":
        return repr(build_double(int(operands[0], 0), int(operands[1], 0)))
    if command == "shl":
        return _pair(shift_double_left1(int(operands[0], 0), int(operands[1], 0)))
    if command == "shr":
        return _pair(shift_double_right1(int(operands[0], 0), int(operands[1], 0)))
    if command == "whole":
        return "true" if is_whole_number(float(operands[0])) else "false"
    if command in ROUNDERS:
        return str(ROUNDERS[command](float(operands[0])))
    if command in UNARY:
        return repr(UNARY[command](float(operands[0])))
    if command == "log":
        return repr(log(float(operands[0]), float(operands[1]), epsilon))
    return repr(power(float(operands[0]), int(operands[1], 0)))


ROUNDERS: dict[str, Callable[[float], int]] = {
    "floor": floor,
    "ceil": ceil,
    "round": round,
}

UNARY: dict[str, Callable[[float], float]] = {
    "isqrt": inv_sqrt,
    "sqrt": fast_sqrt,
    "ln": ln,
    "log2": log2,
    "log10": log10,
}

ARITY: dict[str, int] = {
    "bits": 1,
    "dbits": 1,
    "ibits": 1,
    "float": 1,
    "double": 2,
    "shl": 2,
    "shr": 2,
    "floor": 1,
    "ceil": 1,
    "round": 1,
    "whole": 1,
    "isqrt": 1,
    "sqrt": 1,
    "ln": 1,
    "log2": 1,
    "log10": 1,
    "log": 2,
    "pow": 2,
}


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    epsilon = DEFAULT_EPSILON
    positional: list[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return 0
        elif arg == "--epsilon":
            if i + 1 >= len(args):
                print("ieeebits: --epsilon requires a value", file=sys.stderr)
                return 2
            try:
                epsilon = float(args[i + 1])
            except ValueError:
                print("ieeebits: invalid epsilon '" + args[i + 1] + "'", file=sys.stderr)
                return 2
            i += 2
        elif _is_flag(arg):
            print("ieeebits: unknown flag '" + arg + "'", file=sys.stderr)
            return 2
        else:
            positional.append(arg)
            i += 1
    if len(positional) == 0:
        print("ieeebits: missing command", file=sys.stderr)
        return 2

    command = positional[0]
    operands = positional[1:]
    if command not in ARITY:
        print("ieeebits: unknown command '" + command + "'", file=sys.stderr)
        return 2
    if len(operands) != ARITY[command]:
        print(
            "ieeebits: "
            + command
            + " expects "
            + str(ARITY[command])
            + " argument(s), got "
            + str(len(operands)),
            file=sys.stderr,
        )
        return 2

    try:
        output = _run(command, operands, epsilon)
    except IeeeBitsError as e:
        print("ieeebits: error: " + e.msg, file=sys.stderr)
        return 1
    except ValueError as e:
        print("ieeebits: invalid argument: " + str(e), file=sys.stderr)
        return 2
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
