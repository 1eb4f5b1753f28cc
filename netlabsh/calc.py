"""Four-function calculator working in single precision."""

import enum
import math
import re
import struct
import sys

_NUMBER_PREFIX = re.compile(
    r"""\s*([+-]?(?:
        0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?
      | (?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?
      | inf(?:inity)?
      | nan
    ))""",
    re.VERBOSE | re.IGNORECASE,
)


class Operation(enum.Enum):
    """The supported operations."""

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"


def _f32(value):
    """Round to the nearest single-precision value."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _leading_float(text):
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return 0.0
    literal = match.group(1)
    body = literal.lstrip("+-")
    if body[:2].lower() == "0x":
        return float.fromhex(literal)
    return float(literal)


def parse_number(text):
    """Read the leading number of ``text``; a zero result is only accepted from "0"."""
    value = _f32(_leading_float(text))
    if value == 0 and text != "0":
        raise ValueError(f"Invalid input: {text!r}")
    return value


def calculate(operation, num1, num2):
    """Apply ``operation`` to the two numbers in single precision."""
    op = Operation(operation)
    a, b = _f32(num1), _f32(num2)
    if op is Operation.ADD:
        result = a + b
    elif op is Operation.SUB:
        result = a - b
    elif op is Operation.MUL:
        result = a * b
    else:
        if b == 0:
            raise ZeroDivisionError("Division by zero is not allowed.")
        result = a / b
    return _f32(result)


def main(argv=None):
    """Run ``itungwoi {add|sub|mul|div} num1 num2``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        sys.stderr.write("Usage: itungwoi {add|sub|mul|div} num1 num2\n")
        return 1
    operation, first, second = args

    numbers = []
    for label, text in (("num1", first), ("num2", second)):
        try:
            numbers.append(parse_number(text))
        except ValueError:
            sys.stderr.write(f"Error: Invalid input for {label}\n")
            return 1

    try:
        result = calculate(operation, *numbers)
    except ZeroDivisionError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    except ValueError:
        sys.stderr.write(
            f"Error: Invalid operation '{operation}'. Use {{add|sub|mul|div}}\n"
        )
        return 1

    sys.stdout.write(f"{result:.2f}\n")
    return 0