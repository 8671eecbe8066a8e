"""
Number helpers for the Calculator.

The calculator keeps its operands as numeral strings and follows browser
number conventions when moving between strings and floats:
- parse_number reads the longest numeric prefix, like JavaScript parseFloat
- number_to_string writes a float back the way String(number) does
- format_number produces the text shown on the displays
"""
import math
import re
import sys
from decimal import ROUND_HALF_UP, Decimal

from app.projects.calculator.core.constants import (
    EXPONENT_DIGITS,
    LARGE_DISPLAY_THRESHOLD,
    MAX_FRACTION_DIGITS,
    POSITIONAL_MAX,
    POSITIONAL_MIN,
    RESULT_SCALE,
    SMALL_DISPLAY_THRESHOLD,
)

_NUMERIC_PREFIX = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)
_NUMERAL = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_FRACTION_QUANTUM = Decimal(1).scaleb(-MAX_FRACTION_DIGITS)


def parse_number(value):
    """
    Parse a numeral (or number) to a float.

    Returns None where parseFloat would give NaN: empty or non-numeric text,
    None, or a NaN float.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return None if math.isnan(number) else number

    match = _NUMERIC_PREFIX.match(str(value))
    if not match:
        return None
    return float(match.group(1).replace("Infinity", "inf"))


def is_numeral(text) -> bool:
    """True if text is a complete numeral (a trailing "e" or "e-" is not)."""
    return isinstance(text, str) and _NUMERAL.fullmatch(text) is not None


def round_result(value: float) -> float:
    """Round an arithmetic result to 8 decimal places, ties upward."""
    if not math.isfinite(value):
        return value
    scaled = (value + sys.float_info.epsilon) * RESULT_SCALE
    if not math.isfinite(scaled):
        return value
    # floor(scaled + 0.5) is inexact once scaled passes 2**52
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return whole / RESULT_SCALE


def _exponent_form(mantissa: str, exponent: int) -> str:
    sign = "+" if exponent >= 0 else "-"
    return f"{mantissa}e{sign}{abs(exponent)}"


def _special_text(number: float):
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    return None


def number_to_string(value: float) -> str:
    """Shortest round-tripping numeral for value (8 -> '8', 1e21 -> '1e+21')."""
    special = _special_text(value)
    if special:
        return special
    if value == 0:
        return "0"

    text = repr(value)
    magnitude = abs(value)
    if POSITIONAL_MIN <= magnitude < POSITIONAL_MAX:
        if "e" in text:
            text = format(Decimal(text), "f")
        if text.endswith(".0"):
            text = text[:-2]
        return text

    mantissa, exponent = text.split("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    return _exponent_form(mantissa, int(exponent))


def to_exponential(value: float, digits: int = EXPONENT_DIGITS) -> str:
    """Exponent notation with a fixed number of fraction digits (1.500000e+10)."""
    special = _special_text(value)
    if special:
        return special
    mantissa, exponent = format(value, f".{digits}e").split("e")
    return _exponent_form(mantissa, int(exponent))


def format_number(value) -> str:
    """
    Format a numeral for display.

    Args:
        value (str | float): Numeral string or number

    Returns:
        str: '0' for unparseable input; exponent notation for magnitudes of
             1e10 and above or nonzero magnitudes below 1e-6; otherwise a plain
             decimal with at most 8 fraction digits and no grouping
    """
    number = parse_number(value)
    if number is None:
        return "0"

    magnitude = abs(number)
    if magnitude >= LARGE_DISPLAY_THRESHOLD or (
        magnitude < SMALL_DISPLAY_THRESHOLD and number != 0
    ):
        return to_exponential(number)

    rounded = Decimal(repr(number)).quantize(_FRACTION_QUANTUM, rounding=ROUND_HALF_UP)
    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
