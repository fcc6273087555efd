"""
Value conversions used by ArgStore queries.

The lenient converters follow the classic C ``atoi``/``atof`` behaviour: they
read the longest numeric prefix of the text and fall back to zero when there is
none. The strict converters accept only text that is a number as a whole, in
the same ASCII syntax, so an accepted value always equals the lenient one.
"""

import re
from typing import Optional

from result import Err, Ok, Result

TRUE_VALUES: tuple[str, ...] = ("true", "on", "yes", "y", "1")
FALSE_VALUES: tuple[str, ...] = ("false", "off", "no", "n", "0")

# C isspace() set, ASCII only
_C_SPACE = r"[ \t\n\v\f\r]*"
_INT_SYNTAX = r"[+-]?[0-9]+"
_FLOAT_SYNTAX = (
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)"
)

_INT_PREFIX = re.compile(_C_SPACE + f"({_INT_SYNTAX})")
_FLOAT_PREFIX = re.compile(_C_SPACE + f"({_FLOAT_SYNTAX})", re.IGNORECASE)
_INT_FULL = re.compile(_INT_SYNTAX)
_FLOAT_FULL = re.compile(_FLOAT_SYNTAX, re.IGNORECASE)


def starts_with_digit(text: str) -> bool:
    """Return True if the first character of text is an ASCII decimal digit."""
    return bool(text) and "0" <= text[0] <= "9"


def match_bool(text: str, ignore_case: bool = False) -> Optional[bool]:
    """
    Look text up in the truthy and falsy token sets.

    Args:
        text: The candidate value.
        ignore_case: Compare case-insensitively when True.

    Returns:
        True or False for a recognized token, None otherwise.
    """
    if ignore_case:
        text = text.lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    return None


def lenient_int(text: str) -> int:
    """
    Parse the integer prefix of text, or return 0 if there is none.

    A prefix too long for int() to convert also gives 0.
    """
    m = _INT_PREFIX.match(text)
    if not m:
        return 0
    try:
        return int(m.group(1))
    except ValueError:
        return 0


def lenient_float(text: str) -> float:
    """
    Parse the floating point prefix of text, or return 0.0 if there is none.

    Decimal notation with an optional exponent, and inf/infinity/nan, are
    recognized. Hexadecimal floats such as "0x1p3" are not: they read as 0.0.
    """
    m = _FLOAT_PREFIX.match(text)
    return float(m.group(1)) if m else 0.0


def strict_int(text: str) -> Result[int, str]:
    if _INT_FULL.fullmatch(text):
        try:
            return Ok(int(text))
        except ValueError:
            pass
    return Err(f"Invalid integer value: '{text}'")


def strict_float(text: str) -> Result[float, str]:
    if _FLOAT_FULL.fullmatch(text):
        return Ok(float(text))
    return Err(f"Invalid floating point value: '{text}'")
