"""Scalar conversion of stored values.

Numeric conversion reads the longest numeric prefix of the value after
leading whitespace, so ``"12 BOHR"`` converts to 12 and ``"1.5E-3,"`` to
0.0015. A value with no numeric prefix fails.
"""

import re

from .errors import DataConversionError, InvalidBooleanError

INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)")
FLOAT_PREFIX_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

TRUE_TOKENS = frozenset({"TRUE", "ON"})
FALSE_TOKENS = frozenset({"FALSE", "OFF"})


def to_int(key: str, value: str) -> int:
    match = INT_PREFIX_RE.match(value)
    if not match:
        raise DataConversionError(key, value, "int")
    return int(match.group(1))


def to_unsigned(key: str, value: str) -> int:
    number = to_int(key, value)
    if number < 0:
        raise DataConversionError(key, value, "unsigned")
    return number


def to_float(key: str, value: str) -> float:
    match = FLOAT_PREFIX_RE.match(value)
    if not match:
        raise DataConversionError(key, value, "float")
    return float(match.group(1))


def to_bool(key: str, value: str) -> bool:
    """Convert TRUE/ON and FALSE/OFF; values are already upper-cased by the parser."""
    if value in TRUE_TOKENS:
        return True
    if value in FALSE_TOKENS:
        return False
    raise InvalidBooleanError(key, value)
