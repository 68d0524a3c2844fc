"""Engine core module.

This module contains the input-file engine:
- Key ordering for the sectioned dictionary
- Line classification
- Parsing into an ordered dictionary
- The read-only query API on parsed input
"""

from .errors import (
    DataConversionError,
    DataNotFoundError,
    InputError,
    InputFileError,
    InvalidBooleanError,
)
from .input import Input, read_lines
from .keys import INVALID_INDEX, compare_keys, extract_index, input_sort_key, key_less, sort_keys
from .lines import classify_line, find_unenclosed_separator, has_unenclosed_separator
from .parser import DEFAULT_CASE_SENSITIVE_KEYS, InputParser, merge_section, reverse_by_dot
from .store import InputMap

__all__ = [
    # Errors
    "InputError",
    "InputFileError",
    "DataNotFoundError",
    "DataConversionError",
    "InvalidBooleanError",
    # Key ordering
    "compare_keys",
    "extract_index",
    "input_sort_key",
    "key_less",
    "sort_keys",
    "INVALID_INDEX",
    # Lines
    "classify_line",
    "find_unenclosed_separator",
    "has_unenclosed_separator",
    # Parsing
    "InputParser",
    "merge_section",
    "reverse_by_dot",
    "DEFAULT_CASE_SENSITIVE_KEYS",
    # Storage and queries
    "InputMap",
    "Input",
    "read_lines",
]
