"""Input-file engine for qsee."""

from .core import (
    DataConversionError,
    DataNotFoundError,
    Input,
    InputError,
    InputFileError,
    InputMap,
    InputParser,
    InvalidBooleanError,
)

__all__ = [
    "Input",
    "InputMap",
    "InputParser",
    "InputError",
    "InputFileError",
    "DataNotFoundError",
    "DataConversionError",
    "InvalidBooleanError",
]
