"""Exceptions raised by the input engine.

Only two kinds of failure reach callers: an input source that cannot be
read, and query-time failures (missing key, bad conversion). Structural
problems found while parsing are logged and absorbed by the parser.
"""


class InputError(Exception):
    """Base class for all input engine errors."""


class InputFileError(InputError, OSError):
    """The input source could not be opened or read."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Could not open file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DataNotFoundError(InputError, KeyError):
    """A typed lookup was made for a key that is not in the dictionary."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Data {key} Not Found")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return self.args[0]


class DataConversionError(InputError, ValueError):
    """A stored value could not be converted to the requested type."""

    def __init__(self, key: str, value: str, target: str):
        self.key = key
        self.value = value
        self.target = target
        super().__init__(self._message())

    def _message(self) -> str:
        return f"Cannot convert {self.key}={self.value!r} to {self.target}"


class InvalidBooleanError(DataConversionError):
    """A stored value is not one of TRUE, ON, FALSE, OFF."""

    def __init__(self, key: str, value: str):
        super().__init__(key, value, "bool")

    def _message(self) -> str:
        return f"Invalid Boolean Input: {self.value}"
