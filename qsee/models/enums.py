"""Enumeration types for qsee."""

from enum import StrEnum


class LineType(StrEnum):
    """Category of a single input-file line."""

    SECTION_HEADER = "section_header"
    DATA_ENTRY = "data_entry"
    CONTINUATION = "continuation"
    EMPTY = "empty"


class DataType(StrEnum):
    """Scalar types a stored value can be converted to."""

    STRING = "string"
    INT = "int"
    UNSIGNED = "unsigned"
    BOOL = "bool"
    FLOAT = "float"
