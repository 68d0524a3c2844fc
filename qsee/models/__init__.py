"""Pydantic models and enums for qsee.

Import from submodules directly for cleaner imports:

    from qsee.models.enums import LineType, DataType
    from qsee.models.summary import InputFileSummary
"""

# ============ ENUMS ============
from .enums import DataType, LineType

# ============ HTTP RESPONSE MODELS ============
from .responses import DataResponse, HealthResponse, ListResponse, SectionResponse

# ============ SUMMARY MODELS ============
from .summary import Atom, InputFileSummary, InputParameter

__all__ = [
    # Enums
    "DataType",
    "LineType",
    # Summary
    "Atom",
    "InputParameter",
    "InputFileSummary",
    # Responses
    "HealthResponse",
    "DataResponse",
    "SectionResponse",
    "ListResponse",
]
