"""Services built on top of the input engine."""

from .input_file import extract_title, parse_geometry, summarize_file, summarize_input

__all__ = [
    "extract_title",
    "parse_geometry",
    "summarize_file",
    "summarize_input",
]
