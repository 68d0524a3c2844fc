"""qsee - ChronusQ input file parser and query service."""

__version__ = "0.1.0"
