"""Input-file summary service.

Builds an InputFileSummary from a parsed Input: title comment, charge and
multiplicity, geometry atoms and the remaining parameters. This is the
data behind ``qsee summary`` and ``GET /v1/summary``.
"""

import logging
from pathlib import Path

from ..engine.core import Input
from ..models import Atom, InputFileSummary, InputParameter

logger = logging.getLogger(__name__)

CHARGE_KEY = "MOLECULE.CHARGE"
MULTIPLICITY_KEY = "MOLECULE.MULT"
# Geometry is looked up in this order
GEOMETRY_KEYS = ("MOLECULE.GEOM", "GEOMETRY")
GLOBAL_SECTION = "GLOBAL"


def extract_title(lines: list[str]) -> str:
    """Return the first non-empty comment that appears before any section header."""
    for line in lines:
        stripped = line.strip(" \t\r\n")
        if not stripped:
            continue
        if stripped.startswith("#"):
            comment = stripped[1:].strip(" \t")
            if comment:
                return comment
        elif stripped.startswith("["):
            break
    return ""


def parse_geometry(geometry: str) -> list[Atom]:
    """Read ``ELEMENT X Y Z`` rows; rows that do not fit are skipped."""
    atoms: list[Atom] = []
    for row in geometry.split("\n"):
        fields = row.split()
        if len(fields) < 4:
            continue
        try:
            x, y, z = (float(v) for v in fields[1:4])
        except ValueError:
            logger.debug(f"Skipping geometry row: {row!r}")
            continue
        atoms.append(Atom(element=fields[0], x=x, y=y, z=z))
    return atoms


def split_parameter(full_key: str, value: str) -> InputParameter:
    """Split ``SECTION.KEY`` at the first dot; unsectioned keys go to GLOBAL."""
    section, dot, key = full_key.partition(".")
    if not dot:
        return InputParameter(section=GLOBAL_SECTION, key=full_key, value=value)
    return InputParameter(section=section, key=key, value=value)


def summarize_input(inp: Input) -> InputFileSummary:
    """Collect the summary of a parsed input.

    Raises:
        DataConversionError: If charge or multiplicity is not an integer
    """
    summary = InputFileSummary(
        filename=Path(inp.source).name if inp.source else "",
        title=extract_title(inp.lines),
    )

    if inp.contains_data(CHARGE_KEY):
        summary.charge = inp.get_int(CHARGE_KEY)
    if inp.contains_data(MULTIPLICITY_KEY):
        summary.multiplicity = inp.get_int(MULTIPLICITY_KEY)

    for key in GEOMETRY_KEYS:
        if inp.contains_data(key):
            summary.atoms = parse_geometry(inp.get_string(key))
            break

    summary.parameters = [
        split_parameter(key, value)
        for key, value in inp.entries.items()
        if key not in GEOMETRY_KEYS
    ]
    return summary


def summarize_file(path: str | Path, case_sensitive_keys: list[str] | None = None) -> InputFileSummary:
    """Parse ``path`` and summarize it.

    Raises:
        InputFileError: If the file cannot be read
    """
    if case_sensitive_keys is None:
        inp = Input.from_file(path)
    else:
        inp = Input.from_file(path, case_sensitive_keys)
    return summarize_input(inp)
