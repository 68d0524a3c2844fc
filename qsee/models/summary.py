"""Input-file summary models for qsee."""

from pydantic import BaseModel, Field, computed_field


class Atom(BaseModel):
    """One atom of the molecular geometry."""

    element: str = Field(..., description="Element symbol as written in the input")
    x: float = Field(..., description="X coordinate")
    y: float = Field(..., description="Y coordinate")
    z: float = Field(..., description="Z coordinate")


class InputParameter(BaseModel):
    """A single parsed parameter, split into section and key."""

    section: str = Field(..., description="Top-level section, GLOBAL for unsectioned keys")
    key: str = Field(..., description="Key within the section")
    value: str = Field(..., description="Stored value")


class InputFileSummary(BaseModel):
    """Overview of a parsed input file."""

    filename: str = Field(default="", description="Source file")
    title: str = Field(default="", description="First comment before any section")
    charge: int = Field(default=0, description="Molecular charge")
    multiplicity: int = Field(default=1, description="Spin multiplicity")
    atoms: list[Atom] = Field(default_factory=list, description="Geometry atoms")
    parameters: list[InputParameter] = Field(
        default_factory=list, description="All other parsed parameters, in key order"
    )

    @computed_field
    @property
    def formula(self) -> str:
        """Element composition, C first, H second, then alphabetical (e.g. C6H12O6)."""
        counts: dict[str, int] = {}
        for atom in self.atoms:
            counts[atom.element] = counts.get(atom.element, 0) + 1

        ordered = [e for e in ("C", "H") if e in counts]
        ordered += sorted(e for e in counts if e not in ("C", "H"))
        return "".join(f"{e}{counts[e] if counts[e] > 1 else ''}" for e in ordered)
