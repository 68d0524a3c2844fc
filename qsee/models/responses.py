"""HTTP response models for qsee."""

from datetime import datetime

from pydantic import BaseModel, Field

from .enums import DataType


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Server version")
    timestamp: datetime = Field(..., description="Current server time")
    source: str | None = Field(default=None, description="Input file being served")
    entries: int = Field(default=0, ge=0, description="Number of parsed entries")


class DataResponse(BaseModel):
    """A single typed value."""

    key: str = Field(..., description="Queried key")
    type: DataType = Field(..., description="Requested conversion")
    value: str | int | bool | float = Field(..., description="Converted value")


class SectionResponse(BaseModel):
    """Contents of a section."""

    section: str = Field(..., description="Queried section")
    exists: bool = Field(..., description="Whether any key is nested under the section")
    keys: list[str] = Field(default_factory=list, description="Immediate child names")
    data: dict[str, str] = Field(
        default_factory=dict, description="Nested entries with the section prefix removed"
    )


class ListResponse(BaseModel):
    """Size of a list key."""

    key: str = Field(..., description="Queried list key")
    exists: bool = Field(..., description="Whether any element key[i] is stored")
    size: int = Field(default=0, ge=0, description="Highest stored index plus one")
