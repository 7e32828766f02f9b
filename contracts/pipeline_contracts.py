"""Pipeline contracts for choosing and reporting a conversion run."""

from pydantic import BaseModel, Field
from enum import Enum


class OutputFormat(str, Enum):
    """Which line protocol a conversion run emits."""
    MEMBERS = "members"  # Pivoted member report
    PROJECTS = "projects"  # Project list round-trip
    NONE = "none"  # Validate only


class PipelineResult(BaseModel):
    """Summary of a completed conversion run."""
    emit: OutputFormat = Field(..., description="Output protocol that was written")
    project_count: int = Field(..., ge=0, description="Projects read from the input")
    member_count: int = Field(default=0, ge=0, description="Distinct members produced by the pivot")
    lines_written: int = Field(default=0, ge=0, description="Lines pushed to the sink")
