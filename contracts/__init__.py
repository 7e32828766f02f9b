"""Pydantic contracts for the xmldoc-convert pipeline.

Every hand-off between reader, pivot and writer is typed through these contracts.
"""

from .project import (
    ProjectMember,
    Project,
)

from .member import (
    MemberRole,
    Member,
)

from .pipeline_contracts import (
    OutputFormat,
    PipelineResult,
)

__all__ = [
    # Project list
    "ProjectMember",
    "Project",
    # Member report
    "MemberRole",
    "Member",
    # Pipeline
    "OutputFormat",
    "PipelineResult",
]
