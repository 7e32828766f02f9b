"""Conversion pipeline - composes reader, pivot and writer.

Each stage stays independently callable; this module only strings them
together for callers that want one of the standard outputs:
1. Read the project list from the line source
2. Pivot to members (member report only)
3. Write the chosen protocol to the line sink
"""

import logging
from typing import Optional, Union

from contracts import OutputFormat, PipelineResult
from codec import read_projects, write_members, write_projects
from codec.lines import SinkLike, SourceLike
from pivot import pivot_projects
from config import settings


logger = logging.getLogger(__name__)


def run_pipeline(
    source: SourceLike,
    sink: SinkLike,
    emit: Optional[Union[OutputFormat, str]] = None,
    attach_roles: Optional[bool] = None,
) -> PipelineResult:
    """Read a project list and emit the requested protocol.

    The whole input is read and validated before the first line is written,
    so a FormatError leaves the sink untouched.

    Args:
        source: Line source holding a project list
        sink: Line sink for the output protocol
        emit: Output protocol; defaults to settings.default_emit
        attach_roles: Passed to the pivot; defaults to settings.pivot_attach_roles

    Returns:
        PipelineResult with counts for the run

    Raises:
        FormatError: If the input does not match the project-list grammar.
    """
    emit = OutputFormat(emit or settings.default_emit)
    if attach_roles is None:
        attach_roles = settings.pivot_attach_roles

    projects = read_projects(source)
    member_count = 0
    lines_written = 0

    if emit == OutputFormat.MEMBERS:
        members = pivot_projects(projects, attach_roles=attach_roles)
        member_count = len(members)
        lines_written = write_members(members, sink)
    elif emit == OutputFormat.PROJECTS:
        lines_written = write_projects(projects, sink)

    result = PipelineResult(
        emit=emit,
        project_count=len(projects),
        member_count=member_count,
        lines_written=lines_written,
    )
    logger.info(
        "Converted %d project(s) to %s: %d member(s), %d line(s)",
        result.project_count,
        emit.value,
        result.member_count,
        result.lines_written,
    )
    return result
