"""Line-format writers for project lists and member reports.

Values are templated between the literal delimiters without escaping. A
name that contains a delimiter produces a line that reads back differently;
the format has no way to express it.
"""

from typing import Iterable

from contracts import Member, Project
from codec import tokens
from codec.lines import SinkLike, as_line_sink


def format_project_header(project: Project) -> str:
    """Render the opening line of a project block."""
    return tokens.PROJECT_HEADER_START + project.name + tokens.PROJECT_HEADER_END


def format_member_line(role: str, name: str) -> str:
    """Render a project member line."""
    return tokens.MEMBER_START + role + tokens.MEMBER_NAME_START + name + tokens.MEMBER_END


def format_member_header(member: Member) -> str:
    """Render the opening line of a member block."""
    return tokens.MEMBER_HEADER_START + member.name + tokens.MEMBER_HEADER_END


def format_role_line(role: str, project: str) -> str:
    """Render a member role line."""
    return tokens.ROLE_START + role + tokens.ROLE_PROJECT_START + project + tokens.ROLE_END


def write_projects(projects: Iterable[Project], sink: SinkLike) -> int:
    """Write a project list; the exact inverse of read_projects.

    Args:
        projects: Projects in output order
        sink: LineSink, or a one-argument callable consuming a line

    Returns:
        Number of lines written
    """
    out = as_line_sink(sink)
    count = 0

    def emit(line: str) -> None:
        nonlocal count
        out.write_line(line)
        count += 1

    emit(tokens.PROJECTS_HEADER)
    for project in projects:
        emit(format_project_header(project))
        for member in project.members:
            emit(format_member_line(member.role, member.name))
        emit(tokens.PROJECT_TAIL)
    emit(tokens.PROJECTS_TAIL)
    return count


def write_members(members: Iterable[Member], sink: SinkLike) -> int:
    """Write a member report.

    Args:
        members: Members in output order
        sink: LineSink, or a one-argument callable consuming a line

    Returns:
        Number of lines written
    """
    out = as_line_sink(sink)
    count = 0

    def emit(line: str) -> None:
        nonlocal count
        out.write_line(line)
        count += 1

    emit(tokens.MEMBERS_HEADER)
    for member in members:
        emit(format_member_header(member))
        for role in member.roles:
            emit(format_role_line(role.name, role.project))
        emit(tokens.MEMBER_TAIL)
    emit(tokens.MEMBERS_TAIL)
    return count
