"""Project-list reader.

Reads the line format

    <projects>
        <project name="PNAME">
            <member role="RNAME" name="MNAME"/>
        </project>
    </projects>

into a list of Project contracts. The reader is a fail-fast state machine:
the first line that does not fit the grammar raises FormatError and the
partially built list is discarded. Exactly one line is pulled from the
source per expected line.
"""

import logging
from typing import List, Tuple

from contracts import Project, ProjectMember
from codec import tokens
from codec.errors import FormatError
from codec.lines import SourceLike, as_line_source


logger = logging.getLogger(__name__)


def parse_project_header(line: str) -> str:
    """Return the project name from a project header line.

    The name is everything between the fixed prefix and suffix, so it may
    itself contain the suffix token.

    Raises:
        FormatError: If the line is not a project header.
    """
    if not (
        len(line) >= tokens.PROJECT_HEADER_MIN_LENGTH
        and line.startswith(tokens.PROJECT_HEADER_START)
        and line.endswith(tokens.PROJECT_HEADER_END)
    ):
        raise FormatError("Project header is incorrect.", line=line)
    return line[len(tokens.PROJECT_HEADER_START):len(line) - len(tokens.PROJECT_HEADER_END)]


def parse_member_line(line: str) -> Tuple[str, str]:
    """Return (role, name) from a member line.

    The role ends at the first name delimiter after the prefix. A role that
    contains the delimiter therefore splits early and the remainder becomes
    part of the name.

    Raises:
        FormatError: If the line is not a member line.
    """
    if not (
        len(line) >= tokens.MEMBER_MIN_LENGTH
        and line.startswith(tokens.MEMBER_START)
        and line.endswith(tokens.MEMBER_END)
        and tokens.MEMBER_NAME_START in line
    ):
        raise FormatError("Member line is incorrect.", line=line)

    role_start = len(tokens.MEMBER_START)
    name_end = len(line) - len(tokens.MEMBER_END)
    delimiter_at = line.find(tokens.MEMBER_NAME_START, role_start)
    # The delimiter must sit wholly between the prefix and the suffix
    if delimiter_at < 0 or delimiter_at + len(tokens.MEMBER_NAME_START) > name_end:
        raise FormatError("Member line is incorrect.", line=line)

    role = line[role_start:delimiter_at]
    name = line[delimiter_at + len(tokens.MEMBER_NAME_START):name_end]
    return role, name


class ProjectReader:
    """Pulls lines from a source and assembles Project contracts.

    Tracks the current line number so errors can point at the offending line.
    """

    def __init__(self, source: SourceLike):
        """Initialize the reader.

        Args:
            source: LineSource, or a zero-argument callable returning the
                next line or None at end of input.
        """
        self.source = as_line_source(source)
        self.line_number = 0

    def _next_line(self, expected: str) -> str:
        line = self.source.read_line()
        if line is None:
            raise FormatError(f"Unexpected end of input; {expected} was expected.")
        self.line_number += 1
        return line

    def _fail(self, error: FormatError) -> FormatError:
        return FormatError(error.message, line_number=self.line_number, line=error.line)

    def read(self) -> List[Project]:
        """Read a complete project list.

        Returns:
            Projects in the order they appear.

        Raises:
            FormatError: On any structural violation or premature end of input.
        """
        header = self._next_line(f"'{tokens.PROJECTS_HEADER}'")
        if header != tokens.PROJECTS_HEADER:
            raise FormatError("Projects header was expected.", line_number=self.line_number, line=header)

        projects: List[Project] = []
        while True:
            line = self._next_line(f"a project header or '{tokens.PROJECTS_TAIL}'")
            if line == tokens.PROJECTS_TAIL:
                break
            try:
                name = parse_project_header(line)
            except FormatError as e:
                raise self._fail(e) from None
            project = Project(name=name, members=self._read_members())
            logger.debug("Read project %r with %d member(s)", project.name, len(project.members))
            projects.append(project)

        logger.debug("Read %d project(s) from %d line(s)", len(projects), self.line_number)
        return projects

    def _read_members(self) -> List[ProjectMember]:
        members: List[ProjectMember] = []
        while True:
            line = self._next_line(f"a member line or '{tokens.PROJECT_TAIL.strip()}'")
            if line == tokens.PROJECT_TAIL:
                return members
            try:
                role, name = parse_member_line(line)
            except FormatError as e:
                raise self._fail(e) from None
            members.append(ProjectMember(role=role, name=name))


def read_projects(source: SourceLike) -> List[Project]:
    """Convenience function to read a project list from a line source."""
    return ProjectReader(source).read()
