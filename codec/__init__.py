"""Codec module for the project-list and member-report line formats."""

from .errors import FormatError
from .lines import (
    LineSource,
    LineSink,
    ListLineSource,
    ListLineSink,
    StreamLineSource,
    StreamLineSink,
    as_line_source,
    as_line_sink,
)
from .reader import ProjectReader, read_projects
from .writer import write_projects, write_members

__all__ = [
    "FormatError",
    "LineSource",
    "LineSink",
    "ListLineSource",
    "ListLineSink",
    "StreamLineSource",
    "StreamLineSink",
    "as_line_source",
    "as_line_sink",
    "ProjectReader",
    "read_projects",
    "write_projects",
    "write_members",
]
