"""Line source and line sink capabilities.

The reader pulls one line at a time and the writer pushes one line at a
time; neither knows whether the lines come from stdin, a file or a list.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Optional, TextIO, Union


class LineSource(ABC):
    """Pull-side capability: hand out the next line, or None at end of input."""

    @abstractmethod
    def read_line(self) -> Optional[str]:
        """Return the next line without its terminator, or None when exhausted."""
        pass


class LineSink(ABC):
    """Push-side capability: accept one line."""

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Consume one line (without terminator)."""
        pass


class ListLineSource(LineSource):
    """Serves lines from an in-memory sequence."""

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)

    def read_line(self) -> Optional[str]:
        return next(self._lines, None)


class ListLineSink(LineSink):
    """Collects written lines into a list."""

    def __init__(self):
        self.lines: List[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)


class StreamLineSource(LineSource):
    """Reads lines from a text stream, dropping the trailing terminator."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def read_line(self) -> Optional[str]:
        line = self._stream.readline()
        if line == "":
            return None
        # Only a full terminator is dropped; a lone "\r" is line content
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith("\n"):
            return line[:-1]
        return line


class StreamLineSink(LineSink):
    """Writes each line to a text stream followed by a newline."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def write_line(self, line: str) -> None:
        self._stream.write(line)
        self._stream.write("\n")


class _CallableLineSource(LineSource):
    def __init__(self, func: Callable[[], Optional[str]]):
        self._func = func

    def read_line(self) -> Optional[str]:
        return self._func()


class _CallableLineSink(LineSink):
    def __init__(self, func: Callable[[str], None]):
        self._func = func

    def write_line(self, line: str) -> None:
        self._func(line)


SourceLike = Union[LineSource, Callable[[], Optional[str]]]
SinkLike = Union[LineSink, Callable[[str], None]]


def as_line_source(source: SourceLike) -> LineSource:
    """Accept a LineSource or a zero-argument callable returning the next line."""
    if isinstance(source, LineSource):
        return source
    if callable(source):
        return _CallableLineSource(source)
    raise TypeError(f"Expected a LineSource or callable, got {type(source).__name__}")


def as_line_sink(sink: SinkLike) -> LineSink:
    """Accept a LineSink or a one-argument callable consuming a line."""
    if isinstance(sink, LineSink):
        return sink
    if callable(sink):
        return _CallableLineSink(sink)
    raise TypeError(f"Expected a LineSink or callable, got {type(sink).__name__}")
