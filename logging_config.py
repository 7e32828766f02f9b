"""Logging setup for the command line entry point.

Log records go to stderr through rich; stdout is reserved for the line
protocol output.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from config import LOG_LEVELS, settings


def setup_logging(
    level: Optional[str] = None,
    verbose: bool = False,
    override: bool = False,
) -> logging.Handler:
    """Configure the root logger with a rich handler on stderr.

    Only installs the handler when the root logger has none, unless
    override is set, so embedding applications keep their own setup.

    Args:
        level: Log level name; defaults to settings.log_level
        verbose: Force DEBUG regardless of level
        override: Replace any handlers already attached to the root logger

    Returns:
        The rich handler that was created

    Raises:
        ValueError: If level is not a known log level name.
    """
    level_name = "DEBUG" if verbose else (level or settings.log_level).upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level_name}")

    root = logging.getLogger()
    root.setLevel(level_name)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=settings.rich_tracebacks,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    if override:
        for h in list(root.handlers):
            root.removeHandler(h)
        root.addHandler(handler)
    elif not root.handlers:
        root.addHandler(handler)

    return handler
