#!/usr/bin/env python3
"""xmldoc-convert CLI - Entry point for the project/member converter.

Usage:
    # Pivot a project list from stdin into a member report on stdout
    python main.py < projects.xml

    # Re-emit the project list (validates and normalises line endings)
    python main.py --input projects.xml --emit projects

    # Validate only and show a summary
    python main.py -i projects.xml --emit none --summary
"""

import sys
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from contracts import OutputFormat, PipelineResult
from codec import FormatError, StreamLineSink, StreamLineSource
from orchestrator import run_pipeline
from logging_config import setup_logging
from config import settings


console = Console(stderr=True)


def print_summary(result: PipelineResult) -> None:
    """Render a run summary table on stderr."""
    table = Table(title="Conversion summary", show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value")
    table.add_row("Output", result.emit.value)
    table.add_row("Projects", f"{result.project_count:,}")
    table.add_row("Members", f"{result.member_count:,}")
    table.add_row("Lines written", f"{result.lines_written:,}")
    console.print(table)


@click.command()
@click.option(
    "--input", "-i", "input_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Project list file (default: stdin)"
)
@click.option(
    "--output", "-o", "output_path",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Output file (default: stdout)"
)
@click.option(
    "--emit", "-e",
    type=click.Choice([f.value for f in OutputFormat]),
    default=None,
    help=f"Output protocol (default: {settings.default_emit})"
)
@click.option(
    "--no-roles",
    is_flag=True,
    help="List pivoted members without their (role, project) lines"
)
@click.option(
    "--summary", "-s",
    is_flag=True,
    help="Print a run summary to stderr"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Verbose logging on stderr"
)
def main(
    input_path: Optional[str],
    output_path: Optional[str],
    emit: Optional[str],
    no_roles: bool,
    summary: bool,
    verbose: bool,
):
    """xmldoc-convert: regroup a project list by member.

    Reads the <projects> line format and writes either the pivoted
    <members> report or the project list itself.
    """
    setup_logging(verbose=verbose)

    attach_roles = False if no_roles else None

    try:
        with click.open_file(input_path or "-", "r", encoding=settings.input_encoding) as infile:
            # Output is opened on first write, after the input has been validated
            with click.open_file(
                output_path or "-", "w", encoding=settings.output_encoding, lazy=True
            ) as outfile:
                result = run_pipeline(
                    StreamLineSource(infile),
                    StreamLineSink(outfile),
                    emit=emit,
                    attach_roles=attach_roles,
                )
    except FormatError as e:
        console.print(f"[red]Format error:[/red] {escape(str(e))}")
        sys.exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid data:[/red] {escape(str(e))}")
        sys.exit(1)

    if summary:
        print_summary(result)


if __name__ == "__main__":
    main()
