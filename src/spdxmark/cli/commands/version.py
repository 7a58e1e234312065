# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : version.py
#   file_relpath : src/spdxmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""SpdxMark `version` command.

Prints the current SpdxMark version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from spdxmark.cli.console import get_console
from spdxmark.cli.options import OutputFormat, output_format_option
from spdxmark.constants import SPDXMARK_VERSION


@click.command(
    name="version",
    help="Show the current version of SpdxMark.",
)
@output_format_option
def version_command(*, output_format: str) -> None:
    """Show the current version of SpdxMark."""
    console = get_console(click.get_current_context())
    if OutputFormat(output_format) == OutputFormat.JSON:
        console.print_json({"version": SPDXMARK_VERSION})
    else:
        console.print(console.styled(SPDXMARK_VERSION, bold=True))
