# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : dep5.py
#   file_relpath : src/spdxmark/cli/commands/dep5.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""SpdxMark `dep5` command.

Parses a DEP-5 file and prints its stanzas; useful to check the file is well
formed (malformed input exits with FORMAT_ERROR).
"""

from __future__ import annotations

from pathlib import Path

import click

from spdxmark.cli.cmd_common import load_cli_config, load_control_file
from spdxmark.cli.console import get_console
from spdxmark.cli.errors import SpdxmarkFileNotFoundError
from spdxmark.cli.options import OutputFormat, output_format_option, root_option


@click.command(
    name="dep5",
    help="Parse a DEP-5 file and print its stanzas.",
)
@click.argument(
    "file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@root_option
@output_format_option
def dep5_command(*, file: Path | None, root: Path | None, output_format: str) -> None:
    """Dump the stanzas of the DEP-5 file."""
    console = get_console(click.get_current_context())
    config = load_cli_config(root)
    control_file = load_control_file(config, file)
    if control_file is None:
        raise SpdxmarkFileNotFoundError("No DEP-5 file given and none configured.")

    if OutputFormat(output_format) == OutputFormat.JSON:
        console.print_json([stanza.to_dict() for stanza in control_file.stanzas])
        return

    for index, stanza in enumerate(control_file.stanzas):
        if index:
            console.print()
        for key, value in stanza.fields:
            first, *rest = value.split("\n")
            console.print(f"{console.styled(key, bold=True)}: {first}")
            for line in rest:
                console.print(f" {line}")
