# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : combine.py
#   file_relpath : src/spdxmark/cli/commands/combine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""SpdxMark `combine` command.

Merges the metadata of several files into one de-duplicated list, ordered by
path relative to a base directory, e.g. to build a package-level notice.
"""

from __future__ import annotations

from pathlib import Path

import click

from spdxmark.cli.cmd_common import load_cli_config, load_control_file, translate_errors
from spdxmark.cli.console import get_console
from spdxmark.cli.options import OutputFormat, output_format_option, root_option
from spdxmark.combiner import combine_entries
from spdxmark.constants import FILE_COPYRIGHT_TAG, LICENSE_IDENTIFIER_TAG
from spdxmark.resolver import resolve_entry


@click.command(
    name="combine",
    help="Print the combined, de-duplicated metadata of several files.",
)
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--base",
    "base_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory the ordering is computed against (default: project root).",
)
@root_option
@output_format_option
def combine_command(
    *,
    paths: tuple[Path, ...],
    base_dir: Path | None,
    root: Path | None,
    output_format: str,
) -> None:
    """Combine the metadata of ``paths``."""
    console = get_console(click.get_current_context())
    config = load_cli_config(root)
    control_file = load_control_file(config)
    base: Path = base_dir or config.root or Path.cwd()

    with translate_errors():
        entries = [
            entry
            for entry in (
                resolve_entry(path, control_file=control_file, base_dir=config.root)
                for path in paths
            )
            if entry is not None
        ]
    combined = combine_entries(base, entries)

    if OutputFormat(output_format) == OutputFormat.JSON:
        console.print_json(combined.to_dict())
        return
    for statement in combined.copyright_statements:
        console.print(f"{FILE_COPYRIGHT_TAG} {statement}")
    for identifier in combined.license_identifiers:
        console.print(f"{LICENSE_IDENTIFIER_TAG} {identifier}")
