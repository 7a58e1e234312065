# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : read.py
#   file_relpath : src/spdxmark/cli/commands/read.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""SpdxMark `read` command.

Reports the licensing metadata that applies to each given file, resolved from
its ``.license`` sidecar, its own header, or the DEP-5 file (in that order).
Exits with FAILURE when at least one file has no licensing information.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from spdxmark.cli.cmd_common import load_cli_config, load_control_file, translate_errors
from spdxmark.cli.console import get_console
from spdxmark.cli.exit_codes import ExitCode
from spdxmark.cli.options import OutputFormat, output_format_option, root_option
from spdxmark.config.logging import get_logger
from spdxmark.constants import FILE_COPYRIGHT_TAG, LICENSE_IDENTIFIER_TAG
from spdxmark.resolver import resolve_entry

if TYPE_CHECKING:
    from spdxmark.config.logging import SpdxmarkLogger
    from spdxmark.entry import FileEntry

logger: SpdxmarkLogger = get_logger(__name__)


@click.command(
    name="read",
    help="Show the license identifiers and copyright statements of files.",
)
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--dep5",
    "dep5_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="DEP-5 file to consult (default: configured or .reuse/dep5).",
)
@root_option
@output_format_option
def read_command(
    *,
    paths: tuple[Path, ...],
    dep5_path: Path | None,
    root: Path | None,
    output_format: str,
) -> None:
    """Resolve and print the metadata of each path."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    config = load_cli_config(root)
    control_file = load_control_file(config, dep5_path)

    results: list[tuple[Path, FileEntry | None]] = []
    with translate_errors():
        for path in paths:
            entry = resolve_entry(path, control_file=control_file, base_dir=config.root)
            results.append((path, entry))

    if OutputFormat(output_format) == OutputFormat.JSON:
        console.print_json(
            [
                entry.to_dict()
                if entry is not None
                else {"path": str(path), "license_identifiers": [], "copyright_statements": []}
                for path, entry in results
            ]
        )
    else:
        for path, entry in results:
            if entry is None:
                console.print(console.styled(f"{path}: no licensing information", fg="yellow"))
                continue
            console.print(console.styled(str(path), bold=True))
            for statement in entry.copyright_statements:
                console.print(f"  {FILE_COPYRIGHT_TAG} {statement}")
            for identifier in entry.license_identifiers:
                console.print(f"  {LICENSE_IDENTIFIER_TAG} {identifier}")

    missing = sum(1 for _, entry in results if entry is None)
    if missing:
        logger.info("%d of %d file(s) without licensing information", missing, len(results))
        ctx.exit(ExitCode.FAILURE)
