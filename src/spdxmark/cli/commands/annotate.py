# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : annotate.py
#   file_relpath : src/spdxmark/cli/commands/annotate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""SpdxMark `annotate` command.

Writes SPDX headers into files. By default the metadata already present in the
header block (or in the ``.license`` sidecar) is kept and the new statements
are appended after it; ``--replace`` discards it. Binary files, and files that
already have a ``.license`` sidecar, get their metadata written to the sidecar.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from spdxmark.cli.cmd_common import load_cli_config, translate_errors
from spdxmark.cli.console import get_console
from spdxmark.cli.errors import SpdxmarkUsageError
from spdxmark.cli.options import root_option
from spdxmark.combiner import combine_entries
from spdxmark.commenters.plain import PlainCommenter
from spdxmark.commenters.registry import commenter_names, get_commenter, guess_commenter
from spdxmark.config.logging import get_logger
from spdxmark.entry import FileEntry
from spdxmark.resolver import metadata_target

if TYPE_CHECKING:
    from collections.abc import Mapping

    from spdxmark.commenters.base import Commenter
    from spdxmark.config.logging import SpdxmarkLogger

logger: SpdxmarkLogger = get_logger(__name__)


def merge_with_existing(new_entry: FileEntry, commenter: Commenter) -> FileEntry:
    """Return ``new_entry`` extended with the header block already in its file.

    Only the leading metadata block counts; copyright-like text in the body of
    the file is left alone.
    """
    existing: FileEntry | None = FileEntry.read_header_block(new_entry.path, commenter)
    if existing is None:
        return new_entry
    combined = combine_entries(new_entry.path.parent, [existing, new_entry])
    return FileEntry(new_entry.path, combined.license_identifiers, combined.copyright_statements)


def target_commenter(
    path: Path,
    target: Path,
    style: str | None,
    overrides: Mapping[str, str],
) -> Commenter:
    """Return the comment style used to write the metadata of ``path`` to ``target``."""
    if target != path:
        return PlainCommenter()
    if style:
        return get_commenter(style)
    return guess_commenter(path, overrides)


@click.command(
    name="annotate",
    help="Add or update SPDX headers in files.",
)
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--license",
    "-l",
    "licenses",
    multiple=True,
    help="SPDX license identifier (repeatable).",
)
@click.option(
    "--copyright",
    "-c",
    "copyrights",
    multiple=True,
    help="Copyright statement (repeatable).",
)
@click.option(
    "--style",
    type=click.Choice(commenter_names()),
    default=None,
    help="Comment style to use instead of guessing from the extension.",
)
@click.option(
    "--replace",
    is_flag=True,
    default=False,
    help="Discard existing metadata instead of merging with it.",
)
@root_option
def annotate_command(
    *,
    paths: tuple[Path, ...],
    licenses: tuple[str, ...],
    copyrights: tuple[str, ...],
    style: str | None,
    replace: bool,
    root: Path | None,
) -> None:
    """Update the header of each path."""
    if not licenses and not copyrights:
        raise SpdxmarkUsageError("Provide at least one --license or --copyright.")

    console = get_console(click.get_current_context())
    config = load_cli_config(root)

    with translate_errors():
        for path in paths:
            target: Path = metadata_target(path)
            if target != path and target.exists():
                console.warn(f"{path}: metadata is kept in {target}")
            commenter: Commenter = target_commenter(path, target, style, config.styles)

            entry = FileEntry(target, licenses, copyrights)
            if not replace:
                entry = merge_with_existing(entry, commenter)
            written: Path = entry.update_file_contents(commenter)
            logger.info("Annotated %s", written)
            console.print(f"Updated {written}")
