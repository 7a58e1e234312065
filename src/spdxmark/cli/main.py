# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : main.py
#   file_relpath : src/spdxmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Click entry point of the SpdxMark CLI.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` so that subcommands share one console and one logging setup.
"""

from __future__ import annotations

import sys

import click

from spdxmark.cli.commands.annotate import annotate_command
from spdxmark.cli.commands.combine import combine_command
from spdxmark.cli.commands.dep5 import dep5_command
from spdxmark.cli.commands.read import read_command
from spdxmark.cli.commands.version import version_command
from spdxmark.cli.console import ClickConsole
from spdxmark.cli.options import common_verbose_options, resolve_verbosity
from spdxmark.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (logging and console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Explicit flags win over SPDXMARK_LOG_LEVEL
    level: int | None = (
        resolve_verbosity(verbose, quiet) if verbose or quiet else resolve_env_log_level()
    )
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    # Color only on an interactive terminal, never when --no-color is given
    enable_color: bool = not no_color and sys.stdout.isatty()
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: log_level=%s color=%s", level, enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SpdxMark CLI: read and write REUSE/SPDX licensing headers.",
)
@common_verbose_options
@click.option(
    "--no-color",
    "no_color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the SpdxMark CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'spdxmark read [PATHS...]' to show licensing metadata.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(read_command)

cli.add_command(annotate_command)

cli.add_command(combine_command)

cli.add_command(dep5_command)

if __name__ == "__main__":
    cli()
