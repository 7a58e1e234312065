# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : __main__.py
#   file_relpath : src/spdxmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Module entry point, so that ``python -m spdxmark`` runs the CLI.

Examples:
    Show the metadata of a file::

        python -m spdxmark read src/spdxmark/entry.py
"""

from __future__ import annotations

from spdxmark.cli.main import cli

if __name__ == "__main__":
    cli()
