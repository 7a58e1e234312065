# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : __init__.py
#   file_relpath : src/spdxmark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""SpdxMark CLI subcommands."""
