# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : __init__.py
#   file_relpath : src/spdxmark/commenters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Comment-syntax strategies for SPDX metadata headers."""

from __future__ import annotations

from spdxmark.commenters.base import Commenter
from spdxmark.commenters.cblock import CBlockCommenter
from spdxmark.commenters.dashdash import DashDashCommenter
from spdxmark.commenters.plain import PlainCommenter
from spdxmark.commenters.pound import PoundCommenter
from spdxmark.commenters.registry import (
    commenter_names,
    extension_of,
    get_commenter,
    guess_commenter,
)
from spdxmark.commenters.slash import SlashCommenter
from spdxmark.commenters.xml import XmlCommenter

__all__ = [
    "CBlockCommenter",
    "Commenter",
    "DashDashCommenter",
    "PlainCommenter",
    "PoundCommenter",
    "SlashCommenter",
    "XmlCommenter",
    "commenter_names",
    "extension_of",
    "get_commenter",
    "guess_commenter",
]
