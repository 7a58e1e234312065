# spdxmark:header:start
#
#   project      : SpdxMark
#   file         : xml.py
#   file_relpath : src/spdxmark/commenters/xml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spdxmark:header:end

"""Commenter for markup comments: `<!-- ... -->` (XML, HTML, SVG, Markdown).

The block is written as the very first thing in the file. Documents starting
with an XML declaration will therefore get the comment before the declaration;
callers that care should pick another style via configuration.
"""

from __future__ import annotations

from spdxmark.commenters.base import Commenter


class XmlCommenter(Commenter):
    """Commenter for XML/HTML-style block comments."""

    name = "xml"
    comment_start_line = "<!--"
    line_prefix = ""
    comment_end_line = "-->"
