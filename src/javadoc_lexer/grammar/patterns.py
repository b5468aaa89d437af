"""Compiled patterns for every lexer rule.

All patterns are applied with ``pattern.match(text, pos)``, so they are
implicitly anchored at the cursor and never scan ahead.  They are
immutable module-level constants and safe to share between threads.

Rule notation used in comments:
    ``open(name)``   ``<name ...>``, case-insensitive, attributes ignored
    ``close(name)``  ``</name ...>``, case-insensitive, attributes ignored
"""
from __future__ import annotations

import re
from typing import Final

# ---------------------------------------------------------------------------
# Comment delimiters
# ---------------------------------------------------------------------------

BEGIN_DELIMITER: Final[str] = "/**"
END_DELIMITER: Final[str] = "*/"


def open_tag_pattern(name_pattern: str) -> re.Pattern[str]:
    """Return a case-insensitive pattern for an opening tag such as ``<p class="x">``."""
    return re.compile(rf"<(?:{name_pattern})\b[^>]*>", re.IGNORECASE)


def close_tag_pattern(name_pattern: str) -> re.Pattern[str]:
    """Return a case-insensitive pattern for a closing tag such as ``</p>``."""
    return re.compile(rf"</(?:{name_pattern})\b[^>]*>", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Whitespace and tags
# ---------------------------------------------------------------------------

# Trailing blanks, the newline, indentation, an optional ``*`` marker
# and one following space form a single unit.
NEWLINE: Final[re.Pattern[str]] = re.compile(r"[ \t]*\n[ \t]*[*]?[ \t]?")

# Only tried when nothing but whitespace precedes it on the line.
FOOTER_TAG: Final[re.Pattern[str]] = re.compile(r"@\w*", re.ASCII)

INLINE_TAG_OPEN: Final[re.Pattern[str]] = re.compile(r"[{]@\w*", re.ASCII)

HTML_COMMENT: Final[re.Pattern[str]] = re.compile(r"<!--.*?-->", re.DOTALL)

# ---------------------------------------------------------------------------
# Preserving regions
# ---------------------------------------------------------------------------

PRE_OPEN: Final[re.Pattern[str]] = open_tag_pattern("pre")
PRE_CLOSE: Final[re.Pattern[str]] = close_tag_pattern("pre")
TABLE_OPEN: Final[re.Pattern[str]] = open_tag_pattern("table")
TABLE_CLOSE: Final[re.Pattern[str]] = close_tag_pattern("table")

# ---------------------------------------------------------------------------
# Structural HTML
# ---------------------------------------------------------------------------

PARAGRAPH_OPEN: Final[re.Pattern[str]] = open_tag_pattern("p")
PARAGRAPH_CLOSE: Final[re.Pattern[str]] = close_tag_pattern("p")
LIST_OPEN: Final[re.Pattern[str]] = open_tag_pattern("ul|ol|dl")
LIST_CLOSE: Final[re.Pattern[str]] = close_tag_pattern("ul|ol|dl")
LIST_ITEM_OPEN: Final[re.Pattern[str]] = open_tag_pattern("li|dt|dd")
LIST_ITEM_CLOSE: Final[re.Pattern[str]] = close_tag_pattern("li|dt|dd")
BLOCKQUOTE_OPEN: Final[re.Pattern[str]] = open_tag_pattern("blockquote")
BLOCKQUOTE_CLOSE: Final[re.Pattern[str]] = close_tag_pattern("blockquote")
HEADER_OPEN: Final[re.Pattern[str]] = open_tag_pattern("h[1-6]")
HEADER_CLOSE: Final[re.Pattern[str]] = close_tag_pattern("h[1-6]")
BR: Final[re.Pattern[str]] = open_tag_pattern("br")

# ---------------------------------------------------------------------------
# Literal text
# ---------------------------------------------------------------------------

# One character of anything, then a run that stops before whitespace and
# every character another rule could start on.  ``foo<b>bar</b>`` is
# therefore split here and rejoined by the merger.
LITERAL: Final[re.Pattern[str]] = re.compile(r".[^ \t\n@<{}*]*", re.DOTALL)
