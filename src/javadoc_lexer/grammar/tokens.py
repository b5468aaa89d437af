"""Token definitions for Javadoc comment lexing.

Defines the closed vocabulary of token kinds the lexer can emit.  Every
structural HTML tag the formatter cares about, every whitespace flavor
and the comment delimiters themselves are represented as a member of the
``TokenKind`` enum, and every scanned span is represented by a ``Token``
dataclass that carries its kind and exact text.

Inline-tag delimiters (``{@code``, a bare ``{`` or ``}``) are *not*
distinct kinds: they are emitted as ``LITERAL`` and only influence the
lexer's brace counter.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Exhaustive enumeration of Javadoc token kinds."""

    # -----------------------------------------------------------------
    # Comment delimiters
    # -----------------------------------------------------------------
    BEGIN_JAVADOC = auto()
    END_JAVADOC = auto()

    # -----------------------------------------------------------------
    # Text and spacing
    # -----------------------------------------------------------------
    LITERAL = auto()
    WHITESPACE = auto()
    FORCED_NEWLINE = auto()

    # -----------------------------------------------------------------
    # Block tags (``@param``, ``@return`` at the start of a line)
    # -----------------------------------------------------------------
    FOOTER_JAVADOC_TAG_START = auto()

    # -----------------------------------------------------------------
    # Structural HTML
    # -----------------------------------------------------------------
    PARAGRAPH_OPEN_TAG = auto()
    PARAGRAPH_CLOSE_TAG = auto()
    LIST_OPEN_TAG = auto()
    LIST_CLOSE_TAG = auto()
    LIST_ITEM_OPEN_TAG = auto()
    LIST_ITEM_CLOSE_TAG = auto()
    BLOCKQUOTE_OPEN_TAG = auto()
    BLOCKQUOTE_CLOSE_TAG = auto()
    HEADER_OPEN_TAG = auto()
    HEADER_CLOSE_TAG = auto()
    BR_TAG = auto()
    HTML_COMMENT = auto()

    # -----------------------------------------------------------------
    # Regions whose layout is preserved verbatim
    # -----------------------------------------------------------------
    PRE_OPEN_TAG = auto()
    PRE_CLOSE_TAG = auto()
    TABLE_OPEN_TAG = auto()
    TABLE_CLOSE_TAG = auto()


# Kinds produced by one of the HTML tag rules.
HTML_TAG_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.PARAGRAPH_OPEN_TAG,
        TokenKind.PARAGRAPH_CLOSE_TAG,
        TokenKind.LIST_OPEN_TAG,
        TokenKind.LIST_CLOSE_TAG,
        TokenKind.LIST_ITEM_OPEN_TAG,
        TokenKind.LIST_ITEM_CLOSE_TAG,
        TokenKind.BLOCKQUOTE_OPEN_TAG,
        TokenKind.BLOCKQUOTE_CLOSE_TAG,
        TokenKind.HEADER_OPEN_TAG,
        TokenKind.HEADER_CLOSE_TAG,
        TokenKind.BR_TAG,
        TokenKind.HTML_COMMENT,
        TokenKind.PRE_OPEN_TAG,
        TokenKind.PRE_CLOSE_TAG,
        TokenKind.TABLE_OPEN_TAG,
        TokenKind.TABLE_CLOSE_TAG,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed span of a Javadoc comment.

    Parameters
    ----------
    kind:
        The ``TokenKind`` variant for this token.
    text:
        The raw text exactly as it appeared in the comment.  Only the
        delimiter tokens and spaces inserted while joining literals are
        synthesized.
    """

    kind: TokenKind
    text: str

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r})"

    @property
    def is_literal(self) -> bool:
        """Return True if this token is plain text eligible for joining."""
        return self.kind is TokenKind.LITERAL

    @property
    def is_whitespace(self) -> bool:
        """Return True if this token is breakable whitespace."""
        return self.kind is TokenKind.WHITESPACE

    @property
    def is_html_tag(self) -> bool:
        """Return True if this token is a recognized HTML tag or comment."""
        return self.kind in HTML_TAG_KINDS
