"""Javadoc lexer: converts a ``/** ... */`` comment into a flat list of tokens.

The lexer is a single-pass scanner that produces exactly one token per
loop iteration by trying an ordered chain of rules at the cursor.  The
first rule that matches decides the token kind, and the span it consumed
becomes the token text.  Precedence matters because several rules start
on the same character (``<`` opens a ``<pre>``, a ``<p>``, a comment, or
is just text):

    1. newline unit (with the ``*`` continuation marker)
    2. a single space or tab
    3. block tag ``@name`` (only before any content on the line)
    4. inline tag ``{@name``, bare ``{`` and ``}``
    5. anything inside an inline tag, as literal text
    6. ``<pre>`` / ``<table>`` open and close
    7. anything inside ``<pre>`` / ``<table>``, as literal text
    8. structural HTML (``<p>``, lists, ``<blockquote>``, headers,
       ``<br>``, ``<!-- -->``)
    9. literal text

Inside ``<pre>`` and ``<table>`` spaces are emitted as ``LITERAL`` and
newlines as ``FORCED_NEWLINE`` so that a re-wrapping renderer cannot
change the layout.  Unicode escapes are not interpreted.

The raw token list is then passed through
``javadoc_lexer.merger.join_adjacent_literals``.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from typing import Final

from javadoc_lexer.grammar import patterns
from javadoc_lexer.grammar.tokens import Token, TokenKind
from javadoc_lexer.lexer.cursor import CharCursor
from javadoc_lexer.lexer.errors import InternalInconsistencyError, InvalidInputError
from javadoc_lexer.lexer.nesting import NestingCounter
from javadoc_lexer.merger.merger import join_adjacent_literals

logger = logging.getLogger(__name__)

# Tried in this order once neither an inline tag nor a preserving region
# is active.
_STRUCTURAL_TAG_RULES: Final[tuple[tuple[re.Pattern[str], TokenKind], ...]] = (
    (patterns.PARAGRAPH_OPEN, TokenKind.PARAGRAPH_OPEN_TAG),
    (patterns.PARAGRAPH_CLOSE, TokenKind.PARAGRAPH_CLOSE_TAG),
    (patterns.LIST_OPEN, TokenKind.LIST_OPEN_TAG),
    (patterns.LIST_CLOSE, TokenKind.LIST_CLOSE_TAG),
    (patterns.LIST_ITEM_OPEN, TokenKind.LIST_ITEM_OPEN_TAG),
    (patterns.LIST_ITEM_CLOSE, TokenKind.LIST_ITEM_CLOSE_TAG),
    (patterns.BLOCKQUOTE_OPEN, TokenKind.BLOCKQUOTE_OPEN_TAG),
    (patterns.BLOCKQUOTE_CLOSE, TokenKind.BLOCKQUOTE_CLOSE_TAG),
    (patterns.HEADER_OPEN, TokenKind.HEADER_OPEN_TAG),
    (patterns.HEADER_CLOSE, TokenKind.HEADER_CLOSE_TAG),
    (patterns.BR, TokenKind.BR_TAG),
    (patterns.HTML_COMMENT, TokenKind.HTML_COMMENT),
)


def strip_delimiters(source: str) -> str:
    """Return the body of a Javadoc comment without ``/**`` and ``*/``.

    Stripping up front keeps the newline rule from swallowing the closing
    ``*/`` as a continuation marker.

    Raises
    ------
    InvalidInputError
        If ``source`` does not start with ``/**``, does not end with
        ``*/``, or is too short to hold both.
    """
    if not source.startswith(patterns.BEGIN_DELIMITER):
        raise InvalidInputError(patterns.BEGIN_DELIMITER, source)
    if not source.endswith(patterns.END_DELIMITER) or len(source) <= 4:
        raise InvalidInputError(patterns.END_DELIMITER, source)
    return source[len(patterns.BEGIN_DELIMITER) : -len(patterns.END_DELIMITER)]


class Lexer:
    """Single-use Javadoc lexer.

    Parameters
    ----------
    source:
        The complete comment, including ``/**`` and ``*/``.

    Raises
    ------
    InvalidInputError
        If ``source`` is not delimited as a Javadoc comment.
    """

    __slots__ = (
        "_cursor",
        "_brace_depth",
        "_pre_depth",
        "_table_depth",
        "_something_since_newline",
    )

    def __init__(self, source: str) -> None:
        self._cursor = CharCursor(strip_delimiters(source))
        self._brace_depth = NestingCounter()
        self._pre_depth = NestingCounter()
        self._table_depth = NestingCounter()
        self._something_since_newline: bool = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def brace_depth(self) -> int:
        """Current inline-tag nesting depth."""
        return self._brace_depth.value

    @property
    def pre_depth(self) -> int:
        """Current ``<pre>`` nesting depth."""
        return self._pre_depth.value

    @property
    def table_depth(self) -> int:
        """Current ``<table>`` nesting depth."""
        return self._table_depth.value

    def raw_tokens(self) -> Iterator[Token]:
        """Yield tokens one at a time, before literal joining.

        The first token is always ``BEGIN_JAVADOC`` and the last always
        ``END_JAVADOC``.  The depth properties reflect the state after
        the most recently yielded token.
        """
        yield Token(TokenKind.BEGIN_JAVADOC, patterns.BEGIN_DELIMITER)
        while not self._cursor.is_exhausted():
            yield self._read_token()
        self._log_unclosed_regions()
        yield Token(TokenKind.END_JAVADOC, patterns.END_DELIMITER)

    def tokenize(self, join_literals: bool = True) -> list[Token]:
        """Scan the whole comment and return the token list.

        Parameters
        ----------
        join_literals:
            When ``True`` (the default), run the literal-joining pass so
            the result is ready for a renderer.

        Returns
        -------
        list[Token]
            Ordered tokens from ``BEGIN_JAVADOC`` to ``END_JAVADOC``.

        Raises
        ------
        InternalInconsistencyError
            If no rule matches at some position.
        """
        tokens = list(self.raw_tokens())
        logger.debug("Lexed comment into %d raw token(s)", len(tokens))
        if not join_literals:
            return tokens
        return join_adjacent_literals(tokens)

    # ------------------------------------------------------------------
    # Internal scanner
    # ------------------------------------------------------------------

    def _read_token(self) -> Token:
        kind = self._consume_token()
        return Token(kind, self._cursor.take_recorded())

    def _consume_token(self) -> TokenKind:
        """Consume one token's worth of input and return its kind."""
        cursor = self._cursor
        preserving = self._pre_depth.is_positive() or self._table_depth.is_positive()

        if cursor.try_consume_pattern(patterns.NEWLINE):
            self._something_since_newline = False
            return TokenKind.FORCED_NEWLINE if preserving else TokenKind.WHITESPACE
        if cursor.try_consume_literal(" ") or cursor.try_consume_literal("\t"):
            # A literal space can't be broken, which keeps <pre> lines intact.
            return TokenKind.LITERAL if preserving else TokenKind.WHITESPACE

        if not self._something_since_newline and cursor.try_consume_pattern(patterns.FOOTER_TAG):
            self._something_since_newline = True
            return TokenKind.FOOTER_JAVADOC_TAG_START
        self._something_since_newline = True

        if cursor.try_consume_pattern(patterns.INLINE_TAG_OPEN):
            self._brace_depth.increment()
            return TokenKind.LITERAL
        if cursor.try_consume_literal("{"):
            self._brace_depth.increment_if_positive()
            return TokenKind.LITERAL
        if cursor.try_consume_literal("}"):
            self._brace_depth.decrement_if_positive()
            return TokenKind.LITERAL

        # No HTML interpretation inside an inline tag.
        if self._brace_depth.is_positive():
            return self._consume_literal("inline tag body")

        if cursor.try_consume_pattern(patterns.PRE_OPEN):
            self._pre_depth.increment()
            return TokenKind.PRE_OPEN_TAG
        if cursor.try_consume_pattern(patterns.PRE_CLOSE):
            self._pre_depth.decrement_if_positive()
            return TokenKind.PRE_CLOSE_TAG
        if cursor.try_consume_pattern(patterns.TABLE_OPEN):
            self._table_depth.increment()
            return TokenKind.TABLE_OPEN_TAG
        if cursor.try_consume_pattern(patterns.TABLE_CLOSE):
            self._table_depth.decrement_if_positive()
            return TokenKind.TABLE_CLOSE_TAG

        if preserving:
            return self._consume_literal("preformatted body")

        for pattern, kind in _STRUCTURAL_TAG_RULES:
            if cursor.try_consume_pattern(pattern):
                return kind

        return self._consume_literal("literal text")

    def _consume_literal(self, context: str) -> TokenKind:
        if not self._cursor.try_consume_pattern(patterns.LITERAL):
            raise InternalInconsistencyError(
                f"no rule matched in {context}", self._cursor.position
            )
        return TokenKind.LITERAL

    def _log_unclosed_regions(self) -> None:
        for name, counter in (
            ("inline tag", self._brace_depth),
            ("<pre>", self._pre_depth),
            ("<table>", self._table_depth),
        ):
            if counter.is_positive():
                logger.debug("Comment ended inside %d unclosed %s", counter.value, name)


# ---------------------------------------------------------------------------
# Module-level convenience functions
# ---------------------------------------------------------------------------


def lex(source: str) -> list[Token]:
    """Tokenize a Javadoc comment and join adjacent literals.

    Parameters
    ----------
    source:
        The complete comment, including ``/**`` and ``*/``.

    Returns
    -------
    list[Token]
        Tokens ready for a re-wrapping renderer.

    Raises
    ------
    InvalidInputError
        If the comment delimiters are missing.

    Example
    -------
    ::

        from javadoc_lexer.lexer import lex
        tokens = lex("/** Returns the {@code int} value. */")
    """
    return Lexer(source).tokenize()


def lex_raw(source: str) -> list[Token]:
    """Tokenize a Javadoc comment without joining adjacent literals."""
    return Lexer(source).tokenize(join_literals=False)


def detokenize(tokens: Iterable[Token]) -> str:
    """Concatenate token texts back into comment source."""
    return "".join(token.text for token in tokens)
