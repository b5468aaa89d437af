"""Literal joining: the second pass over the lexer's raw tokens.

The lexer's literal rule stops before ``<``, ``{``, ``}``, ``@`` and
``*``, so a word like ``foo<b>bar</b>`` arrives as several adjacent
``LITERAL`` tokens.  This pass joins them back into one token, e.g.
``["<b>", "foo", "</b>"] -> ["<b>foo</b>"]``, so a renderer never breaks
a line inside a word.  A run of whitespace after joined literals is
replaced by one synthesized space.

It also keeps ``text @word`` together.  If the renderer were allowed to
break the line at that space, the next line would start with ``@word``
and read as a new block tag.  When joined literals are followed by
whitespace and then a literal starting with ``@``, the whitespace is
replaced by a single space and the ``@`` literal is appended::

    LITERAL("See") WHITESPACE LITERAL("@link") -> LITERAL("See @link")
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from javadoc_lexer.grammar.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


class TokenMerger:
    """Joins adjacent ``LITERAL`` tokens in a token sequence.

    The walk is index-based because deciding what to do with a run of
    whitespace requires peeking at the token after it first.

    Parameters
    ----------
    tokens:
        Tokens as produced by ``Lexer.raw_tokens``.
    """

    __slots__ = ("_tokens", "_pos", "_output", "_accumulated")

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens: Sequence[Token] = tokens
        self._pos: int = 0
        self._output: list[Token] = []
        self._accumulated: list[str] = []

    def merge(self) -> list[Token]:
        """Run the pass and return the joined token list."""
        tokens = self._tokens
        while self._pos < len(tokens):
            token = tokens[self._pos]

            if token.is_literal:
                self._accumulated.append(token.text)
                self._pos += 1
                continue

            if not self._accumulated:
                self._output.append(token)
                self._pos += 1
                continue

            skipped_whitespace = self._skip_whitespace()
            if self._pos < len(tokens) and self._starts_tag_like_literal(tokens[self._pos]):
                logger.debug("Keeping %r on the same line as the preceding text", tokens[self._pos].text)
                self._accumulated.append(" ")
                self._accumulated.append(tokens[self._pos].text)
                self._pos += 1
                continue

            self._flush()
            if skipped_whitespace:
                self._output.append(Token(TokenKind.WHITESPACE, " "))
            # The token at self._pos is looked at again on the next iteration.

        # Lexer output always ends with END_JAVADOC, but arbitrary input may not.
        self._flush()
        return self._output

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _skip_whitespace(self) -> bool:
        start = self._pos
        while self._pos < len(self._tokens) and self._tokens[self._pos].is_whitespace:
            self._pos += 1
        return self._pos > start

    @staticmethod
    def _starts_tag_like_literal(token: Token) -> bool:
        return token.is_literal and token.text.startswith("@")

    def _flush(self) -> None:
        if self._accumulated:
            self._output.append(Token(TokenKind.LITERAL, "".join(self._accumulated)))
            self._accumulated.clear()


def join_adjacent_literals(tokens: Sequence[Token]) -> list[Token]:
    """Join adjacent literal tokens and protect mid-line ``@word`` text.

    Parameters
    ----------
    tokens:
        Raw tokens, typically from ``Lexer.raw_tokens``.

    Returns
    -------
    list[Token]
        A new list; ``tokens`` is not modified.
    """
    return TokenMerger(tokens).merge()
