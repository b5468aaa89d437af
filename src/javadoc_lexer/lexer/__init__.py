"""Javadoc lexer module.

Exports the ``Lexer`` class, the ``lex`` convenience functions and the
error types.
"""
from __future__ import annotations

from javadoc_lexer.lexer.cursor import CharCursor
from javadoc_lexer.lexer.errors import (
    InternalInconsistencyError,
    InvalidInputError,
    JavadocLexError,
)
from javadoc_lexer.lexer.lexer import Lexer, detokenize, lex, lex_raw, strip_delimiters
from javadoc_lexer.lexer.nesting import NestingCounter

__all__ = [
    "Lexer",
    "lex",
    "lex_raw",
    "detokenize",
    "strip_delimiters",
    "CharCursor",
    "NestingCounter",
    "JavadocLexError",
    "InvalidInputError",
    "InternalInconsistencyError",
]
