"""javadoc-lexer: lossless tokenizer for Javadoc-style documentation comments.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import javadoc_lexer

    source = '''/**
     * Returns the {@code <b>} count.
     *
     * @return the count
     */'''
    tokens = javadoc_lexer.lex(source)

    # Every character of the input is accounted for
    javadoc_lexer.detokenize(javadoc_lexer.lex_raw(source)) == source

    javadoc_lexer.__version__
    '0.1.0'
"""
from __future__ import annotations

from javadoc_lexer.grammar.tokens import Token, TokenKind
from javadoc_lexer.lexer.errors import (
    InternalInconsistencyError,
    InvalidInputError,
    JavadocLexError,
)
from javadoc_lexer.lexer.lexer import Lexer, detokenize, lex, lex_raw
from javadoc_lexer.merger.merger import join_adjacent_literals

__version__: str = "0.1.0"

__all__ = [
    "__version__",
    "lex",
    "lex_raw",
    "detokenize",
    "join_adjacent_literals",
    "Lexer",
    "Token",
    "TokenKind",
    "JavadocLexError",
    "InvalidInputError",
    "InternalInconsistencyError",
]
