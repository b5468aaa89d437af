"""Javadoc grammar module.

Exports token definitions and the compiled rule patterns.
"""
from __future__ import annotations

from javadoc_lexer.grammar import patterns
from javadoc_lexer.grammar.tokens import HTML_TAG_KINDS, Token, TokenKind

__all__ = [
    "TokenKind",
    "Token",
    "HTML_TAG_KINDS",
    "patterns",
]
