#!/usr/bin/env python3
"""Example: a tiny re-wrapping renderer on top of javadoc-lexer

Shows how a renderer consumes the token list: WHITESPACE is a place
where a line may break, FORCED_NEWLINE and block tags always start a new
line, and everything else is copied verbatim.  Real formatters also
handle paragraphs, lists and indentation; this one only wraps.

Usage:
    python examples/02_rewrap.py

Requirements:
    pip install javadoc-lexer
"""
from __future__ import annotations

import javadoc_lexer
from javadoc_lexer import Token, TokenKind

WIDTH = 40

JAVADOC_SOURCE = """/**
 * A deliberately long first sentence that needs wrapping because it runs well past the limit,
 * mentioning @Nullable mid-sentence.
 * <pre>
 *   keep   this   exactly
 * </pre>
 * @param value the value
 */"""


def rewrap(tokens: list[Token], width: int) -> str:
    lines: list[str] = []
    current = ""

    def flush() -> None:
        nonlocal current
        if current.strip():
            lines.append(" * " + current.rstrip())
        current = ""

    for token in tokens:
        if token.kind in (TokenKind.BEGIN_JAVADOC, TokenKind.END_JAVADOC):
            continue
        if token.kind is TokenKind.WHITESPACE:
            if current:
                current += " "
        elif token.kind in (TokenKind.FORCED_NEWLINE, TokenKind.FOOTER_JAVADOC_TAG_START):
            flush()
            if token.kind is TokenKind.FOOTER_JAVADOC_TAG_START:
                current = token.text
        else:
            if len(current) + len(token.text) > width and current.strip():
                flush()
            current += token.text
    flush()
    return "/**\n" + "\n".join(lines) + "\n */"


def main() -> None:
    print(rewrap(javadoc_lexer.lex(JAVADOC_SOURCE), WIDTH))


if __name__ == "__main__":
    main()
