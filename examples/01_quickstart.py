#!/usr/bin/env python3
"""Example: Quickstart for javadoc-lexer

Minimal working example: lex a Javadoc comment, look at its block
tags, and confirm that nothing was lost.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install javadoc-lexer
"""
from __future__ import annotations

import javadoc_lexer
from javadoc_lexer import TokenKind

JAVADOC_SOURCE = """/**
 * Returns the sum of {@code a} and {@code b}.
 *
 * <p>Overflow wraps around, see @link Math#addExact for a checked version.
 *
 * @param a the first operand
 * @param b the second operand
 * @return {@code a + b}
 */"""


def main() -> None:
    print(f"javadoc-lexer version: {javadoc_lexer.__version__}")

    # Step 1: Lex the comment
    tokens = javadoc_lexer.lex(JAVADOC_SOURCE)
    print(f"Lexed {len(tokens)} tokens")

    # Step 2: Find the block tags
    tags = [t.text for t in tokens if t.kind is TokenKind.FOOTER_JAVADOC_TAG_START]
    print(f"Block tags: {', '.join(tags)}")

    # Step 3: Mid-line "@link" stays attached to the word before it
    for token in tokens:
        if token.is_literal and "@link" in token.text:
            print(f"Kept together: {token.text!r}")

    # Step 4: The raw token stream is lossless
    raw = javadoc_lexer.lex_raw(JAVADOC_SOURCE)
    assert javadoc_lexer.detokenize(raw) == JAVADOC_SOURCE
    print("Round-trip OK")


if __name__ == "__main__":
    main()
