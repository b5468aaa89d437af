"""Error types raised while lexing a Javadoc comment.

Two conditions exist.  ``InvalidInputError`` is the caller's problem:
the text handed to the lexer is not a delimited ``/** ... */`` comment.
``InternalInconsistencyError`` is ours: the rule table failed to match
at some position, which the catch-all literal rule makes unreachable.
"""
from __future__ import annotations


class JavadocLexError(Exception):
    """Base class for all errors raised by ``javadoc_lexer``."""


class InvalidInputError(JavadocLexError, ValueError):
    """Raised when the input is not a delimited Javadoc comment.

    Parameters
    ----------
    missing:
        The delimiter that could not be found, ``"/**"`` or ``"*/"``.
    text:
        The offending input.
    """

    def __init__(self, missing: str, text: str) -> None:
        super().__init__(f"Missing {missing}: {text!r}")
        self.missing = missing
        self.text = text


class InternalInconsistencyError(JavadocLexError, AssertionError):
    """Raised when no lexer rule matches at the cursor.

    This indicates a defect in the rule table, not bad input, and is
    never caught inside the library.

    Parameters
    ----------
    message:
        Description of the rule that failed.
    offset:
        0-based offset into the stripped comment body.
    """

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"Internal lexer error at offset {offset}: {message}")
        self.lex_message = message
        self.offset = offset
