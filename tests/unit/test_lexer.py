"""Unit tests for javadoc_lexer.lexer: tokenization of Javadoc comments."""
from __future__ import annotations

import logging
import re

import pytest

from javadoc_lexer.grammar import patterns
from javadoc_lexer.grammar.tokens import Token, TokenKind
from javadoc_lexer.lexer import (
    InternalInconsistencyError,
    InvalidInputError,
    Lexer,
    detokenize,
    lex,
    lex_raw,
    strip_delimiters,
)

K = TokenKind


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def kinds_of(tokens: list[Token]) -> list[TokenKind]:
    """Return just the token kinds."""
    return [t.kind for t in tokens]


def pairs_of(tokens: list[Token]) -> list[tuple[TokenKind, str]]:
    return [(t.kind, t.text) for t in tokens]


# ---------------------------------------------------------------------------
# Delimiter handling
# ---------------------------------------------------------------------------


class TestDelimiters:
    @pytest.mark.parametrize("source, missing", [
        ("no delimiters", "/**"),
        ("", "/**"),
        ("/* plain */", "/**"),
        ("abc */", "/**"),
        ("/** abc", "*/"),
        ("/**/", "*/"),
        ("/**", "*/"),
    ])
    def test_invalid_input_names_missing_delimiter(self, source: str, missing: str) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            lex(source)
        assert exc_info.value.missing == missing
        assert missing in str(exc_info.value)

    def test_invalid_input_raised_at_construction(self) -> None:
        with pytest.raises(InvalidInputError):
            Lexer("no delimiters")

    def test_strip_delimiters_returns_body(self) -> None:
        assert strip_delimiters("/** body */") == " body "

    def test_empty_body(self) -> None:
        tokens = lex("/***/")
        assert pairs_of(tokens) == [(K.BEGIN_JAVADOC, "/**"), (K.END_JAVADOC, "*/")]

    def test_delimiters_are_first_and_last(self, method_javadoc: str) -> None:
        tokens = lex(method_javadoc)
        assert tokens[0] == Token(K.BEGIN_JAVADOC, "/**")
        assert tokens[-1] == Token(K.END_JAVADOC, "*/")


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_inline_html_is_joined_into_one_word(self) -> None:
        tokens = lex("/** Hello <b>world</b>. */")
        assert pairs_of(tokens) == [
            (K.BEGIN_JAVADOC, "/**"),
            (K.WHITESPACE, " "),
            (K.LITERAL, "Hello"),
            (K.WHITESPACE, " "),
            (K.LITERAL, "<b>world</b>."),
            (K.WHITESPACE, " "),
            (K.END_JAVADOC, "*/"),
        ]

    def test_inline_html_is_split_before_joining(self) -> None:
        tokens = lex_raw("/** Hello <b>world</b>. */")
        assert pairs_of(tokens) == [
            (K.BEGIN_JAVADOC, "/**"),
            (K.WHITESPACE, " "),
            (K.LITERAL, "Hello"),
            (K.WHITESPACE, " "),
            (K.LITERAL, "<b>world"),
            (K.LITERAL, "</b>."),
            (K.WHITESPACE, " "),
            (K.END_JAVADOC, "*/"),
        ]

    def test_return_tag_on_its_own_line(self) -> None:
        tokens = lex("/**\n * @return nothing\n */")
        assert pairs_of(tokens) == [
            (K.BEGIN_JAVADOC, "/**"),
            (K.WHITESPACE, "\n * "),
            (K.FOOTER_JAVADOC_TAG_START, "@return"),
            (K.WHITESPACE, " "),
            (K.LITERAL, "nothing"),
            (K.WHITESPACE, "\n "),
            (K.END_JAVADOC, "*/"),
        ]

    def test_method_comment_tags(self, method_javadoc: str) -> None:
        tokens = lex(method_javadoc)
        found = kinds_of(tokens)
        assert found.count(K.FOOTER_JAVADOC_TAG_START) == 2
        assert found.count(K.LIST_ITEM_OPEN_TAG) == 2
        assert K.PARAGRAPH_OPEN_TAG in found
        assert K.PRE_OPEN_TAG in found
        assert K.PRE_CLOSE_TAG in found


# ---------------------------------------------------------------------------
# Whitespace and newlines
# ---------------------------------------------------------------------------


class TestWhitespace:
    def test_newline_unit_absorbs_trailing_blanks_and_marker(self) -> None:
        tokens = lex_raw("/** a  \n * b */")
        assert pairs_of(tokens)[1:5] == [
            (K.WHITESPACE, " "),
            (K.LITERAL, "a"),
            (K.WHITESPACE, "  \n * "),
            (K.LITERAL, "b"),
        ]

    def test_newline_without_marker(self) -> None:
        tokens = lex_raw("/**\nfoo\n*/")
        assert pairs_of(tokens) == [
            (K.BEGIN_JAVADOC, "/**"),
            (K.WHITESPACE, "\n"),
            (K.LITERAL, "foo"),
            (K.WHITESPACE, "\n"),
            (K.END_JAVADOC, "*/"),
        ]

    def test_only_one_space_after_marker_is_part_of_newline(self) -> None:
        tokens = lex_raw("/**\n *   x\n */")
        assert pairs_of(tokens)[1:5] == [
            (K.WHITESPACE, "\n * "),
            (K.WHITESPACE, " "),
            (K.WHITESPACE, " "),
            (K.LITERAL, "x"),
        ]

    def test_tab_is_whitespace(self) -> None:
        tokens = lex_raw("/**\tx */")
        assert tokens[1] == Token(K.WHITESPACE, "\t")

    def test_asterisk_inside_text_is_literal(self) -> None:
        tokens = lex("/** a*b */")
        assert Token(K.LITERAL, "a*b") in tokens


# ---------------------------------------------------------------------------
# Block tags
# ---------------------------------------------------------------------------


class TestFooterTags:
    def test_tag_at_start_of_first_line(self) -> None:
        tokens = lex_raw("/** @deprecated */")
        assert tokens[2] == Token(K.FOOTER_JAVADOC_TAG_START, "@deprecated")

    def test_tag_after_extra_indentation(self) -> None:
        tokens = lex("/**\n *   @param x the x\n */")
        assert Token(K.FOOTER_JAVADOC_TAG_START, "@param") in tokens

    def test_tag_mid_line_is_literal(self) -> None:
        tokens = lex_raw("/** See @return x */")
        assert K.FOOTER_JAVADOC_TAG_START not in kinds_of(tokens)
        assert Token(K.LITERAL, "@return") in tokens

    def test_bare_at_sign_is_a_tag_start(self) -> None:
        tokens = lex_raw("/**\n * @\n */")
        assert Token(K.FOOTER_JAVADOC_TAG_START, "@") in tokens

    def test_only_first_word_is_tag(self) -> None:
        tokens = lex_raw("/**\n * @param @other\n */")
        assert [t.text for t in tokens if t.kind is K.FOOTER_JAVADOC_TAG_START] == ["@param"]

    def test_email_address_is_kept_as_one_literal(self) -> None:
        tokens = lex("/** mail me@example.com */")
        assert Token(K.LITERAL, "me@example.com") in tokens

    def test_tag_name_stops_at_non_ascii_letter(self) -> None:
        tokens = lex_raw("/**\n * @paramé x\n */")
        index = tokens.index(Token(K.FOOTER_JAVADOC_TAG_START, "@param"))
        assert tokens[index + 1] == Token(K.LITERAL, "é")


# ---------------------------------------------------------------------------
# Structural HTML
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("tag, expected_kind", [
    ("<p>", K.PARAGRAPH_OPEN_TAG),
    ("</p>", K.PARAGRAPH_CLOSE_TAG),
    ('<P class="intro">', K.PARAGRAPH_OPEN_TAG),
    ("<ul>", K.LIST_OPEN_TAG),
    ("</OL>", K.LIST_CLOSE_TAG),
    ("<dl>", K.LIST_OPEN_TAG),
    ("<li>", K.LIST_ITEM_OPEN_TAG),
    ("<dt>", K.LIST_ITEM_OPEN_TAG),
    ("</dd>", K.LIST_ITEM_CLOSE_TAG),
    ("<blockquote>", K.BLOCKQUOTE_OPEN_TAG),
    ("</blockquote>", K.BLOCKQUOTE_CLOSE_TAG),
    ("<h1>", K.HEADER_OPEN_TAG),
    ("</h6>", K.HEADER_CLOSE_TAG),
    ("<br>", K.BR_TAG),
    ("<br/>", K.BR_TAG),
    ("<BR >", K.BR_TAG),
    ("<!-- note -->", K.HTML_COMMENT),
    ("<pre>", K.PRE_OPEN_TAG),
    ("</pre>", K.PRE_CLOSE_TAG),
    ("<table border=1>", K.TABLE_OPEN_TAG),
    ("</table>", K.TABLE_CLOSE_TAG),
])
def test_html_tag_kind(tag: str, expected_kind: TokenKind) -> None:
    tokens = lex_raw(f"/** {tag} */")
    assert tokens[2] == Token(expected_kind, tag)


@pytest.mark.parametrize("text", ["<b>", "<prefix>", "</br>", "<param>", "<hr>", "<h7>"])
def test_unrecognized_tag_is_literal(text: str) -> None:
    tokens = lex_raw(f"/** {text} */")
    assert tokens[2].kind is K.LITERAL
    assert not any(t.is_html_tag for t in tokens)


class TestHtmlComments:
    def test_comment_spans_lines(self) -> None:
        tokens = lex_raw("/** a <!-- x\n * y --> b */")
        assert Token(K.HTML_COMMENT, "<!-- x\n * y -->") in tokens

    def test_unterminated_comment_is_text(self) -> None:
        tokens = lex_raw("/** <!-- never closed */")
        assert K.HTML_COMMENT not in kinds_of(tokens)


# ---------------------------------------------------------------------------
# Preserving regions
# ---------------------------------------------------------------------------


class TestPreformatted:
    def test_pre_keeps_layout(self) -> None:
        tokens = lex_raw("/**\n * <pre>\n * a  b\n * </pre>\n */")
        assert pairs_of(tokens) == [
            (K.BEGIN_JAVADOC, "/**"),
            (K.WHITESPACE, "\n * "),
            (K.PRE_OPEN_TAG, "<pre>"),
            (K.FORCED_NEWLINE, "\n * "),
            (K.LITERAL, "a"),
            (K.LITERAL, " "),
            (K.LITERAL, " "),
            (K.LITERAL, "b"),
            (K.FORCED_NEWLINE, "\n * "),
            (K.PRE_CLOSE_TAG, "</pre>"),
            (K.WHITESPACE, "\n "),
            (K.END_JAVADOC, "*/"),
        ]

    def test_pre_spaces_joined_into_literal(self) -> None:
        tokens = lex("/**\n * <pre>\n * a  b\n * </pre>\n */")
        assert Token(K.LITERAL, "a  b") in tokens
        assert kinds_of(tokens).count(K.FORCED_NEWLINE) == 2

    def test_no_structural_tags_inside_pre(self) -> None:
        tokens = lex_raw("/** <pre><p>x</pre> */")
        assert kinds_of(tokens) == [
            K.BEGIN_JAVADOC,
            K.WHITESPACE,
            K.PRE_OPEN_TAG,
            K.LITERAL,
            K.PRE_CLOSE_TAG,
            K.WHITESPACE,
            K.END_JAVADOC,
        ]
        assert tokens[3].text == "<p>x"

    def test_nested_pre(self) -> None:
        tokens = lex_raw("/** <pre><pre>a</pre> b</pre> c */")
        assert pairs_of(tokens)[2:] == [
            (K.PRE_OPEN_TAG, "<pre>"),
            (K.PRE_OPEN_TAG, "<pre>"),
            (K.LITERAL, "a"),
            (K.PRE_CLOSE_TAG, "</pre>"),
            (K.LITERAL, " "),
            (K.LITERAL, "b"),
            (K.PRE_CLOSE_TAG, "</pre>"),
            (K.WHITESPACE, " "),
            (K.LITERAL, "c"),
            (K.WHITESPACE, " "),
            (K.END_JAVADOC, "*/"),
        ]

    def test_footer_tag_still_recognized_inside_pre(self) -> None:
        tokens = lex_raw("/** <pre>\n * @Override\n * </pre> */")
        assert Token(K.FOOTER_JAVADOC_TAG_START, "@Override") in tokens

    def test_unclosed_pre_is_not_an_error(self) -> None:
        lexer = Lexer("/** <pre> a */")
        tokens = lexer.tokenize(join_literals=False)
        assert lexer.pre_depth == 1
        assert kinds_of(tokens)[3:] == [K.LITERAL, K.LITERAL, K.LITERAL, K.END_JAVADOC]

    def test_stray_close_does_not_go_negative(self) -> None:
        lexer = Lexer("/** </pre> a */")
        tokens = lexer.tokenize(join_literals=False)
        assert lexer.pre_depth == 0
        assert tokens[3] == Token(K.WHITESPACE, " ")


class TestTable:
    def test_table_keeps_layout(self) -> None:
        tokens = lex_raw("/** <table>\n * <tr><td>a</td></tr>\n * </table> */")
        assert pairs_of(tokens)[2:] == [
            (K.TABLE_OPEN_TAG, "<table>"),
            (K.FORCED_NEWLINE, "\n * "),
            (K.LITERAL, "<tr>"),
            (K.LITERAL, "<td>a"),
            (K.LITERAL, "</td>"),
            (K.LITERAL, "</tr>"),
            (K.FORCED_NEWLINE, "\n * "),
            (K.TABLE_CLOSE_TAG, "</table>"),
            (K.WHITESPACE, " "),
            (K.END_JAVADOC, "*/"),
        ]

    def test_list_tags_inside_table_are_literal(self) -> None:
        tokens = lex_raw("/** <table><ul><li>x</table> */")
        assert K.LIST_OPEN_TAG not in kinds_of(tokens)
        assert K.LIST_ITEM_OPEN_TAG not in kinds_of(tokens)


# ---------------------------------------------------------------------------
# Inline tags
# ---------------------------------------------------------------------------


class TestInlineTags:
    def test_html_inside_inline_tag_is_literal(self) -> None:
        tokens = lex("/** Use {@code <p>foo</p>} here. */")
        assert pairs_of(tokens) == [
            (K.BEGIN_JAVADOC, "/**"),
            (K.WHITESPACE, " "),
            (K.LITERAL, "Use"),
            (K.WHITESPACE, " "),
            (K.LITERAL, "{@code"),
            (K.WHITESPACE, " "),
            (K.LITERAL, "<p>foo</p>}"),
            (K.WHITESPACE, " "),
            (K.LITERAL, "here."),
            (K.WHITESPACE, " "),
            (K.END_JAVADOC, "*/"),
        ]

    def test_nested_braces_balance(self) -> None:
        lexer = Lexer("/** {@code {a}} <p> */")
        tokens = lexer.tokenize(join_literals=False)
        assert pairs_of(tokens)[2:7] == [
            (K.LITERAL, "{@code"),
            (K.WHITESPACE, " "),
            (K.LITERAL, "{"),
            (K.LITERAL, "a"),
            (K.LITERAL, "}"),
        ]
        assert tokens[9] == Token(K.PARAGRAPH_OPEN_TAG, "<p>")
        assert lexer.brace_depth == 0

    def test_bare_brace_does_not_open_inline_tag(self) -> None:
        lexer = Lexer("/** a { <p> } */")
        tokens = lexer.tokenize()
        assert Token(K.PARAGRAPH_OPEN_TAG, "<p>") in tokens
        assert lexer.brace_depth == 0

    def test_inline_tag_inside_pre(self) -> None:
        tokens = lex_raw("/** <pre>{@code <b> }</pre> */")
        assert pairs_of(tokens)[2:] == [
            (K.PRE_OPEN_TAG, "<pre>"),
            (K.LITERAL, "{@code"),
            (K.LITERAL, " "),
            (K.LITERAL, "<b>"),
            (K.LITERAL, " "),
            (K.LITERAL, "}"),
            (K.PRE_CLOSE_TAG, "</pre>"),
            (K.WHITESPACE, " "),
            (K.END_JAVADOC, "*/"),
        ]

    def test_pre_close_inside_unclosed_inline_tag_is_text(self) -> None:
        lexer = Lexer("/** <pre>{@code </pre> */")
        tokens = lexer.tokenize()
        assert K.PRE_CLOSE_TAG not in kinds_of(tokens)
        assert lexer.brace_depth == 1
        assert lexer.pre_depth == 1


# ---------------------------------------------------------------------------
# Literal joining through the full pipeline
# ---------------------------------------------------------------------------


class TestJoining:
    def test_mid_line_tag_kept_with_previous_word(self) -> None:
        tokens = lex("/** See @return x */")
        assert pairs_of(tokens) == [
            (K.BEGIN_JAVADOC, "/**"),
            (K.WHITESPACE, " "),
            (K.LITERAL, "See @return"),
            (K.WHITESPACE, " "),
            (K.LITERAL, "x"),
            (K.WHITESPACE, " "),
            (K.END_JAVADOC, "*/"),
        ]

    def test_joined_html_word_absorbs_following_at_literal(self) -> None:
        tokens = lex("/** a <b>b</b> @c d */")
        assert [t.text for t in tokens if t.is_literal] == ["a", "<b>b</b> @c", "d"]

    def test_unicode_escape_is_not_interpreted(self) -> None:
        tokens = lex("/** \\u002a/ x */")
        assert Token(K.LITERAL, "\\u002a/") in tokens


# ---------------------------------------------------------------------------
# Round-trip
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("source", [
    "/***/",
    "/** Hello <b>world</b>. */",
    "/**\n * @return nothing\n */",
    "/**\r\n * Windows line\r\n */",
    "/** <pre>\n *   indented\n * </pre> */",
    "/** {@code {unbalanced} */",
    "/** <!-- a\n b --> */",
    "/**\n\n\n */",
])
def test_raw_round_trip(source: str) -> None:
    assert detokenize(lex_raw(source)) == source


def test_joined_newline_after_text_becomes_single_space() -> None:
    tokens = lex("/**\n * a\n */")
    assert pairs_of(tokens) == [
        (K.BEGIN_JAVADOC, "/**"),
        (K.WHITESPACE, "\n * "),
        (K.LITERAL, "a"),
        (K.WHITESPACE, " "),
        (K.END_JAVADOC, "*/"),
    ]


def test_joined_output_differs_from_input_only_in_whitespace(method_javadoc: str) -> None:
    joined = [t.text for t in lex(method_javadoc) if not t.is_whitespace]
    raw = [t.text for t in lex_raw(method_javadoc) if not t.is_whitespace]
    assert "".join(joined) == "".join(raw)


# ---------------------------------------------------------------------------
# Failure modes and diagnostics
# ---------------------------------------------------------------------------


def test_missing_literal_rule_is_internal_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(patterns, "LITERAL", re.compile(r"(?!)"))
    with pytest.raises(InternalInconsistencyError) as exc_info:
        lex("/** x */")
    assert exc_info.value.offset == 1
    assert isinstance(exc_info.value, AssertionError)


def test_unclosed_region_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="javadoc_lexer"):
        lex("/** <pre> a */")
    assert "unclosed <pre>" in caplog.text


def test_raw_tokens_track_depth_per_token() -> None:
    lexer = Lexer("/** <table>x</table> */")
    depths = []
    for token in lexer.raw_tokens():
        depths.append((token.kind, lexer.table_depth))
    assert (K.TABLE_OPEN_TAG, 1) in depths
    assert depths[-1] == (K.END_JAVADOC, 0)
