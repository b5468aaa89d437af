"""Token list serialization and deserialization.

Provides round-trip serialization of token lists to and from JSON and
YAML, for debugging the lexer and for handing tokens to renderers that
run out of process.  The serialized form is a plain dict/list structure
that maps naturally to both formats::

    {"kind": "TokenList",
     "tokens": [{"kind": "BEGIN_JAVADOC", "text": "/**"}, ...]}

Usage
-----
::

    from javadoc_lexer.serializer import TokenSerializer

    serializer = TokenSerializer()
    json_text = serializer.to_json(tokens)
    assert serializer.from_json(json_text) == tokens
"""
from __future__ import annotations

import json
from collections.abc import Sequence

import yaml

from javadoc_lexer.grammar.tokens import Token, TokenKind

_LIST_KIND = "TokenList"


class TokenSerializer:
    """Converts between token lists and plain Python dicts."""

    # ------------------------------------------------------------------
    # Serialization (tokens → dict)
    # ------------------------------------------------------------------

    def to_dict(self, tokens: Sequence[Token]) -> dict[str, object]:
        """Serialize a token list to a JSON-compatible dict."""
        return {
            "kind": _LIST_KIND,
            "tokens": [{"kind": t.kind.name, "text": t.text} for t in tokens],
        }

    def to_json(self, tokens: Sequence[Token], indent: int | None = 2) -> str:
        """Serialize a token list to a JSON string."""
        return json.dumps(self.to_dict(tokens), indent=indent, ensure_ascii=False)

    def to_yaml(self, tokens: Sequence[Token]) -> str:
        """Serialize a token list to a YAML string."""
        return yaml.safe_dump(
            self.to_dict(tokens),
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )

    # ------------------------------------------------------------------
    # Deserialization (dict → tokens)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> list[Token]:
        """Deserialize a token list from a dict produced by ``to_dict``.

        Raises
        ------
        ValueError
            If the document is not a token list or names an unknown kind.
        """
        if data.get("kind") != _LIST_KIND:
            raise ValueError(f"Expected kind {_LIST_KIND!r}, got {data.get('kind')!r}")
        entries = data.get("tokens", [])
        if not isinstance(entries, list):
            raise ValueError("'tokens' must be a list")
        return [self._token_from_dict(entry) for entry in entries]

    def from_json(self, text: str) -> list[Token]:
        """Deserialize a token list from a JSON string."""
        return self.from_dict(json.loads(text))

    def from_yaml(self, text: str) -> list[Token]:
        """Deserialize a token list from a YAML string."""
        return self.from_dict(yaml.safe_load(text))

    def _token_from_dict(self, entry: dict[str, object]) -> Token:
        kind_name = entry.get("kind")
        try:
            kind = TokenKind[str(kind_name)]
        except KeyError:
            raise ValueError(f"Unknown token kind: {kind_name!r}") from None
        text = entry.get("text", "")
        if not isinstance(text, str):
            raise ValueError(f"Token text must be a string, got {type(text).__name__}")
        return Token(kind, text)
