"""Javadoc token merger module.

Exports the ``TokenMerger`` class and the ``join_adjacent_literals``
convenience function.
"""
from __future__ import annotations

from javadoc_lexer.merger.merger import TokenMerger, join_adjacent_literals

__all__ = ["TokenMerger", "join_adjacent_literals"]
