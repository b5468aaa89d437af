"""Shared test fixtures for javadoc-lexer.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "javadoc_lexer"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def method_javadoc() -> str:
    """Return a realistic multi-line method comment."""
    return (
        "/**\n"
        " * Returns the number of {@code <b>} elements in {@link Node#children}.\n"
        " *\n"
        " * <p>Counting is shallow:\n"
        " * <ul>\n"
        " *   <li>direct children only\n"
        " *   <li>comments are skipped\n"
        " * </ul>\n"
        " *\n"
        " * <pre>{@code\n"
        " *   int n = count(root);\n"
        " * }</pre>\n"
        " *\n"
        " * @param root the node to inspect\n"
        " * @return the count, never negative\n"
        " */"
    )
