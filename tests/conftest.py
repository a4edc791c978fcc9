"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from gmsc.lexer import tokenize
from gmsc.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns (token, value) pairs (excluding END)."""

    def _lex(source: str) -> list[tuple[Token, str | None]]:
        tokens = tokenize(source)
        # Strip trailing END for convenience
        return [(t, v) for t, v in tokens if t.kind != TokenKind.END]

    return _lex


def assert_kinds(tokens: list[tuple[Token, str | None]], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t, _ in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[tuple[Token, str | None]], expected: list[str | None]) -> None:
    """Assert that the token values match the expected list."""
    actual = [v for _, v in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
