"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from sqlindent.dialects import DialectConfig, get_dialect
from sqlindent.lexer import tokenize
from sqlindent.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and drops whitespace tokens."""

    def _lex(source: str, config: DialectConfig | None = None) -> list[Token]:
        tokens = tokenize(source, config or get_dialect())
        return [t for t in tokens if t.type != TokenType.WHITESPACE]

    return _lex


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def find_tokens(tokens: list[Token], tt: TokenType) -> list[Token]:
    """Return all tokens of the given type."""
    return [t for t in tokens if t.type == tt]
