"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from sqlindent.tokens import Token, TokenType


def dump_tokens(tokens: list[Token], *, file: TextIO | None = None) -> None:
    """Print one line per token to *file* (default stderr); whitespace runs are summarized."""
    if file is None:
        file = sys.stderr
    width = max((len(t.type.name) for t in tokens), default=0)
    for index, token in enumerate(tokens):
        file.write(f"{index:>4} {token.type.name:<{width}} {_describe(token)}\n")


def _describe(token: Token) -> str:
    if token.type == TokenType.WHITESPACE:
        newlines = token.value.count("\n")
        return f"<{len(token.value)} chars, {newlines} newlines>"
    if token.key is not None:
        return f"{token.value!r} key={token.key!r}"
    return repr(token.value)
