"""Token types and the token data structure."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    WHITESPACE = auto()  # any run of whitespace, newlines included
    WORD = auto()  # identifiers and unknown words
    STRING = auto()  # quoted literal or quoted identifier
    NUMBER = auto()  # decimal, 0x hex, 0b binary

    # Reserved words
    RESERVED = auto()  # plain keyword
    RESERVED_TOP_LEVEL = auto()  # starts a clause (SELECT, FROM, ...)
    RESERVED_NEWLINE = auto()  # breaks the line (AND, JOIN, ...)

    OPERATOR = auto()  # multi-char operator or any single character
    OPEN_PAREN = auto()  # ( or a word such as CASE
    CLOSE_PAREN = auto()  # ) or a word such as END

    LINE_COMMENT = auto()  # -- or # up to and including the newline
    BLOCK_COMMENT = auto()  # /* ... */

    PLACEHOLDER = auto()  # ?, ?1, :name, @'quoted name'
    SKIP_BLOCK = auto()  # dialect word block kept as one unit


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token holding the exact source text it covers."""

    type: TokenType
    value: str
    key: str | None = None
