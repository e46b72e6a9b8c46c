"""Bookkeeping for inline parenthesized blocks.

Inline blocks are parenthesized groups short enough to stay on one line,
such as ``NOW()``, ``COUNT(*)``, ``DECIMAL(7, 2)`` or ``IN (1, 2, 3)``.
Longer groups break after the open paren and indent their contents.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlindent.tokens import Token, TokenType

INLINE_MAX_LENGTH = 50

# Tokens that would break the line, so they cannot appear inside an inline block
_FORBIDDEN_TYPES = frozenset(
    {
        TokenType.RESERVED_TOP_LEVEL,
        TokenType.RESERVED_NEWLINE,
        TokenType.BLOCK_COMMENT,
    }
)


class InlineBlock:
    """Tracks the nesting depth of the inline block being written, 0 when none."""

    def __init__(self) -> None:
        self._level = 0

    @property
    def level(self) -> int:
        return self._level

    def begin_if_possible(self, tokens: Sequence[Token], index: int) -> None:
        """Enter an inline block at the open paren ``tokens[index]`` if it fits.

        Inside an active block every nested paren is inline as well.
        """
        if self._level == 0 and self._is_inline_block(tokens, index):
            self._level = 1
        elif self._level > 0:
            self._level += 1
        else:
            self._level = 0

    def end(self) -> None:
        """Finish the innermost of the (possibly nested) inline blocks."""
        self._level -= 1

    def is_active(self) -> bool:
        return self._level > 0

    def _is_inline_block(self, tokens: Sequence[Token], index: int) -> bool:
        length = 0
        level = 0

        for i in range(index, len(tokens)):
            token = tokens[i]
            length += _rendered_length(tokens, i)
            if length > INLINE_MAX_LENGTH:
                return False

            if token.type == TokenType.OPEN_PAREN:
                level += 1
            elif token.type == TokenType.CLOSE_PAREN:
                level -= 1
                if level == 0:
                    return True

            if _is_forbidden(token):
                return False

        return False


def _rendered_length(tokens: Sequence[Token], i: int) -> int:
    """Width of ``tokens[i]`` once laid out on a single line."""
    token = tokens[i]
    if token.type == TokenType.WHITESPACE:
        # Any run collapses to one space
        return 1
    if token.value == "," and (i + 1 == len(tokens) or tokens[i + 1].type != TokenType.WHITESPACE):
        # A space is added after the comma
        return 2
    return len(token.value)


def _is_forbidden(token: Token) -> bool:
    return token.type in _FORBIDDEN_TYPES or token.value == ";"
