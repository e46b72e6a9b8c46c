"""Indentation stack for the layout engine."""

from __future__ import annotations

from enum import Enum, auto


class IndentType(Enum):
    TOP_LEVEL = auto()  # body of a clause such as SELECT or WHERE
    BLOCK_LEVEL = auto()  # contents of a non-inline parenthesized group


class Indentation:
    """Stack of indent levels; the depth is the number of levels on the stack.

    Top-level indents are replaced on every new clause, block-level indents
    stay until their close paren.
    """

    def __init__(self, indent: str = "  ") -> None:
        self._indent = indent
        self._types: list[IndentType] = []

    @property
    def depth(self) -> int:
        return len(self._types)

    def get_indent(self) -> str:
        return self._indent * len(self._types)

    def increase_top_level(self) -> None:
        self._types.append(IndentType.TOP_LEVEL)

    def increase_block_level(self) -> None:
        self._types.append(IndentType.BLOCK_LEVEL)

    def decrease_top_level(self) -> None:
        """Drop the current clause indent, if the innermost level is one."""
        if self._types and self._types[-1] == IndentType.TOP_LEVEL:
            self._types.pop()

    def decrease_block_level(self) -> None:
        """Pop levels up to and including the innermost block level."""
        while self._types:
            if self._types.pop() != IndentType.TOP_LEVEL:
                break

    def reset(self) -> None:
        self._types = []
