"""Layout engine: turns a token stream into indented SQL text."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from sqlindent.dialects import DialectConfig
from sqlindent.indentation import Indentation
from sqlindent.inline import InlineBlock
from sqlindent.lexer import Lexer
from sqlindent.params import Params
from sqlindent.tokens import Token, TokenType

_WHITESPACE_RUN = re.compile(r"\s+")
_COMMENT_CONTINUATION = re.compile(r"\n[ \t]*")

# An open paren keeps the space before it when one of these precedes it
_PRESERVE_SPACE_BEFORE_PAREN = frozenset(
    {TokenType.WHITESPACE, TokenType.OPEN_PAREN, TokenType.LINE_COMMENT}
)


def _trim_spaces_end(text: str) -> str:
    return text.rstrip(" \t")


def _trim_spaces_after_text(text: str) -> str:
    """Like _trim_spaces_end, but keep the indentation of a line with nothing else on it."""
    line = text[text.rfind("\n") + 1 :]
    if not line.strip(" \t"):
        return text
    return _trim_spaces_end(text)


def _equalize_whitespace(text: str) -> str:
    """Collapse every whitespace run (as in "LEFT \\n OUTER JOIN") to one space."""
    return _WHITESPACE_RUN.sub(" ", text)


class Formatter:
    """Format SQL source for one dialect.

    A Formatter holds the options of a format call; all per-pass state
    (tokens, indentation, inline block, placeholder cursor) is created anew
    by every :meth:`format` call.
    """

    def __init__(
        self,
        config: DialectConfig,
        indent: str = "  ",
        params: Mapping[Any, Any] | Sequence[Any] | None = None,
    ) -> None:
        self._config = config
        self._indent = indent
        self._params = Params(params)

    def format(self, query: str) -> str:
        """Format ``query`` and return the result without surrounding whitespace."""
        tokens = Lexer(self._config).tokenize(query)
        return _Pass(tokens, self._indent, self._params).run().strip()


class _Pass:
    """One walk over a token list, accumulating the formatted text."""

    def __init__(self, tokens: list[Token], indent: str, params: Params) -> None:
        self._tokens = tokens
        self._params = params
        self._cursor = 0
        self._indentation = Indentation(indent)
        self._inline_block = InlineBlock()
        self._previous_reserved: Token | None = None
        self._index = 0

    def run(self) -> str:
        query = ""
        for index, token in enumerate(self._tokens):
            self._index = index
            tt = token.type

            if tt == TokenType.WHITESPACE:
                # Whitespace is re-synthesized, never copied
                continue
            elif tt == TokenType.LINE_COMMENT:
                query = self._format_line_comment(token, query)
            elif tt == TokenType.BLOCK_COMMENT:
                query = self._format_block_comment(token, query)
            elif tt == TokenType.RESERVED_TOP_LEVEL:
                query = self._format_top_level_reserved_word(token, query)
                self._previous_reserved = token
            elif tt == TokenType.RESERVED_NEWLINE:
                query = self._format_newline_reserved_word(token, query)
                self._previous_reserved = token
            elif tt == TokenType.RESERVED:
                query = self._format_with_spaces(token, query)
                self._previous_reserved = token
            elif tt == TokenType.OPEN_PAREN:
                query = self._format_opening_parentheses(token, query)
            elif tt == TokenType.CLOSE_PAREN:
                query = self._format_closing_parentheses(token, query)
            elif tt == TokenType.PLACEHOLDER:
                query = self._format_placeholder(token, query)
            elif token.value == ",":
                query = self._format_comma(token, query)
            elif token.value == ":":
                query = self._format_with_space_after(token, query)
            elif token.value == ".":
                query = self._format_without_spaces(token, query)
            elif token.value == ";":
                query = self._format_query_separator(token, query)
            else:
                query = self._format_with_spaces(token, query)
        return query

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _format_line_comment(self, token: Token, query: str) -> str:
        return self._add_newline(query + token.value)

    def _format_block_comment(self, token: Token, query: str) -> str:
        return self._add_newline(self._add_newline(query) + self._indent_comment(token.value))

    def _indent_comment(self, comment: str) -> str:
        indent = self._indentation.get_indent() + " "
        return _COMMENT_CONTINUATION.sub(lambda _: "\n" + indent, comment)

    # ------------------------------------------------------------------
    # Reserved words
    # ------------------------------------------------------------------

    def _format_top_level_reserved_word(self, token: Token, query: str) -> str:
        self._indentation.decrease_top_level()
        query = self._add_newline(query)
        self._indentation.increase_top_level()
        query += _equalize_whitespace(token.value)
        return self._add_newline(query)

    def _format_newline_reserved_word(self, token: Token, query: str) -> str:
        return self._add_newline(query) + _equalize_whitespace(token.value) + " "

    # ------------------------------------------------------------------
    # Parentheses
    # ------------------------------------------------------------------

    def _format_opening_parentheses(self, token: Token, query: str) -> str:
        # "count(" but "IN (" and "((" as written
        previous = self._previous_token()
        if previous is None or previous.type not in _PRESERVE_SPACE_BEFORE_PAREN:
            query = _trim_spaces_after_text(query)
        query += token.value

        self._inline_block.begin_if_possible(self._tokens, self._index)

        if not self._inline_block.is_active():
            self._indentation.increase_block_level()
            query = self._add_newline(query)
        return query

    def _format_closing_parentheses(self, token: Token, query: str) -> str:
        if self._inline_block.is_active():
            self._inline_block.end()
            return self._format_with_space_after(token, query)
        self._indentation.decrease_block_level()
        return self._format_with_spaces(token, self._add_newline(query))

    # ------------------------------------------------------------------
    # Other tokens
    # ------------------------------------------------------------------

    def _format_placeholder(self, token: Token, query: str) -> str:
        text, self._cursor = self._params.resolve(token, self._cursor)
        return query + text + " "

    def _format_comma(self, token: Token, query: str) -> str:
        """Commas end the line, except inside inline blocks and LIMIT 5, 10."""
        query = _trim_spaces_end(query) + token.value + " "
        if self._inline_block.is_active():
            return query
        if self._previous_reserved is not None and self._previous_reserved.value.upper() == "LIMIT":
            return query
        return self._add_newline(query)

    def _format_with_space_after(self, token: Token, query: str) -> str:
        return _trim_spaces_end(query) + token.value + " "

    def _format_without_spaces(self, token: Token, query: str) -> str:
        return _trim_spaces_end(query) + token.value

    def _format_with_spaces(self, token: Token, query: str) -> str:
        return query + token.value + " "

    def _format_query_separator(self, token: Token, query: str) -> str:
        self._indentation.reset()
        return _trim_spaces_end(query) + token.value + "\n"

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _add_newline(self, query: str) -> str:
        query = _trim_spaces_end(query)
        if not query.endswith("\n"):
            query += "\n"
        return query + self._indentation.get_indent()

    def _previous_token(self) -> Token | None:
        if self._index == 0:
            return None
        return self._tokens[self._index - 1]
