"""SQL lexer: converts source text into a flat token stream.

The lexer tries an ordered tuple of rules at each position; the first rule
that produces a non-empty match wins. The last rule accepts any single
character, so every step consumes input.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from sqlindent.dialects import DialectConfig, StringStyle
from sqlindent.tokens import Token, TokenType

# Each style also accepts an unterminated literal running to end of input.
_STRING_PATTERNS: dict[StringStyle, str] = {
    StringStyle.BACKTICK: r"(?:`[^`]*(?:\Z|`))+",
    StringStyle.BRACKET: r"(?:\[[^\]]*(?:\Z|\]))(?:\][^\]]*(?:\Z|\]))*",
    StringStyle.DOUBLE_QUOTE: r'(?:"[^"\\]*(?:\\.[^"\\]*)*(?:"|\Z))+',
    StringStyle.SINGLE_QUOTE: r"(?:'[^'\\]*(?:\\.[^'\\]*)*(?:'|\Z))+",
    StringStyle.NATIONAL: r"N(?:'[^'\\]*(?:\\.[^'\\]*)*(?:'|\Z))+",
}

_WHITESPACE_RE = re.compile(r"\s+")
_BLOCK_COMMENT_RE = re.compile(r"/\*.*?(?:\*/|\Z)", re.DOTALL)
_NUMBER_RE = re.compile(r"(?:(?:-\s*)?[0-9]+(?:\.[0-9]+)?|0x[0-9a-fA-F]+|0b[01]+)\b")
_OPERATOR_RE = re.compile(
    r"!=|<>|==|<=|>=|!<|!>|\|\||::|->>|->|~~\*|~~|!~~\*|!~~|~\*|!~\*|!~|.",
    re.DOTALL,
)

_IDENT_PLACEHOLDER_CHARS = r"[a-zA-Z0-9._$]+"

Rule = Callable[[str, int, Token | None], Token | None]


def _string_pattern(styles: tuple[StringStyle, ...]) -> str:
    return "|".join(_STRING_PATTERNS[style] for style in styles)


def _phrase_pattern(phrase: str) -> str:
    """Escape a keyword, letting any whitespace run separate its words."""
    return r"\s+".join(re.escape(word) for word in phrase.split())


def _reserved_regex(words: tuple[str, ...]) -> re.Pattern[str] | None:
    if not words:
        return None
    # Longest first so "INSERT INTO" is preferred over "INSERT"
    ordered = sorted(set(words), key=len, reverse=True)
    alternatives = "|".join(_phrase_pattern(word) for word in ordered)
    return re.compile(rf"(?:{alternatives})\b", re.IGNORECASE)


def _paren_regex(parens: tuple[str, ...]) -> re.Pattern[str] | None:
    if not parens:
        return None
    alternatives = []
    for paren in parens:
        if len(paren) == 1:
            alternatives.append(re.escape(paren))
        else:
            alternatives.append(rf"{re.escape(paren)}\b")
    return re.compile("|".join(alternatives), re.IGNORECASE)


def _placeholder_regex(sigils: tuple[str, ...], pattern: str) -> re.Pattern[str] | None:
    if not sigils:
        return None
    ordered = sorted(sigils, key=len, reverse=True)
    sigil_pattern = "|".join(re.escape(sigil) for sigil in ordered)
    return re.compile(rf"(?P<sigil>{sigil_pattern})(?P<body>{pattern})")


class Lexer:
    """Tokenize SQL source text with the rules of one dialect."""

    def __init__(self, config: DialectConfig) -> None:
        self._config = config

        if config.skip_block_patterns:
            skip = "|".join(config.skip_block_patterns)
            self._skip_block_re: re.Pattern[str] | None = re.compile(
                rf"(?:{skip})\b", re.IGNORECASE
            )
        else:
            self._skip_block_re = None

        markers = "|".join(re.escape(m) for m in config.line_comment_types)
        self._line_comment_re = (
            re.compile(rf"(?:{markers}).*?(?:\n|\Z)") if config.line_comment_types else None
        )

        string_pattern = _string_pattern(config.string_styles)
        self._string_re = re.compile(string_pattern) if string_pattern else None

        self._open_paren_re = _paren_regex(config.open_parens)
        self._close_paren_re = _paren_regex(config.close_parens)

        self._ident_named_re = _placeholder_regex(
            config.named_placeholder_types, _IDENT_PLACEHOLDER_CHARS
        )
        self._string_named_re = (
            _placeholder_regex(config.named_placeholder_types, string_pattern)
            if string_pattern
            else None
        )
        self._indexed_re = _placeholder_regex(config.indexed_placeholder_types, r"[0-9]*")

        self._top_level_re = _reserved_regex(config.reserved_top_level_words)
        self._newline_re = _reserved_regex(config.reserved_newline_words)
        self._plain_re = _reserved_regex(config.reserved_words)

        special = "".join(re.escape(ch) for ch in config.special_word_chars)
        self._word_re = re.compile(rf"[\w{special}]+")

        self._rules: tuple[Rule, ...] = (
            self._lex_skip_block,
            self._lex_whitespace,
            self._lex_line_comment,
            self._lex_block_comment,
            self._lex_string,
            self._lex_open_paren,
            self._lex_close_paren,
            self._lex_placeholder,
            self._lex_number,
            self._lex_reserved,
            self._lex_word,
            self._lex_operator,
        )

    @property
    def config(self) -> DialectConfig:
        return self._config

    def tokenize(self, source: str) -> list[Token]:
        """Tokenize the full source and return the token list."""
        tokens: list[Token] = []
        pos = 0
        previous: Token | None = None
        while pos < len(source):
            token = self._next_token(source, pos, previous)
            tokens.append(token)
            pos += len(token.value)
            previous = token
        return tokens

    def _next_token(self, source: str, pos: int, previous: Token | None) -> Token:
        for rule in self._rules:
            token = rule(source, pos, previous)
            if token is not None:
                return token
        # Unreachable: the operator rule matches any character
        raise AssertionError(f"no lexer rule matched at offset {pos}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _match(
        regex: re.Pattern[str] | None, tt: TokenType, source: str, pos: int
    ) -> Token | None:
        if regex is None:
            return None
        m = regex.match(source, pos)
        if m is None or m.end() == pos:
            return None
        return Token(tt, m.group(0))

    # ------------------------------------------------------------------
    # Rules, in priority order
    # ------------------------------------------------------------------

    def _lex_skip_block(self, source: str, pos: int, previous: Token | None) -> Token | None:
        return self._match(self._skip_block_re, TokenType.SKIP_BLOCK, source, pos)

    def _lex_whitespace(self, source: str, pos: int, previous: Token | None) -> Token | None:
        return self._match(_WHITESPACE_RE, TokenType.WHITESPACE, source, pos)

    def _lex_line_comment(self, source: str, pos: int, previous: Token | None) -> Token | None:
        return self._match(self._line_comment_re, TokenType.LINE_COMMENT, source, pos)

    def _lex_block_comment(self, source: str, pos: int, previous: Token | None) -> Token | None:
        return self._match(_BLOCK_COMMENT_RE, TokenType.BLOCK_COMMENT, source, pos)

    def _lex_string(self, source: str, pos: int, previous: Token | None) -> Token | None:
        return self._match(self._string_re, TokenType.STRING, source, pos)

    def _lex_open_paren(self, source: str, pos: int, previous: Token | None) -> Token | None:
        return self._match(self._open_paren_re, TokenType.OPEN_PAREN, source, pos)

    def _lex_close_paren(self, source: str, pos: int, previous: Token | None) -> Token | None:
        return self._match(self._close_paren_re, TokenType.CLOSE_PAREN, source, pos)

    def _lex_placeholder(self, source: str, pos: int, previous: Token | None) -> Token | None:
        # Identifier-named: @name, :name
        if self._ident_named_re is not None:
            m = self._ident_named_re.match(source, pos)
            if m is not None:
                return Token(TokenType.PLACEHOLDER, m.group(0), m.group("body"))

        # Quoted-named: @'name', :"name", @[name]
        if self._string_named_re is not None:
            m = self._string_named_re.match(source, pos)
            if m is not None:
                return Token(TokenType.PLACEHOLDER, m.group(0), _quoted_key(m.group("body")))

        # Indexed: ? or ?3
        if self._indexed_re is not None:
            m = self._indexed_re.match(source, pos)
            if m is not None:
                return Token(TokenType.PLACEHOLDER, m.group(0), m.group("body") or None)

        return None

    def _lex_number(self, source: str, pos: int, previous: Token | None) -> Token | None:
        return self._match(_NUMBER_RE, TokenType.NUMBER, source, pos)

    def _lex_reserved(self, source: str, pos: int, previous: Token | None) -> Token | None:
        # "mytable.from" refers to a column, not the FROM keyword
        if previous is not None and previous.value == ".":
            return None
        return (
            self._match(self._top_level_re, TokenType.RESERVED_TOP_LEVEL, source, pos)
            or self._match(self._newline_re, TokenType.RESERVED_NEWLINE, source, pos)
            or self._match(self._plain_re, TokenType.RESERVED, source, pos)
        )

    def _lex_word(self, source: str, pos: int, previous: Token | None) -> Token | None:
        return self._match(self._word_re, TokenType.WORD, source, pos)

    def _lex_operator(self, source: str, pos: int, previous: Token | None) -> Token | None:
        return self._match(_OPERATOR_RE, TokenType.OPERATOR, source, pos)


def _quoted_key(body: str) -> str:
    """Strip the quotes from a quoted placeholder name and unescape \\<quote>."""
    start = 2 if body.startswith("N'") else 1
    quote = body[-1]
    if len(body) <= start or quote not in "'\"`]":
        # Unterminated: keep everything after the opening quote
        return body[start:]
    return body[start:-1].replace("\\" + quote, quote)


def tokenize(source: str, config: DialectConfig) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(config).tokenize(source)
