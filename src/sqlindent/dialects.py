"""Dialect configurations and dialect selection by name."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sqlindent import keywords
from sqlindent.errors import UnsupportedDialectError


class Language(Enum):
    SQL = "sql"
    DB2 = "db2"
    N1QL = "n1ql"
    PLSQL = "pl/sql"
    SNOWFLAKE = "snowflake"


class StringStyle(Enum):
    BACKTICK = "``"  # `name`, `` escapes
    BRACKET = "[]"  # [name], ]] escapes
    DOUBLE_QUOTE = '""'  # "text", \" or "" escapes
    SINGLE_QUOTE = "''"  # 'text', \' or '' escapes
    NATIONAL = "N''"  # N'text', \' or '' escapes


@dataclass(frozen=True, slots=True)
class DialectConfig:
    """Lexical rules of one SQL dialect. Immutable."""

    language: Language
    reserved_words: tuple[str, ...]
    reserved_top_level_words: tuple[str, ...]
    reserved_newline_words: tuple[str, ...]
    string_styles: tuple[StringStyle, ...]
    open_parens: tuple[str, ...] = ("(",)
    close_parens: tuple[str, ...] = (")",)
    indexed_placeholder_types: tuple[str, ...] = ()
    named_placeholder_types: tuple[str, ...] = ()
    line_comment_types: tuple[str, ...] = ("--",)
    special_word_chars: tuple[str, ...] = ()
    skip_block_patterns: tuple[str, ...] = ()


STANDARD_SQL = DialectConfig(
    language=Language.SQL,
    reserved_words=keywords.STANDARD_RESERVED,
    reserved_top_level_words=keywords.STANDARD_TOP_LEVEL,
    reserved_newline_words=keywords.STANDARD_NEWLINE,
    string_styles=(
        StringStyle.DOUBLE_QUOTE,
        StringStyle.NATIONAL,
        StringStyle.SINGLE_QUOTE,
        StringStyle.BACKTICK,
        StringStyle.BRACKET,
    ),
    open_parens=("(", "CASE"),
    close_parens=(")", "END"),
    indexed_placeholder_types=("?",),
    named_placeholder_types=("@", ":"),
    line_comment_types=("#", "--"),
)

DB2 = DialectConfig(
    language=Language.DB2,
    reserved_words=keywords.DB2_RESERVED,
    reserved_top_level_words=keywords.DB2_TOP_LEVEL,
    reserved_newline_words=keywords.DB2_NEWLINE,
    string_styles=(
        StringStyle.DOUBLE_QUOTE,
        StringStyle.SINGLE_QUOTE,
        StringStyle.BACKTICK,
        StringStyle.BRACKET,
    ),
    indexed_placeholder_types=("?",),
    named_placeholder_types=(":",),
    special_word_chars=("#", "@"),
)

N1QL = DialectConfig(
    language=Language.N1QL,
    reserved_words=keywords.N1QL_RESERVED,
    reserved_top_level_words=keywords.N1QL_TOP_LEVEL,
    reserved_newline_words=keywords.N1QL_NEWLINE,
    string_styles=(StringStyle.DOUBLE_QUOTE, StringStyle.SINGLE_QUOTE, StringStyle.BACKTICK),
    open_parens=("(", "[", "{"),
    close_parens=(")", "]", "}"),
    named_placeholder_types=("$",),
    line_comment_types=("#", "--"),
)

PLSQL = DialectConfig(
    language=Language.PLSQL,
    reserved_words=keywords.PLSQL_RESERVED,
    reserved_top_level_words=keywords.PLSQL_TOP_LEVEL,
    reserved_newline_words=keywords.PLSQL_NEWLINE,
    string_styles=(
        StringStyle.DOUBLE_QUOTE,
        StringStyle.NATIONAL,
        StringStyle.SINGLE_QUOTE,
        StringStyle.BACKTICK,
    ),
    open_parens=("(", "CASE"),
    close_parens=(")", "END"),
    indexed_placeholder_types=("?",),
    named_placeholder_types=(":",),
    special_word_chars=("_", "$", "#", ".", "@"),
)

# Semi-structured paths such as FIELDS:project:key::string stay one unit
SNOWFLAKE = DialectConfig(
    language=Language.SNOWFLAKE,
    reserved_words=keywords.SNOWFLAKE_RESERVED,
    reserved_top_level_words=keywords.SNOWFLAKE_TOP_LEVEL,
    reserved_newline_words=keywords.SNOWFLAKE_NEWLINE,
    string_styles=STANDARD_SQL.string_styles,
    open_parens=("(", "CASE"),
    close_parens=(")", "END"),
    indexed_placeholder_types=("?",),
    named_placeholder_types=("@", ":"),
    line_comment_types=("#", "--", "//"),
    skip_block_patterns=(r"\w+(?::\w+)+(?:::\w+)*",),
)

DIALECTS: dict[Language, DialectConfig] = {
    Language.SQL: STANDARD_SQL,
    Language.DB2: DB2,
    Language.N1QL: N1QL,
    Language.PLSQL: PLSQL,
    Language.SNOWFLAKE: SNOWFLAKE,
}


def get_dialect(language: Language | str | None = None) -> DialectConfig:
    """Return the config for a language name; None selects standard SQL."""
    if language is None:
        return STANDARD_SQL
    if isinstance(language, Language):
        return DIALECTS[language]
    if isinstance(language, str):
        try:
            return DIALECTS[Language(language.lower())]
        except ValueError:
            pass
    raise UnsupportedDialectError(language, tuple(lang.value for lang in Language))
