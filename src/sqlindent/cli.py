"""Command-line interface for sqlindent."""

from __future__ import annotations

import argparse
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sqlindent.dialects import get_dialect
from sqlindent.errors import UnsupportedDialectError

STDIN = "-"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    language: str | None
    indent: str
    params: dict[str | int, str]
    watch: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="sqlindent",
        description="Reformat SQL into an indented, readable layout",
    )
    p.add_argument("input", nargs="?", default=STDIN, help="Input .sql file (default: stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-l",
        "--language",
        default=None,
        help="SQL dialect: sql, db2, n1ql, pl/sql, snowflake (default: sql)",
    )
    indent = p.add_mutually_exclusive_group()
    indent.add_argument("--indent", default=None, metavar="TEXT", help="Indent string")
    indent.add_argument(
        "--spaces", type=int, default=None, metavar="N", help="Indent with N spaces"
    )
    p.add_argument(
        "-p",
        "--param",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Placeholder value (repeatable)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover sqlindent.toml)",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and reformat")
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    return p


def parse_param_arg(s: str) -> tuple[str | int, str]:
    """Parse a NAME=VALUE string; all-digit names become integer keys."""
    if "=" not in s:
        raise argparse.ArgumentTypeError(f"invalid param format (expected NAME=VALUE): {s}")
    name, _, value = s.partition("=")
    return _param_key(name), value


def _param_key(name: str) -> str | int:
    return int(name) if name.isdigit() else name


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "sqlindent.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    if args.input == STDIN:
        input_file = None
        input_dir = Path(".")
    else:
        input_file = Path(args.input)
        input_dir = input_file.parent
        if not input_dir.parts:
            input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Language: config < CLI
    language: str | None = None
    cfg_language = config.get("language")
    if isinstance(cfg_language, str):
        language = cfg_language
    if args.language is not None:
        language = args.language

    # Indent: config < CLI
    indent = "  "
    cfg_indent = config.get("indent")
    if isinstance(cfg_indent, str):
        indent = cfg_indent
    elif isinstance(cfg_indent, int) and not isinstance(cfg_indent, bool):
        indent = " " * cfg_indent
    if args.indent is not None:
        indent = args.indent
    elif args.spaces is not None:
        if args.spaces < 0:
            raise argparse.ArgumentTypeError(f"invalid --spaces value: {args.spaces}")
        indent = " " * args.spaces

    # Params: config < CLI
    params: dict[str | int, str] = {}
    cfg_params = config.get("params")
    if isinstance(cfg_params, dict):
        for k, v in cfg_params.items():
            params[_param_key(str(k))] = str(v)
    for raw in args.param:
        name, value = parse_param_arg(raw)
        params[name] = value

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        language=language,
        indent=indent,
        params=params,
        watch=args.watch,
        debug=args.debug,
    )


def format_source(source: str, options: CliOptions) -> str:
    """Format SQL text with the resolved options."""
    from sqlindent.debug import dump_tokens
    from sqlindent.formatter import Formatter
    from sqlindent.lexer import tokenize

    config = get_dialect(options.language)

    if options.debug:
        dump_tokens(tokenize(source, config))

    formatter = Formatter(config, indent=options.indent, params=options.params or None)
    return formatter.format(source) + "\n"


def format_file(options: CliOptions) -> str:
    """Read the input (file or stdin) and return the formatted SQL."""
    if options.input_file is None:
        source = sys.stdin.read()
    else:
        source = options.input_file.read_text(encoding="utf-8")
    return format_source(source, options)


def _write_output(options: CliOptions, text: str) -> None:
    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, reformat on each modification."""
    assert options.input_file is not None
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    _write_output(options, format_file(options))
                    print(f"Formatted {options.input_file}", file=sys.stderr)
                except (OSError, UnicodeDecodeError) as exc:
                    print(f"error: {exc}", file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        if options.input_file is None:
            print("error: --watch needs an input file", file=sys.stderr)
            return 2
        try:
            get_dialect(options.language)
        except UnsupportedDialectError as exc:
            print(exc.format(), file=sys.stderr)
            return 1
        watch_loop(options)
        return 0

    try:
        text = format_file(options)
    except UnsupportedDialectError as exc:
        print(exc.format(), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    _write_output(options, text)
    return 0
