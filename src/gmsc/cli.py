"""Command-line interface: tokenize a script and print its token stream."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from gmsc.errors import LexError
from gmsc.tokens import Token

FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    output_format: str
    lenient_strings: bool
    debug: bool


class ConfigError(Exception):
    """Raised when the config file holds a value of the wrong shape."""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="gmsc-lex",
        description="Tokenize a GML-style script",
    )
    p.add_argument("input", help="Input script file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--lenient-strings",
        action="store_true",
        default=None,
        help="End the token stream at an unterminated string instead of failing",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover gmsc.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "gmsc.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    lenient_strings = False
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict) and "lenient_strings" in cfg_lexer:
        cfg_lenient = cfg_lexer["lenient_strings"]
        if not isinstance(cfg_lenient, bool):
            raise ConfigError("[lexer] lenient_strings must be true or false")
        lenient_strings = cfg_lenient
    if args.lenient_strings is not None:
        lenient_strings = args.lenient_strings

    output_format = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict) and "format" in cfg_output:
        cfg_format = cfg_output["format"]
        if cfg_format not in FORMATS:
            raise ConfigError(f"[output] format must be one of {', '.join(FORMATS)}")
        output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        output_format=output_format,
        lenient_strings=lenient_strings,
        debug=args.debug,
    )


def render_tokens(tokens: list[tuple[Token, str | None]], output_format: str) -> str:
    """Render (token, value) pairs as text rows or a JSON array."""
    from gmsc.debug import format_token

    if output_format == "json":
        rows = [
            {"kind": tok.kind.name, "line": tok.line, "column": tok.column, "value": value}
            for tok, value in tokens
        ]
        return json.dumps(rows, indent=2) + "\n"
    return "".join(format_token(tok, value) + "\n" for tok, value in tokens)


def tokenize_file(options: CliOptions) -> str:
    """Read and tokenize a script, returning the rendered token stream."""
    from gmsc.debug import dump_tokens
    from gmsc.lexer import tokenize

    source = options.input_file.read_text(encoding="utf-8")
    tokens = tokenize(
        source, str(options.input_file), lenient_strings=options.lenient_strings
    )

    if options.debug:
        dump_tokens(tokens, file=sys.stderr)

    return render_tokens(tokens, options.output_format)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (ConfigError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        output = tokenize_file(options)
    except LexError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0
