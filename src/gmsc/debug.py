"""--debug token dump."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from gmsc.tokens import Token


def format_token(tok: Token, value: str | None) -> str:
    line = f"{tok.line}:{tok.column} {tok.kind.name}"
    if value is not None:
        line += f" {value!r}"
    return line


def dump_tokens(
    tokens: Iterable[tuple[Token, str | None]], *, file: TextIO = sys.stderr
) -> None:
    """Print one ``line:col KIND 'value'`` row per token to *file*."""
    for tok, value in tokens:
        file.write(format_token(tok, value) + "\n")
