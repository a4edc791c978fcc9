"""gmsc: tokenizer for GML-style scripts."""

from __future__ import annotations

from gmsc.errors import LexError
from gmsc.lexer import Lexer, tokenize
from gmsc.tokens import Token, TokenKind

__version__ = "0.1.0"

__all__ = ["LexError", "Lexer", "Token", "TokenKind", "tokenize"]
