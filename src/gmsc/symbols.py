"""Fixed-pattern symbol table and keyword set."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from gmsc.tokens import TokenKind

# Longest pattern is 3 characters; the driver hands the matcher a 4-character window.
LOOKAHEAD = 4


class SymbolTable:
    """Maximal-munch matcher over fixed (pattern, kind) pairs.

    Entries are kept longest-first, so no pattern can be shadowed by a
    shorter pattern sharing its prefix, whatever order they were given in.
    """

    def __init__(self, entries: Iterable[tuple[str, TokenKind]]) -> None:
        seen: dict[str, TokenKind] = {}
        for pattern, kind in entries:
            if not pattern:
                raise ValueError("empty symbol pattern")
            if pattern in seen:
                raise ValueError(
                    f"duplicate symbol pattern {pattern!r} "
                    f"({seen[pattern].name} and {kind.name})"
                )
            seen[pattern] = kind
        # Stable sort keeps the given order among patterns of equal length.
        self._entries = sorted(seen.items(), key=lambda item: len(item[0]), reverse=True)
        self.max_length = len(self._entries[0][0]) if self._entries else 0

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[str, TokenKind]]:
        return iter(self._entries)

    def match(self, window: str) -> tuple[str, TokenKind] | None:
        """Return the longest (pattern, kind) that is a prefix of window, or None."""
        for pattern, kind in self._entries:
            if window.startswith(pattern):
                return pattern, kind
        return None


def find_shadowed(entries: Sequence[tuple[str, TokenKind]]) -> list[tuple[str, str]]:
    """Return (earlier, later) pattern pairs where an earlier, shorter pattern
    is a strict prefix of a later one.

    Under first-match-wins scanning of *entries* in order, every ``later``
    pattern reported here can never match.
    """
    shadowed = []
    for i, (later, _) in enumerate(entries):
        for earlier, _ in entries[:i]:
            if len(earlier) < len(later) and later.startswith(earlier):
                shadowed.append((earlier, later))
    return shadowed


SYMBOLS = SymbolTable(
    [
        ("\n", TokenKind.LINE_FEED),
        # Relational
        ("!=", TokenKind.NOT_EQUAL),
        ("<>", TokenKind.NOT_EQUAL),
        ("<", TokenKind.INFERIOR),
        ("<=", TokenKind.INFERIOR_EQUAL),
        (">", TokenKind.SUPERIOR),
        (">=", TokenKind.SUPERIOR_EQUAL),
        # Punctuation
        ("{", TokenKind.BRACE_LEFT),
        ("}", TokenKind.BRACE_RIGHT),
        ("(", TokenKind.PAREN_LEFT),
        (")", TokenKind.PAREN_RIGHT),
        (".", TokenKind.DOT),
        (",", TokenKind.COMMA),
        (";", TokenKind.SEMICOLON),
        # Logical
        ("&&", TokenKind.LOGIC_AND),
        ("||", TokenKind.LOGIC_OR),
        ("^^", TokenKind.LOGIC_XOR),
        # Accessors
        ("[@", TokenKind.ACCESSOR_ARRAY_REF),
        ("[|", TokenKind.ACCESSOR_LIST),
        ("[?", TokenKind.ACCESSOR_MAP),
        ("[#", TokenKind.ACCESSOR_GRID),
        ("[", TokenKind.ACCESSOR_ARRAY_VALUE),
        ("]", TokenKind.ACCESSOR_RIGHT),
        ("++", TokenKind.INCREMENT),
        ("--", TokenKind.DECREMENT),
        # Compound assignment
        ("+=", TokenKind.ASSIGN_ADD),
        ("-=", TokenKind.ASSIGN_SUBTRACT),
        ("*=", TokenKind.ASSIGN_MULTIPLY),
        ("/=", TokenKind.ASSIGN_DIVIDE),
        ("&=", TokenKind.ASSIGN_AND),
        ("|=", TokenKind.ASSIGN_OR),
        ("^=", TokenKind.ASSIGN_XOR),
        ("<<=", TokenKind.ASSIGN_SHIFT_LEFT),
        (">>=", TokenKind.ASSIGN_SHIFT_RIGHT),
        ("==", TokenKind.DOUBLE_EQUAL),
        ("=", TokenKind.EQUAL),
        # Arithmetic
        ("+", TokenKind.PLUS),
        ("-", TokenKind.MINUS),
        ("*", TokenKind.MULTIPLY),
        ("/", TokenKind.DIVIDE),
        ("%", TokenKind.EUCL_MODULO),
        # Bitwise
        ("&", TokenKind.BIT_AND),
        ("|", TokenKind.BIT_OR),
        ("^", TokenKind.BIT_XOR),
    ]
)

# Word-form tokens, classified after a full identifier run has been read.
KEYWORDS: dict[str, TokenKind] = {
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "for": TokenKind.FOR,
    "while": TokenKind.WHILE,
    "do": TokenKind.DO,
    "repeat": TokenKind.REPEAT,
    "with": TokenKind.WITH,
    "var": TokenKind.VAR,
    "div": TokenKind.EUCL_DIVIDE,
    "mod": TokenKind.EUCL_MODULO,
}
