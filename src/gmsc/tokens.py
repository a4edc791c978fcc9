"""Token kinds, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    LINE_FEED = auto()  # \n
    END = auto()

    # Value-carrying
    REAL_LITERAL = auto()  # numeral run, verbatim
    STRING_LITERAL = auto()  # decoded contents, without delimiters
    IDENTIFIER = auto()

    # Relational
    NOT_EQUAL = auto()  # != <>
    INFERIOR = auto()  # <
    INFERIOR_EQUAL = auto()  # <=
    SUPERIOR = auto()  # >
    SUPERIOR_EQUAL = auto()  # >=
    DOUBLE_EQUAL = auto()  # ==
    EQUAL = auto()  # =

    # Punctuation
    BRACE_LEFT = auto()  # {
    BRACE_RIGHT = auto()  # }
    PAREN_LEFT = auto()  # (
    PAREN_RIGHT = auto()  # )
    DOT = auto()  # .
    COMMA = auto()  # ,
    SEMICOLON = auto()  # ;

    # Logical
    LOGIC_AND = auto()  # &&
    LOGIC_OR = auto()  # ||
    LOGIC_XOR = auto()  # ^^

    # Accessors
    ACCESSOR_ARRAY_REF = auto()  # [@
    ACCESSOR_LIST = auto()  # [|
    ACCESSOR_MAP = auto()  # [?
    ACCESSOR_GRID = auto()  # [#
    ACCESSOR_ARRAY_VALUE = auto()  # [
    ACCESSOR_RIGHT = auto()  # ]

    INCREMENT = auto()  # ++
    DECREMENT = auto()  # --

    # Compound assignment
    ASSIGN_ADD = auto()  # +=
    ASSIGN_SUBTRACT = auto()  # -=
    ASSIGN_MULTIPLY = auto()  # *=
    ASSIGN_DIVIDE = auto()  # /=
    ASSIGN_AND = auto()  # &=
    ASSIGN_OR = auto()  # |=
    ASSIGN_XOR = auto()  # ^=
    ASSIGN_SHIFT_LEFT = auto()  # <<=
    ASSIGN_SHIFT_RIGHT = auto()  # >>=

    # Arithmetic
    PLUS = auto()  # +
    MINUS = auto()  # -
    MULTIPLY = auto()  # *
    DIVIDE = auto()  # /
    EUCL_DIVIDE = auto()  # div
    EUCL_MODULO = auto()  # mod %

    # Bitwise
    BIT_AND = auto()  # &
    BIT_OR = auto()  # |
    BIT_XOR = auto()  # ^

    # Keywords
    IF = auto()
    ELSE_IF = auto()  # else if
    ELSE = auto()
    FOR = auto()
    WHILE = auto()
    DO = auto()
    REPEAT = auto()
    WITH = auto()
    VAR = auto()

    @property
    def carries_value(self) -> bool:
        """Return True if tokens of this kind have a text value on the side channel."""
        return self in _VALUE_KINDS


_VALUE_KINDS = frozenset(
    {TokenKind.IDENTIFIER, TokenKind.STRING_LITERAL, TokenKind.REAL_LITERAL}
)


@dataclass(frozen=True, slots=True)
class Token:
    """A single token: its kind and the 1-based position of its first character."""

    kind: TokenKind
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


# End-of-input sentinel returned by the cursor once the source is exhausted.
END_OF_INPUT = ""


def is_whitespace(ch: str) -> bool:
    """Return True for skippable whitespace (line feeds are tokens, not whitespace)."""
    return ch == " " or ch == "\t"


def is_line_end(ch: str) -> bool:
    return ch == "\n" or ch == END_OF_INPUT


def is_digit(ch: str) -> bool:
    return len(ch) == 1 and "0" <= ch <= "9"


def is_alpha(ch: str) -> bool:
    """Return True for ASCII letters only."""
    return len(ch) == 1 and ("a" <= ch <= "z" or "A" <= ch <= "Z")


def is_alphanum(ch: str) -> bool:
    return is_digit(ch) or is_alpha(ch)


def is_numeral(ch: str) -> bool:
    """Return True if ch may appear in a real literal (digit or '.')."""
    return is_digit(ch) or ch == "."


def is_identifier_start(ch: str) -> bool:
    return is_alpha(ch) or ch == "_"


def is_identifier_char(ch: str) -> bool:
    return is_alphanum(ch) or ch == "_"
