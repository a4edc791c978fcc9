"""gmsc lexer: pulls typed tokens out of GML-style source text."""

from __future__ import annotations

from collections.abc import Iterator

from gmsc.cursor import Cursor
from gmsc.errors import (
    LexError,
    UnknownTokenError,
    UnsupportedFeatureError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from gmsc.symbols import KEYWORDS, LOOKAHEAD, SYMBOLS
from gmsc.tokens import (
    END_OF_INPUT,
    Position,
    Token,
    TokenKind,
    is_alphanum,
    is_digit,
    is_identifier_char,
    is_identifier_start,
    is_line_end,
    is_numeral,
    is_whitespace,
)

_QUOTES = frozenset("\"'")


class Lexer:
    """Pull-based tokenizer over one source buffer.

    Each call to :meth:`next_token` returns exactly one token. Once the end of
    input has been reached every further call returns an ``END`` token. Any
    :class:`LexError` is fatal to the lexer that raised it.
    """

    def __init__(
        self,
        source: str,
        filename: str = "input.gml",
        *,
        lenient_strings: bool = False,
    ) -> None:
        self._source = source
        self._filename = filename
        self._lenient_strings = lenient_strings
        self._cursor = Cursor(source)
        self._last_token: Token | None = None
        self._value: str | None = None
        self._error: LexError | None = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def last_token(self) -> Token | None:
        return self._last_token

    @property
    def value(self) -> str | None:
        """Text of the last token if its kind carries a value, else None."""
        return self._value

    @property
    def line(self) -> int:
        """Line of the last token produced (1-based)."""
        if self._last_token is None:
            return self._cursor.location()[0]
        return self._last_token.line

    @property
    def column(self) -> int:
        """Column of the last token produced (1-based)."""
        if self._last_token is None:
            return self._cursor.location()[1]
        return self._last_token.column

    @property
    def offset(self) -> int:
        """Index into the source just past the last consumed character."""
        return self._cursor.offset

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Scan and return the next token, raising LexError on invalid input.

        Once an error has been raised, every later call raises it again.
        """
        if self._error is not None:
            raise self._error
        try:
            return self._scan_token()
        except LexError as exc:
            self._error = exc
            raise

    def _scan_token(self) -> Token:
        cur = self._cursor
        while True:
            while is_whitespace(cur.peek()):
                cur.read()

            start = cur.position()
            if cur.exhausted:
                return self._emit(TokenKind.END, start)
            if cur.at_end:
                cur.read()  # observe the end-of-input sentinel
                return self._emit(TokenKind.END, start)

            ch = cur.peek()

            if ch == "/" and cur.peek(1) in ("/", "*"):
                self._skip_comment(start)
                continue

            if ch in _QUOTES:
                return self._scan_string(start)

            if ch == "$":
                length = 1
                while is_alphanum(cur.peek(length)):
                    length += 1
                raise UnsupportedFeatureError(
                    "hex color literals are not supported", start, self._source, length
                )

            # "." always reaches the symbol table, so "a.5" is DOT then "5".
            if is_digit(ch):
                return self._scan_number(start)

            if is_identifier_start(ch):
                return self._scan_word(start)

            match = SYMBOLS.match(cur.window(LOOKAHEAD))
            if match is not None:
                pattern, kind = match
                cur.skip(len(pattern))
                return self._emit(kind, start)

            raise UnknownTokenError(f"unknown token {ch!r}", start, self._source)

    def try_next_token(self) -> Token | LexError:
        """Like next_token(), but return the error instead of raising it."""
        try:
            return self.next_token()
        except LexError as exc:
            return exc

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first END token."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind is TokenKind.END:
                return

    def _emit(self, kind: TokenKind, start: Position, value: str | None = None) -> Token:
        tok = Token(kind, start.line, start.column)
        self._last_token = tok
        self._value = value
        return tok

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _skip_comment(self, start: Position) -> None:
        cur = self._cursor
        cur.read()  # /
        if cur.read() == "/":
            # The terminating line feed is left for the driver to emit.
            while not is_line_end(cur.peek()):
                cur.read()
            return

        while True:
            ch = cur.read()
            if ch == END_OF_INPUT:
                raise UnterminatedCommentError(
                    "block comment reaches end of input", start, self._source, 2
                )
            if ch == "*" and cur.peek() == "/":
                cur.read()
                return

    # ------------------------------------------------------------------
    # String literals
    # ------------------------------------------------------------------

    def _scan_string(self, start: Position) -> Token:
        cur = self._cursor
        delim = cur.read()
        chars = []

        # Strings may span lines; line feeds are kept as-is.
        while True:
            ch = cur.read()
            if ch == delim:
                break
            if ch == END_OF_INPUT:
                return self._unterminated_string(start)

            if ch == "\\":
                esc = cur.read()
                if esc == END_OF_INPUT:
                    return self._unterminated_string(start)
                if esc == delim:
                    chars.append(delim)
                elif esc == "n":
                    chars.append("\n")
                elif esc == "#":
                    chars.append("#")
                else:
                    chars.append("\\" + esc)
            elif ch == "#":
                chars.append("\n")
            else:
                chars.append(ch)

        return self._emit(TokenKind.STRING_LITERAL, start, "".join(chars))

    def _unterminated_string(self, start: Position) -> Token:
        if self._lenient_strings:
            return self._emit(TokenKind.END, start)
        raise UnterminatedStringError(
            "string literal reaches end of input", start, self._source
        )

    # ------------------------------------------------------------------
    # Numbers, identifiers and keywords
    # ------------------------------------------------------------------

    def _scan_number(self, start: Position) -> Token:
        # No validation: "1.2.3" is a single literal, interpreted by the consumer.
        cur = self._cursor
        chars = []
        while is_numeral(cur.peek()):
            chars.append(cur.read())
        return self._emit(TokenKind.REAL_LITERAL, start, "".join(chars))

    def _scan_word(self, start: Position) -> Token:
        cur = self._cursor
        chars = []
        while is_identifier_char(cur.peek()):
            chars.append(cur.read())
        text = "".join(chars)

        kind = KEYWORDS.get(text)
        if kind is None:
            return self._emit(TokenKind.IDENTIFIER, start, text)
        if kind is TokenKind.ELSE and self._consume_trailing_if():
            kind = TokenKind.ELSE_IF
        return self._emit(kind, start)

    def _consume_trailing_if(self) -> bool:
        """Consume ``<spaces>if`` after an ``else`` if ``if`` is a whole word.

        Any run of spaces and tabs may separate the two words, not only the
        single space of the literal ``else if`` form.
        """
        cur = self._cursor
        i = 0
        while is_whitespace(cur.peek(i)):
            i += 1
        if i == 0 or cur.peek(i) != "i" or cur.peek(i + 1) != "f":
            return False
        if is_identifier_char(cur.peek(i + 2)):
            return False
        cur.skip(i + 2)
        return True


def tokenize(
    source: str,
    filename: str = "input.gml",
    *,
    lenient_strings: bool = False,
) -> list[tuple[Token, str | None]]:
    """Convenience function: tokenize source text into (token, value) pairs.

    The list ends with the END token.
    """
    lexer = Lexer(source, filename, lenient_strings=lenient_strings)
    return [(tok, lexer.value) for tok in lexer]
