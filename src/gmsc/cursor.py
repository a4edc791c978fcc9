"""Read cursor over an immutable source buffer."""

from __future__ import annotations

from dataclasses import dataclass

from gmsc.errors import EofMisuseError
from gmsc.tokens import END_OF_INPUT, Position


@dataclass(slots=True)
class Cursor:
    """Scan state of one lexer: offset into the source plus line/column counters.

    ``column`` counts the characters consumed on the current line, so after a
    character has been read it holds that character's 1-based column. Reading
    a line feed starts a new line with ``column`` reset to 0.
    """

    source: str
    offset: int = 0
    line: int = 1
    column: int = 0
    exhausted: bool = False

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.source)

    def peek(self, ahead: int = 0) -> str:
        idx = self.offset + ahead
        if idx < len(self.source):
            return self.source[idx]
        return END_OF_INPUT

    def window(self, size: int) -> str:
        """Return up to *size* unread characters without consuming them."""
        return self.source[self.offset : self.offset + size]

    def read(self) -> str:
        """Consume and return the next character, or END_OF_INPUT once exhausted.

        Reading again after END_OF_INPUT has been returned raises EofMisuseError.
        """
        if self.exhausted:
            raise EofMisuseError(
                "read past end of input (lexer crash)", self.position(), self.source
            )
        if self.at_end:
            self.exhausted = True
            return END_OF_INPUT

        ch = self.source[self.offset]
        self.offset += 1
        if ch == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        return ch

    def skip(self, count: int) -> None:
        for _ in range(count):
            self.read()

    def location(self) -> tuple[int, int]:
        """Return the 1-based (line, column) of the next unread character."""
        return self.line, self.column + 1

    def position(self) -> Position:
        return Position(self.line, self.column + 1, self.offset)
