"""Lexer error types with formatted source context."""

from __future__ import annotations

from gmsc.tokens import Position


class LexError(Exception):
    """Raised on the first tokenizing error, with position and source context.

    ``length`` is the number of source characters the offending lexeme spans
    from ``position``; the formatted snippet underlines that many of them.
    Every lex error is fatal to the session that raised it.
    """

    def __init__(self, message: str, position: Position, source: str, length: int = 1) -> None:
        self.message = message
        self.position = position
        self.source = source
        self.length = max(1, length)
        super().__init__(self.format())

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def source_line(self) -> str:
        """Return the text of the line the error points at, without its line break."""
        lines = self.source.split("\n")
        if 0 < self.position.line <= len(lines):
            return lines[self.position.line - 1].rstrip("\r")
        return ""

    def underline_length(self) -> int:
        """Caret count: the lexeme length, clipped to the rest of the line."""
        remaining = len(self.source_line()) - self.position.column + 1
        return max(1, min(self.length, remaining))

    def format(self, filename: str = "input.gml") -> str:
        line, col = self.position.line, max(1, self.position.column)
        gutter = " " * len(str(line))
        carets = "^" * self.underline_length()
        return "\n".join(
            [
                f"error: {self.message}",
                f"{gutter} --> {filename}:{line}:{col}",
                f"{gutter} |",
                f"{line} | {self.source_line()}",
                f"{gutter} | {' ' * (col - 1)}{carets}",
            ]
        )


class EofMisuseError(LexError):
    """A character was read after the end-of-input sentinel was already returned."""


class UnterminatedCommentError(LexError):
    pass


class UnterminatedStringError(LexError):
    pass


class UnsupportedFeatureError(LexError):
    pass


class UnknownTokenError(LexError):
    pass
