"""Error types with formatted source context."""

from __future__ import annotations

from calclex.tokens import Position


class LexError(Exception):
    """Raised on the first lexing error, with position and source context."""

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "input.calc") -> str:
        # Only \n starts a new line for the lexer
        lines = self.source.split("\n")
        line_idx = self.position.line - 1
        col = self.position.column

        # Build the source line (strip trailing carriage return for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class InvalidCharacterInNumberLiteral(LexError):
    """A number literal was followed by something other than a digit or terminator.

    ``char`` is the offending character and ``lexeme`` the digits read before it.
    """

    def __init__(self, char: str, lexeme: str, position: Position, source: str) -> None:
        self.char = char
        self.lexeme = lexeme
        super().__init__(f"invalid character in number literal: {char!r}", position, source)
