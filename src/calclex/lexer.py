"""calclex lexer: converts source text into a flat token stream."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from calclex.errors import InvalidCharacterInNumberLiteral, LexError
from calclex.tokens import (
    NUMBER_TERMINATORS,
    SINGLE_CHAR_TOKENS,
    Position,
    Span,
    Token,
    TokenType,
    is_digit,
    is_ident_continue,
)


class Lexer:
    """Tokenize calc source text into a stream of Token objects.

    The cursor only moves forward, one character at a time. Offsets and
    columns count characters, not bytes.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list.

        Raises InvalidCharacterInNumberLiteral without returning any tokens
        if a number literal runs into a character it cannot end on.
        """
        return list(self.iter_tokens())

    def iter_tokens(self) -> Iterator[Token]:
        """Yield tokens lazily. Each call rescans from the start of the source."""
        self._pos = 0
        self._line = 1
        self._col = 1

        while self._pos < len(self._source):
            ch = self._peek()

            tt = SINGLE_CHAR_TOKENS.get(ch)
            if tt is not None:
                start = self._current_pos()
                self._advance()
                yield self._make(tt, start)
                continue

            if is_digit(ch):
                yield self._lex_number()
                continue

            if ch == " ":
                self._advance()
                continue

            # Anything else starts an identifier
            yield self._lex_identifier()

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _make(self, tt: TokenType, start: Position) -> Token:
        end = self._current_pos()
        return Token(tt, self._source[start.offset : end.offset], Span(start, end))

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _lex_number(self) -> Token:
        start = self._current_pos()
        self._advance()
        while self._pos < len(self._source):
            ch = self._peek()
            if ch in NUMBER_TERMINATORS:
                break
            if not is_digit(ch):
                raise InvalidCharacterInNumberLiteral(
                    ch,
                    self._source[start.offset : self._pos],
                    self._current_pos(),
                    self._source,
                )
            self._advance()
        return self._make(TokenType.NUMBER_LITERAL, start)

    def _lex_identifier(self) -> Token:
        start = self._current_pos()
        self._advance()
        while self._pos < len(self._source) and is_ident_continue(self._peek()):
            self._advance()
        return self._make(TokenType.IDENTIFIER, start)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of scan(): either the full token list or the error that stopped it."""

    tokens: list[Token] = field(default_factory=list)
    error: LexError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source).tokenize()


def iter_tokens(source: str) -> Iterator[Token]:
    """Convenience function: lazily yield tokens from source text."""
    return Lexer(source).iter_tokens()


def scan(source: str) -> ScanResult:
    """Tokenize source text, returning errors as a value instead of raising."""
    try:
        tokens = tokenize(source)
    except LexError as exc:
        return ScanResult(error=exc)
    return ScanResult(tokens=tokens)
