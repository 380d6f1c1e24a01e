"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import regex


class TokenType(Enum):
    # Literals
    NUMBER_LITERAL = auto()  # 0-9 run, e.g. 2, 3, 17
    IDENTIFIER = auto()  # a, b, print, aComplicatedVariableName

    # Operators (single-character)
    EQUAL = auto()  # =
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /

    # Grouping
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )

    NEWLINE = auto()  # \n


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start (inclusive) to end (exclusive) position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token: its type and the exact source text it came from."""

    type: TokenType
    lexeme: str
    span: Span


SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "=": TokenType.EQUAL,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "\n": TokenType.NEWLINE,
}

# Characters that end a number literal without being consumed by it
NUMBER_TERMINATORS = frozenset(" )\n")


# Unicode Alphabetic (includes combining vowel signs) or Numeric, plus underscore
_IDENT_CONTINUE = regex.compile(r"[\p{Alphabetic}\p{N}_]")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return len(ch) == 1 and "0" <= ch <= "9"


def is_ident_continue(ch: str) -> bool:
    """Return True if ch may continue an identifier (Unicode alphanumeric or _)."""
    return _IDENT_CONTINUE.fullmatch(ch) is not None
