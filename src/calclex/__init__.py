"""calclex: tokenizer for a minimal assignment-and-arithmetic language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calclex.tokens import Token

__version__ = "0.1.0"


def tokenize(source: str) -> list[Token]:
    """Tokenize calc source text into a list of tokens."""
    from calclex.lexer import tokenize as _tokenize

    return _tokenize(source)
