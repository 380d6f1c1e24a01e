"""Token formatting for the CLI and --debug output."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TextIO

from calclex.tokens import Token, TokenType


def format_token(tok: Token, *, positions: bool = False) -> str:
    """Render one token as ``TYPE 'lexeme'``, optionally prefixed by line:col."""
    text = f"{tok.type.name} {tok.lexeme!r}"
    if positions:
        start = tok.span.start
        text = f"{start.line}:{start.column} {text}"
    return text


def dump_summary(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print a per-type token count to *file*, in TokenType declaration order."""
    counts = Counter(tok.type for tok in tokens)
    file.write(f"{len(tokens)} tokens\n")
    for tt in TokenType:
        if counts[tt]:
            file.write(f"  {tt.name:<14} {counts[tt]}\n")
