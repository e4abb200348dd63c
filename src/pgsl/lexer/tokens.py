"""Token types and Token dataclass for the pgsl lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every distinct token the pgsl lexer can produce.

    Keywords are not distinguished here: ``interface``, ``table`` and friends
    all arrive as WORD tokens and are interpreted by the parser.
    """

    WORD = auto()
    OPERATOR = auto()       # exactly one character
    WHITESPACE = auto()     # interior run of 2+ spaces, or any run with a tab
    INDENT = auto()         # leading whitespace, value is the depth
    EOL = auto()            # separator between logical lines


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the lexer.

    ``value`` holds the word text, the operator character, the literal
    whitespace run or the indent depth, and is ``None`` for EOL.
    """

    type: TokenType
    value: str | int | None
    line: int
    column: int
    file: str = "<unknown>"

    def __repr__(self) -> str:
        if self.type is TokenType.EOL:
            return f"Token({self.type.name}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"
