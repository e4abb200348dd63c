"""pgsl lexer: line-at-a-time scanner with layout-sensitive whitespace.

Design decisions:
- Every character is classifiable, so lexing never fails on content.
- Leading whitespace becomes one INDENT token whose value is the number of
  whitespace characters (tabs and spaces count the same).
- Interior whitespace is dropped when it is a single space, otherwise kept
  as one WHITESPACE token holding the literal run.
- ``#`` starts a comment that runs to the end of the line.
- EOL separates logical lines; blank and comment-only lines add nothing.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from pgsl.lexer.reader import read_lines, resolve_source_path
from pgsl.lexer.stream import TokenStream
from pgsl.lexer.tokens import Token, TokenType

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"

_BLANKS = " \t"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(slots=True)
class _Run:
    """An INDENT or WHITESPACE token still being accumulated."""

    type: TokenType
    value: str | int
    column: int


class Lexer:
    """Tokenizes pgsl source into a flat list of `Token` objects.

    Usage::

        tokens = Lexer(source_text, filename="schema.pgl").tokenize()

    or, when lines arrive one at a time::

        lexer = Lexer(filename="schema.pgl")
        for line in lines:
            lexer.feed_line(line)
        tokens = lexer.finish()
    """

    def __init__(self, source: str = "", filename: str = "<unknown>") -> None:
        self.source = source
        self.filename = filename
        self.line = 0
        self.tokens: list[Token] = []

        # Per-line scanning state
        self._word: list[str] = []
        self._word_column = 0
        self._run: _Run | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source and return the token list."""
        self.tokens = []
        self.line = 0

        for text in _LINE_BREAK.split(self.source):
            self.feed_line(text)

        return self.finish()

    def feed_line(self, text: str) -> bool:
        """Scan one line (without its line break) into the token buffer.

        Returns True if the line contributed at least one token.
        """
        self.line += 1
        contributed = self._scan_line(text)

        # Skip continuous EOLs and EOLs at the start of the document
        if self.tokens and self.tokens[-1].type is not TokenType.EOL:
            self.tokens.append(self._make_token(TokenType.EOL, None, len(text) + 1))

        return contributed

    def finish(self) -> list[Token]:
        """Drop the trailing EOL and return the finished token list."""
        if self.tokens and self.tokens[-1].type is TokenType.EOL:
            self.tokens.pop()

        logger.debug(
            "Lexed %d line(s) of %s into %d token(s)",
            self.line, self.filename, len(self.tokens),
        )
        return self.tokens

    # ------------------------------------------------------------------
    # Line-level scanning
    # ------------------------------------------------------------------

    def _scan_line(self, text: str) -> bool:
        start = len(self.tokens)
        is_indenting = True
        self._word = []
        self._run = None

        for i, ch in enumerate(text):
            column = i + 1

            if ch in _BLANKS:
                if is_indenting:
                    self._extend_indent(column)
                else:
                    self._flush_word()
                    self._extend_whitespace(ch, column, text[i + 1:i + 2])
                continue

            if ch == COMMENT_MARKER:
                break

            is_indenting = False

            # Any Unicode alphanumeric, so "½" and "²" join words too
            if ch.isalnum() or ch == "_":
                if not self._word:
                    self._word_column = column
                self._word.append(ch)
            else:
                self._flush_word()
                self._push(TokenType.OPERATOR, ch, column)

        self._flush_word()

        # Trailing whitespace is kept; a lone indent (blank or comment-only line) is not
        if self._run is not None and self._run.type is TokenType.WHITESPACE:
            self._commit_run()
        self._run = None

        return len(self.tokens) > start

    def _extend_indent(self, column: int) -> None:
        if self._run is None:
            self._run = _Run(TokenType.INDENT, 0, column)
        self._run.value += 1

    def _extend_whitespace(self, ch: str, column: int, next_ch: str) -> None:
        if self._run is not None:
            self._run.value += ch
        # A single space between tokens is insignificant
        elif ch == "\t" or next_ch == " ":
            self._run = _Run(TokenType.WHITESPACE, ch, column)

    def _flush_word(self) -> None:
        if not self._word:
            return
        self._push(TokenType.WORD, "".join(self._word), self._word_column)
        self._word = []

    def _push(self, token_type: TokenType, value: str, column: int) -> None:
        """Append a content token, committing any open run in front of it."""
        if self._run is not None:
            self._commit_run()
        self.tokens.append(self._make_token(token_type, value, column))

    def _commit_run(self) -> None:
        run = self._run
        self._run = None
        self.tokens.append(self._make_token(run.type, run.value, run.column))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _make_token(self, token_type: TokenType, value: str | int | None, column: int) -> Token:
        return Token(token_type, value, self.line, column, self.filename)


async def tokenize(name: str | Path, base_dir: str | Path | None = None) -> TokenStream:
    """Read the schema ``name`` from disk and tokenize it.

    The ``.pgl`` extension is optional. I/O errors propagate unchanged and no
    partial token stream is ever returned.
    """
    path = resolve_source_path(name, base_dir)
    lexer = Lexer(filename=str(path))

    async for text in read_lines(path):
        lexer.feed_line(text)

    return TokenStream(lexer.finish(), filename=str(path))
