"""Read-only cursor over a finished pgsl token sequence."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Iterator

from pgsl.lexer.tokens import Token, TokenType


class UnexpectedTokenError(Exception):
    """Raised by `TokenStream.expect` when the current token does not match."""

    def __init__(self, message: str, token: Token | None, file: str = "<unknown>"):
        self.token = token
        if token is None:
            loc = f"{file}: end of input"
        else:
            loc = f"{token.file}:{token.line}:{token.column}"
        super().__init__(f"{loc}: {message}")


class TokenStream:
    """Positional access to an immutable token sequence.

    Iterating never moves the cursor, and every iteration starts from the
    first token::

        stream = TokenStream(Lexer(source).tokenize())
        if stream.test(TokenType.WORD, "interface"):
            stream.advance()
            kind = stream.expect(TokenType.WORD, ("table", "schema"))
    """

    def __init__(self, tokens: Iterable[Token], filename: str = "<unknown>") -> None:
        self._tokens = tuple(tokens)
        self.filename = filename
        self.pos = 0

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    def __iter__(self) -> Iterator[Token]:
        yield from self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    # ------------------------------------------------------------------
    # Positional access
    # ------------------------------------------------------------------

    def current(self) -> Token | None:
        """Return the token at the cursor, or None past either end."""
        return self._at(self.pos)

    def peek_next(self) -> Token | None:
        return self._at(self.pos + 1)

    def peek_previous(self) -> Token | None:
        return self._at(self.pos - 1)

    def at_end(self) -> bool:
        return self.pos >= len(self._tokens)

    def advance(self) -> Token | None:
        """Return the current token and move the cursor forward."""
        tok = self.current()
        if tok is not None:
            self.pos += 1
        return tok

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def test(self, token_type: TokenType, value: object = None) -> bool:
        """Check the current token's type (and value) without consuming it.

        ``value`` may be a single value or a collection of accepted values.
        """
        tok = self.current()
        if tok is None or tok.type is not token_type:
            return False
        if value is None:
            return True
        if isinstance(value, Collection) and not isinstance(value, str):
            return tok.value in value
        return tok.value == value

    def expect(self, token_type: TokenType, value: object = None) -> Token:
        """Consume the current token if it matches, otherwise raise."""
        if not self.test(token_type, value):
            wanted = token_type.name if value is None else f"{token_type.name} {value!r}"
            tok = self.current()
            got = "end of input" if tok is None else f"{tok.type.name} ({tok.value!r})"
            raise UnexpectedTokenError(f"Expected {wanted}, got {got}", tok, self.filename)
        return self.advance()

    def consume_until(self, token_type: TokenType) -> list[Token]:
        """Consume tokens up to, but not including, the next ``token_type``."""
        consumed: list[Token] = []
        while not self.at_end() and not self.test(token_type):
            consumed.append(self.advance())
        return consumed

    def _at(self, index: int) -> Token | None:
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None
