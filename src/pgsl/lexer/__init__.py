"""pgsl lexer — line-oriented tokenizer with indentation-sensitive scanning."""

from pgsl.lexer.tokens import Token, TokenType
from pgsl.lexer.lexer import Lexer, tokenize
from pgsl.lexer.stream import TokenStream, UnexpectedTokenError

__all__ = ["Token", "TokenType", "Lexer", "tokenize", "TokenStream", "UnexpectedTokenError"]
