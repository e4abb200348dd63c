"""pgsl — lexical front end for the pgsl schema-description language."""

from pgsl.lexer import Lexer, Token, TokenStream, TokenType, tokenize

__version__ = "0.1.0"

__all__ = ["Lexer", "Token", "TokenStream", "TokenType", "tokenize", "__version__"]
