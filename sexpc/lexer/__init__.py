"""
sexpc Lexer Package

Implements a from-scratch lexical analyzer (tokenizer) for sexpc, a small
Lisp-like language.

Key Features:
- Pull-style scanning: one token per next_token() call
- Keyword symbols (:name), the => arrow and single-character operators
- Fixed reserved words (true, false, def, let, if, match, macro, quote, eval)
- Line comments starting with ';'
- Diagnostics with error codes and source locations

Author: xwest
"""

from .tokens import Token, TokenType, ReservedWord, SourceLocation
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "ReservedWord",
    "SourceLocation",
    "LexerError",
    "tokenize_string",
    "tokenize_file",
]
