"""
sexpc Package

Front end for sexpc, a small Lisp-like language. Only the lexer exists so
far; a parser will consume the token stream it produces.

Architecture:
    sexpc/
    ├── lexer/           # Tokenization and lexical analysis
    ├── config.py        # Lexer configuration
    └── cli.py           # sexpc-lex command line driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@sexpc.org"
__license__ = "MIT"

from .config import LexerConfig
from .lexer import Lexer, Token, TokenType, LexerError

__all__ = [
    # Core classes
    "Lexer",
    "LexerConfig",
    "LexerError",
    "Token",
    "TokenType",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
