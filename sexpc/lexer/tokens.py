"""
Token definitions for the sexpc lexer.

This module defines every token kind the scanner can produce:
- Literals (numbers, strings, booleans)
- Identifiers and reserved words
- Keyword symbols (`:name`)
- Single-character operator symbols and the `=>` arrow
- Structural delimiters

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Optional


class TokenType(Enum):
    """
    Enumeration of all token types in sexpc.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input (repeatable)

    # ========================================================================
    # Literals
    # ========================================================================
    NUMBER = auto()                 # 42, 3.14, 1.
    STRING = auto()                 # "hello"
    BOOLEAN = auto()                # true, false

    # ========================================================================
    # Names
    # ========================================================================
    IDENTIFIER = auto()             # foo, list-of_things
    KEYWORD = auto()                # def, let, if, match, macro
    KEYWORD_SYMBOL = auto()         # :name, :foo-bar
    QUOTE = auto()                  # quote
    EVAL = auto()                   # eval

    # ========================================================================
    # Operators
    # ========================================================================
    SYMBOL = auto()                 # + - * / < > =
    ARROW = auto()                  # =>

    # ========================================================================
    # Delimiters
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACKET = auto()           # [
    RIGHT_BRACKET = auto()          # ]
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }


class ReservedWord(Enum):
    """
    Closed set of identifier-shaped words that never lex as identifiers.

    Lookup is by exact text: ``ReservedWord("let")`` succeeds,
    ``ReservedWord("Let")`` raises ``ValueError``.
    """

    TRUE = "true"
    FALSE = "false"
    DEF = "def"
    LET = "let"
    IF = "if"
    MATCH = "match"
    MACRO = "macro"
    QUOTE = "quote"
    EVAL = "eval"

    @classmethod
    def classify(cls, word: str) -> Optional["ReservedWord"]:
        """Return the reserved word spelled exactly `word`, or None."""
        try:
            return cls(word)
        except ValueError:
            return None

    @property
    def token_type(self) -> TokenType:
        if self in (ReservedWord.TRUE, ReservedWord.FALSE):
            return TokenType.BOOLEAN
        if self is ReservedWord.QUOTE:
            return TokenType.QUOTE
        if self is ReservedWord.EVAL:
            return TokenType.EVAL
        return TokenType.KEYWORD

    @property
    def token_value(self) -> Any:
        """Semantic value carried by tokens of this word."""
        token_type = self.token_type
        if token_type == TokenType.BOOLEAN:
            return self is ReservedWord.TRUE
        if token_type == TokenType.KEYWORD:
            return self.value
        return None


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and debugging information.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the sexpc language.

    Contains the token type, lexeme (raw text), semantic value,
    and source location for error reporting.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # Parsed/semantic value (e.g., float for NUMBER)
    location: SourceLocation        # Source location

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_reserved(self) -> bool:
        """Check if this token came from a reserved word."""
        return self.type in {
            TokenType.BOOLEAN, TokenType.KEYWORD, TokenType.QUOTE, TokenType.EVAL
        }

    @property
    def is_delimiter(self) -> bool:
        """Check if this token is a structural delimiter."""
        return self.type in DELIMITERS.values()

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER


# Lookup tables used by the lexer for single-character dispatch

LITERAL_TYPES = {TokenType.NUMBER, TokenType.STRING, TokenType.BOOLEAN}

DELIMITERS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
}

SYMBOL_CHARS = frozenset("+-*/<>=")

ARROW = "=>"
KEYWORD_SYMBOL_PREFIX = ":"
STRING_DELIMITER = '"'
COMMENT_START = ";"
