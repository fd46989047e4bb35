"""
sexpc Lexer - turns source text into tokens, one request at a time

The scanner keeps the whole input plus a cursor. Every call to
next_token() skips trivia, then dispatches on the character under the
cursor. No mode survives between calls: strings, numbers and words are
always read to completion inside a single call.

xwest
"""

import bisect
import logging
from typing import Iterator, List, Optional

from ..config import DEFAULT_CONFIG, LexerConfig
from .tokens import (
    Token, TokenType, SourceLocation, ReservedWord, DELIMITERS, SYMBOL_CHARS,
    ARROW, KEYWORD_SYMBOL_PREFIX, STRING_DELIMITER, COMMENT_START
)
from .errors import (
    LexerError, create_invalid_character_error,
    create_unterminated_string_error, create_invalid_number_error
)

logger = logging.getLogger(__name__)


class Lexer:
    """
    sexpc lexical analyzer.

    Converts source text into tokens on demand. next_token() returns None
    when no token can be formed; `last_error` then says why.
    """

    def __init__(self, source: str, filename: Optional[str] = None,
                 config: Optional[LexerConfig] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Complete, already decoded source text
            filename: Name of source file for error reporting
                (defaults to the config's filename)
            config: Lexer configuration
        """
        self.config = config or DEFAULT_CONFIG
        self.source = source
        self.filename = filename if filename is not None else self.config.filename
        self.pos = 0
        self.last_error: Optional[LexerError] = None

        # Offsets where each line starts, built on first location lookup
        self._line_starts: Optional[List[int]] = None

    def next_token(self) -> Optional[Token]:
        """
        Produce the next token.

        Returns:
            The next token, an EOF token once the input is exhausted (repeatable),
            or None if the text under the cursor cannot be tokenized.
        """
        self.last_error = None
        self._skip_trivia()

        if self.pos >= len(self.source):
            return Token(TokenType.EOF, "", None, self.location_at(len(self.source)))

        start_pos = self.pos
        current_char = self.source[start_pos]

        # Delimiters
        if current_char in DELIMITERS:
            self.pos += 1
            return self._make_token(DELIMITERS[current_char], start_pos, None)

        if current_char == KEYWORD_SYMBOL_PREFIX:
            return self._tokenize_keyword_symbol(start_pos)

        if current_char == STRING_DELIMITER:
            return self._tokenize_string(start_pos)

        # `=>` must win over the single `=` symbol
        if self.source.startswith(ARROW, start_pos):
            self.pos += len(ARROW)
            return self._make_token(TokenType.ARROW, start_pos, None)

        if current_char in SYMBOL_CHARS:
            self.pos += 1
            return self._make_token(TokenType.SYMBOL, start_pos, current_char)

        if _is_ascii_digit(current_char):
            return self._tokenize_number(start_pos)

        if current_char.isalpha():
            return self._tokenize_word(start_pos)

        # Step over the unrecognized character so a later call can continue
        self.pos += 1
        return self._fail(create_invalid_character_error(
            current_char, self.location_at(start_pos)
        ))

    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the input.

        Scanning starts at the current cursor and stops at the first failure.

        Returns:
            List of tokens ending with the EOF token

        Raises:
            LexerError: Describing the first failure
        """
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                raise self.last_error
            yield token
            if token.type == TokenType.EOF:
                return

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def peek_char(self) -> Optional[str]:
        """Character under the cursor, or None at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def peek_next_char(self) -> Optional[str]:
        """Character one past the cursor, or None."""
        peek_pos = self.pos + 1
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return None

    def get_position(self) -> int:
        return self.pos

    def location_at(self, offset: int) -> SourceLocation:
        """Translate a character offset into a 1-based line/column location."""
        if self._line_starts is None:
            self._line_starts = [0]
            self._line_starts.extend(
                i + 1 for i, ch in enumerate(self.source) if ch == "\n"
            )
        line_index = bisect.bisect_right(self._line_starts, offset) - 1
        column = offset - self._line_starts[line_index] + 1
        return SourceLocation(self.filename, line_index + 1, column, offset)

    # ------------------------------------------------------------------
    # Trivia
    # ------------------------------------------------------------------

    def _skip_trivia(self):
        """Skip whitespace and comments."""
        if self.config.single_pass_trivia:
            self._skip_whitespace()
            self._skip_comments()
            return

        while True:
            start_pos = self.pos
            self._skip_whitespace()
            self._skip_comments()
            if self.pos == start_pos:
                break

    def _skip_whitespace(self):
        while self.pos < len(self.source) and _is_whitespace(self.source[self.pos]):
            self.pos += 1

    def _skip_comments(self):
        """Skip adjacent line comments, each through its newline."""
        while self.peek_char() == COMMENT_START:
            newline = self.source.find("\n", self.pos)
            self.pos = len(self.source) if newline == -1 else newline + 1

    # ------------------------------------------------------------------
    # Token readers
    # ------------------------------------------------------------------

    def _tokenize_keyword_symbol(self, start_pos: int) -> Token:
        self.pos += 1  # Skip ':'
        name_start = self.pos
        self._consume_word_chars()
        return self._make_token(
            TokenType.KEYWORD_SYMBOL, start_pos, self.source[name_start:self.pos]
        )

    def _tokenize_string(self, start_pos: int) -> Optional[Token]:
        """Tokenize a string literal; the contents are taken verbatim."""
        closing = self.source.find(STRING_DELIMITER, start_pos + 1)

        if closing == -1:
            self.pos = len(self.source)
            return self._fail(create_unterminated_string_error(self.location_at(start_pos)))

        self.pos = closing + 1
        return self._make_token(
            TokenType.STRING, start_pos, self.source[start_pos + 1:closing]
        )

    def _tokenize_number(self, start_pos: int) -> Optional[Token]:
        """Tokenize a run of digits and dots as a float."""
        while self.pos < len(self.source) and (
            _is_ascii_digit(self.source[self.pos]) or self.source[self.pos] == "."
        ):
            self.pos += 1

        lexeme = self.source[start_pos:self.pos]
        try:
            value = float(lexeme)
        except ValueError:
            return self._fail(create_invalid_number_error(
                lexeme, self.location_at(start_pos),
                f"'{lexeme}' is not a valid decimal number."
            ))

        return self._make_token(TokenType.NUMBER, start_pos, value)

    def _tokenize_word(self, start_pos: int) -> Token:
        """Tokenize an identifier or reserved word."""
        self._consume_word_chars()
        lexeme = self.source[start_pos:self.pos]

        reserved = ReservedWord.classify(lexeme)
        if reserved is None:
            return self._make_token(TokenType.IDENTIFIER, start_pos, lexeme)
        return self._make_token(reserved.token_type, start_pos, reserved.token_value)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _consume_word_chars(self):
        while self.pos < len(self.source) and _is_word_char(self.source[self.pos]):
            self.pos += 1

    def _make_token(self, token_type: TokenType, start_pos: int, value) -> Token:
        return Token(
            token_type,
            self.source[start_pos:self.pos],
            value,
            self.location_at(start_pos)
        )

    def _fail(self, error: LexerError) -> None:
        self.last_error = error
        logger.debug("%s: %s (%s)", error.location, error.args[0], error.code)
        return None


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


# str.isspace() also accepts the ASCII information separators
_NON_WHITESPACE_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def _is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _NON_WHITESPACE_SEPARATORS


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "-" or char == "_"


def tokenize_string(source: str, filename: str = "<string>",
                    config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        config: Lexer configuration

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: If lexing fails
    """
    config = (config or DEFAULT_CONFIG).with_filename(filename)
    return Lexer(source, config=config).tokenize()


def tokenize_file(filepath: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8', newline='') as f:
        source = f.read()

    return tokenize_string(source, filepath, config)
