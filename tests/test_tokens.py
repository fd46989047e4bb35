"""
Tests for token definitions and the reserved word table.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from sexpc.lexer.lexer import Lexer
from sexpc.lexer.tokens import ReservedWord, SourceLocation, Token, TokenType


class TestReservedWord(unittest.TestCase):
    """Test the closed reserved word enumeration."""

    def test_all_reserved_words(self):
        self.assertEqual(
            {word.value for word in ReservedWord},
            {"true", "false", "def", "let", "if", "match", "macro", "quote", "eval"}
        )

    def test_classify_is_exact_match(self):
        self.assertIs(ReservedWord.classify("let"), ReservedWord.LET)
        self.assertIsNone(ReservedWord.classify("Let"))
        self.assertIsNone(ReservedWord.classify("lets"))
        self.assertIsNone(ReservedWord.classify(""))

    def test_token_types(self):
        self.assertEqual(ReservedWord.TRUE.token_type, TokenType.BOOLEAN)
        self.assertEqual(ReservedWord.FALSE.token_type, TokenType.BOOLEAN)
        self.assertEqual(ReservedWord.QUOTE.token_type, TokenType.QUOTE)
        self.assertEqual(ReservedWord.EVAL.token_type, TokenType.EVAL)
        for word in (ReservedWord.DEF, ReservedWord.LET, ReservedWord.IF,
                     ReservedWord.MATCH, ReservedWord.MACRO):
            self.assertEqual(word.token_type, TokenType.KEYWORD)

    def test_token_values(self):
        self.assertIs(ReservedWord.TRUE.token_value, True)
        self.assertIs(ReservedWord.FALSE.token_value, False)
        self.assertEqual(ReservedWord.MACRO.token_value, "macro")
        self.assertIsNone(ReservedWord.QUOTE.token_value)
        self.assertIsNone(ReservedWord.EVAL.token_value)


class TestToken(unittest.TestCase):
    """Test Token formatting and category properties."""

    def setUp(self):
        self.location = SourceLocation("<test>", 1, 1, 0)

    def test_str_shows_value_when_it_differs(self):
        number = Token(TokenType.NUMBER, "1", 1.0, self.location)
        self.assertEqual(str(number), "NUMBER('1' -> 1.0)")

        ident = Token(TokenType.IDENTIFIER, "foo", "foo", self.location)
        self.assertEqual(str(ident), "IDENTIFIER('foo')")

        paren = Token(TokenType.LEFT_PAREN, "(", None, self.location)
        self.assertEqual(str(paren), "LEFT_PAREN('(')")

    def test_categories(self):
        tokens = Lexer('foo 1 "s" true let quote :k ( =>').tokenize()
        by_type = {token.type: token for token in tokens}

        self.assertTrue(by_type[TokenType.IDENTIFIER].is_identifier)
        self.assertTrue(by_type[TokenType.NUMBER].is_literal)
        self.assertTrue(by_type[TokenType.STRING].is_literal)
        self.assertTrue(by_type[TokenType.BOOLEAN].is_literal)
        self.assertTrue(by_type[TokenType.BOOLEAN].is_reserved)
        self.assertTrue(by_type[TokenType.KEYWORD].is_reserved)
        self.assertTrue(by_type[TokenType.QUOTE].is_reserved)
        self.assertFalse(by_type[TokenType.KEYWORD_SYMBOL].is_reserved)
        self.assertTrue(by_type[TokenType.LEFT_PAREN].is_delimiter)
        self.assertFalse(by_type[TokenType.ARROW].is_delimiter)

    def test_tokens_are_immutable(self):
        token = Token(TokenType.EOF, "", None, self.location)
        with self.assertRaises(AttributeError):
            token.value = 1


if __name__ == "__main__":
    unittest.main(verbosity=2)
