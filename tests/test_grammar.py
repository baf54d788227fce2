"""
Tests for grammar wiring and parselet registration.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from bantam.lexer import TokenType
from bantam.parser import (
    Parser, ParseError, ParseErrorKind, GrammarError, Grammar, Precedence,
    BANTAM_GRAMMAR, create_bantam_grammar, print_expression,
    NameParselet, GroupParselet, CallParselet, PrefixOperatorParselet,
    PostfixOperatorParselet, BinaryOperatorParselet, AssignParselet,
    ConditionalParselet
)


class TestBantamGrammar(unittest.TestCase):
    """Test the reference grammar tables."""

    def test_precedence_levels(self):
        levels = [
            Precedence.ASSIGNMENT, Precedence.CONDITIONAL, Precedence.SUM,
            Precedence.PRODUCT, Precedence.EXPONENT, Precedence.PREFIX,
            Precedence.POSTFIX, Precedence.CALL,
        ]
        self.assertEqual([int(level) for level in levels], list(range(1, 9)))

    def test_prefix_table(self):
        prefix = BANTAM_GRAMMAR.prefix_parselets
        self.assertIsInstance(prefix[TokenType.NAME], NameParselet)
        self.assertIsInstance(prefix[TokenType.LEFT_PAREN], GroupParselet)
        for token_type in (TokenType.PLUS, TokenType.MINUS, TokenType.TILDE, TokenType.BANG):
            self.assertIsInstance(prefix[token_type], PrefixOperatorParselet)
            self.assertEqual(prefix[token_type].precedence, Precedence.PREFIX)
        self.assertNotIn(TokenType.ASTERISK, prefix)

    def test_infix_table(self):
        infix = BANTAM_GRAMMAR.infix_parselets
        self.assertIsInstance(infix[TokenType.ASSIGN], AssignParselet)
        self.assertIsInstance(infix[TokenType.QUESTION], ConditionalParselet)
        self.assertIsInstance(infix[TokenType.LEFT_PAREN], CallParselet)
        self.assertIsInstance(infix[TokenType.BANG], PostfixOperatorParselet)
        self.assertFalse(infix[TokenType.PLUS].is_right)
        self.assertFalse(infix[TokenType.SLASH].is_right)
        self.assertTrue(infix[TokenType.CARET].is_right)
        self.assertEqual(infix[TokenType.LEFT_PAREN].precedence, Precedence.CALL)
        self.assertNotIn(TokenType.COLON, infix)

    def test_bang_has_prefix_and_postfix_behavior(self):
        self.assertIn(TokenType.BANG, BANTAM_GRAMMAR.prefix_parselets)
        self.assertIn(TokenType.BANG, BANTAM_GRAMMAR.infix_parselets)
        self.assertEqual(print_expression(Parser("!a!").parse()), "(!(a!))")


class TestGrammarRegistration(unittest.TestCase):
    """Test registering and overriding parselets."""

    def test_shared_grammar_is_frozen(self):
        self.assertTrue(BANTAM_GRAMMAR.is_frozen)
        with self.assertRaises(GrammarError):
            BANTAM_GRAMMAR.register_prefix(TokenType.COLON, NameParselet())

    def test_tables_are_read_only_views(self):
        with self.assertRaises(TypeError):
            BANTAM_GRAMMAR.infix_parselets[TokenType.COLON] = CallParselet(Precedence.CALL)

    def test_reregistering_overwrites(self):
        grammar = create_bantam_grammar()
        grammar.infix_left([TokenType.CARET], Precedence.EXPONENT)
        self.assertEqual(print_expression(Parser("a ^ b ^ c", grammar).parse()), "((a ^ b) ^ c)")

    def test_copy_leaves_original_untouched(self):
        grammar = BANTAM_GRAMMAR.copy()
        self.assertFalse(grammar.is_frozen)
        grammar.infix_right([TokenType.MINUS], Precedence.SUM)
        self.assertEqual(print_expression(Parser("a - b - c", grammar).parse()), "(a - (b - c))")
        self.assertEqual(print_expression(Parser("a - b - c").parse()), "((a - b) - c)")

    def test_parser_registration_is_per_instance(self):
        parser = Parser("a : b")
        parser.register_infix(TokenType.COLON, BinaryOperatorParselet(Precedence.SUM))
        self.assertEqual(print_expression(parser.parse()), "(a : b)")

        with self.assertRaises(ParseError) as cm:
            Parser("a : b").parse()
        self.assertIs(cm.exception.kind, ParseErrorKind.UNEXPECTED_TOKEN)

    def test_minimal_grammar(self):
        grammar = Grammar()
        grammar.register_prefix(TokenType.NAME, NameParselet())
        grammar.infix_left([TokenType.ASTERISK], Precedence.PRODUCT)
        self.assertEqual(print_expression(Parser("a * b * c", grammar).parse()), "((a * b) * c)")

        with self.assertRaises(ParseError) as cm:
            Parser("-a", grammar).parse()
        self.assertIs(cm.exception.kind, ParseErrorKind.UNPARSABLE_TOKEN)


if __name__ == '__main__':
    unittest.main()
