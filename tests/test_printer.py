"""
Tests for the parenthesized AST printer.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxfront.lexer import Token, TokenType
from loxfront.parser import AstPrinter, Binary, Conditional, Grouping, Literal, Unary
from loxfront.parser.printer import format_value


class TestAstPrinter(unittest.TestCase):
    """Test cases for AstPrinter."""

    def setUp(self):
        self.printer = AstPrinter()

    def test_hand_built_tree(self):
        expr = Binary(
            Unary(Token(TokenType.MINUS, "-", None, 1), Literal(123.0)),
            Token(TokenType.STAR, "*", None, 1),
            Grouping(Literal(45.67)),
        )

        self.assertEqual(self.printer.print(expr), "(* (- 123.0) (group 45.67))")

    def test_conditional(self):
        expr = Conditional(Literal(True), Literal("yes"), Literal(None))

        self.assertEqual(self.printer.print(expr), "(?: true yes nil)")

    def test_comma(self):
        expr = Binary(Literal(1.0), Token(TokenType.COMMA, ",", None, 1), Literal(False))

        self.assertEqual(self.printer.print(expr), "(, 1.0 false)")

    def test_format_value(self):
        self.assertEqual(format_value(None), "nil")
        self.assertEqual(format_value(True), "true")
        self.assertEqual(format_value(False), "false")
        self.assertEqual(format_value(2.5), "2.5")
        self.assertEqual(format_value("text"), "text")

    def test_unknown_node_raises(self):
        with self.assertRaises(TypeError):
            self.printer.print(object())


if __name__ == '__main__':
    unittest.main()
