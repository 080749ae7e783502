"""
Tests for the diagnostic sink.
"""

import io
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxfront.lexer import Token, TokenType
from loxfront.reporting import ErrorReporter


class TestErrorReporter(unittest.TestCase):
    """Test cases for ErrorReporter."""

    def setUp(self):
        self.stream = io.StringIO()
        self.reporter = ErrorReporter(self.stream)

    def test_starts_clean(self):
        self.assertFalse(self.reporter.had_error)
        self.assertEqual(self.reporter.diagnostics, [])

    def test_line_error(self):
        diagnostic = self.reporter.error(3, "Unexpected character.", code="L001")

        self.assertTrue(self.reporter.had_error)
        self.assertEqual(diagnostic.line, 3)
        self.assertEqual(diagnostic.code, "L001")
        self.assertEqual(self.stream.getvalue(), "[line 3] Error: Unexpected character.\n")

    def test_token_error_at_lexeme(self):
        token = Token(TokenType.RIGHT_PAREN, ")", None, 2)
        self.reporter.token_error(token, "Expect expression.")

        self.assertEqual(self.stream.getvalue(), "[line 2] Error at ')': Expect expression.\n")

    def test_token_error_at_end(self):
        token = Token(TokenType.EOF, "", None, 7)
        diagnostic = self.reporter.token_error(token, "Expect ')' after expression.")

        self.assertEqual(diagnostic.where, " at end")
        self.assertEqual(self.stream.getvalue(),
                         "[line 7] Error at end: Expect ')' after expression.\n")

    def test_reset(self):
        self.reporter.error(1, "first")
        self.reporter.error(2, "second")
        self.assertEqual(self.reporter.messages, ["first", "second"])

        self.reporter.reset()

        self.assertFalse(self.reporter.had_error)
        self.assertEqual(self.reporter.messages, [])

    def test_diagnostic_str(self):
        diagnostic = self.reporter.report(4, " at 'x'", "Bad thing.")

        self.assertEqual(str(diagnostic), "[line 4] Error at 'x': Bad thing.")


if __name__ == '__main__':
    unittest.main()
