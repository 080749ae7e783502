"""
Error handling for the Lox parser.

Provides the exception used to unwind out of the grammar functions, the
token tables used for error recovery, and factories for common syntax
errors.
"""

from typing import Optional

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser meets a syntax error it cannot
    recover from locally.

    The diagnostic is reported before the exception is raised; the parser's
    entry point catches it and yields no tree.
    """

    def __init__(
        self,
        message: str,
        token: Token,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        where = " at end" if token.type == TokenType.EOF else f" at '{token.lexeme}'"
        self.diagnostic = Diagnostic(
            message=message,
            line=token.line,
            where=where,
            severity="error",
            code=code,
            help_text=help_text
        )
        self.token = token

    def __str__(self) -> str:
        return str(self.diagnostic)


class SyntaxErrorRecovery:
    """
    Token tables used when resynchronizing after a syntax error.
    """

    # Reached by advancing past it
    STATEMENT_TERMINATORS = {
        TokenType.SEMICOLON,
    }

    # Tokens that begin a new statement
    STATEMENT_KEYWORDS = {
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    }


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Expected token not found",
    "P005": "Expected expression",
    "P009": "Missing left-hand operand",
    "P010": "Expression nested too deeply",
}


# Helper functions for creating common parser errors

def create_missing_token_error(expected: TokenType, message: str, found: Token) -> ParseError:
    """Create an error for a required token that is not there."""
    return ParseError(
        message=message,
        token=found,
        code="P001",
        help_text=f"The parser expected {expected.name} here, found {found.type.name}."
    )


def create_expect_expression_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an operand."""
    return ParseError(
        message="Expect expression.",
        token=found,
        code="P005"
    )


def create_too_deep_error(found: Token) -> ParseError:
    """Create an error for input nested past the interpreter's stack depth."""
    return ParseError(
        message="Expression nested too deeply.",
        token=found,
        code="P010"
    )
