"""
Error handling for the Lox lexer.

Provides the diagnostic record shared by the lexer and the parser, the
exception the scanner raises for malformed input, and factories for the
common lexical errors.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """A single reported problem (error or warning) tied to a source line."""
    message: str
    line: int
    where: str = ""
    severity: str = "error"  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"[line {self.line}] {self.severity.capitalize()}{self.where}: {self.message}"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class LexerError(Exception):
    """
    Exception raised when the scanner meets malformed input.

    The lexer catches it, records the diagnostic and keeps scanning.
    """

    def __init__(
        self,
        message: str,
        line: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            severity="error",
            code=code,
            help_text=help_text
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
}


# Helper functions for creating common errors
def create_unexpected_character_error(char: str, line: int) -> LexerError:
    """Create an error for a character no token starts with."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (U+{ord(char):04X}) is not allowed."

    return LexerError(
        message="Unexpected character.",
        line=line,
        code="L001",
        help_text=help_text
    )


def create_unterminated_string_error(line: int) -> LexerError:
    """Create an error for a string literal that runs to end of input."""
    return LexerError(
        message="Unterminated string.",
        line=line,
        code="L002",
        help_text="String literals must be closed with a matching '\"'."
    )

