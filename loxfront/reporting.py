"""
Diagnostic sink shared by the lexer and the parser.

The reporter only records what it is told; it never changes the control
flow of the component reporting to it.
"""

import logging
import sys
from typing import List, Optional, TextIO

from .lexer.errors import Diagnostic
from .lexer.tokens import Token, TokenType


class ErrorReporter:
    """
    Collects diagnostics and prints them as ``[line N] Error: message``.

    ``had_error`` stays set until ``reset()`` is called, so a driver can
    decide on an exit status after lexing and parsing have both run.
    """

    _logger = logging.getLogger(__name__)

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.diagnostics: List[Diagnostic] = []
        self.had_error = False

    def report(self, line: int, where: str, message: str,
               code: Optional[str] = None) -> Diagnostic:
        """Record an error at ``line``; ``where`` is a short location suffix."""
        diagnostic = Diagnostic(message=message, line=line, where=where, code=code)
        self.add(diagnostic)
        return diagnostic

    def add(self, diagnostic: Diagnostic):
        """Record an already built diagnostic."""
        self.diagnostics.append(diagnostic)
        if diagnostic.severity == "error":
            self.had_error = True

        text = f"[line {diagnostic.line}] Error{diagnostic.where}: {diagnostic.message}"
        self._logger.debug("reported %s (%s)", text, diagnostic.code or "no code")
        print(text, file=self.stream if self.stream is not None else sys.stderr)

    def error(self, line: int, message: str, code: Optional[str] = None) -> Diagnostic:
        return self.report(line, "", message, code)

    def token_error(self, token: Token, message: str,
                    code: Optional[str] = None) -> Diagnostic:
        """Record an error located at ``token``."""
        if token.type == TokenType.EOF:
            return self.report(token.line, " at end", message, code)
        return self.report(token.line, f" at '{token.lexeme}'", message, code)

    def reset(self):
        """Forget previous diagnostics (used between REPL lines)."""
        self.diagnostics.clear()
        self.had_error = False

    @property
    def messages(self) -> List[str]:
        return [diagnostic.message for diagnostic in self.diagnostics]
