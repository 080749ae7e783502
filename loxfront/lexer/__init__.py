"""
Lox Lexer Package

Implements the lexical analyzer (scanner) for the Lox scripting language.

Key Features:
- Single pass, character at a time scanning
- Line comments
- Number, string and identifier literals with reserved word lookup
- Best-effort error recovery: bad input is reported and skipped
- Source line tracking for diagnostics
"""

from .tokens import Token, TokenType, KEYWORDS
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "LexerError",
    "tokenize_string",
    "tokenize_file",
]
