"""
Lox Lexer - turns source text into a flat list of tokens.

Scanning is best effort: malformed input is reported and skipped, and the
token list always ends with a single EOF token.
"""

import logging
from typing import List, Optional

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIXED_TOKENS
)
from .errors import (
    LexerError, create_unexpected_character_error,
    create_unterminated_string_error
)
from ..reporting import ErrorReporter

logger = logging.getLogger(__name__)


class Lexer:
    """
    Lox lexical analyzer.

    Keeps a ``start`` and ``current`` offset into the source plus the line
    counter; every token's lexeme is ``source[start:current]`` at the moment
    it is emitted.
    """

    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            reporter: Diagnostic sink; a private one is created if omitted
        """
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens including the EOF token
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens = []
        self.errors.clear()

        while not self._is_at_end():
            self.start = self.current
            self.start_line = self.line
            try:
                self._scan_token()
            except LexerError as e:
                # The offending text has been consumed already, so scanning
                # just resumes at the next character.
                self.errors.append(e)
                self.reporter.error(e.line, e.diagnostic.message, e.diagnostic.code)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))

        logger.debug("scanned %d tokens over %d lines (%d errors)",
                     len(self.tokens), self.line, len(self.errors))
        return self.tokens

    def _scan_token(self):
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in EQUAL_SUFFIXED_TOKENS:
            plain, with_equal = EQUAL_SUFFIXED_TOKENS[char]
            self._add_token(with_equal if self._match("=") else plain)
        elif char == "/":
            if self._match("/"):
                # Line comment runs up to, not including, the newline
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char in (" ", "\r", "\t"):
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self._tokenize_string()
        elif self._is_digit(char):
            self._tokenize_number()
        elif self._is_alpha(char):
            self._tokenize_identifier_or_keyword()
        else:
            raise create_unexpected_character_error(char, self.line)

    def _tokenize_string(self):
        """Tokenize a string literal; the opening quote is consumed."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            # Reported at the line reached, not the line the string opened on
            raise create_unterminated_string_error(self.line)

        self._advance()  # Closing quote

        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _tokenize_number(self):
        while self._is_digit(self._peek()):
            self._advance()

        # A '.' belongs to the number only when a digit follows it
        if self._peek() == "." and self._is_digit(self._peek_next()):
            self._advance()
            while self._is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _tokenize_identifier_or_keyword(self):
        while self._is_alpha_numeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        token_type = KEYWORDS.get(text)
        if token_type is None:
            self._add_token(TokenType.IDENTIFIER, text)
        else:
            # Keywords, nil included, carry no literal
            self._add_token(token_type)

    def _add_token(self, token_type: TokenType, literal=None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.start_line))

    def _match(self, expected: str) -> bool:
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    @staticmethod
    def _is_digit(char: str) -> bool:
        return "0" <= char <= "9"

    @staticmethod
    def _is_alpha(char: str) -> bool:
        return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"

    @classmethod
    def _is_alpha_numeric(cls, char: str) -> bool:
        return cls._is_alpha(char) or cls._is_digit(char)

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0


def tokenize_string(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        reporter: Diagnostic sink for lexical errors

    Returns:
        List of tokens, always ending with EOF
    """
    return Lexer(source, reporter).tokenize()


def tokenize_file(filepath: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, reporter)
