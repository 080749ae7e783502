"""
Lox expression parser.

Recursive descent with one method per precedence level, lowest to highest:

    comma       -> conditional ( "," conditional )*
    conditional -> equality ( "?" expression ":" conditional )?
    equality    -> comparison ( ( "!=" | "==" ) comparison )*
    comparison  -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        -> factor ( ( "-" | "+" ) factor )*
    factor      -> unary ( ( "/" | "*" ) unary )*
    unary       -> ( "!" | "-" ) unary | primary
    primary     -> NUMBER | STRING | "true" | "false" | "nil"
                 | "(" expression ")"

The four left-associative binary levels are driven by BINARY_LEVELS.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, List, Optional

from ..lexer.tokens import Token, TokenType
from ..reporting import ErrorReporter
from .ast_nodes import Binary, Conditional, Expr, Grouping, Literal, Unary
from .errors import (
    ParseError, SyntaxErrorRecovery, create_expect_expression_error,
    create_missing_token_error, create_too_deep_error
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BinaryLevel:
    """One row of the binary precedence table."""
    name: str
    operators: FrozenSet[TokenType]
    # Leading tokens that mean the left operand is missing
    error_operators: FrozenSet[TokenType]
    # Name of the level that parses this level's operands
    operand: str


BINARY_LEVELS: Dict[str, BinaryLevel] = {
    level.name: level for level in (
        BinaryLevel(
            "equality",
            frozenset({TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL}),
            frozenset({TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL}),
            "comparison",
        ),
        BinaryLevel(
            "comparison",
            frozenset({TokenType.GREATER, TokenType.GREATER_EQUAL,
                       TokenType.LESS, TokenType.LESS_EQUAL}),
            frozenset({TokenType.GREATER, TokenType.GREATER_EQUAL,
                       TokenType.LESS, TokenType.LESS_EQUAL}),
            "term",
        ),
        BinaryLevel(
            "term",
            frozenset({TokenType.MINUS, TokenType.PLUS}),
            # '-' is also a prefix operator, so only '+' can be missing its left side
            frozenset({TokenType.PLUS}),
            "factor",
        ),
        BinaryLevel(
            "factor",
            frozenset({TokenType.SLASH, TokenType.STAR}),
            frozenset({TokenType.SLASH, TokenType.STAR}),
            "unary",
        ),
    )
}


class Parser:
    """
    Lox expression parser.

    Holds the token list and a cursor into it; one instance per parse.
    """

    def __init__(self, tokens: List[Token], reporter: Optional[ErrorReporter] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer, ending with EOF
            reporter: Diagnostic sink; a private one is created if omitted
        """
        self.tokens = tokens
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.current = 0
        self.errors: List[ParseError] = []

        # partial objects add no Python frame of their own
        self.levels: Dict[str, Callable[[], Expr]] = {
            name: functools.partial(self._parse_binary_level, level)
            for name, level in BINARY_LEVELS.items()
        }
        self.levels["unary"] = self._parse_unary

    def parse(self) -> Optional[Expr]:
        """
        Parse a single expression.

        Returns:
            The expression tree, or None if a syntax error stopped the parse.
            The error has already been reported by then.
        """
        try:
            return self._parse_expression()
        except ParseError as e:
            logger.debug("parse aborted at line %d: %s", e.diagnostic.line, e.diagnostic.message)
            return None
        except RecursionError:
            error = self._error(create_too_deep_error(self._peek()))
            logger.debug("parse aborted at line %d: %s", error.diagnostic.line, error.diagnostic.message)
            return None

    def synchronize(self):
        """
        Skip tokens up to a likely statement boundary.

        Stops just after a ';' or just before a keyword that starts a
        statement, so parsing of the next statement can resume there.
        """
        self._advance()

        while not self._is_at_end():
            if self._previous().type in SyntaxErrorRecovery.STATEMENT_TERMINATORS:
                return
            if self._peek().type in SyntaxErrorRecovery.STATEMENT_KEYWORDS:
                return
            self._advance()

    # Grammar levels

    def _parse_expression(self) -> Expr:
        return self._parse_comma()

    def _parse_comma(self) -> Expr:
        """Lowest precedence: comma-separated sequence."""
        expr = self._parse_conditional()

        while self._match(TokenType.COMMA):
            operator = self._previous()
            right = self._parse_conditional()
            expr = Binary(expr, operator, right)

        return expr

    def _parse_conditional(self) -> Expr:
        expr = self.levels["equality"]()

        if self._match(TokenType.QUESTION):
            then_branch = self._parse_expression()
            self._consume(TokenType.COLON,
                          "Expect ':' after then branch of conditional expression.")
            else_branch = self._parse_conditional()
            expr = Conditional(expr, then_branch, else_branch)

        return expr

    def _parse_binary_level(self, level: BinaryLevel) -> Expr:
        """Parse one left-associative binary level from the table."""
        operand = self.levels[level.operand]

        # Error production: binary operator with no left-hand operand
        if self._match(*level.error_operators):
            self._missing_operand(self._previous())
            return operand()

        expr = operand()

        while self._match(*level.operators):
            operator = self._previous()
            right = operand()
            expr = Binary(expr, operator, right)

        return expr

    def _parse_unary(self) -> Expr:
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous()
            right = self._parse_unary()
            return Unary(operator, right)

        return self._parse_primary()

    def _parse_primary(self) -> Expr:
        if self._match(TokenType.FALSE):
            return Literal(False)
        if self._match(TokenType.TRUE):
            return Literal(True)
        if self._match(TokenType.NIL):
            return Literal(None)

        if self._match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self._previous().literal)

        if self._match(TokenType.LEFT_PAREN):
            expr = self._parse_expression()
            self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        raise self._error(create_expect_expression_error(self._peek()))

    # Token helpers

    def _match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it has one of the given types."""
        for token_type in token_types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check current token type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        return self.tokens[self.current]

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]

    def _consume(self, token_type: TokenType, message: str) -> Token:
        """Consume a token of the expected type or fail the parse."""
        if self._check(token_type):
            return self._advance()

        raise self._error(create_missing_token_error(token_type, message, self._peek()))

    def _error(self, error: ParseError) -> ParseError:
        """Report an unrecoverable error; the caller raises what is returned."""
        self.errors.append(error)
        self.reporter.token_error(error.token, error.diagnostic.message, error.diagnostic.code)
        return error

    def _missing_operand(self, operator: Token):
        error = ParseError("Missing left-hand operand.", operator, code="P009")
        self.errors.append(error)
        self.reporter.token_error(operator, error.diagnostic.message, error.diagnostic.code)


def parse_string(source: str, reporter: Optional[ErrorReporter] = None) -> Optional[Expr]:
    """
    Convenience function to lex and parse a source string.

    Lexical and syntax errors both go to ``reporter``; a lexical error does
    not by itself stop the parse.

    Returns:
        Expression tree, or None if parsing failed
    """
    from ..lexer import tokenize_string

    if reporter is None:
        reporter = ErrorReporter()
    tokens = tokenize_string(source, reporter)
    return Parser(tokens, reporter).parse()
