"""
Render expression trees in a parenthesized prefix form, e.g.

    (* (- 123.0) (group 45.67))

Used by the command line driver and handy in tests to compare shapes.
"""

from typing import Callable, Dict

from .ast_nodes import (
    ASTNodeType, Binary, Conditional, Expr, Grouping, Literal, Unary
)


class AstPrinter:
    """Prints any expression node; dispatch is on ``node_type``."""

    def __init__(self):
        self._handlers: Dict[ASTNodeType, Callable[[Expr], str]] = {
            ASTNodeType.LITERAL: self._print_literal,
            ASTNodeType.GROUPING: self._print_grouping,
            ASTNodeType.UNARY: self._print_unary,
            ASTNodeType.BINARY: self._print_binary,
            ASTNodeType.CONDITIONAL: self._print_conditional,
        }

    def print(self, expr: Expr) -> str:
        handler = self._handlers.get(getattr(expr, "node_type", None))
        if handler is None:
            raise TypeError(f"Cannot print {type(expr).__name__}")
        return handler(expr)

    def _print_literal(self, expr: Literal) -> str:
        return format_value(expr.value)

    def _print_grouping(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.expression)

    def _print_unary(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.right)

    def _print_binary(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def _print_conditional(self, expr: Conditional) -> str:
        return self._parenthesize("?:", expr.condition, expr.then_branch, expr.else_branch)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name] + [self.print(expr) for expr in exprs]
        return "(" + " ".join(parts) + ")"


def format_value(value) -> str:
    """Format a literal value the way Lox source spells it."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
