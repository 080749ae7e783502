"""
Abstract Syntax Tree node definitions for Lox expressions.

The tree is a closed set of five node kinds. Nodes are frozen dataclasses,
each owns its children outright and holds no reference to its parent.
Consumers dispatch on ``node_type`` rather than on a visitor method.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, List

from ..lexer.tokens import Token


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    LITERAL = "Literal"
    GROUPING = "Grouping"
    UNARY = "Unary"
    BINARY = "Binary"
    CONDITIONAL = "Conditional"


class Expr:
    """Base class for all expression nodes."""

    node_type: ClassVar[ASTNodeType]

    def children(self) -> List['Expr']:
        """Get the direct sub-expressions, left to right."""
        raise NotImplementedError


@dataclass(frozen=True, eq=False)
class Literal(Expr):
    """A constant: bool, float, str, or None for nil."""
    value: Any

    node_type: ClassVar[ASTNodeType] = ASTNodeType.LITERAL

    def children(self) -> List[Expr]:
        return []

    # True == 1.0 in Python, so the value's type takes part in equality
    def __eq__(self, other) -> bool:
        if not isinstance(other, Literal):
            return NotImplemented
        return type(self.value) is type(other.value) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self.value), self.value))


@dataclass(frozen=True)
class Grouping(Expr):
    """Parenthesized expression."""
    expression: Expr

    node_type: ClassVar[ASTNodeType] = ASTNodeType.GROUPING

    def children(self) -> List[Expr]:
        return [self.expression]


@dataclass(frozen=True)
class Unary(Expr):
    """Prefix operation: logical not (!) or numeric negation (-)."""
    operator: Token
    right: Expr

    node_type: ClassVar[ASTNodeType] = ASTNodeType.UNARY

    def children(self) -> List[Expr]:
        return [self.right]


@dataclass(frozen=True)
class Binary(Expr):
    """Arithmetic, comparison, equality or comma operation."""
    left: Expr
    operator: Token
    right: Expr

    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY

    def children(self) -> List[Expr]:
        return [self.left, self.right]


@dataclass(frozen=True)
class Conditional(Expr):
    """Ternary ``condition ? then_branch : else_branch``."""
    condition: Expr
    then_branch: Expr
    else_branch: Expr

    node_type: ClassVar[ASTNodeType] = ASTNodeType.CONDITIONAL

    def children(self) -> List[Expr]:
        return [self.condition, self.then_branch, self.else_branch]
