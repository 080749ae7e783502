"""
Lox Parser Package

Implements a recursive descent parser for Lox expressions.
Produces immutable expression trees and reports syntax errors through the
shared diagnostic sink.

Key Features:
- One method per precedence level, table-driven binary levels
- Comma and conditional (?:) operators
- Error productions for binary operators missing their left operand
- Statement-boundary synchronization for error recovery
- Parenthesized prefix printer for inspecting trees
"""

from .ast_nodes import *
from .parser import Parser, BinaryLevel, BINARY_LEVELS, parse_string
from .printer import AstPrinter
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser", "BinaryLevel", "BINARY_LEVELS", "parse_string",

    # AST nodes
    "ASTNodeType", "Expr",
    "Literal", "Grouping", "Unary", "Binary", "Conditional",

    # Printing
    "AstPrinter",

    # Error handling
    "ParseError",
]
