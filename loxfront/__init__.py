"""
loxfront Package

Lexer and expression parser for the Lox scripting language: source text goes
in, an expression tree and a list of diagnostics come out.

Architecture:
    loxfront/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Expression parsing, AST nodes, printer
    ├── reporting.py     # Diagnostic sink
    └── cli.py           # File / REPL driver

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer
from .parser import Parser, AstPrinter
from .reporting import ErrorReporter

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "AstPrinter",
    "ErrorReporter",

    # Version info
    "__version__",
    "__license__",
]
