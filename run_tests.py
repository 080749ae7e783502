#!/usr/bin/env python3
"""
Main test runner for the loxfront lexer and parser tests.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_test():
    """Run one expression through the whole pipeline."""

    print("🚀 loxfront Test Suite")
    print("=" * 60)

    try:
        from loxfront.lexer import Lexer
        from loxfront.parser import AstPrinter, Parser
        from loxfront.reporting import ErrorReporter

        print("✅ All modules imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import loxfront modules: {e}")
        return False

    print("Testing simple parsing pipeline...")
    code = "(1 + 2) * -3 == 9 ? \"yes\" : nil"

    reporter = ErrorReporter()

    print("  🔧 Lexing...")
    tokens = Lexer(code, reporter).tokenize()
    print(f"     Generated {len(tokens)} tokens")

    print("  🔧 Parsing...")
    expr = Parser(tokens, reporter).parse()
    if expr is None or reporter.had_error:
        print(f"     ❌ Errors: {reporter.messages}")
        return False
    print(f"     {AstPrinter().print(expr)}")
    print()
    return True


def run_unit_tests():
    """Discover and run everything under tests/."""
    print("Running unit tests...")
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_smoke_test() and run_unit_tests()
    print("=" * 60)
    print("✅ All tests passed" if success else "❌ Some tests failed")
    sys.exit(0 if success else 1)
