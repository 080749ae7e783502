"""
Tests for the command line driver.
"""

import contextlib
import io
import tempfile
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxfront.cli import (
    Driver, DriverConfig, EX_DATAERR, EX_NOINPUT, EX_OK, EX_USAGE, main
)


class TestDriver(unittest.TestCase):
    """Test cases for the file and prompt drivers."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, source: str) -> str:
        path = os.path.join(self.tmpdir.name, "expr.lox")
        with open(path, "w", encoding="utf-8") as f:
            f.write(source)
        return path

    def _main(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            status = main(argv)
        return status, out.getvalue(), err.getvalue()

    def test_file_prints_tree(self):
        status, out, err = self._main([self._write("1 + 2 * 3\n")])

        self.assertEqual(status, EX_OK)
        self.assertEqual(out.strip(), "(+ 1.0 (* 2.0 3.0))")
        self.assertEqual(err, "")

    def test_file_with_syntax_error(self):
        status, out, err = self._main([self._write("(1 + 2")])

        self.assertEqual(status, EX_DATAERR)
        self.assertEqual(out, "")
        self.assertIn("[line 1] Error at end: Expect ')' after expression.", err)

    def test_missing_operand_is_a_data_error(self):
        status, out, err = self._main([self._write("== 1")])

        self.assertEqual(status, EX_DATAERR)
        self.assertIn("Missing left-hand operand.", err)

    def test_lexical_error_is_a_data_error(self):
        status, out, err = self._main([self._write("1 # 2")])

        self.assertEqual(status, EX_DATAERR)
        self.assertIn("Unexpected character.", err)

    def test_token_dump(self):
        status, out, err = self._main(["--tokens", self._write("1 + 2")])

        self.assertEqual(status, EX_OK)
        lines = out.splitlines()
        self.assertEqual(lines[0], "NUMBER 1 1.0")
        self.assertEqual(lines[1], "PLUS +")
        self.assertEqual(lines[-1], "(+ 1.0 2.0)")

    def test_missing_file(self):
        status, out, err = self._main([os.path.join(self.tmpdir.name, "nope.lox")])

        self.assertEqual(status, EX_NOINPUT)
        self.assertIn("Could not read", err)

    def test_missing_file_goes_to_driver_err(self):
        out, err = io.StringIO(), io.StringIO()
        driver = Driver(DriverConfig(), out=out, err=err)

        status = driver.run_file(os.path.join(self.tmpdir.name, "nope.lox"))

        self.assertEqual(status, EX_NOINPUT)
        self.assertIn("Could not read", err.getvalue())
        self.assertEqual(out.getvalue(), "")

    def test_too_many_arguments(self):
        status, out, err = self._main(["a.lox", "b.lox"])

        self.assertEqual(status, EX_USAGE)
        self.assertIn("Usage", err)

    def test_prompt_parses_each_line(self):
        out, err = io.StringIO(), io.StringIO()
        driver = Driver(DriverConfig(), out=out, err=err)

        status = driver.run_prompt(io.StringIO("1 + 2\n)\n!true\n"))

        self.assertEqual(status, EX_OK)
        self.assertIn("(+ 1.0 2.0)", out.getvalue())
        self.assertIn("(! true)", out.getvalue())
        self.assertIn("Expect expression.", err.getvalue())
        # Errors are cleared between lines
        self.assertFalse(driver.reporter.had_error)


if __name__ == '__main__':
    unittest.main()
