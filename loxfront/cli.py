"""
Command line driver: parse a script file, or run a REPL that parses one
line at a time, and print the resulting tree.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from .lexer import Lexer
from .parser import AstPrinter, Parser
from .reporting import ErrorReporter

logger = logging.getLogger(__name__)

# sysexits.h
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


@dataclass
class DriverConfig:
    """Settings for one driver run, filled from the command line."""
    script: Optional[str] = None
    show_tokens: bool = False
    log_level: str = "WARNING"


class Driver:
    """Runs source text through the lexer and parser and prints the result."""

    def __init__(self, config: DriverConfig, out: Optional[TextIO] = None,
                 err: Optional[TextIO] = None):
        self.config = config
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.reporter = ErrorReporter(self.err)
        self.printer = AstPrinter()

    def run(self, source: str):
        """Lex, parse and print one chunk of source."""
        tokens = Lexer(source, self.reporter).tokenize()

        if self.config.show_tokens:
            for token in tokens:
                print(token, file=self.out)

        expr = Parser(tokens, self.reporter).parse()
        if expr is None or self.reporter.had_error:
            return

        print(self.printer.print(expr), file=self.out)

    def run_file(self, path: str) -> int:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                source = f.read()
        except OSError as e:
            print(f"Could not read '{path}': {e.strerror}", file=self.err)
            return EX_NOINPUT

        logger.info("parsing %s", path)
        self.run(source)
        return EX_DATAERR if self.reporter.had_error else EX_OK

    def run_prompt(self, stdin: Optional[TextIO] = None) -> int:
        stdin = stdin if stdin is not None else sys.stdin
        while True:
            print("> ", end="", file=self.out, flush=True)
            line = stdin.readline()
            if not line:
                print(file=self.out)
                return EX_OK
            self.run(line)
            # A bad line should not poison the rest of the session
            self.reporter.reset()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loxfront",
        description="Parse a Lox expression and print its syntax tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    loxfront                      # Interactive prompt
    loxfront expr.lox             # Parse a file
    loxfront --tokens expr.lox    # Also dump the token list
        """
    )

    parser.add_argument('script', nargs='*',
                        help='Script to parse (omit for an interactive prompt)')
    parser.add_argument('--tokens', action='store_true',
                        help='Print the tokens before the tree')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging verbosity (default: WARNING)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the loxfront command."""
    args = build_arg_parser().parse_args(argv)

    if len(args.script) > 1:
        print("Usage: loxfront [script]", file=sys.stderr)
        return EX_USAGE

    config = DriverConfig(
        script=args.script[0] if args.script else None,
        show_tokens=args.tokens,
        log_level=args.log_level,
    )
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    driver = Driver(config)
    if config.script is not None:
        return driver.run_file(config.script)

    try:
        return driver.run_prompt()
    except KeyboardInterrupt:
        print()
        return EX_OK


if __name__ == "__main__":
    sys.exit(main())
