"""
Command line driver for the Lox scanner.

Scans a script file, or each line typed at an interactive prompt, and
prints the resulting tokens. Exit codes follow sysexits.h.
"""

import argparse
import json
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from . import __version__
from .config import ScannerConfig
from .lexer import LexerError, ScanResult, Token, scan_tokens
from .utils.logger import get_logger

logger = get_logger(__name__)

EX_OK = 0
EX_USAGE = 64       # Bad command line
EX_DATAERR = 65     # Input had lexical errors
EX_NOINPUT = 66     # Script could not be read

PROMPT = ">> "


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with EX_USAGE instead of 2."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EX_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="jlox",
        description="Scan Lox source and print its tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    jlox                      # Interactive prompt
    jlox script.lox           # Scan a file
    jlox script.lox --json    # One JSON object per token
        """
    )
    parser.add_argument('script', nargs='?',
                        help='Lox source file; omit for an interactive prompt')
    parser.add_argument('--json', action='store_true',
                        help='Print tokens as JSON lines')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def print_tokens(tokens: Iterable[Token], as_json: bool = False,
                 out: Optional[TextIO] = None):
    out = out or sys.stdout
    for token in tokens:
        if as_json:
            print(json.dumps(token.to_dict()), file=out)
        else:
            print(token, file=out)


def report_errors(errors: Iterable[LexerError], err: Optional[TextIO] = None):
    err = err or sys.stderr
    for error in errors:
        print(error.diagnostic.short(), file=err)


def run(source: str, config: ScannerConfig, as_json: bool = False) -> ScanResult:
    """Scan source, print its tokens and report its errors."""
    result = scan_tokens(source, config)
    print_tokens(result.tokens, as_json)
    report_errors(result.errors)
    return result


def run_file(path: str, as_json: bool = False) -> int:
    """Scan a whole file. Returns the process exit code."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()
    except UnicodeDecodeError as e:
        print(f"jlox: {path}: not valid UTF-8 ({e.reason})", file=sys.stderr)
        return EX_DATAERR
    except OSError as e:
        print(f"jlox: cannot read {path}: {e.strerror or e}", file=sys.stderr)
        return EX_NOINPUT

    result = run(source, ScannerConfig(filename=path), as_json)
    if result.had_error:
        logger.debug("%s: %d lexical errors", path, len(result.errors))
        return EX_DATAERR
    return EX_OK


def run_prompt(as_json: bool = False, stdin: Optional[TextIO] = None) -> int:
    """Scan one line at a time until end of input.

    Errors are reported per line and never end the session.
    """
    stdin = stdin or sys.stdin
    config = ScannerConfig(filename="<stdin>")

    while True:
        print(PROMPT, end="", flush=True)
        try:
            line = stdin.readline()
        except KeyboardInterrupt:
            print()
            break
        if not line:
            break
        run(line, config, as_json)

    return EX_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the jlox console script"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    if args.script is None:
        return run_prompt(as_json=args.json)
    return run_file(args.script, as_json=args.json)


if __name__ == "__main__":
    sys.exit(main())
