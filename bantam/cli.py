"""
Command-line front end for the Bantam parser.

Parses one expression and prints its canonical, fully parenthesized form.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import ParserConfiguration
from .lexer import Lexer
from .parser import ParseError, parse_string, print_expression
from .parser.parser import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

DEMO_EXPRESSION = "a = b + c * d ^ e - f / g"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bantam",
        description="Parse an expression and print its fully parenthesized AST",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    bantam                                # Parse the demo expression
    bantam "a = b ? c : d"                # Parse an expression argument
    bantam --file expr.txt                # Parse the contents of a file
    bantam --tokens "a(b, c)"             # Show the token stream instead
        """
    )

    parser.add_argument('expression', nargs='?',
                        help='Expression source (defaults to a demo expression)')
    parser.add_argument('-f', '--file',
                        help='Read the expression from a file')
    parser.add_argument('--tokens', action='store_true',
                        help='Print the token stream instead of the AST')
    parser.add_argument('--allow-trailing', action='store_true',
                        help='Ignore tokens left over after the expression')
    parser.add_argument('--max-depth', type=int, default=DEFAULT_MAX_DEPTH,
                        help='Deepest expression nesting accepted (default: %(default)s)')
    parser.add_argument('--log-level', default='WARNING',
                        help='Logging level (DEBUG, INFO, WARNING, ...)')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    args = build_arg_parser().parse_args(argv)

    try:
        config = ParserConfiguration(
            filename=args.file or "<string>",
            require_eof=not args.allow_trailing,
            max_depth=args.max_depth,
            log_level=args.log_level,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.file:
        try:
            with open(args.file, 'r', encoding='utf-8') as f:
                source = f.read()
        except OSError as e:
            print(f"error: cannot read {args.file}: {e.strerror}", file=sys.stderr)
            return 2
    elif args.expression is not None:
        source = args.expression
    else:
        source = DEMO_EXPRESSION

    logger.info("parsing %d characters from %s", len(source), config.filename)

    if args.tokens:
        lexer = Lexer(source, config.filename)
        for token in lexer.tokenize():
            print(f"{token.location}\t{token}")
        for warning in lexer.warnings:
            logger.warning("%s", warning.diagnostic.message)
        return 0

    try:
        expression = parse_string(source, config)
    except ParseError as e:
        print(str(e), file=sys.stderr, end="")
        return 1

    print(print_expression(expression))
    return 0


if __name__ == "__main__":
    sys.exit(main())
