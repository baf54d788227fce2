"""
Bantam Expression Parser

A small Pratt parser that turns arithmetic/logical expressions into an
abstract syntax tree and prints the tree back in fully parenthesized form.

Architecture:
    bantam/
    ├── lexer/           # Token model and tokenization
    ├── parser/          # AST, parselets, grammar wiring and the Pratt engine
    ├── config.py        # Parser configuration
    └── cli.py           # Command-line front end

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType
from .parser import Parser, ParseError, ParseErrorKind, parse_string, print_expression
from .config import ParserConfiguration

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "Parser",
    "ParserConfiguration",

    # Entry points
    "parse_string",
    "print_expression",

    # Errors
    "ParseError",
    "ParseErrorKind",

    # Version info
    "__version__",
    "__license__",
]
