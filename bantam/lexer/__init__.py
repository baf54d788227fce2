"""
Bantam Lexer Package

Implements the lexical analyzer (tokenizer) for Bantam expressions.

Key Features:
- Lazy, one-token-at-a-time scanning with a repeatable EOF tail
- Unicode-aware names (any alphabetic script)
- Unrecognized characters skipped and reported as warnings
- Source location tracking for diagnostics
"""

from .tokens import Token, TokenType, SourceLocation, PUNCTUATORS
from .lexer import Lexer, tokenize_string
from .errors import Diagnostic, LexerWarning

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "PUNCTUATORS",
    "Diagnostic",
    "LexerWarning",
    "tokenize_string",
]
