"""
Token definitions for the Bantam expression lexer.

The token set is deliberately small: one token type per single-character
punctuator, plus NAME for alphabetic runs and EOF for the end of input.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, Optional


class TokenType(Enum):
    """
    Enumeration of all token types in Bantam.

    Every type except NAME and EOF corresponds to exactly one punctuator
    character (see ``punctuator``).
    """

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    COMMA = auto()                  # ,

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    ASTERISK = auto()               # *
    SLASH = auto()                  # /
    CARET = auto()                  # ^
    TILDE = auto()                  # ~
    BANG = auto()                   # !
    QUESTION = auto()               # ?
    COLON = auto()                  # :

    # ========================================================================
    # Identifiers and Special Tokens
    # ========================================================================
    NAME = auto()                   # a, bb, 我们
    EOF = auto()                    # End of input

    @property
    def punctuator(self) -> Optional[str]:
        """The source character for this token type, or None for NAME/EOF."""
        return _PUNCTUATOR_CHARS.get(self)


_PUNCTUATOR_CHARS: Dict[TokenType, str] = {
    TokenType.LEFT_PAREN: "(",
    TokenType.RIGHT_PAREN: ")",
    TokenType.COMMA: ",",
    TokenType.ASSIGN: "=",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.ASTERISK: "*",
    TokenType.SLASH: "/",
    TokenType.CARET: "^",
    TokenType.TILDE: "~",
    TokenType.BANG: "!",
    TokenType.QUESTION: "?",
    TokenType.COLON: ":",
}


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    ``offset`` is the character index into the source, so a token's lexeme is
    always ``source[offset:offset + len(lexeme)]``.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Contains the token type, lexeme (raw text) and source location.
    EOF tokens have an empty lexeme.
    """
    type: TokenType
    lexeme: str
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.location!r})"

    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.EOF


# Lookup table for punctuator recognition, derived from the token types
PUNCTUATORS: Dict[str, TokenType] = {
    token_type.punctuator: token_type
    for token_type in TokenType
    if token_type.punctuator is not None
}

# Characters skipped between tokens
WHITESPACE = frozenset(" \t\r\n")
