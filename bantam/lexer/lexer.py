"""
Bantam Lexer - turns expression source text into tokens

Tokens are produced lazily, one per ``next_token()`` call. Known punctuators
become single-character tokens and runs of alphabetic characters become NAME
tokens. Whitespace and anything else is dropped.
"""

import logging
from typing import Iterator, List

import regex

from .tokens import Token, TokenType, SourceLocation, PUNCTUATORS, WHITESPACE
from .errors import LexerWarning, create_unrecognized_character_warning

logger = logging.getLogger(__name__)

# Unicode Alphabetic property: letters, letter numbers and the combining
# vowel signs of scripts such as Thai and Devanagari
NAME_PATTERN = regex.compile(r"\p{Alphabetic}+")


class Lexer:
    """
    Bantam lexical analyzer.

    Converts source text into a stream of tokens. Once the end of input is
    reached every further ``next_token()`` call returns an EOF token.

    Iterating over a lexer yields tokens up to (but not including) EOF. The
    lexer is not restartable; create a new one to scan the source again.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with source text.

        Args:
            source: Expression source string
            filename: Name of source for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.warnings: List[LexerWarning] = []

    def next_token(self) -> Token:
        """Scan and return the next token."""
        while True:
            self._skip_whitespace()

            if self._is_at_end():
                return Token(TokenType.EOF, "", self._location())

            current_char = self.source[self.pos]

            token_type = PUNCTUATORS.get(current_char)
            if token_type is not None:
                location = self._location()
                self._advance()
                return Token(token_type, current_char, location)

            match = NAME_PATTERN.match(self.source, self.pos)
            if match:
                return self._scan_name(match.group())

            self._skip_unrecognized(current_char)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the source.

        Returns:
            List of tokens ending with a single EOF token
        """
        tokens = list(self)
        tokens.append(self.next_token())
        return tokens

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token.type == TokenType.EOF:
            raise StopIteration
        return token

    def _scan_name(self, lexeme: str) -> Token:
        """Consume a maximal run of alphabetic characters."""
        location = self._location()
        # Names never contain a newline
        self.pos += len(lexeme)
        self.column += len(lexeme)
        return Token(TokenType.NAME, lexeme, location)

    def _skip_unrecognized(self, char: str):
        """Drop a character that cannot start any token."""
        location = self._location()
        logger.debug("skipping unrecognized character %r at %s", char, location)
        self.warnings.append(create_unrecognized_character_warning(char, location))
        self._advance()

    def _skip_whitespace(self):
        while not self._is_at_end() and self.source[self.pos] in WHITESPACE:
            self._advance()

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def has_warnings(self) -> bool:
        """Check if lexer skipped any characters."""
        return len(self.warnings) > 0


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source string
        filename: Filename for error reporting

    Returns:
        List of tokens including the trailing EOF token
    """
    return Lexer(source, filename).tokenize()
