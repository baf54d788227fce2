"""
Bantam Pratt Parser Implementation

Implements a top-down operator precedence (Pratt) parser. The parser owns a
lookahead buffer over a lazy lexer and dispatches each token to the prefix or
infix parselet registered for its type.
"""

import logging
from typing import TYPE_CHECKING, List, Optional, Dict, Union

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType
from .ast_nodes import Expression
from .errors import (
    create_unparsable_token_error, create_unexpected_token_error, create_nesting_too_deep_error
)
from .grammar import Grammar, Precedence, BANTAM_GRAMMAR
from .parselets import PrefixParselet, InfixParselet

if TYPE_CHECKING:
    from ..config import ParserConfiguration

logger = logging.getLogger(__name__)

# Each level costs up to three Python frames, so this stays well inside the
# default recursion limit of 1000
DEFAULT_MAX_DEPTH = 200


class Parser:
    """
    Bantam Pratt parser.

    Parselet tables are copied from the grammar when the parser is created,
    so ``register_prefix``/``register_infix`` only affect this instance.

    Parsing is recursive. Input nested more than ``max_depth`` levels deep is
    rejected with a NESTING_TOO_DEEP ParseError before Python's own recursion
    limit is reached.
    """

    def __init__(self, source: Union[str, Lexer], grammar: Optional[Grammar] = None,
                 max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize parser over a source string or an existing lexer.

        Args:
            source: Expression source text, or a Lexer to read tokens from
            grammar: Parselet registry to use (defaults to BANTAM_GRAMMAR)
            max_depth: Deepest nesting of sub-expressions accepted
        """
        self.lexer = source if isinstance(source, Lexer) else Lexer(source)
        self.tokens: List[Token] = []
        self.max_depth = max_depth
        self.depth = 0

        grammar = grammar if grammar is not None else BANTAM_GRAMMAR
        self.prefix_parsers: Dict[TokenType, PrefixParselet] = dict(grammar.prefix_parselets)
        self.infix_parsers: Dict[TokenType, InfixParselet] = dict(grammar.infix_parselets)

    def register_prefix(self, token_type: TokenType, parselet: PrefixParselet):
        self.prefix_parsers[token_type] = parselet

    def register_infix(self, token_type: TokenType, parselet: InfixParselet):
        self.infix_parsers[token_type] = parselet

    def parse(self) -> Expression:
        """
        Parse the whole input as a single expression.

        Returns:
            Root of the expression tree

        Raises:
            ParseError: If the input is not exactly one expression
        """
        expression = self.parse_expression()
        self.expect(TokenType.EOF)
        return expression

    def parse_expression(self) -> Expression:
        """Parse an expression using Pratt parsing."""
        return self.parse_precedence(Precedence.NONE)

    def parse_precedence(self, precedence: int) -> Expression:
        """
        Parse an expression whose operators bind tighter than ``precedence``.

        An infix operator is only absorbed while its precedence is strictly
        greater than the floor; an operator of equal precedence is left for
        the caller, which is what makes left-associative chains group left.
        """
        if self.depth >= self.max_depth:
            logger.debug("nesting depth %d exceeded at %s", self.max_depth, self.peek().location)
            raise create_nesting_too_deep_error(self.peek(), self.max_depth)

        self.depth += 1
        try:
            token = self.consume()
            prefix_parser = self.prefix_parsers.get(token.type)
            if prefix_parser is None:
                logger.debug("no prefix parselet for %s at %s", token.type.name, token.location)
                raise create_unparsable_token_error(token)

            left = prefix_parser.parse(self, token)

            while precedence < self._get_precedence():
                token = self.consume()
                infix_parser = self.infix_parsers[token.type]
                left = infix_parser.parse(self, left, token)

            return left
        finally:
            self.depth -= 1

    def _get_precedence(self) -> int:
        """Precedence of the upcoming token's infix parselet, 0 if it has none."""
        infix_parser = self.infix_parsers.get(self.peek().type)
        if infix_parser is None:
            return Precedence.NONE
        return infix_parser.precedence

    # Token stream primitives used by parselets

    def consume(self) -> Token:
        """Consume and return the next token."""
        self.peek()
        return self.tokens.pop(0)

    def match(self, token_type: TokenType) -> bool:
        """Consume the next token if it has ``token_type``."""
        if self.peek().type != token_type:
            return False
        self.consume()
        return True

    def expect(self, token_type: TokenType) -> Token:
        """Consume token of expected type or raise error."""
        current_token = self.peek()
        if current_token.type != token_type:
            raise create_unexpected_token_error(token_type, current_token)
        return self.consume()

    def peek(self, distance: int = 0) -> Token:
        """Return the token ``distance`` positions ahead without consuming."""
        while len(self.tokens) <= distance:
            self.tokens.append(self.lexer.next_token())
        return self.tokens[distance]


def parse_string(source: str, config: Optional['ParserConfiguration'] = None) -> Expression:
    """
    Convenience function to parse a source string.

    Args:
        source: Expression source text
        config: Parser configuration (defaults to ParserConfiguration())

    Returns:
        Expression AST

    Raises:
        ParseError: If parsing fails
    """
    from ..config import ParserConfiguration

    config = config or ParserConfiguration()
    parser = Parser(Lexer(source, config.filename), config.grammar, config.max_depth)
    if config.require_eof:
        return parser.parse()
    return parser.parse_expression()
