"""
Grammar wiring: which parselet handles which token, and how tightly.

A ``Grammar`` is plain configuration. ``BANTAM_GRAMMAR`` is built once at
import time and frozen, so every parser instance can share it safely.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from ..lexer.tokens import TokenType
from .errors import GrammarError
from .parselets import (
    PrefixParselet, InfixParselet, NameParselet, GroupParselet,
    PrefixOperatorParselet, BinaryOperatorParselet, PostfixOperatorParselet,
    AssignParselet, ConditionalParselet, CallParselet
)


class Precedence(IntEnum):
    """Operator precedence levels for Pratt parsing, low to high."""
    NONE = 0
    ASSIGNMENT = 1      # =
    CONDITIONAL = 2     # ?:
    SUM = 3             # +, -
    PRODUCT = 4         # *, /
    EXPONENT = 5        # ^
    PREFIX = 6          # -a, +a, ~a, !a
    POSTFIX = 7         # a!
    CALL = 8            # a(b)


class Grammar:
    """
    Registry of prefix and infix parselets keyed by token type.

    Registering a token type twice in the same table replaces the earlier
    parselet. A token type may have both a prefix and an infix parselet;
    parse position decides which one applies.
    """

    def __init__(self):
        self._prefix_parselets: Dict[TokenType, PrefixParselet] = {}
        self._infix_parselets: Dict[TokenType, InfixParselet] = {}
        self._frozen = False

    @property
    def prefix_parselets(self) -> Mapping[TokenType, PrefixParselet]:
        return MappingProxyType(self._prefix_parselets)

    @property
    def infix_parselets(self) -> Mapping[TokenType, InfixParselet]:
        return MappingProxyType(self._infix_parselets)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def register_prefix(self, token_type: TokenType, parselet: PrefixParselet) -> 'Grammar':
        self._check_mutable()
        self._prefix_parselets[token_type] = parselet
        return self

    def register_infix(self, token_type: TokenType, parselet: InfixParselet) -> 'Grammar':
        self._check_mutable()
        self._infix_parselets[token_type] = parselet
        return self

    # Convenience registration helpers

    def prefix_operator(self, token_types: Iterable[TokenType], precedence: int) -> 'Grammar':
        parselet = PrefixOperatorParselet(precedence)
        for token_type in token_types:
            self.register_prefix(token_type, parselet)
        return self

    def postfix_operator(self, token_types: Iterable[TokenType], precedence: int) -> 'Grammar':
        parselet = PostfixOperatorParselet(precedence)
        for token_type in token_types:
            self.register_infix(token_type, parselet)
        return self

    def infix_left(self, token_types: Iterable[TokenType], precedence: int) -> 'Grammar':
        parselet = BinaryOperatorParselet(precedence, is_right=False)
        for token_type in token_types:
            self.register_infix(token_type, parselet)
        return self

    def infix_right(self, token_types: Iterable[TokenType], precedence: int) -> 'Grammar':
        parselet = BinaryOperatorParselet(precedence, is_right=True)
        for token_type in token_types:
            self.register_infix(token_type, parselet)
        return self

    def freeze(self) -> 'Grammar':
        """Make this grammar read-only and return it."""
        self._frozen = True
        return self

    def copy(self) -> 'Grammar':
        """Return an unfrozen copy that can be extended independently."""
        grammar = Grammar()
        grammar._prefix_parselets.update(self._prefix_parselets)
        grammar._infix_parselets.update(self._infix_parselets)
        return grammar

    def _check_mutable(self):
        if self._frozen:
            raise GrammarError("Cannot register parselets on a frozen grammar; use copy() first")


def create_bantam_grammar() -> Grammar:
    """Build the reference Bantam grammar (unfrozen)."""
    grammar = Grammar()

    grammar.register_prefix(TokenType.NAME, NameParselet())
    grammar.register_infix(TokenType.ASSIGN, AssignParselet(Precedence.ASSIGNMENT))
    grammar.register_infix(TokenType.QUESTION, ConditionalParselet(Precedence.CONDITIONAL))
    grammar.register_prefix(TokenType.LEFT_PAREN, GroupParselet())
    grammar.register_infix(TokenType.LEFT_PAREN, CallParselet(Precedence.CALL))

    grammar.prefix_operator(
        [TokenType.PLUS, TokenType.MINUS, TokenType.TILDE, TokenType.BANG],
        Precedence.PREFIX
    )
    grammar.postfix_operator([TokenType.BANG], Precedence.POSTFIX)

    grammar.infix_left([TokenType.PLUS, TokenType.MINUS], Precedence.SUM)
    grammar.infix_left([TokenType.ASTERISK, TokenType.SLASH], Precedence.PRODUCT)
    grammar.infix_right([TokenType.CARET], Precedence.EXPONENT)

    return grammar


BANTAM_GRAMMAR = create_bantam_grammar().freeze()
