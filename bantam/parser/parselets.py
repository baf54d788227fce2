"""
Parselets: the units of parsing behavior the Pratt parser dispatches to.

A prefix parselet handles a token that begins an expression. An infix
parselet handles a token that follows an already-parsed left operand and
reports the precedence it binds with. The parser looks parselets up by token
type; the parselets call back into the parser to parse sub-expressions.

Associativity is encoded in the precedence floor a parselet passes back into
``Parser.parse_precedence``: the operator's own precedence for left
associativity, one less for right associativity.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

from ..lexer.tokens import Token, TokenType
from .ast_nodes import (
    Expression, Name, Assign, Call, Conditional, Prefix, Postfix, Infix,
    SourceSpan, join_spans
)
from .errors import create_invalid_assignment_target_error

if TYPE_CHECKING:
    from .parser import Parser


class PrefixParselet(ABC):
    """Parses an expression that starts with the consumed ``token``."""

    @abstractmethod
    def parse(self, parser: 'Parser', token: Token) -> Expression:
        pass


class InfixParselet(ABC):
    """Parses the rest of an expression whose left operand is ``left``."""

    @abstractmethod
    def parse(self, parser: 'Parser', left: Expression, token: Token) -> Expression:
        pass

    @property
    @abstractmethod
    def precedence(self) -> int:
        pass


# ============================================================================
# Prefix parselets
# ============================================================================

class NameParselet(PrefixParselet):
    """A bare identifier."""

    def parse(self, parser: 'Parser', token: Token) -> Expression:
        return Name(token.lexeme, SourceSpan.of_token(token))


class GroupParselet(PrefixParselet):
    """Parenthesized expression. The parentheses do not appear in the tree."""

    def parse(self, parser: 'Parser', token: Token) -> Expression:
        expression = parser.parse_expression()
        parser.expect(TokenType.RIGHT_PAREN)
        return expression


class PrefixOperatorParselet(PrefixParselet):
    """Unary prefix operator such as ``-a`` or ``!a``."""

    def __init__(self, precedence: int):
        self.precedence = precedence

    def parse(self, parser: 'Parser', token: Token) -> Expression:
        # Not right-associative: the operand floor is the operator's own level
        right = parser.parse_precedence(self.precedence)
        return Prefix(token.type, right, join_spans(SourceSpan.of_token(token), right.span))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(precedence={self.precedence})"


# ============================================================================
# Infix parselets
# ============================================================================

class BinaryOperatorParselet(InfixParselet):
    """Binary infix operator, left- or right-associative."""

    def __init__(self, precedence: int, is_right: bool = False):
        self._precedence = precedence
        self.is_right = is_right

    @property
    def precedence(self) -> int:
        return self._precedence

    def parse(self, parser: 'Parser', left: Expression, token: Token) -> Expression:
        floor = self._precedence - 1 if self.is_right else self._precedence
        right = parser.parse_precedence(floor)
        return Infix(left, token.type, right, join_spans(left.span, right.span))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(precedence={self._precedence}, is_right={self.is_right})"


class PostfixOperatorParselet(InfixParselet):
    """Unary postfix operator such as ``a!``."""

    def __init__(self, precedence: int):
        self._precedence = precedence

    @property
    def precedence(self) -> int:
        return self._precedence

    def parse(self, parser: 'Parser', left: Expression, token: Token) -> Expression:
        return Postfix(left, token.type, join_spans(left.span, SourceSpan.of_token(token)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(precedence={self._precedence})"


class AssignParselet(InfixParselet):
    """``name = value``; right-associative, so ``a = b = c`` is ``a = (b = c)``."""

    def __init__(self, precedence: int):
        self._precedence = precedence

    @property
    def precedence(self) -> int:
        return self._precedence

    def parse(self, parser: 'Parser', left: Expression, token: Token) -> Expression:
        right = parser.parse_precedence(self._precedence - 1)

        if not isinstance(left, Name):
            raise create_invalid_assignment_target_error(left, token)

        return Assign(left.name, right, join_spans(left.span, right.span))


class ConditionalParselet(InfixParselet):
    """``cond ? then : else``; the else branch is right-associative."""

    def __init__(self, precedence: int):
        self._precedence = precedence

    @property
    def precedence(self) -> int:
        return self._precedence

    def parse(self, parser: 'Parser', left: Expression, token: Token) -> Expression:
        then_branch = parser.parse_expression()
        parser.expect(TokenType.COLON)
        else_branch = parser.parse_precedence(self._precedence - 1)

        return Conditional(left, then_branch, else_branch, join_spans(left.span, else_branch.span))


class CallParselet(InfixParselet):
    """Function call ``f(a, b)``. Zero arguments are allowed."""

    def __init__(self, precedence: int):
        self._precedence = precedence

    @property
    def precedence(self) -> int:
        return self._precedence

    def parse(self, parser: 'Parser', left: Expression, token: Token) -> Expression:
        args: List[Expression] = []

        if parser.peek().type != TokenType.RIGHT_PAREN:
            args.append(parser.parse_expression())
            while parser.match(TokenType.COMMA):
                args.append(parser.parse_expression())
        end_token = parser.expect(TokenType.RIGHT_PAREN)

        return Call(left, args, join_spans(left.span, SourceSpan.of_token(end_token)))
