"""
Abstract Syntax Tree node definitions for Bantam.

Nodes are immutable: every node owns its children exclusively and is never
changed after the parser builds it. Each node can carry the source span it
was parsed from; spans take no part in equality, so structurally identical
trees compare equal regardless of where they came from.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from ..lexer.tokens import SourceLocation, Token, TokenType


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    @classmethod
    def of_token(cls, token: Token) -> 'SourceSpan':
        return cls(token.location, token.location)


def join_spans(first: Optional[SourceSpan], last: Optional[SourceSpan]) -> Optional[SourceSpan]:
    """Span covering ``first`` through ``last``; None if either is unknown."""
    if first is None or last is None:
        return None
    return SourceSpan(first.start, last.end)


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'Expression') -> Any:
        """Visit a generic AST node."""
        pass


class Expression(ABC):
    """Base class for expressions."""

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['Expression']:
        """Get all child nodes in source order."""
        pass

    def __str__(self) -> str:
        from .printer import print_expression
        return print_expression(self)


@dataclass(frozen=True)
class Name(Expression):
    """Identifier reference."""
    name: str
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def children(self) -> List[Expression]:
        return []


@dataclass(frozen=True)
class Assign(Expression):
    """Assignment of an expression to a plain name."""
    name: str
    right: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def children(self) -> List[Expression]:
        return [self.right]


@dataclass(frozen=True)
class Call(Expression):
    """Function call expression; argument order is preserved."""
    function: Expression
    args: Tuple[Expression, ...] = ()
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)


    def __post_init__(self):
        # Accept any iterable of arguments but store an immutable tuple
        object.__setattr__(self, "args", tuple(self.args))

    def children(self) -> List[Expression]:
        return [self.function, *self.args]


@dataclass(frozen=True)
class Conditional(Expression):
    """Ternary conditional ``condition ? then_branch : else_branch``."""
    condition: Expression
    then_branch: Expression
    else_branch: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def children(self) -> List[Expression]:
        return [self.condition, self.then_branch, self.else_branch]


@dataclass(frozen=True)
class Prefix(Expression):
    """Unary operator applied before its operand."""
    operator: TokenType
    right: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def children(self) -> List[Expression]:
        return [self.right]


@dataclass(frozen=True)
class Postfix(Expression):
    """Unary operator applied after its operand."""
    left: Expression
    operator: TokenType
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def children(self) -> List[Expression]:
        return [self.left]


@dataclass(frozen=True)
class Infix(Expression):
    """Binary operation expression."""
    left: Expression
    operator: TokenType
    right: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def children(self) -> List[Expression]:
        return [self.left, self.right]
