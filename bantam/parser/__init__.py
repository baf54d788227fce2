"""
Bantam Parser Package

Implements a Pratt-based parser for Bantam expressions and a canonical
printer for the resulting trees.

Key Features:
- Top-down operator precedence (Pratt) parsing driven by parselet tables
- Prefix, postfix, infix, call, grouping and conditional expressions
- Immutable AST nodes with source spans
- Typed, fatal parse errors with diagnostics
"""

from .ast_nodes import (
    ASTVisitor, SourceSpan, Expression,
    Name, Assign, Call, Conditional, Prefix, Postfix, Infix
)
from .printer import ASTPrinter, print_expression
from .parselets import (
    PrefixParselet, InfixParselet, NameParselet, GroupParselet,
    PrefixOperatorParselet, BinaryOperatorParselet, PostfixOperatorParselet,
    AssignParselet, ConditionalParselet, CallParselet
)
from .grammar import Grammar, Precedence, BANTAM_GRAMMAR, create_bantam_grammar
from .parser import Parser, parse_string
from .errors import ParseError, ParseErrorKind, GrammarError

__all__ = [
    # Core parser
    "Parser", "parse_string",

    # Grammar wiring
    "Grammar", "Precedence", "BANTAM_GRAMMAR", "create_bantam_grammar",
    "PrefixParselet", "InfixParselet", "NameParselet", "GroupParselet",
    "PrefixOperatorParselet", "BinaryOperatorParselet", "PostfixOperatorParselet",
    "AssignParselet", "ConditionalParselet", "CallParselet",

    # AST nodes
    "ASTVisitor", "SourceSpan", "Expression",
    "Name", "Assign", "Call", "Conditional", "Prefix", "Postfix", "Infix",
    "ASTPrinter", "print_expression",

    # Error handling
    "ParseError", "ParseErrorKind", "GrammarError",
]
