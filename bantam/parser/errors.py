"""
Error handling for the Bantam parser.

Every parse error is fatal: the parser raises as soon as it detects one and
never returns a partial tree. ``ParseErrorKind`` classifies the failure so
callers can react without inspecting message text.
"""

from enum import Enum
from typing import Optional, List, Union

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic
from .ast_nodes import Expression


class ParseErrorKind(Enum):
    """The ways a parse can fail. Values are the diagnostic codes."""
    UNPARSABLE_TOKEN = "P001"
    UNEXPECTED_TOKEN = "P002"
    INVALID_ASSIGNMENT_TARGET = "P003"
    NESTING_TOO_DEEP = "P004"


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=kind.value,
            help_text=help_text,
            suggestions=list(suggestions or [])
        )
        self.token = token

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class GrammarError(Exception):
    """Raised when a frozen grammar is modified."""


def _describe(token_type: TokenType) -> str:
    punctuator = token_type.punctuator
    if punctuator is None:
        return token_type.name
    return f"{token_type.name} '{punctuator}'"


_MISSING_TOKEN_SUGGESTIONS = {
    TokenType.RIGHT_PAREN: ["Add a closing parenthesis ')'"],
    TokenType.COLON: ["Add ':' followed by the else branch of the conditional"],
    TokenType.EOF: ["Remove the trailing tokens", "Join the expressions with an operator"],
}


def create_unparsable_token_error(token: Token) -> ParseError:
    """Create an error for a token that cannot begin an expression."""
    if token.type == TokenType.EOF:
        help_text = "The input ended where an expression was expected."
        suggestions = ["Complete the expression"]
    else:
        help_text = f"{_describe(token.type)} cannot start an expression."
        suggestions = ["Check for a missing operand"]

    return ParseError(
        ParseErrorKind.UNPARSABLE_TOKEN,
        message=f"Could not parse token {_describe(token.type)}",
        location=token.location,
        token=token,
        help_text=help_text,
        suggestions=suggestions
    )


def create_unexpected_token_error(expected: Union[TokenType, str], found: Token) -> ParseError:
    """Create an error for a token of the wrong type."""
    expected_str = expected.name if isinstance(expected, TokenType) else expected
    found_str = found.type.name

    suggestions = _MISSING_TOKEN_SUGGESTIONS.get(expected, []) if isinstance(expected, TokenType) else []

    return ParseError(
        ParseErrorKind.UNEXPECTED_TOKEN,
        message=f"Expected token type {expected_str}, but found {found_str}",
        location=found.location,
        token=found,
        help_text=f"The parser expected to see {expected_str} at this position, but found {found_str} instead.",
        suggestions=suggestions
    )


def create_invalid_assignment_target_error(target: Expression, token: Token) -> ParseError:
    """Create an error for an assignment whose left-hand side is not a name."""
    return ParseError(
        ParseErrorKind.INVALID_ASSIGNMENT_TARGET,
        message="The left-hand side of an assignment must be a name",
        location=token.location,
        token=token,
        help_text=f"Cannot assign to '{target}'.",
        suggestions=["Assign to a plain name, e.g. 'a = ...'"]
    )


def create_nesting_too_deep_error(token: Token, max_depth: int) -> ParseError:
    """Create an error for input nested deeper than the parser allows."""
    return ParseError(
        ParseErrorKind.NESTING_TOO_DEEP,
        message=f"Expression nesting exceeds the maximum depth of {max_depth}",
        location=token.location,
        token=token,
        help_text="Every sub-expression the parser descends into counts as one level.",
        suggestions=["Split the expression into smaller parts", "Raise max_depth in ParserConfiguration"]
    )
