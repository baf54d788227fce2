"""
Diagnostics for the Bantam lexer.

The lexer never fails: characters it does not recognize are dropped from the
token stream. Each dropped character is still reported as a warning so that
callers can surface it if they choose to.
"""

from typing import Optional, List
from dataclasses import dataclass, field

from .tokens import SourceLocation


@dataclass(frozen=True)
class Diagnostic:
    """
    A located message about the source, shared by lexer warnings and parse
    errors. ``str()`` renders the multi-line report printed by the CLI.
    """
    message: str
    location: SourceLocation
    severity: str = "error"  # "error" or "warning"
    code: Optional[str] = None  # L001, P001..P004
    help_text: Optional[str] = None
    suggestions: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [f"{self.severity.upper()}: {self.message}"]
        if self.code:
            lines[0] += f" [{self.code}]"
        lines.append(f"  --> {self.location}")

        if self.help_text:
            lines.append(f"  help: {self.help_text}")
        lines.extend(f"  suggestion: {suggestion}" for suggestion in self.suggestions)

        return "\n".join(lines) + "\n"


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop tokenizing.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=list(suggestions or [])
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


def create_unrecognized_character_warning(char: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for a character that was dropped from the token stream."""
    if char.isdigit():
        help_text = "Numeric literals are not part of the grammar; digits are ignored."
    elif char.isprintable():
        help_text = f"The character '{char}' is not a Bantam operator and was ignored."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) was ignored."

    return LexerWarning(
        message=f"Unrecognized character: {char!r}",
        location=location,
        code="L001",
        help_text=help_text,
    )
