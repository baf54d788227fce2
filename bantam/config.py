"""
Configuration for parsing and for the command-line front end.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .parser.grammar import Grammar
from .parser.parser import DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class ParserConfiguration:
    """Configuration for a parse run"""
    filename: str = "<string>"  # Name used in diagnostics
    grammar: Optional[Grammar] = None  # None uses the shared Bantam grammar
    require_eof: bool = True  # Reject tokens left over after the expression
    max_depth: int = DEFAULT_MAX_DEPTH
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        object.__setattr__(self, "log_level", level)
