"""Diagnostics.

Every stage of the pipeline reports problems as :class:`Diagnostic` records
instead of raising. The lexer produces the lexical kinds; the parser and the
translator produce the syntactic and semantic kinds. Both streams share the
same shape so a caller can merge and display them together.


File: diagnostics.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(str, Enum):
    """
    Enumeration of diagnostic kinds.
    """

    # Lexical
    UNTERMINATED_COMMENT = "UnterminatedComment"
    UNCLOSED_STRING = "UnclosedString"
    EMPTY_STRING = "EmptyString"
    INVALID_TIME = "InvalidTime"
    INVALID_CHARACTER = "InvalidCharacter"

    # Syntactic
    UNEXPECTED_TOKEN = "UnexpectedToken"
    INVALID_EXPRESSION = "InvalidExpression"
    INVALID_STATEMENT = "InvalidStatement"
    UNKNOWN_COMMAND = "UnknownCommand"

    # Semantic
    UNKNOWN_IDENTIFIER = "UnknownIdentifier"
    TYPE_ERROR = "TypeError"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer display.
        """
        return self.value


@dataclass(frozen=True)
class Diagnostic:
    """A positioned problem report (1-based line and column)."""
    line: int
    column: int
    kind: DiagnosticKind
    message: str

    def __str__(self) -> str:
        return format_diagnostic(self)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """
    Render a diagnostic for display to the script author.

    Parameters:
        diagnostic (Diagnostic): The diagnostic to render.

    Returns:
        str: e.g. ``Error at line 2, col 5: UnexpectedToken - Expected ';', got frame``
    """
    return (
        f"Error at line {diagnostic.line}, col {diagnostic.column}: "
        f"{diagnostic.kind.value} - {diagnostic.message}"
    )


__all__ = ["Diagnostic", "DiagnosticKind", "format_diagnostic"]
