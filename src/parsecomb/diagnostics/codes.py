"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic attached to every
parse failure.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3999: Match errors (primitive and repetition mismatches)
        4000-4999: Combinator errors (mapping and recursion failures)
    """

    # Match errors (3000-3999)
    NO_LEFT_INPUT = 3001
    UNEXPECTED_ELEMENT = 3002
    UNEXPECTED_RUNE = 3003
    UNEXPECTED_TAG = 3004
    EXPECTED_END_OF_INPUT = 3005
    NOT_SATISFIED_COUNT = 3006

    # Combinator errors (4000-4999)
    MAP_FUNCTION_FAILED = 4001
    DEPTH_LIMIT_EXCEEDED = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the grammar or the input
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic as ``error[CODE]: message`` with optional hint.

        Example:
            >>> d = Diagnostic(DiagnosticCode.NO_LEFT_INPUT, "no input left", "add input")
            >>> print(d.format_error())
            error[NO_LEFT_INPUT]: no input left
              = help: add input
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
