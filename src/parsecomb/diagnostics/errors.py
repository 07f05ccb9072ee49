"""parsecomb exception hierarchy.

The combinators themselves never raise for grammar mismatches; failures
travel as ParseError values. These exceptions are raised only at the
top level by the runner, where a failure becomes visible to the caller.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parsecomb.errors import ParseError
    from parsecomb.input import ParseInput


class ParsecombError(Exception):
    """Base exception for all parsecomb errors."""


class ParseFailedError(ParsecombError):
    """The top-level parser returned an error value.

    Attributes:
        error: The ParseError value returned by the parser
        input: The rest returned alongside the error
    """

    def __init__(self, error: ParseError, input: ParseInput[object]) -> None:  # noqa: A002
        self.error = error
        self.input = input
        # Alt rewinds rest to its start; locate the mismatch itself.
        line, col = replace(input, pos=error.position).compute_line_col()
        super().__init__(f"{line}:{col}: {error.message}")


class IncompleteParseError(ParseFailedError):
    """The parser succeeded but did not consume the whole input.

    Attributes:
        value: The value produced for the consumed prefix
    """

    def __init__(
        self, error: ParseError, input: ParseInput[object], value: object  # noqa: A002
    ) -> None:
        super().__init__(error, input)
        self.value = value
