"""The parser contract.

Every primitive and combinator implements one method::

    parse(input: ParseInput[E]) -> ParseResult[E, O]

Contract:
    - Success (error is None): ``rest`` is a suffix view of ``input``.
      Primitives always consume on success; only zero-or-more
      combinators may succeed without consuming.
    - Failure: ``value`` is unspecified unless documented and must be
      ignored. ``rest`` never extends past what was consumed before
      the failure was detected.
    - Grammar mismatch is a returned ParseError value, never an exception.
    - Parsers hold only construction-time configuration; they are
      stateless across calls and safe to share between threads.

Python 3.13+. Zero external dependencies.
"""

from typing import Protocol, runtime_checkable

from parsecomb.input import ParseInput, ParseResult

__all__ = ["Parser"]


@runtime_checkable
class Parser[E, O](Protocol):
    """Protocol satisfied by every parser over elements ``E`` producing ``O``."""

    def parse(self, input: ParseInput[E]) -> ParseResult[E, O]:  # noqa: A002
        """Consume a prefix of ``input``."""
        ...
