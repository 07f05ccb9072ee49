"""Immutable input views and parse results.

Implements the immutable cursor pattern over any element sequence.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - ParseInput is immutable (frozen dataclass)
    - A view is (source, pos); advancing returns a NEW view over the
      same source, so suffix views are O(1) and never copy
    - EOF is a state (is_eof), not a return value
    - Line:column computed on-demand (O(n) only for errors)

Element Types:
    - str: elements are one-character strings
    - bytes: elements are ints (0-255)
    - list / tuple: elements are arbitrary tokens

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parsecomb.errors import ParseError

__all__ = ["ParseInput", "ParseResult", "failure", "success"]


@dataclass(frozen=True, slots=True)
class ParseInput[E]:
    """Immutable view of ``source`` from ``pos`` to the end.

    Example:
        >>> view = ParseInput.of("hello")
        >>> view.current
        'h'
        >>> rest = view.advance()
        >>> rest.current
        'e'
        >>> view.current  # Original unchanged (immutability)
        'h'
        >>> ParseInput("hi", 2).is_eof
        True
    """

    source: Sequence[E]
    pos: int = 0

    @classmethod
    def of(cls, source: Sequence[E]) -> ParseInput[E]:
        """Create a view over the whole of ``source``."""
        return cls(source, 0)

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def remaining(self) -> int:
        """Number of elements left in the view."""
        return max(len(self.source) - self.pos, 0)

    @property
    def current(self) -> E:
        """Get current element.

        Raises:
            EOFError: If at end of input

        Note:
            Check ``is_eof`` first. Parsers never let this raise for a
            grammar mismatch; reaching it at EOF is a programming error.
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> E | None:
        """Peek at element with offset without advancing.

        Returns:
            Element at position + offset, or None if outside the source
        """
        target_pos = self.pos + offset
        if not 0 <= target_pos < len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> ParseInput[E]:
        """Return new view advanced by count positions.

        The new view shares ``source`` with this one. Advancing past the
        end clamps to EOF.

        Example:
            >>> view = ParseInput.of("hello")
            >>> view.advance(2).pos
            2
            >>> view.pos
            0
        """
        new_pos = min(self.pos + count, len(self.source))
        return ParseInput(self.source, new_pos)

    def slice_to(self, end_pos: int) -> Sequence[E]:
        """Extract source slice from current position to end_pos.

        Useful for extracting matched elements after parsing:

            >>> start = ParseInput.of("123abc")
            >>> end = start.advance(3)
            >>> start.slice_to(end.pos)
            '123'
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> Sequence[E]:
        """Get up to the next n elements without advancing."""
        return self.source[self.pos : self.pos + n]

    def rest(self) -> Sequence[E]:
        """Materialize the remaining elements (same type as the source)."""
        return self.source[self.pos :]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors). Non-text
            sources are treated as a single line of elements.

        Performance:
            O(n) where n = current position.
            Only call for error reporting, not during normal parsing!

        Example:
            >>> ParseInput("line1\\nline2", 8).compute_line_col()
            (2, 3)
        """
        pos = min(self.pos, len(self.source))
        if not isinstance(self.source, str):
            return (1, pos + 1)

        line = self.source.count("\n", 0, pos) + 1
        last_newline = self.source.rfind("\n", 0, pos)
        col = pos - last_newline if last_newline >= 0 else pos + 1
        return (line, col)

    def __len__(self) -> int:
        return self.remaining

    def __bool__(self) -> bool:
        """Whether there are any elements left to parse."""
        return self.pos < len(self.source)


@dataclass(frozen=True, slots=True)
class ParseResult[E, O]:
    """Result of one ``Parser.parse`` call: (rest, value, error).

    Type Parameters:
        E: Element type of the input
        O: Type of the produced value

    Design:
        - error is None on success; value is then meaningful
        - on failure, value must be ignored unless a combinator documents
          a partial value (TakeWhile returns what it collected)
        - rest is always a suffix view of the input the parser was given

    Unpacks as a triple:
        >>> rest, value, error = ParseResult(ParseInput("ab", 1), "a", None)
        >>> value, error
        ('a', None)
    """

    rest: ParseInput[E]
    value: O | None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        """True if the parser succeeded."""
        return self.error is None

    def __iter__(self) -> Iterator[object]:
        return iter((self.rest, self.value, self.error))


def success[E, O](rest: ParseInput[E], value: O) -> ParseResult[E, O]:
    """Build a successful result."""
    return ParseResult(rest, value, None)


def failure[E, O](
    rest: ParseInput[E], error: ParseError, value: O | None = None
) -> ParseResult[E, O]:
    """Build a failed result; ``value`` carries a documented partial output."""
    return ParseResult(rest, value, error)
