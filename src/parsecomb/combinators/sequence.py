"""Sequence combinators.

All of them run their stages strictly left to right, each stage starting
where the previous one stopped. There is no retry across a stage
boundary: the first failing stage's rest and error are returned as is.
"""

from dataclasses import dataclass

from parsecomb.input import ParseInput, ParseResult, failure, success
from parsecomb.parser import Parser

__all__ = ["Delimited", "Pair", "Preceded", "Terminated"]


@dataclass(frozen=True, slots=True)
class Delimited[E, O]:
    """Parse ``open``, ``content``, ``close``; keep only content's value.

    Example:
        >>> from parsecomb.primitives import Digit1, Rune
        >>> rest, value, _ = Delimited(Rune("("), Digit1(), Rune(")")).parse(
        ...     ParseInput.of("(12)!")
        ... )
        >>> value, rest.rest()
        ('12', '!')
    """

    open: Parser[E, object]
    content: Parser[E, O]
    close: Parser[E, object]

    def parse(self, input: ParseInput[E]) -> ParseResult[E, O]:  # noqa: A002
        opened = self.open.parse(input)
        if opened.error is not None:
            return failure(opened.rest, opened.error)

        content = self.content.parse(opened.rest)
        if content.error is not None:
            return failure(content.rest, content.error)

        closed = self.close.parse(content.rest)
        if closed.error is not None:
            return failure(closed.rest, closed.error)

        return success(closed.rest, content.value)


@dataclass(frozen=True, slots=True)
class Preceded[E, O]:
    """Parse ``prefix`` then ``content``; keep content's value."""

    prefix: Parser[E, object]
    content: Parser[E, O]

    def parse(self, input: ParseInput[E]) -> ParseResult[E, O]:  # noqa: A002
        prefixed = self.prefix.parse(input)
        if prefixed.error is not None:
            return failure(prefixed.rest, prefixed.error)
        return self.content.parse(prefixed.rest)


@dataclass(frozen=True, slots=True)
class Terminated[E, O]:
    """Parse ``content`` then ``suffix``; keep content's value."""

    content: Parser[E, O]
    suffix: Parser[E, object]

    def parse(self, input: ParseInput[E]) -> ParseResult[E, O]:  # noqa: A002
        content = self.content.parse(input)
        if content.error is not None:
            return content

        terminated = self.suffix.parse(content.rest)
        if terminated.error is not None:
            return failure(terminated.rest, terminated.error)
        return success(terminated.rest, content.value)


@dataclass(frozen=True, slots=True)
class Pair[E, A, B]:
    """Parse ``first`` then ``second``; value is the pair of values."""

    first: Parser[E, A]
    second: Parser[E, B]

    def parse(self, input: ParseInput[E]) -> ParseResult[E, tuple[A, B]]:  # noqa: A002
        first = self.first.parse(input)
        if first.error is not None:
            return failure(first.rest, first.error)

        second = self.second.parse(first.rest)
        if second.error is not None:
            return failure(second.rest, second.error)
        return success(second.rest, (first.value, second.value))  # type: ignore[arg-type]
