"""Primitive parsers.

Primitives inspect and consume raw input elements directly; every other
parser is built from them with combinators.

    Satisfy(predicate)  one element accepted by a predicate
    Rune(expected)      one element equal to a literal
    Tag(literal)        a fixed run of elements
    Digit1()            one or more digits, rendered as a string
    Eof()               end of input

On a mismatch a primitive consumes nothing: the returned rest is the
input it was given.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from parsecomb.constants import ASCII_DIGITS
from parsecomb.errors import (
    ExpectedEndOfInputError,
    NoLeftInputToParseError,
    ParseError,
    UnexpectedElementError,
    UnexpectedRuneError,
    UnexpectedTagError,
)
from parsecomb.input import ParseInput, ParseResult, failure, success

__all__ = [
    "Digit1",
    "Eof",
    "Rune",
    "Satisfy",
    "Tag",
    "is_ascii_digit",
]

# Byte values of ASCII '0' and '9', for bytes input where elements are ints.
_BYTE_ZERO: int = 0x30
_BYTE_NINE: int = 0x39


def is_ascii_digit(element: object) -> bool:
    """Classify an element as an ASCII digit.

    Accepts one-character strings "0"-"9" and, for bytes input, the
    integers 0x30-0x39. Unicode digits such as "²" are rejected.

    Examples:
        >>> is_ascii_digit("7"), is_ascii_digit("²"), is_ascii_digit(0x35)
        (True, False, True)
    """
    if isinstance(element, str):
        return len(element) == 1 and element in ASCII_DIGITS
    if isinstance(element, int):
        return _BYTE_ZERO <= element <= _BYTE_NINE
    return False


def _as_text(run: Sequence[object]) -> str:
    """Render a matched run of elements as its natural string form."""
    if isinstance(run, str):
        return run
    if isinstance(run, bytes | bytearray):
        return bytes(run).decode("latin-1")
    return "".join(str(element) for element in run)


def _match_one[E](
    input: ParseInput[E],  # noqa: A002
    predicate: Callable[[E], bool],
    reject: Callable[[int, E], ParseError],
) -> ParseResult[E, E]:
    """Consume the first element if ``predicate`` accepts it."""
    if input.is_eof:
        return failure(input, NoLeftInputToParseError(input.pos))
    element = input.current
    if predicate(element):
        return success(input.advance(), element)
    return failure(input, reject(input.pos, element))


@dataclass(frozen=True, slots=True)
class Satisfy[E]:
    """Consume one element accepted by ``predicate``.

    Attributes:
        predicate: Element classifier
        expected: Optional description of accepted elements, for messages

    Example:
        >>> rest, value, error = Satisfy(str.isalpha).parse(ParseInput.of("ab1"))
        >>> value, rest.pos, error
        ('a', 1, None)
    """

    predicate: Callable[[E], bool]
    expected: str | None = None

    def parse(self, input: ParseInput[E]) -> ParseResult[E, E]:  # noqa: A002
        return _match_one(
            input,
            self.predicate,
            lambda pos, actual: UnexpectedElementError(pos, actual, self.expected),
        )


@dataclass(frozen=True, slots=True)
class Rune[E]:
    """Consume one element equal to ``expected``.

    Equality-specialized Satisfy whose mismatch error carries both the
    expected and the actual element.
    """

    expected: E

    def parse(self, input: ParseInput[E]) -> ParseResult[E, E]:  # noqa: A002
        return _match_one(
            input,
            lambda element: element == self.expected,
            lambda pos, actual: UnexpectedRuneError(pos, actual, self.expected),
        )


@dataclass(frozen=True, slots=True)
class Tag[E]:
    """Consume a fixed run of elements equal to ``literal``.

    Value is the literal itself. Raises ValueError for an empty literal,
    which would succeed without consuming.
    """

    literal: Sequence[E]

    def __post_init__(self) -> None:
        if len(self.literal) == 0:
            msg = "Tag literal must not be empty"
            raise ValueError(msg)

    def parse(self, input: ParseInput[E]) -> ParseResult[E, Sequence[E]]:  # noqa: A002
        if input.is_eof:
            return failure(input, NoLeftInputToParseError(input.pos))

        size = len(self.literal)
        prefix = input.slice_ahead(size)
        if len(prefix) == size and all(
            a == b for a, b in zip(prefix, self.literal, strict=True)
        ):
            return success(input.advance(size), self.literal)
        return failure(input, UnexpectedTagError(input.pos, prefix, self.literal))


@dataclass(frozen=True, slots=True)
class Digit1[E]:
    """Consume the maximal non-empty run of digit elements.

    Logically ``TakeWhile1(Satisfy(is_digit))`` collapsed into one string.

    Attributes:
        is_digit: Digit classifier (default: ASCII digits only)

    Example:
        >>> rest, value, _ = Digit1().parse(ParseInput.of("42,"))
        >>> value, rest.rest()
        ('42', ',')
    """

    is_digit: Callable[[E], bool] = is_ascii_digit

    def parse(self, input: ParseInput[E]) -> ParseResult[E, str]:  # noqa: A002
        if input.is_eof:
            return failure(input, NoLeftInputToParseError(input.pos))

        cursor = input
        while not cursor.is_eof and self.is_digit(cursor.current):
            cursor = cursor.advance()

        if cursor.pos == input.pos:
            return failure(
                input, UnexpectedElementError(input.pos, input.current, "digit")
            )
        return success(cursor, _as_text(input.slice_to(cursor.pos)))


@dataclass(frozen=True, slots=True)
class Eof:
    """Succeed with ``None`` only at the end of input."""

    def parse[E](self, input: ParseInput[E]) -> ParseResult[E, None]:  # noqa: A002
        if input.is_eof:
            return success(input, None)
        return failure(input, ExpectedEndOfInputError(input.pos, input.current))
