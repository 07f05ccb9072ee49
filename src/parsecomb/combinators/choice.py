"""Choice combinators: ordered choice and optional match."""

from dataclasses import dataclass

from parsecomb.input import ParseInput, ParseResult, failure, success
from parsecomb.parser import Parser

__all__ = ["Alt", "Opt"]


@dataclass(frozen=True, slots=True, init=False)
class Alt[E, O]:
    """Ordered choice: the first alternative that succeeds wins.

    Every alternative is tried against the ORIGINAL input, never against
    what a failed alternative left behind. Parsers are stateless, so a
    failed attempt leaves nothing to undo.

    When all alternatives fail, the result keeps the original input as
    rest and returns the last alternative's error unchanged, the most
    specific mismatch the caller asked for.

    Example:
        >>> from parsecomb.primitives import Rune
        >>> Alt(Rune("a"), Rune("b")).parse(ParseInput.of("b")).value
        'b'
    """

    alternatives: tuple[Parser[E, O], ...]

    def __init__(self, *alternatives: Parser[E, O]) -> None:
        if not alternatives:
            msg = "Alt requires at least one alternative"
            raise ValueError(msg)
        object.__setattr__(self, "alternatives", alternatives)

    def parse(self, input: ParseInput[E]) -> ParseResult[E, O]:  # noqa: A002
        *leading, last = self.alternatives
        for alternative in leading:
            result = alternative.parse(input)
            if result.error is None:
                return result

        result = last.parse(input)
        if result.error is None:
            return result
        return failure(input, result.error)


@dataclass(frozen=True, slots=True)
class Opt[E, O]:
    """Match ``parser`` or succeed with ``default`` without consuming.

    Never fails.
    """

    parser: Parser[E, O]
    default: O | None = None

    def parse(self, input: ParseInput[E]) -> ParseResult[E, O]:  # noqa: A002
        result = self.parser.parse(input)
        if result.error is None:
            return result
        return success(input, self.default)
