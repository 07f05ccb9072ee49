"""Output-transforming combinator."""

from collections.abc import Callable
from dataclasses import dataclass

from parsecomb.errors import MapFunctionError
from parsecomb.input import ParseInput, ParseResult, failure, success
from parsecomb.parser import Parser

__all__ = ["Map"]


@dataclass(frozen=True, slots=True)
class Map[E, I, O]:
    """Transform the value of ``parser`` with ``function``.

    Parses exactly as ``parser`` does. A failure of ``parser`` is returned
    unchanged (same rest, same error).

    ``function`` may reject a value by raising ValueError or
    ArithmeticError (bad numeric text, overflow). That becomes a
    MapFunctionError positioned at the start of the match, and the rest
    is still the inner parser's advanced rest: the input was consumed,
    only the conversion failed. Any other exception propagates.

    Example:
        >>> from parsecomb.primitives import Digit1
        >>> Map(Digit1(), int).parse(ParseInput.of("42")).value
        42
    """

    parser: Parser[E, I]
    function: Callable[[I], O]

    def parse(self, input: ParseInput[E]) -> ParseResult[E, O]:  # noqa: A002
        result = self.parser.parse(input)
        if result.error is not None:
            return failure(result.rest, result.error)

        try:
            value = self.function(result.value)  # type: ignore[arg-type]
        except (ValueError, ArithmeticError) as e:
            return failure(result.rest, MapFunctionError(input.pos, str(e)))
        return success(result.rest, value)
