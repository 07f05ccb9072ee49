"""Deferred parsers for recursive grammars.

A grammar that refers to itself cannot be built eagerly: constructing
the inner reference would recurse forever. Lazy holds a factory and only
calls it when parsing actually descends.

    def value() -> Parser[str, object]:
        return Alt(Digit1(), Delimited(Rune("["), Lazy(value), Rune("]")))
"""

from collections.abc import Callable
from dataclasses import dataclass

from parsecomb.constants import MAX_DEPTH
from parsecomb.depth_guard import DepthGuard, depth_clamp
from parsecomb.errors import DepthLimitExceededError
from parsecomb.input import ParseInput, ParseResult, failure
from parsecomb.parser import Parser

__all__ = ["Lazy"]

_guard = DepthGuard()


@dataclass(frozen=True, slots=True)
class Lazy[E, O]:
    """Build the parser from ``factory`` at parse time.

    Nesting of active Lazy parsers is counted per thread. Reaching
    ``max_depth`` fails with DepthLimitExceededError and consumes
    nothing, instead of overflowing the interpreter stack.

    The default limit assumes about 8 stack frames per nesting level.
    Grammars that chain more combinators between two Lazy levels
    should pass a smaller ``max_depth``; otherwise RecursionError can
    arrive before the limit does.

    Attributes:
        factory: Zero-argument callable returning the parser
        max_depth: Nesting limit, clamped against the recursion limit
    """

    factory: Callable[[], Parser[E, O]]
    max_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        object.__setattr__(self, "max_depth", depth_clamp(self.max_depth))

    def parse(self, input: ParseInput[E]) -> ParseResult[E, O]:  # noqa: A002
        if _guard.depth >= self.max_depth:
            return failure(input, DepthLimitExceededError(input.pos, self.max_depth))
        with _guard:
            return self.factory().parse(input)
