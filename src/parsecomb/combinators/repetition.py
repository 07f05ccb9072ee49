"""Repetition combinators.

TakeWhile applies a sub-parser at successive positions and collects the
values, stopping at the first failure of the sub-parser or at the end of
input. The failing attempt is not escalated and consumes nothing.

Empty input:
    TakeWhile0 succeeds with an empty list (zero repetitions satisfy a
    minimum of zero). TakeWhile1 fails with NoLeftInputToParseError.

Termination:
    A sub-parser success that consumes nothing ends the loop and is not
    counted; otherwise TakeWhile0(Opt(...)) would never return.
"""

import logging
from dataclasses import dataclass

from parsecomb.errors import NoLeftInputToParseError, NotSatisfiedCountError
from parsecomb.input import ParseInput, ParseResult, failure, success
from parsecomb.parser import Parser

__all__ = ["TakeWhile", "TakeWhile0", "TakeWhile1"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TakeWhile[E, O]:
    """Apply ``sub`` repeatedly, requiring at least ``minimum`` successes.

    Below the minimum, fails with NotSatisfiedCountError. The partial
    result is NOT reverted: the value is the list collected so far and
    the rest is the position reached.

    Attributes:
        sub: Parser applied at each position
        minimum: Required number of successful applications
    """

    sub: Parser[E, O]
    minimum: int = 0

    def __post_init__(self) -> None:
        if self.minimum < 0:
            msg = f"TakeWhile minimum must be >= 0, got {self.minimum}"
            raise ValueError(msg)

    def parse(self, input: ParseInput[E]) -> ParseResult[E, list[O]]:  # noqa: A002
        values: list[O] = []
        if input.is_eof:
            if self.minimum > 0:
                return failure(input, NoLeftInputToParseError(input.pos), values)
            return success(input, values)

        cursor = input
        while not cursor.is_eof:
            result = self.sub.parse(cursor)
            if result.error is not None:
                break
            if result.rest.pos == cursor.pos:
                logger.debug(
                    "TakeWhile stopped at %d: %s succeeded without consuming",
                    cursor.pos,
                    type(self.sub).__name__,
                )
                break
            values.append(result.value)  # type: ignore[arg-type]
            cursor = result.rest

        if len(values) < self.minimum:
            error = NotSatisfiedCountError(cursor.pos, self.minimum, len(values))
            return failure(cursor, error, values)
        return success(cursor, values)


def TakeWhile0[E, O](sub: Parser[E, O]) -> TakeWhile[E, O]:  # noqa: N802
    """Zero or more applications of ``sub``."""
    return TakeWhile(sub, 0)


def TakeWhile1[E, O](sub: Parser[E, O]) -> TakeWhile[E, O]:  # noqa: N802
    """One or more applications of ``sub``.

    Fails with NotSatisfiedCountError if ``sub`` does not succeed at
    least once.
    """
    return TakeWhile(sub, 1)
