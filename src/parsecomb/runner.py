"""Top-level entry points.

The runner is the one place where a parse failure turns into an
exception: it wraps the source in a ParseInput, invokes the parser once
and raises ParseFailedError if the parser returned an error value.

Security:
    Validates source size before parsing to bound memory and time spent
    on untrusted input. Configure via ``max_input_size``.
"""

import logging
from collections.abc import Sequence

from parsecomb.constants import MAX_INPUT_SIZE
from parsecomb.diagnostics import IncompleteParseError, ParseFailedError
from parsecomb.errors import ExpectedEndOfInputError
from parsecomb.input import ParseInput, ParseResult
from parsecomb.parser import Parser

__all__ = ["parse", "parse_prefix"]

logger = logging.getLogger(__name__)


def _check_size(source: Sequence[object], max_input_size: int) -> None:
    if max_input_size > 0 and len(source) > max_input_size:
        msg = (
            f"Input size ({len(source):,} elements) exceeds maximum "
            f"({max_input_size:,} elements). "
            "Pass max_input_size to increase the limit."
        )
        raise ValueError(msg)


def parse_prefix[E, O](
    parser: Parser[E, O],
    source: Sequence[E],
    *,
    max_input_size: int = MAX_INPUT_SIZE,
) -> ParseResult[E, O]:
    """Run ``parser`` over ``source`` and return the raw result.

    Never raises for a grammar mismatch; inspect ``result.error``.

    Raises:
        ValueError: If source exceeds max_input_size
    """
    _check_size(source, max_input_size)
    return parser.parse(ParseInput.of(source))


def parse[E, O](
    parser: Parser[E, O],
    source: Sequence[E],
    *,
    require_eof: bool = True,
    max_input_size: int = MAX_INPUT_SIZE,
) -> O:
    """Run ``parser`` over ``source`` and return the produced value.

    Args:
        parser: Top-level parser
        source: Whole input (str, bytes, or a sequence of tokens)
        require_eof: Fail if the parser leaves input unconsumed
        max_input_size: Maximum number of elements (0 disables the limit)

    Returns:
        The parser's value

    Raises:
        ValueError: If source exceeds max_input_size
        ParseFailedError: If the parser returned an error
        IncompleteParseError: If require_eof and input remains

    Example:
        >>> from parsecomb.combinators import Map
        >>> from parsecomb.primitives import Digit1
        >>> parse(Map(Digit1(), int), "123")
        123
    """
    logger.debug("Parsing %d elements with %s", len(source), type(parser).__name__)
    result = parse_prefix(parser, source, max_input_size=max_input_size)

    if result.error is not None:
        logger.debug("Parse failed at %d: %s", result.error.position, result.error)
        raise ParseFailedError(result.error, result.rest)

    rest = result.rest
    if require_eof and not rest.is_eof:
        logger.debug("Parse left %d of %d elements", rest.remaining, len(source))
        error = ExpectedEndOfInputError(rest.pos, rest.current)
        raise IncompleteParseError(error, rest, result.value)

    logger.debug("Consumed %d of %d elements", rest.pos, len(source))
    return result.value  # type: ignore[return-value]
