"""Parse error values.

Errors are values, not exceptions: every parser returns one inside its
ParseResult and every combinator decides explicitly how to react to it.
Each kind carries only the context it needs to explain the failure.

Hierarchy:
    ParseError
    ├── NoLeftInputToParseError
    ├── UnexpectedElementError
    │   ├── UnexpectedRuneError
    │   └── UnexpectedTagError
    ├── ExpectedEndOfInputError
    ├── NotSatisfiedCountError
    ├── MapFunctionError
    └── DepthLimitExceededError

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from parsecomb.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "ExpectedEndOfInputError",
    "MapFunctionError",
    "NoLeftInputToParseError",
    "NotSatisfiedCountError",
    "ParseError",
    "UnexpectedElementError",
    "UnexpectedRuneError",
    "UnexpectedTagError",
]


@dataclass(frozen=True, slots=True)
class ParseError:
    """Base of all parse error values.

    Attributes:
        position: Offset into the source where the failure was detected
    """

    position: int

    @property
    def diagnostic(self) -> Diagnostic:
        """Structured diagnostic for this error."""
        raise NotImplementedError

    @property
    def code(self) -> DiagnosticCode:
        return self.diagnostic.code

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class NoLeftInputToParseError(ParseError):
    """A match was requested against an exhausted input."""

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.no_left_input()


@dataclass(frozen=True, slots=True)
class UnexpectedElementError(ParseError):
    """The first element was rejected by a predicate.

    Attributes:
        actual: The element that was found
        expected: What was expected; a description for predicate parsers,
            the literal itself for Rune and Tag
    """

    actual: object
    expected: object = None

    @property
    def diagnostic(self) -> Diagnostic:
        description = None if self.expected is None else str(self.expected)
        return ErrorTemplate.unexpected_element(self.actual, description)


@dataclass(frozen=True, slots=True)
class UnexpectedRuneError(UnexpectedElementError):
    """The first element differs from the expected literal element."""

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.unexpected_rune(self.expected, self.actual)


@dataclass(frozen=True, slots=True)
class UnexpectedTagError(UnexpectedElementError):
    """The input prefix differs from the expected literal sequence."""

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.unexpected_tag(self.expected, self.actual)


@dataclass(frozen=True, slots=True)
class ExpectedEndOfInputError(ParseError):
    """Input continues where the grammar requires its end.

    Attributes:
        actual: The first leftover element
    """

    actual: object

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.expected_end_of_input(self.actual)


@dataclass(frozen=True, slots=True)
class NotSatisfiedCountError(ParseError):
    """A repetition completed fewer applications than its minimum.

    Attributes:
        expected: Configured minimum number of applications
        actual: Number of successful applications
    """

    expected: int
    actual: int = 0

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.not_satisfied_count(self.expected, self.actual)


@dataclass(frozen=True, slots=True)
class MapFunctionError(ParseError):
    """The mapping function of a Map parser rejected the parsed value.

    Attributes:
        reason: Text of the exception raised by the mapping function
    """

    reason: str

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.map_function_failed(self.reason)


@dataclass(frozen=True, slots=True)
class DepthLimitExceededError(ParseError):
    """A recursive grammar nested deeper than its Lazy parser allows.

    Attributes:
        max_depth: The nesting limit that was hit
    """

    max_depth: int

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.depth_limit_exceeded(self.max_depth)
