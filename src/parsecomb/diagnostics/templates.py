"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Every ParseError value builds its message through one of these methods,
    so tests can compare against the template instead of literal text.
    """

    @staticmethod
    def no_left_input() -> Diagnostic:
        """Parser was applied to an exhausted input.

        Returns:
            Diagnostic for NO_LEFT_INPUT
        """
        return Diagnostic(
            code=DiagnosticCode.NO_LEFT_INPUT,
            message="no left input to parse",
            hint="The input ended before the grammar was complete",
        )

    @staticmethod
    def unexpected_element(actual: object, expected: str | None) -> Diagnostic:
        """Element rejected by a predicate.

        Args:
            actual: The element that was found
            expected: Description of what the predicate accepts (optional)

        Returns:
            Diagnostic for UNEXPECTED_ELEMENT
        """
        if expected is None:
            msg = f"unexpected {actual!r}"
        else:
            msg = f"expected {expected} but got {actual!r}"
        return Diagnostic(code=DiagnosticCode.UNEXPECTED_ELEMENT, message=msg)

    @staticmethod
    def unexpected_rune(expected: object, actual: object) -> Diagnostic:
        """Element differs from the literal a Rune parser expects.

        Args:
            expected: The literal element
            actual: The element that was found

        Returns:
            Diagnostic for UNEXPECTED_RUNE
        """
        msg = f"expected {expected!r} but got {actual!r}"
        return Diagnostic(code=DiagnosticCode.UNEXPECTED_RUNE, message=msg)

    @staticmethod
    def unexpected_tag(expected: object, actual: object) -> Diagnostic:
        """Input prefix differs from a Tag literal.

        Args:
            expected: The literal sequence
            actual: The input prefix of the same length (may be shorter at EOF)

        Returns:
            Diagnostic for UNEXPECTED_TAG
        """
        msg = f"expected {expected!r} but got {actual!r}"
        return Diagnostic(code=DiagnosticCode.UNEXPECTED_TAG, message=msg)

    @staticmethod
    def expected_end_of_input(actual: object) -> Diagnostic:
        """Input continues where the grammar expects its end.

        Args:
            actual: The first element left over

        Returns:
            Diagnostic for EXPECTED_END_OF_INPUT
        """
        msg = f"expected end of input but got {actual!r}"
        return Diagnostic(code=DiagnosticCode.EXPECTED_END_OF_INPUT, message=msg)

    @staticmethod
    def not_satisfied_count(expected: int, actual: int) -> Diagnostic:
        """Repetition completed fewer applications than its minimum.

        Args:
            expected: Configured minimum number of applications
            actual: Number of successful applications

        Returns:
            Diagnostic for NOT_SATISFIED_COUNT
        """
        msg = f"not satisfied '{expected}' sub-parser succeeds (got {actual})"
        return Diagnostic(code=DiagnosticCode.NOT_SATISFIED_COUNT, message=msg)

    @staticmethod
    def map_function_failed(reason: str) -> Diagnostic:
        """Mapping function rejected a parsed value.

        Args:
            reason: Text of the exception raised by the mapping function

        Returns:
            Diagnostic for MAP_FUNCTION_FAILED
        """
        msg = f"mapping function failed: {reason}"
        return Diagnostic(
            code=DiagnosticCode.MAP_FUNCTION_FAILED,
            message=msg,
            hint="The input matched, but its value could not be converted",
        )

    @staticmethod
    def depth_limit_exceeded(max_depth: int) -> Diagnostic:
        """Recursive grammar nested deeper than allowed.

        Args:
            max_depth: The maximum allowed nesting depth

        Returns:
            Diagnostic for DEPTH_LIMIT_EXCEEDED
        """
        msg = f"maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.DEPTH_LIMIT_EXCEEDED,
            message=msg,
            hint="Reduce input nesting or raise max_depth on the Lazy parser",
        )
