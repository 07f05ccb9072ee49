"""Tests for the Map combinator.

Map changes the value, never the consumption: inner failures pass
through unchanged, and a failing mapping function keeps the input the
inner parser already consumed.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given

from parsecomb.combinators import Map
from parsecomb.diagnostics import DiagnosticCode
from parsecomb.errors import MapFunctionError, UnexpectedElementError
from parsecomb.input import ParseInput
from parsecomb.primitives import Digit1, Rune
from tests.strategies import digit_runs, non_digit_text


class TestMapSuccess:
    """Successful mapping."""

    def test_digit1_to_int(self) -> None:
        """Map(Digit1, int) yields the integer value."""
        rest, value, error = Map(Digit1(), int).parse(ParseInput.of("42,"))

        assert error is None
        assert value == 42
        assert rest.rest() == ","

    @given(digits=digit_runs, tail=non_digit_text)
    def test_preserves_rest(self, digits: str, tail: str) -> None:
        """PROPERTY: Map(p, f) leaves the same rest as p on success."""
        event(f"len={len(digits)}")
        view = ParseInput.of(digits + tail)

        inner = Digit1().parse(view)
        mapped = Map(Digit1(), int).parse(view)

        assert mapped.rest == inner.rest
        assert mapped.value == int(digits)


class TestMapFailure:
    """Inner failures and mapping failures."""

    @given(source=non_digit_text)
    def test_inner_failure_passes_through(self, source: str) -> None:
        """PROPERTY: Map reproduces p's exact error and rest when p fails."""
        event(f"empty={not source}")
        view = ParseInput.of(source)

        inner = Digit1().parse(view)
        mapped = Map(Digit1(), int).parse(view)

        assert not inner.ok
        assert mapped.error == inner.error
        assert mapped.rest == inner.rest

    def test_function_not_called_on_failure(self) -> None:
        calls: list[str] = []
        result = Map(Rune("a"), calls.append).parse(ParseInput.of("b"))

        assert isinstance(result.error, UnexpectedElementError)
        assert calls == []

    def test_function_value_error_keeps_consumption(self) -> None:
        """A rejected value is a MapFunctionError; input stays consumed."""

        def reject(_: str) -> int:
            msg = "too large"
            raise ValueError(msg)

        rest, _, error = Map(Digit1(), reject).parse(ParseInput.of("99x"))

        assert isinstance(error, MapFunctionError)
        assert error.reason == "too large"
        assert error.position == 0
        assert error.code is DiagnosticCode.MAP_FUNCTION_FAILED
        assert rest.rest() == "x"

    def test_function_arithmetic_error(self) -> None:
        _, _, error = Map(Digit1(), lambda s: 1 // (int(s) - int(s))).parse(
            ParseInput.of("5")
        )

        assert isinstance(error, MapFunctionError)

    def test_other_exceptions_propagate(self) -> None:
        """Programming errors in the function are not parse failures."""

        def broken(_: str) -> int:
            msg = "bug"
            raise KeyError(msg)

        with pytest.raises(KeyError):
            Map(Digit1(), broken).parse(ParseInput.of("1"))
