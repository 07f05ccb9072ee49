"""Tests for sequence combinators: Delimited, Preceded, Terminated, Pair."""

from __future__ import annotations

from hypothesis import event, example, given

from parsecomb.combinators import Delimited, Pair, Preceded, TakeWhile0, Terminated
from parsecomb.errors import NoLeftInputToParseError, UnexpectedRuneError
from parsecomb.input import ParseInput
from parsecomb.primitives import Digit1, Rune, Satisfy
from tests.strategies import quoted_bodies, source_text


def _quoted() -> Delimited[str, list[str]]:
    return Delimited(Rune('"'), TakeWhile0(Satisfy(lambda ch: ch != '"')), Rune('"'))


class TestDelimited:
    """open, content, close; only content's value is kept."""

    def test_quoted_string(self) -> None:
        rest, value, error = _quoted().parse(ParseInput.of('"hello"rest'))

        assert error is None
        assert "".join(value) == "hello"
        assert rest.rest() == "rest"

    def test_open_failure_propagates(self) -> None:
        view = ParseInput.of("hello")
        rest, _, error = _quoted().parse(view)

        assert isinstance(error, UnexpectedRuneError)
        assert error.position == 0
        assert rest == view

    def test_content_failure_keeps_open_consumption(self) -> None:
        parser = Delimited(Rune("("), Digit1(), Rune(")"))
        rest, _, error = parser.parse(ParseInput.of("(x)"))

        assert error is not None
        assert error.position == 1
        assert rest.pos == 1

    def test_close_failure_keeps_content_consumption(self) -> None:
        rest, _, error = _quoted().parse(ParseInput.of('"abc'))

        assert isinstance(error, NoLeftInputToParseError)
        assert rest.pos == 4

    def test_empty_content(self) -> None:
        rest, value, error = _quoted().parse(ParseInput.of('""'))

        assert error is None
        assert value == []
        assert rest.is_eof

    @given(body=quoted_bodies, tail=source_text)
    @example(body="hello", tail="rest")
    def test_open_content_close_tail(self, body: str, tail: str) -> None:
        """PROPERTY: over open ++ content ++ close ++ tail, value is content, rest tail."""
        event(f"body_empty={not body}")

        rest, value, error = _quoted().parse(ParseInput.of(f'"{body}"{tail}'))

        assert error is None
        assert "".join(value) == body
        assert rest.rest() == tail


class TestPreceded:
    def test_keeps_content(self) -> None:
        rest, value, error = Preceded(Rune("-"), Digit1()).parse(ParseInput.of("-12;"))

        assert error is None
        assert value == "12"
        assert rest.rest() == ";"

    def test_prefix_failure(self) -> None:
        view = ParseInput.of("12")
        rest, _, error = Preceded(Rune("-"), Digit1()).parse(view)

        assert isinstance(error, UnexpectedRuneError)
        assert rest == view


class TestTerminated:
    def test_keeps_content(self) -> None:
        rest, value, error = Terminated(Digit1(), Rune(";")).parse(ParseInput.of("12;x"))

        assert error is None
        assert value == "12"
        assert rest.rest() == "x"

    def test_suffix_failure_keeps_content_consumption(self) -> None:
        rest, _, error = Terminated(Digit1(), Rune(";")).parse(ParseInput.of("12,"))

        assert isinstance(error, UnexpectedRuneError)
        assert rest.pos == 2


class TestPair:
    def test_both_values(self) -> None:
        rest, value, error = Pair(Rune("a"), Digit1()).parse(ParseInput.of("a42"))

        assert error is None
        assert value == ("a", "42")
        assert rest.is_eof

    def test_second_failure(self) -> None:
        rest, _, error = Pair(Rune("a"), Digit1()).parse(ParseInput.of("ab"))

        assert error is not None
        assert error.position == 1
        assert rest.pos == 1
