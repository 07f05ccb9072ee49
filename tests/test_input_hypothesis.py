"""Hypothesis property-based tests for ParseInput.

Tests view immutability, EOF handling and source sharing.
"""

from __future__ import annotations

from hypothesis import event, given

from parsecomb.input import ParseInput
from tests.strategies import positions, source_text, token_lists


class TestParseInputImmutability:
    """Advancing never mutates and never copies the source."""

    @given(source=source_text.filter(bool), offset=positions)
    def test_advance_returns_new_view(self, source: str, offset: int) -> None:
        """INVARIANT: advance() returns a NEW view; original unchanged."""
        pos = offset % len(source)
        event(f"remaining={min(len(source) - pos, 5)}")

        view = ParseInput(source, pos)
        advanced = view.advance()

        assert view.pos == pos
        assert advanced.pos == pos + 1
        assert advanced.source is view.source

    @given(source=source_text)
    def test_walk_reaches_eof(self, source: str) -> None:
        """PROPERTY: advancing len(source) times reaches EOF."""
        view = ParseInput.of(source)
        for _ in range(len(source)):
            assert not view.is_eof
            view = view.advance()

        assert view.is_eof
        assert view.rest() == source[len(source) :]

    @given(source=source_text, pos=positions)
    def test_rest_is_suffix(self, source: str, pos: int) -> None:
        """PROPERTY: rest() equals the source suffix from pos."""
        view = ParseInput.of(source).advance(pos)

        assert source.endswith(view.rest())
        assert len(view) == len(view.rest())

    @given(tokens=token_lists)
    def test_token_views(self, tokens: list[str]) -> None:
        """PROPERTY: token lists behave like text for viewing."""
        event(f"empty={not tokens}")
        view = ParseInput.of(tokens)

        assert bool(view) == bool(tokens)
        if tokens:
            assert view.current == tokens[0]
            assert view.advance().rest() == tokens[1:]
