"""Hypothesis strategies for parsecomb property-based testing.

Usage:
    from tests.strategies import digit_runs, source_text, non_digit_text
"""

from .inputs import (
    ascii_letters,
    digit_runs,
    non_digit_text,
    positions,
    quoted_bodies,
    source_text,
    token_lists,
)

__all__ = [
    "ascii_letters",
    "digit_runs",
    "non_digit_text",
    "positions",
    "quoted_bodies",
    "source_text",
    "token_lists",
]
