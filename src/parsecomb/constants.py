"""Shared constants for parsecomb.

This module provides centralized configuration constants used across
the input model, the recursive combinators and the runner. Placing
constants here avoids circular imports and provides a single source
of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_INPUT_SIZE",
    # Element classification
    "ASCII_DIGITS",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of active Lazy parsers on one thread.
# Recursive grammars descend one Python call chain per nesting level, and
# each level costs several stack frames (Lazy -> Alt -> Delimited -> ...).
# 100 levels keeps well inside the default recursion limit of 1000.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum input size in elements (10 Mi elements).
# Applied by the runner before parsing starts. Set to 0 to disable.
MAX_INPUT_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# ELEMENT CLASSIFICATION
# ============================================================================

# ASCII digits only. str.isdigit() returns True for Unicode digits such as
# "²" or "٣", which int() either rejects or converts unexpectedly.
ASCII_DIGITS: str = "0123456789"
