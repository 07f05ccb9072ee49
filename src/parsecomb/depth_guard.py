"""Nesting depth limiting for recursive grammars.

Provides a thread-local nesting counter shared by all Lazy parsers, and
clamping of requested limits against the interpreter recursion limit.

Thread-safe: each thread sees its own counter. Parsers stay stateless;
the counter belongs to the call stack, not to any parser.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from threading import local as thread_local

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)

# Thread-local storage for the current Lazy nesting depth
_nesting_thread_local = thread_local()

# Stack frames consumed per Lazy nesting level in a typical grammar
# (Lazy -> Alt -> Delimited -> TakeWhile -> Map -> primitive).
# Grammars with more combinators between two Lazy levels cost more frames
# per level and need a smaller max_depth.
_FRAMES_PER_LEVEL: int = 8


class DepthGuard:
    """Context manager tracking the nesting depth of the current thread.

    Usage:
        guard = DepthGuard()
        if guard.depth >= max_depth:
            ...  # refuse to descend
        with guard:
            result = inner.parse(input)

    The counter is restored on exit even when the guarded block raises.
    """

    __slots__ = ()

    @property
    def depth(self) -> int:
        """Current nesting depth on this thread."""
        return getattr(_nesting_thread_local, "depth", 0)

    def __enter__(self) -> DepthGuard:
        _nesting_thread_local.depth = self.depth + 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        _nesting_thread_local.depth = self.depth - 1


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Clamp requested depth against Python recursion limit.

    Each nesting level of a recursive grammar costs several stack frames,
    so the limit is divided by the frames one level costs before comparison.
    Logs a warning if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.getrecursionlimit() >= 1000
        True
        >>> depth_clamp(100)
        100
    """
    max_safe_depth = max((sys.getrecursionlimit() - reserve_frames) // _FRAMES_PER_LEVEL, 1)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
