"""Recursion budget shared by the parser and AST visitors.

The parser guards argument nesting; ASTVisitor guards every visit() call,
which also covers hand-built trees that never went through the parser.
A guard is plain instance state, so give each parse or traversal its own.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass, field

from icuparser.constants import MAX_DEPTH
from icuparser.diagnostics import DepthLimitExceededError, IcuParserError
from icuparser.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)

_RESERVED_FRAMES = 50


def _traversal_error(limit: int) -> IcuParserError:
    return DepthLimitExceededError(ErrorTemplate.depth_exceeded(limit))


@dataclass(slots=True)
class DepthGuard:
    """Counts nested `with guard:` blocks and refuses to go past max_depth.

    Example:
        >>> guard = DepthGuard(max_depth=2)
        >>> with guard, guard:
        ...     guard.is_exceeded()
        True

    The parser swaps the exception through on_exceeded so that running out
    of nesting budget surfaces as a positioned ParsingError.

    Attributes:
        max_depth: Deepest allowed nesting, clamped to the interpreter limit
        on_exceeded: Builds the exception raised on the refused entry
        current_depth: Blocks currently entered
    """

    max_depth: int = MAX_DEPTH
    on_exceeded: Callable[[int], IcuParserError] = _traversal_error
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        # __exit__ does not run for a refused entry: test before counting
        if self.is_exceeded():
            raise self.on_exceeded(self.max_depth)
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        return self.current_depth

    def is_exceeded(self) -> bool:
        """True when one more entry would be refused."""
        return self.current_depth >= self.max_depth

    def reset(self) -> None:
        self.current_depth = 0


def depth_clamp(requested_depth: int, reserve_frames: int = _RESERVED_FRAMES) -> int:
    """Cap requested_depth so guarded recursion ends before RecursionError.

    The cap is sys.getrecursionlimit() minus reserve_frames; lowering a
    request emits a WARNING on the icuparser.core.depth_guard logger.
    """
    recursion_limit = sys.getrecursionlimit()
    ceiling = recursion_limit - reserve_frames
    if requested_depth <= ceiling:
        return requested_depth
    logger.warning(
        "Clamping depth limit %d to %d (interpreter recursion limit %d, %d frames reserved)",
        requested_depth,
        ceiling,
        recursion_limit,
        reserve_frames,
    )
    return ceiling
