"""Tests for core/depth_guard.py: the recursion budget used by parser and visitors.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from icuparser.constants import MAX_DEPTH, MAX_NESTING_DEPTH
from icuparser.core.depth_guard import DepthGuard, depth_clamp
from icuparser.diagnostics import DepthLimitExceededError, DiagnosticCode, ParsingError


def enter_levels(guard: DepthGuard, levels: int) -> None:
    """Recursively open `levels` nested guarded blocks."""
    if levels == 0:
        return
    with guard:
        enter_levels(guard, levels - 1)


# ============================================================================
# Limits
# ============================================================================


class TestLimits:
    """Default and clamped limits."""

    def test_defaults(self) -> None:
        guard = DepthGuard()
        assert (guard.max_depth, guard.current_depth, guard.depth) == (MAX_DEPTH, 0, 0)

    def test_traversal_budget_covers_parser_nesting(self) -> None:
        """A maximally nested parse yields about three nodes per level."""
        assert MAX_DEPTH > 3 * MAX_NESTING_DEPTH

    def test_oversized_limit_is_clamped(self) -> None:
        guard = DepthGuard(max_depth=sys.getrecursionlimit() * 2)
        assert guard.max_depth == sys.getrecursionlimit() - 50


# ============================================================================
# Entering and leaving
# ============================================================================


class TestGuardedBlocks:
    """Context manager bookkeeping."""

    def test_counter_follows_nesting(self) -> None:
        guard = DepthGuard(max_depth=5)
        seen: list[int] = []
        with guard:
            seen.append(guard.current_depth)
            with guard:
                seen.append(guard.current_depth)
            seen.append(guard.current_depth)
        assert seen == [1, 2, 1]
        assert guard.current_depth == 0

    def test_enter_returns_guard(self) -> None:
        guard = DepthGuard()
        with guard as entered:
            assert entered is guard

    def test_refused_entry_raises_traversal_error(self) -> None:
        guard = DepthGuard(max_depth=2)
        with pytest.raises(DepthLimitExceededError) as exc_info:
            enter_levels(guard, 3)

        assert str(exc_info.value) == "Maximum traversal depth of 2 exceeded."
        assert exc_info.value.code is DiagnosticCode.DEPTH_EXCEEDED
        assert guard.current_depth == 0

    def test_refused_entry_leaves_counter_untouched(self) -> None:
        guard = DepthGuard(max_depth=1)
        with guard:
            with pytest.raises(DepthLimitExceededError):
                guard.__enter__()
            assert guard.current_depth == 1

    def test_body_exception_still_unwinds(self) -> None:
        guard = DepthGuard()
        with pytest.raises(KeyError):
            with guard:
                raise KeyError("x")
        assert guard.current_depth == 0

    def test_on_exceeded_supplies_the_exception(self) -> None:
        """The parser raises a positioned ParsingError instead."""
        guard = DepthGuard(
            max_depth=1,
            on_exceeded=lambda limit: ParsingError(f"nesting over {limit}", 7, "{a, select, other {"),
        )
        with pytest.raises(ParsingError, match="nesting over 1") as exc_info:
            enter_levels(guard, 2)
        assert exc_info.value.position == 7

    def test_is_exceeded_and_reset(self) -> None:
        guard = DepthGuard(max_depth=1)
        assert not guard.is_exceeded()
        guard.__enter__()
        assert guard.is_exceeded()
        guard.reset()
        assert guard.depth == 0
        assert not guard.is_exceeded()


# ============================================================================
# depth_clamp
# ============================================================================


class TestDepthClamp:
    """Capping against the interpreter recursion limit."""

    def test_small_request_unchanged(self) -> None:
        assert depth_clamp(10) == 10

    def test_reserve_frames(self) -> None:
        limit = sys.getrecursionlimit()
        assert depth_clamp(limit, reserve_frames=200) == limit - 200

    def test_clamping_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="icuparser"):
            depth_clamp(sys.getrecursionlimit() + 1)

        (record,) = caplog.records
        assert record.name == "icuparser.core.depth_guard"
        assert record.getMessage().startswith("Clamping depth limit")

    def test_unclamped_request_is_silent(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="icuparser"):
            depth_clamp(10)
        assert caplog.records == []


# ============================================================================
# Properties
# ============================================================================


@given(st.integers(min_value=1, max_value=120))
def test_exactly_max_depth_levels_fit(max_depth: int) -> None:
    event(f"max_depth_bucket={max_depth // 30}")
    guard = DepthGuard(max_depth=max_depth)

    enter_levels(guard, max_depth)
    with pytest.raises(DepthLimitExceededError):
        enter_levels(guard, max_depth + 1)
    assert guard.current_depth == 0


@given(st.integers(min_value=0, max_value=10**6))
def test_clamped_depth_bounds(requested: int) -> None:
    result = depth_clamp(requested)
    assert result <= requested
    assert result <= sys.getrecursionlimit() - 50
