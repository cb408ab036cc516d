"""Shared constants for icuparser.

This module provides centralized configuration constants used across the
syntax, validation and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing and tree traversal
- Input limits: DoS prevention via size constraints
- Rendering: Snippet and pretty-printer defaults
- Plural rules: Sampling range for category discovery

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "MAX_NESTING_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Rendering
    "MAX_SNIPPET_WIDTH",
    "SNIPPET_CONTEXT",
    "DEFAULT_INDENT",
    "DEFAULT_LINE_BREAK",
    # Plural rules
    "PLURAL_SAMPLE_MAX",
    "PLURAL_FRACTION_SAMPLES",
    "DEFAULT_LOCALE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# Two limits are used because they count different things:
#
# 1. PARSER (syntax/parser.py):
#    - Tracks: Argument nesting (an argument inside an option message)
#    - Example: {a, select, x {{b, plural, other {{c, select, ...}}}}}
#
# 2. VISITORS (syntax/visitor.py):
#    - Tracks: Node depth during traversal. Each argument level costs three
#      nodes (argument -> option -> message), so the limit must stay above
#      three times the parser limit for every parsed tree to be visitable.

# Maximum node depth for AST traversal (visitors, printer, validators).
MAX_DEPTH: int = 200

# Maximum argument nesting accepted by the parser.
MAX_NESTING_DEPTH: int = 50

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source length in characters (1 MiB of ASCII text).
MAX_SOURCE_SIZE: int = 1024 * 1024

# ============================================================================
# RENDERING
# ============================================================================

# Error snippets are cut to this many columns, with "..." markers.
MAX_SNIPPET_WIDTH: int = 80

# Columns of left context kept before the caret when a line is windowed.
SNIPPET_CONTEXT: int = 40

DEFAULT_INDENT: str = "    "
DEFAULT_LINE_BREAK: str = "\n"

# ============================================================================
# PLURAL RULES
# ============================================================================

# Integers 0..PLURAL_SAMPLE_MAX are probed when discovering categories.
PLURAL_SAMPLE_MAX: int = 200

# Fractional probes (cardinal only). Catches categories such as "many" in
# Russian or "other" in Polish that integers never reach.
PLURAL_FRACTION_SAMPLES: tuple[float, ...] = (0.1, 1.1, 2.1, 5.5)

# Locale used when resolution fails.
DEFAULT_LOCALE: str = "en"
