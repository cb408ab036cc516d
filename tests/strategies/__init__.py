"""Hypothesis strategies for icuparser property-based testing.

Usage:
    from tests.strategies import icu_messages, icu_choices
    from tests.strategies.icu import distinct_argument_uses, render_uses
"""

from .icu import (
    ARGUMENT_TEMPLATES,
    PLURAL_KEYWORDS,
    TEXT_ALPHABET,
    argument_names,
    distinct_argument_uses,
    icu_branching,
    icu_choices,
    icu_identifiers,
    icu_messages,
    icu_options,
    render_uses,
    selector_keywords,
    text_values,
)

__all__ = [
    "ARGUMENT_TEMPLATES",
    "PLURAL_KEYWORDS",
    "TEXT_ALPHABET",
    "argument_names",
    "distinct_argument_uses",
    "icu_branching",
    "icu_choices",
    "icu_identifiers",
    "icu_messages",
    "icu_options",
    "render_uses",
    "selector_keywords",
    "text_values",
]
