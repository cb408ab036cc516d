"""Runtime data: CLDR plural rules.

Python 3.13+.
"""

from .plural_expr import PluralOperands, PluralRuleSyntaxError
from .plural_rules import PluralRules, get_categories, resolve_locale, select_plural_category

__all__ = [
    "PluralOperands",
    "PluralRuleSyntaxError",
    "PluralRules",
    "get_categories",
    "resolve_locale",
    "select_plural_category",
]
