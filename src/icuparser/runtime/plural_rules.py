"""CLDR plural category selection.

Two strategies, tried in order:

1. Babel (optional dependency). The locale's CLDR plural or ordinal rule is
   loaded once per (locale, ordinal) and called directly. Categories are
   discovered by sampling integers 0..200 (plus a few fractions for
   cardinals) and collecting the distinct results.
2. Built-in table. A fixed set of rules for common languages, evaluated by
   runtime.plural_expr. Used when Babel is missing or fails for a locale.
   Unknown languages use the English rules.

Nothing here raises for user input: unknown locales resolve to English and
non-finite numbers select "other".

Python 3.13+. Babel optional.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

from icuparser.constants import DEFAULT_LOCALE, PLURAL_FRACTION_SAMPLES, PLURAL_SAMPLE_MAX
from icuparser.core.babel_compat import (
    get_unknown_locale_error,
    is_babel_available,
    locale_data_exists,
    require_babel,
)
from icuparser.enums import PluralCategory
from icuparser.locale_utils import get_babel_locale, language_of, locale_fallback_chain

from .cache import LocaleCache
from .plural_expr import PluralOperands, evaluate_rule

__all__ = [
    "CARDINAL_RULES",
    "CATEGORY_NAMES",
    "ORDINAL_RULES",
    "PluralRules",
    "RuleEntry",
    "get_categories",
    "resolve_locale",
    "select_plural_category",
]

logger = logging.getLogger(__name__)

type PluralNumber = int | float | Decimal
type HostRule = Callable[[PluralNumber], str]

CATEGORY_NAMES: tuple[str, ...] = tuple(category.value for category in PluralCategory)


@dataclass(frozen=True, slots=True)
class RuleEntry:
    """Categories a language uses, plus the rule choosing between them."""

    categories: tuple[str, ...]
    rule: str


# ============================================================================
# BUILT-IN TABLE
# ============================================================================

_ONE_OTHER = ("one", "other")
_OTHER_ONLY = RuleEntry(("other",), "true")
_ONE_IF_SINGULAR_INTEGER = RuleEntry(_ONE_OTHER, "i == 1 && v == 0")
_ONE_IF_ZERO_OR_ONE = RuleEntry(_ONE_OTHER, "i == 0 || i == 1")
_ONE_IF_EXACTLY_ONE = RuleEntry(_ONE_OTHER, "n == 1")

# Slavic few: i%10 in 2..4 and i%100 not in 12..14
_SLAVIC_FEW = "v == 0 && i % 10 >= 2 && i % 10 <= 4 && (i % 100 < 12 || i % 100 > 14)"

CARDINAL_RULES: dict[str, RuleEntry] = {
    "en": _ONE_IF_SINGULAR_INTEGER,
    "de": _ONE_IF_SINGULAR_INTEGER,
    "it": _ONE_IF_SINGULAR_INTEGER,
    "fr": _ONE_IF_ZERO_OR_ONE,
    "pt": _ONE_IF_ZERO_OR_ONE,
    "es": _ONE_IF_EXACTLY_ONE,
    "tr": _ONE_IF_EXACTLY_ONE,
    "hi": RuleEntry(_ONE_OTHER, "i == 0 || n == 1"),
    "ja": _OTHER_ONLY,
    "zh": _OTHER_ONLY,
    "ko": _OTHER_ONLY,
    "id": _OTHER_ONLY,
    "vi": _OTHER_ONLY,
    "ar": RuleEntry(
        CATEGORY_NAMES,
        "n == 0 ? zero"
        " : n == 1 ? one"
        " : n == 2 ? two"
        " : v == 0 && n % 100 >= 3 && n % 100 <= 10 ? few"
        " : v == 0 && n % 100 >= 11 && n % 100 <= 99 ? many"
        " : other",
    ),
    "ru": RuleEntry(
        ("one", "few", "many", "other"),
        "v == 0 && i % 10 == 1 && i % 100 != 11 ? one"
        f" : {_SLAVIC_FEW} ? few"
        " : v == 0 ? many"
        " : other",
    ),
    "pl": RuleEntry(
        ("one", "few", "many", "other"),
        "i == 1 && v == 0 ? one"
        f" : {_SLAVIC_FEW} ? few"
        " : v == 0 ? many"
        " : other",
    ),
    "he": RuleEntry(
        ("one", "two", "many", "other"),
        "i == 1 && v == 0 ? one"
        " : i == 2 && v == 0 ? two"
        " : v == 0 && n > 10 && n % 10 == 0 ? many"
        " : other",
    ),
}

ORDINAL_RULES: dict[str, RuleEntry] = {
    "en": RuleEntry(
        ("one", "two", "few", "other"),
        "n % 10 == 1 && n % 100 != 11 ? one"
        " : n % 10 == 2 && n % 100 != 12 ? two"
        " : n % 10 == 3 && n % 100 != 13 ? few"
        " : other",
    ),
    "fr": _ONE_IF_EXACTLY_ONE,
    "de": _OTHER_ONLY,
    "es": _OTHER_ONLY,
    "it": _OTHER_ONLY,
    "pt": _OTHER_ONLY,
}


def _table_entry(language: str, *, ordinal: bool) -> RuleEntry:
    table = ORDINAL_RULES if ordinal else CARDINAL_RULES
    return table.get(language) or table[DEFAULT_LOCALE]


# ============================================================================
# ENGINE
# ============================================================================


class PluralRules:
    """Locale-keyed plural category selection.

    Each instance owns its caches; module-level functions share a default
    instance.

    Args:
        use_babel: True requires Babel, False forces the built-in table,
            None (default) uses Babel when it is installed

    Example:
        >>> rules = PluralRules()
        >>> rules.select(1, "en")
        'one'
        >>> rules.get_categories("ar")
        ['zero', 'one', 'two', 'few', 'many', 'other']
    """

    __slots__ = ("_category_cache", "_rule_cache", "_use_babel")

    def __init__(self, *, use_babel: bool | None = None) -> None:
        if use_babel:
            require_babel("PluralRules(use_babel=True)")
        self._use_babel = is_babel_available() if use_babel is None else use_babel
        self._rule_cache: LocaleCache[tuple[str, bool], HostRule | None] = LocaleCache()
        self._category_cache: LocaleCache[tuple[str, bool], tuple[str, ...]] = LocaleCache()

    @property
    def uses_babel(self) -> bool:
        return self._use_babel

    def resolve_locale(self, locale: str) -> str:
        """Map a locale code to the closest known locale, or "en".

        Walks the subtag fallback chain (sr-Latn-RS -> sr_Latn -> sr).
        """
        for candidate in locale_fallback_chain(locale):
            if self._is_known(candidate):
                return candidate
        logger.debug("No plural data for locale %r, using %s", locale, DEFAULT_LOCALE)
        return DEFAULT_LOCALE

    def _is_known(self, candidate: str) -> bool:
        if self._use_babel:
            return locale_data_exists(candidate)
        return "_" not in candidate and candidate in CARDINAL_RULES

    def select(self, number: PluralNumber, locale: str, ordinal: bool = False) -> str:
        """Return the plural category of number in locale.

        Never raises for a number: NaN and infinities select "other", and
        integers too large for a float are classified exactly.
        """
        if not _is_finite(number):
            return PluralCategory.OTHER.value
        return self._select_resolved(number, self.resolve_locale(locale), ordinal)

    def get_categories(self, locale: str, ordinal: bool = False) -> list[str]:
        """Return the categories locale uses, in CLDR order, always including "other"."""
        resolved = self.resolve_locale(locale)
        return list(
            self._category_cache.get_or_populate(
                (resolved, ordinal), lambda: self._discover_categories(resolved, ordinal)
            )
        )

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    def _select_resolved(self, number: PluralNumber, resolved: str, ordinal: bool) -> str:
        host_rule = self._host_rule(resolved, ordinal)
        if host_rule is not None:
            try:
                return host_rule(number)
            except (ArithmeticError, TypeError, ValueError) as e:
                logger.debug(
                    "Babel plural rule failed for %s (%r): %s; using built-in table",
                    resolved,
                    number,
                    e,
                )
        entry = _table_entry(language_of(resolved), ordinal=ordinal)
        return evaluate_rule(entry.rule, PluralOperands.from_number(number), entry.categories)

    def _discover_categories(self, resolved: str, ordinal: bool) -> tuple[str, ...]:
        if self._host_rule(resolved, ordinal) is None:
            return _table_entry(language_of(resolved), ordinal=ordinal).categories

        samples: list[PluralNumber] = list(range(PLURAL_SAMPLE_MAX + 1))
        if not ordinal:
            samples.extend(PLURAL_FRACTION_SAMPLES)
        found = {self._select_resolved(sample, resolved, ordinal) for sample in samples}
        found.add(PluralCategory.OTHER.value)
        logger.debug(
            "Discovered plural categories for %s (ordinal=%s): %s", resolved, ordinal, found
        )
        return tuple(name for name in CATEGORY_NAMES if name in found)

    def _host_rule(self, resolved: str, ordinal: bool) -> HostRule | None:
        if not self._use_babel:
            return None
        return self._rule_cache.get_or_populate(
            (resolved, ordinal), lambda: _load_babel_rule(resolved, ordinal)
        )


def _is_finite(number: PluralNumber) -> bool:
    if isinstance(number, Decimal):
        return number.is_finite()
    if isinstance(number, float):
        return math.isfinite(number)
    return True


def _load_babel_rule(resolved: str, ordinal: bool) -> HostRule | None:
    """Load the Babel rule for a locale, or None if Babel cannot provide one."""
    try:
        locale_obj = get_babel_locale(resolved)
    except (get_unknown_locale_error(), ValueError) as e:
        logger.debug("Babel cannot load locale %s: %s", resolved, e)
        return None
    rule = locale_obj.ordinal_form if ordinal else locale_obj.plural_form
    return rule  # type: ignore[no-any-return]


# ============================================================================
# MODULE-LEVEL API
# ============================================================================

_default_rules = PluralRules()


def select_plural_category(number: PluralNumber, locale: str, ordinal: bool = False) -> str:
    """Select CLDR plural category for number.

    Examples:
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "ru_RU")
        'many'
        >>> select_plural_category(2, "ar_SA")
        'two'
        >>> select_plural_category(3, "en", ordinal=True)
        'few'
    """
    return _default_rules.select(number, locale, ordinal)


def get_categories(locale: str, ordinal: bool = False) -> list[str]:
    """Plural categories used by locale (see PluralRules.get_categories)."""
    return _default_rules.get_categories(locale, ordinal)


def resolve_locale(locale: str) -> str:
    """Closest known locale for plural data (see PluralRules.resolve_locale)."""
    return _default_rules.resolve_locale(locale)
