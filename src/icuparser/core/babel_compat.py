"""Optional Babel backend.

Parsing, validation and printing need nothing beyond the standard library.
Babel only adds CLDR data for plural rules:

    pip install icuparser          # built-in plural table
    pip install icuparser[babel]   # CLDR plural rules for every locale

Babel is imported lazily and only here (plus the lazy imports in
locale_utils and runtime.plural_rules), so a parser-only install never pays
its import cost.

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType

__all__ = [
    "BabelImportError",
    "get_unknown_locale_error",
    "is_babel_available",
    "locale_data_exists",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import
    except ImportError:
        return False
    return True


class BabelImportError(ImportError):
    """A Babel-only feature was requested in a parser-only install.

    Attributes:
        feature: What needed Babel, e.g. "PluralRules(use_babel=True)"
    """

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install icuparser[babel]"
        )
        self.feature = feature


def is_babel_available() -> bool:
    """Whether babel can be imported. Checked once per process."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Return babel.core.UnknownLocaleError, for use in except clauses."""
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def locale_data_exists(locale_code: str) -> bool:
    """Whether Babel ships CLDR data for a POSIX locale id ("sr_Latn").

    Always False without Babel.
    """
    if not _check_babel_available():
        return False
    from babel import localedata  # noqa: PLC0415

    return bool(localedata.exists(locale_code))
