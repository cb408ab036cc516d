"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used by the plural rule engine and
the semantic validator, so cache keys and lookups are consistent.

Python 3.13+.
"""

from __future__ import annotations

import functools
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "language_of",
    "locale_fallback_chain",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 or POSIX locale code to canonical POSIX form.

    Separators become underscores, encoding (".UTF-8") and modifier
    ("@euro") suffixes are dropped, the language is lower-cased, a 4-letter
    script is title-cased and a region is upper-cased.

    Example:
        >>> normalize_locale("en-us")
        'en_US'
        >>> normalize_locale("sr-latn-rs")
        'sr_Latn_RS'
        >>> normalize_locale("de_DE.UTF-8@euro")
        'de_DE'
    """
    code = locale_code.strip().split(".", 1)[0].split("@", 1)[0]
    parts = [p for p in code.replace("-", "_").split("_") if p]
    if not parts:
        return ""
    result = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 4 and part.isalpha():
            result.append(part.title())
        elif len(part) in (2, 3):
            result.append(part.upper())
        else:
            result.append(part)
    return "_".join(result)


def language_of(locale_code: str) -> str:
    """Return the language subtag of a locale code ("pt-BR" -> "pt")."""
    return normalize_locale(locale_code).split("_", 1)[0]


def locale_fallback_chain(locale_code: str) -> Iterator[str]:
    """Yield a normalized locale followed by its parents.

    Example:
        >>> list(locale_fallback_chain("sr-Latn-RS"))
        ['sr_Latn_RS', 'sr_Latn', 'sr']
    """
    parts = normalize_locale(locale_code).split("_")
    while parts and parts[0]:
        yield "_".join(parts)
        parts.pop()


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
