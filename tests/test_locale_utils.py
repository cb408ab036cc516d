"""Tests for locale_utils.py - locale normalization and fallback chains.

Python 3.13+.
"""

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from icuparser.core import is_babel_available
from icuparser.locale_utils import (
    get_babel_locale,
    language_of,
    locale_fallback_chain,
    normalize_locale,
)

requires_babel = pytest.mark.skipif(not is_babel_available(), reason="Babel not installed")


class TestNormalizeLocale:
    """Test normalize_locale function.

    Output is canonical POSIX form so that "en-US", "EN_us" and "en_US"
    share one cache key.
    """

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("en-US", "en_US"),
            ("EN-us", "en_US"),
            ("en_US", "en_US"),
            ("en", "en"),
            ("zh-hans-cn", "zh_Hans_CN"),
            ("sr-Latn-RS", "sr_Latn_RS"),
            ("es-419", "es_419"),
            ("de_DE.UTF-8@euro", "de_DE"),
            ("  fr-ca  ", "fr_CA"),
            ("en--US", "en_US"),
            ("", ""),
            ("_", ""),
        ],
    )
    def test_normalize(self, code: str, expected: str) -> None:
        assert normalize_locale(code) == expected

    @given(st.from_regex(r"[A-Za-z]{2,3}([-_][A-Za-z]{4})?([-_][A-Za-z]{2})?", fullmatch=True))
    def test_idempotent(self, code: str) -> None:
        """Normalizing a normalized code changes nothing."""
        event(f"subtags={code.count('-') + code.count('_') + 1}")
        once = normalize_locale(code)
        assert normalize_locale(once) == once
        assert once.split("_")[0] == once.split("_")[0].lower()


class TestLanguageOf:
    """Test language_of function."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("pt-BR", "pt"), ("EN", "en"), ("sr_Latn_RS", "sr"), ("", "")],
    )
    def test_language_of(self, code: str, expected: str) -> None:
        assert language_of(code) == expected


class TestLocaleFallbackChain:
    """Test locale_fallback_chain function."""

    def test_chain_drops_one_subtag_at_a_time(self) -> None:
        assert list(locale_fallback_chain("sr-Latn-RS")) == ["sr_Latn_RS", "sr_Latn", "sr"]

    def test_language_only(self) -> None:
        assert list(locale_fallback_chain("ja")) == ["ja"]

    def test_empty_code_yields_nothing(self) -> None:
        assert list(locale_fallback_chain("")) == []

    @given(st.from_regex(r"[a-z]{2}(_[A-Z]{2})?", fullmatch=True))
    def test_chain_ends_with_language(self, code: str) -> None:
        chain = list(locale_fallback_chain(code))
        assert chain[0] == code
        assert chain[-1] == language_of(code)


@requires_babel
class TestGetBabelLocale:
    """Test get_babel_locale function."""

    def test_bcp47_input(self) -> None:
        locale = get_babel_locale("en-US")
        assert locale.language == "en"
        assert locale.territory == "US"

    def test_result_is_cached(self) -> None:
        assert get_babel_locale("de-DE") is get_babel_locale("de-DE")

    def test_unknown_locale_raises(self) -> None:
        from babel.core import UnknownLocaleError  # noqa: PLC0415

        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx-XX")
