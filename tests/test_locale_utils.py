"""Tests for locale_utils.py.

Covers normalize_locale, split_language and plural_language_key.
Includes property-based tests with Hypothesis for locale normalization.

Python 3.13+.
"""

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from catalogtrans.locale_utils import (
    BRAZILIAN_PORTUGUESE_KEY,
    normalize_locale,
    plural_language_key,
    split_language,
)

KNOWN = frozenset({"en", "fr", "fil", "pt", BRAZILIAN_PORTUGUESE_KEY})


class TestNormalizeLocale:
    """normalize_locale only swaps separators; case is preserved."""

    def test_bcp47_to_posix(self) -> None:
        """BCP-47 hyphens become underscores."""
        assert normalize_locale("en-US") == "en_US"

    def test_already_normalized(self) -> None:
        """POSIX codes are unchanged."""
        assert normalize_locale("pt_BR") == "pt_BR"

    def test_multiple_hyphens(self) -> None:
        """Every hyphen is replaced."""
        assert normalize_locale("sr-Latn-RS") == "sr_Latn_RS"

    @given(st.text(alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-_", max_size=12))
    def test_no_hyphens_remain(self, code: str) -> None:
        """Output never contains a hyphen and keeps its length."""
        event(f"has_hyphen={'-' in code}")
        result = normalize_locale(code)
        assert "-" not in result
        assert len(result) == len(code)


class TestSplitLanguage:
    """split_language returns (language, territory)."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("en", ("en", None)),
            ("en_US", ("en", "US")),
            ("pt-br", ("pt", "BR")),
            ("RU", ("ru", None)),
            ("sr_Latn_RS", ("sr", "RS")),
            ("de_DE.UTF-8", ("de", "DE")),
        ],
    )
    def test_valid_identifiers(self, code: str, expected: tuple[str, str | None]) -> None:
        """Babel parses language and territory."""
        assert split_language(code) == expected

    @pytest.mark.parametrize(("code", "language"), [("123", "123"), ("", ""), ("1x_US", "1x")])
    def test_unparseable_falls_back_to_prefix(self, code: str, language: str) -> None:
        """Identifiers Babel rejects yield the text before the first underscore."""
        assert split_language(code) == (language, None)


class TestPluralLanguageKey:
    """plural_language_key picks the rule table key."""

    @pytest.mark.parametrize("code", ["pt_BR", "pt-BR", "pt_br", "PT_BR"])
    def test_brazilian_portuguese(self, code: str) -> None:
        """Any spelling of pt_BR maps to the alias."""
        assert plural_language_key(code, KNOWN) == BRAZILIAN_PORTUGUESE_KEY

    def test_european_portuguese(self) -> None:
        """Other Portuguese territories use the language key."""
        assert plural_language_key("pt_PT", KNOWN) == "pt"

    def test_three_letter_language_known(self) -> None:
        """Known three-letter languages are used in full."""
        assert plural_language_key("fil_PH", KNOWN) == "fil"

    def test_unknown_language_truncated(self) -> None:
        """Unknown languages fall back to their two-letter prefix."""
        assert plural_language_key("frr", KNOWN) == "fr"
        assert plural_language_key("xyz", KNOWN) == "xy"

    def test_results_are_cached(self) -> None:
        """Repeated calls hit the cache."""
        plural_language_key.cache_clear()
        plural_language_key("en_GB", KNOWN)
        plural_language_key("en_GB", KNOWN)
        assert plural_language_key.cache_info().hits == 1
