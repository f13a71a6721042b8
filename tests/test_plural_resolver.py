"""Tests for plural variant resolution.

Covers count extraction (both parameter aliases, zero, strings, invalid
values), explicit-rule precedence and ordering, positional fallback and
separator-free templates.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from catalogtrans.diagnostics import InvalidCountError
from catalogtrans.plural.resolver import extract_count, pluralize, select_variant
from catalogtrans.plural.template import parse_template
from tests.strategies.catalogue import locale_codes
from tests.strategies.templates import counts, integer_counts, separator_free_templates

APPLES = "{0} No apples|{1} One apple|]1,Inf] %count% apples"


class TestExtractCount:
    """Count parameters are read and coerced."""

    def test_default_is_one(self) -> None:
        """No parameters means a count of 1."""
        assert extract_count(None) == 1
        assert extract_count({}) == 1
        assert extract_count({"%name%": "Anna"}) == 1

    def test_percent_key(self) -> None:
        """%count% is recognized."""
        assert extract_count({"%count%": 7}) == 7

    def test_twig_key(self) -> None:
        """{{ count }} is recognized as an alias."""
        assert extract_count({"{{ count }}": 7}) == 7

    def test_percent_key_takes_precedence(self) -> None:
        """%count% is consulted before {{ count }}."""
        assert extract_count({"{{ count }}": 2, "%count%": 3}) == 3

    def test_empty_value_falls_through(self) -> None:
        """An empty or None %count% defers to the alias, then to 1."""
        assert extract_count({"%count%": "", "{{ count }}": 4}) == 4
        assert extract_count({"%count%": None}) == 1

    def test_zero_is_honoured(self) -> None:
        """Zero is a real count, not a missing one."""
        assert extract_count({"%count%": 0}) == 0

    def test_numeric_strings(self) -> None:
        """Integral strings become ints, fractional strings Decimals."""
        assert extract_count({"%count%": "12"}) == 12
        assert isinstance(extract_count({"%count%": "12"}), int)
        assert extract_count({"%count%": " 1.5 "}) == Decimal("1.5")

    @pytest.mark.parametrize("value", ["many", "nan", "Infinity", True, [1], float("inf")])
    def test_invalid_counts(self, value: object) -> None:
        """Non-numeric counts raise InvalidCountError."""
        with pytest.raises(InvalidCountError) as exc_info:
            extract_count({"%count%": value})
        assert exc_info.value.value is value

    def test_invalid_count_is_value_error(self) -> None:
        """InvalidCountError can be caught as ValueError."""
        with pytest.raises(ValueError, match="Invalid plural count"):
            extract_count({"%count%": "lots"})


class TestExplicitRules:
    """Explicit rules are tried before standard variants."""

    def test_zero(self) -> None:
        """{0} matches zero; the returned text excludes the condition."""
        assert pluralize(APPLES, {"%count%": 0}, "en") == "No apples"

    def test_one(self) -> None:
        """{1} matches one."""
        assert pluralize(APPLES, {"%count%": 1}, "en") == "One apple"

    def test_open_interval(self) -> None:
        """]1,Inf] catches everything above one."""
        assert pluralize(APPLES, {"%count%": 5}, "en") == "%count% apples"

    def test_explicit_before_standard_regardless_of_position(self) -> None:
        """A later explicit rule beats an earlier standard variant."""
        template = "one: apple|other: apples|{5} five apples"
        assert pluralize(template, {"%count%": 5}, "en") == "five apples"
        assert pluralize(template, {"%count%": 4}, "en") == "apples"

    def test_first_matching_rule_wins(self) -> None:
        """Declaration order, not specificity, breaks ties."""
        template = "[0,Inf] any|{3} three"
        assert pluralize(template, {"%count%": 3}, "en") == "any"

    def test_unmatched_explicit_rules_fall_back_to_position(self) -> None:
        """When no rule matches, the plural position decides."""
        template = "{0} none|one thing|%count% things"
        assert pluralize(template, {"%count%": 1}, "en") == "one thing"
        assert pluralize(template, {"%count%": 2}, "en") == "%count% things"

    def test_string_count_matches_set(self) -> None:
        """Numeric strings compare equal to set members."""
        assert pluralize(APPLES, {"%count%": "1"}, "en") == "One apple"

    def test_twig_count_key(self) -> None:
        """The {{ count }} alias drives selection too."""
        assert pluralize(APPLES, {"{{ count }}": 0}, "en") == "No apples"


class TestStandardVariants:
    """Positional selection and its fallbacks."""

    def test_locale_rule_selects_variant(self) -> None:
        """Russian uses three variants."""
        template = "%count% яблоко|%count% яблока|%count% яблок"
        assert pluralize(template, {"%count%": 1}, "ru") == "%count% яблоко"
        assert pluralize(template, {"%count%": 3}, "ru") == "%count% яблока"
        assert pluralize(template, {"%count%": 5}, "ru") == "%count% яблок"

    def test_out_of_range_position_uses_first_variant(self) -> None:
        """A two-variant Arabic message falls back to the first variant."""
        assert pluralize("first|second", {"%count%": 200}, "ar") == "first"

    def test_no_standard_variants_gives_none(self) -> None:
        """Only explicit rules, none matching: no variant."""
        assert pluralize("{0} none|{1} one", {"%count%": 5}, "en") is None

    def test_select_variant_directly(self) -> None:
        """select_variant works on an already parsed message."""
        parsed = parse_template("une pomme|%count% pommes")
        assert select_variant(parsed, 0, "fr") == "une pomme"
        assert select_variant(parsed, 2, "fr") == "%count% pommes"

    def test_custom_separator(self) -> None:
        """The separator is configurable."""
        assert pluralize("apple;apples", {"%count%": 2}, "en", ";") == "apples"


class TestSeparatorFreeTemplates:
    """Templates without a separator are never altered."""

    @given(separator_free_templates(), counts(), locale_codes())
    def test_returned_unchanged(self, template: str, count: object, locale: str) -> None:
        """Any count and locale returns the template as-is."""
        assert pluralize(template, {"%count%": count}, locale) == template

    def test_condition_looking_template_unchanged(self) -> None:
        """A lone condition-prefixed text is not treated as a rule."""
        assert pluralize("{0} No apples", {"%count%": 3}, "en") == "{0} No apples"

    def test_label_looking_template_unchanged(self) -> None:
        """A lone label-prefixed text keeps its label."""
        assert pluralize("Note: read this", None, "en") == "Note: read this"

    @given(st.integers(min_value=2, max_value=10_000))
    def test_two_form_locale_plural(self, count: int) -> None:
        """In English every count above 1 picks the plural variant."""
        assert pluralize("apple|apples", {"%count%": count}, "en") == "apples"


@pytest.mark.fuzz
class TestArbitraryTemplates:
    """Resolution is total over arbitrary template text."""

    @given(st.text(max_size=200), integer_counts(), locale_codes())
    def test_result_is_part_of_template(self, template: str, count: int, locale: str) -> None:
        """Any template resolves to a substring of itself or to None."""
        result = pluralize(template, {"%count%": count}, locale)
        assert result is None or result in template
