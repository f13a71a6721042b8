"""Plural variant resolution.

Combines the template parser, the explicit condition matcher and the plural
position table:

1. Explicit rules are tried in declaration order; the first match wins.
2. Otherwise the locale's plural rule picks a standard variant by position.
3. An out-of-range position falls back to the first standard variant.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping

from catalogtrans.constants import COUNT_PARAMETER_KEYS, DEFAULT_COUNT, DEFAULT_PLURAL_SEPARATOR
from catalogtrans.plural.numbers import Number, coerce_count
from catalogtrans.plural.plural_rules import get_plural_position
from catalogtrans.plural.template import ParsedMessage, parse_template

__all__ = [
    "extract_count",
    "pluralize",
    "select_variant",
]


def extract_count(parameters: Mapping[str, object] | None) -> Number:
    """Read the plural count from message parameters.

    ``%count%`` and ``{{ count }}`` are aliases; the first one present with a
    value other than None or "" is used. Zero is a valid count.

    Args:
        parameters: Message parameters (may be None)

    Returns:
        Coerced count, or 1 when no count parameter is given

    Raises:
        InvalidCountError: If the count value is not numeric
    """
    if not parameters:
        return DEFAULT_COUNT
    for key in COUNT_PARAMETER_KEYS:
        value = parameters.get(key)
        if value is not None and value != "":
            return coerce_count(value)
    return DEFAULT_COUNT


def select_variant(parsed: ParsedMessage, count: Number, locale: str) -> str | None:
    """Pick the variant of a parsed message for a count.

    Args:
        parsed: Parsed template
        count: Numeric count
        locale: Locale used for the plural position

    Returns:
        Variant text, or None if no explicit rule matches and there are no
        standard variants
    """
    for rule in parsed.explicit:
        if rule.condition.matches(count):
            return rule.text

    if not parsed.standard:
        return None
    position = get_plural_position(count, locale)
    if position < len(parsed.standard):
        return parsed.standard[position]
    return parsed.standard[0]


def pluralize(
    template: str,
    parameters: Mapping[str, object] | None,
    locale: str,
    separator: str = DEFAULT_PLURAL_SEPARATOR,
) -> str | None:
    """Resolve a raw template to the variant matching the count parameter.

    Args:
        template: Raw template text
        parameters: Message parameters carrying the count
        locale: Locale used for the plural position
        separator: Variant separator

    Returns:
        Selected variant text; a template without separators is returned
        unchanged. None when the template has no usable variant.

    Raises:
        InvalidCountError: If the count value is not numeric

    Example:
        >>> template = "{0} No apples|{1} One apple|]1,Inf] %count% apples"
        >>> pluralize(template, {"%count%": 0}, "en")
        'No apples'
        >>> pluralize(template, {"%count%": 5}, "en")
        '%count% apples'
        >>> pluralize("One apple|%count% apples", {"%count%": 3}, "en")
        '%count% apples'
    """
    if separator not in template:
        return template
    count = extract_count(parameters)
    return select_variant(parse_template(template, separator), count, locale)
