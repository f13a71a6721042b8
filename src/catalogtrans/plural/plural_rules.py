"""Plural position selection for gettext-style plural rule families.

Maps a count and a locale to the 0-based index of the standard plural variant
to use. Languages are grouped into families sharing one rule; each family
defines how many variants a fully translated message carries.

This is the classic table used by gettext-derived translation systems, not
the full CLDR rule set: categories are positional, and ordinals, decimals
operands (v, f, t) and gender are not modelled.

Reference: https://www.gnu.org/software/gettext/manual/html_node/Plural-forms.html

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from catalogtrans.locale_utils import plural_language_key
from catalogtrans.plural.numbers import Number, truncated_mod

__all__ = [
    "PLURAL_RULES",
    "get_plural_position",
    "plural_form_count",
]

PluralRule: TypeAlias = Callable[[Number], int]


def _no_plural(n: Number) -> int:  # noqa: ARG001 - uniform rule signature
    return 0


def _one_other(n: Number) -> int:
    return 0 if n == 1 else 1


def _zero_one_other(n: Number) -> int:
    return 0 if n in (0, 1) else 1


def _slavic(n: Number) -> int:
    mod10 = truncated_mod(n, 10)
    mod100 = truncated_mod(n, 100)
    if mod10 == 1 and mod100 != 11:
        return 0
    if 2 <= mod10 <= 4 and (mod100 < 10 or mod100 >= 20):
        return 1
    return 2


def _czech(n: Number) -> int:
    if n == 1:
        return 0
    if 2 <= n <= 4:
        return 1
    return 2


def _irish(n: Number) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2


def _lithuanian(n: Number) -> int:
    mod10 = truncated_mod(n, 10)
    mod100 = truncated_mod(n, 100)
    if mod10 == 1 and mod100 != 11:
        return 0
    if mod10 >= 2 and (mod100 < 10 or mod100 >= 20):
        return 1
    return 2


def _slovenian(n: Number) -> int:
    mod100 = truncated_mod(n, 100)
    if mod100 == 1:
        return 0
    if mod100 == 2:
        return 1
    if mod100 in (3, 4):
        return 2
    return 3


def _macedonian(n: Number) -> int:
    return 0 if truncated_mod(n, 10) == 1 else 1


def _maltese(n: Number) -> int:
    mod100 = truncated_mod(n, 100)
    if n == 1:
        return 0
    if n == 0 or 1 < mod100 < 11:
        return 1
    if 10 < mod100 < 20:
        return 2
    return 3


def _latvian(n: Number) -> int:
    if n == 0:
        return 0
    if truncated_mod(n, 10) == 1 and truncated_mod(n, 100) != 11:
        return 1
    return 2


def _polish(n: Number) -> int:
    mod10 = truncated_mod(n, 10)
    mod100 = truncated_mod(n, 100)
    if n == 1:
        return 0
    if 2 <= mod10 <= 4 and (mod100 < 12 or mod100 > 14):
        return 1
    return 2


def _welsh(n: Number) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    if n in (8, 11):
        return 2
    return 3


def _romanian(n: Number) -> int:
    if n == 1:
        return 0
    if n == 0 or 0 < truncated_mod(n, 100) < 20:
        return 1
    return 2


def _arabic(n: Number) -> int:
    if n == 0:
        return 0
    if n == 1:
        return 1
    if n == 2:
        return 2
    if 3 <= n <= 10:
        return 3
    if 11 <= n <= 99:
        return 4
    return 5


# (rule, number of forms, language keys)
_FAMILIES: tuple[tuple[PluralRule, int, tuple[str, ...]], ...] = (
    (
        _no_plural, 1,
        ("bo", "dz", "id", "ja", "jv", "ka", "km", "kn", "ko", "ms", "th", "tr", "vi", "zh"),
    ),
    (
        _one_other, 2,
        (
            "af", "az", "bn", "bg", "ca", "da", "de", "el", "en", "eo", "es", "et",
            "eu", "fa", "fi", "fo", "fur", "fy", "gl", "gu", "ha", "he", "hu", "is",
            "it", "ku", "lb", "ml", "mn", "mr", "nah", "nb", "ne", "nl", "nn", "no",
            "om", "or", "pa", "pap", "ps", "pt", "so", "sq", "sv", "sw", "ta", "te",
            "tk", "ur", "zu",
        ),
    ),
    (
        _zero_one_other, 2,
        ("am", "bh", "fil", "fr", "gun", "hi", "ln", "mg", "nso", "xbr", "ti", "wa"),
    ),
    (_slavic, 3, ("be", "bs", "hr", "ru", "sr", "uk")),
    (_czech, 3, ("cs", "sk")),
    (_irish, 3, ("ga",)),
    (_lithuanian, 3, ("lt",)),
    (_slovenian, 4, ("sl",)),
    (_macedonian, 2, ("mk",)),
    (_maltese, 4, ("mt",)),
    (_latvian, 3, ("lv",)),
    (_polish, 3, ("pl",)),
    (_welsh, 4, ("cy",)),
    (_romanian, 3, ("ro",)),
    (_arabic, 6, ("ar",)),
)

PLURAL_RULES: dict[str, PluralRule] = {
    key: rule for rule, _forms, keys in _FAMILIES for key in keys
}
"""Language key -> plural rule. Unknown keys use a single form."""

_FORM_COUNTS: dict[str, int] = {
    key: forms for _rule, forms, keys in _FAMILIES for key in keys
}

_KNOWN_KEYS = frozenset(PLURAL_RULES)


def get_plural_position(count: Number, locale: str) -> int:
    """Select the standard plural variant index for a count.

    Total over all inputs: unknown locales select index 0.

    Args:
        count: Number to classify (integer or fractional)
        locale: Locale code (e.g., "ru", "pt_BR", "ar-SA")

    Returns:
        0-based index into the message's standard variants

    Examples:
        >>> get_plural_position(1, "en")
        0
        >>> get_plural_position(0, "en")
        1
        >>> get_plural_position(0, "fr")
        0
        >>> get_plural_position(22, "ru_RU")
        1
        >>> get_plural_position(15, "ar")
        4
        >>> get_plural_position(42, "ja")
        0
    """
    key = plural_language_key(locale, _KNOWN_KEYS)
    rule = PLURAL_RULES.get(key, _no_plural)
    return rule(count)


def plural_form_count(locale: str) -> int:
    """Number of standard variants a message needs for a locale.

    Args:
        locale: Locale code

    Returns:
        1, 2, 3, 4 or 6; 1 for unknown locales

    Example:
        >>> plural_form_count("pl")
        3
        >>> plural_form_count("ar_EG")
        6
    """
    return _FORM_COUNTS.get(plural_language_key(locale, _KNOWN_KEYS), 1)
