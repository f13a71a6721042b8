"""Locale utilities for BCP-47 to POSIX conversion and plural rule keys.

Catalogue keys are opaque and case-sensitive, so lookups never normalize
locales. Normalization is applied only when choosing a plural rule family.

Python 3.13+.
"""

from __future__ import annotations

import functools

from babel.core import parse_locale

from catalogtrans.constants import MAX_LOCALE_KEY_CACHE_SIZE

__all__ = [
    "BRAZILIAN_PORTUGUESE_KEY",
    "normalize_locale",
    "plural_language_key",
    "split_language",
]

# Internal alias for pt_BR, whose plural rule differs from European Portuguese.
BRAZILIAN_PORTUGUESE_KEY = "xbr"


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def split_language(locale_code: str) -> tuple[str, str | None]:
    """Split a locale code into lowercase language and uppercase territory.

    Uses Babel's identifier parser. Identifiers Babel rejects (digits in the
    language, stray separators) fall back to the text before the first
    underscore with no territory.

    Args:
        locale_code: Locale code in BCP-47 or POSIX form

    Returns:
        (language, territory) tuple; territory is None when absent

    Example:
        >>> split_language("pt-BR")
        ('pt', 'BR')
        >>> split_language("sr_Latn_RS")
        ('sr', 'RS')
    """
    normalized = normalize_locale(locale_code)
    try:
        parts = parse_locale(normalized)
    except ValueError:
        return normalized.split("_", 1)[0].lower(), None
    return parts[0], parts[1]


@functools.lru_cache(maxsize=MAX_LOCALE_KEY_CACHE_SIZE)
def plural_language_key(locale_code: str, known_keys: frozenset[str]) -> str:
    """Get the plural rule table key for a locale.

    Resolution order:
    1. pt_BR (any case or separator) maps to the ``xbr`` alias
    2. The full language subtag when it is a known key (``fil``, ``fur``)
    3. The two-letter prefix of the language subtag

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)
        known_keys: Keys present in the plural rule table

    Returns:
        Rule table key; may be unknown to the table, in which case the
        caller applies its default rule

    Example:
        >>> keys = frozenset({"en", "fil", "xbr"})
        >>> plural_language_key("pt_BR", keys)
        'xbr'
        >>> plural_language_key("fil_PH", keys)
        'fil'
        >>> plural_language_key("en-GB", keys)
        'en'
    """
    language, territory = split_language(locale_code)
    if language == "pt" and territory == "BR":
        return BRAZILIAN_PORTUGUESE_KEY
    if language in known_keys:
        return language
    return language[:2]
