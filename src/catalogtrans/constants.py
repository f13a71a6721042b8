"""Shared constants for catalogtrans.

Centralizes defaults used by the translator, the catalogue and the plural
engine. Placing constants here avoids circular imports between the
``plural`` and ``catalogue`` packages.

Constants are grouped by domain:
- Translator defaults: fallback locale, default domain, plural separator
- Plural parameters: recognized count keys and the implicit count
- Cache limits: memory bounds for parsed templates

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Translator defaults
    "DEFAULT_FALLBACK_LOCALE",
    "DEFAULT_DOMAIN",
    "DEFAULT_PLURAL_SEPARATOR",
    # Plural parameters
    "COUNT_PARAMETER_KEYS",
    "DEFAULT_COUNT",
    # Cache limits
    "MAX_TEMPLATE_CACHE_SIZE",
    "MAX_LOCALE_KEY_CACHE_SIZE",
]

# ============================================================================
# TRANSLATOR DEFAULTS
# ============================================================================

# Locale consulted when a message is absent from the requested locale.
DEFAULT_FALLBACK_LOCALE: str = "en"

# Domain used when the caller does not name one.
DEFAULT_DOMAIN: str = "messages"

# Character separating plural variants inside a raw template.
DEFAULT_PLURAL_SEPARATOR: str = "|"

# ============================================================================
# PLURAL PARAMETERS
# ============================================================================

# Parameter keys carrying the plural count, in lookup order.
# Both spellings are aliases: "%count%" follows the percent placeholder
# convention, "{{ count }}" the Twig-style convention.
COUNT_PARAMETER_KEYS: tuple[str, ...] = ("%count%", "{{ count }}")

# Count used when no count parameter is supplied.
DEFAULT_COUNT: int = 1

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum parsed templates kept in memory (keyed by template + separator).
# A typical catalogue has fewer plural messages than this.
MAX_TEMPLATE_CACHE_SIZE: int = 1024

# Maximum cached locale -> plural rule key computations.
MAX_LOCALE_KEY_CACHE_SIZE: int = 128
