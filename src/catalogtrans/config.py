"""Translator configuration.

Provides a single frozen dataclass holding the static options a Translator
is constructed with.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from catalogtrans.constants import (
    DEFAULT_DOMAIN,
    DEFAULT_FALLBACK_LOCALE,
    DEFAULT_PLURAL_SEPARATOR,
)

__all__ = ["TranslatorConfig"]

# camelCase option names accepted for compatibility with JavaScript settings objects
_OPTION_ALIASES: dict[str, str] = {
    "fallbackLocale": "fallback_locale",
    "defaultDomain": "default_domain",
    "pluralSeparator": "plural_separator",
}


@dataclass(frozen=True, slots=True)
class TranslatorConfig:
    """Immutable configuration for Translator.

    All fields have sensible defaults; constructing ``TranslatorConfig()``
    with no arguments produces a usable configuration.

    Attributes:
        fallback_locale: Locale consulted when the requested locale lacks a
            message (default: "en").
        default_domain: Domain used when none is given (default: "messages").
        plural_separator: Separator between plural variants (default: "|").

    Example:
        >>> config = TranslatorConfig(fallback_locale="fr")
        >>> translator = Translator(catalogue, config=config)
        >>> translator.config.default_domain
        'messages'
    """

    fallback_locale: str = DEFAULT_FALLBACK_LOCALE
    default_domain: str = DEFAULT_DOMAIN
    plural_separator: str = DEFAULT_PLURAL_SEPARATOR

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If any option is not a non-empty string
        """
        for option in fields(self):
            value = getattr(self, option.name)
            if not isinstance(value, str) or not value:
                msg = f"{option.name} must be a non-empty string, got {value!r}"
                raise ValueError(msg)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> TranslatorConfig:
        """Build a configuration from a settings mapping.

        Accepts snake_case names and the camelCase names used by JavaScript
        settings objects (``fallbackLocale``, ``defaultDomain``,
        ``pluralSeparator``).

        Args:
            options: Option name -> value

        Returns:
            TranslatorConfig with the given options over the defaults

        Raises:
            ValueError: If an option name is unknown, given twice under both
                spellings, or has an invalid value

        Example:
            >>> TranslatorConfig.from_options({"fallbackLocale": "de"}).fallback_locale
            'de'
        """
        known = {option.name for option in fields(cls)}
        values: dict[str, Any] = {}
        for name, value in options.items():
            field_name = _OPTION_ALIASES.get(name, name)
            if field_name not in known:
                msg = f"Unknown translator option: {name!r}"
                raise ValueError(msg)
            if field_name in values:
                msg = f"Translator option given twice: {field_name!r}"
                raise ValueError(msg)
            values[field_name] = value
        return cls(**values)
