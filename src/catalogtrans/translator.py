"""Catalogue-backed message translation.

Translator ties together catalogue lookup with locale fallback, plural
variant selection and literal placeholder substitution:

    translate(id) -> get_message (requested locale, then fallback locale)
                  -> pluralize (explicit rules, then plural position)
                  -> replace_parameters

Lifecycle:
    A Translator starts uninitialized. A bulk load (constructor catalogue
    argument or load_catalogue()) or the first add() makes it usable.
    Resolution never mutates the catalogue; add() and load_catalogue() are
    single-writer operations and need external locking if called from
    several threads.

Error policy:
    Structural errors (uninitialized or empty catalogue, unknown load type,
    malformed catalogue data) raise TranslatorError subclasses. translate()
    catches them and returns the message id, so it never raises for catalogue
    or template problems. A missing message is not an error: the
    on_untranslated notifier is called and the id is used as the text.
    Exceptions raised by the notifier are logged, not propagated.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Self, TypeAlias

from catalogtrans.catalogue.loading import CatalogueLoader, UntranslatedMessage, decode_catalogue
from catalogtrans.catalogue.store import MessageCatalogue
from catalogtrans.catalogue.types import (
    CatalogueData,
    DomainName,
    LocaleCode,
    MessageId,
    RawTemplate,
)
from catalogtrans.config import TranslatorConfig
from catalogtrans.diagnostics import (
    CatalogueNotInitializedError,
    EmptyCatalogueError,
    ErrorTemplate,
    InvalidLoadTypeError,
    TranslatorError,
)
from catalogtrans.enums import LoadType, LookupStatus
from catalogtrans.plural.resolver import pluralize
from catalogtrans.substitution import replace_parameters

__all__ = ["Translator"]

logger = logging.getLogger(__name__)

UntranslatedNotifier: TypeAlias = Callable[[UntranslatedMessage], None]


def _as_list(values: Iterable[str] | str | None, default: str) -> list[str]:
    """Normalize a domains/locales argument; a bare string is one item."""
    match values:
        case None:
            return [default]
        case str():
            return [values]
        case Iterable():
            return list(values)
        case _:
            return [default]


class Translator:
    """Resolve message ids to translated, pluralized text.

    Example - Catalogue supplied directly:
        >>> translator = Translator(
        ...     {
        ...         "en": {"messages": {"apples": "{0} No apples|{1} One apple|]1,Inf] %count% apples"}},
        ...         "fr": {"messages": {"apples": "Une pomme|%count% pommes"}},
        ...     },
        ...     current_locale="fr",
        ... )
        >>> translator.translate("apples", {"%count%": 3})
        '3 pommes'
        >>> translator.translate("apples", {"%count%": 0}, locale="en")
        'No apples'

    Example - Incremental catalogue:
        >>> translator = Translator().add("hello", "Hello %name%!", locale="en")
        >>> translator.translate("hello", {"%name%": "Anna"})
        'Hello Anna!'

    Attributes:
        config: Static options (fallback locale, default domain, separator)
        current_locale: Locale used when a call does not name one
    """

    __slots__ = (
        "_catalogue",
        "_config",
        "_current_locale",
        "_on_untranslated",
    )

    def __init__(
        self,
        catalogue: CatalogueData | MessageCatalogue | None = None,
        *,
        config: TranslatorConfig | None = None,
        current_locale: LocaleCode | None = None,
        on_untranslated: UntranslatedNotifier | None = None,
    ) -> None:
        """Initialize the translator.

        Args:
            catalogue: Catalogue to load immediately (optional). When given,
                it is loaded with LoadType.CATALOGUE and must not be empty.
            config: Static options; defaults to TranslatorConfig()
            current_locale: Locale used when calls omit one; None falls back
                to config.fallback_locale
            on_untranslated: Optional notifier called once per missing
                message with an UntranslatedMessage record

        Raises:
            EmptyCatalogueError: If catalogue is given but empty
            CatalogueFormatError: If catalogue does not have the catalogue shape
        """
        self._config = config if config is not None else TranslatorConfig()
        self._current_locale = current_locale
        self._on_untranslated = on_untranslated
        self._catalogue: MessageCatalogue | None = None

        if catalogue is not None:
            self.load_catalogue(catalogue)

    def __repr__(self) -> str:
        return (
            f"Translator(locale={self.locale!r}, "
            f"fallback_locale={self._config.fallback_locale!r}, "
            f"initialized={self.is_initialized})"
        )

    @property
    def config(self) -> TranslatorConfig:
        """Get the static configuration (read-only)."""
        return self._config

    @property
    def current_locale(self) -> LocaleCode | None:
        """Get the locale used when a call does not name one."""
        return self._current_locale

    @current_locale.setter
    def current_locale(self, locale: LocaleCode | None) -> None:
        self._current_locale = locale

    @property
    def locale(self) -> LocaleCode:
        """Get the effective default locale: current locale, else fallback locale."""
        return self._current_locale or self._config.fallback_locale

    @property
    def is_initialized(self) -> bool:
        """True once a catalogue was loaded or a message added."""
        return self._catalogue is not None

    def _require_catalogue(self) -> MessageCatalogue:
        if self._catalogue is None:
            raise CatalogueNotInitializedError()
        return self._catalogue

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_catalogue(
        self,
        source: Any,
        load_type: LoadType = LoadType.CATALOGUE,
    ) -> Self:
        """Replace the catalogue with a bulk-loaded one.

        Args:
            source: Nested mapping or MessageCatalogue (CATALOGUE), JSON text
                (SERIALIZED), or a CatalogueLoader (LOADER)
            load_type: How to interpret source

        Returns:
            self, for chaining

        Raises:
            InvalidLoadTypeError: If load_type is not a LoadType
            EmptyCatalogueError: If the loaded catalogue has no locales
            CatalogueFormatError: If the data is malformed
        """
        catalogue: MessageCatalogue
        match load_type:
            case LoadType.CATALOGUE:
                if isinstance(source, MessageCatalogue):
                    catalogue = MessageCatalogue.from_mapping(source.to_dict())
                else:
                    catalogue = MessageCatalogue.from_mapping(source)
                description = "<catalogue>"
            case LoadType.SERIALIZED:
                catalogue = decode_catalogue(source)
                description = "<serialized>"
            case LoadType.LOADER:
                loader: CatalogueLoader = source
                catalogue = loader.load()
                description = loader.describe_source()
            case _:
                raise InvalidLoadTypeError(load_type)

        if catalogue.is_empty:
            raise EmptyCatalogueError()

        self._catalogue = catalogue
        logger.info(
            "Catalogue loaded from %s: %d locale(s), %d message(s)",
            description,
            len(catalogue.locales()),
            len(catalogue),
        )
        return self

    def add(
        self,
        key: MessageId,
        value: RawTemplate,
        domain: DomainName | None = None,
        locale: LocaleCode | None = None,
    ) -> Self:
        """Insert or overwrite one message.

        Initializes the catalogue and any missing locale/domain level on
        demand, and marks the translator usable.

        Args:
            key: Message id
            value: Raw template
            domain: Domain (default: config.default_domain)
            locale: Locale (default: current locale, then fallback locale)

        Returns:
            self, for chaining

        Raises:
            CatalogueFormatError: If value is not a non-empty string
        """
        target_locale = locale or self.locale
        target_domain = domain or self._config.default_domain

        catalogue = self._catalogue if self._catalogue is not None else MessageCatalogue()
        catalogue.set(target_locale, target_domain, key, value)
        self._catalogue = catalogue

        logger.debug("Added message '%s' to %s/%s", key, target_locale, target_domain)
        return self

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def has_message(
        self,
        message_id: MessageId,
        domain: DomainName | None = None,
        locale: LocaleCode | None = None,
    ) -> bool:
        """Check whether a message exists for exactly one locale (no fallback).

        Args:
            message_id: Message id
            domain: Domain (default: config.default_domain)
            locale: Locale (default: current locale, then fallback locale)

        Returns:
            True if catalogue[locale][domain][message_id] exists

        Raises:
            CatalogueNotInitializedError: If no catalogue is loaded
        """
        catalogue = self._require_catalogue()
        result = catalogue.lookup(
            locale or self.locale, domain or self._config.default_domain, message_id
        )
        if not result.found:
            self._log_miss(result.status, result.locale, result.domain, message_id)
        return result.found

    def get_message(
        self,
        message_id: MessageId,
        domain: DomainName | None = None,
        locale: LocaleCode | None = None,
    ) -> RawTemplate:
        """Find the raw template for a message, with locale fallback.

        Tries the requested locale (or the current locale), then the
        fallback locale. When neither holds the message, the
        on_untranslated notifier is called once and the id is returned.

        Args:
            message_id: Message id
            domain: Domain (default: config.default_domain)
            locale: Requested locale (default: current locale)

        Returns:
            Stored template, or message_id if untranslated

        Raises:
            CatalogueNotInitializedError: If no catalogue is loaded
        """
        catalogue = self._require_catalogue()
        target_domain = domain or self._config.default_domain
        requested = locale or self._current_locale

        # dict.fromkeys() removes duplicates while maintaining order
        candidates = dict.fromkeys(
            code for code in (requested, self._config.fallback_locale) if code
        )
        for candidate in candidates:
            result = catalogue.lookup(candidate, target_domain, message_id)
            if result.template is not None:
                return result.template
            self._log_miss(result.status, candidate, target_domain, message_id)

        self._notify_untranslated(message_id, target_domain, requested)
        return message_id

    def get_domains(self, locale: LocaleCode | None = None) -> tuple[DomainName, ...]:
        """Get the domains present for a locale.

        Args:
            locale: Locale (default: current locale, then fallback locale)

        Returns:
            Domain names in insertion order; empty if the locale is absent

        Raises:
            CatalogueNotInitializedError: If no catalogue is loaded
        """
        return self._require_catalogue().domains(locale or self.locale)

    def get_catalogue(
        self,
        domains: Iterable[DomainName] | DomainName | None = None,
        locales: Iterable[LocaleCode] | LocaleCode | None = None,
    ) -> dict[LocaleCode, dict[DomainName, dict[MessageId, RawTemplate]]]:
        """Get a partial copy of the catalogue.

        Unknown locales and locale/domain pairs are skipped with a warning.

        Args:
            domains: Domains to include (default: [config.default_domain])
            locales: Locales to include (default: [config.fallback_locale])

        Returns:
            Nested dict locale -> domain -> id -> template

        Raises:
            CatalogueNotInitializedError: If no catalogue is loaded
        """
        catalogue = self._require_catalogue()
        selected, skipped = catalogue.restrict(
            _as_list(domains, self._config.default_domain),
            _as_list(locales, self._config.fallback_locale),
        )
        for miss in skipped:
            if miss.status is LookupStatus.LOCALE_MISSING:
                diagnostic = ErrorTemplate.locale_not_found(miss.locale)
            else:
                diagnostic = ErrorTemplate.domain_not_found(miss.domain, miss.locale)
            logger.warning("%s", diagnostic.format_error())
        return selected

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def pluralize(
        self,
        template: RawTemplate,
        parameters: Mapping[str, object] | None = None,
        locale: LocaleCode | None = None,
    ) -> str | None:
        """Select the plural variant of a raw template.

        Args:
            template: Raw template
            parameters: Parameters carrying the count (``%count%`` or
                ``{{ count }}``)
            locale: Locale for the plural position (default: effective locale)

        Returns:
            Variant text, or None if the template has no usable variant

        Raises:
            InvalidCountError: If the count is not numeric
        """
        return pluralize(
            template, parameters, locale or self.locale, self._config.plural_separator
        )

    @staticmethod
    def replace_parameters(message: str, parameters: Mapping[str, object] | None) -> str:
        """Substitute literal placeholders (see catalogtrans.substitution)."""
        return replace_parameters(message, parameters)

    def translate(
        self,
        message_id: MessageId,
        parameters: Mapping[str, object] | None = None,
        domain: DomainName | None = None,
        locale: LocaleCode | None = None,
    ) -> str:
        """Translate a message.

        When a count is given as ``%count%`` (or ``{{ count }}``), the
        message is parsed for plural variants and one is chosen for the
        count and locale. Explicit set/interval rules are tried first in
        declaration order, then the locale's plural rule picks a standard
        variant by position. Labels such as ``one:`` are stripped.

        Never raises for catalogue or template problems: failures are logged
        and the message id is returned.

        Args:
            message_id: Message id
            parameters: Placeholder -> value; also carries the count
            domain: Domain (default: config.default_domain)
            locale: Locale (default: current locale, then fallback locale)

        Returns:
            Translated text, or message_id on failure
        """
        try:
            effective_locale = locale or self.locale
            template = self.get_message(message_id, domain, effective_locale)
            message = self.pluralize(template, parameters, effective_locale)
            if message is None:
                diagnostic = ErrorTemplate.no_variants(message_id, effective_locale)
                logger.warning("%s", diagnostic.format_error())
                message = template
            result = replace_parameters(message, parameters)
        except (TranslatorError, ValueError, TypeError, ArithmeticError) as e:
            logger.warning("Translation of '%s' failed: %s", message_id, e)
            return message_id

        logger.debug("Translated '%s': %s", message_id, result[:50])
        return result

    trans = translate

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    @staticmethod
    def _log_miss(
        status: LookupStatus,
        locale: LocaleCode,
        domain: DomainName,
        message_id: MessageId,
    ) -> None:
        match status:
            case LookupStatus.LOCALE_MISSING:
                logger.debug("%s not in catalogue", locale)
            case LookupStatus.DOMAIN_MISSING:
                logger.debug("domain %s not in %s", domain, locale)
            case _:
                logger.debug("id %s not in %s/%s", message_id, locale, domain)

    def _notify_untranslated(
        self,
        message_id: MessageId,
        domain: DomainName,
        locale: LocaleCode | None,
    ) -> None:
        diagnostic = ErrorTemplate.message_not_found(message_id, domain, locale)
        logger.info("%s", diagnostic.format_error())
        if self._on_untranslated is None:
            return
        try:
            self._on_untranslated(UntranslatedMessage(message_id, domain, locale))
        except Exception as e:  # pylint: disable=broad-exception-caught
            # Notifier errors never propagate out of lookups
            logger.warning("Untranslated-message notifier failed: %s", e)
