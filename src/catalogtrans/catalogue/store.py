"""In-memory message catalogue.

Stores raw templates in an explicit three-level mapping
(locale -> domain -> message id -> template). Lookups report which level was
absent instead of returning None, so callers can tell a missing locale from a
missing domain or message.

Keys are case-sensitive and never normalized.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from catalogtrans.catalogue.types import DomainName, LocaleCode, MessageId, RawTemplate
from catalogtrans.diagnostics import CatalogueFormatError, Diagnostic, DiagnosticCode
from catalogtrans.enums import LookupStatus

__all__ = [
    "LookupResult",
    "MessageCatalogue",
]


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Result of looking up one message.

    Attributes:
        locale: Locale searched
        domain: Domain searched
        message_id: Message id searched
        status: Which level was found or missing
        template: Raw template when found, else None
    """

    locale: LocaleCode
    domain: DomainName
    message_id: MessageId
    status: LookupStatus
    template: RawTemplate | None = None

    @property
    def found(self) -> bool:
        """True if the template exists."""
        return self.status is LookupStatus.FOUND


def _format_error(message: str) -> CatalogueFormatError:
    return CatalogueFormatError(
        Diagnostic(
            code=DiagnosticCode.CATALOGUE_INVALID,
            message=message,
            hint="Expected locale -> domain -> id -> non-empty template string",
        )
    )


def _check_template(path: str, template: object) -> RawTemplate:
    if not isinstance(template, str):
        msg = f"Template at {path} must be a string, got {type(template).__name__}"
        raise _format_error(msg)
    if not template:
        msg = f"Template at {path} is empty"
        raise _format_error(msg)
    return template


def _check_level(path: str, value: object) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        msg = f"{path} must be a mapping, got {type(value).__name__}"
        raise _format_error(msg)
    for key in value:
        if not isinstance(key, str):
            msg = f"Keys of {path} must be strings, got {key!r}"
            raise _format_error(msg)
    return value


class MessageCatalogue:
    """Three-level catalogue of raw message templates.

    Example:
        >>> catalogue = MessageCatalogue.from_mapping(
        ...     {"en": {"messages": {"hello": "Hello"}}}
        ... )
        >>> catalogue.lookup("en", "messages", "hello").template
        'Hello'
        >>> catalogue.lookup("fr", "messages", "hello").status
        <LookupStatus.LOCALE_MISSING: 'locale_missing'>
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[LocaleCode, dict[DomainName, dict[MessageId, RawTemplate]]] = {}

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> MessageCatalogue:
        """Build a catalogue from a nested mapping.

        The input is validated and copied; later changes to it do not affect
        the catalogue.

        Args:
            data: Mapping of locale -> domain -> id -> template

        Returns:
            New MessageCatalogue (possibly empty)

        Raises:
            CatalogueFormatError: If any level is not a mapping with string
                keys, or any template is not a non-empty string
        """
        catalogue = cls()
        for locale, domains in _check_level("catalogue", data).items():
            # Locales and domains without messages are kept so that
            # get_domains() and lookups report them as present.
            locale_entry = catalogue._data.setdefault(locale, {})
            for domain, messages in _check_level(f"catalogue[{locale!r}]", domains).items():
                path = f"catalogue[{locale!r}][{domain!r}]"
                domain_entry = locale_entry.setdefault(domain, {})
                for message_id, template in _check_level(path, messages).items():
                    domain_entry[message_id] = _check_template(f"{path}[{message_id!r}]", template)
        return catalogue

    @property
    def is_empty(self) -> bool:
        """True if the catalogue has no locales."""
        return not self._data

    def __len__(self) -> int:
        """Total number of messages across all locales and domains."""
        return sum(
            len(messages) for domains in self._data.values() for messages in domains.values()
        )

    def __contains__(self, locale: object) -> bool:
        return locale in self._data

    def __iter__(self) -> Iterator[LocaleCode]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"MessageCatalogue(locales={list(self._data)!r}, messages={len(self)})"

    def locales(self) -> tuple[LocaleCode, ...]:
        """Locales in insertion order."""
        return tuple(self._data)

    def domains(self, locale: LocaleCode) -> tuple[DomainName, ...]:
        """Domains present for a locale (empty if the locale is absent)."""
        return tuple(self._data.get(locale, ()))

    def message_ids(self, locale: LocaleCode, domain: DomainName) -> tuple[MessageId, ...]:
        """Message ids of one locale/domain pair (empty if either is absent)."""
        return tuple(self._data.get(locale, {}).get(domain, ()))

    def lookup(self, locale: LocaleCode, domain: DomainName, message_id: MessageId) -> LookupResult:
        """Find the raw template for one message.

        Args:
            locale: Locale code
            domain: Domain name
            message_id: Message id

        Returns:
            LookupResult whose status names the first missing level
        """
        domains = self._data.get(locale)
        if domains is None:
            return LookupResult(locale, domain, message_id, LookupStatus.LOCALE_MISSING)
        messages = domains.get(domain)
        if messages is None:
            return LookupResult(locale, domain, message_id, LookupStatus.DOMAIN_MISSING)
        template = messages.get(message_id)
        if template is None:
            return LookupResult(locale, domain, message_id, LookupStatus.MESSAGE_MISSING)
        return LookupResult(locale, domain, message_id, LookupStatus.FOUND, template)

    def contains(self, locale: LocaleCode, domain: DomainName, message_id: MessageId) -> bool:
        """True if the template for locale/domain/id exists."""
        return self.lookup(locale, domain, message_id).found

    def set(
        self,
        locale: LocaleCode,
        domain: DomainName,
        message_id: MessageId,
        template: RawTemplate,
    ) -> None:
        """Insert or overwrite one template, creating missing levels.

        Raises:
            CatalogueFormatError: If template is not a non-empty string
        """
        path = f"catalogue[{locale!r}][{domain!r}][{message_id!r}]"
        checked = _check_template(path, template)
        self._data.setdefault(locale, {}).setdefault(domain, {})[message_id] = checked

    def restrict(
        self,
        domains: Iterable[DomainName],
        locales: Iterable[LocaleCode],
    ) -> tuple[dict[LocaleCode, dict[DomainName, dict[MessageId, RawTemplate]]], list[LookupResult]]:
        """Copy the requested locale/domain pairs into a plain nested dict.

        Args:
            domains: Domains to keep
            locales: Locales to keep

        Returns:
            (partial catalogue, skipped pairs). Each skipped pair is reported
            as a LookupResult with an empty message id and a LOCALE_MISSING
            or DOMAIN_MISSING status. Locales whose domains were all skipped
            are omitted from the partial catalogue.
        """
        domain_list = list(domains)
        selected: dict[LocaleCode, dict[DomainName, dict[MessageId, RawTemplate]]] = {}
        skipped: list[LookupResult] = []
        for locale in locales:
            available = self._data.get(locale)
            if available is None:
                skipped.append(LookupResult(locale, "", "", LookupStatus.LOCALE_MISSING))
                continue
            for domain in domain_list:
                if domain in available:
                    selected.setdefault(locale, {})[domain] = dict(available[domain])
                else:
                    skipped.append(LookupResult(locale, domain, "", LookupStatus.DOMAIN_MISSING))
        return selected, skipped

    def to_dict(self) -> dict[LocaleCode, dict[DomainName, dict[MessageId, RawTemplate]]]:
        """Deep copy of the catalogue as plain dicts."""
        return {
            locale: {domain: dict(messages) for domain, messages in domains.items()}
            for locale, domains in self._data.items()
        }
