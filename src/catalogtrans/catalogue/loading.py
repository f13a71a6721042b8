"""Catalogue loading infrastructure for Translator.

Provides the protocol for catalogue loaders, concrete loaders for in-memory
mappings, serialized JSON documents and JSON files, and the record passed to
the untranslated-message notifier.

Components:
    CatalogueLoader - Protocol for loading a whole catalogue (structural typing)
    MappingCatalogueLoader - Loader wrapping an in-memory mapping
    JsonCatalogueLoader - Loader decoding a serialized JSON document
    PathCatalogueLoader - Loader reading a JSON document from disk
    UntranslatedMessage - Immutable record of a missing translation

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from catalogtrans.catalogue.store import MessageCatalogue
from catalogtrans.catalogue.types import CatalogueData, DomainName, LocaleCode, MessageId
from catalogtrans.diagnostics import CatalogueFormatError, Diagnostic, DiagnosticCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "CatalogueLoader",
    # Concrete loaders
    "MappingCatalogueLoader",
    "JsonCatalogueLoader",
    "PathCatalogueLoader",
    # Decoding
    "decode_catalogue",
    # Miss observability
    "UntranslatedMessage",
]


class CatalogueLoader(Protocol):
    """Protocol for loading a complete catalogue.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom loaders.

    Example:
        >>> class StaticLoader:
        ...     def load(self) -> MessageCatalogue:
        ...         return MessageCatalogue.from_mapping({"en": {"messages": {"hi": "Hi"}}})
        ...     def describe_source(self) -> str:
        ...         return "static"
        ...
        >>> translator = Translator().load_catalogue(StaticLoader(), LoadType.LOADER)
    """

    def load(self) -> MessageCatalogue:
        """Load and validate the catalogue.

        Returns:
            MessageCatalogue (possibly empty)

        Raises:
            CatalogueFormatError: If the source does not hold a valid catalogue
            OSError: If the source cannot be read
        """

    def describe_source(self) -> str:
        """Return human-readable source description for diagnostics."""
        return "<catalogue>"


def decode_catalogue(document: str | bytes) -> MessageCatalogue:
    """Decode a serialized JSON catalogue.

    Args:
        document: JSON text of the form {locale: {domain: {id: template}}}

    Returns:
        Validated MessageCatalogue

    Raises:
        CatalogueFormatError: If the document is not valid JSON or does not
            have the catalogue shape

    Example:
        >>> decode_catalogue('{"en": {"messages": {"hi": "Hi"}}}').locales()
        ('en',)
    """
    try:
        data = json.loads(document)
    except json.JSONDecodeError as e:
        raise CatalogueFormatError(
            Diagnostic(
                code=DiagnosticCode.CATALOGUE_INVALID,
                message=f"Serialized catalogue is not valid JSON: {e.msg} (line {e.lineno})",
                hint="Serialize the catalogue with json.dumps()",
            )
        ) from e
    return MessageCatalogue.from_mapping(data)


@dataclass(frozen=True, slots=True)
class MappingCatalogueLoader:
    """Loader for a catalogue already held in memory.

    Attributes:
        data: Nested mapping locale -> domain -> id -> template
    """

    data: CatalogueData

    def load(self) -> MessageCatalogue:
        """Validate and copy the mapping."""
        return MessageCatalogue.from_mapping(self.data)

    def describe_source(self) -> str:
        """Return human-readable source description for diagnostics."""
        return f"<mapping with {len(self.data)} locale(s)>"


@dataclass(frozen=True, slots=True)
class JsonCatalogueLoader:
    """Loader for a serialized JSON catalogue (e.g. an embedded annotation payload).

    Attributes:
        document: JSON text
    """

    document: str | bytes

    def load(self) -> MessageCatalogue:
        """Decode the JSON document."""
        return decode_catalogue(self.document)

    def describe_source(self) -> str:
        """Return human-readable source description for diagnostics."""
        return f"<json document, {len(self.document)} chars>"


@dataclass(frozen=True, slots=True)
class PathCatalogueLoader:
    """Loader reading a JSON catalogue dump from disk.

    Example:
        >>> loader = PathCatalogueLoader("translations/catalogue.json")
        >>> translator = Translator().load_catalogue(loader, LoadType.LOADER)

    Attributes:
        path: Path to a UTF-8 JSON file
    """

    path: str | Path

    def load(self) -> MessageCatalogue:
        """Read and decode the file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
            CatalogueFormatError: If the file is not a valid catalogue
        """
        return decode_catalogue(Path(self.path).read_text(encoding="utf-8"))

    def describe_source(self) -> str:
        """Return human-readable source description for diagnostics."""
        return str(self.path)


@dataclass(frozen=True, slots=True)
class UntranslatedMessage:
    """Information about a message missing from the catalogue.

    Provided to the on_untranslated notifier when neither the requested
    locale nor the fallback locale holds the message.

    Attributes:
        message_id: The message identifier that was requested
        domain: The domain searched
        locale: The requested locale (None if no locale was known)

    Example:
        >>> missing: list[UntranslatedMessage] = []
        >>> translator = Translator(catalogue, on_untranslated=missing.append)
        >>> translator.translate("nope")
        'nope'
        >>> missing[0].message_id
        'nope'
    """

    message_id: MessageId
    domain: DomainName
    locale: LocaleCode | None
