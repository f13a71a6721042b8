"""Type aliases for the catalogue domain.

Provides semantic type aliases used throughout the catalogue package
and by user code when annotating Translator call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from typing import TypeAlias

__all__ = [
    "CatalogueData",
    "DomainName",
    "LocaleCode",
    "MessageId",
    "RawTemplate",
]

MessageId: TypeAlias = str
"""Identifier for a message (e.g., 'apples.count', 'This value is not valid.')."""

LocaleCode: TypeAlias = str
"""Locale code as used for catalogue keys (e.g., 'en', 'fr', 'pt_BR')."""

DomainName: TypeAlias = str
"""Namespace grouping related messages (e.g., 'messages', 'validators')."""

RawTemplate: TypeAlias = str
"""Unparsed message text, possibly holding '|'-separated plural variants."""

CatalogueData: TypeAlias = Mapping[LocaleCode, Mapping[DomainName, Mapping[MessageId, RawTemplate]]]
"""Plain nested mapping: locale -> domain -> id -> template."""
