"""Message catalogue package.

Provides the catalogue storage, loaders and type aliases used by Translator.

Submodules:
    types   - PEP 695 type aliases (LocaleCode, DomainName, MessageId, RawTemplate)
    store   - MessageCatalogue, LookupResult
    loading - CatalogueLoader protocol, mapping/JSON/path loaders,
              UntranslatedMessage

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from catalogtrans.catalogue.loading import (
    CatalogueLoader,
    JsonCatalogueLoader,
    MappingCatalogueLoader,
    PathCatalogueLoader,
    UntranslatedMessage,
    decode_catalogue,
)
from catalogtrans.catalogue.store import LookupResult, MessageCatalogue
from catalogtrans.catalogue.types import (
    CatalogueData,
    DomainName,
    LocaleCode,
    MessageId,
    RawTemplate,
)
from catalogtrans.enums import LookupStatus

__all__ = [
    # Storage
    "MessageCatalogue",
    "LookupResult",
    "LookupStatus",
    # Loader protocol and implementations
    "CatalogueLoader",
    "MappingCatalogueLoader",
    "JsonCatalogueLoader",
    "PathCatalogueLoader",
    "decode_catalogue",
    # Miss observability
    "UntranslatedMessage",
    # Type aliases for user code type annotations
    "CatalogueData",
    "DomainName",
    "LocaleCode",
    "MessageId",
    "RawTemplate",
]
