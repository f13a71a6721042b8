"""catalogtrans - catalogue-based translation with plural variant selection.

Resolves a message id, a locale and runtime parameters into text from a
precomputed translation catalogue (locale -> domain -> id -> template).
Templates may carry '|'-separated plural variants guarded by explicit sets
and intervals or selected by per-language plural position rules.

Public API:
    Translator - Catalogue lookup with locale fallback, pluralization, substitution
    TranslatorConfig - Static translator options
    MessageCatalogue - Three-level template storage
    UntranslatedMessage - Record passed to the untranslated-message notifier
    LoadType - Catalogue load modes
    pluralize - Select the plural variant of a raw template
    get_plural_position - Plural position for a count and locale

Exceptions:
    TranslatorError - Base exception class
    CatalogueNotInitializedError - Catalogue used before loading
    EmptyCatalogueError - Explicit load of an empty catalogue
    CatalogueFormatError - Malformed catalogue data
    InvalidLoadTypeError - Unknown load mode
    InvalidCountError - Non-numeric plural count

Submodules:
    catalogtrans.plural - Template parser, conditions, plural rules, resolver
    catalogtrans.catalogue - Storage, loaders and type aliases
    catalogtrans.diagnostics - Error types and diagnostic codes
"""

from .catalogue import MessageCatalogue, UntranslatedMessage
from .config import TranslatorConfig
from .diagnostics import (
    CatalogueFormatError,
    CatalogueNotInitializedError,
    EmptyCatalogueError,
    InvalidCountError,
    InvalidLoadTypeError,
    TranslatorError,
)
from .enums import LoadType
from .plural import get_plural_position, pluralize
from .translator import Translator

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("catalogtrans")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogueFormatError",
    "CatalogueNotInitializedError",
    "EmptyCatalogueError",
    "InvalidCountError",
    "InvalidLoadTypeError",
    "LoadType",
    "MessageCatalogue",
    "Translator",
    "TranslatorConfig",
    "TranslatorError",
    "UntranslatedMessage",
    "__version__",
    "get_plural_position",
    "pluralize",
]
