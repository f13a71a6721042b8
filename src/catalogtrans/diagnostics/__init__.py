"""Diagnostic system for translator errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CatalogueFormatError,
    CatalogueNotInitializedError,
    EmptyCatalogueError,
    InvalidCountError,
    InvalidLoadTypeError,
    TranslatorError,
)
from .templates import ErrorTemplate

__all__ = [
    "CatalogueFormatError",
    "CatalogueNotInitializedError",
    "Diagnostic",
    "DiagnosticCode",
    "EmptyCatalogueError",
    "ErrorTemplate",
    "InvalidCountError",
    "InvalidLoadTypeError",
    "TranslatorError",
]
