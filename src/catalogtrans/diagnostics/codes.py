"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for catalogue and plural errors.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Catalogue lifecycle errors (initialization, loading)
        2000-2999: Lookup conditions (missing locale, domain, message)
        3000-3999: Plural resolution errors
    """

    # Catalogue lifecycle (1000-1999)
    CATALOGUE_NOT_INITIALIZED = 1001
    CATALOGUE_EMPTY = 1002
    CATALOGUE_INVALID = 1003
    LOAD_TYPE_INVALID = 1004

    # Lookup (2000-2999)
    MESSAGE_NOT_FOUND = 2001
    DOMAIN_NOT_FOUND = 2002
    LOCALE_NOT_FOUND = 2003

    # Plural resolution (3000-3999)
    COUNT_INVALID = 3001
    NO_VARIANTS = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[CATALOGUE_EMPTY]: The given catalogue is empty
              = help: Pass a mapping of locale -> domain -> id -> template

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
