"""Enumerations for catalogtrans type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadType(StrEnum):
    """How a catalogue is handed to the translator.

    StrEnum provides automatic string conversion: str(LoadType.CATALOGUE) == "catalogue"
    """

    CATALOGUE = "catalogue"
    """In-memory mapping: locale -> domain -> id -> template"""

    SERIALIZED = "serialized"
    """JSON document carrying the same three-level structure"""

    LOADER = "loader"
    """Object implementing the CatalogueLoader protocol"""


class LookupStatus(StrEnum):
    """Outcome of a single catalogue lookup.

    Each absent level is reported separately: a missing locale is not the
    same condition as a missing domain or a missing message id.
    """

    FOUND = "found"
    """Template present at locale/domain/id"""

    LOCALE_MISSING = "locale_missing"
    """Locale not present in the catalogue"""

    DOMAIN_MISSING = "domain_missing"
    """Locale present, domain absent"""

    MESSAGE_MISSING = "message_missing"
    """Locale and domain present, message id absent"""


class ConditionKind(StrEnum):
    """Shape of an explicit plural condition."""

    SET = "set"
    """Finite set of integers: {1,2,3}"""

    INTERVAL = "interval"
    """Bounded or unbounded interval: ]1,Inf]"""


__all__ = [
    "ConditionKind",
    "LoadType",
    "LookupStatus",
]
