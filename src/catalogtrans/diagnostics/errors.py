"""Translator exception hierarchy with structured diagnostics.

Only structural problems are raised: using the translator before a catalogue
is loaded, loading an empty or malformed catalogue, an unknown load type, or
a count that cannot be read as a number. Missing translations and malformed
plural grammar are data conditions handled in-band.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class TranslatorError(Exception):
    """Base exception for all translator errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TranslatorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CatalogueNotInitializedError(TranslatorError):
    """Catalogue used before any load or add.

    The top-level translate() catches this and returns the message id.
    """

    def __init__(self) -> None:
        super().__init__(
            Diagnostic(
                code=DiagnosticCode.CATALOGUE_NOT_INITIALIZED,
                message="The catalogue is not initialized",
                hint="Load a catalogue or call add() before resolving messages",
            )
        )


class EmptyCatalogueError(TranslatorError):
    """Explicit load of a catalogue with no locales."""

    def __init__(self) -> None:
        super().__init__(
            Diagnostic(
                code=DiagnosticCode.CATALOGUE_EMPTY,
                message="The given catalogue is empty",
                hint="Pass a mapping of locale -> domain -> id -> template",
            )
        )


class CatalogueFormatError(TranslatorError, ValueError):
    """Catalogue data does not have the locale -> domain -> id -> template shape.

    Also raised when a serialized catalogue is not valid JSON.
    """


class InvalidLoadTypeError(TranslatorError, ValueError):
    """Unknown catalogue load type.

    Attributes:
        load_type: The rejected value
    """

    def __init__(self, load_type: object) -> None:
        super().__init__(
            Diagnostic(
                code=DiagnosticCode.LOAD_TYPE_INVALID,
                message=f"Invalid load type: {load_type!r}",
                hint="Use one of LoadType.CATALOGUE, LoadType.SERIALIZED, LoadType.LOADER",
            )
        )
        self.load_type = load_type


class InvalidCountError(TranslatorError, ValueError):
    """Plural count parameter cannot be interpreted as a number.

    Attributes:
        value: The rejected count value
    """

    def __init__(self, value: object) -> None:
        super().__init__(
            Diagnostic(
                code=DiagnosticCode.COUNT_INVALID,
                message=f"Invalid plural count: {value!r}",
                hint="Pass an int, float, Decimal or numeric string",
            )
        )
        self.value = value
