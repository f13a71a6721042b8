"""Diagnostic message templates.

Centralized templates for the conditions the translator reports in-band
(missing locales, domains and messages, templates without a usable plural
variant). These are logged as warnings rather than raised.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized diagnostic templates for lookup and plural conditions."""

    @staticmethod
    def locale_not_found(locale: str) -> Diagnostic:
        """Locale absent from the catalogue.

        Args:
            locale: The requested locale

        Returns:
            Diagnostic for LOCALE_NOT_FOUND
        """
        msg = f"Skipped locale '{locale}' as it is not in the current catalogue"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_FOUND,
            message=msg,
            hint="Check the locale code; catalogue keys are case-sensitive",
            severity="warning",
        )

    @staticmethod
    def domain_not_found(domain: str, locale: str) -> Diagnostic:
        """Domain absent from a locale that exists.

        Args:
            domain: The requested domain
            locale: The locale searched

        Returns:
            Diagnostic for DOMAIN_NOT_FOUND
        """
        msg = f"'{domain}' does not exist in the catalogue for the '{locale}' locale"
        return Diagnostic(
            code=DiagnosticCode.DOMAIN_NOT_FOUND,
            message=msg,
            severity="warning",
        )

    @staticmethod
    def message_not_found(message_id: str, domain: str, locale: str | None) -> Diagnostic:
        """Message missing from both the requested and the fallback locale.

        Args:
            message_id: The message id
            domain: The domain searched
            locale: The requested locale (None when none was given)

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        msg = f"Untranslated message '{message_id}' (domain={domain}, locale={locale})"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=msg,
            hint="The message id is used as the text",
            severity="warning",
        )

    @staticmethod
    def no_variants(message_id: str, locale: str) -> Diagnostic:
        """No explicit rule matched and the template has no standard variant.

        Args:
            message_id: The message id
            locale: The locale used for plural selection

        Returns:
            Diagnostic for NO_VARIANTS
        """
        msg = f"Message '{message_id}' has no plural variant for {locale}; using raw template"
        return Diagnostic(
            code=DiagnosticCode.NO_VARIANTS,
            message=msg,
            hint="Add a standard variant or an explicit rule covering the count",
            severity="warning",
        )
