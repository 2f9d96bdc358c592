"""tarjama exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information;
``str(error)`` is the diagnostic message.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .templates import ErrorTemplate

if TYPE_CHECKING:
    from tarjama.locale_utils import Locale

__all__ = [
    "FormattingError",
    "InvalidLocaleError",
    "LoadingError",
    "MessageNotFoundError",
    "TarjamaError",
]


class TarjamaError(Exception):
    """Base exception for all tarjama errors.

    Attributes:
        diagnostic: Structured diagnostic information
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TarjamaError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code, if the error was built from a Diagnostic."""
        return self.diagnostic.code if self.diagnostic else None

    @property
    def category(self) -> ErrorCategory | None:
        """Error category, if the error was built from a Diagnostic."""
        return self.diagnostic.code.category if self.diagnostic else None


class InvalidLocaleError(TarjamaError, ValueError):
    """Locale string not recognized.

    Attributes:
        locale: The original input text
    """

    def __init__(self, locale: str) -> None:
        super().__init__(ErrorTemplate.invalid_locale(locale))
        self.locale = locale


class MessageNotFoundError(TarjamaError, LookupError):
    """No catalogue, including the fallback locale's, defines the key.

    Attributes:
        locale: The requested locale
        domain: The catalogue domain
        message_id: The message key
    """

    def __init__(self, locale: Locale, domain: str, message_id: str) -> None:
        super().__init__(ErrorTemplate.message_not_found(str(locale), domain, message_id))
        self.locale = locale
        self.domain = domain
        self.message_id = message_id


class FormattingError(TarjamaError):
    """Plural-rule parse or placeholder substitution failure.

    Formatting is deterministic: the same template and context always fail
    the same way.
    """


class LoadingError(TarjamaError):
    """Catalogue discovery, reading or parsing failure.

    Attributes:
        path: File or directory involved, when known
    """

    def __init__(self, message: str | Diagnostic, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
