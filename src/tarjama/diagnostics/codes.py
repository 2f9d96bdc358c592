"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for tarjama exceptions.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        LOCALE: Locale code not recognized
        REFERENCE: Message missing from every consulted catalogue
        FORMATTING: Plural-rule or placeholder failure in a template
        LOADING: Catalogue file discovery, reading or parsing failure
    """

    LOCALE = "locale"
    REFERENCE = "reference"
    FORMATTING = "formatting"
    LOADING = "loading"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale and reference errors
        2000-2999: Plural-rule parse errors
        3000-3999: Placeholder substitution errors
        4000-4999: Loading errors
    """

    # Locale and reference errors (1000-1999)
    INVALID_LOCALE = 1001
    MESSAGE_NOT_FOUND = 1002

    # Plural-rule parse errors (2000-2999)
    PLURAL_NO_DEFAULT = 2001
    RULE_UNTERMINATED = 2002
    RULE_UNOPENED = 2003
    RULE_INVALID_BOUND = 2004
    RULE_INVALID_VALUE = 2005

    # Placeholder substitution errors (3000-3999)
    PLACEHOLDER_UNTERMINATED = 3001
    PLACEHOLDER_UNEXPECTED_CLOSE = 3002
    INDEXED_VALUE_OUT_OF_RANGE = 3003
    POSITIONAL_VALUE_OUT_OF_RANGE = 3004
    VALUE_NOT_FOUND = 3005
    COUNT_NOT_PROVIDED = 3006

    # Loading errors (4000-4999)
    DIRECTORY_UNREADABLE = 4001
    FILE_UNREADABLE = 4002
    FILENAME_INVALID_FORMAT = 4003
    FILENAME_INVALID_LOCALE = 4004
    FILE_UNPARSABLE = 4005
    FILE_INVALID_VALUE = 4006

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        match self.value // 1000:
            case 1:
                if self is DiagnosticCode.INVALID_LOCALE:
                    return ErrorCategory.LOCALE
                return ErrorCategory.REFERENCE
            case 2 | 3:
                return ErrorCategory.FORMATTING
            case _:
                return ErrorCategory.LOADING


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics: a stable code plus a
    human-readable message that echoes the offending input.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[VALUE_NOT_FOUND]: cannot find value `'d'` in this context.
              = help: Add a value named 'd' to the context

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
