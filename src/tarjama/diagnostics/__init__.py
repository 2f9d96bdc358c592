"""Diagnostic system for tarjama errors.

Provides structured error diagnostics with codes, messages and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    FormattingError,
    InvalidLocaleError,
    LoadingError,
    MessageNotFoundError,
    TarjamaError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "ErrorTemplate",
    "FormattingError",
    "InvalidLocaleError",
    "LoadingError",
    "MessageNotFoundError",
    "TarjamaError",
]
