"""tarjama - message translation with plural rules and placeholders.

Catalogues map (locale, domain, message id) to raw templates. A template
may hold plural forms selected by a count, and placeholders substituted
from a Context:

    "{0} There are no apples | {1} There is one apple | There are {?} apples"
    "Hello, {name}! You have {} new messages."

Public API:
    Translator - Catalogue lookup with fallback locale
    Catalogue, CatalogueBag - Message storage
    load_directory, load_directory_async - TOML catalogue loading
    Context, context - Substitution values and plural count
    Formatter, DefaultFormatter - Template rendering
    Locale - Canonical locale identity

Exceptions:
    TarjamaError - Base exception class
    InvalidLocaleError - Unknown locale code
    MessageNotFoundError - Missing message after fallback
    FormattingError - Malformed template or missing value
    LoadingError - Unreadable or malformed catalogue files

Submodules:
    tarjama.runtime - Formatting engine (plural rules, substitution)
    tarjama.localization - Catalogues, loading and the Translator
    tarjama.diagnostics - Error types and diagnostic codes
"""

from .diagnostics import (
    FormattingError,
    InvalidLocaleError,
    LoadingError,
    MessageNotFoundError,
    TarjamaError,
)
from .locale_utils import Locale
from .localization import (
    Catalogue,
    CatalogueBag,
    FallbackInfo,
    Translator,
    load_directory,
    load_directory_async,
)
from .runtime import Context, ContextBuilder, DefaultFormatter, Formatter, context

# Version information - Auto-populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("tarjama")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__recommended_encoding__ = "UTF-8"

__all__ = [
    "Catalogue",
    "CatalogueBag",
    "Context",
    "ContextBuilder",
    "DefaultFormatter",
    "FallbackInfo",
    "FormattingError",
    "Formatter",
    "InvalidLocaleError",
    "LoadingError",
    "Locale",
    "MessageNotFoundError",
    "TarjamaError",
    "Translator",
    "__recommended_encoding__",
    "__version__",
    "context",
    "load_directory",
    "load_directory_async",
]
