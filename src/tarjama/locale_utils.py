"""Locale identity and BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides the canonical Locale identity used as catalogue key, so that
"sv-FI", "sv_FI" and "SV_fi" all address the same catalogues.

Locale codes are validated against Babel's CLDR data: a code is accepted
when Babel knows the locale, and rejected with InvalidLocaleError otherwise.

Python 3.13+. Depends on Babel for CLDR data.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError, parse_locale

from tarjama.constants import LOCALE_CACHE_SIZE
from tarjama.diagnostics import InvalidLocaleError

if TYPE_CHECKING:
    import babel

__all__ = [
    "Locale",
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
    "to_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> babel.Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Thread-safe via
    lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale as BabelLocale  # noqa: PLC0415

    return BabelLocale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel locale cache.

    Useful for testing or when memory pressure requires cache cleanup.
    """
    get_babel_locale.cache_clear()


@dataclass(frozen=True, slots=True)
class Locale:
    """Canonical locale identity: a language plus optional subtags.

    Uses frozen dataclass so instances are hashable catalogue keys and can
    be shared freely between threads.

    Attributes:
        language: Lower-case ISO 639 language code
        script: Title-case ISO 15924 script code
        territory: Upper-case ISO 3166 region code
        variant: Upper-case variant subtag

    Example:
        >>> locale = Locale.parse("sv-FI")
        >>> str(locale)
        'sv_FI'
        >>> locale.has_variant
        True
        >>> str(locale.with_default_variant())
        'sv'
    """

    language: str
    territory: str | None = None
    script: str | None = None
    variant: str | None = None

    def __post_init__(self) -> None:
        """Validate the language subtag.

        Raises:
            ValueError: If language is empty or not lower-case letters
        """
        if not self.language or not self.language.isalpha() or not self.language.islower():
            msg = f"Locale.language must be lower-case letters, got {self.language!r}"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return the POSIX locale code (e.g. "zh_Hant_TW")."""
        parts = [self.language, self.script, self.territory, self.variant]
        return "_".join(part for part in parts if part)

    @classmethod
    def parse(cls, locale_code: str) -> Locale:
        """Parse and validate a locale code.

        Args:
            locale_code: BCP-47 or POSIX locale code (e.g. "fr", "fr-CA", "zh_Hant_TW")

        Returns:
            Canonical Locale

        Raises:
            InvalidLocaleError: If the code is malformed or unknown to CLDR
        """
        if not isinstance(locale_code, str) or not locale_code:
            raise InvalidLocaleError(str(locale_code))

        # parse_locale() silently drops ".encoding" and "@modifier" suffixes.
        if "." in locale_code or "@" in locale_code:
            raise InvalidLocaleError(locale_code)

        normalized = normalize_locale(locale_code)
        try:
            language, territory, script, variant = parse_locale(normalized)[:4]
            get_babel_locale(normalized)
        except (UnknownLocaleError, ValueError) as e:
            raise InvalidLocaleError(locale_code) from e

        return cls(language=language, territory=territory, script=script, variant=variant)

    @property
    def has_variant(self) -> bool:
        """Whether the locale carries subtags beyond its language."""
        return any((self.territory, self.script, self.variant))

    def with_default_variant(self) -> Locale:
        """Return the language-only locale (e.g. "ar_TN" -> "ar")."""
        if not self.has_variant:
            return self
        return Locale(self.language)


def to_locale(locale: Locale | str) -> Locale:
    """Coerce a Locale or locale code to a Locale.

    Args:
        locale: Locale instance or locale code string

    Returns:
        Canonical Locale

    Raises:
        InvalidLocaleError: If a code string is not a valid locale
    """
    if isinstance(locale, Locale):
        return locale
    return Locale.parse(locale)
