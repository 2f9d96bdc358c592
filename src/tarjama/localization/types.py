"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating Translator call sites.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tarjama.locale_utils import Locale
    from tarjama.runtime.context import Context

__all__ = [
    "ContextLike",
    "Domain",
    "LocaleLike",
    "MessageId",
    "RawTemplate",
]

type Domain = str
"""Namespace grouping related message keys (e.g., 'messages', 'errors')."""

type MessageId = str
"""Message key inside a domain (e.g., 'greeting', 'apple')."""

type RawTemplate = str
"""Unformatted catalogue entry (e.g., '{0} no apples | {?} apples')."""

type LocaleLike = Locale | str
"""Locale instance or locale code (e.g., 'fr', 'sv-FI')."""

type ContextLike = Context | int | None
"""Context, a bare count, or None for an empty context."""
