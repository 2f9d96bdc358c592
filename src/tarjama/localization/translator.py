"""Translator: catalogue lookup with a fallback locale.

Separates catalogue lookup (Translator) from template rendering
(Formatter), so a custom Formatter can replace the default engine without
touching lookup or fallback logic.

Lookup order for ``trans(locale, domain, id, context)``:
    1. Catalogues of the requested locale, in insertion order
    2. Catalogues of the fallback locale, if one is configured

The message is formatted with the locale whose catalogue answered.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from tarjama.diagnostics import MessageNotFoundError
from tarjama.locale_utils import Locale, to_locale
from tarjama.localization.catalogue import CatalogueBag
from tarjama.localization.types import (
    ContextLike,
    Domain,
    LocaleLike,
    MessageId,
    RawTemplate,
)
from tarjama.runtime.context import Context
from tarjama.runtime.formatter import DefaultFormatter, Formatter

__all__ = ["FallbackInfo", "Translator"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when a Translator resolves a
    message from the fallback locale instead of the requested one.

    Attributes:
        requested_locale: The locale passed to trans()
        resolved_locale: The fallback locale that contained the message
        domain: The catalogue domain
        message_id: The message identifier that was resolved

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"Fallback: {info.message_id} resolved from "
        ...           f"{info.resolved_locale} (requested {info.requested_locale})")
    """

    requested_locale: Locale
    resolved_locale: Locale
    domain: Domain
    message_id: MessageId


def _to_context(value: ContextLike) -> Context:
    match value:
        case None:
            return Context()
        case Context():
            return value
        case bool():
            msg = "context must be a Context, an int count or None, got bool"
            raise TypeError(msg)
        case int():
            return Context.from_count(value)
        case _:
            msg = f"context must be a Context, an int count or None, got {type(value).__name__}"
            raise TypeError(msg)


class Translator:
    """Translate message keys through a catalogue bag.

    The translator never mutates its catalogues while translating, so
    concurrent ``trans`` calls are safe; configure it (set_fallback_locale)
    before sharing it between threads.

    Example:
        >>> from tarjama.localization.catalogue import Catalogue
        >>> bag = CatalogueBag([Catalogue(Locale("en"), {"messages": {
        ...     "greeting": "Hello, {name}!",
        ...     "apple": "{0} There are no apples | {1} There is one apple | There are {?} apples",
        ... }})])
        >>> translator = Translator(bag)
        >>> from tarjama.runtime.context import context
        >>> translator.trans("en", "messages", "greeting", context(name="World"))
        'Hello, World!'
        >>> translator.trans("en", "messages", "apple", 4)
        'There are 4 apples'

    Attributes:
        formatter: Formatter rendering templates
        fallback_locale: Locale consulted when the requested one lacks a key
    """

    __slots__ = ("_bag", "_fallback_locale", "_formatter", "_on_fallback")

    def __init__(
        self,
        bag: CatalogueBag,
        *,
        formatter: Formatter | None = None,
        fallback_locale: LocaleLike | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize a translator.

        Args:
            bag: Catalogues to translate from
            formatter: Template renderer (default: DefaultFormatter)
            fallback_locale: Locale retried when a key is missing (optional)
            on_fallback: Optional callback invoked when the fallback locale
                answers; receives a FallbackInfo.

        Raises:
            InvalidLocaleError: If fallback_locale is not a valid locale code
        """
        self._bag = bag
        self._formatter: Formatter = formatter if formatter is not None else DefaultFormatter()
        self._fallback_locale: Locale | None = (
            to_locale(fallback_locale) if fallback_locale is not None else None
        )
        self._on_fallback = on_fallback

    @classmethod
    def with_catalogue_bag(cls, bag: CatalogueBag) -> Translator:
        """Build a translator with the default formatter and no fallback."""
        return cls(bag)

    @property
    def bag(self) -> CatalogueBag:
        """Catalogues this translator reads from."""
        return self._bag

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    @property
    def fallback_locale(self) -> Locale | None:
        return self._fallback_locale

    def set_fallback_locale(self, fallback_locale: LocaleLike | None) -> None:
        """Set, replace or (with None) clear the fallback locale.

        Raises:
            InvalidLocaleError: If fallback_locale is not a valid locale code
        """
        self._fallback_locale = to_locale(fallback_locale) if fallback_locale is not None else None
        logger.debug("Fallback locale set to: %s", self._fallback_locale)

    def _find(self, locale: Locale, domain: Domain, message_id: MessageId) -> RawTemplate | None:
        for catalogue in self._bag.get(locale):
            message = catalogue.get(domain, message_id)
            if message is not None:
                return message
        return None

    def trans(
        self,
        locale: LocaleLike,
        domain: Domain,
        message_id: MessageId,
        context: ContextLike = None,
    ) -> str:
        """Translate a message.

        When the context carries a count, the template is parsed for plural
        forms and the segment selected by the count is rendered.

        Args:
            locale: Locale or locale code (e.g., "fr", "sv-FI")
            domain: Catalogue domain (e.g., "messages")
            message_id: Message key
            context: Context, a bare count, or None

        Returns:
            Rendered message

        Raises:
            InvalidLocaleError: If locale is not a valid locale code
            MessageNotFoundError: If neither the locale nor the fallback
                locale defines the message
            FormattingError: If the template cannot be rendered
        """
        resolved_context = _to_context(context)
        requested = to_locale(locale)

        message = self._find(requested, domain, message_id)
        if message is not None:
            logger.debug("Resolved %s/%s for locale %s", domain, message_id, requested)
            return self._formatter.format(requested, message, resolved_context)

        fallback = self._fallback_locale
        if fallback is not None:
            message = self._find(fallback, domain, message_id)
            if message is not None:
                logger.info(
                    "Message %s/%s missing for locale %s, using fallback locale %s",
                    domain,
                    message_id,
                    requested,
                    fallback,
                )
                if self._on_fallback is not None:
                    self._on_fallback(FallbackInfo(requested, fallback, domain, message_id))
                return self._formatter.format(fallback, message, resolved_context)

        logger.warning("Message %s/%s not found for locale %s", domain, message_id, requested)
        raise MessageNotFoundError(requested, domain, message_id)

    def __repr__(self) -> str:
        return (
            f"Translator(catalogues={len(self._bag)}, "
            f"formatter={self._formatter!r}, "
            f"fallback_locale={self._fallback_locale})"
        )
