"""Formatter protocol and the default message formatter.

A Formatter turns a raw catalogue template into the final string for a
locale and a context. The default implementation:

1. When the context carries a count, parses the template's plural rules
   and keeps the segment selected by the count.
2. Always substitutes placeholders over the resulting text.

The locale argument lets custom formatters specialize per locale; the
default formatter ignores it.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from tarjama.runtime.plural_rules import parse_plural_messages
from tarjama.runtime.substitution import format_raw

if TYPE_CHECKING:
    from tarjama.locale_utils import Locale
    from tarjama.runtime.context import Context

__all__ = ["DefaultFormatter", "Formatter"]

logger = logging.getLogger(__name__)


@runtime_checkable
class Formatter(Protocol):
    """Protocol for message formatters.

    This is a Protocol (structural typing) rather than ABC, so any object
    with a matching ``format`` method can be passed to a Translator.

    Example:
        >>> class UpperFormatter:
        ...     def format(self, locale, message, context):
        ...         return DefaultFormatter().format(locale, message, context).upper()
        >>> isinstance(UpperFormatter(), Formatter)
        True
    """

    def format(self, locale: Locale, message: str, context: Context) -> str:
        """Render message for locale using context.

        Raises:
            FormattingError: If the template cannot be rendered
        """
        ...  # pragma: no cover  # Protocol stub - not executable


class DefaultFormatter:
    """Default formatter: plural selection followed by placeholder substitution.

    Stateless; a single instance can be shared by any number of translators
    and threads.

    Example:
        >>> from tarjama.locale_utils import Locale
        >>> from tarjama.runtime.context import context
        >>> formatter = DefaultFormatter()
        >>> formatter.format(Locale("en"), "{0} no apples | {1} one apple | {?} apples",
        ...                  context(**{"?": 4}))
        '4 apples'
    """

    __slots__ = ()

    def format(self, locale: Locale, message: str, context: Context) -> str:
        """Render message using context; locale is unused.

        Raises:
            FormattingError: On plural-rule or placeholder errors
        """
        if context.count is not None:
            message = parse_plural_messages(message).matching(context.count)
            logger.debug("Plural branch for count %d: %r", context.count, message)

        return format_raw(message, context)

    def __repr__(self) -> str:
        return "DefaultFormatter()"
