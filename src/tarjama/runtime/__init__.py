"""tarjama runtime package.

Provides the message formatting engine: substitution context, plural-rule
parser and matcher, placeholder substitutor and the Formatter protocol.

Python 3.13+.
"""

from .context import Context, ContextBuilder, ContextValue, context, display_value
from .formatter import DefaultFormatter, Formatter
from .plural_rules import (
    Match,
    PluralMessages,
    Range,
    RangeFrom,
    RangeTo,
    Rule,
    parse_plural_messages,
    split_plural_segments,
)
from .substitution import format_raw

__all__ = [
    "Context",
    "ContextBuilder",
    "ContextValue",
    "DefaultFormatter",
    "Formatter",
    "Match",
    "PluralMessages",
    "Range",
    "RangeFrom",
    "RangeTo",
    "Rule",
    "context",
    "display_value",
    "format_raw",
    "parse_plural_messages",
    "split_plural_segments",
]
