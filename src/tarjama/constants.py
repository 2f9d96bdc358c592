"""Shared constants for tarjama.

This module provides centralized configuration constants used across
the runtime and localization packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Template syntax: Sigils and escape sequences of the message format
- Integer bounds: Signed 64-bit range for counts, rules and integer values
- Loading: Defaults for catalogue file discovery
- Cache limits: Memory bounds for locale parsing

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Template syntax
    "COUNT_SIGIL",
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_CLOSE",
    "PLURAL_SEPARATOR",
    "ESCAPED_PLURAL_SEPARATOR",
    "RANGE_SEPARATOR",
    "MATCH_SEPARATOR",
    "WHITE_SPACE",
    # Integer bounds
    "I64_MIN",
    "I64_MAX",
    "USIZE_MAX",
    # Loading
    "DEFAULT_EXTENSIONS",
    "FILE_ENCODING",
    # Cache limits
    "LOCALE_CACHE_SIZE",
]

# ============================================================================
# TEMPLATE SYNTAX
# ============================================================================

# Reserved context name addressing the count: `{?}` in templates and the
# `"?"` key in context() construction.
COUNT_SIGIL: str = "?"

PLACEHOLDER_OPEN: str = "{"
PLACEHOLDER_CLOSE: str = "}"

# Plural segments are separated by a single pipe; a doubled pipe is literal.
PLURAL_SEPARATOR: str = "|"
ESCAPED_PLURAL_SEPARATOR: str = "||"

# Rule clause grammar: {a..b}, {..b}, {a..} and {n1, n2, ...}
RANGE_SEPARATOR: str = ".."
MATCH_SEPARATOR: str = ","

# Characters with the Unicode White_Space property, trimmed from segments,
# rule values and placeholder names. Narrower than str.isspace(), which also
# accepts the ASCII separators U+001C..U+001F.
WHITE_SPACE: str = (
    "\u0009\u000a\u000b\u000c\u000d\u0020\u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# ============================================================================
# INTEGER BOUNDS
# ============================================================================

# Counts, rule bounds and integer context values are signed 64-bit.
I64_MIN: int = -(2**63)
I64_MAX: int = 2**63 - 1

# Upper bound for positional placeholder indices ({N}).
USIZE_MAX: int = 2**64 - 1

# ============================================================================
# LOADING
# ============================================================================

# Catalogue files are named {domain}.{locale}.{ext}; only these extensions
# are considered by the directory loaders.
DEFAULT_EXTENSIONS: tuple[str, ...] = ("toml",)

FILE_ENCODING: str = "utf-8"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of parsed Babel locales kept by get_babel_locale().
LOCALE_CACHE_SIZE: int = 128
