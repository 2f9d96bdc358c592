"""Placeholder substitution over a (rule-resolved) template.

Placeholder forms:
    {name}  - first context value called ``name``
    {N}     - context value at 0-based position N
    {}      - next value in order; the counter is shared across the template
    {?}     - the context count

Escapes: ``{{`` renders ``{`` and ``}}`` renders ``}``.

Substitution is a single left-to-right pass; rendered values are emitted
as-is and never rescanned, so braces inside values stay literal.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from contextlib import suppress

from tarjama.constants import (
    COUNT_SIGIL,
    ESCAPED_PLURAL_SEPARATOR,
    PLACEHOLDER_CLOSE,
    PLACEHOLDER_OPEN,
    PLURAL_SEPARATOR,
    WHITE_SPACE,
)
from tarjama.diagnostics import ErrorTemplate, FormattingError
from tarjama.runtime.context import Context, display_value
from tarjama.runtime.integers import parse_usize

__all__ = ["format_raw"]

_BRACE = re.compile(r"[{}]")


def _resolve_index(name: str, context: Context) -> int | None:
    """Resolve trimmed placeholder content to a value index.

    Resolution order: positional integer, value name, count sigil.

    Returns:
        Value index, or None when the placeholder addresses the count

    Raises:
        FormattingError: If nothing in the context answers to name
    """
    with suppress(ValueError):
        return parse_usize(name)

    position = context.position(name)
    if position is not None:
        return position

    if name == COUNT_SIGIL:
        return None

    raise FormattingError(ErrorTemplate.value_not_found(name))


def _render_count(context: Context) -> str:
    if context.count is None:
        raise FormattingError(ErrorTemplate.count_not_provided())
    return str(context.count)


def format_raw(message: str, context: Context) -> str:
    """Substitute every placeholder of message from context.

    Args:
        message: Template text (after plural resolution, if any)
        context: Values and optional count

    Returns:
        Rendered text. When the context carries a count, every ``||`` of the
        output is collapsed to ``|``.

    Raises:
        FormattingError: On unbalanced braces or unresolvable references

    Example:
        >>> from tarjama.runtime.context import context
        >>> format_raw("a = {{{a}}}", context(a=1))
        'a = {1}'
        >>> format_raw("{} and {}, {1} and {0}", context(x="a", y="b"))
        'a and b, b and a'
    """
    parts: list[str] = []
    next_index = 0
    position = 0

    while (found := _BRACE.search(message, position)) is not None:
        current = found.start()
        following = message[current + 1 : current + 2]

        if found.group() == PLACEHOLDER_CLOSE:
            if following == PLACEHOLDER_CLOSE:
                parts.append(message[position : current + 1])
                position = current + 2
                continue
            if following:
                raise FormattingError(ErrorTemplate.placeholder_unexpected_close(following))
            raise FormattingError(ErrorTemplate.placeholder_unterminated())

        if following == PLACEHOLDER_OPEN:
            parts.append(message[position : current + 1])
            position = current + 2
            continue

        close = message.find(PLACEHOLDER_CLOSE, current)
        if close == -1:
            raise FormattingError(ErrorTemplate.placeholder_unterminated())

        content = message[current + 1 : close]
        if not content:
            index = next_index
            next_index += 1
            if index >= len(context):
                raise FormattingError(
                    ErrorTemplate.indexed_value_out_of_range(index, len(context))
                )
            rendered = display_value(context[index])
        else:
            resolved = _resolve_index(content.strip(WHITE_SPACE), context)
            if resolved is None:
                rendered = _render_count(context)
            elif resolved >= len(context):
                raise FormattingError(
                    ErrorTemplate.positional_value_out_of_range(resolved, len(context))
                )
            else:
                rendered = display_value(context[resolved])

        parts.append(message[position:current])
        parts.append(rendered)
        position = close + 1

    parts.append(message[position:])
    output = "".join(parts)

    # Undo the plural-segment escape. Keyed on the count being present, not
    # on a plural clause having matched.
    if context.count is not None:
        output = output.replace(ESCAPED_PLURAL_SEPARATOR, PLURAL_SEPARATOR)
    return output
