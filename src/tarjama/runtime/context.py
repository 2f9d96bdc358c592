"""Substitution context: ordered named values plus an optional count.

Defines the input of the formatting engine:
    - ContextValue: Union of the value types a template may substitute
    - Context: Immutable ordered (name, value) pairs and an optional count
    - ContextBuilder: Incremental construction of a Context
    - context(): Keyword-style construction with the reserved "?" count key

Insertion order is significant: it defines positional ({0}) and indexed ({})
lookup. Names need not be unique; lookup by name returns the first match.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from decimal import Decimal

from tarjama.constants import COUNT_SIGIL, I64_MAX, I64_MIN

__all__ = [
    "Context",
    "ContextBuilder",
    "ContextValue",
    "context",
    "display_value",
]

type ContextValue = str | int | float
"""Value accepted in a context: text, signed 64-bit integer or double."""


def _check_i64(value: int, what: str) -> None:
    if not I64_MIN <= value <= I64_MAX:
        msg = f"{what} must fit in a signed 64-bit integer, got {value}"
        raise ValueError(msg)


def _check_value(name: str, value: object) -> None:
    """Validate one context entry.

    Raises:
        TypeError: If name is not a string or value is not str/int/float
        ValueError: If an integer value falls outside the signed 64-bit range
    """
    if not isinstance(name, str):
        msg = f"Context value names must be strings, got {type(name).__name__}"
        raise TypeError(msg)
    match value:
        case bool():
            msg = f"Unsupported context value type for '{name}': bool"
            raise TypeError(msg)
        case int():
            _check_i64(value, f"Context value '{name}'")
        case str() | float():
            pass
        case _:
            msg = f"Unsupported context value type for '{name}': {type(value).__name__}"
            raise TypeError(msg)


def _check_count(count: object) -> None:
    if count is None:
        return
    if isinstance(count, bool) or not isinstance(count, int):
        msg = f"Context count must be an integer, got {type(count).__name__}"
        raise TypeError(msg)
    _check_i64(count, "Context count")


def _display_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    # repr() is the shortest round-trip form; Decimal drops the exponent.
    text = format(Decimal(repr(value)), "f")
    return text.removesuffix(".0")


def display_value(value: ContextValue) -> str:
    """Return the canonical display form of a context value.

    Args:
        value: Context value

    Returns:
        Text for strings, plain decimal for integers, shortest round-trip
        decimal (never exponent notation) for doubles

    Example:
        >>> display_value(3)
        '3'
        >>> display_value(2.0)
        '2'
        >>> display_value(1e-7)
        '0.0000001'
    """
    match value:
        case str():
            return value
        case float():
            return _display_float(value)
        case _:
            return str(value)


@dataclass(frozen=True, slots=True)
class Context:
    """Immutable substitution context.

    Attributes:
        values: Ordered (name, value) pairs
        count: Optional signed 64-bit count driving plural selection and
            substituted by the {?} placeholder

    Example:
        >>> ctx = Context((("name", "World"),), count=3)
        >>> ctx.position("name")
        0
        >>> ctx[0]
        'World'
    """

    values: tuple[tuple[str, ContextValue], ...] = ()
    count: int | None = None

    def __post_init__(self) -> None:
        """Freeze and validate values and count.

        Raises:
            TypeError: If an entry or the count has an unsupported type
            ValueError: If an integer is outside the signed 64-bit range
        """
        values = tuple((name, value) for name, value in self.values)
        for name, value in values:
            _check_value(name, value)
        _check_count(self.count)
        object.__setattr__(self, "values", values)

    @classmethod
    def from_count(cls, count: int | None) -> Context:
        """Build a context holding only a count."""
        return cls(count=count)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> ContextValue:
        return self.values[index][1]

    def __iter__(self) -> Iterator[tuple[str, ContextValue]]:
        return iter(self.values)

    def position(self, name: str) -> int | None:
        """Return the index of the first value called name, or None."""
        for index, (value_name, _) in enumerate(self.values):
            if value_name == name:
                return index
        return None

    def get(self, name: str) -> ContextValue | None:
        """Return the first value called name, or None."""
        index = self.position(name)
        return None if index is None else self.values[index][1]

    def with_value(self, name: str, value: ContextValue) -> Context:
        """Return a copy with (name, value) appended."""
        return replace(self, values=(*self.values, (name, value)))

    def with_count(self, count: int | None) -> Context:
        """Return a copy with the count replaced."""
        return replace(self, count=count)


@dataclass(slots=True)
class ContextBuilder:
    """Incremental Context construction.

    Example:
        >>> ctx = ContextBuilder().value("a", 1).value("b", 2.5).count(5).build()
        >>> ctx.count
        5
    """

    _values: list[tuple[str, ContextValue]] = field(default_factory=list)
    _count: int | None = None

    def value(self, name: str, value: ContextValue) -> ContextBuilder:
        """Append a named value."""
        _check_value(name, value)
        self._values.append((name, value))
        return self

    def count(self, count: int | None) -> ContextBuilder:
        """Set (or clear, with None) the count."""
        _check_count(count)
        self._count = count
        return self

    def build(self) -> Context:
        """Return the immutable Context."""
        return Context(tuple(self._values), self._count)


def context(*pairs: tuple[str, ContextValue | None], **values: ContextValue | None) -> Context:
    """Build a Context from (name, value) pairs and keyword arguments.

    Pairs come first, then keyword arguments, both in call order. The
    reserved name "?" sets the count instead of adding a value.

    Example:
        >>> context(name="World").values
        (('name', 'World'),)
        >>> context(a=1, **{"?": 5}).count
        5
        >>> context(("a", 1), ("?", 2)).count
        2
    """
    builder = ContextBuilder()
    for name, value in (*pairs, *values.items()):
        if name == COUNT_SIGIL:
            builder.count(value)  # type: ignore[arg-type]
        else:
            builder.value(name, value)  # type: ignore[arg-type]
    return builder.build()
