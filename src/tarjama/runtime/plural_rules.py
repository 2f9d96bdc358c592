"""Count-driven plural rules: grammar, parser and matcher.

A plural template is a list of segments separated by single pipes. Every
segment but the last starts with a rule clause; the last is the default:

    {0} There are no apples | {1} One apple | {2..4} A few apples | {?} apples

Rule grammar:
    {n1, n2, ...}  - Match: count is one of the listed values
    {a..b}         - Range: a <= count <= b
    {..b}          - RangeTo: count <= b
    {a..}          - RangeFrom: count >= a

A doubled pipe (``||``) is literal text; the substitutor collapses it to a
single pipe afterwards. Splitting walks grapheme clusters (``regex``'s
``\\X``), so a pipe carrying a combining mark is text, never a separator.

Rules are evaluated in declaration order and the first match wins. There is
no normalization and no overlap detection.

Python 3.13+. Depends on regex for grapheme segmentation.
"""

from __future__ import annotations

from dataclasses import dataclass

import regex

from tarjama.constants import (
    MATCH_SEPARATOR,
    PLACEHOLDER_CLOSE,
    PLACEHOLDER_OPEN,
    PLURAL_SEPARATOR,
    RANGE_SEPARATOR,
    WHITE_SPACE,
)
from tarjama.diagnostics import ErrorTemplate, FormattingError
from tarjama.runtime.integers import parse_i64

__all__ = [
    "Match",
    "PluralMessages",
    "Range",
    "RangeFrom",
    "RangeTo",
    "Rule",
    "parse_plural_messages",
    "split_plural_segments",
]

_GRAPHEME = regex.compile(r"\X")


@dataclass(frozen=True, slots=True)
class RangeTo:
    """Matches counts less than or equal to ``end``."""

    end: int

    def matches(self, value: int) -> bool:
        return value <= self.end

    def __str__(self) -> str:
        return f"{{..{self.end}}}"


@dataclass(frozen=True, slots=True)
class RangeFrom:
    """Matches counts greater than or equal to ``start``."""

    start: int

    def matches(self, value: int) -> bool:
        return value >= self.start

    def __str__(self) -> str:
        return f"{{{self.start}..}}"


@dataclass(frozen=True, slots=True)
class Range:
    """Matches counts in the inclusive range ``start..end``.

    An inverted range (start > end) is legal and matches nothing.
    """

    start: int
    end: int

    def matches(self, value: int) -> bool:
        return self.start <= value <= self.end

    def __str__(self) -> str:
        return f"{{{self.start}..{self.end}}}"


@dataclass(frozen=True, slots=True)
class Match:
    """Matches counts equal to one of ``values`` (kept in declaration order)."""

    values: tuple[int, ...]

    def matches(self, value: int) -> bool:
        return value in self.values

    def __str__(self) -> str:
        return "{" + ", ".join(str(v) for v in self.values) + "}"


type Rule = RangeTo | RangeFrom | Range | Match
"""Predicate over an integer count."""


@dataclass(frozen=True, slots=True)
class PluralMessages:
    """Parsed plural template.

    Attributes:
        rules: Ordered (message, rule) pairs
        default: Message used when no rule matches

    Example:
        >>> plural = parse_plural_messages("{0} none | {1} one | many")
        >>> plural.matching(0), plural.matching(1), plural.matching(7)
        ('none', 'one', 'many')
    """

    rules: tuple[tuple[str, Rule], ...]
    default: str

    def matching(self, count: int) -> str:
        """Return the message of the first rule matching count, else the default."""
        for message, rule in self.rules:
            if rule.matches(count):
                return message
        return self.default


def split_plural_segments(message: str) -> list[str]:
    """Split a trimmed template on separator pipes.

    A pipe is a separator when it is followed by a non-pipe grapheme and
    closes an odd-length run of pipes. Each segment is trimmed.

    Args:
        message: Trimmed template text

    Returns:
        Segments in order; empty for empty input

    Example:
        >>> split_plural_segments("{0} a | b || c")
        ['{0} a', 'b || c']
    """
    if PLURAL_SEPARATOR not in message:
        return [message] if message else []

    graphemes: list[str] = _GRAPHEME.findall(message)
    segments: list[str] = []
    run = 0
    start = 0
    last = len(graphemes) - 1
    for i, grapheme in enumerate(graphemes):
        if grapheme != PLURAL_SEPARATOR:
            run = 0
            continue
        run += 1
        if i < last and graphemes[i + 1] != PLURAL_SEPARATOR and run % 2 == 1:
            segments.append("".join(graphemes[start:i]).strip(WHITE_SPACE))
            start = i + 1

    if start < len(graphemes):
        segments.append("".join(graphemes[start:]).strip(WHITE_SPACE))
    return segments


def _parse_bound(text: str, bound: str, rule_kind: str, segment: str) -> int:
    try:
        return parse_i64(text)
    except ValueError as e:
        raise FormattingError(
            ErrorTemplate.rule_invalid_bound(bound, rule_kind, segment, str(e))
        ) from e


def _parse_match_values(clause: str, segment: str) -> tuple[int, ...]:
    values: list[int] = []
    for piece in clause.split(MATCH_SEPARATOR):
        token = piece.strip(WHITE_SPACE)
        try:
            values.append(parse_i64(token))
        except ValueError as e:
            raise FormattingError(
                ErrorTemplate.rule_invalid_value(token, segment, str(e))
            ) from e
    return tuple(values)


def _parse_rule(segment: str) -> tuple[str, Rule]:
    """Parse a ``{rule} message`` segment.

    Raises:
        FormattingError: If the clause is missing, unterminated or malformed
    """
    if not segment.startswith(PLACEHOLDER_OPEN):
        raise FormattingError(ErrorTemplate.rule_unopened(segment))

    close = segment.find(PLACEHOLDER_CLOSE)
    if close == -1:
        raise FormattingError(ErrorTemplate.rule_unterminated(segment))

    clause = segment[1:close]
    message = segment[close + 1 :].strip(WHITE_SPACE)

    rule: Rule
    sep = clause.find(RANGE_SEPARATOR)
    if sep == -1:
        rule = Match(_parse_match_values(clause, segment))
    elif sep == 0:
        rule = RangeTo(_parse_bound(clause[2:], "to", "range-to", segment))
    elif sep == len(clause) - 2:
        rule = RangeFrom(_parse_bound(clause[:sep], "from", "range-from", segment))
    else:
        start = _parse_bound(clause[:sep], "from", "range", segment)
        end = _parse_bound(clause[sep + 2 :], "to", "range", segment)
        rule = Range(start, end)

    return message, rule


def parse_plural_messages(message: str) -> PluralMessages:
    """Parse a raw template into ordered rules and a default message.

    Args:
        message: Raw template, e.g. "{0} none | {1} one | {2..4} few | {?} many"

    Returns:
        PluralMessages preserving rule declaration order

    Raises:
        FormattingError: If the template is empty or a rule clause is
            malformed; the message echoes the offending segment

    Example:
        >>> plural = parse_plural_messages("{1, 2} bar | {10..} qux | fizz || bizz")
        >>> [str(rule) for _, rule in plural.rules]
        ['{1, 2}', '{10..}']
        >>> plural.default
        'fizz || bizz'
    """
    segments = split_plural_segments(message.strip(WHITE_SPACE))
    if not segments:
        raise FormattingError(ErrorTemplate.plural_no_default())

    *ruled, default = segments
    rules = tuple(_parse_rule(segment) for segment in ruled)
    return PluralMessages(rules=rules, default=default)
