"""Tests for plural rule splitting, parsing and matching.

Python 3.13+.
"""

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from tarjama.diagnostics import DiagnosticCode, FormattingError
from tarjama.runtime.plural_rules import (
    Match,
    PluralMessages,
    Range,
    RangeFrom,
    RangeTo,
    parse_plural_messages,
    split_plural_segments,
)

i64 = st.integers(min_value=-(2**63), max_value=2**63 - 1)


class TestSplitPluralSegments:
    """Separator detection over grapheme clusters."""

    def test_no_pipe(self) -> None:
        assert split_plural_segments("just text") == ["just text"]

    def test_empty(self) -> None:
        assert split_plural_segments("") == []

    def test_single_pipes_split_and_trim(self) -> None:
        assert split_plural_segments("{0} a | {1} b |c") == ["{0} a", "{1} b", "c"]

    def test_double_pipe_is_literal(self) -> None:
        assert split_plural_segments("{0} a | b || c") == ["{0} a", "b || c"]

    def test_triple_pipe_splits_on_last(self) -> None:
        """An odd run closes with a separator; the pipes before it stay as text."""
        assert split_plural_segments("a ||| b") == ["a ||", "b"]

    def test_trailing_pipe_is_text(self) -> None:
        assert split_plural_segments("a |") == ["a |"]

    def test_information_separators_are_kept(self) -> None:
        assert split_plural_segments("{0} a\x1f | \x1cb") == ["{0} a\x1f", "\x1cb"]

    def test_unicode_spaces_are_trimmed(self) -> None:
        assert split_plural_segments("{0} a\u3000|\u00a0b") == ["{0} a", "b"]

    def test_pipe_with_combining_mark_is_text(self) -> None:
        """A pipe followed by a combining mark forms a different grapheme."""
        message = "a |\u0301 b"
        assert split_plural_segments(message) == [message]

    def test_multibyte_text_is_preserved(self) -> None:
        assert split_plural_segments("{0} لا تفاح | تفاح") == ["{0} لا تفاح", "تفاح"]

    @given(st.lists(st.text(alphabet="abc xyz", min_size=1), min_size=1, max_size=5))
    def test_joined_segments_round_trip(self, parts: list[str]) -> None:
        stripped = [part.strip() for part in parts]
        if not all(stripped):
            event("empty segment")
            return
        assert split_plural_segments(" | ".join(stripped)) == stripped


class TestRules:
    """Rule predicates and their display form."""

    def test_range_to(self) -> None:
        rule = RangeTo(5)
        assert rule.matches(-100)
        assert rule.matches(5)
        assert not rule.matches(6)
        assert str(rule) == "{..5}"

    def test_range_from(self) -> None:
        rule = RangeFrom(10)
        assert rule.matches(10)
        assert not rule.matches(9)
        assert str(rule) == "{10..}"

    def test_range_inclusive(self) -> None:
        rule = Range(2, 4)
        assert [n for n in range(7) if rule.matches(n)] == [2, 3, 4]
        assert str(rule) == "{2..4}"

    def test_inverted_range_matches_nothing(self) -> None:
        rule = Range(5, 2)
        assert not any(rule.matches(n) for n in range(-10, 10))

    def test_match(self) -> None:
        rule = Match((1, 2))
        assert rule.matches(2)
        assert not rule.matches(3)
        assert str(rule) == "{1, 2}"

    @given(start=i64, end=i64, value=i64)
    def test_range_agrees_with_bounds(self, start: int, end: int, value: int) -> None:
        assert Range(start, end).matches(value) == (
            RangeFrom(start).matches(value) and RangeTo(end).matches(value)
        )


class TestParsePluralMessages:
    """Parsing into ordered rules plus default."""

    def test_all_rule_kinds(self) -> None:
        plural = parse_plural_messages(
            "{0} foo | {1, 2} bar | {..5} baz | {10..} qux | {6..8} quux | fizz || bizz"
        )
        assert plural == PluralMessages(
            rules=(
                ("foo", Match((0,))),
                ("bar", Match((1, 2))),
                ("baz", RangeTo(5)),
                ("qux", RangeFrom(10)),
                ("quux", Range(6, 8)),
            ),
            default="fizz || bizz",
        )

    def test_default_only(self) -> None:
        plural = parse_plural_messages("  only default  ")
        assert plural.rules == ()
        assert plural.default == "only default"

    def test_message_after_clause_is_trimmed(self) -> None:
        plural = parse_plural_messages("{0}    none   | rest")
        assert plural.rules[0][0] == "none"

    def test_default_keeps_information_separator(self) -> None:
        plural = parse_plural_messages("{0} none\u2003| rest\x1e")
        assert plural.rules[0][0] == "none"
        assert plural.default == "rest\x1e"

    def test_match_values_are_trimmed(self) -> None:
        plural = parse_plural_messages("{ 1 ,2 , 3 } x | y")
        assert plural.rules[0][1] == Match((1, 2, 3))

    def test_range_bounds_are_not_trimmed(self) -> None:
        with pytest.raises(FormattingError) as exc_info:
            parse_plural_messages("{ 2..4} x | y")
        assert exc_info.value.code is DiagnosticCode.RULE_INVALID_BOUND

    def test_negative_bounds(self) -> None:
        plural = parse_plural_messages("{-5..-1} negative | {..-6} very | rest")
        assert plural.matching(-3) == "negative"
        assert plural.matching(-10) == "very"
        assert plural.matching(0) == "rest"

    def test_bound_overflow(self) -> None:
        with pytest.raises(FormattingError) as exc_info:
            parse_plural_messages("{9223372036854775808..} x | y")
        assert str(exc_info.value) == (
            "formatting: failed to parse `'from'` value in range-from rule for "
            "`'{9223372036854775808..} x'`, number too large to fit in target type."
        )

    def test_empty_match_value(self) -> None:
        with pytest.raises(FormattingError) as exc_info:
            parse_plural_messages("{} x | y")
        assert str(exc_info.value) == (
            "formatting: failed to parse value `''` in match rule for `'{} x'`, "
            "cannot parse integer from empty string."
        )

    def test_whitespace_only_is_empty(self) -> None:
        with pytest.raises(FormattingError) as exc_info:
            parse_plural_messages("   ")
        assert exc_info.value.code is DiagnosticCode.PLURAL_NO_DEFAULT


class TestMatching:
    """First matching rule wins; default otherwise."""

    def test_declaration_order_wins_over_specificity(self) -> None:
        plural = parse_plural_messages("{0..10} wide | {3} narrow | rest")
        assert plural.matching(3) == "wide"

    @given(count=i64)
    def test_total(self, count: int) -> None:
        plural = parse_plural_messages("{0} zero | {1, 2} few | {3..} many | negative")
        expected = "zero" if count == 0 else "few" if count in (1, 2) else (
            "many" if count >= 3 else "negative"
        )
        assert plural.matching(count) == expected
