"""Tests for countable message parsing and phrase selection."""

from __future__ import annotations

import pytest

from transchoice.plural import (
    UNBOUNDED,
    ChoiceRule,
    RuleKind,
    choose,
    parse_choice_rules,
    parse_segment,
    select_rule,
    split_choices,
)


# =============================================================================
# Parsing
# =============================================================================


class TestSplitChoices:
    """Test splitting into raw variants."""

    def test_keeps_written_order(self):
        assert split_choices("b|a|c") == ["b", "a", "c"]

    def test_single_variant(self):
        assert split_choices("only") == ["only"]

    def test_keeps_empty_variants(self):
        assert split_choices("a||b") == ["a", "", "b"]


class TestParseSegment:
    """Test classification of a single variant."""

    def test_exact(self):
        rule = parse_segment("{0} none")

        assert rule.kind is RuleKind.EXACT
        assert rule.is_exact
        assert not rule.is_interval
        assert (rule.low, rule.high) == (0, 0)
        assert rule.text == "none"
        assert rule.raw == "{0} none"

    def test_exact_marker_anywhere(self):
        rule = parse_segment("exactly three {3}")

        assert rule.is_exact
        assert rule.low == 3
        assert rule.text == "exactly three"

    def test_exact_strips_only_first_marker(self):
        rule = parse_segment("{2} pair of {2}")

        assert rule.low == 2
        assert rule.text == "pair of {2}"

    def test_closed_interval(self):
        rule = parse_segment("[1,3] few")

        assert rule.kind is RuleKind.INTERVAL
        assert rule.is_interval
        assert (rule.low, rule.high) == (1, 3)
        assert rule.text == "few"

    def test_open_interval(self):
        rule = parse_segment("[4,*] many")

        assert rule.low == 4
        assert rule.high == UNBOUNDED
        assert rule.unbounded
        assert rule.text == "many"

    def test_interval_whitespace_after_comma(self):
        rule = parse_segment(" [2, 10]  some ")

        assert (rule.low, rule.high) == (2, 10)
        assert rule.text == "some"

    def test_exact_takes_precedence_over_interval(self):
        rule = parse_segment("{5} [1,9] five")

        assert rule.is_exact
        assert rule.low == 5
        assert rule.text == "[1,9] five"

    def test_incomplete_interval_is_implicit(self):
        rule = parse_segment("[3 items")

        assert rule.is_implicit

    def test_implicit_keeps_raw_text(self):
        rule = parse_segment(" apples ")

        assert rule.is_implicit
        assert rule.text == " apples "
        assert rule.raw == " apples "


class TestParseChoiceRules:
    """Test numbering of implicit rules."""

    def test_two_implicit(self):
        first, last = parse_choice_rules("apple|apples")

        assert (first.low, first.high) == (1, 1)
        assert last.low == 2
        assert last.high == UNBOUNDED

    def test_three_implicit(self):
        rules = parse_choice_rules("one|two|more")

        assert [(r.low, r.high) for r in rules] == [(1, 1), (2, 2), (3, UNBOUNDED)]

    def test_single_implicit_is_open(self):
        (rule,) = parse_choice_rules("items")

        assert rule.low == 1
        assert rule.unbounded

    def test_implicit_numbered_among_implicit_only(self):
        rules = parse_choice_rules("{0} none|single|[5,9] several|rest")

        kinds = [r.kind for r in rules]
        assert kinds == [RuleKind.EXACT, RuleKind.IMPLICIT, RuleKind.INTERVAL, RuleKind.IMPLICIT]
        assert (rules[1].low, rules[1].high) == (1, 1)
        assert (rules[3].low, rules[3].high) == (2, UNBOUNDED)

    def test_explicit_rules_untouched(self):
        rules = parse_choice_rules("{0} none|{1} one|[2,*] many")

        assert [(r.low, r.high) for r in rules] == [(0, 0), (1, 1), (2, UNBOUNDED)]
        assert [r.text for r in rules] == ["none", "one", "many"]

    def test_order_is_not_sorted(self):
        rules = parse_choice_rules("[4,*] many|{1} one")

        assert [r.low for r in rules] == [4, 1]


# =============================================================================
# Selection
# =============================================================================


class TestChoiceRule:
    """Test range containment."""

    def test_contains_inclusive(self):
        rule = ChoiceRule(RuleKind.INTERVAL, 1, 3, "few", "[1,3] few")

        assert rule.contains(1)
        assert rule.contains(3)
        assert not rule.contains(0)
        assert not rule.contains(4)

    def test_unbounded_contains_huge_counts(self):
        rule = ChoiceRule(RuleKind.INTERVAL, 4, UNBOUNDED, "many", "[4,*] many")

        assert rule.contains(10**30)

    def test_describe(self):
        assert ChoiceRule(RuleKind.EXACT, 1, 1, "", "").describe() == "{1}"
        assert ChoiceRule(RuleKind.INTERVAL, 2, 5, "", "").describe() == "[2, 5]"
        assert ChoiceRule(RuleKind.INTERVAL, 3, UNBOUNDED, "", "").describe() == "[3, *]"


class TestSelectRule:
    """Test first-match selection."""

    def test_first_match_wins(self):
        rules = parse_choice_rules("[1,*] many|{1} one")

        assert select_rule(rules, 1) is rules[0]

    def test_no_match_without_implicit(self):
        rules = parse_choice_rules("{1} one|{2} two")

        assert select_rule(rules, 7) is None

    def test_uncovered_count_uses_open_implicit(self):
        rules = parse_choice_rules("{1} one|others")

        assert select_rule(rules, 0) is rules[1]


class TestChoose:
    """Test end-to-end phrase selection."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, "none"), (1, "one"), (2, "many"), (5, "many")],
    )
    def test_exact_and_open_interval(self, count: int, expected: str):
        assert choose("{0} none|{1} one|[2,*] many", count) == expected

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(1, "apple"), (0, "apples"), (2, "apples"), (99, "apples")],
    )
    def test_implicit_singular_plural(self, count: int, expected: str):
        assert choose("apple|apples", count) == expected

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(1, "few"), (3, "few"), (4, "many"), (1_000_000, "many")],
    )
    def test_closed_then_open_interval(self, count: int, expected: str):
        assert choose("[1,3] few|[4,*] many", count) == expected

    def test_order_shadowing(self):
        assert choose("[1,*] many|{1} one", 1) == "many"

    def test_no_match_returns_whole_message(self):
        assert choose("[1,3] few|[4,9] several", 0) == "[1,3] few|[4,9] several"
        assert choose("{1} one|{2} two", 3) == "{1} one|{2} two"

    def test_three_implicit_buckets(self):
        text = "one|two|three or more"

        assert choose(text, 1) == "one"
        assert choose(text, 2) == "two"
        assert choose(text, 3) == "three or more"
        assert choose(text, 40) == "three or more"

    def test_plain_message(self):
        assert choose("Hello", 3) == "Hello"

    def test_uncovered_count_prefers_open_implicit_over_whole_message(self):
        assert choose("{1} one|others", 0) == "others"
