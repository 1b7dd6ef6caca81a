"""Count-based phrase selection.

A countable message packs several phrase variants into one string,
separated by ``|``. Each variant may carry a range marker:

- ``{N}`` selects the variant for exactly ``N``.
- ``[low,high]`` selects it for ``low <= count <= high``; ``[low,*]`` has
  no upper bound.
- Variants without a marker are implicit. They are numbered 1, 2, 3, ...
  among the implicit variants only, and the last one is open-ended, so
  ``"apple|apples"`` reads as 1 -> "apple", 2 and up -> "apples".

Selection takes the first variant, in written order, whose range contains
the count. A wide range written before a narrower one shadows it. A count
that no range covers falls to the open-ended implicit variant when the
message has one; otherwise the whole message is returned unchanged. So
``"{1} one|others"`` gives ``others`` for 0, not the whole message.

Example:
    >>> choose("{0} none|{1} one|[2,*] many", 5)
    'many'
    >>> choose("apple|apples", 1)
    'apple'
    >>> choose("[1,*] many|{1} one", 1)
    'many'
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, replace
from enum import Enum

CHOICE_SEPARATOR = "|"
UNBOUNDED = sys.maxsize

EXACT_PATTERN = re.compile(r"\{(?P<value>\d+)\}")
INTERVAL_PATTERN = re.compile(r"\[\s*(?P<low>\d+)\s*,\s*(?P<high>\d+|\*)\s*\]")


class RuleKind(str, Enum):
    """How a choice rule was written."""

    EXACT = "exact"
    INTERVAL = "interval"
    IMPLICIT = "implicit"


@dataclass(frozen=True)
class ChoiceRule:
    """One parsed phrase variant.

    Attributes:
        kind: Marker style the variant was written with
        low: Inclusive lower bound
        high: Inclusive upper bound (``UNBOUNDED`` for open ranges)
        text: Phrase with its marker removed
        raw: Variant exactly as written
    """

    kind: RuleKind
    low: int
    high: int
    text: str
    raw: str

    @property
    def is_exact(self) -> bool:
        return self.kind is RuleKind.EXACT

    @property
    def is_interval(self) -> bool:
        return self.kind is RuleKind.INTERVAL

    @property
    def is_implicit(self) -> bool:
        return self.kind is RuleKind.IMPLICIT

    @property
    def unbounded(self) -> bool:
        return self.high == UNBOUNDED

    def contains(self, count: int | float) -> bool:
        """Check whether the inclusive range covers a count."""
        if count < self.low:
            return False
        return self.unbounded or count <= self.high

    def describe(self) -> str:
        """Human-readable range, e.g. ``{1}``, ``[2, 5]`` or ``[3, *]``."""
        high = "*" if self.unbounded else str(self.high)
        if self.low == self.high:
            return f"{{{self.low}}}"
        return f"[{self.low}, {high}]"


# =============================================================================
# Parsing
# =============================================================================


def split_choices(text: str) -> list[str]:
    """Split a countable message into its raw variants, keeping order."""
    return text.split(CHOICE_SEPARATOR)


def _strip_marker(segment: str, match: re.Match[str]) -> str:
    # Only the first marker is removed.
    start, end = match.span()
    return (segment[:start] + segment[end:]).strip()


def parse_segment(segment: str) -> ChoiceRule:
    """Classify and parse a single variant.

    Exact markers take precedence over interval markers. Implicit variants
    come back with a zero range; ``parse_choice_rules`` numbers them.

    Args:
        segment: One ``|``-separated variant

    Returns:
        Parsed rule
    """
    exact = EXACT_PATTERN.search(segment)
    if exact is not None:
        value = int(exact.group("value"))
        return ChoiceRule(
            kind=RuleKind.EXACT,
            low=value,
            high=value,
            text=_strip_marker(segment, exact),
            raw=segment,
        )

    interval = INTERVAL_PATTERN.search(segment)
    if interval is not None:
        high_token = interval.group("high")
        return ChoiceRule(
            kind=RuleKind.INTERVAL,
            low=int(interval.group("low")),
            high=UNBOUNDED if high_token == "*" else int(high_token),
            text=_strip_marker(segment, interval),
            raw=segment,
        )

    return ChoiceRule(kind=RuleKind.IMPLICIT, low=0, high=0, text=segment, raw=segment)


def parse_choice_rules(text: str) -> list[ChoiceRule]:
    """Parse a countable message into rules, in written order.

    Args:
        text: Message with ``|``-separated variants

    Returns:
        One rule per variant. Implicit rules are numbered 1..n by their
        position among implicit rules, and the last one is open-ended.
    """
    rules = [parse_segment(segment) for segment in split_choices(text)]

    implicit_positions = [i for i, rule in enumerate(rules) if rule.is_implicit]
    for ordinal, index in enumerate(implicit_positions, start=1):
        last = ordinal == len(implicit_positions)
        rules[index] = replace(
            rules[index],
            low=ordinal,
            high=UNBOUNDED if last else ordinal,
        )

    return rules


# =============================================================================
# Selection
# =============================================================================


def select_rule(rules: list[ChoiceRule], count: int | float) -> ChoiceRule | None:
    """Return the rule selected for a count.

    The first rule, in the given order, whose range contains the count wins.
    Counts no range covers (such as 0 in ``"apple|apples"``) fall to the
    open-ended implicit rule when there is one.

    Args:
        rules: Rules in written order
        count: Quantity to select for

    Returns:
        Selected rule, or None when nothing matches and no implicit rule
        exists.
    """
    for rule in rules:
        if rule.contains(count):
            return rule

    implicit = [rule for rule in rules if rule.is_implicit]
    if implicit:
        return implicit[-1]
    return None


def choose(text: str, count: int | float) -> str:
    """Pick the phrase variant for a count.

    Args:
        text: Countable message (placeholders already substituted)
        count: Quantity to select for

    Returns:
        Text of the selected variant, or ``text`` unchanged when
        ``select_rule`` selects nothing.
    """
    rule = select_rule(parse_choice_rules(text), count)
    if rule is None:
        return text
    return rule.text


__all__ = [
    "CHOICE_SEPARATOR",
    "UNBOUNDED",
    "EXACT_PATTERN",
    "INTERVAL_PATTERN",
    "RuleKind",
    "ChoiceRule",
    "split_choices",
    "parse_segment",
    "parse_choice_rules",
    "select_rule",
    "choose",
]
