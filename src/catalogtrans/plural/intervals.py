"""Explicit plural conditions: finite sets and ISO 31-11 intervals.

An explicit condition guards a plural variant with an exact rule instead of
an ordinal position:

    {0} No apples|{1} One apple|]1,Inf] %count% apples

Set form ``{n1,n2,...}`` matches any listed integer. Interval form uses
``[`` for an inclusive and ``]`` for an exclusive left bound, ``]`` for an
inclusive and ``[`` for an exclusive right bound; parentheses are accepted as
exclusive bounds too. ``-Inf`` and ``+Inf`` (or ``Inf``) leave a side open.

Reference: https://en.wikipedia.org/wiki/ISO_31-11

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from catalogtrans.enums import ConditionKind
from catalogtrans.plural.numbers import Number

__all__ = [
    "CONDITION_PATTERN",
    "Condition",
    "condition_from_match",
    "condition_matches",
    "parse_condition",
]

_INTEGER = r"-?\d+"
_BOUND_VALUE = r"[-+]?Inf|-?\d+"

# Condition grammar, without anchors. Shared with the template parser so both
# agree on what counts as a condition.
CONDITION_PATTERN = (
    rf"\{{\s*(?P<set>{_INTEGER}(?:\s*,\s*{_INTEGER})*)\s*\}}"
    rf"|(?P<lb>[\[\](])\s*(?P<left>{_BOUND_VALUE})\s*,\s*(?P<right>{_BOUND_VALUE})\s*(?P<rb>[\[\])])"
)

_CONDITION_RE = re.compile(rf"^\s*(?:{CONDITION_PATTERN})")


def _bound(text: str) -> int | float:
    """Convert an interval bound to a number (Inf markers become math.inf)."""
    match text:
        case "-Inf":
            return -math.inf
        case "Inf" | "+Inf":
            return math.inf
        case _:
            return int(text)


@dataclass(frozen=True, slots=True)
class Condition:
    """Parsed explicit plural condition.

    Attributes:
        kind: SET or INTERVAL
        source: Literal condition text as written in the template
        values: Set members (empty for intervals)
        left: Left bound value (intervals only)
        left_inclusive: True if the left bound is ``[``
        right: Right bound value (intervals only)
        right_inclusive: True if the right bound is ``]``
    """

    kind: ConditionKind
    source: str
    values: tuple[int, ...] = ()
    left: int | float = -math.inf
    left_inclusive: bool = False
    right: int | float = math.inf
    right_inclusive: bool = False

    @property
    def is_empty(self) -> bool:
        """True when no count can satisfy the condition (e.g. ``]5,3[``)."""
        if self.kind is ConditionKind.SET:
            return not self.values
        if self.left < self.right:
            return False
        return not (self.left == self.right and self.left_inclusive and self.right_inclusive)

    def matches(self, count: Number) -> bool:
        """Check whether a count satisfies this condition.

        Args:
            count: Numeric count (already coerced from strings)

        Returns:
            True if the count is a set member or lies within the interval
        """
        if self.kind is ConditionKind.SET:
            return any(count == value for value in self.values)

        above = count >= self.left if self.left_inclusive else count > self.left
        below = count <= self.right if self.right_inclusive else count < self.right
        return above and below


def parse_condition(text: str) -> Condition | None:
    """Parse the leading explicit condition of a text.

    Leading whitespace is allowed and kept in the source text. Anything
    after the condition is ignored.

    Args:
        text: Condition source text (e.g. "{1,3,5}", "]1,Inf]")

    Returns:
        Parsed Condition, or None if the text starts with neither a set nor
        an interval

    Example:
        >>> parse_condition("[0, 1]").matches(1)
        True
        >>> parse_condition("one: apple") is None
        True
    """
    match = _CONDITION_RE.match(text)
    if match is None:
        return None
    return condition_from_match(match, match.group(0))


def condition_from_match(match: re.Match[str], source: str) -> Condition:
    """Build a Condition from a match of a pattern embedding CONDITION_PATTERN.

    Args:
        match: Successful match carrying the set or interval groups
        source: Literal condition text, leading whitespace included

    Returns:
        Parsed Condition
    """
    members = match.group("set")
    if members is not None:
        values = tuple(int(part) for part in members.split(","))
        return Condition(kind=ConditionKind.SET, source=source, values=values)

    return Condition(
        kind=ConditionKind.INTERVAL,
        source=source,
        left=_bound(match.group("left")),
        left_inclusive=match.group("lb") == "[",
        right=_bound(match.group("right")),
        right_inclusive=match.group("rb") == "]",
    )


def condition_matches(text: str, count: Number) -> bool:
    """Evaluate a condition source text against a count.

    Text that is neither a set nor an interval never matches.

    Args:
        text: Condition source text
        count: Numeric count

    Returns:
        True if the condition parses and the count satisfies it
    """
    condition = parse_condition(text)
    return condition is not None and condition.matches(count)
