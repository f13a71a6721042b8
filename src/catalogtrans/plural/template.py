"""Plural template parsing.

A raw template holds one or more variants separated by ``|``:

    interval: {0} There are no apples|{1} There is one apple|]1,Inf] There are %count% apples
    indexed:  There is one apple|There are %count% apples
    labelled: one: There is one apple|more: There are %count% apples

Variants guarded by a set or interval are explicit rules; all others are
standard variants selected by position. Labels (``word:``) are informational
and stripped. The styles may be mixed in one template.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass

from catalogtrans.constants import DEFAULT_PLURAL_SEPARATOR, MAX_TEMPLATE_CACHE_SIZE
from catalogtrans.plural.intervals import CONDITION_PATTERN, Condition, condition_from_match

__all__ = [
    "ExplicitRule",
    "ParsedMessage",
    "clear_template_cache",
    "parse_template",
]

logger = logging.getLogger(__name__)

# Condition, at most one separating whitespace character, then the variant text.
_EXPLICIT_RE = re.compile(rf"^\s*(?P<condition>{CONDITION_PATTERN})\s?(?P<text>.+)$", re.DOTALL)
_LABEL_RE = re.compile(r"^\w+:\s*(?P<text>.+)$", re.DOTALL)


@dataclass(frozen=True, slots=True)
class ExplicitRule:
    """Variant guarded by an explicit set or interval condition.

    Attributes:
        condition: Parsed condition
        text: Variant text following the condition
    """

    condition: Condition
    text: str

    @property
    def key(self) -> str:
        """Literal condition text (leading whitespace included) identifying this rule."""
        return self.condition.source


@dataclass(frozen=True, slots=True)
class ParsedMessage:
    """Template split into explicit rules and standard variants.

    Attributes:
        standard: Standard variant texts in source order
        explicit: Explicit rules in first-declaration order
        segment_count: Number of separator-delimited segments
    """

    standard: tuple[str, ...]
    explicit: tuple[ExplicitRule, ...]
    segment_count: int

    @property
    def is_plural(self) -> bool:
        """True if the template contained at least one separator."""
        return self.segment_count > 1

    def explicit_rules(self) -> tuple[tuple[str, str], ...]:
        """Explicit rules as ordered (condition text, variant text) pairs."""
        return tuple((rule.key, rule.text) for rule in self.explicit)


@functools.lru_cache(maxsize=MAX_TEMPLATE_CACHE_SIZE)
def parse_template(template: str, separator: str = DEFAULT_PLURAL_SEPARATOR) -> ParsedMessage:
    """Parse a raw template into explicit rules and standard variants.

    Each segment is tried as an explicit rule, then as a labelled variant,
    and is otherwise kept verbatim as a standard variant. Explicit rules
    sharing a condition text collapse to one: the last text wins, the first
    position is kept.

    Results are cached; ParsedMessage is immutable.

    Args:
        template: Raw template text
        separator: Variant separator (default "|")

    Returns:
        ParsedMessage for the template

    Raises:
        ValueError: If separator is empty

    Example:
        >>> parsed = parse_template("{0} none|one: one apple|%count% apples")
        >>> parsed.standard
        ('one apple', '%count% apples')
        >>> parsed.explicit_rules()
        (('{0}', 'none'),)
    """
    if not separator:
        msg = "Plural separator cannot be empty"
        raise ValueError(msg)

    segments = template.split(separator)
    standard: list[str] = []
    explicit: dict[str, ExplicitRule] = {}

    for segment in segments:
        if (match := _EXPLICIT_RE.match(segment)) is not None:
            # Key is the condition as written, leading whitespace included
            condition = condition_from_match(match, segment[: match.end("condition")])
            explicit[condition.source] = ExplicitRule(condition, match.group("text"))
        elif (match := _LABEL_RE.match(segment)) is not None:
            standard.append(match.group("text"))
        else:
            standard.append(segment)

    if len(segments) > 1:
        logger.debug(
            "Parsed plural template: %d explicit rule(s), %d standard variant(s)",
            len(explicit),
            len(standard),
        )
    return ParsedMessage(
        standard=tuple(standard),
        explicit=tuple(explicit.values()),
        segment_count=len(segments),
    )


def clear_template_cache() -> None:
    """Discard all cached parse results."""
    parse_template.cache_clear()
    logger.debug("Template cache cleared")
