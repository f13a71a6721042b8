"""Hypothesis strategies for plural templates and counts.

Provides reusable strategies for generating plural test data:
- Counts of every accepted type (int, float, Decimal, numeric string)
- Plain variant texts that parse as neither conditions nor labels
- Separator-free templates

Event-Emitting Strategies (HypoFuzz-Optimized):
- counts: Emits count_type=int|float|decimal|str

Python 3.13+.
"""

from __future__ import annotations

import string
from decimal import Decimal
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

# Letters, digits, spaces and placeholder punctuation only: no separator,
# no condition brackets and no label colon.
_PLAIN_ALPHABET = string.ascii_letters + string.digits + " %.,!'"


@st.composite
def counts(draw: DrawFn) -> int | float | Decimal | str:
    """Generate a plural count of any accepted type.

    Events emitted:
    - count_type=int|float|decimal|str
    """
    kind = draw(st.sampled_from(["int", "float", "decimal", "str"]))
    event(f"count_type={kind}")
    match kind:
        case "int":
            return draw(st.integers(min_value=-1000, max_value=100_000))
        case "float":
            return draw(
                st.floats(min_value=-1000, max_value=100_000, allow_nan=False, allow_infinity=False)
            )
        case "decimal":
            return draw(
                st.decimals(
                    min_value=-1000, max_value=100_000, allow_nan=False,
                    allow_infinity=False, places=2,
                )
            )
        case _:
            return str(draw(st.integers(min_value=0, max_value=100_000)))


def integer_counts() -> st.SearchStrategy[int]:
    """Non-negative integer counts, the common case in real catalogues."""
    return st.integers(min_value=0, max_value=1_000_000)


@st.composite
def plain_variants(draw: DrawFn) -> str:
    """Generate a variant text that is kept verbatim by the parser.

    Starts with a letter so it can never be read as a condition, and holds no
    colon so it can never be read as a label.
    """
    first = draw(st.sampled_from(string.ascii_letters))
    rest = draw(st.text(alphabet=_PLAIN_ALPHABET, max_size=30))
    return first + rest


def separator_free_templates() -> st.SearchStrategy[str]:
    """Arbitrary text without the default '|' separator."""
    return st.text(
        alphabet=st.characters(blacklist_characters="|", blacklist_categories=("Cs",)),
        max_size=60,
    )
