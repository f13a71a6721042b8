"""Plural resolution engine.

Submodules:
    numbers      - Count coercion and truncating remainder
    intervals    - Explicit set/interval conditions
    plural_rules - Per-language plural position table
    template     - Template parser (ParsedMessage, ExplicitRule)
    resolver     - Variant selection (pluralize)

Python 3.13+.
"""

from .intervals import Condition, condition_matches, parse_condition
from .numbers import Number, coerce_count
from .plural_rules import get_plural_position, plural_form_count
from .resolver import extract_count, pluralize, select_variant
from .template import ExplicitRule, ParsedMessage, clear_template_cache, parse_template

__all__ = [
    "Condition",
    "ExplicitRule",
    "Number",
    "ParsedMessage",
    "clear_template_cache",
    "coerce_count",
    "condition_matches",
    "extract_count",
    "get_plural_position",
    "parse_condition",
    "parse_template",
    "plural_form_count",
    "pluralize",
    "select_variant",
]
