"""Literal placeholder substitution.

Parameters are substituted by plain text replacement of their keys, so the
key carries its own delimiters: ``{"%name%": "Anna"}`` replaces ``%name%``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping

__all__ = ["replace_parameters"]


def replace_parameters(message: str, parameters: Mapping[str, object] | None) -> str:
    """Replace every occurrence of each parameter key with its value.

    Keys are applied in mapping order; a value inserted by one key can be
    matched by a later key.

    Args:
        message: Resolved message text
        parameters: Placeholder -> value

    Returns:
        Message with placeholders replaced

    Example:
        >>> replace_parameters("%count% apples", {"%count%": 5})
        '5 apples'
    """
    if not parameters:
        return message
    for key, value in parameters.items():
        if key:
            message = message.replace(key, str(value))
    return message
