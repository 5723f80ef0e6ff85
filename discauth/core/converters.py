"""Attribute converters for raw JSON values.

A converter returns None when the value cannot be represented in the target
type; the caller then skips the attribute instead of storing a default.
"""

from typing import Any, Callable

Converter = Callable[[Any], Any]


def to_string(value: Any) -> str | None:
    """Pass strings through; any other JSON type is skipped."""
    if isinstance(value, str):
        return value
    return None


def to_boolean(value: Any) -> bool | None:
    """
    Examples:
        True -> True
        "true" -> True
        "1" -> True
        "no" -> False
        1 -> True
        0 -> False
        [] -> None
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value in ("true", "1")
    if isinstance(value, int):
        return value == 1
    return None
