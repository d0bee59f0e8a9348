"""
Argument checks shared by every public entry point.

Each helper returns the checked value so it can be used inline:

    self.name = not_blank(name, "Cookie name must not be blank")
"""

from typing import Optional, TypeVar

T = TypeVar("T")


def not_none(value: Optional[T], message: str) -> T:
    """Ensure value is not None, raising TypeError otherwise."""
    if value is None:
        raise TypeError(message)
    return value


def not_blank(value: Optional[str], message: str) -> str:
    """Ensure value is a string with at least one non-whitespace character."""
    not_none(value, message)
    if not value.strip():
        raise ValueError(message)
    return value


def is_positive(value: int, message: str) -> int:
    """Ensure value is >= 0."""
    if value < 0:
        raise ValueError(message)
    return value
