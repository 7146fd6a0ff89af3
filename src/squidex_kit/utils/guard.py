"""Argument guards.

Each guard raises ``InvalidArgumentError`` naming the offending argument
and returns the value unchanged so it can be used inline.
"""

from typing import TypeVar

from ..exceptions import InvalidArgumentError

T = TypeVar("T")


def not_none(value: T | None, name: str) -> T:
    """Ensure ``value`` is not None."""
    if value is None:
        raise InvalidArgumentError(f"{name} cannot be None", argument_name=name)
    return value


def not_null_or_empty(value: str | None, name: str) -> str:
    """Ensure ``value`` is a string that is neither empty nor whitespace."""
    if value is None:
        raise InvalidArgumentError(f"{name} cannot be None", argument_name=name)
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{name} must be a string, got {type(value).__name__}", argument_name=name
        )
    if not value.strip():
        raise InvalidArgumentError(f"{name} cannot be empty", argument_name=name)
    return value
