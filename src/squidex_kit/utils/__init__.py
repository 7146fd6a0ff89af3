"""Utility helpers for squidex-kit."""

from squidex_kit.utils.guard import not_none, not_null_or_empty

__all__ = [
    "not_none",
    "not_null_or_empty",
]
