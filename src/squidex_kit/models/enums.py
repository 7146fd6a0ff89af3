"""Enumerations used across squidex-kit models."""

from enum import Enum


class LifecycleVerb(str, Enum):
    """Status transitions of a content item.

    The value is the path segment appended after the content id.
    """

    PUBLISH = "publish"
    UNPUBLISH = "unpublish"
    ARCHIVE = "archive"
    RESTORE = "restore"
