"""Data models for squidex-kit."""

from .config import SquidexConfig, load_config
from .entity import DynamicContent, SquidexEntities, SquidexEntityBase
from .enums import LifecycleVerb
from .query import ContentQuery

__all__ = [
    "SquidexConfig",
    "load_config",
    "SquidexEntityBase",
    "SquidexEntities",
    "DynamicContent",
    "LifecycleVerb",
    "ContentQuery",
]
