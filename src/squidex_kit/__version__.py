"""Version information for squidex-kit."""

__version__ = "0.1.0"
