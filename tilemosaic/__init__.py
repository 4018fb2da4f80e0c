"""Tiling window layouts as binary split trees rendered to static HTML."""

__version__ = "0.1.0"
__all__ = ["__version__"]