"""A collection wrapper that holds a collection only while it is non-empty."""

__version__ = "0.1.0"
__all__ = ["lazy"]