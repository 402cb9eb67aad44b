"""A console text adventure driven by a binary tree of story events."""

__version__ = "0.1.0"
__all__ = ["__version__"]