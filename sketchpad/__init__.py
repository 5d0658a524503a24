"""A small vector drawing editor: shapes, scribbles, a toolbar, a colour picker and a Tk window."""

__version__ = "1.0.0"
__all__ = ["__version__"]