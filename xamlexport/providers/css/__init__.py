"""CSS style fragment provider."""

from .lib import CssProvider

__all__ = ["CssProvider"]
