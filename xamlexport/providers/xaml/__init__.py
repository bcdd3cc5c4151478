"""XAML markup provider."""

from .lib import XamlProvider

__all__ = ["XamlProvider"]
