"""Label style registry: deduplication and stable key assignment.

Example usage:
    >>> from xamlexport.registry import StyleRegistry
    >>> registry = StyleRegistry()
    >>> registry.key_for(style.to_descriptor())
    'txtHeadline5_1'
"""

from .lib import RegisteredStyle, RegistryEntry, StyleRegistry, StyleSignature

__all__ = [
    "RegisteredStyle",
    "RegistryEntry",
    "StyleRegistry",
    "StyleSignature",
]
