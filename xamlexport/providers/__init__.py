"""Markup provider abstraction and registry."""

from xamlexport.providers.lib import (
    MarkupProvider,
    RenderResult,
    RenderWarning,
    escape_attribute,
    format_number,
    get_provider,
    list_providers,
    register_provider,
)

__all__ = [
    "MarkupProvider",
    "RenderResult",
    "RenderWarning",
    "escape_attribute",
    "format_number",
    "get_provider",
    "list_providers",
    "register_provider",
]
