"""xaml-export: design-to-XAML transpiler for UI layers and label styles."""

from xamlexport.config import ExportOptions
from xamlexport.design import Color, Layer, Project, Styleguide, TextStyle
from xamlexport.export import ExportContext, ExportSession, GeneratedCode
from xamlexport.providers import get_provider, list_providers
from xamlexport.registry import StyleRegistry
from xamlexport.typography import Region, classify

__all__ = [
    # Core
    "Region",
    "classify",
    "StyleRegistry",
    # Design model
    "Color",
    "Layer",
    "Project",
    "Styleguide",
    "TextStyle",
    # Export
    "ExportContext",
    "ExportOptions",
    "ExportSession",
    "GeneratedCode",
    # Providers
    "get_provider",
    "list_providers",
]
