"""Design model: the host application's colors, text styles and layers."""

from .lib import (
    BorderStyle,
    Color,
    Fill,
    HexColor,
    Layer,
    LayerType,
    Project,
    Rect,
    Styleguide,
    TextRun,
    TextStyle,
    TextStyleDescriptor,
)

__all__ = [
    # Colors
    "Color",
    "HexColor",
    # Text
    "TextStyle",
    "TextStyleDescriptor",
    "TextRun",
    # Layers
    "Layer",
    "LayerType",
    "Rect",
    "Fill",
    "BorderStyle",
    # Containers
    "Project",
    "Styleguide",
]
