"""Element property bags and layer mapping."""

from .lib import (
    Border,
    ColorResource,
    CssRule,
    Element,
    Image,
    Label,
    LabelStyle,
    StackLayout,
    css_style,
    to_image_name,
    xaml_border,
    xaml_color_resource,
    xaml_image,
    xaml_label,
    xaml_label_style,
    xaml_stack_layout,
)

__all__ = [
    # Property bags
    "Border",
    "ColorResource",
    "CssRule",
    "Element",
    "Image",
    "Label",
    "LabelStyle",
    "StackLayout",
    # Mapping
    "css_style",
    "to_image_name",
    "xaml_border",
    "xaml_color_resource",
    "xaml_image",
    "xaml_label",
    "xaml_label_style",
    "xaml_stack_layout",
]
