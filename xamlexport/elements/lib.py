"""Element property bags and the layer mapping that fills them.

Each element is a flat record of the attributes a provider renders. The
mapping functions translate one design layer (or resource) into one
element, field by field; they hold no state and make no rendering
decisions beyond which optional attributes are present.
"""

from collections.abc import Callable
from dataclasses import dataclass

from xamlexport.color import actual_key, xaml_color_hex
from xamlexport.design import Color, Layer
from xamlexport.registry import RegisteredStyle

ColorLiteralFn = Callable[[Color], str]


# =============================================================================
# Property Bags
# =============================================================================


@dataclass
class ColorResource:
    """A named color in the Colors resource dictionary."""

    key: str | None
    color: str


@dataclass
class LabelStyle:
    """A keyed label style in the Labels resource dictionary.

    Attributes:
        key: Registry key, e.g. "txtHeadline5_1".
        font_size: Rounded point size.
        font_attributes: "Bold" or "None".
        font_family: "family#weight", or None to omit.
        text_color: Color literal, or None to omit.
        horizontal_text_alignment: Capitalized alignment, or None to omit.
    """

    key: str
    font_size: float
    font_attributes: str
    font_family: str | None = None
    text_color: str | None = None
    horizontal_text_alignment: str | None = None


@dataclass
class Label:
    """A text label referencing a label style."""

    text: str
    style: str


@dataclass
class Image:
    """An image sized to its layer."""

    width_request: float
    height_request: float
    source: str


@dataclass
class Border:
    """A bordered, optionally filled box."""

    width_request: float
    height_request: float
    corner_radius: float = 0
    background_color: str | None = None
    outline_color: str | None = None


@dataclass
class StackLayout:
    """A stacked container sized to its layer."""

    width_request: float
    height_request: float
    background_color: str | None = None


@dataclass
class CssRule:
    """A CSS class block describing a layer."""

    class_name: str
    width: float
    height: float
    opacity: float | None = None
    background_color: str | None = None
    border_color: str | None = None
    border_width: float | None = None
    font_family: str | None = None
    font_size: float | None = None
    font_style: str | None = None
    text_align: str | None = None
    color: str | None = None


Element = (
    ColorResource | LabelStyle | Label | Image | Border | StackLayout | CssRule
)


# =============================================================================
# Mapping
# =============================================================================


def to_image_name(layer_name: str) -> str:
    """Infer an image resource name from a layer name.

    The first underscore becomes a space, the first word is lowercased and
    every following word is capitalized, then whitespace is dropped.

    Example:
        >>> to_image_name("Icon_Arrow Back")
        'iconArrowBack'
    """
    words = layer_name.replace("_", " ", 1).split(" ")
    name = words[0].lower() + "".join(
        word[:1].upper() + word[1:].lower() for word in words[1:]
    )
    return "".join(name.split())


def xaml_color_resource(
    color: Color, duplicate_suffix: str | None = None
) -> ColorResource:
    """Map a project color to its resource entry."""
    return ColorResource(
        key=actual_key(color.name, duplicate_suffix),
        color=xaml_color_hex(color),
    )


def xaml_label_style(
    style: RegisteredStyle, text_alignment_mode: str = "style"
) -> LabelStyle:
    """Map a registered style to a label style resource.

    Alignment is only emitted in "style" alignment mode.
    """
    alignment = None
    if text_alignment_mode == "style" and style.text_align:
        alignment = style.text_align.capitalize()
    return LabelStyle(
        key=style.key,
        font_size=style.font_size,
        font_attributes=style.font_attributes,
        font_family=style.font_family,
        text_color=style.text_color,
        horizontal_text_alignment=alignment,
    )


def xaml_label(text_layer: Layer, style_key: str) -> Label:
    """Map a text layer to a label using an already assigned style key."""
    return Label(text=text_layer.content or "", style=style_key)


def xaml_image(image_layer: Layer) -> Image:
    """Map an exportable layer to an image."""
    return Image(
        width_request=image_layer.rect.width,
        height_request=image_layer.rect.height,
        source=to_image_name(image_layer.name),
    )


def xaml_border(border_layer: Layer, color_literal: ColorLiteralFn) -> Border:
    """Map a layer's bounds, first fill and first border to a Border."""
    border = Border(
        width_request=border_layer.rect.width,
        height_request=border_layer.rect.height,
        corner_radius=border_layer.border_radius or 0,
    )
    if border_layer.fills and border_layer.fills[0].color:
        border.background_color = color_literal(border_layer.fills[0].color)
    if border_layer.borders and border_layer.borders[0].fill.color:
        border.outline_color = color_literal(border_layer.borders[0].fill.color)
    return border


def xaml_stack_layout(
    stack_layer: Layer, color_literal: ColorLiteralFn
) -> StackLayout:
    """Map a layer's bounds and first fill to a StackLayout."""
    stack_layout = StackLayout(
        width_request=stack_layer.rect.width,
        height_request=stack_layer.rect.height,
    )
    if stack_layer.fills and stack_layer.fills[0].color:
        stack_layout.background_color = color_literal(stack_layer.fills[0].color)
    return stack_layout


def css_style(css_layer: Layer) -> CssRule:
    """Map a layer to a CSS rule.

    CSS has no shared color resources, so colors are always hex.
    """
    rule = CssRule(
        class_name=to_image_name(css_layer.name),
        width=css_layer.rect.width,
        height=css_layer.rect.height,
        opacity=css_layer.opacity,
    )

    if css_layer.fills and css_layer.fills[0].color:
        rule.background_color = xaml_color_hex(css_layer.fills[0].color)

    if css_layer.borders:
        first_border = css_layer.borders[0]
        if first_border.fill.color:
            rule.border_color = xaml_color_hex(first_border.fill.color)
        rule.border_width = first_border.thickness

    text_style = css_layer.first_text_style
    if text_style is not None:
        rule.font_family = text_style.font_family
        rule.font_size = text_style.font_size
        rule.font_style = text_style.font_style
        rule.text_align = text_style.text_align
        if text_style.color:
            rule.color = xaml_color_hex(text_style.color)

    return rule


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
