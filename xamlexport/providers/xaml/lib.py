"""XAML provider for element rendering.

Renders element property bags as .NET MAUI / Xamarin.Forms XAML: color and
label style resources for resource dictionaries, and Label, Image, Border
and StackLayout elements for layer snippets.

See: https://learn.microsoft.com/dotnet/maui/xaml/
"""

from textwrap import indent

from xamlexport.elements import (
    Border,
    ColorResource,
    Element,
    Image,
    Label,
    LabelStyle,
    StackLayout,
)
from xamlexport.providers.lib import (
    MarkupProvider,
    escape_attribute,
    format_number,
    register_provider,
)

MAUI_NAMESPACE = "http://schemas.microsoft.com/dotnet/2021/maui"
XAML_NAMESPACE = "http://schemas.microsoft.com/winfx/2009/xaml"

INDENT = "    "


@register_provider
class XamlProvider(MarkupProvider):
    """Renders elements to XAML.

    Example output:
        ```xml
        <Style x:Key="txtHeadline5_1" TargetType="Label">
            <Setter Property="FontSize" Value="24" />
            <Setter Property="FontAttributes" Value="None" />
            <Setter Property="FontFamily" Value="Roboto#400" />
        </Style>
        ```
    """

    @property
    def name(self) -> str:
        """Provider identifier."""
        return "xaml"

    @property
    def file_extension(self) -> str:
        """XAML file extension."""
        return ".xaml"

    @property
    def language(self) -> str:
        """XAML is highlighted as XML."""
        return "xml"

    @property
    def supported_elements(self) -> frozenset[type]:
        """Everything except CSS rules."""
        return frozenset(
            {ColorResource, LabelStyle, Label, Image, Border, StackLayout}
        )

    def render_element(self, element: Element) -> str:
        """Dispatch to the renderer for the element type."""
        if isinstance(element, ColorResource):
            return self._render_color(element)
        if isinstance(element, LabelStyle):
            return self._render_label_style(element)
        if isinstance(element, Label):
            return self._render_label(element)
        if isinstance(element, Image):
            return self._render_image(element)
        if isinstance(element, Border):
            return self._render_border(element)
        return self._render_stack_layout(element)

    def resource_dictionary(self, resources: str) -> str:
        """Wrap rendered resources in a ResourceDictionary document.

        Args:
            resources: Rendered resource markup, one resource per line.

        Returns:
            str: Complete XAML document.
        """
        body = indent(resources, INDENT) if resources else ""
        lines = [
            '<?xml version="1.0" encoding="UTF-8" ?>',
            f'<ResourceDictionary xmlns="{MAUI_NAMESPACE}"',
            f'                    xmlns:x="{XAML_NAMESPACE}">',
        ]
        if body:
            lines.append(body)
        lines.append("</ResourceDictionary>")
        return "\n".join(lines) + "\n"

    def _render_color(self, resource: ColorResource) -> str:
        key = escape_attribute(resource.key or "")
        return f'<Color x:Key="{key}">{resource.color}</Color>\n'

    def _render_label_style(self, style: LabelStyle) -> str:
        setters = [
            ("FontSize", format_number(style.font_size)),
            ("FontAttributes", style.font_attributes),
        ]
        if style.font_family:
            setters.append(("FontFamily", style.font_family))
        if style.text_color:
            setters.append(("TextColor", style.text_color))
        if style.horizontal_text_alignment:
            setters.append(("HorizontalTextAlignment", style.horizontal_text_alignment))

        lines = [f'<Style x:Key="{escape_attribute(style.key)}" TargetType="Label">']
        for prop, value in setters:
            lines.append(
                f'{INDENT}<Setter Property="{prop}" Value="{escape_attribute(value)}" />'
            )
        lines.append("</Style>")
        return "\n".join(lines) + "\n"

    def _render_label(self, label: Label) -> str:
        return (
            f'<Label Text="{escape_attribute(label.text)}" '
            f'Style="{{StaticResource {escape_attribute(label.style)}}}" />\n'
        )

    def _render_image(self, image: Image) -> str:
        return (
            f'<Image WidthRequest="{format_number(image.width_request)}" '
            f'HeightRequest="{format_number(image.height_request)}" '
            f'Source="{escape_attribute(image.source)}" />\n'
        )

    def _render_border(self, border: Border) -> str:
        attributes = self._size_attributes(border.width_request, border.height_request)
        if border.background_color:
            attributes.append(
                f'BackgroundColor="{escape_attribute(border.background_color)}"'
            )
        if border.outline_color:
            attributes.append(f'Stroke="{escape_attribute(border.outline_color)}"')

        lines = [
            f"<Border {' '.join(attributes)}>",
            f"{INDENT}<Border.StrokeShape>",
            f'{INDENT * 2}<RoundRectangle CornerRadius="'
            f'{format_number(border.corner_radius)}" />',
            f"{INDENT}</Border.StrokeShape>",
            "</Border>",
        ]
        return "\n".join(lines) + "\n"

    def _render_stack_layout(self, stack_layout: StackLayout) -> str:
        attributes = self._size_attributes(
            stack_layout.width_request, stack_layout.height_request
        )
        if stack_layout.background_color:
            attributes.append(
                f'BackgroundColor="{escape_attribute(stack_layout.background_color)}"'
            )
        return f"<StackLayout {' '.join(attributes)}>\n</StackLayout>\n"

    def _size_attributes(self, width: float, height: float) -> list[str]:
        return [
            f'WidthRequest="{format_number(width)}"',
            f'HeightRequest="{format_number(height)}"',
        ]
