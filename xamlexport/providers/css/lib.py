"""CSS provider for style fragments.

Renders a CssRule as a class block so a layer's box, fill, border and font
can be reused in web or MAUI CSS stylesheets.
"""

from xamlexport.elements import CssRule, Element
from xamlexport.providers.lib import MarkupProvider, format_number, register_provider


def css_color(xaml_hex: str) -> str:
    """Convert a XAML hex literal to CSS notation.

    XAML puts alpha first (``#AARRGGBB``) while CSS puts it last
    (``#RRGGBBAA``); opaque ``#RRGGBB`` values are identical.
    """
    if len(xaml_hex) == 9 and xaml_hex.startswith("#"):
        return f"#{xaml_hex[3:]}{xaml_hex[1:3]}"
    return xaml_hex


@register_provider
class CssProvider(MarkupProvider):
    """Renders CssRule elements to CSS.

    Example output:
        ```css
        .cardBackground {
            width: 320px;
            height: 120px;
            background-color: #FF0000;
        }
        ```
    """

    @property
    def name(self) -> str:
        """Provider identifier."""
        return "css"

    @property
    def file_extension(self) -> str:
        """CSS file extension."""
        return ".css"

    @property
    def language(self) -> str:
        """Language tag."""
        return "css"

    @property
    def supported_elements(self) -> frozenset[type]:
        """Only CSS rules."""
        return frozenset({CssRule})

    def render_element(self, element: Element) -> str:
        """Render a CssRule as a class block."""
        declarations = self._declarations(element)
        lines = [f".{element.class_name} {{"]
        lines.extend(f"    {prop}: {value};" for prop, value in declarations)
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _declarations(self, rule: CssRule) -> list[tuple[str, str]]:
        declarations = [
            ("width", f"{format_number(rule.width)}px"),
            ("height", f"{format_number(rule.height)}px"),
        ]
        if rule.opacity is not None and rule.opacity != 1:
            declarations.append(("opacity", format_number(rule.opacity)))
        if rule.background_color:
            declarations.append(("background-color", css_color(rule.background_color)))
        if rule.border_color:
            declarations.append(("border-color", css_color(rule.border_color)))
        if rule.border_width is not None:
            declarations.append(("border-width", f"{format_number(rule.border_width)}px"))
            declarations.append(("border-style", "solid"))
        if rule.font_family:
            declarations.append(("font-family", self._font_family(rule.font_family)))
        if rule.font_size is not None:
            declarations.append(("font-size", f"{format_number(rule.font_size)}px"))
        if rule.font_style:
            declarations.append(("font-style", rule.font_style))
        if rule.text_align:
            declarations.append(("text-align", rule.text_align))
        if rule.color:
            declarations.append(("color", css_color(rule.color)))
        return declarations

    def _font_family(self, family: str) -> str:
        """Quote family names containing spaces."""
        if " " in family:
            return f'"{family}"'
        return family
