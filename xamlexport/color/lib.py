"""Color translation to XAML literals and resource references."""

import re

from xamlexport.design import Color, Project

_WHITESPACE = re.compile(r"\s")


def xaml_color_hex(color: Color) -> str:
    """Format a color as an upper-case XAML hex literal.

    Opaque colors use ``#RRGGBB``; translucent colors put the alpha byte
    first as ``#AARRGGBB``.

    Example:
        >>> xaml_color_hex(Color(r=255, g=0, b=0))
        '#FF0000'
        >>> xaml_color_hex(Color(r=255, g=0, b=0, a=0.5))
        '#80FF0000'
    """
    hex_color = color.to_hex()
    rgb = f"{hex_color.r}{hex_color.g}{hex_color.b}"
    if color.a == 1:
        return f"#{rgb}".upper()
    alpha = f"{round(color.a * 255):02x}"
    return f"#{alpha}{rgb}".upper()


def actual_key(name: str | None, duplicate_suffix: str | None = None) -> str | None:
    """Turn a resource name into a XAML key.

    Removes the first occurrence of the duplicate suffix and every
    whitespace character.

    Args:
        name: Resource name from the design tool.
        duplicate_suffix: Suffix the host appends to duplicated resources.

    Returns:
        The key, or None for an empty name.
    """
    if not name:
        return None
    if duplicate_suffix:
        name = name.replace(duplicate_suffix, "", 1)
    return _WHITESPACE.sub("", name)


def static_resource(key: str) -> str:
    """Format a StaticResource markup extension."""
    return f"{{StaticResource {key}}}"


class ColorResolver:
    """Resolve colors to shared-resource references or hex literals.

    A color equal to one of the project's named colors resolves to
    ``{StaticResource Key}``; anything else resolves to its hex literal.
    Instances are callable so they can be handed to a style registry.

    Example:
        >>> resolve = ColorResolver(project)
        >>> resolve(Color(r=0, g=102, b=204))
        '{StaticResource PrimaryBlue}'
    """

    def __init__(
        self,
        project: Project | None = None,
        duplicate_suffix: str | None = None,
    ):
        """Initialize resolver.

        Args:
            project: Project whose colors are shared resources.
            duplicate_suffix: Suffix stripped from resource names.
        """
        self._project = project
        self._duplicate_suffix = duplicate_suffix

    def __call__(self, color: Color | str | None) -> str:
        """Resolve a color to its literal; strings pass through."""
        if color is None:
            return ""
        if isinstance(color, str):
            return color
        return self.literal(color)

    def literal(self, color: Color) -> str:
        """Shared-resource reference if the project has this color, else hex."""
        if self._project is not None:
            resource = self._project.find_color_equal(color)
            if resource is not None:
                key = actual_key(resource.name, self._duplicate_suffix)
                if key:
                    return static_resource(key)
        return xaml_color_hex(color)


__all__ = [
    "ColorResolver",
    "actual_key",
    "static_resource",
    "xaml_color_hex",
]
