"""Design model for the host application's objects.

These models describe the in-memory representation a design tool hands to
the exporter: colors, text styles, layers, and the project or styleguide
that owns the shared resources. They are validated on construction so that
malformed input (for example a text style without a size) fails fast
instead of silently falling into a default typography tier.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field


class LayerType(str, Enum):
    """Kinds of layers the host can hand to the exporter."""

    TEXT = "text"
    SHAPE = "shape"
    GROUP = "group"
    COMPONENT = "component"


class HexColor(BaseModel):
    """Two-digit lowercase hex components of a color."""

    r: str
    g: str
    b: str


class Color(BaseModel):
    """An RGBA color, optionally named when it is a shared resource.

    Attributes:
        r: Red channel (0-255).
        g: Green channel (0-255).
        b: Blue channel (0-255).
        a: Alpha (0-1), 1 meaning fully opaque.
        name: Resource name when the color belongs to a project palette.
    """

    r: Annotated[int, Field(ge=0, le=255)]
    g: Annotated[int, Field(ge=0, le=255)]
    b: Annotated[int, Field(ge=0, le=255)]
    a: Annotated[float, Field(ge=0, le=1)] = 1.0
    name: str | None = None

    model_config = {"frozen": True}

    def to_hex(self) -> HexColor:
        """Return the RGB channels as two-digit lowercase hex strings."""
        return HexColor(r=f"{self.r:02x}", g=f"{self.g:02x}", b=f"{self.b:02x}")

    def equals(self, other: "Color") -> bool:
        """Compare channels only; names are ignored."""
        return (self.r, self.g, self.b, self.a) == (
            other.r,
            other.g,
            other.b,
            other.a,
        )


class TextStyleDescriptor(BaseModel):
    """The fields of a text style that decide its visual identity.

    Two descriptors with equal fields are the same style. `color` is opaque
    here; it is only ever passed to a color resolver.
    """

    font_family: str | None = None
    font_weight: int = 400
    font_size: float = Field(..., allow_inf_nan=False)
    color: Color | str | None = None
    text_align: str | None = None

    model_config = {"frozen": True}


class TextStyle(BaseModel):
    """A text style as defined in a project or styleguide.

    Attributes:
        name: Style name shown in the design tool.
        font_family: Font family name, if any.
        font_weight: Numeric weight (100-950).
        font_size: Point size. Required.
        font_style: Font style, e.g. "normal" or "italic".
        color: Text color.
        text_align: Horizontal alignment ("left", "center", ...).
    """

    name: str = ""
    font_family: str | None = None
    font_weight: int = 400
    font_size: float = Field(..., allow_inf_nan=False)
    font_style: str | None = None
    color: Color | None = None
    text_align: str | None = None

    def to_descriptor(self) -> TextStyleDescriptor:
        """Project this style onto the fields used for deduplication."""
        return TextStyleDescriptor(
            font_family=self.font_family,
            font_weight=self.font_weight,
            font_size=self.font_size,
            color=self.color,
            text_align=self.text_align,
        )


class Rect(BaseModel):
    """Layer bounds in points."""

    x: float = 0
    y: float = 0
    width: float
    height: float


class Fill(BaseModel):
    """A solid fill."""

    color: Color | None = None


class BorderStyle(BaseModel):
    """A layer border with its fill and thickness."""

    fill: Fill
    thickness: float = 1


class TextRun(BaseModel):
    """A range of text in a text layer sharing one style."""

    text_style: TextStyle


class Layer(BaseModel):
    """A single design layer.

    Example:
        >>> layer = Layer(
        ...     type=LayerType.SHAPE,
        ...     name="Card Background",
        ...     rect=Rect(width=320, height=120),
        ...     border_radius=8,
        ... )
    """

    type: LayerType = Field(default=LayerType.SHAPE, description="Layer kind")
    name: str = Field(..., description="Layer name from the design tool")
    rect: Rect
    fills: list[Fill] = Field(default_factory=list)
    borders: list[BorderStyle] = Field(default_factory=list)
    border_radius: float | None = None
    opacity: float = 1
    exportable: bool = Field(
        default=False, description="Whether the layer exports as an image asset"
    )
    content: str | None = Field(None, description="Text content of text layers")
    text_styles: list[TextRun] = Field(default_factory=list)

    model_config = {"use_enum_values": True}

    @property
    def first_text_style(self) -> TextStyle | None:
        """Style of the first text run, if the layer carries text."""
        return self.text_styles[0].text_style if self.text_styles else None


class Project(BaseModel):
    """A design project holding shared colors and text styles."""

    name: str = ""
    colors: list[Color] = Field(default_factory=list)
    text_styles: list[TextStyle] = Field(default_factory=list)

    def find_color_equal(self, color: Color) -> Color | None:
        """Return the first project color with the same channels."""
        for candidate in self.colors:
            if candidate.equals(color):
                return candidate
        return None


class Styleguide(Project):
    """A styleguide: a shared resource container outside any project."""


__all__ = [
    "BorderStyle",
    "Color",
    "Fill",
    "HexColor",
    "Layer",
    "LayerType",
    "Project",
    "Rect",
    "Styleguide",
    "TextRun",
    "TextStyle",
    "TextStyleDescriptor",
]
