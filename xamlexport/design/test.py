"""Unit tests for the design model."""

import math

import pytest
from pydantic import ValidationError

from xamlexport.design import (
    Color,
    Layer,
    LayerType,
    Project,
    Rect,
    TextRun,
    TextStyle,
)


class TestColor:
    """Tests for Color."""

    @pytest.mark.unit
    def test_to_hex_pads_components(self):
        """Channels are two-digit lowercase hex."""
        hex_color = Color(r=10, g=255, b=0).to_hex()
        assert (hex_color.r, hex_color.g, hex_color.b) == ("0a", "ff", "00")

    @pytest.mark.unit
    def test_channel_range_enforced(self):
        """Out-of-range channels are rejected."""
        with pytest.raises(ValidationError):
            Color(r=256, g=0, b=0)
        with pytest.raises(ValidationError):
            Color(r=0, g=0, b=0, a=1.5)

    @pytest.mark.unit
    def test_equals_ignores_name(self):
        """Equality compares channels, not names."""
        assert Color(r=1, g=2, b=3, name="A").equals(Color(r=1, g=2, b=3))
        assert not Color(r=1, g=2, b=3).equals(Color(r=1, g=2, b=3, a=0.5))


class TestTextStyle:
    """Tests for TextStyle and its descriptor."""

    @pytest.mark.unit
    def test_missing_font_size_fails_fast(self):
        """A style without a size is rejected rather than defaulted."""
        with pytest.raises(ValidationError):
            TextStyle(name="Broken")

    @pytest.mark.unit
    def test_nan_font_size_rejected(self):
        """Non-finite sizes are rejected."""
        with pytest.raises(ValidationError):
            TextStyle(name="Broken", font_size=math.nan)

    @pytest.mark.unit
    def test_to_descriptor_copies_fields(self):
        """Descriptor carries the identity fields only."""
        color = Color(r=255, g=0, b=0)
        style = TextStyle(
            name="Title",
            font_family="Roboto",
            font_weight=700,
            font_size=24,
            font_style="italic",
            color=color,
            text_align="left",
        )
        descriptor = style.to_descriptor()
        assert descriptor.font_family == "Roboto"
        assert descriptor.font_weight == 700
        assert descriptor.font_size == 24.0
        assert descriptor.color == color
        assert descriptor.text_align == "left"

    @pytest.mark.unit
    def test_equal_descriptors_compare_equal(self):
        """Descriptors have value identity."""
        a = TextStyle(name="A", font_size=14).to_descriptor()
        b = TextStyle(name="B", font_size=14).to_descriptor()
        assert a == b


class TestLayer:
    """Tests for Layer and Project."""

    @pytest.mark.unit
    def test_layer_defaults(self):
        """A bare layer is a non-exportable shape."""
        layer = Layer(name="Box", rect=Rect(width=10, height=20))
        assert layer.type == LayerType.SHAPE
        assert layer.exportable is False
        assert layer.first_text_style is None

    @pytest.mark.unit
    def test_first_text_style(self):
        """The first run's style is exposed."""
        style = TextStyle(name="Body", font_size=12)
        layer = Layer(
            type=LayerType.TEXT,
            name="Copy",
            rect=Rect(width=100, height=16),
            text_styles=[TextRun(text_style=style)],
        )
        assert layer.first_text_style == style

    @pytest.mark.unit
    def test_layer_from_dict(self):
        """Layers validate from plain JSON-like dicts."""
        layer = Layer.model_validate(
            {
                "type": "text",
                "name": "Title",
                "rect": {"width": 100, "height": 20},
                "text_styles": [{"text_style": {"font_size": 24}}],
            }
        )
        assert layer.type == "text"
        assert layer.first_text_style.font_size == 24

    @pytest.mark.unit
    def test_find_color_equal(self):
        """Project lookup matches by channels."""
        primary = Color(r=0, g=102, b=204, name="Primary")
        project = Project(colors=[Color(r=1, g=1, b=1, name="Other"), primary])
        assert project.find_color_equal(Color(r=0, g=102, b=204)) == primary
        assert project.find_color_equal(Color(r=9, g=9, b=9)) is None
