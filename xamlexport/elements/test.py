"""Unit tests for element mapping."""

import pytest

from xamlexport.color import ColorResolver, xaml_color_hex
from xamlexport.design import (
    BorderStyle,
    Color,
    Fill,
    Layer,
    LayerType,
    Project,
    Rect,
    TextRun,
    TextStyle,
)
from xamlexport.elements import (
    css_style,
    to_image_name,
    xaml_border,
    xaml_color_resource,
    xaml_image,
    xaml_label,
    xaml_label_style,
    xaml_stack_layout,
)
from xamlexport.registry import RegisteredStyle
from xamlexport.typography import Region

RED = Color(r=255, g=0, b=0)
BLUE = Color(r=0, g=0, b=255)


@pytest.fixture
def shape_layer() -> Layer:
    return Layer(
        name="Card Background",
        rect=Rect(width=320, height=120),
        fills=[Fill(color=RED)],
        borders=[BorderStyle(fill=Fill(color=BLUE), thickness=2)],
        border_radius=8,
        opacity=0.9,
    )


class TestToImageName:
    """Tests for to_image_name."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "layer_name,expected",
        [
            ("Logo", "logo"),
            ("Icon_Arrow Back", "iconArrowBack"),
            ("HERO IMAGE", "heroImage"),
            ("ic_menu_white", "icMenu_white"),
            ("double  space", "doubleSpace"),
        ],
    )
    def test_names(self, layer_name, expected):
        """Layer names become camelCase resource names."""
        assert to_image_name(layer_name) == expected


class TestResources:
    """Tests for resource mapping."""

    @pytest.mark.unit
    def test_color_resource(self):
        """Color resources use the normalized key and hex value."""
        resource = xaml_color_resource(
            Color(r=0, g=102, b=204, name="Primary Blue copy"), " copy"
        )
        assert resource.key == "PrimaryBlue"
        assert resource.color == "#0066CC"

    @pytest.mark.unit
    def test_label_style_capitalizes_alignment(self):
        """Style mode emits capitalized alignment."""
        style = RegisteredStyle(
            key="txtBody2_1",
            region=Region.BODY2,
            index=1,
            font_family="Roboto#400",
            font_size=12.0,
            font_attributes="None",
            text_color="#FF0000",
            text_align="CENTER",
        )
        label_style = xaml_label_style(style)
        assert label_style.key == "txtBody2_1"
        assert label_style.horizontal_text_alignment == "Center"
        assert label_style.font_family == "Roboto#400"

    @pytest.mark.unit
    def test_label_style_other_mode_omits_alignment(self):
        """Any other alignment mode drops alignment."""
        style = RegisteredStyle(
            key="txtBody2_1",
            region=Region.BODY2,
            index=1,
            font_family=None,
            font_size=12.0,
            font_attributes="None",
            text_color=None,
            text_align="left",
        )
        assert xaml_label_style(style, "layer").horizontal_text_alignment is None


class TestLayerMapping:
    """Tests for layer to element mapping."""

    @pytest.mark.unit
    def test_label(self):
        """Labels carry text and the style key."""
        layer = Layer(
            type=LayerType.TEXT,
            name="Title",
            rect=Rect(width=10, height=10),
            content="Hello",
        )
        label = xaml_label(layer, "txtHeadline5_1")
        assert (label.text, label.style) == ("Hello", "txtHeadline5_1")

    @pytest.mark.unit
    def test_image(self):
        """Images take size and a name derived from the layer."""
        layer = Layer(name="App_Logo", rect=Rect(width=48, height=24), exportable=True)
        image = xaml_image(layer)
        assert (image.width_request, image.height_request) == (48, 24)
        assert image.source == "appLogo"

    @pytest.mark.unit
    def test_border_uses_resolver(self, shape_layer):
        """Border colors go through the color resolver."""
        resolve = ColorResolver(Project(colors=[Color(r=255, g=0, b=0, name="Red")]))
        border = xaml_border(shape_layer, resolve)
        assert border.corner_radius == 8
        assert border.background_color == "{StaticResource Red}"
        assert border.outline_color == "#0000FF"

    @pytest.mark.unit
    def test_border_without_fill_or_border(self):
        """Plain layers have no colors and zero radius."""
        border = xaml_border(
            Layer(name="Box", rect=Rect(width=1, height=2)), xaml_color_hex
        )
        assert border.corner_radius == 0
        assert border.background_color is None
        assert border.outline_color is None

    @pytest.mark.unit
    def test_stack_layout(self, shape_layer):
        """Stack layouts take the first fill."""
        stack = xaml_stack_layout(shape_layer, xaml_color_hex)
        assert (stack.width_request, stack.height_request) == (320, 120)
        assert stack.background_color == "#FF0000"

    @pytest.mark.unit
    def test_css_rule_for_shape(self, shape_layer):
        """CSS rules carry box, fill and border attributes."""
        rule = css_style(shape_layer)
        assert rule.class_name == "cardBackground"
        assert rule.background_color == "#FF0000"
        assert rule.border_color == "#0000FF"
        assert rule.border_width == 2
        assert rule.opacity == 0.9
        assert rule.font_family is None

    @pytest.mark.unit
    def test_css_rule_for_text(self):
        """CSS rules for text layers carry the first run's font."""
        layer = Layer(
            type=LayerType.TEXT,
            name="Body Copy",
            rect=Rect(width=200, height=16),
            text_styles=[
                TextRun(
                    text_style=TextStyle(
                        font_family="Roboto",
                        font_size=14,
                        font_style="italic",
                        text_align="left",
                        color=Color(r=0, g=0, b=0, a=0.5),
                    )
                )
            ],
        )
        rule = css_style(layer)
        assert rule.font_family == "Roboto"
        assert rule.font_size == 14
        assert rule.font_style == "italic"
        assert rule.text_align == "left"
        assert rule.color == "#80000000"
