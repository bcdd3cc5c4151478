"""Unit tests for XAML provider."""

import pytest

from xamlexport.elements import (
    Border,
    ColorResource,
    CssRule,
    Image,
    Label,
    LabelStyle,
    StackLayout,
)
from xamlexport.providers.xaml import XamlProvider


@pytest.fixture
def provider():
    """Create a XamlProvider instance."""
    return XamlProvider()


class TestXamlProvider:
    """Tests for XamlProvider."""

    @pytest.mark.unit
    def test_provider_name(self, provider):
        """Provider has correct name."""
        assert provider.name == "xaml"

    @pytest.mark.unit
    def test_file_extension(self, provider):
        """Provider has correct file extension."""
        assert provider.file_extension == ".xaml"
        assert provider.language == "xml"

    @pytest.mark.unit
    def test_css_rule_not_supported(self, provider):
        """CSS rules belong to the css provider."""
        assert not provider.supports(CssRule(class_name="x", width=1, height=1))

    @pytest.mark.unit
    def test_color_resource(self, provider):
        """Colors render as keyed Color resources."""
        result = provider.render(ColorResource(key="PrimaryBlue", color="#0066CC"))
        assert result == '<Color x:Key="PrimaryBlue">#0066CC</Color>\n'

    @pytest.mark.unit
    def test_label_style_full(self, provider):
        """All optional setters render when present."""
        result = provider.render(
            LabelStyle(
                key="txtHeadline5_1",
                font_size=24.0,
                font_attributes="Bold",
                font_family="Roboto#700",
                text_color="{StaticResource Red}",
                horizontal_text_alignment="Left",
            )
        )
        assert result.startswith('<Style x:Key="txtHeadline5_1" TargetType="Label">')
        assert '<Setter Property="FontSize" Value="24" />' in result
        assert '<Setter Property="FontAttributes" Value="Bold" />' in result
        assert '<Setter Property="FontFamily" Value="Roboto#700" />' in result
        assert '<Setter Property="TextColor" Value="{StaticResource Red}" />' in result
        assert '<Setter Property="HorizontalTextAlignment" Value="Left" />' in result
        assert result.rstrip().endswith("</Style>")

    @pytest.mark.unit
    def test_label_style_omits_missing_setters(self, provider):
        """Missing family, color and alignment are left out."""
        result = provider.render(
            LabelStyle(key="txtCaption_1", font_size=10.5, font_attributes="None")
        )
        assert 'Value="10.5"' in result
        assert "FontFamily" not in result
        assert "TextColor" not in result
        assert "HorizontalTextAlignment" not in result

    @pytest.mark.unit
    def test_label(self, provider):
        """Labels reference their style resource."""
        result = provider.render(Label(text="Hello", style="txtBody1_1"))
        assert result == (
            '<Label Text="Hello" Style="{StaticResource txtBody1_1}" />\n'
        )

    @pytest.mark.unit
    def test_label_text_escaping(self, provider):
        """Special characters in label text are escaped."""
        result = provider.render(Label(text='Say "hi" & <bye>', style="s"))
        assert 'Text="Say &quot;hi&quot; &amp; &lt;bye&gt;"' in result

    @pytest.mark.unit
    def test_image(self, provider):
        """Images carry size and source."""
        result = provider.render(
            Image(width_request=48, height_request=24.5, source="appLogo")
        )
        assert 'WidthRequest="48"' in result
        assert 'HeightRequest="24.5"' in result
        assert 'Source="appLogo"' in result

    @pytest.mark.unit
    def test_border(self, provider):
        """Borders render colors and corner radius."""
        result = provider.render(
            Border(
                width_request=320,
                height_request=120,
                corner_radius=8,
                background_color="#FF0000",
                outline_color="#0000FF",
            )
        )
        assert result.startswith(
            '<Border WidthRequest="320" HeightRequest="120" '
            'BackgroundColor="#FF0000" Stroke="#0000FF">'
        )
        assert '<RoundRectangle CornerRadius="8" />' in result
        assert result.rstrip().endswith("</Border>")

    @pytest.mark.unit
    def test_stack_layout(self, provider):
        """Stack layouts render an empty container."""
        result = provider.render(StackLayout(width_request=100, height_request=50))
        assert result == (
            '<StackLayout WidthRequest="100" HeightRequest="50">\n</StackLayout>\n'
        )

    @pytest.mark.unit
    def test_resource_dictionary_indents_resources(self, provider):
        """Resources are indented inside the dictionary."""
        resources = provider.render(ColorResource(key="Red", color="#FF0000"))
        document = provider.resource_dictionary(resources)
        lines = document.splitlines()
        assert lines[0] == '<?xml version="1.0" encoding="UTF-8" ?>'
        assert lines[1].startswith("<ResourceDictionary")
        assert '    <Color x:Key="Red">#FF0000</Color>' in lines
        assert lines[-1] == "</ResourceDictionary>"

    @pytest.mark.unit
    def test_empty_resource_dictionary(self, provider):
        """An empty dictionary is still a valid document."""
        document = provider.resource_dictionary("")
        assert document.rstrip().endswith("</ResourceDictionary>")
        assert "<Color" not in document
