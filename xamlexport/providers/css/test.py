"""Unit tests for CSS provider."""

import pytest

from xamlexport.elements import CssRule
from xamlexport.providers.css import CssProvider
from xamlexport.providers.css.lib import css_color


@pytest.fixture
def provider():
    """Create a CssProvider instance."""
    return CssProvider()


class TestCssProvider:
    """Tests for CssProvider."""

    @pytest.mark.unit
    def test_provider_name(self, provider):
        """Provider has correct name."""
        assert provider.name == "css"
        assert provider.file_extension == ".css"

    @pytest.mark.unit
    def test_minimal_rule(self, provider):
        """A rule always has width and height."""
        result = provider.render(CssRule(class_name="box", width=10, height=20.5))
        assert result == ".box {\n    width: 10px;\n    height: 20.5px;\n}\n"

    @pytest.mark.unit
    def test_full_rule(self, provider):
        """Every present attribute becomes a declaration."""
        result = provider.render(
            CssRule(
                class_name="title",
                width=200,
                height=30,
                opacity=0.5,
                background_color="#FF0000",
                border_color="#800000FF",
                border_width=2,
                font_family="Open Sans",
                font_size=24,
                font_style="italic",
                text_align="center",
                color="#000000",
            )
        )
        assert "opacity: 0.5;" in result
        assert "background-color: #FF0000;" in result
        assert "border-color: #0000FF80;" in result
        assert "border-width: 2px;" in result
        assert "border-style: solid;" in result
        assert 'font-family: "Open Sans";' in result
        assert "font-size: 24px;" in result
        assert "font-style: italic;" in result
        assert "text-align: center;" in result
        assert "color: #000000;" in result

    @pytest.mark.unit
    def test_full_opacity_omitted(self, provider):
        """Opacity 1 is the CSS default and is not emitted."""
        result = provider.render(CssRule(class_name="x", width=1, height=1, opacity=1))
        assert "opacity" not in result


class TestCssColor:
    """Tests for css_color."""

    @pytest.mark.unit
    def test_alpha_moves_to_end(self):
        """XAML #AARRGGBB becomes CSS #RRGGBBAA."""
        assert css_color("#80112233") == "#11223380"

    @pytest.mark.unit
    def test_opaque_unchanged(self):
        """Six-digit colors are shared by both notations."""
        assert css_color("#112233") == "#112233"
