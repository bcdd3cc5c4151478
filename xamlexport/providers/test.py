"""Unit tests for the providers module.

Tests for:
- MarkupProvider abstract base class
- Provider registry (register_provider, get_provider, list_providers)
- Rendering with warnings for unsupported elements
"""

import pytest

from xamlexport.elements import CssRule, Label
from xamlexport.providers import (
    MarkupProvider,
    format_number,
    get_provider,
    list_providers,
)


class TestMarkupProviderContract:
    """Tests for MarkupProvider abstract base class contract."""

    @pytest.mark.unit
    def test_markup_provider_is_abstract(self):
        """MarkupProvider cannot be instantiated directly."""
        with pytest.raises(TypeError, match="abstract"):
            MarkupProvider()  # type: ignore

    @pytest.mark.unit
    def test_concrete_provider_requires_render_element(self):
        """Concrete providers must implement render_element."""

        class IncompleteProvider(MarkupProvider):
            @property
            def name(self) -> str:
                return "incomplete"

            @property
            def file_extension(self) -> str:
                return ".test"

            @property
            def language(self) -> str:
                return "text"

            @property
            def supported_elements(self) -> frozenset[type]:
                return frozenset({Label})

        with pytest.raises(TypeError, match="abstract"):
            IncompleteProvider()

    @pytest.mark.unit
    def test_custom_provider_renders(self):
        """A minimal provider renders its supported elements."""

        class TextProvider(MarkupProvider):
            @property
            def name(self) -> str:
                return "text"

            @property
            def file_extension(self) -> str:
                return ".txt"

            @property
            def language(self) -> str:
                return "text"

            @property
            def supported_elements(self) -> frozenset[type]:
                return frozenset({Label})

            def render_element(self, element) -> str:
                return element.text

        provider = TextProvider()
        assert provider.render(Label(text="Hi", style="s")) == "Hi"
        with pytest.raises(TypeError, match="not supported"):
            provider.render(CssRule(class_name="x", width=1, height=1))


class TestProviderRegistry:
    """Tests for provider lookup."""

    @pytest.mark.unit
    def test_list_providers(self):
        """Both built-in providers are registered."""
        providers = list_providers()
        assert "xaml" in providers
        assert "css" in providers

    @pytest.mark.unit
    def test_get_provider_returns_instance(self):
        """get_provider returns a fresh instance."""
        provider = get_provider("xaml")
        assert isinstance(provider, MarkupProvider)
        assert provider.name == "xaml"
        assert get_provider("xaml") is not provider

    @pytest.mark.unit
    def test_unknown_provider(self):
        """Unknown names raise KeyError listing what is available."""
        with pytest.raises(KeyError, match="Unknown provider 'svg'"):
            get_provider("svg")


class TestRenderWithWarnings:
    """Tests for render_with_warnings."""

    @pytest.mark.unit
    def test_unsupported_elements_are_skipped_with_warning(self):
        """Elements outside a provider's set produce warnings."""
        provider = get_provider("css")
        result = provider.render_with_warnings(
            [
                Label(text="Hi", style="txtBody1_1"),
                CssRule(class_name="box", width=10, height=10),
            ]
        )
        assert result.provider == "css"
        assert result.has_warnings
        assert result.warnings[0].element_type == "Label"
        assert ".box {" in result.code
        assert "Hi" not in result.code

    @pytest.mark.unit
    def test_no_warnings(self):
        """Fully supported input has no warnings."""
        result = get_provider("xaml").render_with_warnings(
            [Label(text="Hi", style="txtBody1_1")]
        )
        assert not result.has_warnings


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [(24, "24"), (24.0, "24"), (24.5, "24.5"), (0.9, "0.9"), (13.13, "13.13")],
    )
    def test_format(self, value, expected):
        """Whole numbers drop the fraction."""
        assert format_number(value) == expected
