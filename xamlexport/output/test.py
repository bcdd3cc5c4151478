"""Unit tests for output formatting."""

import pytest

from xamlexport.design import TextStyleDescriptor
from xamlexport.output import format_registry_tree, summarize_registry
from xamlexport.registry import StyleRegistry
from xamlexport.typography import Region


@pytest.fixture
def registry() -> StyleRegistry:
    registry = StyleRegistry()
    for weight in (400, 700):
        registry.key_for(
            TextStyleDescriptor(
                font_family="Roboto",
                font_weight=weight,
                font_size=24,
                color="#FF0000",
                text_align="left",
            )
        )
    registry.key_for(TextStyleDescriptor(font_size=12))
    return registry


class TestFormatRegistryTree:
    """Tests for format_registry_tree."""

    @pytest.mark.unit
    def test_tree(self, registry):
        """Regions and keys are drawn as a tree."""
        assert format_registry_tree(registry) == "\n".join(
            [
                "Labels",
                "├── Headline5",
                "│   ├── txtHeadline5_1 [Roboto#400, 24, #FF0000, left]",
                "│   └── txtHeadline5_2 [Roboto#700, 24, Bold, #FF0000, left]",
                "└── Body2",
                "    └── txtBody2_1 [12]",
            ]
        )

    @pytest.mark.unit
    def test_empty_registry(self):
        """An empty registry is just the title."""
        assert format_registry_tree(StyleRegistry(), title="Empty") == "Empty"

    @pytest.mark.unit
    def test_fractional_size(self):
        """Fractional sizes keep their decimals."""
        registry = StyleRegistry()
        registry.key_for(TextStyleDescriptor(font_size=10.5))
        assert "txtCaption_1 [10.5]" in format_registry_tree(registry)


class TestSummarizeRegistry:
    """Tests for summarize_registry."""

    @pytest.mark.unit
    def test_counts(self, registry):
        """Counts cover non-empty regions in display order."""
        assert summarize_registry(registry) == {Region.HEADLINE5: 2, Region.BODY2: 1}
