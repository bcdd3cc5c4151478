"""Unit tests for the label style registry."""

import pytest

from xamlexport.color import ColorResolver
from xamlexport.design import Color, Project, TextStyleDescriptor
from xamlexport.registry import StyleRegistry, StyleSignature
from xamlexport.typography import REGION_ORDER, Region


def descriptor(**fields) -> TextStyleDescriptor:
    """Build a descriptor with Roboto 400 red left-aligned defaults."""
    values = {
        "font_family": "Roboto",
        "font_weight": 400,
        "font_size": 24,
        "color": "#FF0000",
        "text_align": "left",
    }
    values.update(fields)
    return TextStyleDescriptor(**values)


@pytest.fixture
def registry() -> StyleRegistry:
    return StyleRegistry()


class TestKeyAssignment:
    """Tests for key_for."""

    @pytest.mark.unit
    def test_end_to_end_scenario(self, registry):
        """Duplicates share a key and a weight change mints the next one."""
        keys = [
            registry.key_for(descriptor()),
            registry.key_for(descriptor()),
            registry.key_for(descriptor(font_weight=700)),
        ]
        assert keys == ["txtHeadline5_1", "txtHeadline5_1", "txtHeadline5_2"]

    @pytest.mark.unit
    def test_same_style_same_key_after_others(self, registry):
        """A repeated style keeps its key however many styles came between."""
        first = registry.key_for(descriptor())
        for size in (24.5, 25, 26, 27):
            registry.key_for(descriptor(font_size=size))
        assert registry.key_for(descriptor()) == first

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "change",
        [
            {"font_family": "Inter"},
            {"font_weight": 700},
            {"font_size": 25},
            {"color": "#00FF00"},
            {"text_align": "center"},
            {"text_align": None},
            {"color": None},
        ],
    )
    def test_any_differing_field_gives_new_key(self, registry, change):
        """Changing one identity field yields a different key."""
        base = registry.key_for(descriptor())
        assert registry.key_for(descriptor(**change)) != base

    @pytest.mark.unit
    def test_sequential_suffixes_per_region(self, registry):
        """Suffixes within a region are 1..k with no gaps."""
        for size in (24, 25, 26, 24, 27, 25):
            registry.key_for(descriptor(font_size=size))
        keys = [style.key for style in registry.entries(Region.HEADLINE5)]
        assert keys == [
            "txtHeadline5_1",
            "txtHeadline5_2",
            "txtHeadline5_3",
            "txtHeadline5_4",
        ]

    @pytest.mark.unit
    def test_regions_count_independently(self, registry):
        """Each region starts its own sequence."""
        assert registry.key_for(descriptor(font_size=24)) == "txtHeadline5_1"
        assert registry.key_for(descriptor(font_size=12)) == "txtBody2_1"
        assert registry.key_for(descriptor(font_size=11)) == "txtBody1_1"
        assert registry.key_for(descriptor(font_size=13)) == "txtCaption_1"
        assert registry.key_for(descriptor(font_size=10)) == "txtCaption_2"

    @pytest.mark.unit
    def test_huge_size_is_keyed(self, registry):
        """Very large finite sizes land in Headline1."""
        assert registry.key_for(descriptor(font_size=1e30)) == "txtHeadline1_1"
        assert registry.key_for(descriptor(font_size=1e30)) == "txtHeadline1_1"

    @pytest.mark.unit
    def test_missing_alignment_distinct_from_named(self, registry):
        """An absent alignment is its own value."""
        none_key = registry.key_for(descriptor(text_align=None))
        empty_key = registry.key_for(descriptor(text_align=""))
        left_key = registry.key_for(descriptor(text_align="left"))
        assert none_key == empty_key
        assert left_key != none_key

    @pytest.mark.unit
    def test_missing_font_size_raises(self, registry):
        """Duck-typed input without a size fails fast."""

        class Partial:
            font_family = "Roboto"
            font_weight = 400
            font_size = None
            color = None
            text_align = None

        with pytest.raises(ValueError):
            registry.key_for(Partial())
        assert len(registry) == 0


class TestSignature:
    """Tests for signature construction."""

    @pytest.mark.unit
    def test_rounding_collision(self, registry):
        """Sizes equal after rounding to two places collide."""
        a = registry.key_for(descriptor(font_size=24.001))
        b = registry.key_for(descriptor(font_size=24.004))
        c = registry.key_for(descriptor(font_size=24.006))
        assert a == b
        assert c != a

    @pytest.mark.unit
    def test_family_rendered_with_weight(self, registry):
        """Family component is family#weight."""
        signature = registry.signature_for(descriptor())
        assert signature == StyleSignature("Roboto#400", 24.0, "#FF0000", "left")

    @pytest.mark.unit
    def test_ignore_family_flag_collapses_family_and_weight(self):
        """With the flag on, family and weight do not matter."""
        registry = StyleRegistry(ignore_font_family=True)
        a = registry.key_for(descriptor(font_family="Roboto", font_weight=400))
        b = registry.key_for(descriptor(font_family="Inter", font_weight=700))
        assert a == b

    @pytest.mark.unit
    def test_family_flag_off_keeps_them_apart(self, registry):
        """With the flag off, family differences are distinct styles."""
        a = registry.key_for(descriptor(font_family="Roboto"))
        b = registry.key_for(descriptor(font_family="Inter"))
        assert a != b

    @pytest.mark.unit
    def test_separator_characters_do_not_collide(self, registry):
        """Field values containing separators stay distinct."""
        a = registry.key_for(descriptor(font_family="A|B", text_align="C"))
        b = registry.key_for(descriptor(font_family="A", text_align="B|C"))
        assert a != b

    @pytest.mark.unit
    def test_colors_resolving_to_same_literal_collide(self):
        """Different color objects with the same resource reference collide."""
        project = Project(colors=[Color(r=255, g=0, b=0, name="Brand Red")])
        registry = StyleRegistry(color_resolver=ColorResolver(project))
        a = registry.key_for(descriptor(color=Color(r=255, g=0, b=0)))
        b = registry.key_for(descriptor(color=Color(r=255, g=0, b=0, name="x")))
        assert a == b
        styles = registry.entries(Region.HEADLINE5)
        assert styles[0].text_color == "{StaticResource BrandRed}"

    @pytest.mark.unit
    def test_default_resolver_uses_hex(self, registry):
        """Without a resolver, Color objects become hex literals."""
        registry.key_for(descriptor(color=Color(r=0, g=0, b=255)))
        assert registry.entries(Region.HEADLINE5)[0].text_color == "#0000FF"


class TestReset:
    """Tests for reset and run lifecycle."""

    @pytest.mark.unit
    def test_reset_clears_everything(self, registry):
        """After reset no key, index or region survives."""
        registry.key_for(descriptor())
        registry.key_for(descriptor(font_size=12))
        registry.reset()
        assert len(registry) == 0
        assert registry.keys() == []
        assert registry.key_for(descriptor(font_size=25)) == "txtHeadline5_1"

    @pytest.mark.unit
    def test_reset_reproduces_keys(self, registry):
        """Reprocessing the same input after reset gives identical keys."""
        inputs = [
            descriptor(font_size=size, text_align=align)
            for size in (12, 24, 16, 24.004, 11)
            for align in ("left", None)
        ]
        first = [registry.key_for(d) for d in inputs]
        registry.reset()
        second = [registry.key_for(d) for d in inputs]
        assert first == second

    @pytest.mark.unit
    def test_independent_instances(self):
        """Separate registries never share state."""
        a, b = StyleRegistry(), StyleRegistry()
        a.key_for(descriptor())
        assert b.key_for(descriptor(font_size=25)) == "txtHeadline5_1"


class TestReadAccess:
    """Tests for entries, groups and keys."""

    @pytest.mark.unit
    def test_groups_in_display_order(self, registry):
        """Groups list every region in display order."""
        registry.key_for(descriptor(font_size=11))
        registry.key_for(descriptor(font_size=60))
        groups = registry.groups()
        assert list(groups) == list(REGION_ORDER)
        assert [s.key for s in groups[Region.HEADLINE1]] == ["txtHeadline1_1"]
        assert groups[Region.CAPTION] == []

    @pytest.mark.unit
    def test_keys_follow_display_then_suffix_order(self, registry):
        """Keys are grouped by region, then first-seen order."""
        registry.key_for(descriptor(font_size=11))
        registry.key_for(descriptor(font_size=25))
        registry.key_for(descriptor(font_size=24))
        assert registry.keys() == ["txtHeadline5_1", "txtHeadline5_2", "txtBody1_1"]

    @pytest.mark.unit
    def test_display_fields(self, registry):
        """Registered styles carry the fields needed for rendering."""
        registry.key_for(descriptor(font_weight=800, font_size=16))
        (style,) = registry.entries("Subtitle1")
        assert style.key == "txtSubtitle1_1"
        assert style.index == 1
        assert style.font_family == "Roboto#800"
        assert style.font_size == 16.0
        assert style.font_attributes == "Bold"
        assert style.text_color == "#FF0000"
        assert style.text_align == "left"

    @pytest.mark.unit
    def test_display_family_omitted_when_ignored(self):
        """Ignored or missing families are None in display fields."""
        registry = StyleRegistry(ignore_font_family=True)
        registry.key_for(descriptor())
        assert registry.entries(Region.HEADLINE5)[0].font_family is None

    @pytest.mark.unit
    def test_entries_returns_copy(self, registry):
        """Callers cannot reorder the registry's own list."""
        registry.key_for(descriptor())
        registry.key_for(descriptor(font_size=25))
        styles = registry.entries(Region.HEADLINE5)
        styles.reverse()
        assert registry.entries(Region.HEADLINE5)[0].key == "txtHeadline5_1"
