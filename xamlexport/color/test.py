"""Unit tests for color translation."""

import pytest

from xamlexport.color import ColorResolver, actual_key, xaml_color_hex
from xamlexport.design import Color, Project


class TestXamlColorHex:
    """Tests for xaml_color_hex."""

    @pytest.mark.unit
    def test_opaque_color_omits_alpha(self):
        """Opaque colors render as #RRGGBB."""
        assert xaml_color_hex(Color(r=255, g=0, b=0)) == "#FF0000"

    @pytest.mark.unit
    def test_translucent_color_prefixes_alpha(self):
        """Translucent colors render as #AARRGGBB."""
        assert xaml_color_hex(Color(r=0, g=102, b=204, a=0.5)) == "#800066CC"

    @pytest.mark.unit
    def test_transparent(self):
        """Zero alpha pads to two digits."""
        assert xaml_color_hex(Color(r=1, g=2, b=3, a=0)) == "#00010203"


class TestActualKey:
    """Tests for actual_key."""

    @pytest.mark.unit
    def test_strips_whitespace(self):
        """All whitespace is removed."""
        assert actual_key("Primary Blue\t 2") == "PrimaryBlue2"

    @pytest.mark.unit
    def test_removes_duplicate_suffix_once(self):
        """Only the first suffix occurrence is removed."""
        assert actual_key("Red-copy-copy", "-copy") == "Red-copy"

    @pytest.mark.unit
    def test_without_suffix(self):
        """No suffix configured leaves the name intact."""
        assert actual_key("Red-copy", None) == "Red-copy"

    @pytest.mark.unit
    def test_empty_name(self):
        """Empty names have no key."""
        assert actual_key("") is None
        assert actual_key(None) is None


class TestColorResolver:
    """Tests for ColorResolver."""

    @pytest.fixture
    def project(self) -> Project:
        return Project(
            colors=[
                Color(r=0, g=102, b=204, name="Primary Blue"),
                Color(r=255, g=255, b=255, name="White copy"),
            ]
        )

    @pytest.mark.unit
    def test_shared_resource_takes_precedence(self, project):
        """Project colors resolve to StaticResource references."""
        resolve = ColorResolver(project)
        assert resolve(Color(r=0, g=102, b=204)) == "{StaticResource PrimaryBlue}"

    @pytest.mark.unit
    def test_unknown_color_is_hex(self, project):
        """Colors outside the project resolve to hex."""
        resolve = ColorResolver(project)
        assert resolve(Color(r=1, g=1, b=1)) == "#010101"

    @pytest.mark.unit
    def test_duplicate_suffix_stripped_from_reference(self, project):
        """Resource keys drop the duplicate suffix."""
        resolve = ColorResolver(project, duplicate_suffix=" copy")
        assert resolve(Color(r=255, g=255, b=255)) == "{StaticResource White}"

    @pytest.mark.unit
    def test_without_project(self):
        """Without a project every color is hex."""
        assert ColorResolver()(Color(r=0, g=102, b=204)) == "#0066CC"

    @pytest.mark.unit
    def test_none_and_strings(self):
        """Missing colors are empty and literals pass through."""
        resolve = ColorResolver()
        assert resolve(None) == ""
        assert resolve("#ABCDEF") == "#ABCDEF"

    @pytest.mark.unit
    def test_unnamed_project_color_falls_back_to_hex(self):
        """A project color without a name cannot be referenced."""
        resolve = ColorResolver(Project(colors=[Color(r=9, g=9, b=9)]))
        assert resolve(Color(r=9, g=9, b=9)) == "#090909"
