"""Unit tests for validation module."""

import pytest

from xamlexport.design import Color, Project, TextStyle
from xamlexport.validation import is_valid, validate_project


class TestValidateProject:
    """Tests for validate_project function."""

    @pytest.mark.unit
    def test_valid_project(self):
        """Well-formed project passes validation."""
        project = Project(
            colors=[Color(r=0, g=0, b=0, name="Black"), Color(r=1, g=1, b=1, name="Ink")],
            text_styles=[
                TextStyle(name="Title", font_size=24),
                TextStyle(name="Body", font_size=12),
            ],
        )
        assert validate_project(project) == []
        assert is_valid(project)

    @pytest.mark.unit
    def test_unnamed_color(self):
        """Colors without a name are reported by position."""
        project = Project(colors=[Color(r=0, g=0, b=0, name="Black"), Color(r=1, g=1, b=1)])
        issues = validate_project(project)
        assert len(issues) == 1
        assert issues[0].issue_type == "unnamed_color"
        assert issues[0].subject == "colors[1]"

    @pytest.mark.unit
    def test_colliding_color_keys(self):
        """Names differing only by whitespace collide."""
        project = Project(
            colors=[
                Color(r=0, g=0, b=0, name="Primary Blue"),
                Color(r=0, g=0, b=1, name="PrimaryBlue"),
            ]
        )
        issues = validate_project(project)
        assert len(issues) == 1
        assert issues[0].issue_type == "duplicate_color_key"
        assert issues[0].subject == "PrimaryBlue"
        assert "'Primary Blue'" in issues[0].message

    @pytest.mark.unit
    def test_duplicate_suffix_resources_skipped(self):
        """Suffixed duplicates are ignored like the exporter ignores them."""
        project = Project(
            colors=[
                Color(r=0, g=0, b=0, name="Black"),
                Color(r=0, g=0, b=0, name="Black copy"),
            ],
            text_styles=[
                TextStyle(name="Title", font_size=24),
                TextStyle(name="Title copy", font_size=24),
            ],
        )
        assert validate_project(project, " copy") == []

    @pytest.mark.unit
    def test_duplicate_text_style_names(self):
        """Repeated style names are reported once with a count."""
        project = Project(
            text_styles=[
                TextStyle(name="Body", font_size=12),
                TextStyle(name="Body", font_size=14),
                TextStyle(name="Body", font_size=16),
            ]
        )
        issues = validate_project(project)
        assert len(issues) == 1
        assert issues[0].issue_type == "duplicate_text_style_name"
        assert "3 times" in issues[0].message
        assert not is_valid(project)
