"""Export module test fixtures."""

from __future__ import annotations

import pytest

from xamlexport.config import ExportOptions
from xamlexport.design import Color, Project, TextStyle

RED = Color(r=255, g=0, b=0, name="Brand Red")
INK = Color(r=17, g=17, b=17, name="Ink")


@pytest.fixture
def options() -> ExportOptions:
    """Default options, independent of the environment."""
    return ExportOptions()


@pytest.fixture
def project() -> Project:
    """A project with two colors and a handful of text styles.

    Style names are deliberately out of alphabetical order.
    """
    return Project(
        name="Demo",
        colors=[INK, RED],
        text_styles=[
            TextStyle(
                name="Title Bold",
                font_family="Roboto",
                font_weight=700,
                font_size=24,
                color=RED,
                text_align="left",
            ),
            TextStyle(
                name="Title",
                font_family="Roboto",
                font_weight=400,
                font_size=24,
                color=RED,
                text_align="left",
            ),
            TextStyle(
                name="Body",
                font_family="Roboto",
                font_weight=400,
                font_size=12,
                color=INK,
            ),
            TextStyle(
                name="Another Title",
                font_family="Roboto",
                font_weight=400,
                font_size=24.004,
                color=RED,
                text_align="left",
            ),
        ],
    )
