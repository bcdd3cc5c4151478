"""Tests for the xamlexport command line interface."""

import json

import pytest

from xamlexport.__main__ import main


@pytest.fixture
def project_file(tmp_path):
    """Write a small project document."""
    project = {
        "name": "Demo",
        "colors": [
            {"r": 255, "g": 0, "b": 0, "name": "Brand Red"},
            {"r": 255, "g": 0, "b": 0, "name": "Brand Red copy"},
        ],
        "text_styles": [
            {
                "name": "Title",
                "font_family": "Roboto",
                "font_weight": 700,
                "font_size": 24,
                "color": {"r": 255, "g": 0, "b": 0},
                "text_align": "left",
            },
            {"name": "Body", "font_family": "Roboto", "font_size": 12},
        ],
    }
    path = tmp_path / "project.json"
    path.write_text(json.dumps(project))
    return path


@pytest.mark.unit
def test_no_command_shows_help(capsys):
    """Running without a command prints help and fails."""
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


@pytest.mark.unit
def test_colors(project_file, capsys):
    """colors prints a resource dictionary."""
    assert main(["colors", str(project_file), "--duplicate-suffix", " copy"]) == 0
    out = capsys.readouterr().out
    assert '<Color x:Key="BrandRed">#FF0000</Color>' in out
    assert out.count("<Color ") == 1


@pytest.mark.unit
def test_labels(project_file, capsys):
    """labels prints keyed label styles."""
    assert main(["labels", str(project_file)]) == 0
    out = capsys.readouterr().out
    assert 'x:Key="txtHeadline5_1"' in out
    assert 'x:Key="txtBody2_1"' in out
    assert "FontFamily" in out


@pytest.mark.unit
def test_labels_ignore_font_family(project_file, capsys):
    """The flag drops font families."""
    assert main(["labels", str(project_file), "--ignore-font-family"]) == 0
    assert "FontFamily" not in capsys.readouterr().out


@pytest.mark.unit
def test_summary(project_file, capsys):
    """summary prints the registry tree titled by project name."""
    assert main(["summary", str(project_file)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Demo\n")
    assert "txtHeadline5_1 [Roboto#700, 24, Bold, {StaticResource BrandRed}, left]" in out


@pytest.mark.unit
def test_layer(project_file, tmp_path, capsys):
    """layer prints the snippet for one layer."""
    layer_path = tmp_path / "layer.json"
    layer_path.write_text(
        json.dumps({"name": "Hero_Image", "rect": {"width": 10, "height": 5}, "exportable": True})
    )
    assert main(["layer", str(project_file), str(layer_path)]) == 0
    assert 'Source="heroImage"' in capsys.readouterr().out


@pytest.mark.unit
def test_missing_file(tmp_path):
    """A missing project file fails cleanly."""
    assert main(["colors", str(tmp_path / "missing.json")]) == 1


@pytest.mark.unit
def test_invalid_project(tmp_path):
    """A text style without a size is rejected."""
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"text_styles": [{"name": "Broken"}]}))
    assert main(["labels", str(path)]) == 1
