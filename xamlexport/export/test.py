"""Unit tests for the export surface."""

import pytest

from xamlexport.config import ExportOptions
from xamlexport.design import (
    BorderStyle,
    Color,
    Fill,
    Layer,
    LayerType,
    Project,
    Rect,
    Styleguide,
    TextRun,
    TextStyle,
)
from xamlexport.export import (
    ExportContext,
    ExportSession,
    colors,
    export_colors,
    export_text_styles,
    layer,
    text_styles,
)
from xamlexport.typography import REGION_ORDER

RED = Color(r=255, g=0, b=0, name="Brand Red")
INK = Color(r=17, g=17, b=17, name="Ink")


def text_layer(style: TextStyle, content: str = "Hello") -> Layer:
    return Layer(
        type=LayerType.TEXT,
        name="Greeting",
        rect=Rect(width=120, height=24),
        content=content,
        text_styles=[TextRun(text_style=style)],
    )


class TestColors:
    """Tests for color resources."""

    @pytest.mark.unit
    def test_no_project(self, options):
        """Without a project there are no color resources."""
        assert colors(ExportContext(options=options)) is None

    @pytest.mark.unit
    def test_sorted_by_name(self, project, options):
        """Colors are sorted by name by default."""
        result = colors(ExportContext(project=project, options=options))
        assert result.language == "xml"
        assert result.code.splitlines() == [
            '<Color x:Key="BrandRed">#FF0000</Color>',
            '<Color x:Key="Ink">#111111</Color>',
        ]

    @pytest.mark.unit
    def test_unsorted_keeps_project_order(self, project):
        """Sorting can be switched off."""
        context = ExportContext(project=project, options=ExportOptions(sort_resources=False))
        assert colors(context).code.splitlines()[0] == '<Color x:Key="Ink">#111111</Color>'

    @pytest.mark.unit
    def test_duplicates_filtered(self):
        """Colors ending with the duplicate suffix are skipped."""
        project = Project(
            colors=[Color(r=0, g=0, b=0, name="Black"), Color(r=0, g=0, b=0, name="Black-dup")]
        )
        context = ExportContext(
            project=project, options=ExportOptions(duplicate_suffix="-dup")
        )
        assert colors(context).code == '<Color x:Key="Black">#000000</Color>'


class TestTextStyles:
    """Tests for label style resources."""

    @pytest.mark.unit
    def test_every_region_emitted_in_order(self, project, options):
        """All regions appear in display order with markers."""
        code = text_styles(ExportContext(project=project, options=options)).code
        positions = [code.index(f"<!--#region {region.value}-->") for region in REGION_ORDER]
        assert positions == sorted(positions)
        assert code.count("<!--#endregion-->") == len(REGION_ORDER)
        assert code.startswith("<!--#region Headline1-->")
        assert code.endswith("<!--#endregion-->")

    @pytest.mark.unit
    def test_keys_follow_name_order(self, project, options):
        """Styles are keyed in name order and deduplicated."""
        session = ExportSession(ExportContext(project=project, options=options))
        registry = session.build_text_style_registry()
        # "Another Title" (24.004) and "Title" (24) are the same style.
        assert registry.keys() == ["txtHeadline5_1", "txtHeadline5_2", "txtBody2_1"]
        styles = registry.groups()
        headline = [s.font_family for s in styles[REGION_ORDER[4]]]
        assert headline == ["Roboto#400", "Roboto#700"]

    @pytest.mark.unit
    def test_rendered_styles(self, project, options):
        """Styles render with resource colors and alignment."""
        code = text_styles(ExportContext(project=project, options=options)).code
        assert '<Style x:Key="txtHeadline5_1" TargetType="Label">' in code
        assert '<Setter Property="TextColor" Value="{StaticResource BrandRed}" />' in code
        assert '<Setter Property="HorizontalTextAlignment" Value="Left" />' in code
        assert code.index("txtHeadline5_1") < code.index("txtHeadline5_2")
        assert code.count("<Style ") == 3

    @pytest.mark.unit
    def test_ignore_font_family(self, project):
        """Ignoring family merges weights and omits FontFamily."""
        context = ExportContext(
            project=project, options=ExportOptions(ignore_font_family=True)
        )
        code = text_styles(context).code
        assert "FontFamily" not in code
        assert code.count("<Style ") == 2

    @pytest.mark.unit
    def test_alignment_mode(self, project):
        """Non-style alignment mode omits alignment setters."""
        context = ExportContext(
            project=project, options=ExportOptions(text_alignment_mode="layer")
        )
        assert "HorizontalTextAlignment" not in text_styles(context).code

    @pytest.mark.unit
    def test_styleguide_fallback(self, options):
        """Without a project, the styleguide's styles are used."""
        styleguide = Styleguide(text_styles=[TextStyle(name="Caption", font_size=10)])
        code = text_styles(ExportContext(styleguide=styleguide, options=options)).code
        assert '<Style x:Key="txtCaption_1" TargetType="Label">' in code
        assert '<Setter Property="TextColor"' not in code

    @pytest.mark.unit
    def test_repeated_runs_are_identical(self, project, options):
        """Each run starts from an empty registry."""
        session = ExportSession(ExportContext(project=project, options=options))
        assert session.text_styles().code == session.text_styles().code


class TestExportFiles:
    """Tests for exported resource dictionaries."""

    @pytest.mark.unit
    def test_export_colors(self, project, options):
        """Colors.xaml wraps indented resources."""
        result = export_colors(ExportContext(project=project, options=options))
        assert result.filename == "Colors.xaml"
        assert "<ResourceDictionary" in result.code
        assert '    <Color x:Key="BrandRed">#FF0000</Color>' in result.code

    @pytest.mark.unit
    def test_export_colors_without_project(self, options):
        """An empty dictionary is exported when there is no project."""
        result = export_colors(ExportContext(options=options))
        assert result.code.rstrip().endswith("</ResourceDictionary>")
        assert "<Color " not in result.code

    @pytest.mark.unit
    def test_export_text_styles(self, project, options):
        """Labels.xaml wraps indented regions."""
        result = export_text_styles(ExportContext(project=project, options=options))
        assert result.filename == "Labels.xaml"
        assert "    <!--#region Headline1-->" in result.code
        assert '        <Setter Property="FontSize" Value="24" />' in result.code

    @pytest.mark.unit
    def test_cache_enabled(self, project):
        """Cached sessions return the same result object."""
        session = ExportSession(
            ExportContext(project=project, options=ExportOptions(enable_cache=True))
        )
        assert session.export_colors() is session.export_colors()
        assert session.export_text_styles() is session.export_text_styles()

    @pytest.mark.unit
    def test_cache_disabled(self, project, options):
        """Uncached sessions rebuild every time."""
        session = ExportSession(ExportContext(project=project, options=options))
        first, second = session.export_colors(), session.export_colors()
        assert first is not second
        assert first.code == second.code

    @pytest.mark.unit
    def test_cache_is_per_session(self, project):
        """A new session never sees another session's cache."""
        options = ExportOptions(enable_cache=True)
        first = ExportSession(ExportContext(project=project, options=options))
        first.export_colors()
        project.colors.append(Color(r=0, g=0, b=255, name="Blue"))
        second = ExportSession(ExportContext(project=project, options=options))
        assert "Blue" in second.export_colors().code


class TestLayer:
    """Tests for layer snippets."""

    @pytest.mark.unit
    def test_label_reuses_project_style_key(self, project, options):
        """A label matching a project style gets its Labels.xaml key."""
        session = ExportSession(ExportContext(project=project, options=options))
        bold = project.text_styles[0]
        result = session.layer(text_layer(bold))
        assert '<Label Text="Hello" Style="{StaticResource txtHeadline5_2}" />' in result.code
        assert ".greeting {" in result.code

    @pytest.mark.unit
    def test_label_registry_starts_with_labels_file_keys(self, project, options):
        """Layer labels start from the same keys as Labels.xaml."""
        session = ExportSession(ExportContext(project=project, options=options))
        assert session.label_registry.keys() == session.build_text_style_registry().keys()

    @pytest.mark.unit
    def test_label_with_novel_style_gets_next_key(self, project, options):
        """Styles outside the project are keyed after the project's."""
        session = ExportSession(ExportContext(project=project, options=options))
        novel = TextStyle(font_family="Inter", font_size=24, color=RED)
        first = session.layer(text_layer(novel)).code
        again = session.layer(text_layer(novel, "Again")).code
        assert "txtHeadline5_3" in first
        assert "txtHeadline5_3" in again
        assert session.label_registry.keys()[-1] == "txtBody2_1"

    @pytest.mark.unit
    def test_sessions_do_not_share_labels(self, project, options):
        """Each session keys novel labels from scratch."""
        novel = TextStyle(font_family="Inter", font_size=13)
        for _ in range(2):
            session = ExportSession(ExportContext(project=project, options=options))
            assert "txtCaption_1" in session.layer(text_layer(novel)).code

    @pytest.mark.unit
    def test_text_layer_without_style(self, project, options):
        """A text layer with no style is rejected."""
        broken = Layer(type=LayerType.TEXT, name="Empty", rect=Rect(width=1, height=1))
        with pytest.raises(ValueError, match="no text style"):
            layer(ExportContext(project=project, options=options), broken)

    @pytest.mark.unit
    def test_exportable_layer_is_image(self, options):
        """Exportable layers render an image only."""
        icon = Layer(name="Icon_Close", rect=Rect(width=24, height=24), exportable=True)
        code = layer(ExportContext(options=options), icon).code
        assert code == '<Image WidthRequest="24" HeightRequest="24" Source="iconClose" />\n'

    @pytest.mark.unit
    def test_shape_layer(self, project, options):
        """Other layers render a border, a stack layout and a CSS rule."""
        card = Layer(
            name="Card",
            rect=Rect(width=320, height=120),
            fills=[Fill(color=Color(r=255, g=0, b=0))],
            borders=[BorderStyle(fill=Fill(color=INK), thickness=1)],
            border_radius=12,
        )
        code = layer(ExportContext(project=project, options=options), card).code
        assert 'BackgroundColor="{StaticResource BrandRed}"' in code
        assert 'Stroke="{StaticResource Ink}"' in code
        assert '<RoundRectangle CornerRadius="12" />' in code
        assert "<StackLayout " in code
        assert ".card {" in code
        assert "background-color: #FF0000;" in code
        assert code.index("<Border") < code.index("<StackLayout") < code.index(".card {")
