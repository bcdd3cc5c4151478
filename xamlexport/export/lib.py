"""Export surface called by the host design application.

The host asks for color and label style resource dictionaries for a whole
project, or for a code snippet describing one selected layer. All state
belonging to one export run (the label style registry and the result cache)
lives on an `ExportSession`; a new run is a new session.

Example:
    >>> session = ExportSession(ExportContext(project=project))
    >>> session.export_text_styles().filename
    'Labels.xaml'
    >>> print(session.layer(title_layer).code)
"""

from dataclasses import dataclass, field

from xamlexport.color import ColorResolver
from xamlexport.config import ExportOptions
from xamlexport.core import get_logger
from xamlexport.design import Color, Layer, LayerType, Project, Styleguide, TextStyle
from xamlexport.elements import (
    css_style,
    xaml_border,
    xaml_color_resource,
    xaml_image,
    xaml_label,
    xaml_label_style,
    xaml_stack_layout,
)
from xamlexport.providers import get_provider
from xamlexport.registry import StyleRegistry
from xamlexport.validation import validate_project

logger = get_logger("export")

COLORS_FILENAME = "Colors.xaml"
LABELS_FILENAME = "Labels.xaml"


@dataclass
class GeneratedCode:
    """Generated markup handed back to the host.

    Attributes:
        code: The generated text.
        language: Highlighting language for the host's code view.
        filename: Target file name for exported documents.
    """

    code: str
    language: str = "xml"
    filename: str | None = None


@dataclass
class ExportContext:
    """What the host provides for an export run.

    Attributes:
        project: Project with shared colors and text styles, if any.
        styleguide: Styleguide used when there is no project.
        options: Resolved export options.
    """

    project: Project | None = None
    styleguide: Styleguide | None = None
    options: ExportOptions = field(default_factory=ExportOptions.from_environment)

    def get_option(self, name: str):
        """Look up an option by its host name."""
        return self.options.get_option(name)

    @property
    def container(self) -> Project | None:
        """The project, or the styleguide when exporting outside a project."""
        return self.project if self.project is not None else self.styleguide


def _is_duplicate(name: str | None, duplicate_suffix: str | None) -> bool:
    return bool(duplicate_suffix and name and name.endswith(duplicate_suffix))


class ExportSession:
    """One export run over a project.

    The session owns the label style registry used for layer snippets. It
    is primed with the container's text styles in name order, so a label
    whose style matches a project text style gets the same key it has in
    Labels.xaml; labels with other styles get the next key in their region.
    """

    def __init__(self, context: ExportContext):
        """Initialize session.

        Args:
            context: Project, styleguide and options for this run.
        """
        self._context = context
        self._options = context.options
        self._resolver = ColorResolver(context.project, self._options.duplicate_suffix)
        self._xaml = get_provider("xaml")
        self._css = get_provider("css")
        self._cache: dict[str, GeneratedCode] = {}

        self._label_registry = self.build_text_style_registry()

        if context.project is not None:
            for issue in validate_project(
                context.project, self._options.duplicate_suffix
            ):
                logger.warning(f"[{issue.issue_type}] {issue.subject}: {issue.message}")

    @property
    def context(self) -> ExportContext:
        """The context this session exports."""
        return self._context

    @property
    def label_registry(self) -> StyleRegistry:
        """Registry keying label styles for layer snippets."""
        return self._label_registry

    # -------------------------------------------------------------------------
    # Resources
    # -------------------------------------------------------------------------

    def colors(self) -> GeneratedCode | None:
        """Render the project's colors as XAML Color resources.

        Returns:
            GeneratedCode, or None when there is no project.
        """
        project = self._context.project
        if project is None:
            return None

        colors: list[Color] = list(project.colors)
        if self._options.sort_resources:
            colors = sorted(colors, key=lambda color: color.name or "")
        suffix = self._options.duplicate_suffix
        colors = [color for color in colors if not _is_duplicate(color.name, suffix)]

        code = self._xaml.render_many(
            xaml_color_resource(color, suffix) for color in colors
        )
        logger.info(f"Rendered {len(colors)} color resources")
        return GeneratedCode(code=code.rstrip("\n"), language=self._xaml.language)

    def build_text_style_registry(self) -> StyleRegistry:
        """Key the container's text styles in a fresh registry.

        Styles are fed in name order with duplicates removed, so keys are
        reproducible however the host ordered its styles.
        """
        registry = self._new_registry()
        for text_style in self._ordered_text_styles():
            registry.key_for(text_style.to_descriptor())
        return registry

    def text_styles(self) -> GeneratedCode:
        """Render label styles grouped into typography regions.

        Every region is emitted in display order between ``#region``
        comment markers, even when empty; within a region styles follow
        their key suffixes.
        """
        registry = self.build_text_style_registry()
        mode = self._options.text_alignment_mode

        sections: list[str] = []
        for region, styles in registry.groups().items():
            section = f"<!--#region {region.value}-->\n"
            if styles:
                rendered = self._xaml.render_many(
                    xaml_label_style(style, mode) for style in styles
                )
                section += rendered.strip() + "\n"
            section += "<!--#endregion-->"
            sections.append(section)

        logger.info(f"Rendered {len(registry)} label styles")
        return GeneratedCode(code="\n\n".join(sections), language=self._xaml.language)

    def export_colors(self) -> GeneratedCode:
        """Export Colors.xaml as a complete resource dictionary."""
        return self._cached(COLORS_FILENAME, self._export_colors)

    def export_text_styles(self) -> GeneratedCode:
        """Export Labels.xaml as a complete resource dictionary."""
        return self._cached(LABELS_FILENAME, self._export_text_styles)

    # -------------------------------------------------------------------------
    # Layers
    # -------------------------------------------------------------------------

    def layer(self, selected_layer: Layer) -> GeneratedCode:
        """Render a snippet for one selected layer.

        Text layers become a Label and a CSS rule, exportable layers an
        Image, and everything else a Border, a StackLayout and a CSS rule.

        Raises:
            ValueError: If a text layer carries no text style.
        """
        if selected_layer.type == LayerType.TEXT:
            code = self._text_layer(selected_layer)
        elif selected_layer.exportable:
            code = self._xaml.render(xaml_image(selected_layer))
        else:
            code = (
                self._xaml.render(xaml_border(selected_layer, self._resolver.literal))
                + self._xaml.render(
                    xaml_stack_layout(selected_layer, self._resolver.literal)
                )
                + self._css.render(css_style(selected_layer))
            )
        return GeneratedCode(code=code, language=self._xaml.language)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _text_layer(self, text_layer: Layer) -> str:
        text_style = text_layer.first_text_style
        if text_style is None:
            raise ValueError(f"Text layer '{text_layer.name}' has no text style")
        key = self._label_registry.key_for(text_style.to_descriptor())
        return self._xaml.render(xaml_label(text_layer, key)) + self._css.render(
            css_style(text_layer)
        )

    def _export_colors(self) -> GeneratedCode:
        colors = self.colors()
        resources = colors.code if colors is not None else ""
        return GeneratedCode(
            code=self._xaml.resource_dictionary(resources),
            language=self._xaml.language,
            filename=COLORS_FILENAME,
        )

    def _export_text_styles(self) -> GeneratedCode:
        return GeneratedCode(
            code=self._xaml.resource_dictionary(self.text_styles().code),
            language=self._xaml.language,
            filename=LABELS_FILENAME,
        )

    def _cached(self, name: str, build) -> GeneratedCode:
        if not self._options.enable_cache:
            return build()
        if name not in self._cache:
            self._cache[name] = build()
        else:
            logger.debug(f"Serving {name} from cache")
        return self._cache[name]

    def _new_registry(self) -> StyleRegistry:
        return StyleRegistry(
            color_resolver=self._resolver,
            ignore_font_family=self._options.ignore_font_family,
        )

    def _ordered_text_styles(self) -> list[TextStyle]:
        container = self._context.container
        if container is None:
            return []
        suffix = self._options.duplicate_suffix
        return [
            text_style
            for text_style in sorted(container.text_styles, key=lambda s: s.name)
            if not _is_duplicate(text_style.name, suffix)
        ]


# =============================================================================
# One-shot helpers
# =============================================================================


def colors(context: ExportContext) -> GeneratedCode | None:
    """Render color resources in a one-off session."""
    return ExportSession(context).colors()


def text_styles(context: ExportContext) -> GeneratedCode:
    """Render label styles in a one-off session."""
    return ExportSession(context).text_styles()


def export_colors(context: ExportContext) -> GeneratedCode:
    """Export Colors.xaml in a one-off session."""
    return ExportSession(context).export_colors()


def export_text_styles(context: ExportContext) -> GeneratedCode:
    """Export Labels.xaml in a one-off session."""
    return ExportSession(context).export_text_styles()


def layer(context: ExportContext, selected_layer: Layer) -> GeneratedCode:
    """Render one layer in a one-off session."""
    return ExportSession(context).layer(selected_layer)


__all__ = [
    "COLORS_FILENAME",
    "LABELS_FILENAME",
    "ExportContext",
    "ExportSession",
    "GeneratedCode",
    "colors",
    "export_colors",
    "export_text_styles",
    "layer",
    "text_styles",
]
