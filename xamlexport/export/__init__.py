"""Host-facing export surface: resource dictionaries and layer snippets.

Example usage:
    >>> from xamlexport.export import ExportContext, ExportSession
    >>> session = ExportSession(ExportContext(project=project))
    >>> print(session.export_colors().code)
"""

from .lib import (
    COLORS_FILENAME,
    LABELS_FILENAME,
    ExportContext,
    ExportSession,
    GeneratedCode,
    colors,
    export_colors,
    export_text_styles,
    layer,
    text_styles,
)

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
