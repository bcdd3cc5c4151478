"""Output formatting for registry review.

Generates human-readable text representations of a style registry so the
keys produced by an export run can be checked at a glance.
"""

from xamlexport.registry import RegisteredStyle, StyleRegistry
from xamlexport.typography import Region


def format_registry_tree(registry: StyleRegistry, title: str = "Labels") -> str:
    """Format a registry as a tree of regions and keys.

    Regions without styles are left out.

    Example output:
        Labels
        ├── Headline5
        │   ├── txtHeadline5_1 [Roboto#400, 24, #FF0000, left]
        │   └── txtHeadline5_2 [Roboto#700, 24, Bold, #FF0000, left]
        └── Body2
            └── txtBody2_1 [12]

    Args:
        registry: Registry to format.
        title: Root line of the tree.

    Returns:
        Formatted tree string.
    """
    lines = [title]
    regions = [(region, styles) for region, styles in registry.groups().items() if styles]

    for i, (region, styles) in enumerate(regions):
        is_last_region = i == len(regions) - 1
        lines.append(("└── " if is_last_region else "├── ") + region.value)
        child_prefix = "    " if is_last_region else "│   "
        for j, style in enumerate(styles):
            connector = "└── " if j == len(styles) - 1 else "├── "
            lines.append(f"{child_prefix}{connector}{_format_style(style)}")

    return "\n".join(lines)


def summarize_registry(registry: StyleRegistry) -> dict[Region, int]:
    """Count distinct styles per non-empty region, in display order."""
    return {
        region: len(styles) for region, styles in registry.groups().items() if styles
    }


def _format_style(style: RegisteredStyle) -> str:
    attrs: list[str] = []
    if style.font_family:
        attrs.append(style.font_family)
    size = style.font_size
    attrs.append(str(int(size)) if size.is_integer() else str(size))
    if style.font_attributes != "None":
        attrs.append(style.font_attributes)
    if style.text_color:
        attrs.append(style.text_color)
    if style.text_align:
        attrs.append(style.text_align)
    return f"{style.key} [{', '.join(attrs)}]"


__all__ = ["format_registry_tree", "summarize_registry"]
