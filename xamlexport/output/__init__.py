"""Human-readable summaries of generated label styles."""

from .lib import format_registry_tree, summarize_registry

__all__ = ["format_registry_tree", "summarize_registry"]
