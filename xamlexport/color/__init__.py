"""Color hex conversion and shared-resource resolution."""

from .lib import ColorResolver, actual_key, static_resource, xaml_color_hex

__all__ = ["ColorResolver", "actual_key", "static_resource", "xaml_color_hex"]
