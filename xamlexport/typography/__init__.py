"""Typography regions and font-size classification."""

from .lib import REGION_ORDER, Region, classify, font_attributes, round_font_size

__all__ = [
    "REGION_ORDER",
    "Region",
    "classify",
    "font_attributes",
    "round_font_size",
]
