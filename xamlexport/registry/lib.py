"""Label style deduplication and key assignment.

The registry buckets text styles into typography regions, collapses
visually identical styles within a region, and hands out a readable key
such as ``txtHeadline5_2`` for each distinct style. Keys are stable for the
lifetime of one registry: the same style always yields the same key, and
suffixes within a region run 1, 2, 3, ... in first-seen order.

One registry belongs to one export run. Create a new instance per run, or
call `reset()` before reusing one.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from xamlexport.color import ColorResolver
from xamlexport.core import get_logger
from xamlexport.design import TextStyleDescriptor
from xamlexport.typography import (
    REGION_ORDER,
    Region,
    classify,
    font_attributes,
    round_font_size,
)

logger = get_logger("registry")

ColorResolverFn = Callable[[Any], str]


class StyleSignature(NamedTuple):
    """Structural identity of a text style within a region.

    Empty strings stand for missing components, so a style without an
    alignment never matches one aligned "left".
    """

    font_family: str
    font_size: float
    text_color: str
    text_align: str


@dataclass(frozen=True)
class RegisteredStyle:
    """A distinct style with its key and display fields.

    Attributes:
        key: Generated resource key, e.g. "txtBody2_1".
        region: Typography region of the style.
        index: 1-based position within the region.
        font_family: "family#weight", or None when omitted.
        font_size: Size rounded to two decimals.
        font_attributes: "Bold" or "None".
        text_color: Resolved color literal, or None.
        text_align: Alignment as given, or None.
    """

    key: str
    region: Region
    index: int
    font_family: str | None
    font_size: float
    font_attributes: str
    text_color: str | None
    text_align: str | None


@dataclass
class RegistryEntry:
    """Per-region registry state."""

    next_index: int = 0
    map: dict[StyleSignature, str] = field(default_factory=dict)
    styles: list[RegisteredStyle] = field(default_factory=list)


class StyleRegistry:
    """Assigns stable keys to deduplicated text styles.

    Example:
        >>> registry = StyleRegistry(color_resolver=ColorResolver(project))
        >>> registry.key_for(title.to_descriptor())
        'txtHeadline5_1'
        >>> registry.key_for(title.to_descriptor())
        'txtHeadline5_1'
    """

    def __init__(
        self,
        color_resolver: ColorResolverFn | None = None,
        ignore_font_family: bool = False,
    ):
        """Initialize an empty registry.

        Args:
            color_resolver: Maps a descriptor color to its literal
                (shared-resource reference or hex). Defaults to plain
                hex literals.
            ignore_font_family: Leave family and weight out of signatures
                and display fields.
        """
        self._resolve_color = color_resolver or ColorResolver()
        self._ignore_font_family = ignore_font_family
        self._entries: dict[Region, RegistryEntry] = {}

    @property
    def ignore_font_family(self) -> bool:
        """Whether font family takes part in signatures."""
        return self._ignore_font_family

    def signature_for(self, descriptor: TextStyleDescriptor) -> StyleSignature:
        """Compute the structural signature of a descriptor."""
        return StyleSignature(
            font_family=self._font_family(descriptor) or "",
            font_size=round_font_size(descriptor.font_size),
            text_color=self._text_color(descriptor) or "",
            text_align=descriptor.text_align or "",
        )

    def key_for(self, descriptor: TextStyleDescriptor) -> str:
        """Return the key for a style, minting one on first sight.

        Args:
            descriptor: Style to key.

        Returns:
            str: Key of the form ``txt{Region}_{N}``.

        Raises:
            ValueError: If the descriptor has no usable font size.
        """
        region = classify(descriptor.font_size)
        signature = self.signature_for(descriptor)
        entry = self._entries.setdefault(region, RegistryEntry())

        existing = entry.map.get(signature)
        if existing is not None:
            return existing

        entry.next_index += 1
        key = f"txt{region.value}_{entry.next_index}"
        entry.map[signature] = key
        entry.styles.append(
            RegisteredStyle(
                key=key,
                region=region,
                index=entry.next_index,
                font_family=self._font_family(descriptor),
                font_size=signature.font_size,
                font_attributes=font_attributes(descriptor.font_weight),
                text_color=self._text_color(descriptor),
                text_align=descriptor.text_align,
            )
        )
        logger.debug(f"Registered {key} for {signature}")
        return key

    def reset(self) -> None:
        """Forget every region, index and signature."""
        self._entries.clear()

    def entries(self, region: Region) -> list[RegisteredStyle]:
        """Styles of one region in ascending suffix order."""
        entry = self._entries.get(Region(region))
        if entry is None:
            return []
        return list(entry.styles)

    def groups(self) -> dict[Region, list[RegisteredStyle]]:
        """All regions in display order, each with its styles.

        Regions without styles map to an empty list.
        """
        return {region: self.entries(region) for region in REGION_ORDER}

    def keys(self) -> list[str]:
        """Every issued key, grouped by region in display order."""
        return [style.key for styles in self.groups().values() for style in styles]

    def __len__(self) -> int:
        return sum(len(entry.styles) for entry in self._entries.values())

    def _font_family(self, descriptor: TextStyleDescriptor) -> str | None:
        if self._ignore_font_family or not descriptor.font_family:
            return None
        return f"{descriptor.font_family}#{descriptor.font_weight}"

    def _text_color(self, descriptor: TextStyleDescriptor) -> str | None:
        if descriptor.color is None:
            return None
        return self._resolve_color(descriptor.color) or None


__all__ = [
    "RegisteredStyle",
    "RegistryEntry",
    "StyleRegistry",
    "StyleSignature",
]
