"""Typography classification.

Maps a text style's point size onto one of eleven fixed type-scale regions,
following the Material Design naming used by the generated label styles.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum
from numbers import Real


class Region(str, Enum):
    """Typography regions in display order.

    Iteration order is the order regions appear in generated resource
    dictionaries, not the order styles were discovered.
    """

    HEADLINE1 = "Headline1"
    HEADLINE2 = "Headline2"
    HEADLINE3 = "Headline3"
    HEADLINE4 = "Headline4"
    HEADLINE5 = "Headline5"
    HEADLINE6 = "Headline6"
    SUBTITLE1 = "Subtitle1"
    SUBTITLE2 = "Subtitle2"
    BODY1 = "Body1"
    BODY2 = "Body2"
    CAPTION = "Caption"


REGION_ORDER: tuple[Region, ...] = tuple(Region)

# Evaluated top to bottom, first match wins.
_MINIMUM_SIZES: tuple[tuple[float, Region], ...] = (
    (50, Region.HEADLINE1),
    (40, Region.HEADLINE2),
    (32, Region.HEADLINE3),
    (28, Region.HEADLINE4),
    (24, Region.HEADLINE5),
    (20, Region.HEADLINE6),
)

# Body1 sits below Body2 by design-system convention, not by size.
_EXACT_SIZES: dict[float, Region] = {
    16: Region.SUBTITLE1,
    14: Region.SUBTITLE2,
    12: Region.BODY2,
    11: Region.BODY1,
}


def classify(font_size: float) -> Region:
    """Classify a point size into a typography region.

    Sizes from 20 upward use minimum thresholds. Below 20 only the exact
    sizes 16, 14, 12 and 11 have dedicated regions; every other size,
    including 17, 13 or 10.5, is a Caption.

    Args:
        font_size: Point size of the text style.

    Returns:
        Region: The matching region.

    Raises:
        ValueError: If the size is missing or not a number.

    Example:
        >>> classify(24)
        <Region.HEADLINE5: 'Headline5'>
        >>> classify(13)
        <Region.CAPTION: 'Caption'>
    """
    if font_size is None:
        raise ValueError("font_size is required to classify a text style")
    if isinstance(font_size, bool) or not isinstance(font_size, Real):
        raise ValueError(f"font_size must be a number, got {font_size!r}")

    for minimum, region in _MINIMUM_SIZES:
        if font_size >= minimum:
            return region

    return _EXACT_SIZES.get(font_size, Region.CAPTION)


def round_font_size(font_size: float, ndigits: int = 2) -> float:
    """Round a point size half-up on its decimal representation.

    Binary rounding would turn 1.005 into 1.0; rounding the shortest decimal
    repr instead keeps design-tool values such as 13.125 stable.

    Args:
        font_size: Point size to round.
        ndigits: Number of decimal places to keep.

    Returns:
        float: The rounded size.
    """
    value = Decimal(repr(float(font_size)))
    quantum = Decimal(1).scaleb(-ndigits)
    # Quantizing needs every integer digit plus ndigits in the context precision.
    with localcontext() as context:
        context.prec = max(context.prec, value.adjusted() + ndigits + 2)
        return float(value.quantize(quantum, ROUND_HALF_UP))


_BOLD_WEIGHTS = frozenset({700, 800, 900, 950})


def font_attributes(font_weight: int) -> str:
    """Map a numeric font weight to XAML FontAttributes.

    Only the heavy weights 700, 800, 900 and 950 are bold; every other
    weight, including 600, renders as "None".
    """
    return "Bold" if font_weight in _BOLD_WEIGHTS else "None"
