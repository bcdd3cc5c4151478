"""Unit tests for typography classification."""

import pytest

from xamlexport.typography import (
    REGION_ORDER,
    Region,
    classify,
    font_attributes,
    round_font_size,
)


class TestClassify:
    """Tests for classify."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "size,expected",
        [
            (50, Region.HEADLINE1),
            (72, Region.HEADLINE1),
            (49.999, Region.HEADLINE2),
            (40, Region.HEADLINE2),
            (32, Region.HEADLINE3),
            (28, Region.HEADLINE4),
            (24, Region.HEADLINE5),
            (20, Region.HEADLINE6),
            (19.999, Region.CAPTION),
            (16, Region.SUBTITLE1),
            (15.999, Region.CAPTION),
            (14, Region.SUBTITLE2),
            (12, Region.BODY2),
            (11, Region.BODY1),
            (11.5, Region.CAPTION),
        ],
    )
    def test_threshold_boundaries(self, size, expected):
        """Boundary sizes land in the documented regions."""
        assert classify(size) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("size", [17, 13, 10.5, 10, 0, -4])
    def test_in_between_sizes_fall_through_to_caption(self, size):
        """Sizes below 20 without a dedicated region are captions."""
        assert classify(size) == Region.CAPTION

    @pytest.mark.unit
    def test_float_exact_sizes_match(self):
        """Float values equal to an exact size still match."""
        assert classify(16.0) == Region.SUBTITLE1
        assert classify(11.0) == Region.BODY1

    @pytest.mark.unit
    def test_body_tiers_are_not_size_ordered(self):
        """11pt is Body1 and 12pt is Body2."""
        assert REGION_ORDER.index(classify(11)) < REGION_ORDER.index(classify(12))

    @pytest.mark.unit
    def test_missing_size_raises(self):
        """A missing size is a caller error."""
        with pytest.raises(ValueError, match="required"):
            classify(None)

    @pytest.mark.unit
    @pytest.mark.parametrize("size", ["16", True, object()])
    def test_non_numeric_size_raises(self, size):
        """Non-numeric sizes are rejected."""
        with pytest.raises(ValueError, match="must be a number"):
            classify(size)


class TestRegionOrder:
    """Tests for region display order."""

    @pytest.mark.unit
    def test_display_order(self):
        """Regions are ordered from Headline1 down to Caption."""
        assert [region.value for region in REGION_ORDER] == [
            "Headline1",
            "Headline2",
            "Headline3",
            "Headline4",
            "Headline5",
            "Headline6",
            "Subtitle1",
            "Subtitle2",
            "Body1",
            "Body2",
            "Caption",
        ]

    @pytest.mark.unit
    def test_region_is_string_valued(self):
        """Regions compare equal to their tag strings."""
        assert Region.BODY1 == "Body1"


class TestRoundFontSize:
    """Tests for round_font_size."""

    @pytest.mark.unit
    def test_rounds_to_two_places(self):
        """Sizes keep two decimal places."""
        assert round_font_size(24.001) == 24.0
        assert round_font_size(24.004) == 24.0
        assert round_font_size(24.006) == 24.01

    @pytest.mark.unit
    def test_half_rounds_up(self):
        """Exact halves round away from zero on the decimal value."""
        assert round_font_size(1.005) == 1.01
        assert round_font_size(13.125) == 13.13

    @pytest.mark.unit
    def test_integers_unchanged(self):
        """Whole sizes pass through."""
        assert round_font_size(16) == 16.0

    @pytest.mark.unit
    @pytest.mark.parametrize("size", [1e26, 1e30, 1.7976931348623157e308])
    def test_huge_sizes_round_without_error(self, size):
        """Sizes beyond the default decimal precision are still rounded."""
        assert round_font_size(size) == size

    @pytest.mark.unit
    def test_tiny_sizes_round_to_zero(self):
        """Sizes below the last kept place collapse to zero."""
        assert round_font_size(1e-30) == 0.0


class TestFontAttributes:
    """Tests for font_attributes."""

    @pytest.mark.unit
    @pytest.mark.parametrize("weight", [700, 800, 900, 950])
    def test_heavy_weights_are_bold(self, weight):
        """Heavy weights are bold."""
        assert font_attributes(weight) == "Bold"

    @pytest.mark.unit
    @pytest.mark.parametrize("weight", [100, 400, 600, 750])
    def test_other_weights_are_plain(self, weight):
        """Everything else is plain."""
        assert font_attributes(weight) == "None"
