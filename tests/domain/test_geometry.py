"""Tests for thumbnail geometry."""

import math

import pytest

from contentmenu.domain.errors import InvalidGeometryError
from contentmenu.domain.geometry import format_ratio, thumbnail_ratio


class TestThumbnailRatio:
    def test_widescreen(self) -> None:
        assert thumbnail_ratio(1600, 900) == 56.25

    def test_four_by_three(self) -> None:
        assert thumbnail_ratio(800, 600) == 75.0

    def test_zero_height(self) -> None:
        assert thumbnail_ratio(640, 0) == 0.0

    @pytest.mark.parametrize(("width", "height"), [(0, 100), (-10, 100), (100, -1)])
    def test_invalid_dimensions(self, width: int, height: int) -> None:
        with pytest.raises(InvalidGeometryError) as excinfo:
            thumbnail_ratio(width, height)
        assert excinfo.value.width == width
        assert excinfo.value.height == height

    @pytest.mark.parametrize("bad", [math.nan, math.inf])
    def test_non_finite(self, bad: float) -> None:
        with pytest.raises(InvalidGeometryError):
            thumbnail_ratio(bad, 100)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            thumbnail_ratio(0, 0)


class TestFormatRatio:
    @pytest.mark.parametrize(
        ("ratio", "expected"),
        [
            (56.25, "56.25"),
            (75.0, "75"),
            (0.0, "0"),
            (200 / 3, "66.666667"),
            (1e-7, "0"),
        ],
    )
    def test_plain_decimal(self, ratio: float, expected: str) -> None:
        assert format_ratio(ratio) == expected
