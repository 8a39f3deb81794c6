"""Tests for length unit conversion."""

import pytest

from python_docx_tree.units import (
    convert_to_pixels,
    extract_shape_dimensions,
    half_points_to_points,
    infer_unit,
)


class TestConvertToPixels:
    """Tests for convert_to_pixels."""

    def test_emu(self):
        """Test one inch of EMU is 96 pixels."""
        assert convert_to_pixels(914400, "emu") == pytest.approx(96)

    def test_dxa(self):
        """Test DXA (twentieths of a point) conversion."""
        assert convert_to_pixels(1440, "dxa") == pytest.approx(96)
        assert convert_to_pixels(240, "dxa") == pytest.approx(16)

    def test_points(self):
        """Test 72 points is one inch."""
        assert convert_to_pixels(72, "pt") == pytest.approx(96)

    def test_centimeters_and_inches(self):
        """Test metric and imperial units."""
        assert convert_to_pixels(2.54, "cm") == pytest.approx(96)
        assert convert_to_pixels(1, "in") == pytest.approx(96)

    def test_unit_is_case_insensitive(self):
        """Test unit names in any case."""
        assert convert_to_pixels(72, "PT") == pytest.approx(96)

    def test_unknown_unit_is_unchanged(self):
        """Test pixels and unknown units pass through."""
        assert convert_to_pixels(12, "px") == 12
        assert convert_to_pixels(12, "furlong") == 12
        assert convert_to_pixels("12", None) == 12

    def test_string_values(self):
        """Test numeric strings are accepted."""
        assert convert_to_pixels("914400", "emu") == pytest.approx(96)


class TestInferUnit:
    """Tests for infer_unit."""

    @pytest.mark.parametrize(
        ("value", "unit"),
        [(914400, "emu"), (10001, "emu"), (10000, "dxa"), (1440, "dxa"), (1000, "pt"), (72, "pt")],
    )
    def test_thresholds(self, value, unit):
        """Test the EMU / DXA / point thresholds."""
        assert infer_unit(value) == unit


class TestExtractShapeDimensions:
    """Tests for reading VML shape styles."""

    def test_points(self):
        """Test width and height with explicit units."""
        width, height = extract_shape_dimensions("position:absolute;width:72pt;height:36pt")
        assert width == pytest.approx(96)
        assert height == pytest.approx(48)

    def test_bare_numbers_use_inferred_units(self):
        """Test unitless values go through unit inference."""
        width, height = extract_shape_dimensions("width:914400;height:1440")
        assert width == pytest.approx(96)
        assert height == pytest.approx(96)

    def test_case_and_whitespace(self):
        """Test property names and units in any case, with spaces."""
        width, height = extract_shape_dimensions("WIDTH : 1in; Height: 2.54CM")
        assert width == pytest.approx(96)
        assert height == pytest.approx(96)

    def test_missing_dimensions(self):
        """Test absent properties give None."""
        assert extract_shape_dimensions("") == (None, None)
        assert extract_shape_dimensions(None) == (None, None)
        width, height = extract_shape_dimensions("width:10px")
        assert width == 10
        assert height is None


class TestHalfPoints:
    """Tests for w:sz conversion."""

    def test_digits(self):
        """Test half-points are halved."""
        assert half_points_to_points("24") == 12
        assert half_points_to_points("21") == 10.5

    def test_non_digits(self):
        """Test anything but plain digits gives None."""
        assert half_points_to_points(None) is None
        assert half_points_to_points("12.5") is None
        assert half_points_to_points("-4") is None
        assert half_points_to_points("") is None
