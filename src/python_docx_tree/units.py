"""
Length unit conversion to CSS pixels at 96 DPI.
"""

from __future__ import annotations

import re

EMU_PER_INCH = 914400
PIXELS_PER_INCH = 96

_DIMENSION_PATTERN = re.compile(
    r"(width|height)\s*:\s*([\d.\-]+)\s*(pt|px|cm|in|dxa|emu)?", re.IGNORECASE
)
_DIGITS = re.compile(r"[0-9]+")


def convert_to_pixels(value: float | str, unit: str | None) -> float:
    """Convert a length to pixels.

    Args:
        value: The raw length, as a number or numeric string
        unit: One of "emu", "dxa", "pt", "cm", "in" or "px" (any case).
            Unknown units and None leave the value unchanged.

    Returns:
        The length in pixels

    Example:
        >>> convert_to_pixels(914400, "emu")
        96.0
        >>> convert_to_pixels(1440, "DXA")
        96.0
    """
    raw = float(value)
    unit = (unit or "px").lower()
    if unit == "emu":
        return raw * PIXELS_PER_INCH / EMU_PER_INCH
    if unit == "dxa":
        return raw / 20 * 96 / 72
    if unit == "pt":
        return raw * 96 / 72
    if unit == "cm":
        return raw * 96 / 2.54
    if unit == "in":
        return raw * PIXELS_PER_INCH
    return raw


def infer_unit(value: float) -> str:
    """Guess the unit of a bare number found in a VML shape style.

    Large values are almost certainly EMU, mid-sized values twentieths of a
    point, and everything else points.
    """
    if value > 10000:
        return "emu"
    if value > 1000:
        return "dxa"
    return "pt"


def extract_shape_dimensions(style: str | None) -> tuple[float | None, float | None]:
    """Read ``width`` and ``height`` from a VML shape's CSS style attribute.

    Args:
        style: The raw style string (e.g. "width:72pt;height:36pt")

    Returns:
        (width, height) in pixels, each None when absent or unparseable
    """
    dimensions: dict[str, float | None] = {"width": None, "height": None}
    if not style:
        return None, None

    for match in _DIMENSION_PATTERN.finditer(style):
        prop, raw, unit = match.groups()
        try:
            number = float(raw)
        except ValueError:
            continue
        dimensions[prop.lower()] = convert_to_pixels(number, unit or infer_unit(number))

    return dimensions["width"], dimensions["height"]


def half_points_to_points(value: str | None) -> float | None:
    """Convert a ``w:sz`` half-point value to points.

    Only plain digit strings are accepted; anything else gives None.
    """
    if value is None or not _DIGITS.fullmatch(value):
        return None
    return int(value) / 2
